"""Reporting service for RidePool application."""

from typing import Any, Dict, List

from ridepool.store import RecordStore

RIDE_HEADERS = ["ID", "Driver", "Origin", "Destination", "Available Seats", "Vehicle", "Active"]
STATS_HEADERS = ["User", "Taken", "Offered"]


class ReportService:
    """Read-only summaries of rides and ride statistics."""

    def __init__(self, store: RecordStore):
        self.store = store

    def ride_summaries(self) -> List[Dict[str, Any]]:
        """
        Summarize every ride in id order.

        Returns:
            List[Dict]: One dict per ride keyed by RIDE_HEADERS
        """
        return [
            {
                "ID": ride.id,
                "Driver": ride.driver,
                "Origin": ride.origin,
                "Destination": ride.destination,
                "Available Seats": ride.available_seats,
                "Vehicle": str(ride.vehicle),
                "Active": ride.active,
            }
            for ride in self.store.iter_rides()
        ]

    def ride_stats(self) -> List[Dict[str, Any]]:
        """
        Summarize rides taken and offered per user, in the order users were first seen.

        Returns:
            List[Dict]: One dict per user keyed by STATS_HEADERS
        """
        return [
            {"User": name, "Taken": stats.taken, "Offered": stats.offered}
            for name, stats in self.store.all_stats().items()
        ]
