"""Utility functions for the CLI interface."""

from typing import List

import click
from tabulate import tabulate

from ridepool.exceptions import InvalidNumber
from ridepool.models import Ride
from ridepool.registry import RidePool
from ridepool.services.report_service import RIDE_HEADERS, STATS_HEADERS


def describe_ride(ride: Ride) -> str:
    """One-line description of a ride."""
    status = "active" if ride.active else "ended"
    return (f"ID: {ride.id} -- Driver: {ride.driver} -- {ride.origin} -> {ride.destination} "
            f"-- Available Seats: {ride.available_seats} -- Vehicle: {ride.vehicle} -- {status}")


def format_rides(pool: RidePool) -> str:
    rows = pool.reports.ride_summaries()
    if not rows:
        return "No rides offered yet."
    table = [[row[h] for h in RIDE_HEADERS] for row in rows]
    return tabulate(table, headers=RIDE_HEADERS, tablefmt="grid")


def format_stats(pool: RidePool) -> str:
    rows = pool.reports.ride_stats()
    if not rows:
        return "No ride statistics yet."
    table = [[row[h] for h in STATS_HEADERS] for row in rows]
    return tabulate(table, headers=STATS_HEADERS, tablefmt="grid")


def format_itineraries(itineraries: List[List[Ride]]) -> str:
    """Render itineraries as a table with one row per hop."""
    if not itineraries:
        return "No multi-hop rides found."
    headers = ["Itinerary", "Hop", "Ride ID", "Driver", "Origin", "Destination", "Available Seats", "Vehicle"]
    table = []
    for number, itinerary in enumerate(itineraries, 1):
        for hop, ride in enumerate(itinerary, 1):
            table.append([number, hop, ride.id, ride.driver, ride.origin, ride.destination,
                          ride.available_seats, str(ride.vehicle)])
    return tabulate(table, headers=headers, tablefmt="grid")


def create_pool() -> RidePool:
    """Create a registry configured from the environment, failing the command on bad settings."""
    try:
        return RidePool()
    except InvalidNumber as e:
        raise click.ClickException(str(e))
