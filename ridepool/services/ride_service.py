"""Ride offering service for RidePool application."""

import logging
from typing import Optional

from ridepool.exceptions import VehicleNotFound, VehicleAlreadyActive, InvalidRideId, InvalidNumber
from ridepool.models import Ride, Vehicle, StatKind
from ridepool.store import RecordStore

logger = logging.getLogger(__name__)


class RideService:
    """Service for offering and ending rides."""

    def __init__(self, store: RecordStore):
        self.store = store

    def find_vehicle(self, owner: str, model: str, number_plate: str) -> Optional[Vehicle]:
        """Find the first of the owner's vehicles with this model and plate."""
        for vehicle in self.store.get_vehicles(owner):
            if vehicle.model == model and vehicle.number_plate == number_plate:
                return vehicle
        return None

    def offer_ride(self, driver: str, origin: str, seats: int, vehicle_model: str,
                   number_plate: str, destination: str) -> Ride:
        """
        Offer a new ride.

        Args:
            driver: Name of the driver
            origin: Location the ride starts from
            seats: Number of seats offered
            vehicle_model: Model of one of the driver's vehicles
            number_plate: License plate of that vehicle
            destination: Location the ride ends at

        Returns:
            Ride: The offered ride

        Raises:
            InvalidNumber: If seats is not positive
            VehicleNotFound: If the driver has no such vehicle
            VehicleAlreadyActive: If the vehicle already serves an active ride
        """
        if seats < 1:
            raise InvalidNumber(f"Available seats must be at least 1, got {seats}")

        with self.store.lock:
            vehicle = self.find_vehicle(driver, vehicle_model, number_plate)
            if vehicle is None:
                logger.warning(f"Offer rejected, {driver} has no vehicle {vehicle_model} {number_plate}")
                raise VehicleNotFound(f"Vehicle {vehicle_model} ({number_plate}) not found for {driver}")

            for ride in self.store.iter_rides():
                if ride.active and ride.vehicle == vehicle:
                    logger.warning(f"Offer rejected, {vehicle} already used by ride {ride.id}")
                    raise VehicleAlreadyActive(
                        f"Ride {ride.id} is already active for vehicle {vehicle}")

            ride = Ride(
                id=self.store.ride_count,
                driver=driver,
                origin=origin,
                destination=destination,
                available_seats=seats,
                vehicle=vehicle,
            )
            self.store.insert_ride(ride)
            self.store.increment_stat(driver, StatKind.OFFERED)

        logger.info(f"Ride offered: {ride}")
        return ride

    def get_ride(self, ride_id: int) -> Ride:
        """
        Get a ride by its id.

        Raises:
            InvalidRideId: If no ride has this id
        """
        ride = self.store.get_ride(ride_id)
        if ride is None:
            raise InvalidRideId(f"Invalid ride ID: {ride_id}")
        return ride

    def end_ride(self, ride_id: int) -> Ride:
        """
        End a ride so it is no longer matched.

        Ending a ride that already ended changes nothing.

        Args:
            ride_id: ID of the ride to end

        Returns:
            Ride: The ended ride

        Raises:
            InvalidRideId: If no ride has this id
        """
        with self.store.lock:
            ride = self.get_ride(ride_id)
            ride.end_ride()
            self.store.update_ride(ride)
        logger.info(f"Ride ended: {ride}")
        return ride
