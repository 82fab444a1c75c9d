"""Registration service for RidePool application."""

import logging
from typing import List, Optional

from ridepool.models import User, Vehicle
from ridepool.store import RecordStore

logger = logging.getLogger(__name__)


class RegistrationService:
    """Service for registering users and their vehicles."""

    def __init__(self, store: RecordStore):
        self.store = store

    def add_user(self, name: str, gender: str, age: int) -> User:
        """
        Register a user.

        A user registered again under the same name replaces the earlier
        record and has their ride statistics reset to zero.

        Args:
            name: Unique user name
            gender: User's gender
            age: User's age

        Returns:
            User: The registered user
        """
        user = User(name=name, gender=gender, age=age)
        with self.store.lock:
            self.store.upsert_user(user)
            self.store.reset_stats(name)
        logger.info(f"User added: {user}")
        return user

    def add_vehicle(self, owner: str, model: str, number_plate: str) -> Vehicle:
        """
        Attach a vehicle to an owner.

        The owner does not have to be a registered user.

        Args:
            owner: Name of the vehicle owner
            model: Vehicle model
            number_plate: Vehicle license plate

        Returns:
            Vehicle: The added vehicle
        """
        vehicle = Vehicle(owner=owner, model=model, number_plate=number_plate)
        self.store.append_vehicle(vehicle)
        logger.info(f"Vehicle added for {owner}: {vehicle}")
        return vehicle

    def get_user(self, name: str) -> Optional[User]:
        return self.store.get_user(name)

    def get_vehicles(self, owner: str) -> List[Vehicle]:
        return self.store.get_vehicles(owner)
