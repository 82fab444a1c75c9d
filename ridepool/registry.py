"""Wiring of the record store and services into one registry."""

from typing import Optional

from ridepool.config import MatchingConfig
from ridepool.store import RecordStore
from ridepool.services import RegistrationService, RideService, MatchingService, ReportService


class RidePool:
    """
    One ride-pooling registry: a record store shared by all services.

    Attributes:
        store: The record store owning every entity
        registration: Registers users and vehicles
        rides: Offers and ends rides
        matching: Selects rides and discovers itineraries
        reports: Summarizes rides and statistics
    """

    def __init__(self, config: Optional[MatchingConfig] = None, store: Optional[RecordStore] = None):
        self.store = store or RecordStore()
        self.registration = RegistrationService(self.store)
        self.rides = RideService(self.store)
        self.matching = MatchingService(self.store, config or MatchingConfig.from_env())
        self.reports = ReportService(self.store)
