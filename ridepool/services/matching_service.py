"""Ride matching service for RidePool application."""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence

from ridepool.config import MatchingConfig
from ridepool.exceptions import (
    NoRideFound,
    PreferredVehicleNotFound,
    InsufficientSeats,
    InvalidRideId,
    InvalidNumber,
)
from ridepool.models import Ride, StatKind
from ridepool.store import RecordStore

logger = logging.getLogger(__name__)

MOST_VACANT = "Most Vacant"
PREFERRED_VEHICLE_PREFIX = "Preferred Vehicle="


class StrategyKind(Enum):
    """Policies for choosing among rides on the same route."""
    FIRST = "first"
    MOST_VACANT = "most_vacant"
    PREFERRED_VEHICLE = "preferred_vehicle"


@dataclass(frozen=True)
class SelectionStrategy:
    """
    A selection policy, parsed from text such as "Most Vacant" or
    "Preferred Vehicle=Polo". Anything unrecognized picks the first ride.
    """
    kind: StrategyKind = StrategyKind.FIRST
    preferred_model: Optional[str] = None

    @classmethod
    def parse(cls, text: Optional[str]) -> "SelectionStrategy":
        text = (text or "").strip()
        if text == MOST_VACANT:
            return cls(StrategyKind.MOST_VACANT)
        if text.startswith(PREFERRED_VEHICLE_PREFIX):
            return cls(StrategyKind.PREFERRED_VEHICLE, text[len(PREFERRED_VEHICLE_PREFIX):])
        return cls()

    def choose(self, candidates: Sequence[Ride]) -> Ride:
        """
        Pick one ride from a non-empty list of candidates in id order.

        Raises:
            PreferredVehicleNotFound: If no candidate uses the preferred model
        """
        if self.kind is StrategyKind.MOST_VACANT:
            # max() keeps the first of equal maxima
            return max(candidates, key=lambda ride: ride.available_seats)

        if self.kind is StrategyKind.PREFERRED_VEHICLE:
            for ride in candidates:
                if ride.vehicle.model == self.preferred_model:
                    return ride
            raise PreferredVehicleNotFound(
                f"No rides found with the preferred vehicle {self.preferred_model}")

        return candidates[0]

    def __str__(self) -> str:
        if self.kind is StrategyKind.MOST_VACANT:
            return MOST_VACANT
        if self.kind is StrategyKind.PREFERRED_VEHICLE:
            return f"{PREFERRED_VEHICLE_PREFIX}{self.preferred_model}"
        return "First Available"


class MatchingService:
    """Service for matching riders to offered rides."""

    def __init__(self, store: RecordStore, config: Optional[MatchingConfig] = None):
        self.store = store
        self.config = config or MatchingConfig()

    def find_matching_rides(self, source: str, destination: str, seats: int) -> List[Ride]:
        """Get active rides on exactly this route with enough seats, in id order."""
        return [ride for ride in self.store.iter_rides()
                if ride.serves(source, destination, seats)]

    def select_ride(self, rider: str, source: str, destination: str, seats: int,
                    strategy: Optional[SelectionStrategy] = None) -> int:
        """
        Select a direct ride for a rider and reserve seats on it.

        Selecting again reserves more seats; the call is not idempotent.

        Args:
            rider: Name of the rider (need not be registered)
            source: Origin of the requested ride
            destination: Destination of the requested ride
            seats: Number of seats wanted
            strategy: Selection policy, first matching ride if omitted

        Returns:
            int: ID of the selected ride

        Raises:
            InvalidNumber: If seats is not positive
            NoRideFound: If no active ride serves the route with enough seats
            PreferredVehicleNotFound: If the preferred vehicle serves none of them
        """
        if seats < 1:
            raise InvalidNumber(f"Seats must be at least 1, got {seats}")
        strategy = strategy or SelectionStrategy()

        with self.store.lock:
            candidates = self.find_matching_rides(source, destination, seats)
            if not candidates:
                logger.warning(f"No ride from {source} to {destination} with {seats} seat(s)")
                raise NoRideFound(f"No rides found from {source} to {destination} for {seats} seat(s)")

            ride = strategy.choose(candidates)
            ride.reserve(seats)
            self.store.update_ride(ride)
            # Riders who never registered get zeroed stats before counting
            self.store.increment_stat(rider, StatKind.TAKEN)

        logger.info(f"Ride selected by {rider} ({strategy}): {ride}")
        return ride.id

    def find_possible_rides(self, source: str, destination: str, seats: int) -> List[List[Ride]]:
        """
        Discover itineraries of chained rides from source to destination.

        Every ride of an itinerary is active and has at least ``seats`` free;
        each ride starts where the previous one ends. A path never returns to
        a location it already passed through, and the search stops at
        ``config.max_hops`` rides per path and ``config.max_itineraries``
        itineraries (0 means no limit). Nothing is reserved.

        Args:
            source: Starting location
            destination: Target location
            seats: Number of seats needed on every ride

        Returns:
            List[List[Ride]]: Itineraries in discovery order

        Raises:
            InvalidNumber: If seats is not positive
        """
        if seats < 1:
            raise InvalidNumber(f"Seats must be at least 1, got {seats}")
        rides = [ride for ride in self.store.iter_rides()
                 if ride.active and ride.available_seats >= seats]
        max_hops = self.config.max_hops
        max_itineraries = self.config.max_itineraries
        itineraries: List[List[Ride]] = []

        def capped() -> bool:
            return bool(max_itineraries) and len(itineraries) >= max_itineraries

        def search(location: str, path: List[Ride], visited: set) -> None:
            for ride in rides:
                if capped():
                    return
                if ride.origin != location:
                    continue
                if ride.destination == destination:
                    itineraries.append(path + [ride])
                elif ride.destination not in visited and (not max_hops or len(path) + 1 < max_hops):
                    search(ride.destination, path + [ride], visited | {ride.destination})

        search(source, [], {source})

        logger.info(f"Found {len(itineraries)} itinerary(ies) from {source} to {destination}")
        return itineraries

    def book_itinerary(self, rider: str, ride_ids: Sequence[int], seats: int) -> List[Ride]:
        """
        Reserve seats on every ride of an itinerary, or on none of them.

        Args:
            rider: Name of the rider
            ride_ids: IDs of the rides in travel order
            seats: Number of seats wanted on each ride

        Returns:
            List[Ride]: The booked rides after the reservation

        Raises:
            InvalidNumber: If seats is not positive
            InvalidRideId: If an id is unknown or repeated
            NoRideFound: If the itinerary is empty, a ride has ended, or hops do not connect
            InsufficientSeats: If a ride has fewer than ``seats`` free
        """
        if seats < 1:
            raise InvalidNumber(f"Seats must be at least 1, got {seats}")
        if not ride_ids:
            raise NoRideFound("Itinerary has no rides")
        if len(set(ride_ids)) != len(ride_ids):
            raise InvalidRideId(f"Itinerary repeats a ride: {list(ride_ids)}")

        with self.store.lock:
            rides = []
            for ride_id in ride_ids:
                ride = self.store.get_ride(ride_id)
                if ride is None:
                    raise InvalidRideId(f"Invalid ride ID: {ride_id}")
                if not ride.active:
                    raise NoRideFound(f"Ride {ride_id} has ended")
                if rides and rides[-1].destination != ride.origin:
                    raise NoRideFound(
                        f"Ride {ride_id} starts at {ride.origin}, not at {rides[-1].destination}")
                if ride.available_seats < seats:
                    raise InsufficientSeats(
                        f"Ride {ride_id} has {ride.available_seats} seat(s), {seats} requested")
                rides.append(ride)

            for ride in rides:
                ride.reserve(seats)
                self.store.update_ride(ride)
            self.store.increment_stat(rider, StatKind.TAKEN)

        logger.info(f"Itinerary {list(ride_ids)} booked by {rider} for {seats} seat(s)")
        return rides
