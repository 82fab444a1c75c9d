"""In-memory record store for the RidePool application."""

import threading
from typing import Dict, Iterator, List, Optional

from ridepool.models import User, Vehicle, Ride, RideStats, StatKind


class RecordStore:
    """
    Holds users, vehicles, rides and per-user ride statistics.

    Rides live in a list indexed by their id, so iteration follows offer order.
    Reads of rides return copies; changes are written back with update_ride.
    Services hold ``lock`` around every read-modify-write sequence.
    """

    def __init__(self):
        self.lock = threading.RLock()
        self._users: Dict[str, User] = {}
        self._vehicles: Dict[str, List[Vehicle]] = {}
        self._rides: List[Ride] = []
        self._stats: Dict[str, RideStats] = {}

    # Users

    def upsert_user(self, user: User) -> None:
        """Insert a user, replacing any user with the same name."""
        with self.lock:
            self._users[user.name] = user

    def get_user(self, name: str) -> Optional[User]:
        with self.lock:
            return self._users.get(name)

    def users(self) -> List[User]:
        with self.lock:
            return list(self._users.values())

    # Vehicles

    def append_vehicle(self, vehicle: Vehicle) -> None:
        """Add a vehicle to its owner's list."""
        with self.lock:
            self._vehicles.setdefault(vehicle.owner, []).append(vehicle)

    def get_vehicles(self, owner: str) -> List[Vehicle]:
        """Get the vehicles of an owner, empty if the owner has none."""
        with self.lock:
            return list(self._vehicles.get(owner, []))

    # Rides

    @property
    def ride_count(self) -> int:
        with self.lock:
            return len(self._rides)

    def insert_ride(self, ride: Ride) -> None:
        """Append a ride. Callers assign ride ids from ride_count."""
        with self.lock:
            self._rides.append(ride.copy())

    def get_ride(self, ride_id: int) -> Optional[Ride]:
        """Get a copy of a ride, or None if there is no such ride."""
        with self.lock:
            if 0 <= ride_id < len(self._rides):
                return self._rides[ride_id].copy()
            return None

    def update_ride(self, ride: Ride) -> None:
        """Write back a modified ride. Unknown ids are ignored."""
        with self.lock:
            if 0 <= ride.id < len(self._rides):
                self._rides[ride.id] = ride.copy()

    def iter_rides(self) -> Iterator[Ride]:
        """Iterate over copies of all rides in id order."""
        with self.lock:
            snapshot = [ride.copy() for ride in self._rides]
        return iter(snapshot)

    # Statistics

    def get_or_init_stats(self, name: str) -> RideStats:
        """Get a copy of a user's stats, creating zeroed stats if missing."""
        with self.lock:
            stats = self._stats.setdefault(name, RideStats())
            return RideStats(offered=stats.offered, taken=stats.taken)

    def reset_stats(self, name: str) -> None:
        with self.lock:
            self._stats[name] = RideStats()

    def increment_stat(self, name: str, kind: StatKind) -> None:
        """Increment one counter of a user's stats, creating the stats if missing."""
        with self.lock:
            self._stats.setdefault(name, RideStats()).increment(kind)

    def has_stats(self, name: str) -> bool:
        with self.lock:
            return name in self._stats

    def all_stats(self) -> Dict[str, RideStats]:
        """Get a copy of every user's stats, in first-seen order."""
        with self.lock:
            return {name: RideStats(offered=s.offered, taken=s.taken)
                    for name, s in self._stats.items()}
