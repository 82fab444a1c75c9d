"""Ride entity for the RidePool application."""

from dataclasses import dataclass, replace

from ridepool.models.vehicle import Vehicle


@dataclass
class Ride:
    """
    Represents a ride offered by a driver.

    Attributes:
        id: Dense integer id, the number of rides offered before this one
        driver: Name of the driver offering the ride
        origin: Location the ride starts from
        destination: Location the ride ends at
        available_seats: Seats still free on the ride
        vehicle: Copy of the vehicle used for the ride
        active: Whether the ride can still be matched
    """
    id: int
    driver: str
    origin: str
    destination: str
    available_seats: int
    vehicle: Vehicle
    active: bool = True

    def copy(self) -> "Ride":
        """Return a detached copy of the ride."""
        return replace(self)

    def serves(self, source: str, destination: str, seats: int) -> bool:
        """Check if the ride is active on exactly this route with enough seats."""
        return (self.active
                and self.origin == source
                and self.destination == destination
                and self.available_seats >= seats)

    def reserve(self, seats: int) -> None:
        """Take seats from the ride."""
        self.available_seats -= seats

    def end_ride(self) -> None:
        """End the ride."""
        self.active = False
