"""Vehicle entity for the RidePool application."""

from dataclasses import dataclass


@dataclass(frozen=True)
class Vehicle:
    """
    Represents a vehicle attached to an owner.

    Two vehicles with the same owner, model and number plate are equal.

    Attributes:
        owner: Name of the owning user (not necessarily registered)
        model: Vehicle model, e.g. "Swift"
        number_plate: Vehicle license plate
    """
    owner: str
    model: str
    number_plate: str

    def __str__(self) -> str:
        return f"{self.model} ({self.number_plate})"
