"""User entity for the RidePool application."""

from dataclasses import dataclass


@dataclass
class User:
    """
    Represents a registered user of the ride-pooling registry.

    Attributes:
        name: User's name, unique across the registry
        gender: User's gender as entered
        age: User's age in years
    """
    name: str
    gender: str
    age: int
