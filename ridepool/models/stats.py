"""Ride statistics for the RidePool application."""

from dataclasses import dataclass
from enum import Enum


class StatKind(Enum):
    """Counters kept per user."""
    OFFERED = "offered"
    TAKEN = "taken"


@dataclass
class RideStats:
    """Number of rides a user has offered and taken."""
    offered: int = 0
    taken: int = 0

    def increment(self, kind: StatKind) -> None:
        setattr(self, kind.value, getattr(self, kind.value) + 1)
