"""Configuration for the RidePool application."""

import os
import logging
from dataclasses import dataclass

from dotenv import load_dotenv

from ridepool.exceptions import InvalidNumber

load_dotenv()

LOG_LEVEL = os.getenv("RIDEPOOL_LOG_LEVEL", "WARNING").upper()

# Set up logging
logging.basicConfig(level=getattr(logging, LOG_LEVEL, logging.WARNING))

# Delimiter between positional fields of a text record
FIELD_DELIMITER = ", "

DEFAULT_MAX_HOPS = 4
DEFAULT_MAX_ITINERARIES = 50


@dataclass
class MatchingConfig:
    """
    Limits applied to multi-hop itinerary discovery.

    Attributes:
        max_hops: Maximum number of rides chained into one itinerary
        max_itineraries: Stop searching once this many itineraries are found (0 = no cap)
    """
    max_hops: int = DEFAULT_MAX_HOPS
    max_itineraries: int = DEFAULT_MAX_ITINERARIES

    @classmethod
    def from_env(cls) -> "MatchingConfig":
        """
        Build the config from RIDEPOOL_* environment variables.

        Raises:
            InvalidNumber: If a limit is not a non-negative integer
        """
        return cls(
            max_hops=_env_limit("RIDEPOOL_MAX_HOPS", DEFAULT_MAX_HOPS),
            max_itineraries=_env_limit("RIDEPOOL_MAX_ITINERARIES", DEFAULT_MAX_ITINERARIES),
        )


def _env_limit(name: str, default: int) -> int:
    value = os.getenv(name)
    if value is None or not value.strip():
        return default
    try:
        limit = int(value.strip())
    except ValueError:
        raise InvalidNumber(f"Invalid {name}: {value!r} is not a number")
    if limit < 0:
        raise InvalidNumber(f"Invalid {name}: {limit} must not be negative")
    return limit
