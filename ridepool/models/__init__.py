"""Entity models for the RidePool application."""
from ridepool.models.user import User
from ridepool.models.vehicle import Vehicle
from ridepool.models.ride import Ride
from ridepool.models.stats import RideStats, StatKind


__all__ = [
    'User',
    'Vehicle',
    'Ride',
    'RideStats',
    'StatKind',
]
