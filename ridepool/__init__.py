"""RidePool: a minimal ride-pooling registry with a ride matching engine."""

__version__ = "0.1.0"
