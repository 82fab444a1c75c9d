"""Custom exceptions for the RidePool application."""


class RidePoolError(Exception):
    """Base exception for every recoverable RidePool error."""
    pass


class VehicleNotFound(RidePoolError):
    """Raised when a driver has no vehicle with the given model and plate."""
    pass


class VehicleAlreadyActive(RidePoolError):
    """Raised when the vehicle is already used by an active ride."""
    pass


class NoRideFound(RidePoolError):
    """Raised when no active ride matches the request."""
    pass


class PreferredVehicleNotFound(RidePoolError):
    """Raised when matching rides exist but none uses the preferred vehicle model."""
    pass


class InvalidRideId(RidePoolError):
    """Raised when a ride id does not refer to an offered ride."""
    pass


class InsufficientSeats(RidePoolError):
    """Raised when a ride has fewer available seats than requested."""
    pass


class InvalidFieldCount(RidePoolError):
    """Raised when a text record has the wrong number of fields."""
    pass


class InvalidFieldFormat(RidePoolError):
    """Raised when a keyed field is not of the form 'Key=value'."""
    pass


class InvalidNumber(RidePoolError):
    """Raised when a numeric field is malformed or out of range."""
    pass
