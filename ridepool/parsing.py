"""Parsing of the comma-delimited text records typed at the console."""

from typing import List, Tuple

from ridepool.config import FIELD_DELIMITER
from ridepool.exceptions import InvalidFieldCount, InvalidFieldFormat, InvalidNumber


def _fields(text: str) -> List[str]:
    if not text.strip():
        return []
    return [field.strip() for field in text.rstrip("\r\n").split(FIELD_DELIMITER)]


def split_fields(text: str, *counts: int, record: str = "record") -> List[str]:
    """
    Split a record on the field delimiter.

    Args:
        text: Raw record text
        counts: Accepted numbers of fields
        record: Name of the record, used in error messages

    Raises:
        InvalidFieldCount: If the number of fields is not one of counts
    """
    fields = _fields(text)
    if len(fields) not in counts:
        expected = " or ".join(str(c) for c in counts)
        raise InvalidFieldCount(f"Invalid {record} details: expected {expected} fields, got {len(fields)}")
    return fields


def parse_int(text: str, field: str = "number") -> int:
    """
    Parse an integer field.

    Raises:
        InvalidNumber: If the text is not an integer
    """
    try:
        return int(text.strip())
    except (TypeError, ValueError):
        raise InvalidNumber(f"Invalid {field}: {text!r} is not a number")


def keyed_value(text: str, key: str) -> str:
    """
    Get the value of a 'Key=value' field.

    Raises:
        InvalidFieldFormat: If the field does not start with 'key='
    """
    name, sep, value = text.partition("=")
    if not sep or name.strip() != key:
        raise InvalidFieldFormat(f"Expected '{key}=...', got {text!r}")
    return value.strip()


def parse_user(text: str) -> Tuple[str, str, int]:
    """Parse 'Name, Gender, Age'."""
    name, gender, age = split_fields(text, 3, record="user")
    return name, gender, parse_int(age, "age")


def parse_vehicle(text: str) -> Tuple[str, str, str]:
    """Parse 'Owner, Model, License Plate'."""
    owner, model, plate = split_fields(text, 3, record="vehicle")
    return owner, model, plate


def parse_ride_offer(text: str) -> Tuple[str, str, int, str, str, str]:
    """
    Parse 'Driver, Origin=X, Available Seats=N, Vehicle=M, Plate, Destination=Y'.

    Returns:
        Tuple: (driver, origin, seats, vehicle_model, number_plate, destination)
    """
    driver, origin, seats, model, plate, destination = split_fields(text, 6, record="ride")
    return (
        driver,
        keyed_value(origin, "Origin"),
        parse_int(keyed_value(seats, "Available Seats"), "available seats"),
        keyed_value(model, "Vehicle"),
        plate,
        keyed_value(destination, "Destination"),
    )


def parse_selection(text: str) -> Tuple[str, str, str, int, str]:
    """
    Parse 'Rider, Source, Destination, Seats[, Strategy]'.

    Returns:
        Tuple: (rider, source, destination, seats, strategy text)
    """
    fields = split_fields(text, 4, 5, record="selection")
    rider, source, destination, seats = fields[:4]
    strategy = fields[4] if len(fields) == 5 else ""
    return rider, source, destination, parse_int(seats, "seats"), strategy


def parse_route_query(text: str) -> Tuple[str, str, int]:
    """Parse 'Source, Destination, Seats'."""
    source, destination, seats = split_fields(text, 3, record="route")
    return source, destination, parse_int(seats, "seats")


def parse_booking(text: str) -> Tuple[str, int, List[int]]:
    """
    Parse 'Rider, Seats, RideId[, RideId...]'.

    Returns:
        Tuple: (rider, seats, ride ids)
    """
    fields = _fields(text)
    if len(fields) < 3:
        raise InvalidFieldCount(
            f"Invalid booking details: expected at least 3 fields, got {len(fields)}")
    rider, seats, *ride_ids = fields
    return rider, parse_int(seats, "seats"), [parse_int(r, "ride ID") for r in ride_ids]
