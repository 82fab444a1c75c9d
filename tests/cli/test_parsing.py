"""Tests for parsing console text records in RidePool."""

import pytest

from ridepool.exceptions import InvalidFieldCount, InvalidFieldFormat, InvalidNumber
from ridepool.parsing import (
    parse_user,
    parse_vehicle,
    parse_ride_offer,
    parse_selection,
    parse_route_query,
    parse_booking,
    parse_int,
)


class TestParsing:
    """Test class for text record parsing."""

    def test_parse_user(self):
        assert parse_user("Rohan, M, 36") == ("Rohan", "M", 36)

    def test_parse_vehicle(self):
        assert parse_vehicle("Rohan, Swift, KA-01-12345") == ("Rohan", "Swift", "KA-01-12345")

    def test_parse_ride_offer(self):
        text = "Rohan, Origin=Hyderabad, Available Seats=1, Vehicle=Swift, KA-01-12345, Destination=Bangalore"

        assert parse_ride_offer(text) == ("Rohan", "Hyderabad", 1, "Swift", "KA-01-12345", "Bangalore")

    def test_parse_selection_with_and_without_strategy(self):
        assert parse_selection("Nandini, Bangalore, Mysore, 1, Most Vacant") == (
            "Nandini", "Bangalore", "Mysore", 1, "Most Vacant")
        assert parse_selection("Nandini, Bangalore, Mysore, 1") == (
            "Nandini", "Bangalore", "Mysore", 1, "")
        assert parse_selection("Nandini, Bangalore, Mysore, 1, ") == (
            "Nandini", "Bangalore", "Mysore", 1, "")

    def test_parse_route_query(self):
        assert parse_route_query("Mumbai, Mysore, 1") == ("Mumbai", "Mysore", 1)

    def test_parse_booking(self):
        assert parse_booking("Shashank, 1, 5, 4, 2") == ("Shashank", 1, [5, 4, 2])

    @pytest.mark.parametrize("parser, text", [
        (parse_user, "Rohan, M"),
        (parse_user, "Rohan,M,36"),
        (parse_user, ""),
        (parse_vehicle, "Rohan, Swift, KA-01-12345, extra"),
        (parse_ride_offer, "Rohan, Origin=Hyderabad"),
        (parse_selection, "Nandini, Bangalore"),
        (parse_booking, "Shashank, 1"),
    ])
    def test_invalid_field_count(self, parser, text):
        with pytest.raises(InvalidFieldCount):
            parser(text)

    @pytest.mark.parametrize("text", [
        "Rohan, Hyderabad, Available Seats=1, Vehicle=Swift, KA-01-12345, Destination=Bangalore",
        "Rohan, Origin=Hyderabad, Seats=1, Vehicle=Swift, KA-01-12345, Destination=Bangalore",
    ])
    def test_invalid_field_format(self, text):
        with pytest.raises(InvalidFieldFormat):
            parse_ride_offer(text)

    @pytest.mark.parametrize("text", ["", "abc", "1.5", "3x"])
    def test_invalid_number(self, text):
        with pytest.raises(InvalidNumber):
            parse_int(text)

    def test_malformed_age_is_an_error(self):
        with pytest.raises(InvalidNumber):
            parse_user("Rohan, M, thirty")
