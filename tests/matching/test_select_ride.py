"""Tests for direct ride selection in RidePool."""

import pytest

from ridepool.config import MatchingConfig
from ridepool.exceptions import NoRideFound, PreferredVehicleNotFound, InvalidNumber
from ridepool.models import RideStats
from ridepool.registry import RidePool
from ridepool.services.matching_service import SelectionStrategy, StrategyKind


def offer(pool, driver, model, plate, origin, destination, seats):
    """Register a vehicle for the driver and offer a ride with it."""
    pool.registration.add_vehicle(driver, model, plate)
    return pool.rides.offer_ride(driver, origin, seats, model, plate, destination)


@pytest.fixture
def pool():
    pool = RidePool(config=MatchingConfig())
    for name, gender, age in [("Rohan", "M", 36), ("Shashank", "M", 29), ("Shipra", "F", 27),
                              ("Nandini", "F", 29), ("Gaurav", "M", 29)]:
        pool.registration.add_user(name, gender, age)
    return pool


class TestSelectionStrategyParsing:
    """Test class for parsing selection strategies."""

    def test_most_vacant(self):
        assert SelectionStrategy.parse("Most Vacant").kind is StrategyKind.MOST_VACANT

    def test_preferred_vehicle(self):
        strategy = SelectionStrategy.parse("Preferred Vehicle=Activa")

        assert strategy.kind is StrategyKind.PREFERRED_VEHICLE
        assert strategy.preferred_model == "Activa"

    @pytest.mark.parametrize("text", [None, "", "most vacant", "Cheapest", "Preferred=Polo"])
    def test_unrecognized_is_first(self, text):
        assert SelectionStrategy.parse(text) == SelectionStrategy()


class TestSelectRide:
    """Test class for selecting direct rides."""

    def test_default_picks_first(self, pool):
        """Test that the default strategy picks the earliest matching ride."""
        offer(pool, "Rohan", "Swift", "KA-01-12345", "Hyderabad", "Bangalore", 1)
        offer(pool, "Shashank", "Baleno", "TS-05-62395", "Hyderabad", "Bangalore", 2)

        ride_id = pool.matching.select_ride("Nandini", "Hyderabad", "Bangalore", 1)

        assert ride_id == 0

    def test_filters_route_seats_and_active(self, pool):
        """Test that only active rides on the exact route with enough seats match."""
        offer(pool, "Rohan", "Swift", "KA-01-12345", "Hyderabad", "Bangalore", 1)
        offer(pool, "Shipra", "Polo", "KA-05-41491", "Hyderabad", "Mysore", 3)
        offer(pool, "Shashank", "Baleno", "TS-05-62395", "Hyderabad", "Bangalore", 3)
        offer(pool, "Gaurav", "XUV", "KA-05-1234", "hyderabad", "Bangalore", 3)
        pool.rides.end_ride(2)

        with pytest.raises(NoRideFound):
            pool.matching.select_ride("Nandini", "Hyderabad", "Bangalore", 2)

    def test_most_vacant(self, pool):
        """Test that Most Vacant picks the ride with the most free seats."""
        offer(pool, "Shipra", "Activa", "KA-12-12332", "Bangalore", "Mysore", 1)
        offer(pool, "Shipra", "Polo", "KA-05-41491", "Bangalore", "Mysore", 2)

        ride_id = pool.matching.select_ride(
            "Nandini", "Bangalore", "Mysore", 1, SelectionStrategy.parse("Most Vacant"))

        assert ride_id == 1
        assert pool.rides.get_ride(1).available_seats == 1

    def test_most_vacant_tie_keeps_earliest(self, pool):
        """Test that equal seat counts keep the earliest ride."""
        offer(pool, "Rohan", "Swift", "KA-01-12345", "Pune", "Goa", 1)
        offer(pool, "Shipra", "Polo", "KA-05-41491", "Pune", "Goa", 3)
        offer(pool, "Shashank", "Baleno", "TS-05-62395", "Pune", "Goa", 3)

        ride_id = pool.matching.select_ride(
            "Nandini", "Pune", "Goa", 1, SelectionStrategy.parse("Most Vacant"))

        assert ride_id == 1

    def test_preferred_vehicle(self, pool):
        """Test that Preferred Vehicle picks the first ride with that model."""
        offer(pool, "Shipra", "Polo", "KA-05-41491", "Bangalore", "Mysore", 2)
        offer(pool, "Shipra", "Activa", "KA-12-12332", "Bangalore", "Mysore", 1)

        ride_id = pool.matching.select_ride(
            "Gaurav", "Bangalore", "Mysore", 1, SelectionStrategy.parse("Preferred Vehicle=Activa"))

        assert ride_id == 1
        assert pool.rides.get_ride(1).vehicle.model == "Activa"

    def test_preferred_vehicle_not_found(self, pool):
        """Test that a missing preferred model fails even when other rides match."""
        offer(pool, "Rohan", "Swift", "KA-01-12345", "Hyderabad", "Bangalore", 1)
        offer(pool, "Shashank", "Baleno", "TS-05-62395", "Hyderabad", "Bangalore", 2)

        with pytest.raises(PreferredVehicleNotFound):
            pool.matching.select_ride(
                "Shashank", "Hyderabad", "Bangalore", 1, SelectionStrategy.parse("Preferred Vehicle=Polo"))

        assert [r.available_seats for r in pool.store.iter_rides()] == [1, 2]
        assert pool.store.get_or_init_stats("Shashank").taken == 0

    def test_repeat_selection_decrements_again(self, pool):
        """Test that selecting twice reserves seats twice."""
        offer(pool, "Rahul", "XUV", "KA-05-1234", "Pune", "Bangalore", 5)

        pool.matching.select_ride("Nandini", "Pune", "Bangalore", 2)
        pool.matching.select_ride("Nandini", "Pune", "Bangalore", 2)

        assert pool.rides.get_ride(0).available_seats == 1
        assert pool.store.get_or_init_stats("Nandini").taken == 2

    def test_seats_never_negative(self, pool):
        """Test that a request larger than the remaining seats does not match."""
        offer(pool, "Rahul", "XUV", "KA-05-1234", "Pune", "Bangalore", 2)
        pool.matching.select_ride("Nandini", "Pune", "Bangalore", 2)

        with pytest.raises(NoRideFound):
            pool.matching.select_ride("Nandini", "Pune", "Bangalore", 1)

        assert pool.rides.get_ride(0).available_seats == 0

    def test_rejects_non_positive_seats(self, pool):
        offer(pool, "Rahul", "XUV", "KA-05-1234", "Pune", "Bangalore", 2)

        with pytest.raises(InvalidNumber):
            pool.matching.select_ride("Nandini", "Pune", "Bangalore", 0)

    def test_taken_accumulates_for_registered_rider(self, pool):
        """Test that a registered rider keeps counting taken rides."""
        offer(pool, "Rahul", "XUV", "KA-05-1234", "Pune", "Bangalore", 5)
        offer(pool, "Rohan", "Swift", "KA-01-12345", "Rohan Home", "Pune", 1)

        pool.matching.select_ride("Rohan", "Pune", "Bangalore", 1)
        pool.matching.select_ride("Rohan", "Pune", "Bangalore", 1)

        assert pool.store.get_or_init_stats("Rohan") == RideStats(offered=1, taken=2)

    def test_taken_initializes_unregistered_rider(self, pool):
        """Test that a rider who never registered gets stats on first selection."""
        offer(pool, "Rahul", "XUV", "KA-05-1234", "Pune", "Bangalore", 5)
        assert not pool.store.has_stats("Visitor")

        pool.matching.select_ride("Visitor", "Pune", "Bangalore", 1)
        pool.matching.select_ride("Visitor", "Pune", "Bangalore", 1)

        assert pool.store.get_or_init_stats("Visitor") == RideStats(offered=0, taken=2)

    def test_end_to_end_hyderabad_bangalore(self, pool):
        """Test select then re-select on a route after seats were taken."""
        ride = offer(pool, "Rohan", "Swift", "KA-01-12345", "Hyderabad", "Bangalore", 2)

        ride_id = pool.matching.select_ride("Nandini", "Hyderabad", "Bangalore", 1)

        assert ride_id == ride.id
        assert pool.rides.get_ride(ride_id).available_seats == 1
        with pytest.raises(NoRideFound):
            pool.matching.select_ride("Gaurav", "Hyderabad", "Bangalore", 2)
