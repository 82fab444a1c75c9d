"""Text command processing for the RidePool application."""

import logging
from typing import Callable, Dict, Iterable, Iterator, Tuple

from ridepool.exceptions import RidePoolError, NoRideFound
from ridepool.parsing import (
    parse_user,
    parse_vehicle,
    parse_ride_offer,
    parse_selection,
    parse_route_query,
    parse_booking,
    parse_int,
)
from ridepool.registry import RidePool
from ridepool.services.matching_service import SelectionStrategy
from ridepool.cli_module.utils import describe_ride, format_rides, format_stats, format_itineraries

logger = logging.getLogger(__name__)

QUIT = "quit"


def _add_user(pool: RidePool, argument: str) -> str:
    user = pool.registration.add_user(*parse_user(argument))
    return f"User added: {user.name} ({user.gender}, {user.age})"


def _add_vehicle(pool: RidePool, argument: str) -> str:
    vehicle = pool.registration.add_vehicle(*parse_vehicle(argument))
    return f"Vehicle added for {vehicle.owner}: {vehicle}"


def _offer_ride(pool: RidePool, argument: str) -> str:
    ride = pool.rides.offer_ride(*parse_ride_offer(argument))
    return f"Ride offered: {describe_ride(ride)}"


def _select_ride(pool: RidePool, argument: str) -> str:
    rider, source, destination, seats, strategy = parse_selection(argument)
    try:
        ride_id = pool.matching.select_ride(
            rider, source, destination, seats, SelectionStrategy.parse(strategy))
    except NoRideFound as e:
        # Show chained rides for the same request; nothing is reserved
        itineraries = pool.matching.find_possible_rides(source, destination, seats)
        return f"Error: {str(e)}\nPossible rides:\n{format_itineraries(itineraries)}"
    ride = pool.rides.get_ride(ride_id)
    return f"Ride selected: {describe_ride(ride)}\nSelected Ride id is: {ride_id}"


def _find_rides(pool: RidePool, argument: str) -> str:
    itineraries = pool.matching.find_possible_rides(*parse_route_query(argument))
    return format_itineraries(itineraries)


def _book_itinerary(pool: RidePool, argument: str) -> str:
    rider, seats, ride_ids = parse_booking(argument)
    rides = pool.matching.book_itinerary(rider, ride_ids, seats)
    lines = [f"Itinerary booked for {rider} ({seats} seat(s)):"]
    lines.extend(f"  {describe_ride(ride)}" for ride in rides)
    return "\n".join(lines)


def _end_ride(pool: RidePool, argument: str) -> str:
    ride = pool.rides.end_ride(parse_int(argument, "ride ID"))
    return f"Ride ended: {describe_ride(ride)}"


def _print_stats(pool: RidePool, argument: str) -> str:
    return format_stats(pool)


def _print_rides(pool: RidePool, argument: str) -> str:
    return format_rides(pool)


def _quit(pool: RidePool, argument: str) -> str:
    return "Exiting..."


COMMANDS: Dict[str, Callable[[RidePool, str], str]] = {
    "add-user": _add_user,
    "add-vehicle": _add_vehicle,
    "offer-ride": _offer_ride,
    "select-ride": _select_ride,
    "find-rides": _find_rides,
    "book-itinerary": _book_itinerary,
    "end-ride": _end_ride,
    "print-stats": _print_stats,
    "print-rides": _print_rides,
    QUIT: _quit,
}


def process_command(pool: RidePool, command: str, argument: str = "") -> str:
    """
    Process one text command against the registry.

    Errors are reported in the returned text and never raised, so a
    session can continue with the next command.

    Args:
        pool: Registry to run the command against
        command: Command name, e.g. "offer-ride"
        argument: Comma-delimited fields of the command

    Returns:
        str: Result of the processed command
    """
    handler = COMMANDS.get(command)
    if handler is None:
        return f"Unknown command: {command}"
    try:
        return handler(pool, argument or "")
    except RidePoolError as e:
        logger.warning(f"{command} failed: {str(e)}")
        return f"Error: {str(e)}"


def split_command_line(line: str) -> Tuple[str, str]:
    """Split 'command arguments' into its command and argument text."""
    command, _, argument = line.strip().partition(" ")
    return command, argument.strip()


def run_script(pool: RidePool, lines: Iterable[str]) -> Iterator[str]:
    """
    Run text command lines until the end or a quit command.

    Blank lines and lines starting with '#' are skipped.

    Yields:
        str: Output of each command
    """
    for line in lines:
        if not line.strip() or line.lstrip().startswith("#"):
            continue
        command, argument = split_command_line(line)
        yield process_command(pool, command, argument)
        if command == QUIT:
            return
