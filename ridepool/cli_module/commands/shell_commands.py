"""Interactive menu shell for the RidePool CLI."""

import click

from ridepool.config import FIELD_DELIMITER
from ridepool.exceptions import RidePoolError, InvalidFieldFormat
from ridepool.main import process_command, QUIT
from ridepool.cli_module.utils import create_pool
from ridepool.sample_data import SAMPLE_COMMANDS

# Menu choice -> (command, prompts for its fields)
MENU = {
    "1": ("add-user", ["Enter user details in Format :: [Name, Gender, Age]"]),
    "2": ("add-vehicle", ["Enter vehicle details in Format :: [Owner, Model, License Plate]"]),
    "3": ("offer-ride", ["Enter ride details ([Driver_Name], Origin=..., Available Seats=..., "
                         "Vehicle=..., [NumberPlate], Destination=...)"]),
    "4": ("select-ride", ["Enter user", "Enter source", "Enter destination",
                          "Enter number of seats",
                          "Enter selection strategy (Most Vacant/Preferred Vehicle=...)"]),
    "5": ("end-ride", ["Enter ride ID to end"]),
    "6": ("print-stats", []),
    "7": ("print-rides", []),
    "8": (QUIT, []),
    "9": ("find-rides", ["Enter source", "Enter destination", "Enter number of seats"]),
    "10": ("book-itinerary", ["Enter itinerary in Format :: [Rider, Seats, Ride ID, Ride ID, ...]"]),
}

MENU_LABELS = [
    "1. Add New User Details",
    "2. Add New Vehicle Details",
    "3. Offer Ride",
    "4. Select Ride",
    "5. End Ride",
    "6. Print Ride Stats",
    "7. Print Existing Rides",
    "8. Quit",
    "9. Find Multi-hop Rides",
    "10. Book Itinerary",
]


def _show_menu() -> None:
    click.echo("==============MENU================")
    for label in MENU_LABELS:
        click.echo(label)
    click.echo("==================================\n")


def _read_fields(prompts) -> str:
    """
    Prompt for each field and join the answers into one record.

    Raises:
        InvalidFieldFormat: If an answer to one of several prompts contains the delimiter
    """
    answers = [click.prompt(text, default="", show_default=False) for text in prompts]
    if len(answers) > 1:
        for text, answer in zip(prompts, answers):
            if FIELD_DELIMITER in answer:
                raise InvalidFieldFormat(f"{text}: answer {answer!r} must not contain {FIELD_DELIMITER!r}")
    return FIELD_DELIMITER.join(answers)


@click.command(name="shell")
@click.option("--seed/--no-seed", default=False, help="Populate sample users, vehicles and rides first")
def shell_command(seed):
    """Run the interactive ride-pooling menu."""
    pool = create_pool()

    if seed:
        click.echo("POPULATING SAMPLE DATA FOR USER, VEHICLE and OFFER")
        for command, argument in SAMPLE_COMMANDS:
            click.echo(process_command(pool, command, argument))

    while True:
        _show_menu()
        try:
            choice = click.prompt("Enter your choice", default="", show_default=False).strip()
            if choice not in MENU:
                click.echo("Invalid choice")
                continue
            command, prompts = MENU[choice]
            argument = _read_fields(prompts)
        except click.Abort:
            # End of input
            click.echo("\nExiting...")
            return
        except RidePoolError as e:
            click.echo(f"Error: {str(e)}", err=True)
            continue

        click.echo(process_command(pool, command, argument))
        if command == QUIT:
            return
