"""Demo command replaying sample offers and selections."""

import click

from ridepool.main import process_command
from ridepool.cli_module.utils import create_pool
from ridepool.sample_data import SAMPLE_COMMANDS, SAMPLE_SELECTIONS


@click.command(name="demo")
def demo_command():
    """Populate sample data, replay sample selections and print reports."""
    pool = create_pool()

    click.echo("POPULATING SAMPLE DATA FOR USER, VEHICLE and OFFER")
    for command, argument in SAMPLE_COMMANDS + SAMPLE_SELECTIONS:
        click.echo(process_command(pool, command, argument))

    click.echo("\n==============RIDE STATS================")
    click.echo(process_command(pool, "print-stats"))
    click.echo("\n=========EXISTING RIDES=============")
    click.echo(process_command(pool, "print-rides"))
