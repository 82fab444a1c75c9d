"""Run command for executing a script of RidePool commands."""

import click

from ridepool.main import process_command, run_script
from ridepool.cli_module.utils import create_pool
from ridepool.sample_data import SAMPLE_COMMANDS


@click.command(name="run", help="Execute a script of RidePool commands")
@click.argument("script", type=click.File("r"), metavar="SCRIPT")
@click.option("--seed", is_flag=True, help="Populate sample users, vehicles and rides first")
def run_command(script, seed):
    """
    Execute RidePool commands, one per line.

    SCRIPT: File with lines like 'add-user Rohan, M, 36' ('-' reads stdin).
    """
    pool = create_pool()

    if seed:
        for command, argument in SAMPLE_COMMANDS:
            click.echo(process_command(pool, command, argument))

    for output in run_script(pool, script):
        click.echo(output)
