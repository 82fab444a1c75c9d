"""Main CLI entry point for RidePool application."""

import click

from ridepool.cli_module.commands.shell_commands import shell_command
from ridepool.cli_module.commands.run_commands import run_command
from ridepool.cli_module.commands.demo_commands import demo_command

CONTEXT_SETTINGS = {"help_option_names": ["-h", "--help"], "show_default": True}


@click.group(context_settings=CONTEXT_SETTINGS)
def cli():
    """Offer, select and book pooled rides from the terminal."""


for command in (shell_command, run_command, demo_command):
    cli.add_command(command)


def main():
    cli()


if __name__ == '__main__':
    main()
