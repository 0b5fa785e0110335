"""Unit command implementations."""

import click

from obake.cli.errors import exit_on_error
from obake.services import SystemdUnitController

system_option = click.option(
    '--system',
    is_flag=True,
    help='Use the system service manager instead of the user session',
)


@click.group(name="unit")
def unit_group():
    """Manage units."""
    pass


@unit_group.command(name="start")
@click.argument('name')
@system_option
@exit_on_error
def start_unit(name: str, system: bool):
    """Start the unit NAME."""
    SystemdUnitController(scope="system" if system else "user").start(name)
    click.echo(f"Started unit: {name}")


@unit_group.command(name="stop")
@click.argument('name')
@system_option
@exit_on_error
def stop_unit(name: str, system: bool):
    """Stop the unit NAME."""
    SystemdUnitController(scope="system" if system else "user").stop(name)
    click.echo(f"Stopped unit: {name}")
