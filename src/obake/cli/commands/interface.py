"""Audio interface command implementations."""

import click

from obake.cli.errors import exit_on_error
from obake.services import ConfigResolver


@click.group(name="interface")
def interface_group():
    """Manage audio interfaces."""
    pass


@interface_group.command(name="list")
@exit_on_error
def list_interfaces():
    """List configured audio interfaces."""
    config = ConfigResolver().resolve()

    names = config.list_audio_interfaces()
    if not names:
        click.echo("No audio interfaces configured.")
        return

    for name in names:
        interface = config.get_audio_interface(name)
        marker = "  [Default]" if name == config.default_interface_name else ""
        click.echo(f"{name}{marker}")
        click.echo(f"    Type: {interface.interface_type}")
        click.echo(f"    Unit: {interface.unit or '-'}")

    if config.get_default_audio_interface() is None:
        click.echo(
            f"\nWarning: default interface '{config.default_interface_name}' is not configured",
            err=True,
        )
