"""Setup command implementations."""

import logging
from pathlib import Path

import click

from obake.cli.errors import exit_on_error
from obake.cli.reporter import ConsoleReporter
from obake.exceptions import ConfigNotFoundError, ReferenceNotFoundError
from obake.orchestration import SetupOrchestrator
from obake.services import ConfigResolver, SetupCatalog, SystemdUnitController

from .unit import system_option

logger = logging.getLogger(__name__)

DEFAULT_SETUP = "setup.toml"

setup_argument = click.argument('setup', default=DEFAULT_SETUP, required=False)


def _locate_setup(setup: str, resolver: ConfigResolver) -> Path:
    """
    An existing file is used directly; anything else is looked up by name.

    The setup is reported missing before the configuration is: without a
    configuration there is no setups directory to search.
    """
    path = Path(setup).expanduser()
    if path.is_file():
        return path

    try:
        config = resolver.resolve()
    except ConfigNotFoundError as e:
        raise ReferenceNotFoundError(
            "setup",
            setup,
            str(path),
            hint=f"Pass the path to a setup file. The setups directory was not searched: {e}",
        ) from e
    return SetupCatalog(config).locate(setup)


def _build_orchestrator(system: bool, resolver: ConfigResolver) -> SetupOrchestrator:
    orchestrator = SetupOrchestrator(
        SystemdUnitController(scope="system" if system else "user"),
        resolver=resolver,
    )
    orchestrator.register_observer(ConsoleReporter())
    return orchestrator


@click.group(name="setup")
def setup_group():
    """Manage setups."""
    pass


@setup_group.command(name="list")
@exit_on_error
def list_setups():
    """List setups in the setups directory."""
    catalog = SetupCatalog(ConfigResolver().resolve())
    click.echo(f"Setups in {catalog.setups_dir}:\n")
    for path in catalog.list_setups():
        is_valid, error = catalog.validate(path)
        if is_valid:
            click.echo(f"  {path.stem}")
        else:
            click.echo(f"  {path.stem}  [INVALID] {error}")


@setup_group.command(name="start")
@setup_argument
@system_option
@exit_on_error
def start_setup(setup: str, system: bool):
    """
    Start SETUP: its interface unit first, then its shapes in order.

    SETUP is a path to a setup file or the name of one in the setups
    directory (default: ./setup.toml).
    """
    resolver = ConfigResolver()
    setup_path = _locate_setup(setup, resolver)
    _build_orchestrator(system, resolver).start(setup_path)


@setup_group.command(name="stop")
@setup_argument
@system_option
@exit_on_error
def stop_setup(setup: str, system: bool):
    """
    Stop SETUP: its shapes in reverse order, then its interface unit.

    Failures while stopping are reported but do not stop the sequence.
    """
    resolver = ConfigResolver()
    setup_path = _locate_setup(setup, resolver)
    run = _build_orchestrator(system, resolver).stop(setup_path)
    if run.failed:
        logger.warning(f"Setup stopped with {len(run.failed)} failed step(s)")
