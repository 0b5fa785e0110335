"""Main CLI entry point."""

import logging
import logging.handlers
import sys
from pathlib import Path
from typing import Optional

import click

from obake import __version__

from .commands import interface_group, setup_group, shape_group, unit_group

logger = logging.getLogger(__name__)

LOG_LEVELS = {
    "error": logging.ERROR,
    "warn": logging.WARNING,
    "warning": logging.WARNING,
    "info": logging.INFO,
    "debug": logging.DEBUG,
    "trace": logging.DEBUG,
}


def parse_log_level(level: str) -> int:
    """
    Map a level name to a logging level.

    Unknown names fall back to INFO with a warning on stderr.
    """
    try:
        return LOG_LEVELS[level.strip().lower()]
    except KeyError:
        click.echo(f"Warning: Invalid log level '{level}', using 'info'", err=True)
        return logging.INFO


def setup_logging(level: int, log_file: Optional[Path]) -> None:
    """
    Configure logging for the application.

    Logs go to stderr, and additionally to a rotating file when one is given.

    Args:
        level: Logging level for all handlers
        log_file: Custom log file path (optional)
    """
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S'
    )

    root_logger = logging.getLogger()
    root_logger.setLevel(level)

    # Replace handlers from an earlier call (repeated invocations in one process)
    for handler in list(root_logger.handlers):
        if getattr(handler, "_obake", False):
            root_logger.removeHandler(handler)
            handler.close()

    handlers: list[logging.Handler] = [logging.StreamHandler(sys.stderr)]

    if log_file:
        log_file.parent.mkdir(parents=True, exist_ok=True)
        # Rotating file handler (keeps last 5 files, max 10MB each)
        handlers.append(
            logging.handlers.RotatingFileHandler(
                log_file,
                maxBytes=10 * 1024 * 1024,
                backupCount=5
            )
        )

    for handler in handlers:
        handler._obake = True
        handler.setLevel(level)
        handler.setFormatter(formatter)
        root_logger.addHandler(handler)

    logger.debug(
        f"Logging configured: level={logging.getLevelName(level)}, file={log_file or '-'}"
    )


@click.group()
@click.version_option(version=__version__, prog_name="obake")
@click.option(
    '--log-level',
    '-l',
    envvar='OBAKE_LOG',
    default='info',
    show_default=True,
    help='Logging level: error, warn, info, debug or trace',
)
@click.option(
    '--log-file',
    type=click.Path(dir_okay=False, path_type=Path),
    default=None,
    help='Also write logs to this file',
)
def cli(log_level: str, log_file: Optional[Path]):
    """
    Obake launcher - start and stop audio setups.

    A setup is one audio interface plus an ordered list of shapes. Starting
    a setup starts the interface's unit, then each shape in order; stopping
    it walks the same list backwards.

    \b
    Configuration is read from the first of:
      $OBAKE_CONFIG_FILE
      ~/.config/obake/config.toml
      /etc/obake/config.toml

    \b
    Examples:
      # List configured audio interfaces
      obake interface list

      # Start the setup in ./setup.toml
      obake setup start

      # Stop a named setup from the setups directory
      obake setup stop live-set

      # Start a single unit with debug logging
      obake --log-level debug unit start jack@mixpre.service
    """
    setup_logging(parse_log_level(log_level), log_file)
    logger.info(f"Starting obake version {__version__}")


cli.add_command(interface_group)
cli.add_command(setup_group)
cli.add_command(shape_group)
cli.add_command(unit_group)

if __name__ == "__main__":
    cli()
