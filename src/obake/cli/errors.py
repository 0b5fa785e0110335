"""Error presentation for CLI commands."""

import logging
import sys
from functools import wraps
from typing import Callable, TypeVar

import click

from obake.exceptions import ObakeError, format_error_for_display

logger = logging.getLogger(__name__)

T = TypeVar('T')


def exit_on_error(func: Callable[..., T]) -> Callable[..., T]:
    """
    Decorator for CLI commands: report errors cleanly and exit with status 1.

    ObakeError subclasses are shown as their user message plus recovery hint.
    Anything else is logged with its traceback and shown by type and message.
    Click's own exceptions (usage errors, aborts) pass through untouched.
    """
    @wraps(func)
    def wrapper(*args, **kwargs) -> T:
        try:
            return func(*args, **kwargs)
        except click.ClickException:
            raise
        except click.Abort:
            raise
        except ObakeError as e:
            logger.error(e.technical_message)
            _echo_error(e)
            sys.exit(1)
        except Exception as e:
            logger.exception(f"Unexpected error in {func.__name__}")
            _echo_error(e)
            sys.exit(1)

    return wrapper


def _echo_error(error: Exception) -> None:
    user_message, recovery_hint = format_error_for_display(error)
    click.echo(f"Error: {user_message}", err=True)
    if recovery_hint:
        click.echo(f"\n{recovery_hint}", err=True)
