"""Service manager access through systemctl."""

import logging
import subprocess
from typing import Literal

from obake.exceptions import UnitOperationError, wrap_unit_error

logger = logging.getLogger(__name__)

Scope = Literal["user", "system"]


class SystemdUnitController:
    """
    Start and stop systemd units.

    Talks to the user session manager by default (``systemctl --user``), or
    to the system manager with ``scope="system"``. Jobs are queued with the
    ``replace`` mode so a pending conflicting job is replaced. Every call
    blocks until systemctl returns; there is no retry and no timeout here.

    Create one controller per invocation.
    """

    def __init__(self, scope: Scope = "user", systemctl: str = "systemctl"):
        """
        Initialize the controller.

        Args:
            scope: "user" for the session manager, "system" for the system manager
            systemctl: Name or path of the systemctl binary
        """
        if scope not in ("user", "system"):
            raise ValueError(f"Invalid scope: {scope!r} (expected 'user' or 'system')")
        self.scope = scope
        self._systemctl = systemctl
        logger.debug(f"SystemdUnitController initialized (scope={scope})")

    def start(self, unit_name: str) -> None:
        """
        Start a unit.

        Raises:
            UnitNotFoundError: If the manager doesn't know the unit
            UnitOperationError: If the start job fails or can't be submitted
        """
        self._run("start", unit_name)
        logger.info(f"Started unit: {unit_name}")

    def stop(self, unit_name: str) -> None:
        """
        Stop a unit.

        Raises:
            UnitNotFoundError: If the manager doesn't know the unit
            UnitOperationError: If the stop job fails or can't be submitted
        """
        self._run("stop", unit_name)
        logger.info(f"Stopped unit: {unit_name}")

    def build_command(self, operation: str, unit_name: str) -> list[str]:
        """Build the systemctl command line for an operation."""
        return [
            self._systemctl,
            f"--{self.scope}",
            operation,
            "--job-mode=replace",
            "--",
            unit_name,
        ]

    def _run(self, operation: str, unit_name: str) -> None:
        if not unit_name:
            raise UnitOperationError(unit_name, operation, "empty unit name", scope=self.scope)

        command = self.build_command(operation, unit_name)
        logger.debug(f"Running: {' '.join(command)}")

        try:
            subprocess.run(command, check=True, capture_output=True, text=True)
        except (OSError, ValueError, subprocess.CalledProcessError) as e:
            error = wrap_unit_error(e, unit_name, operation, self.scope)
            logger.debug(f"{operation} {unit_name} failed: {error.technical_message}")
            raise error from e
