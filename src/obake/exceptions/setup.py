"""Setup orchestration exceptions.

This module defines exceptions raised while starting or stopping a setup:
- SetupError: Base class for setup errors
- ReferenceNotFoundError: A name does not resolve in the table it indexes
- UnitOperationError: The service manager refused or failed an operation
- UnitNotFoundError: The service manager does not know the unit
"""

from .base import ObakeError


class SetupError(ObakeError):
    """A setup could not be started or stopped cleanly."""
    pass


class ReferenceNotFoundError(SetupError):
    """A name referenced by one entity does not exist where it should."""

    def __init__(self, kind: str, name: str, container: str, hint: str | None = None):
        """
        Initialize reference-not-found error.

        Args:
            kind: What was referenced (e.g. "interface", "shape", "setup")
            name: The referenced name
            container: Where the name was looked up (file or table)
            hint: Optional recovery hint
        """
        super().__init__(
            user_message=f"{kind.capitalize()} '{name}' not found in {container}",
            technical_message=f"Unresolved {kind} reference {name!r} in {container}",
            recovery_hint=hint,
            context={kind: name},
        )
        self.kind = kind
        self.name = name
        self.container = container


class UnitOperationError(SetupError):
    """A unit start or stop failed at the service manager or its transport."""

    def __init__(self, unit: str, operation: str, reason: str, scope: str = "user", **kwargs):
        """
        Initialize unit operation error.

        Args:
            unit: The unit name
            operation: "start" or "stop"
            reason: Why the operation failed
            scope: Service manager the operation went to ("user" or "system")
        """
        kwargs.setdefault("technical_message", f"{operation} {unit} ({scope}) failed: {reason}")
        kwargs.setdefault(
            "recovery_hint",
            f"Check the unit with 'systemctl --{scope} status {unit}' "
            f"and 'journalctl --{scope} -u {unit}'",
        )
        super().__init__(
            user_message=f"Failed to {operation} unit '{unit}': {reason}",
            context={"unit": unit, "scope": scope},
            **kwargs,
        )
        self.unit = unit
        self.operation = operation
        self.reason = reason
        self.scope = scope


class UnitNotFoundError(UnitOperationError):
    """The service manager has no unit with this name."""

    def __init__(
        self, unit: str, operation: str, reason: str = "unit not found", scope: str = "user"
    ):
        super().__init__(
            unit,
            operation,
            reason,
            scope=scope,
            recovery_hint=(
                f"Check that '{unit}' is installed: 'systemctl --{scope} list-unit-files'. "
                "Run 'obake interface list' to see the configured units"
            ),
        )
