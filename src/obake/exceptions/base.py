"""Base exception class for Obake.

Every error raised while resolving configuration or running a setup is an
ObakeError. Besides the message shown to the user, each error carries the
context needed to diagnose it without re-running at a higher log level:
the file path, unit name or reference name involved.
"""

from collections.abc import Mapping
from typing import Optional


class ObakeError(Exception):
    """
    Base exception for all Obake errors.

    Attributes:
        user_message: Human-friendly message for display
        technical_message: Detailed message for logs
        recovery_hint: Optional hint for how to fix the issue
        context: What the error is about, e.g. {"path": ..., "unit": ...}
    """

    def __init__(
        self,
        user_message: str,
        technical_message: Optional[str] = None,
        recovery_hint: Optional[str] = None,
        context: Optional[Mapping[str, object]] = None,
    ):
        """
        Initialize an Obake error.

        Args:
            user_message: Message to show to users
            technical_message: Detailed message for logs (defaults to the
                user message followed by the context)
            recovery_hint: Suggestion for how to fix the issue
            context: Names of the files, units or references involved
        """
        super().__init__(user_message)
        self.user_message = user_message
        self.recovery_hint = recovery_hint
        self.context = {key: str(value) for key, value in (context or {}).items()}
        self.technical_message = technical_message or self._with_context(user_message)

    def __str__(self) -> str:
        """Return user-friendly message."""
        return self.user_message

    def _with_context(self, message: str) -> str:
        if not self.context:
            return message
        details = ", ".join(f"{key}={value}" for key, value in self.context.items())
        return f"{message} [{details}]"

    def missing_context(self) -> dict[str, str]:
        """Context entries the user message doesn't already mention."""
        return {
            key: value for key, value in self.context.items()
            if value not in self.user_message
        }

    def get_full_message(self) -> str:
        """Get complete error message with context and recovery hint."""
        msg = self.user_message
        for key, value in self.missing_context().items():
            msg += f"\n  {key}: {value}"
        if self.recovery_hint:
            msg += f"\n\nSuggestion: {self.recovery_hint}"
        return msg
