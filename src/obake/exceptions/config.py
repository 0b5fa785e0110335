"""Configuration-related exceptions.

This module defines exceptions for configuration errors:
- ConfigurationError: Base class for configuration errors
- ConfigNotFoundError: No configuration file at any probed location
- ConfigFileInvalidError: Config file has invalid TOML syntax
- ConfigValidationError: Config values fail validation

Setup descriptors go through the same loader, so each error takes a
``label`` naming the kind of file ("configuration file" or "setup file").
"""

from pathlib import Path
from typing import Any, Sequence

from .base import ObakeError

CONFIG_LABEL = "configuration file"
SETUP_LABEL = "setup file"


class ConfigurationError(ObakeError):
    """Configuration is invalid or cannot be loaded."""
    pass


class ConfigNotFoundError(ConfigurationError):
    """No file exists at any of the probed locations."""

    def __init__(self, searched_paths: Sequence[Path | str], label: str = CONFIG_LABEL):
        """
        Initialize not-found error.

        Args:
            searched_paths: Every path that was probed, in probe order
            label: Kind of file that was looked for
        """
        self.searched_paths = [Path(p) for p in searched_paths]
        self.label = label
        joined = ", ".join(str(p) for p in self.searched_paths)

        if len(self.searched_paths) == 1:
            user_msg = f"{label.capitalize()} not found: {joined}"
        else:
            user_msg = f"No {label} found. Searched in: {joined}"

        if label == SETUP_LABEL:
            hint = "Run 'obake setup list' to see available setups"
        else:
            hint = (
                "Create a config.toml in one of the searched locations, "
                "or point OBAKE_CONFIG_FILE at an existing file"
            )

        super().__init__(
            user_message=user_msg,
            recovery_hint=hint,
            context={"path": joined},
        )


class ConfigFileInvalidError(ConfigurationError):
    """A TOML file has invalid syntax or cannot be read."""

    def __init__(self, file_path: str, parse_error: str, label: str = CONFIG_LABEL):
        """
        Initialize file invalid error.

        Args:
            file_path: Path to the invalid file
            parse_error: The parsing error message
            label: Kind of file that was loaded
        """
        user_msg = f"{label.capitalize()} has invalid syntax: {file_path}"
        recovery = "Check for common TOML errors:\n"
        recovery += "  - Missing quotes around strings\n"
        recovery += "  - Duplicate keys or tables\n"
        recovery += "  - Unclosed brackets in arrays or inline tables\n"
        recovery += f"  - Edit: {file_path}"

        if "empty" in parse_error.lower():
            user_msg = f"{label.capitalize()} is empty: {file_path}"
            recovery = f"Add the required tables to {file_path}"

        super().__init__(
            user_message=user_msg,
            technical_message=f"TOML parse error in {file_path}: {parse_error}",
            recovery_hint=recovery,
            context={"path": file_path},
        )
        self.file_path = file_path
        self.parse_error = parse_error
        self.label = label


class ConfigValidationError(ConfigurationError):
    """Values in a configuration or setup file fail validation."""

    def __init__(
        self,
        field: str,
        value: Any,
        error_msg: str,
        file_path: str | None = None,
        label: str = CONFIG_LABEL,
    ):
        """
        Initialize validation error.

        Args:
            field: The field that failed validation
            value: The invalid value
            error_msg: Why the value is invalid
            file_path: Path to the file (optional)
            label: Kind of file that was loaded
        """
        kind = "setup" if label == SETUP_LABEL else "configuration"
        user_msg = f"Invalid {kind} value for '{field}': {error_msg}"
        if file_path:
            user_msg += f" (in {file_path})"

        recovery = f"Update the '{field}' value in your {kind}"
        if file_path:
            recovery += f"\n{label.capitalize()}: {file_path}"

        if field.startswith("audio.interfaces"):
            recovery += '\nInterfaces look like: "mixpre" = { type = "jack", unit = "jack@mixpre.service" }'
        elif field.startswith("data"):
            recovery += "\nThe [data] table needs images-dir, setups-dir and data-dir"
        elif field.startswith("setup"):
            recovery += '\nThe [setup] table needs interface = "..." and shapes = [...]'

        super().__init__(
            user_message=user_msg,
            technical_message=f"Validation failed for {field}={value!r} in {file_path}: {error_msg}",
            recovery_hint=recovery,
            context={"path": file_path} if file_path else None,
        )
        self.field = field
        self.value = value
        self.file_path = file_path
        self.label = label
