"""
Centralized error translation utilities.

Each layer translates errors to be more useful at the next level up:

```
┌─────────────────────────────────────────┐
│  USER LAYER (CLI)                       │
│  - Formats error.user_message           │
│  - Shows error.recovery_hint            │
└─────────────────────────────────────────┘
                  ↑
                  │ ObakeError
                  │
┌─────────────────────────────────────────┐
│  APPLICATION LAYER (Services)           │
│  - Catches low-level exceptions         │
│  - Converts to ObakeError               │
└─────────────────────────────────────────┘
                  ↑
                  │ ValidationError, CalledProcessError, OSError
                  │
┌─────────────────────────────────────────┐
│  LOW LEVEL (tomllib, pydantic, systemd) │
└─────────────────────────────────────────┘
```

### Converting Pydantic errors

```python
from obake.exceptions import wrap_pydantic_error

try:
    config = Config.model_validate(data)
except ValidationError as e:
    raise wrap_pydantic_error(e, str(path)) from e
```

### Converting service manager failures

```python
try:
    subprocess.run(command, check=True, capture_output=True, text=True)
except (OSError, subprocess.CalledProcessError) as e:
    raise wrap_unit_error(e, unit, "start") from e
```
"""

import logging
import subprocess
from typing import Optional

from pydantic import ValidationError

from .base import ObakeError
from .config import CONFIG_LABEL, ConfigValidationError
from .setup import UnitNotFoundError, UnitOperationError

logger = logging.getLogger(__name__)

_UNIT_NOT_FOUND_MARKERS = ("not found", "not loaded", "no such unit")


def wrap_pydantic_error(
    error: ValidationError, file_path: str, label: str = CONFIG_LABEL
) -> ObakeError:
    """
    Convert Pydantic validation errors to Obake exceptions.

    Args:
        error: The Pydantic ValidationError
        file_path: Path to the file that failed validation
        label: Kind of file ("configuration file" or "setup file")

    Returns:
        A ConfigValidationError naming the offending field(s)
    """
    errors = error.errors()

    if len(errors) == 1:
        first_error = errors[0]
        field = ".".join(str(loc) for loc in first_error.get('loc', ('unknown',))) or "<root>"
        return ConfigValidationError(
            field=field,
            value=first_error.get('input', None),
            error_msg=first_error.get('msg', 'validation failed'),
            file_path=file_path,
            label=label,
        )

    error_lines = []
    for err in errors:
        field = ".".join(str(loc) for loc in err.get('loc', ('unknown',))) or "<root>"
        msg = err.get('msg', 'validation failed')
        error_lines.append(f"  - {field}: {msg}")

    combined_msg = f"{len(errors)} validation errors:\n" + "\n".join(error_lines)

    return ConfigValidationError(
        field="multiple fields",
        value=None,
        error_msg=combined_msg,
        file_path=file_path,
        label=label,
    )


def wrap_unit_error(
    error: Exception, unit: str, operation: str, scope: str = "user"
) -> UnitOperationError:
    """
    Convert a failed service manager call to a UnitOperationError.

    Args:
        error: OSError or ValueError from spawning the manager client,
            or CalledProcessError from the call itself
        unit: The unit name
        operation: "start" or "stop"
        scope: "user" or "system" service manager

    Returns:
        UnitNotFoundError when the manager does not know the unit,
        UnitOperationError otherwise
    """
    if isinstance(error, subprocess.CalledProcessError):
        stderr = (error.stderr or "").strip()
        if any(marker in stderr.lower() for marker in _UNIT_NOT_FOUND_MARKERS):
            return UnitNotFoundError(unit, operation, stderr, scope=scope)
        reason = stderr or f"exit status {error.returncode}"
        return UnitOperationError(unit, operation, reason, scope=scope)

    if isinstance(error, FileNotFoundError):
        return UnitOperationError(
            unit,
            operation,
            "service manager client not available",
            scope=scope,
            technical_message=f"{operation} {unit}: {error}",
            recovery_hint="Obake needs systemd; make sure 'systemctl' is on PATH",
        )

    if isinstance(error, ValueError):
        return UnitOperationError(unit, operation, f"invalid unit name: {error}", scope=scope)

    return UnitOperationError(unit, operation, str(error), scope=scope)


def format_error_for_display(error: Exception) -> tuple[str, Optional[str]]:
    """
    Format an exception for user display.

    Context the user message doesn't already mention (such as the service
    manager scope of a unit) is listed under the message.

    Args:
        error: The exception to format

    Returns:
        Tuple of (message, recovery_hint or None)
    """
    if isinstance(error, ObakeError):
        message = error.user_message
        for key, value in error.missing_context().items():
            message += f"\n  {key}: {value}"
        return message, error.recovery_hint

    error_type = type(error).__name__
    return f"{error_type}: {error}", None
