"""
Custom exception hierarchy for Obake.

## Exception Hierarchy

```
ObakeError (base)
├── ConfigurationError
│   ├── ConfigNotFoundError
│   ├── ConfigFileInvalidError
│   └── ConfigValidationError
└── SetupError
    ├── ReferenceNotFoundError
    └── UnitOperationError
        └── UnitNotFoundError
```

All custom exceptions inherit from `ObakeError`, which provides:

- `user_message`: Human-friendly message for display to users
- `technical_message`: Detailed message for logging
- `recovery_hint`: Optional suggestion for how to fix the issue
- `context`: The path, unit or reference name the error is about

### Example: Missing interface

```python
from obake.exceptions import ReferenceNotFoundError

raise ReferenceNotFoundError("interface", "mixpre", "/etc/obake/config.toml")

# User sees: "Interface 'mixpre' not found in /etc/obake/config.toml"
```
"""

from .base import ObakeError
from .config import (
    CONFIG_LABEL,
    SETUP_LABEL,
    ConfigFileInvalidError,
    ConfigNotFoundError,
    ConfigurationError,
    ConfigValidationError,
)
from .handlers import format_error_for_display, wrap_pydantic_error, wrap_unit_error
from .setup import ReferenceNotFoundError, SetupError, UnitNotFoundError, UnitOperationError

__all__ = [
    # Config
    "CONFIG_LABEL",
    "SETUP_LABEL",
    "ConfigFileInvalidError",
    "ConfigNotFoundError",
    "ConfigValidationError",
    "ConfigurationError",
    # Base
    "ObakeError",
    # Setup
    "ReferenceNotFoundError",
    "SetupError",
    "UnitNotFoundError",
    "UnitOperationError",
    # Handlers
    "format_error_for_display",
    "wrap_pydantic_error",
    "wrap_unit_error",
]
