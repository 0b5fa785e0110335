"""Shared utilities for Pydantic model persistence.

This module provides reusable functions for loading Pydantic models from
TOML files. Both the primary configuration and setup descriptors go through
it so every file gets the same error translation.

Design Philosophy:
    - Stateless utility functions (no internal state)
    - Atomic loads: a fully validated model or an exception, never a partial one
    - Centralized error handling with custom exceptions
    - Works with any Pydantic BaseModel subclass
"""

import logging
import tomllib
from pathlib import Path
from typing import TypeVar

from pydantic import BaseModel, ValidationError

from obake.exceptions import (
    CONFIG_LABEL,
    ConfigFileInvalidError,
    ConfigNotFoundError,
    ConfigurationError,
    wrap_pydantic_error,
)

logger = logging.getLogger(__name__)

# Type variable bound to Pydantic BaseModel
T = TypeVar("T", bound=BaseModel)


class TomlPersistence:
    """
    Utility class providing shared Pydantic/TOML load operations.

    All methods are static and can be used without instantiation.

    Example Usage:
        ```python
        config = TomlPersistence.load_toml(
            path=Path("/etc/obake/config.toml"),
            model_type=Config
        )
        ```
    """

    @staticmethod
    def load_toml(path: Path, model_type: type[T], label: str = CONFIG_LABEL) -> T:
        """
        Load and validate a Pydantic model from a TOML file.

        This method:
        1. Reads the TOML file
        2. Validates it against the Pydantic model schema
        3. Returns a fully validated model instance

        Args:
            path: Path to the TOML file to load
            model_type: The Pydantic model class to validate against
            label: Kind of file, used in error messages

        Returns:
            Validated model instance

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file is empty, unreadable or not valid TOML
            ConfigValidationError: If the content fails Pydantic validation
        """
        path = Path(path)
        if not path.is_file():
            raise ConfigNotFoundError([path], label=label)

        try:
            toml_content = path.read_text(encoding="utf-8")

            if not toml_content.strip():
                raise ConfigFileInvalidError(str(path), "File is empty", label=label)

            data = tomllib.loads(toml_content)
            model = model_type.model_validate(data)

            logger.debug(f"Loaded {model_type.__name__} from {path}")
            return model

        except tomllib.TOMLDecodeError as e:
            logger.error(f"TOML syntax error loading {model_type.__name__} from {path}: {e}")
            raise ConfigFileInvalidError(str(path), str(e), label=label) from e

        except ValidationError as e:
            logger.error(f"Validation error loading {model_type.__name__} from {path}: {e}")
            raise wrap_pydantic_error(e, str(path), label=label) from e

        except ConfigurationError:
            raise

        except (OSError, UnicodeDecodeError) as e:
            logger.error(f"Error reading {model_type.__name__} from {path}: {e}")
            raise ConfigFileInvalidError(str(path), f"Unreadable file: {e}", label=label) from e

    @staticmethod
    def validate_toml(
        path: Path, model_type: type[T], label: str = CONFIG_LABEL
    ) -> tuple[bool, str | None]:
        """
        Validate a TOML file against a Pydantic model.

        Useful for listing files without aborting on the first broken one.

        Args:
            path: Path to the TOML file
            model_type: The Pydantic model class to validate against
            label: Kind of file, used in error messages

        Returns:
            Tuple of (is_valid, error_message)
        """
        try:
            TomlPersistence.load_toml(path, model_type, label)
            return True, None
        except ConfigurationError as e:
            return False, e.user_message
