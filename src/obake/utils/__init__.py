"""Generic utility modules for obake.

- persistence: Loading Pydantic models from TOML files
- observer: Generic observer list management
"""

from .observer import ObserverManager
from .persistence import TomlPersistence

__all__ = ["ObserverManager", "TomlPersistence"]
