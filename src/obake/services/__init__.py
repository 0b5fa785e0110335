"""Service layer for obake.

Each service owns one concern:
- ConfigResolver: Locate and load the primary configuration
- SetupCatalog / ShapeCatalog: Browse the data directories
- SystemdUnitController: Start and stop units
- LoggingShapeRunner: Bookkeeping-only shape runner
"""

from .catalog import SetupCatalog, ShapeCatalog
from .config_resolver import (
    CONFIG_FILE_ENV,
    ConfigResolver,
    ConfigSource,
    EnvironmentConfigSource,
    FileConfigSource,
    default_sources,
)
from .shape_runner import LoggingShapeRunner
from .unit_controller import SystemdUnitController

__all__ = [
    "CONFIG_FILE_ENV",
    "ConfigResolver",
    "ConfigSource",
    "EnvironmentConfigSource",
    "FileConfigSource",
    "LoggingShapeRunner",
    "SetupCatalog",
    "ShapeCatalog",
    "SystemdUnitController",
    "default_sources",
]
