"""Protocol definitions for observers and external capabilities.

- Events: setup orchestration events
- Observers: protocols for components that react to these events
- Services: the unit controller and shape runner capabilities
"""

from .events import SetupEvent
from .observers import SetupObserver
from .services import ShapeRunner, UnitController

__all__ = [
    # Events
    "SetupEvent",
    # Observers
    "SetupObserver",
    # Services
    "ShapeRunner",
    "UnitController",
]
