"""Capability protocols for the external collaborators of the orchestrator.

The orchestrator only ever talks to these narrow interfaces, so its
sequencing can be exercised with substitutes that record calls and
simulate failures.
"""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from obake.models import ShapeLaunch


@runtime_checkable
class UnitController(Protocol):
    """
    Start and stop units on an external service manager.

    Each call is a single blocking round-trip. Implementations return None on
    success and raise UnitOperationError (or a subclass) on any failure,
    including transport failures.
    """

    def start(self, unit_name: str) -> None:
        """Start a unit."""
        ...

    def stop(self, unit_name: str) -> None:
        """Stop a unit."""
        ...


@runtime_checkable
class ShapeRunner(Protocol):
    """
    Hand a resolved shape to a container runtime.

    Implementations raise an ObakeError on failure; the orchestrator logs it
    and carries on with the next shape.
    """

    def start_shape(self, launch: "ShapeLaunch") -> None:
        """Start the shape's container (if any)."""
        ...

    def stop_shape(self, launch: "ShapeLaunch") -> None:
        """Stop the shape's container (if any)."""
        ...
