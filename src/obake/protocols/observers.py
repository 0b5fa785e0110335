"""Observer protocol definitions for domain-specific events."""

from typing import Any, Protocol, runtime_checkable

from .events import SetupEvent


@runtime_checkable
class SetupObserver(Protocol):
    """
    Observer that receives setup orchestration events.

    This protocol allows loose coupling between the orchestrator and
    whatever reports progress (the CLI, tests, a future UI).
    """

    def on_setup_event(self, event: SetupEvent, **kwargs: Any) -> None:
        """
        Handle a setup event.

        Args:
            event: The type of setup event
            **kwargs: Event-specific data (``run``, ``steps``, ``step``, ``outcome``, ``error``)
        """
        ...
