"""Domain events for observer pattern.

Events emitted while a setup is started or stopped.
"""

from enum import Enum


class SetupEvent(Enum):
    """Events from the setup orchestrator."""

    SETUP_STARTING = "setup_starting"    # START sequence begins
    SETUP_STOPPING = "setup_stopping"    # STOP sequence begins
    STEP_SUCCEEDED = "step_succeeded"    # A step did its work
    STEP_SKIPPED = "step_skipped"        # A step had nothing to do
    STEP_FAILED = "step_failed"          # A step failed (fatal or not)
    SETUP_COMPLETED = "setup_completed"  # Every step ran
    SETUP_ABORTED = "setup_aborted"      # A fatal step stopped the run
