"""Setup lifecycle orchestration."""

from .orchestrator import SetupOrchestrator
from .steps import (
    FailurePolicy,
    SetupAction,
    SetupRun,
    Step,
    StepKind,
    StepOutcome,
    StepResult,
    StepStatus,
)

__all__ = [
    "FailurePolicy",
    "SetupAction",
    "SetupOrchestrator",
    "SetupRun",
    "Step",
    "StepKind",
    "StepOutcome",
    "StepResult",
    "StepStatus",
]
