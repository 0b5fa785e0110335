"""Orchestration step types.

A run is planned as a list of steps, then executed strictly in order. Each
step carries its own failure policy, so the fatal/non-fatal split between
the interface and the shapes is data, not control flow:

| Step                 | START             | STOP              |
|----------------------|-------------------|-------------------|
| interface            | FATAL             | LOG_AND_CONTINUE  |
| shape                | LOG_AND_CONTINUE  | LOG_AND_CONTINUE  |
"""

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum
from pathlib import Path

from obake.exceptions import ObakeError


class FailurePolicy(str, Enum):
    """What a failing step does to the rest of the run."""

    FATAL = "fatal"                          # Abort: later steps are not attempted
    LOG_AND_CONTINUE = "log_and_continue"    # Log, record, move on


class StepStatus(str, Enum):
    """Final state of an executed step."""

    SUCCEEDED = "succeeded"
    SKIPPED = "skipped"
    FAILED = "failed"


class StepKind(str, Enum):
    INTERFACE = "interface"
    SHAPE = "shape"


class SetupAction(str, Enum):
    START = "start"
    STOP = "stop"


@dataclass(frozen=True)
class StepResult:
    """What a step action reports when it returns normally."""

    status: StepStatus
    detail: str = ""

    @classmethod
    def done(cls, detail: str = "") -> "StepResult":
        return cls(StepStatus.SUCCEEDED, detail)

    @classmethod
    def skipped(cls, detail: str = "") -> "StepResult":
        return cls(StepStatus.SKIPPED, detail)


@dataclass(frozen=True)
class Step:
    """
    One unit of work in a setup run.

    The action returns a StepResult or raises an ObakeError; the policy
    decides what that error means for the run.
    """

    name: str
    kind: StepKind
    target: str
    policy: FailurePolicy
    action: Callable[[], StepResult] = field(compare=False, repr=False)

    @property
    def is_fatal(self) -> bool:
        return self.policy is FailurePolicy.FATAL


@dataclass(frozen=True)
class StepOutcome:
    """An executed step and how it ended."""

    step: Step
    status: StepStatus
    detail: str = ""
    error: ObakeError | None = None


@dataclass
class SetupRun:
    """Report of one START or STOP execution."""

    action: SetupAction
    setup_path: Path | None = None
    outcomes: list[StepOutcome] = field(default_factory=list)
    aborted: bool = False

    def _with_status(self, status: StepStatus) -> list[StepOutcome]:
        return [o for o in self.outcomes if o.status is status]

    @property
    def succeeded(self) -> list[StepOutcome]:
        return self._with_status(StepStatus.SUCCEEDED)

    @property
    def skipped(self) -> list[StepOutcome]:
        return self._with_status(StepStatus.SKIPPED)

    @property
    def failed(self) -> list[StepOutcome]:
        return self._with_status(StepStatus.FAILED)

    @property
    def ok(self) -> bool:
        return not self.aborted and not self.failed

    def attempted(self, kind: StepKind | None = None) -> list[str]:
        """Targets of executed steps, in execution order."""
        return [o.step.target for o in self.outcomes if kind is None or o.step.kind is kind]

    def summary(self) -> str:
        return (
            f"{self.action.value}: {len(self.succeeded)} succeeded, "
            f"{len(self.skipped)} skipped, {len(self.failed)} failed"
            + (" (aborted)" if self.aborted else "")
        )
