"""Console progress reporting for setup runs."""

from typing import Any

import click

from obake.orchestration import SetupRun, StepOutcome, StepStatus
from obake.protocols import SetupEvent

_MARKS = {
    StepStatus.SUCCEEDED: "[OK]",
    StepStatus.SKIPPED: "[SKIP]",
    StepStatus.FAILED: "[FAIL]",
}


class ConsoleReporter:
    """SetupObserver that echoes each step outcome to the terminal."""

    def on_setup_event(self, event: SetupEvent, **kwargs: Any) -> None:
        run: SetupRun | None = kwargs.get("run")

        if event in (SetupEvent.SETUP_STARTING, SetupEvent.SETUP_STOPPING):
            verb = "Starting" if event is SetupEvent.SETUP_STARTING else "Stopping"
            where = f" {run.setup_path}" if run and run.setup_path else ""
            click.echo(f"{verb} setup{where}")

        elif event in (SetupEvent.STEP_SUCCEEDED, SetupEvent.STEP_SKIPPED, SetupEvent.STEP_FAILED):
            outcome: StepOutcome = kwargs["outcome"]
            line = f"  {_MARKS[outcome.status]:<6} {outcome.step.kind.value} {outcome.step.target}"
            if outcome.detail:
                line += f": {outcome.detail}"
            click.echo(line, err=outcome.status is StepStatus.FAILED)

        elif event is SetupEvent.SETUP_COMPLETED and run is not None:
            click.echo(f"Setup {run.summary()}")

        elif event is SetupEvent.SETUP_ABORTED and run is not None:
            click.echo(f"Setup {run.summary()}", err=True)
