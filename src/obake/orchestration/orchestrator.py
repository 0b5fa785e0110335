"""
Setup orchestrator: ordered activation and deactivation of a setup.

A setup is one audio interface plus an ordered list of shapes. Shapes depend
on their interface, so START brings the interface up first and gives up if
it can't; STOP runs the same sequence backwards and always gets as far as it
can.

Architecture:
    SetupOrchestrator (this class)
    ├── Loading: SetupDescriptor.load_from_path, ConfigResolver
    ├── Planning: plan_start / plan_stop -> list[Step]
    ├── Execution: steps run one at a time, policy per step
    └── Observers: SetupObserver instances receive SetupEvents
"""

import logging
from pathlib import Path
from typing import Any, Optional

from obake.exceptions import ObakeError, ReferenceNotFoundError, SetupError
from obake.models import Config, SetupDescriptor, ShapeLaunch
from obake.protocols import SetupEvent, SetupObserver, ShapeRunner, UnitController
from obake.services import ConfigResolver, LoggingShapeRunner
from obake.utils import ObserverManager

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

logger = logging.getLogger(__name__)

_STEP_EVENTS = {
    StepStatus.SUCCEEDED: SetupEvent.STEP_SUCCEEDED,
    StepStatus.SKIPPED: SetupEvent.STEP_SKIPPED,
    StepStatus.FAILED: SetupEvent.STEP_FAILED,
}


class SetupOrchestrator:
    """
    Start and stop setups.

    Every run loads the setup descriptor and the configuration afresh, plans
    its steps, then executes them strictly in sequence. Nothing is kept
    between runs.

    START:
        1. interface (FATAL): missing interface or failed unit start aborts,
           no shape is attempted
        2. shapes in declared order (LOG_AND_CONTINUE): a dangling name or a
           runner failure is logged and the next shape is attempted

    STOP:
        1. shapes in reversed declared order (LOG_AND_CONTINUE)
        2. interface (LOG_AND_CONTINUE): a missing interface, missing unit or
           failed unit stop is logged, the run still completes

    Example:
        ```python
        orchestrator = SetupOrchestrator(SystemdUnitController())
        run = orchestrator.start(Path("setup.toml"))
        print(run.summary())
        ```
    """

    def __init__(
        self,
        unit_controller: UnitController,
        shape_runner: Optional[ShapeRunner] = None,
        resolver: Optional[ConfigResolver] = None,
    ):
        """
        Initialize the orchestrator.

        Args:
            unit_controller: Service manager capability used for interface units
            shape_runner: Receives resolved shapes (defaults to LoggingShapeRunner)
            resolver: Configuration resolver (defaults to the standard search order)
        """
        self.unit_controller = unit_controller
        self.shape_runner = shape_runner if shape_runner is not None else LoggingShapeRunner()
        self.resolver = resolver if resolver is not None else ConfigResolver()

        self._observers = ObserverManager[SetupObserver](observer_type_name="setup")

    # =================================================================
    # Event System
    # =================================================================

    def register_observer(self, observer: SetupObserver) -> None:
        self._observers.register(observer)

    def unregister_observer(self, observer: SetupObserver) -> None:
        self._observers.unregister(observer)

    def _notify_observers(self, event: SetupEvent, **kwargs: Any) -> None:
        self._observers.notify('on_setup_event', event, **kwargs)

    # =================================================================
    # Entry Points
    # =================================================================

    def start(self, setup_path: Path) -> SetupRun:
        """
        Load a setup and the configuration, then run the START sequence.

        Args:
            setup_path: Path to the setup descriptor

        Returns:
            Report of the run (shape failures show up as failed outcomes)

        Raises:
            ConfigurationError: If either file can't be loaded
            ReferenceNotFoundError: If the setup's interface isn't configured
            UnitOperationError: If the interface unit fails to start
        """
        setup_path = Path(setup_path)
        logger.info(f"Starting setup: {setup_path}")
        descriptor, config = self._load(setup_path)
        return self.start_setup(descriptor, config, setup_path)

    def stop(self, setup_path: Path) -> SetupRun:
        """
        Load a setup and the configuration, then run the STOP sequence.

        Args:
            setup_path: Path to the setup descriptor

        Returns:
            Report of the run

        Raises:
            ConfigurationError: If either file can't be loaded
        """
        setup_path = Path(setup_path)
        logger.info(f"Stopping setup: {setup_path}")
        descriptor, config = self._load(setup_path)
        return self.stop_setup(descriptor, config, setup_path)

    def start_setup(
        self, descriptor: SetupDescriptor, config: Config, setup_path: Optional[Path] = None
    ) -> SetupRun:
        """Run the START sequence for an already loaded setup."""
        return self._execute(SetupAction.START, self.plan_start(descriptor, config), setup_path)

    def stop_setup(
        self, descriptor: SetupDescriptor, config: Config, setup_path: Optional[Path] = None
    ) -> SetupRun:
        """Run the STOP sequence for an already loaded setup."""
        return self._execute(SetupAction.STOP, self.plan_stop(descriptor, config), setup_path)

    def _load(self, setup_path: Path) -> tuple[SetupDescriptor, Config]:
        descriptor = SetupDescriptor.load_from_path(setup_path)
        logger.debug(f"Loaded setup configuration: {descriptor!r}")
        config = self.resolver.resolve()
        return descriptor, config

    # =================================================================
    # Planning
    # =================================================================

    def plan_start(self, descriptor: SetupDescriptor, config: Config) -> list[Step]:
        """Interface first (fatal), then shapes in declared order."""
        steps = [
            self._interface_step(
                descriptor.interface_name, config, SetupAction.START, FailurePolicy.FATAL
            )
        ]
        steps.extend(
            self._shape_step(name, descriptor, config, SetupAction.START)
            for name in descriptor.shape_order
        )
        return steps

    def plan_stop(self, descriptor: SetupDescriptor, config: Config) -> list[Step]:
        """Shapes in reversed order, then the interface (never fatal)."""
        steps = [
            self._shape_step(name, descriptor, config, SetupAction.STOP)
            for name in descriptor.reversed_shape_order()
        ]
        steps.append(
            self._interface_step(
                descriptor.interface_name, config, SetupAction.STOP, FailurePolicy.LOG_AND_CONTINUE
            )
        )
        return steps

    def _interface_step(
        self, name: str, config: Config, action: SetupAction, policy: FailurePolicy
    ) -> Step:
        def run() -> StepResult:
            interface = config.get_audio_interface(name)
            if interface is None:
                raise ReferenceNotFoundError(
                    "interface",
                    name,
                    "the configured audio interfaces",
                    hint="Run 'obake interface list' to see configured interfaces",
                )

            logger.info(f"Interface type: {interface.interface_type}")
            if interface.unit is None:
                return StepResult.skipped(f"interface has no unit to {action.value}")

            if action is SetupAction.START:
                self.unit_controller.start(interface.unit)
            else:
                self.unit_controller.stop(interface.unit)
            return StepResult.done(f"{action.value} unit {interface.unit}")

        return Step(
            name=f"interface:{name}",
            kind=StepKind.INTERFACE,
            target=name,
            policy=policy,
            action=run,
        )

    def _shape_step(
        self, name: str, descriptor: SetupDescriptor, config: Config, action: SetupAction
    ) -> Step:
        def run() -> StepResult:
            shape = descriptor.get_shape(name)
            if shape is None:
                raise ReferenceNotFoundError(
                    "shape",
                    name,
                    "the [shapes] table of the setup",
                    hint=f"Add a [shapes.{name}] table or remove '{name}' from setup.shapes",
                )

            launch = ShapeLaunch.from_shape(name, shape, config.get_images_dir())
            if action is SetupAction.START:
                self.shape_runner.start_shape(launch)
            else:
                self.shape_runner.stop_shape(launch)

            if not launch.has_container:
                return StepResult.skipped("no container image")
            return StepResult.done(f"{action.value} {launch.image_path}")

        return Step(
            name=f"shape:{name}",
            kind=StepKind.SHAPE,
            target=name,
            policy=FailurePolicy.LOG_AND_CONTINUE,
            action=run,
        )

    # =================================================================
    # Execution
    # =================================================================

    def _execute(
        self, action: SetupAction, steps: list[Step], setup_path: Optional[Path]
    ) -> SetupRun:
        run = SetupRun(action=action, setup_path=setup_path)
        begin_event = (
            SetupEvent.SETUP_STARTING if action is SetupAction.START else SetupEvent.SETUP_STOPPING
        )
        self._notify_observers(begin_event, run=run, steps=list(steps))

        for step in steps:
            logger.info(f"{action.value.capitalize()} {step.kind.value}: {step.target}")
            outcome = self._run_step(step)
            run.outcomes.append(outcome)
            self._notify_observers(_STEP_EVENTS[outcome.status], step=step, outcome=outcome, run=run)

            if outcome.error is None:
                continue

            if step.is_fatal:
                logger.error(
                    f"{step.name} failed, aborting {action.value}: {outcome.error.technical_message}"
                )
                run.aborted = True
                self._notify_observers(SetupEvent.SETUP_ABORTED, run=run, error=outcome.error)
                raise outcome.error

            logger.warning(f"{step.name} failed, continuing: {outcome.error.technical_message}")

        logger.info(f"Setup {run.summary()}")
        self._notify_observers(SetupEvent.SETUP_COMPLETED, run=run)
        return run

    def _run_step(self, step: Step) -> StepOutcome:
        try:
            result = step.action()
        except ObakeError as e:
            return StepOutcome(step=step, status=StepStatus.FAILED, detail=e.user_message, error=e)
        except Exception as e:
            if step.is_fatal:
                raise
            logger.debug(f"{step.name} raised {type(e).__name__}", exc_info=True)
            error = SetupError(
                user_message=f"{step.kind.value.capitalize()} '{step.target}' failed: {e}",
                technical_message=f"{step.name}: {type(e).__name__}: {e}",
                context={step.kind.value: step.target},
            )
            error.__cause__ = e
            return StepOutcome(step=step, status=StepStatus.FAILED, detail=error.user_message, error=error)

        logger.debug(f"{step.name}: {result.status.value} {result.detail}")
        return StepOutcome(step=step, status=result.status, detail=result.detail)
