"""Pytest fixtures for tests."""

from pathlib import Path
from tempfile import TemporaryDirectory

import pytest

from obake.exceptions import SetupError, UnitOperationError
from obake.models import Config, ShapeLaunch
from obake.orchestration import SetupOrchestrator
from obake.services import ConfigResolver, FileConfigSource


SETUP_TOML = """
[setup]
interface = "mixpre"
shapes = ["serialosc", "siren"]

[shapes.serialosc]
image = "serialosc.sif"

[shapes.serialosc.env]
SINGULARITY_BIND = "/run/udev:/run/udev"

[shapes.siren]
"""


def make_config_toml(root: Path, default_interface: str = "mixpre") -> str:
    """Render a primary configuration whose data directories live under root."""
    return f"""
[audio]
default-interface = "{default_interface}"

[audio.interfaces]
"mixpre" = {{ type = "jack", unit = "jack@mixpre.service" }}
"aes67" = {{ type = "jack", unit = "aes67.service" }}
"alsa" = {{ type = "alsa" }}

[data]
images-dir = "{(root / 'shapes').as_posix()}"
setups-dir = "{(root / 'setups').as_posix()}"
data-dir = "{(root / 'data').as_posix()}"
"""


class RecordingUnitController:
    """UnitController substitute that records calls and fails on request."""

    def __init__(self, failing: set[str] | None = None):
        self.calls: list[tuple[str, str]] = []
        self.failing = set(failing or ())

    def start(self, unit_name: str) -> None:
        self.calls.append(("start", unit_name))
        if unit_name in self.failing:
            raise UnitOperationError(unit_name, "start", "simulated failure")

    def stop(self, unit_name: str) -> None:
        self.calls.append(("stop", unit_name))
        if unit_name in self.failing:
            raise UnitOperationError(unit_name, "stop", "simulated failure")


class RecordingShapeRunner:
    """ShapeRunner substitute that records launches and fails on request."""

    def __init__(self, failing: set[str] | None = None):
        self.calls: list[tuple[str, str]] = []
        self.launches: list[ShapeLaunch] = []
        self.failing = set(failing or ())

    def _record(self, operation: str, launch: ShapeLaunch) -> None:
        self.calls.append((operation, launch.name))
        self.launches.append(launch)
        if launch.name in self.failing:
            raise SetupError(f"Shape '{launch.name}' failed to {operation}")

    def start_shape(self, launch: ShapeLaunch) -> None:
        self._record("start", launch)

    def stop_shape(self, launch: ShapeLaunch) -> None:
        self._record("stop", launch)


class RecordingObserver:
    """SetupObserver that keeps every event it receives."""

    def __init__(self):
        self.events = []

    def on_setup_event(self, event, **kwargs):
        self.events.append((event, kwargs))

    @property
    def event_types(self):
        return [event for event, _ in self.events]


@pytest.fixture
def temp_dir():
    """Create a temporary directory that gets cleaned up."""
    with TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def write_toml(temp_dir):
    """Write TOML text to a file under the temporary directory."""
    def _write(name: str, content: str) -> Path:
        path = temp_dir / name
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content, encoding="utf-8")
        return path

    return _write


@pytest.fixture
def config_file(temp_dir, write_toml):
    """A valid primary configuration with existing data directories."""
    for name in ("shapes", "setups", "data"):
        (temp_dir / name).mkdir()
    return write_toml("config.toml", make_config_toml(temp_dir))


@pytest.fixture
def config(config_file):
    """Loaded primary configuration."""
    return Config.load_from_path(config_file)


@pytest.fixture
def setup_file(write_toml):
    """A valid setup descriptor."""
    return write_toml("setup.toml", SETUP_TOML)


@pytest.fixture
def resolver(config_file):
    """Resolver pinned to the test configuration."""
    return ConfigResolver([FileConfigSource(config_file)])


@pytest.fixture
def unit_controller():
    return RecordingUnitController()


@pytest.fixture
def shape_runner():
    return RecordingShapeRunner()


@pytest.fixture
def orchestrator(unit_controller, shape_runner, resolver):
    return SetupOrchestrator(unit_controller, shape_runner=shape_runner, resolver=resolver)
