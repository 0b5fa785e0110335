"""Tests for configuration resolution order."""

from pathlib import Path

import pytest

from conftest import make_config_toml
from obake.exceptions import ConfigFileInvalidError, ConfigNotFoundError
from obake.services import (
    CONFIG_FILE_ENV,
    ConfigResolver,
    ConfigSource,
    EnvironmentConfigSource,
    FileConfigSource,
    default_sources,
)
from obake.services.config_resolver import Candidate


@pytest.fixture
def user_path(temp_dir):
    return temp_dir / "home" / ".config" / "obake" / "config.toml"


@pytest.fixture
def system_path(temp_dir):
    return temp_dir / "etc" / "obake" / "config.toml"


def write_config(path: Path, root: Path, default_interface: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(make_config_toml(root, default_interface), encoding="utf-8")
    return path


def make_resolver(environ: dict, user_path: Path, system_path: Path) -> ConfigResolver:
    return ConfigResolver([
        EnvironmentConfigSource(CONFIG_FILE_ENV, environ),
        FileConfigSource(user_path),
        FileConfigSource(system_path),
    ])


@pytest.mark.unit
class TestResolutionOrder:
    """Test override -> user -> system, first match wins."""

    def test_override_wins(self, temp_dir, user_path, system_path):
        override = write_config(temp_dir / "custom.toml", temp_dir, "override")
        write_config(user_path, temp_dir, "user")
        write_config(system_path, temp_dir, "system")

        resolver = make_resolver({CONFIG_FILE_ENV: str(override)}, user_path, system_path)

        assert resolver.resolve_path() == override
        assert resolver.resolve().default_interface_name == "override"

    def test_user_before_system(self, temp_dir, user_path, system_path):
        write_config(user_path, temp_dir, "user")
        write_config(system_path, temp_dir, "system")

        resolver = make_resolver({}, user_path, system_path)

        assert resolver.resolve().default_interface_name == "user"

    def test_system_when_no_user_file(self, temp_dir, user_path, system_path):
        write_config(system_path, temp_dir, "system")

        resolver = make_resolver({}, user_path, system_path)

        assert resolver.resolve().default_interface_name == "system"

    def test_empty_override_counts_as_unset(self, temp_dir, user_path, system_path):
        write_config(user_path, temp_dir, "user")

        resolver = make_resolver({CONFIG_FILE_ENV: ""}, user_path, system_path)

        assert resolver.resolve().default_interface_name == "user"


@pytest.mark.unit
class TestResolutionFailures:
    """Test that failures are reported and never silently fall back."""

    def test_missing_override_does_not_fall_back(self, temp_dir, user_path, system_path):
        write_config(user_path, temp_dir, "user")
        missing = temp_dir / "nope.toml"

        resolver = make_resolver({CONFIG_FILE_ENV: str(missing)}, user_path, system_path)

        with pytest.raises(ConfigNotFoundError) as exc_info:
            resolver.resolve()

        assert exc_info.value.searched_paths == [missing]

    def test_invalid_override_does_not_fall_back(self, temp_dir, user_path, system_path):
        write_config(user_path, temp_dir, "user")
        broken = temp_dir / "broken.toml"
        broken.write_text("[audio", encoding="utf-8")

        resolver = make_resolver({CONFIG_FILE_ENV: str(broken)}, user_path, system_path)

        with pytest.raises(ConfigFileInvalidError):
            resolver.resolve()

    def test_invalid_user_file_is_an_error(self, temp_dir, user_path, system_path):
        """A user file that exists but is broken is not skipped for the system one."""
        user_path.parent.mkdir(parents=True)
        user_path.write_text("[audio", encoding="utf-8")
        write_config(system_path, temp_dir, "system")

        resolver = make_resolver({}, user_path, system_path)

        with pytest.raises(ConfigFileInvalidError):
            resolver.resolve()

    def test_nothing_found_lists_all_paths(self, user_path, system_path):
        resolver = make_resolver({}, user_path, system_path)

        with pytest.raises(ConfigNotFoundError) as exc_info:
            resolver.resolve()

        assert exc_info.value.searched_paths == [user_path, system_path]
        assert str(user_path) in exc_info.value.user_message
        assert str(system_path) in exc_info.value.user_message


@pytest.mark.unit
class TestSources:
    """Test source construction and extension."""

    def test_default_sources(self, temp_dir):
        sources = default_sources(environ={}, home=temp_dir)

        assert isinstance(sources[0], EnvironmentConfigSource)
        assert sources[0].variable == "OBAKE_CONFIG_FILE"
        assert sources[1].path == temp_dir / ".config" / "obake" / "config.toml"
        assert sources[2].path == Path("/etc/obake/config.toml")

    def test_extra_source_can_be_inserted(self, temp_dir, user_path, system_path):
        """A new source slots into the list without changing the resolver."""
        project = write_config(temp_dir / "project" / "obake.toml", temp_dir, "project")

        class ProjectSource(ConfigSource):
            def candidate(self):
                return Candidate(project)

        resolver = make_resolver({}, user_path, system_path)
        resolver.sources.insert(1, ProjectSource())

        assert resolver.resolve().default_interface_name == "project"

    def test_source_must_implement_candidate(self):
        class IncompleteSource(ConfigSource):
            pass

        with pytest.raises(TypeError):
            IncompleteSource()

    def test_resolver_reloads_every_time(self, temp_dir, user_path, system_path):
        write_config(user_path, temp_dir, "first")
        resolver = make_resolver({}, user_path, system_path)
        assert resolver.resolve().default_interface_name == "first"

        write_config(user_path, temp_dir, "second")

        assert resolver.resolve().default_interface_name == "second"
