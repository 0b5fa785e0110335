"""Tests for TOML loading and error translation."""

import pytest

from obake.exceptions import (
    SETUP_LABEL,
    ConfigFileInvalidError,
    ConfigNotFoundError,
    ConfigValidationError,
)
from obake.models import Config, SetupDescriptor
from obake.utils import TomlPersistence


@pytest.mark.unit
class TestLoadToml:
    """Test that loads are atomic and errors are typed."""

    def test_missing_file(self, temp_dir):
        path = temp_dir / "missing.toml"

        with pytest.raises(ConfigNotFoundError) as exc_info:
            TomlPersistence.load_toml(path, Config)

        assert exc_info.value.searched_paths == [path]
        assert str(path) in exc_info.value.user_message

    def test_empty_file(self, write_toml):
        path = write_toml("empty.toml", "   \n")

        with pytest.raises(ConfigFileInvalidError, match="empty") as exc_info:
            TomlPersistence.load_toml(path, Config)

        assert exc_info.value.file_path == str(path)

    def test_syntax_error(self, write_toml):
        path = write_toml("broken.toml", "[audio\ndefault-interface = ")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            TomlPersistence.load_toml(path, Config)

        assert exc_info.value.file_path == str(path)
        assert "TOML parse error" in exc_info.value.technical_message

    def test_missing_required_field(self, write_toml):
        path = write_toml("bad.toml", """
[audio]
default-interface = "mixpre"

[audio.interfaces]
"mixpre" = { unit = "jack@mixpre.service" }

[data]
images-dir = "/a"
setups-dir = "/b"
data-dir = "/c"
""")

        with pytest.raises(ConfigValidationError) as exc_info:
            TomlPersistence.load_toml(path, Config)

        assert exc_info.value.field == "audio.interfaces.mixpre.type"
        assert exc_info.value.file_path == str(path)

    def test_multiple_validation_errors(self, write_toml):
        path = write_toml("worse.toml", """
[audio]
default-interface = 3
""")

        with pytest.raises(ConfigValidationError) as exc_info:
            TomlPersistence.load_toml(path, Config)

        assert exc_info.value.field == "multiple fields"
        assert "validation errors" in exc_info.value.user_message

    def test_setup_requires_shapes_table(self, write_toml):
        path = write_toml("no_shapes.toml", """
[setup]
interface = "mixpre"
shapes = []
""")

        with pytest.raises(ConfigValidationError) as exc_info:
            SetupDescriptor.load_from_path(path)

        assert exc_info.value.field == "shapes"

    def test_unknown_keys_ignored(self, write_toml, setup_file):
        path = write_toml("extra.toml", setup_file.read_text() + '\n[extra]\nkey = "value"\n')

        descriptor = TomlPersistence.load_toml(path, SetupDescriptor)

        assert descriptor.interface_name == "mixpre"


@pytest.mark.unit
class TestValidateToml:
    """Test the non-raising validation helper."""

    def test_valid(self, setup_file):
        assert TomlPersistence.validate_toml(setup_file, SetupDescriptor) == (True, None)

    def test_invalid(self, write_toml):
        path = write_toml("bad.toml", "[setup]\n")

        is_valid, error = TomlPersistence.validate_toml(path, SetupDescriptor)

        assert not is_valid
        assert "Invalid configuration value" in error

    def test_invalid_setup_file(self, write_toml):
        path = write_toml("bad.toml", "[setup]\n")

        is_valid, error = TomlPersistence.validate_toml(path, SetupDescriptor, SETUP_LABEL)

        assert not is_valid
        assert error.startswith("Invalid setup value")


@pytest.mark.unit
class TestSetupFileMessages:
    """Setup files are reported as setup files, not configuration."""

    def test_missing_setup_file(self, temp_dir):
        path = temp_dir / "live.toml"

        with pytest.raises(ConfigNotFoundError) as exc_info:
            SetupDescriptor.load_from_path(path)

        assert exc_info.value.user_message == f"Setup file not found: {path}"
        assert "obake setup list" in exc_info.value.recovery_hint

    def test_setup_syntax_error(self, write_toml):
        path = write_toml("broken.toml", "[setup\n")

        with pytest.raises(ConfigFileInvalidError) as exc_info:
            SetupDescriptor.load_from_path(path)

        assert exc_info.value.user_message == f"Setup file has invalid syntax: {path}"

    def test_config_wording_unchanged(self, temp_dir):
        with pytest.raises(ConfigNotFoundError, match="^Configuration file not found"):
            Config.load_from_path(temp_dir / "config.toml")
