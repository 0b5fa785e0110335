"""Tests for the configuration and setup models."""

from pathlib import Path

import pytest
from pydantic import ValidationError

from obake.models import AudioInterface, Config, SetupDescriptor, ShapeConfig, ShapeLaunch


@pytest.mark.unit
class TestConfig:
    """Test primary configuration loading and lookups."""

    def test_values_match_file(self, config, temp_dir):
        """Every value in the file comes back unchanged."""
        assert config.default_interface_name == "mixpre"
        assert set(config.interfaces) == {"mixpre", "aes67", "alsa"}

        mixpre = config.get_audio_interface("mixpre")
        assert mixpre.interface_type == "jack"
        assert mixpre.unit == "jack@mixpre.service"

        assert config.data_paths.images_dir == temp_dir / "shapes"
        assert config.get_setups_dir() == temp_dir / "setups"
        assert config.get_data_dir() == temp_dir / "data"

    def test_absent_unit_is_none(self, config):
        """An interface without a unit has no default unit name."""
        alsa = config.get_audio_interface("alsa")
        assert alsa.interface_type == "alsa"
        assert alsa.unit is None

    def test_unknown_interface_returns_none(self, config):
        assert config.get_audio_interface("nonexistent") is None

    def test_default_interface(self, config):
        assert config.get_default_audio_interface() == config.get_audio_interface("mixpre")

    def test_dangling_default_interface_loads(self, write_toml, temp_dir):
        """A default that names no interface is a lookup miss, not a load error."""
        from conftest import make_config_toml

        path = write_toml("dangling.toml", make_config_toml(temp_dir, default_interface="ghost"))
        config = Config.load_from_path(path)

        assert config.default_interface_name == "ghost"
        assert config.get_default_audio_interface() is None

    def test_list_interfaces_sorted(self, config):
        assert config.list_audio_interfaces() == ["aes67", "alsa", "mixpre"]

    def test_config_is_immutable(self, config):
        with pytest.raises(ValidationError):
            config.audio = None

    def test_construct_by_field_name(self):
        """Models accept Python field names as well as the TOML keys."""
        interface = AudioInterface(interface_type="alsa")
        assert interface.unit is None


@pytest.mark.unit
class TestSetupDescriptor:
    """Test setup descriptor loading and lookups."""

    def test_load(self, setup_file):
        descriptor = SetupDescriptor.load_from_path(setup_file)

        assert descriptor.interface_name == "mixpre"
        assert descriptor.shape_order == ["serialosc", "siren"]

        serialosc = descriptor.get_shape("serialosc")
        assert serialosc.image == "serialosc.sif"
        assert serialosc.env == {"SINGULARITY_BIND": "/run/udev:/run/udev"}

    def test_shape_without_image_or_env(self, setup_file):
        siren = SetupDescriptor.load_from_path(setup_file).get_shape("siren")
        assert siren.image is None
        assert siren.env is None

    def test_order_is_kept_verbatim(self, write_toml):
        path = write_toml("order.toml", """
[setup]
interface = "alsa"
shapes = ["c", "a", "b", "a"]

[shapes]
""")
        descriptor = SetupDescriptor.load_from_path(path)

        assert descriptor.shape_order == ["c", "a", "b", "a"]
        assert descriptor.reversed_shape_order() == ["a", "b", "a", "c"]
        assert descriptor.list_shapes() == []

    def test_order_may_name_missing_shapes(self, write_toml):
        path = write_toml("dangling.toml", """
[setup]
interface = "alsa"
shapes = ["a", "b"]

[shapes.a]
""")
        descriptor = SetupDescriptor.load_from_path(path)

        assert descriptor.get_shape("a") == ShapeConfig()
        assert descriptor.get_shape("b") is None

    def test_list_shapes(self, setup_file):
        assert SetupDescriptor.load_from_path(setup_file).list_shapes() == ["serialosc", "siren"]


@pytest.mark.unit
class TestShapeLaunch:
    """Test resolving shapes against the images directory."""

    def test_relative_image_joins_images_dir(self):
        shape = ShapeConfig(image="siren.sif", env={"A": "1"})
        launch = ShapeLaunch.from_shape("siren", shape, Path("/srv/shapes"))

        assert launch.image_path == Path("/srv/shapes/siren.sif")
        assert launch.env == {"A": "1"}
        assert launch.has_container

    def test_absolute_image_kept(self):
        shape = ShapeConfig(image="/opt/images/siren.sif")
        launch = ShapeLaunch.from_shape("siren", shape, Path("/srv/shapes"))

        assert launch.image_path == Path("/opt/images/siren.sif")

    def test_no_image(self):
        launch = ShapeLaunch.from_shape("notes", ShapeConfig(), Path("/srv/shapes"))

        assert launch.image_path is None
        assert launch.env == {}
        assert not launch.has_container
