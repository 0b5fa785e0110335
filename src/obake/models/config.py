"""Primary configuration model (audio interfaces and data directories)."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from obake.utils.persistence import TomlPersistence


class AudioInterface(BaseModel):
    """
    One named audio interface.

    Example:
        ```toml
        # With a unit
        "mixpre" = { type = "jack", unit = "jack@mixpre.service" }

        # Without a unit
        "alsa" = { type = "alsa" }
        ```
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    interface_type: str = Field(
        alias="type",
        description="Interface family (e.g. jack, alsa, pulse)",
    )
    unit: str | None = Field(
        default=None,
        description="Service manager unit backing this interface (None = nothing to start)",
    )


class AudioConfig(BaseModel):
    """Audio section: the default interface and every known interface."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    default_interface: str = Field(
        alias="default-interface",
        description="Name of the default interface; not checked against `interfaces`",
    )
    interfaces: dict[str, AudioInterface] = Field(description="Interfaces by name")


class DataConfig(BaseModel):
    """Directories where shape images, setups and runtime data live."""

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    images_dir: Path = Field(alias="images-dir", description="Shape container images")
    setups_dir: Path = Field(alias="setups-dir", description="Setup descriptor files")
    data_dir: Path = Field(alias="data-dir", description="Runtime data")


class Config(BaseModel):
    """
    Root of the primary configuration.

    The configuration is not checked for cross-reference consistency at load
    time: a default interface that names no entry is a lookup miss, not a
    load error.
    """

    model_config = ConfigDict(frozen=True, populate_by_name=True)

    audio: AudioConfig
    data: DataConfig

    @classmethod
    def load_from_path(cls, path: Path) -> "Config":
        """
        Load configuration from an explicit TOML file.

        Raises:
            ConfigNotFoundError: If the file doesn't exist
            ConfigFileInvalidError: If the file has invalid TOML syntax
            ConfigValidationError: If config values fail validation
        """
        return TomlPersistence.load_toml(Path(path), cls)

    @property
    def default_interface_name(self) -> str:
        return self.audio.default_interface

    @property
    def interfaces(self) -> dict[str, AudioInterface]:
        return self.audio.interfaces

    @property
    def data_paths(self) -> DataConfig:
        return self.data

    def get_audio_interface(self, name: str) -> AudioInterface | None:
        """Get an interface by name, or None if it isn't configured."""
        return self.audio.interfaces.get(name)

    def get_default_audio_interface(self) -> AudioInterface | None:
        """Get the default interface, or None if the default name is dangling."""
        return self.get_audio_interface(self.audio.default_interface)

    def list_audio_interfaces(self) -> list[str]:
        """List configured interface names, sorted."""
        return sorted(self.audio.interfaces)

    def get_images_dir(self) -> Path:
        return self.data.images_dir

    def get_setups_dir(self) -> Path:
        return self.data.setups_dir

    def get_data_dir(self) -> Path:
        return self.data.data_dir
