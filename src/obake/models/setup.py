"""Setup descriptor model: an interface plus an ordered list of shapes."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from obake.exceptions import SETUP_LABEL
from obake.utils.persistence import TomlPersistence


class ShapeConfig(BaseModel):
    """A shape: an optional container image plus its environment."""

    model_config = ConfigDict(frozen=True)

    image: str | None = Field(
        default=None,
        description="Container image, relative to the images directory (None = bookkeeping only)",
    )
    env: dict[str, str] | None = Field(
        default=None,
        description="Environment applied when the container is started",
    )


class SetupSection(BaseModel):
    """The [setup] table."""

    model_config = ConfigDict(frozen=True)

    interface: str = Field(description="Key into the configured audio interfaces")
    shapes: list[str] = Field(description="Shape activation order")


class SetupDescriptor(BaseModel):
    """
    A named collection of one interface and an ordered list of shapes.

    Names in the activation order are not guaranteed to exist in the shape
    table; callers treat a miss as a skippable reference.

    Example:
        ```toml
        [setup]
        interface = "mixpre"
        shapes = ["serialosc", "siren"]

        [shapes.serialosc]
        image = "serialosc.sif"

        [shapes.serialosc.env]
        SINGULARITY_BIND = "/run/udev:/run/udev"
        ```
    """

    model_config = ConfigDict(frozen=True)

    setup: SetupSection
    shapes: dict[str, ShapeConfig] = Field(description="Shape catalog by name")

    @classmethod
    def load_from_path(cls, path: Path) -> "SetupDescriptor":
        """
        Load a setup descriptor from a TOML file.

        Raises:
            ConfigNotFoundError: If the setup file doesn't exist
            ConfigFileInvalidError: If the setup file has invalid TOML syntax
            ConfigValidationError: If values fail validation
        """
        return TomlPersistence.load_toml(Path(path), cls, SETUP_LABEL)

    @property
    def interface_name(self) -> str:
        return self.setup.interface

    @property
    def shape_order(self) -> list[str]:
        return list(self.setup.shapes)

    def reversed_shape_order(self) -> list[str]:
        """Deactivation order: the declared order, reversed verbatim."""
        return list(reversed(self.setup.shapes))

    def get_shape(self, name: str) -> ShapeConfig | None:
        return self.shapes.get(name)

    def list_shapes(self) -> list[str]:
        """List names in the shape catalog, sorted."""
        return sorted(self.shapes)
