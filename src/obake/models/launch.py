"""Resolved shape launch description handed to a shape runner."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from .setup import ShapeConfig


class ShapeLaunch(BaseModel):
    """Everything a container runtime would need to start or stop one shape."""

    model_config = ConfigDict(frozen=True)

    name: str = Field(description="Shape name from the setup")
    image: str | None = Field(default=None, description="Image as written in the setup")
    image_path: Path | None = Field(
        default=None, description="Image resolved against the images directory"
    )
    env: dict[str, str] = Field(default_factory=dict, description="Container environment")

    @property
    def has_container(self) -> bool:
        return self.image is not None

    @classmethod
    def from_shape(cls, name: str, shape: ShapeConfig, images_dir: Path) -> "ShapeLaunch":
        """
        Resolve a shape against the images directory.

        Absolute image paths are kept as-is.
        """
        image_path = None
        if shape.image is not None:
            image_path = Path(shape.image)
            if not image_path.is_absolute():
                image_path = images_dir / image_path

        return cls(
            name=name,
            image=shape.image,
            image_path=image_path,
            env=dict(shape.env or {}),
        )
