"""Listing and locating setups and shape images in the data directories."""

import logging
from pathlib import Path

from obake.exceptions import SETUP_LABEL, ConfigurationError, ReferenceNotFoundError
from obake.models import Config, SetupDescriptor
from obake.utils.persistence import TomlPersistence

logger = logging.getLogger(__name__)

SETUP_SUFFIX = ".toml"


def _read_dir(directory: Path, what: str) -> list[Path]:
    try:
        return sorted(directory.iterdir())
    except OSError as e:
        raise ConfigurationError(
            user_message=f"Failed to read {what} directory: {directory}",
            technical_message=f"Failed to read {what} directory {directory}: {e}",
            recovery_hint=f"Check the {what}-dir entry in the [data] table of your configuration",
            context={"path": directory},
        ) from e


class SetupCatalog:
    """
    Setup files stored in the configured setups directory.

    The catalog is stateless: every call looks at the filesystem again.
    """

    def __init__(self, config: Config):
        self.setups_dir = config.get_setups_dir()

    def list_setups(self) -> list[Path]:
        """
        List setup files, sorted by name.

        Raises:
            ConfigurationError: If the setups directory can't be read
            ReferenceNotFoundError: If it holds no setup files
        """
        logger.debug(f"setups directory: {self.setups_dir}")
        setups = [
            p for p in _read_dir(self.setups_dir, "setups")
            if p.is_file() and p.suffix == SETUP_SUFFIX
        ]

        if not setups:
            raise ReferenceNotFoundError(
                "setup",
                "*" + SETUP_SUFFIX,
                str(self.setups_dir),
                hint=f"Create a setup file in {self.setups_dir}",
            )

        return setups

    def validate(self, path: Path) -> tuple[bool, str | None]:
        """Check whether a setup file loads, without raising."""
        return TomlPersistence.validate_toml(path, SetupDescriptor, SETUP_LABEL)

    def locate(self, name_or_path: str | Path) -> Path:
        """
        Find a setup file by path or by name.

        An existing path is used as given. Otherwise the name is looked up in
        the setups directory, adding the .toml suffix when it's missing.

        Raises:
            ReferenceNotFoundError: If neither candidate exists
        """
        direct = Path(name_or_path).expanduser()
        if direct.is_file():
            return direct

        name = str(name_or_path)
        if not name.endswith(SETUP_SUFFIX):
            name += SETUP_SUFFIX
        in_catalog = self.setups_dir / name
        if in_catalog.is_file():
            return in_catalog

        raise ReferenceNotFoundError(
            "setup",
            str(name_or_path),
            f"{direct} or {in_catalog}",
            hint="Run 'obake setup list' to see available setups",
        )


class ShapeCatalog:
    """Shape images stored in the configured images directory."""

    def __init__(self, config: Config):
        self.images_dir = config.get_images_dir()

    def list_images(self) -> list[Path]:
        """
        List entries in the images directory, sorted by name.

        Raises:
            ConfigurationError: If the images directory can't be read
            ReferenceNotFoundError: If it is empty
        """
        logger.debug(f"images directory: {self.images_dir}")
        images = _read_dir(self.images_dir, "images")

        if not images:
            raise ReferenceNotFoundError(
                "image",
                "*",
                str(self.images_dir),
                hint=f"Copy shape images into {self.images_dir}",
            )

        return images
