"""Locate and load the primary configuration.

The search order is an explicit list of sources tried in sequence:

1. ``OBAKE_CONFIG_FILE`` - an explicit file; when set it is the only
   candidate, so a missing or broken file there is an error with no fallback
2. ``~/.config/obake/config.toml`` - user configuration
3. ``/etc/obake/config.toml`` - system-wide configuration

The first source that yields a file wins. New sources can be inserted into
the list without touching the resolution loop.
"""

import logging
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from obake.exceptions import ConfigNotFoundError
from obake.models import Config

logger = logging.getLogger(__name__)

CONFIG_FILE_ENV = "OBAKE_CONFIG_FILE"
CONFIG_FILE_NAME = "config.toml"
SYSTEM_CONFIG_DIR = Path("/etc/obake")


@dataclass(frozen=True)
class Candidate:
    """A path offered by a source, and whether it must be used even if missing."""

    path: Path
    authoritative: bool = False


class ConfigSource(ABC):
    """A strategy that may propose a configuration file."""

    name = "source"

    @abstractmethod
    def candidate(self) -> Candidate | None:
        """
        Propose a configuration file.

        Returns:
            The candidate path, or None when this source has nothing to offer
        """
        pass


class EnvironmentConfigSource(ConfigSource):
    """An environment variable naming an explicit configuration file."""

    name = "environment"

    def __init__(self, variable: str = CONFIG_FILE_ENV, environ: Mapping[str, str] | None = None):
        self.variable = variable
        self._environ = os.environ if environ is None else environ

    def candidate(self) -> Candidate | None:
        value = self._environ.get(self.variable)
        if not value:
            return None
        logger.debug(f"{self.variable} environment variable set to: {value}")
        return Candidate(Path(value).expanduser(), authoritative=True)

    def __repr__(self) -> str:
        return f"EnvironmentConfigSource({self.variable!r})"


class FileConfigSource(ConfigSource):
    """A fixed location that is used only if a file exists there."""

    name = "file"

    def __init__(self, path: Path):
        self.path = Path(path)

    def candidate(self) -> Candidate | None:
        return Candidate(self.path)

    def __repr__(self) -> str:
        return f"FileConfigSource({str(self.path)!r})"


def default_sources(
    environ: Mapping[str, str] | None = None,
    home: Path | None = None,
) -> list[ConfigSource]:
    """
    Build the standard search order.

    Args:
        environ: Environment to read the override from (defaults to os.environ)
        home: Home directory for the user path (defaults to Path.home())

    Returns:
        Sources in resolution order: override, user, system
    """
    home = Path.home() if home is None else Path(home)
    return [
        EnvironmentConfigSource(CONFIG_FILE_ENV, environ),
        FileConfigSource(home / ".config" / "obake" / CONFIG_FILE_NAME),
        FileConfigSource(SYSTEM_CONFIG_DIR / CONFIG_FILE_NAME),
    ]


class ConfigResolver:
    """
    Resolve the primary configuration from an ordered list of sources.

    Loading is atomic: ``resolve()`` returns a fully validated Config or
    raises. Nothing is cached between calls.

    Example:
        ```python
        config = ConfigResolver().resolve()
        interface = config.get_audio_interface("mixpre")
        ```
    """

    def __init__(self, sources: Sequence[ConfigSource] | None = None):
        """
        Initialize the resolver.

        Args:
            sources: Sources in priority order (defaults to default_sources())
        """
        self.sources = list(default_sources() if sources is None else sources)

    def resolve_path(self) -> Path:
        """
        Find the configuration file that resolve() would load.

        Raises:
            ConfigNotFoundError: If no source yields a file, listing every probed path
        """
        probed: list[Path] = []

        for source in self.sources:
            candidate = source.candidate()
            if candidate is None:
                continue

            probed.append(candidate.path)
            logger.debug(f"checking config path: {candidate.path}")

            if candidate.authoritative:
                if not candidate.path.is_file():
                    raise ConfigNotFoundError([candidate.path])
                return candidate.path

            if candidate.path.is_file():
                return candidate.path

        raise ConfigNotFoundError(probed)

    def resolve(self) -> Config:
        """
        Locate and load the configuration.

        Raises:
            ConfigNotFoundError: If no configuration file exists
            ConfigFileInvalidError: If the chosen file has invalid syntax
            ConfigValidationError: If the chosen file fails validation
        """
        path = self.resolve_path()
        config = Config.load_from_path(path)
        logger.debug(f"loaded config from path: {path}")
        return config
