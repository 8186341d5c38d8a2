"""User settings for pathtrack.

Settings are read from the ``[track]`` table of ``config.toml`` in the
configuration directory. Every field has a default, so a missing file is
equivalent to an empty one.

Example::

    [track]
    database = "~/sync/track.db"
    exclude_dirs = [".git", ".hg"]
    compression_level = 9
"""

import logging
import tomllib
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from pathtrack.core.errors import TrackError
from pathtrack.core.paths import get_settings_path

logger = logging.getLogger(__name__)


class SettingsError(TrackError):
    """Raised when the settings file cannot be parsed or validated."""


class Settings(BaseModel):
    """Validated pathtrack settings.

    Attributes:
        database: Optional override for the registry database location.
        exclude_dirs: Directory names pruned from walks and kept when
            cleaning an export directory.
        compression_level: gzip level used for tar exports (0-9).
    """

    model_config = ConfigDict(extra="forbid", frozen=True)

    database: Path | None = None
    exclude_dirs: tuple[str, ...] = (".git",)
    compression_level: int = Field(default=6, ge=0, le=9)

    @field_validator("database")
    @classmethod
    def expand_database(cls, v: Path | None) -> Path | None:
        """Expand ``~`` in the database override."""
        if v is None:
            return None
        return v.expanduser()

    @field_validator("exclude_dirs")
    @classmethod
    def validate_exclude_dirs(cls, v: tuple[str, ...]) -> tuple[str, ...]:
        """Excluded entries must be plain directory names."""
        for name in v:
            if not name or name in (".", ".."):
                msg = f"invalid excluded directory name: {name!r}"
                raise ValueError(msg)
            if "/" in name:
                msg = f"excluded directory must be a name, not a path: {name!r}"
                raise ValueError(msg)
        return v


def load_settings(path: Path | None = None) -> Settings:
    """Load settings from a TOML file.

    Args:
        path: Settings file to read. Defaults to the configuration directory's
            ``config.toml``.

    Returns:
        Validated Settings. Defaults when the file does not exist.

    Raises:
        SettingsError: If the file cannot be read, parsed or validated.
    """
    settings_path = path or get_settings_path()

    try:
        with open(settings_path, "rb") as f:
            data = tomllib.load(f)
    except FileNotFoundError:
        logger.debug("No settings file at %s, using defaults", settings_path)
        return Settings()
    except tomllib.TOMLDecodeError as e:
        raise SettingsError(f"Invalid TOML syntax in {settings_path}: {e}") from e
    except OSError as e:
        raise SettingsError(f"Failed to read settings {settings_path}: {e}") from e

    section: Any = data.get("track", {})
    if not isinstance(section, dict):
        raise SettingsError(f"Invalid [track] section in {settings_path}")

    try:
        settings = Settings.model_validate(section)
    except ValidationError as e:
        raise SettingsError(f"Invalid settings in {settings_path}: {e}") from e

    logger.debug("Loaded settings from %s", settings_path)
    return settings
