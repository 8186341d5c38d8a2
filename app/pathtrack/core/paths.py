"""XDG-compliant path management for pathtrack.

All persistent files live in the configuration directory:

- Config dir: ~/.config/pathtrack/ (or $XDG_CONFIG_HOME/pathtrack/)
- Registry database: <config dir>/track.db
- Settings: <config dir>/config.toml
- Theme overrides: <config dir>/theme.toml
"""

import os
from pathlib import Path

# Application identifier for directory naming
APP_NAME = "pathtrack"

DATABASE_FILENAME = "track.db"
SETTINGS_FILENAME = "config.toml"
THEME_FILENAME = "theme.toml"


def _get_xdg_dir(env_var: str, default_subdir: str) -> Path:
    """Get XDG directory respecting environment variable override.

    Args:
        env_var: XDG environment variable name (e.g., "XDG_CONFIG_HOME").
        default_subdir: Default subdirectory under home (e.g., ".config").

    Returns:
        Path to the application-specific directory.

    Raises:
        RuntimeError: If the home directory cannot be determined.
    """
    base = os.environ.get(env_var)
    if base:
        return Path(base) / APP_NAME
    try:
        home = Path.home()
    except (KeyError, RuntimeError) as e:
        msg = f"Cannot determine home directory for {env_var} fallback"
        raise RuntimeError(msg) from e
    return home / default_subdir / APP_NAME


def get_config_dir() -> Path:
    """Get the configuration directory path.

    Returns:
        Path to ~/.config/pathtrack/ (or XDG_CONFIG_HOME/pathtrack/).
    """
    return _get_xdg_dir("XDG_CONFIG_HOME", ".config")


def get_database_path() -> Path:
    """Get the default registry database path.

    Returns:
        Path to ~/.config/pathtrack/track.db.
    """
    return get_config_dir() / DATABASE_FILENAME


def get_settings_path() -> Path:
    """Get the settings file path.

    Returns:
        Path to ~/.config/pathtrack/config.toml.
    """
    return get_config_dir() / SETTINGS_FILENAME


def get_theme_path() -> Path:
    """Get the user theme file path.

    Returns:
        Path to ~/.config/pathtrack/theme.toml.
    """
    return get_config_dir() / THEME_FILENAME


def ensure_dir(path: Path, name: str) -> Path:
    """Create directory if it doesn't exist.

    Args:
        path: Directory path to create.
        name: Human-readable name for error messages.

    Returns:
        The created/existing directory path.

    Raises:
        RuntimeError: If directory cannot be created.
    """
    try:
        path.mkdir(parents=True, exist_ok=True)
    except PermissionError as e:
        msg = f"Cannot create {name} directory {path}: Permission denied"
        raise RuntimeError(msg) from e
    except OSError as e:
        msg = f"Cannot create {name} directory {path}: {e}"
        raise RuntimeError(msg) from e
    return path

