"""Pytest configuration and shared fixtures.

This module contains fixtures used across all test modules.
"""

import logging
from collections.abc import Iterator
from pathlib import Path

import pytest
from pathtrack.registry.store import PathRegistry


@pytest.fixture(autouse=True)
def isolated_config(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """Point the XDG config directory at a temporary location.

    Keeps tests away from the real ~/.config/pathtrack registry.
    """
    config_home = tmp_path / "xdg-config"
    monkeypatch.setenv("XDG_CONFIG_HOME", str(config_home))
    monkeypatch.delenv("TRACK_DATABASE", raising=False)
    return config_home / "pathtrack"


@pytest.fixture(autouse=True)
def restore_package_logger() -> Iterator[None]:
    """Undo the logging setup done by CLI invocations."""
    package_logger = logging.getLogger("pathtrack")
    handlers = list(package_logger.handlers)
    level = package_logger.level
    propagate = package_logger.propagate
    yield
    package_logger.handlers[:] = handlers
    package_logger.setLevel(level)
    package_logger.propagate = propagate


@pytest.fixture
def db_path(tmp_path: Path) -> Path:
    """Location for a test registry database."""
    return tmp_path / "state" / "track.db"


@pytest.fixture
def registry(db_path: Path) -> Iterator[PathRegistry]:
    """An open registry backed by a temporary database."""
    with PathRegistry(db_path) as reg:
        yield reg


@pytest.fixture
def project_tree(tmp_path: Path) -> Path:
    """A small project directory with a .git subtree.

    Layout::

        proj/
            a/b.txt
            a/.git/config
            c.txt
    """
    root = tmp_path / "proj"
    (root / "a" / ".git").mkdir(parents=True)
    (root / "a" / "b.txt").write_text("bee")
    (root / "a" / ".git" / "config").write_text("[core]\n")
    (root / "c.txt").write_text("sea")
    return root
