"""SQLite-backed registry of tracked paths.

The registry is a single table holding one BLOB column with a unique index.
Paths are stored as the raw bytes returned by ``os.fsencode`` so filenames
that are not valid UTF-8 survive a round trip unchanged.
"""

from __future__ import annotations

import logging
import os
import sqlite3
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from types import TracebackType
from typing import Self

from pathtrack.core.errors import ConstraintViolation, StorageError, StorageUnavailable
from pathtrack.core.paths import ensure_dir, get_database_path
from pathtrack.registry.models import AddResult

logger = logging.getLogger(__name__)

SCHEMA = """
CREATE TABLE IF NOT EXISTS paths (
    path BLOB NOT NULL
);

CREATE UNIQUE INDEX IF NOT EXISTS idx_paths_path ON paths (path);
"""


def _encode(path: Path) -> bytes:
    return os.fsencode(path)


def _decode(raw: bytes) -> Path:
    return Path(os.fsdecode(raw))


class PathRegistry:
    """Persistent, ordered set of tracked root paths.

    The database location is injected so callers (and tests) decide where
    the registry lives. Use as a context manager or call ``open()`` and
    ``close()`` explicitly.

    Args:
        database_path: Location of the SQLite file. Defaults to
            ``~/.config/pathtrack/track.db``.
    """

    def __init__(self, database_path: Path | None = None) -> None:
        self._database_path = database_path
        self._conn: sqlite3.Connection | None = None

    @property
    def database_path(self) -> Path:
        """Location of the backing database file.

        Raises:
            StorageUnavailable: If the default location cannot be determined.
        """
        if self._database_path is None:
            try:
                self._database_path = get_database_path()
            except RuntimeError as e:
                raise StorageUnavailable(f"Couldn't get user config dir: {e}") from e
        return self._database_path

    @property
    def is_open(self) -> bool:
        """Whether a connection is currently held."""
        return self._conn is not None

    def open(self) -> Self:
        """Open the backing store, creating it and its schema if needed.

        Returns:
            The registry itself, for chaining.

        Raises:
            StorageUnavailable: If the directory cannot be created or the
                database cannot be opened or initialized.
        """
        if self.is_open:
            return self

        db_path = self.database_path
        try:
            ensure_dir(db_path.parent, "registry")
        except RuntimeError as e:
            raise StorageUnavailable(str(e)) from e

        try:
            conn = sqlite3.connect(db_path)
        except sqlite3.Error as e:
            raise StorageUnavailable(f"Cannot open registry {db_path}: {e}") from e

        try:
            conn.executescript(SCHEMA)
        except sqlite3.Error as e:
            conn.close()
            raise StorageUnavailable(f"Cannot initialize registry {db_path}: {e}") from e

        self._conn = conn
        logger.debug("Opened registry at %s", db_path)
        return self

    def close(self) -> None:
        """Close the connection. Safe to call more than once."""
        if self._conn is not None:
            self._conn.close()
            self._conn = None

    def __enter__(self) -> Self:
        return self.open()

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self.close()

    @contextmanager
    def _transaction(self, operation: str) -> Iterator[sqlite3.Connection]:
        """Run a block in a transaction, mapping sqlite errors to StorageError.

        The transaction commits when the block succeeds and rolls back if it
        raises.
        """
        conn = self._require_conn(operation)
        try:
            with conn:
                yield conn
        except sqlite3.Error as e:
            raise StorageError(f"Registry {operation} failed: {e}") from e

    def _require_conn(self, operation: str) -> sqlite3.Connection:
        if self._conn is None:
            raise StorageError(f"Registry is not open ({operation})")
        return self._conn

    def _insert(self, path: Path) -> None:
        """Insert a path, relying on the unique index to reject duplicates.

        Raises:
            ConstraintViolation: If the path is already tracked.
            StorageError: On any other persistence failure.
        """
        conn = self._require_conn("add")
        try:
            with conn:
                conn.execute("INSERT INTO paths (path) VALUES (?)", (_encode(path),))
        except sqlite3.IntegrityError as e:
            raise ConstraintViolation(path) from e
        except sqlite3.Error as e:
            raise StorageError(f"Registry add failed: {e}") from e

    def add(self, path: Path) -> AddResult:
        """Track a path.

        Adding a path that is already tracked is not an error: the duplicate
        is logged and reported through ``AddResult.added``.

        Args:
            path: Absolute path to track.

        Returns:
            AddResult describing whether the path was inserted.

        Raises:
            StorageError: If the insert fails for any other reason.
        """
        try:
            self._insert(path)
        except ConstraintViolation:
            logger.info("Path already in database: %s", path)
            return AddResult(path=path, added=False)

        logger.info("Tracking %s", path)
        return AddResult(path=path, added=True)

    def list(self) -> list[Path]:
        """Return all tracked paths in ascending byte order."""
        with self._transaction("list") as conn:
            rows = conn.execute("SELECT path FROM paths ORDER BY path ASC").fetchall()
        return [_decode(row[0]) for row in rows]

    def __contains__(self, path: object) -> bool:
        if not isinstance(path, Path):
            return False
        with self._transaction("lookup") as conn:
            row = conn.execute(
                "SELECT 1 FROM paths WHERE path = ?", (_encode(path),)
            ).fetchone()
        return row is not None

    def remove(self, path: Path) -> bool:
        """Stop tracking a path.

        Removing a path that is not tracked is a silent no-op.

        Args:
            path: Absolute path to remove.

        Returns:
            True if an entry was deleted.
        """
        with self._transaction("remove") as conn:
            cursor = conn.execute("DELETE FROM paths WHERE path = ?", (_encode(path),))
        removed = cursor.rowcount > 0
        if removed:
            logger.info("Stopped tracking %s", path)
        else:
            logger.debug("Path was not tracked: %s", path)
        return removed

    def prune(self) -> list[Path]:
        """Remove tracked paths that no longer exist.

        A path whose existence check fails (for example with a permission
        error) counts as gone and is pruned too. All deletions happen in a
        single transaction.

        Returns:
            The removed paths, in listing order.
        """
        gone = [path for path in self.list() if not _path_exists(path)]
        if not gone:
            return []

        with self._transaction("prune") as conn:
            conn.executemany(
                "DELETE FROM paths WHERE path = ?", [(_encode(path),) for path in gone]
            )
        for path in gone:
            logger.info("Pruned %s", path)
        return gone


def _path_exists(path: Path) -> bool:
    try:
        return path.exists()
    except OSError as e:
        logger.debug("Cannot access %s, treating as gone: %s", path, e)
        return False
