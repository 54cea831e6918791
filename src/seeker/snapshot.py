"""SQLite-backed durable snapshot of the metadata map.

A snapshot is written and read wholesale. ``save`` replaces the previous
snapshot inside a single transaction, so after a crash either the old or the
new snapshot is visible, never a mix of both.

Unlike a cache, the snapshot is the only durable copy of the registry: errors
from ``aiosqlite`` are logged and re-raised rather than swallowed.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

import aiosqlite
import structlog

if TYPE_CHECKING:
    from seeker.protocols import Snapshot

log = structlog.get_logger()

_CREATE_SNAPSHOT_TABLE = """
CREATE TABLE IF NOT EXISTS metadata_snapshot (
    position    INTEGER PRIMARY KEY,
    id          TEXT NOT NULL,
    description TEXT NOT NULL
)
"""


class SqliteSnapshotStore:
    """Snapshot store implementing SnapshotStore over an aiosqlite connection."""

    def __init__(self, db: aiosqlite.Connection) -> None:
        self._db = db

    async def init_db(self) -> None:
        """Create the snapshot table and set WAL mode. Called once at startup."""
        await self._db.execute("PRAGMA journal_mode = WAL")
        await self._db.execute(_CREATE_SNAPSHOT_TABLE)
        await self._db.commit()

    async def save(self, snapshot: Snapshot) -> None:
        """Replace the stored snapshot with ``snapshot`` atomically."""
        rows = [
            (position, id_, description) for position, (id_, description) in enumerate(snapshot)
        ]
        try:
            await self._db.execute("DELETE FROM metadata_snapshot")
            await self._db.executemany(
                "INSERT INTO metadata_snapshot (position, id, description) VALUES (?, ?, ?)",
                rows,
            )
            await self._db.commit()
        except aiosqlite.Error:
            log.error("snapshot_save_error", entries=len(rows), exc_info=True)
            await self._db.rollback()
            raise
        log.info("snapshot_saved", entries=len(rows))

    async def load(self) -> list[tuple[str, str]]:
        """Return the stored snapshot in its saved order; empty if none exists."""
        try:
            cursor = await self._db.execute(
                "SELECT id, description FROM metadata_snapshot ORDER BY position"
            )
            rows = await cursor.fetchall()
        except aiosqlite.Error:
            log.error("snapshot_load_error", exc_info=True)
            raise
        return [(row[0], row[1]) for row in rows]
