"""Unit tests for seeker.snapshot."""

from __future__ import annotations

from typing import TYPE_CHECKING

import aiosqlite
import pytest

from seeker.protocols import SnapshotStore

if TYPE_CHECKING:
    from seeker.snapshot import SqliteSnapshotStore


class TestSaveAndLoad:
    async def test_load_without_snapshot_is_empty(self, snapshots: SqliteSnapshotStore) -> None:
        assert await snapshots.load() == []

    async def test_load_preserves_saved_order(self, snapshots: SqliteSnapshotStore) -> None:
        pairs = [("b", "second"), ("a", "first"), ("c", "third")]
        await snapshots.save(pairs)
        assert await snapshots.load() == pairs

    async def test_save_replaces_whole_snapshot(self, snapshots: SqliteSnapshotStore) -> None:
        await snapshots.save([("a", "1"), ("b", "2"), ("c", "3")])
        await snapshots.save([("d", "4")])
        assert await snapshots.load() == [("d", "4")]

    async def test_save_empty_snapshot(self, snapshots: SqliteSnapshotStore) -> None:
        await snapshots.save([("a", "1")])
        await snapshots.save([])
        assert await snapshots.load() == []

    async def test_unicode_round_trip(self, snapshots: SqliteSnapshotStore) -> None:
        await snapshots.save([("dapp-é", "Décentralisé ✓")])
        assert await snapshots.load() == [("dapp-é", "Décentralisé ✓")]

    async def test_implements_protocol(self, snapshots: SqliteSnapshotStore) -> None:
        assert isinstance(snapshots, SnapshotStore)


class TestFailures:
    async def test_failed_save_keeps_previous_snapshot(
        self, snapshots: SqliteSnapshotStore
    ) -> None:
        """A write error mid-save rolls back; the old snapshot stays visible."""
        await snapshots.save([("old", "snapshot")])

        original_executemany = snapshots._db.executemany

        async def failing_executemany(*args, **kwargs):
            raise aiosqlite.OperationalError("disk I/O error")

        snapshots._db.executemany = failing_executemany  # type: ignore[assignment]
        with pytest.raises(aiosqlite.OperationalError):
            await snapshots.save([("new", "snapshot")])
        snapshots._db.executemany = original_executemany  # type: ignore[assignment]

        assert await snapshots.load() == [("old", "snapshot")]

    async def test_load_failure_propagates(self, snapshots: SqliteSnapshotStore) -> None:
        """The snapshot is the only durable copy, so read errors are not masked."""
        original_execute = snapshots._db.execute

        async def failing_execute(*args, **kwargs):
            raise aiosqlite.OperationalError("disk I/O error")

        snapshots._db.execute = failing_execute  # type: ignore[assignment]
        with pytest.raises(aiosqlite.OperationalError):
            await snapshots.load()
        snapshots._db.execute = original_execute  # type: ignore[assignment]
