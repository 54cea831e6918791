"""Unit-specific fixtures (no I/O beyond in-memory SQLite)."""

from __future__ import annotations

import aiosqlite
import pytest

from seeker.config import Settings
from seeker.search import StaticSearchIndex
from seeker.snapshot import SqliteSnapshotStore
from seeker.state import AppState
from seeker.store import MetadataStore


@pytest.fixture()
async def snapshots():
    """In-memory SQLite snapshot store for unit tests."""
    async with aiosqlite.connect(":memory:") as db:
        s = SqliteSnapshotStore(db)
        await s.init_db()
        yield s


@pytest.fixture()
def app_state(store: MetadataStore, snapshots: SqliteSnapshotStore) -> AppState:
    return AppState(
        settings=Settings(),
        store=store,
        search_index=StaticSearchIndex(),
        snapshots=snapshots,
    )
