"""In-memory metadata registry with explicit restart hooks.

All regular operations act on the in-memory map only. State crosses the
volatile/durable boundary exclusively through ``on_before_restart`` (flush the
whole map into the snapshot) and ``on_after_restart`` (rebuild the map from
the snapshot). The snapshot is left in place after a restore, so a crash at
any point loses nothing older than the last completed flush.

The host is expected to serialize calls, but every map access still happens
under a lock so a multi-threaded host never observes a partial write.
"""

from __future__ import annotations

import asyncio
import threading
from typing import TYPE_CHECKING

import structlog

from seeker.errors import ErrorCode, SeekerError
from seeker.models.metadata import AddResult, MetadataEntry, RemoveResult

if TYPE_CHECKING:
    from seeker.protocols import SnapshotStore

log = structlog.get_logger()

HEALTH_STATUS_TEMPLATE = "Seeker backend is operational. Metadata entries: {count}"


class MetadataStore:
    def __init__(self) -> None:
        self._entries: dict[str, str] = {}
        self._lock = threading.Lock()
        # one flush at a time: a signal-driven flush can race the shutdown flush
        self._flush_lock = asyncio.Lock()

    # ------------------------------------------------------------------
    # Registry operations
    # ------------------------------------------------------------------

    def add(self, id: str, description: str) -> AddResult:
        """Insert or overwrite the entry for ``id``.

        Raises ``SeekerError(INVALID_ARGUMENT)`` for an empty id or an empty
        description, in that order, before touching the map.
        """
        if not id:
            raise SeekerError(ErrorCode.INVALID_ARGUMENT, "ID cannot be empty")
        if not description:
            raise SeekerError(ErrorCode.INVALID_ARGUMENT, "Description cannot be empty")

        with self._lock:
            existed = id in self._entries
            self._entries[id] = description

        result = AddResult.UPDATED if existed else AddResult.CREATED
        log.debug("metadata_added", id=id, result=result.value)
        return result

    def get(self, id: str) -> str | None:
        """Return the description for ``id``, or ``None`` if absent or empty."""
        if not id:
            return None
        with self._lock:
            return self._entries.get(id)

    def remove(self, id: str) -> RemoveResult:
        if not id:
            raise SeekerError(ErrorCode.INVALID_ARGUMENT, "ID cannot be empty")

        with self._lock:
            removed = self._entries.pop(id, None) is not None

        if not removed:
            return RemoveResult.NOT_FOUND
        log.debug("metadata_removed", id=id)
        return RemoveResult.REMOVED

    def list_all(self) -> list[MetadataEntry]:
        """Copy of the current contents. Order is not part of the contract."""
        with self._lock:
            items = list(self._entries.items())
        return [MetadataEntry(id=id_, description=description) for id_, description in items]

    def count(self) -> int:
        with self._lock:
            return len(self._entries)

    def health_status(self) -> str:
        return HEALTH_STATUS_TEMPLATE.format(count=self.count())

    # ------------------------------------------------------------------
    # Lifecycle hooks
    # ------------------------------------------------------------------

    async def on_before_restart(self, snapshots: SnapshotStore) -> None:
        """Flush the whole map into ``snapshots``, replacing any prior snapshot."""
        async with self._flush_lock:
            with self._lock:
                snapshot = list(self._entries.items())
            await snapshots.save(snapshot)
        log.info("metadata_flushed", entries=len(snapshot))

    async def on_after_restart(self, snapshots: SnapshotStore) -> None:
        """Rebuild the map from the durable snapshot.

        Must run once at startup before any other operation. With no snapshot
        (first start) the map comes up empty.
        """
        snapshot = await snapshots.load()
        with self._lock:
            self._entries = dict(snapshot)
        log.info("metadata_restored", entries=len(snapshot))
