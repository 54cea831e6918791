"""Application state shared by every tool handler."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from seeker.config import Settings
    from seeker.protocols import SearchIndex, SnapshotStore
    from seeker.store import MetadataStore


@dataclass
class AppState:
    """Owned components, created in the server lifespan and passed explicitly."""

    settings: Settings
    store: MetadataStore
    search_index: SearchIndex
    snapshots: SnapshotStore
