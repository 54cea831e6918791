from __future__ import annotations

from seeker.models.metadata import AddResult, MetadataEntry, RemoveResult

__all__ = [
    "MetadataEntry",
    "AddResult",
    "RemoveResult",
]
