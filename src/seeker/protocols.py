"""Structural interfaces for the replaceable collaborators."""

from __future__ import annotations

from collections.abc import Sequence
from typing import Protocol, runtime_checkable

# Durable form of the metadata map: ordered (id, description) pairs.
Snapshot = Sequence[tuple[str, str]]


@runtime_checkable
class SnapshotStore(Protocol):
    async def save(self, snapshot: Snapshot) -> None: ...

    async def load(self) -> list[tuple[str, str]]: ...


@runtime_checkable
class SearchIndex(Protocol):
    def search(self, term: str) -> list[str]: ...
