"""Tool handlers for the metadata registry.

Results are typed inside the store and rendered to the legacy status strings
here, since existing clients match on the exact wording.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

from seeker.errors import SeekerError
from seeker.models.metadata import AddResult, RemoveResult

if TYPE_CHECKING:
    from seeker.models.metadata import MetadataEntry
    from seeker.state import AppState

_ADD_MESSAGES = {
    AddResult.CREATED: "Successfully added metadata for ID: {id}",
    AddResult.UPDATED: "Successfully updated metadata for ID: {id}",
}

_REMOVE_MESSAGES = {
    RemoveResult.REMOVED: "Successfully removed metadata for ID: {id}",
    RemoveResult.NOT_FOUND: "Error: No metadata found for ID: {id}",
}


def _error_message(exc: SeekerError) -> str:
    return f"Error: {exc.message}"


async def handle_add(id: str, description: str, state: AppState) -> str:
    try:
        result = state.store.add(id, description)
    except SeekerError as exc:
        return _error_message(exc)
    return _ADD_MESSAGES[result].format(id=id)


async def handle_get(id: str, state: AppState) -> str | None:
    return state.store.get(id)


async def handle_list_all(state: AppState) -> list[MetadataEntry]:
    return state.store.list_all()


async def handle_count(state: AppState) -> int:
    return state.store.count()


async def handle_remove(id: str, state: AppState) -> str:
    try:
        result = state.store.remove(id)
    except SeekerError as exc:
        return _error_message(exc)
    return _REMOVE_MESSAGES[result].format(id=id)


async def handle_health(state: AppState) -> str:
    return state.store.health_status()
