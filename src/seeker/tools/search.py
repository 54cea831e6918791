"""Tool handler for search."""

from __future__ import annotations

from typing import TYPE_CHECKING

import structlog

if TYPE_CHECKING:
    from seeker.state import AppState

log = structlog.get_logger()


async def handle(term: str, state: AppState) -> list[str]:
    matches = state.search_index.search(term)
    log.debug("search_complete", term=term, matches=len(matches))
    return matches
