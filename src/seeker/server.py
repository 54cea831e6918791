"""MCP server entry point.

Startup order matters: settings are validated and logging configured before
the snapshot database is opened, and the metadata map is restored from the
snapshot before any transport accepts a request. When stdin closes the
transport returns and the map is flushed on the way out; on SIGTERM or SIGINT
the map is flushed and the process exits straight away.

Run with ``python -m seeker.server`` or the ``seeker`` console script.
"""

from __future__ import annotations

import asyncio
import contextlib
import os
import signal
from collections.abc import AsyncIterator
from pathlib import Path

import aiosqlite
import structlog
from mcp.server.fastmcp import FastMCP

from seeker.config import Settings
from seeker.logging_config import setup_logging
from seeker.models.metadata import MetadataEntry
from seeker.search import StaticSearchIndex
from seeker.snapshot import SqliteSnapshotStore
from seeker.state import AppState
from seeker.store import MetadataStore
from seeker.tools import metadata as metadata_tools
from seeker.tools import search as search_tools

log = structlog.get_logger()


@contextlib.asynccontextmanager
async def open_state(settings: Settings) -> AsyncIterator[AppState]:
    """Open the snapshot database and run the restart hooks around the body."""
    db_path = Path(settings.snapshot.db_path).expanduser()
    db_path.parent.mkdir(parents=True, exist_ok=True)

    async with aiosqlite.connect(db_path) as db:
        snapshots = SqliteSnapshotStore(db)
        await snapshots.init_db()

        store = MetadataStore()
        await store.on_after_restart(snapshots)
        try:
            yield AppState(
                settings=settings,
                store=store,
                search_index=StaticSearchIndex(),
                snapshots=snapshots,
            )
        finally:
            await store.on_before_restart(snapshots)


def create_server(state: AppState) -> FastMCP:
    """Build the FastMCP app with every tool bound to ``state``."""
    settings = state.settings
    mcp = FastMCP("seeker", host=settings.server.host, port=settings.server.port)

    @mcp.tool(name="search")
    async def search(term: str = "") -> list[str]:
        """Case-insensitive substring search over the dApp corpus.

        An empty term returns the whole corpus.
        """
        return await search_tools.handle(term, state)

    @mcp.tool(name="addMetadata")
    async def add_metadata(id: str, description: str) -> str:
        """Add or overwrite the description stored for a canister ID."""
        return await metadata_tools.handle_add(id, description, state)

    @mcp.tool(name="getMetadata")
    async def get_metadata(id: str) -> str | None:
        """Return the description stored for a canister ID, if any."""
        return await metadata_tools.handle_get(id, state)

    @mcp.tool(name="listAllMetadata")
    async def list_all_metadata() -> list[MetadataEntry]:
        """List every stored (id, description) pair. Order is unspecified."""
        return await metadata_tools.handle_list_all(state)

    @mcp.tool(name="getMetadataCount")
    async def get_metadata_count() -> int:
        """Number of stored metadata entries."""
        return await metadata_tools.handle_count(state)

    @mcp.tool(name="removeMetadata")
    async def remove_metadata(id: str) -> str:
        """Delete the metadata stored for a canister ID."""
        return await metadata_tools.handle_remove(id, state)

    @mcp.tool(name="healthCheck")
    async def health_check() -> str:
        """Liveness probe reporting the current entry count."""
        return await metadata_tools.handle_health(state)

    return mcp


async def _terminate(state: AppState, signame: str) -> None:
    """Flush the map and end the process without unwinding the transport.

    The stdio transport blocks on stdin in a worker thread that cancellation
    cannot interrupt, so waiting for it would hang until the client closes
    stdin.
    """
    exit_code = 0
    try:
        await state.store.on_before_restart(state.snapshots)
    except aiosqlite.Error:
        # already logged by the snapshot store
        exit_code = 1
    log.info("server_stopped", signal=signame, exit_code=exit_code)
    os._exit(exit_code)


def _install_signal_handlers(state: AppState) -> None:
    loop = asyncio.get_running_loop()
    pending: set[asyncio.Task[None]] = set()

    def on_signal(signame: str) -> None:
        task = loop.create_task(_terminate(state, signame))
        pending.add(task)

    for sig in (signal.SIGTERM, signal.SIGINT):
        # Windows event loops do not support signal handlers
        with contextlib.suppress(NotImplementedError):
            loop.add_signal_handler(sig, on_signal, sig.name)


async def serve(settings: Settings) -> None:
    async with open_state(settings) as state:
        _install_signal_handlers(state)
        mcp = create_server(state)
        log.info(
            "server_starting",
            transport=settings.server.transport,
            entries=state.store.count(),
        )
        if settings.server.transport == "http":
            await mcp.run_streamable_http_async()
        else:
            await mcp.run_stdio_async()


def main() -> None:
    # Invalid config raises ValidationError here, before any transport starts
    settings = Settings()
    setup_logging(settings.logging)

    with contextlib.suppress(KeyboardInterrupt):
        asyncio.run(serve(settings))
    log.info("server_stopped")


if __name__ == "__main__":
    main()
