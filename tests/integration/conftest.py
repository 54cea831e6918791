"""Integration test fixtures.

Integration tests start the real server as a subprocess speaking MCP over
stdio, with the snapshot database and config lookup isolated under tmp_path.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING

import pytest

if TYPE_CHECKING:
    from pathlib import Path


@pytest.fixture()
def snapshot_db(tmp_path: Path) -> Path:
    return tmp_path / "data" / "snapshot.db"


@pytest.fixture()
def subprocess_env(tmp_path: Path, snapshot_db: Path) -> dict[str, str]:
    """Environment for a server subprocess that never touches the real user dirs."""
    env = os.environ.copy()
    for key in list(env):
        if key.startswith("SEEKER__"):
            del env[key]
    env["HOME"] = str(tmp_path / "home")
    env["XDG_CONFIG_HOME"] = str(tmp_path / "home" / ".config")
    env["XDG_DATA_HOME"] = str(tmp_path / "home" / ".local" / "share")
    env["SEEKER__SNAPSHOT__DB_PATH"] = str(snapshot_db)
    env["SEEKER__LOGGING__FORMAT"] = "text"
    return env
