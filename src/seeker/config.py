"""Seeker configuration.

Three sections: ``server`` (MCP transport and the host/port used by the HTTP
transport), ``snapshot`` (where the SQLite file holding the durable metadata
snapshot lives) and ``logging`` (structlog level and renderer).

Precedence, highest first: constructor args, ``SEEKER__<SECTION>__<FIELD>``
environment variables, ``seeker.yaml`` (cwd, then the platform config dir),
defaults. Every section rejects unknown keys, so a typo in ``seeker.yaml``
fails startup instead of silently falling back to a default.
"""

from __future__ import annotations

from pathlib import Path
from typing import Any, Literal

import platformdirs
from pydantic import BaseModel, ConfigDict
from pydantic_settings import (
    BaseSettings,
    PydanticBaseSettingsSource,
    SettingsConfigDict,
    YamlConfigSettingsSource,
)

_DEFAULT_DATA_DIR = platformdirs.user_data_dir("seeker")
_DEFAULT_DB_PATH = str(Path(_DEFAULT_DATA_DIR) / "snapshot.db")


def _find_config_file() -> str | None:
    """Return the path of the first seeker.yaml found, or None."""
    candidates = [
        Path("seeker.yaml"),
        Path(platformdirs.user_config_dir("seeker")) / "seeker.yaml",
    ]
    for path in candidates:
        if path.exists():
            return str(path)
    return None


class ServerSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    transport: Literal["stdio", "http"] = "stdio"
    host: str = "127.0.0.1"
    port: int = 8080


class SnapshotSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    db_path: str = _DEFAULT_DB_PATH


class LoggingSettings(BaseModel):
    model_config = ConfigDict(extra="forbid")

    level: Literal["DEBUG", "INFO", "WARNING", "ERROR"] = "INFO"
    format: Literal["json", "text"] = "json"


class Settings(BaseSettings):
    model_config = SettingsConfigDict(
        # Double-underscore separates nesting: SEEKER__SERVER__PORT=9090
        env_prefix="SEEKER__",
        env_nested_delimiter="__",
        yaml_file=_find_config_file(),
        yaml_file_encoding="utf-8",
    )

    server: ServerSettings = ServerSettings()
    snapshot: SnapshotSettings = SnapshotSettings()
    logging: LoggingSettings = LoggingSettings()

    @classmethod
    def settings_customise_sources(
        cls,
        settings_cls: type[BaseSettings],
        init_settings: PydanticBaseSettingsSource,
        env_settings: PydanticBaseSettingsSource,
        dotenv_settings: PydanticBaseSettingsSource,
        file_secret_settings: PydanticBaseSettingsSource,
        **kwargs: Any,
    ) -> tuple[PydanticBaseSettingsSource, ...]:
        return (
            init_settings,  # Constructor args (highest priority)
            env_settings,  # Environment variables
            YamlConfigSettingsSource(settings_cls),  # YAML file
            # dotenv and file secrets intentionally excluded
        )
