from __future__ import annotations

from enum import StrEnum

from pydantic import BaseModel, ConfigDict, field_validator


class AddResult(StrEnum):
    CREATED = "created"
    UPDATED = "updated"


class RemoveResult(StrEnum):
    REMOVED = "removed"
    NOT_FOUND = "not_found"


class MetadataEntry(BaseModel):
    """Single (id, description) pair owned by the metadata store."""

    model_config = ConfigDict(frozen=True)

    id: str  # Canister / dApp identifier, opaque
    description: str

    @field_validator("id", "description")
    @classmethod
    def validate_not_empty(cls, v: str) -> str:
        if not v:
            raise ValueError("must not be empty")
        return v
