"""Error taxonomy shared by the store and the tool layer."""

from __future__ import annotations

from enum import StrEnum


class ErrorCode(StrEnum):
    INVALID_ARGUMENT = "INVALID_ARGUMENT"


class SeekerError(Exception):
    """Domain error carrying a machine-readable code.

    Tool handlers turn these into ``"Error: <message>"`` status strings, so
    ``message`` must read well on its own.
    """

    def __init__(self, code: ErrorCode, message: str) -> None:
        super().__init__(message)
        self.code = code
        self.message = message
