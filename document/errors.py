"""
document/errors.py — error codes raised when an edit batch cannot be applied.

EditError is the only exception of the whole checklist core; it is raised by
the document before anything is mutated, so a failed batch leaves the text
exactly as it was.
"""

from __future__ import annotations

from enum import StrEnum
from typing import Any


class ErrorCode(StrEnum):
    LINE_OUT_OF_RANGE   = "E_LINE_OUT_OF_RANGE"
    COLUMN_OUT_OF_RANGE = "E_COLUMN_OUT_OF_RANGE"
    OVERLAPPING_EDITS   = "E_OVERLAPPING_EDITS"
    STALE_DOCUMENT      = "E_STALE_DOCUMENT"


class EditError(Exception):
    """
    Rejected edit batch.

    - code:    stable error class (ErrorCode)
    - message: human readable description
    - details: optional extra data (offending edit, versions, ...)
    """

    def __init__(self, code: ErrorCode, message: str, details: dict[str, Any] | None = None) -> None:
        super().__init__(f"{code}: {message}")
        self.code = code
        self.message = message
        self.details = details
