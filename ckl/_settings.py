"""File I/O settings — configured through environment variables."""

from __future__ import annotations

import os
from dataclasses import dataclass

_NEWLINES = {"lf": "\n", "\\n": "\n", "crlf": "\r\n", "\\r\\n": "\r\n"}


@dataclass(frozen=True, slots=True)
class Settings:
    encoding: str
    newline: str | None   # None → keep the style detected in the file


def get_settings() -> Settings:
    raw_newline = os.getenv("CKL_NEWLINE", "").strip().lower()
    return Settings(
        encoding = os.getenv("CKL_ENCODING", "utf-8"),
        newline  = _NEWLINES.get(raw_newline),
    )
