"""
analyzer/patterns.py — regex patterns for the checklist tokens.

Each TokenPattern holds:
  - regex       : compiled pattern, searched anywhere on the line
  - group       : regex group whose span is the editable part of the token

Only the first match on a line is ever considered.
"""

from __future__ import annotations

import re
from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class TokenPattern:
    regex: re.Pattern[str]
    group: int

    def search(self, text: str) -> tuple[int, int] | None:
        """Returns (start, end) of the editable group of the first match."""
        m = self.regex.search(text)
        if m is None:
            return None
        return m.span(self.group)


# ---------------------------------------------------------------------------
# Checkbox — "[ ]", "[x]", "[X]"; editable part is the single glyph
# ---------------------------------------------------------------------------

CHECKBOX = TokenPattern(regex=re.compile(r"\[([ xX])\]"), group=1)

CHECKED_GLYPH = "X"
UNCHECKED_GLYPH = " "


# ---------------------------------------------------------------------------
# Summary — "[n/m]", ASCII digits optional on both sides ("[/]" matches)
# ---------------------------------------------------------------------------

SUMMARY = TokenPattern(regex=re.compile(r"\[([0-9]*/[0-9]*)\]"), group=1)


# ---------------------------------------------------------------------------
# Indentation — leading whitespace before the first visible character
# ---------------------------------------------------------------------------

INDENT_RE = re.compile(r"^(\s*)\S")
