"""
document/types.py — value types shared by the analyzer and the propagator.

Line      — immutable snapshot of one row of text + its 0-based index
Position  — caret location (line, column), both 0-based
TokenSpan — character range [start, end] on one line (checkbox glyph or summary body)
Edit      — replacement of a TokenSpan with new text; zero-width span = insertion
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True, slots=True)
class Line:
    index: int
    text: str


@dataclass(frozen=True, slots=True)
class Position:
    line: int
    column: int


@dataclass(frozen=True, slots=True)
class TokenSpan:
    """
    Range of characters on a single line.

    - line:  0-based line index
    - start: first column of the token
    - end:   column just past the token (start == end → empty / insertion point)

    `contains` is inclusive at both ends, so a caret sitting right before or
    right after the token still counts as being "on" it.
    """
    line: int
    start: int
    end: int

    @classmethod
    def at(cls, position: Position) -> TokenSpan:
        return cls(position.line, position.column, position.column)

    @property
    def is_empty(self) -> bool:
        return self.start == self.end

    def contains(self, position: Position) -> bool:
        return position.line == self.line and self.start <= position.column <= self.end

    def overlaps(self, other: TokenSpan) -> bool:
        """True when both spans cover at least one common character."""
        if self.line != other.line or self.is_empty or other.is_empty:
            return False
        return self.start < other.end and other.start < self.end


@dataclass(frozen=True, slots=True)
class Edit:
    span: TokenSpan
    text: str

    def __str__(self) -> str:
        return f"{self.span.line + 1}:{self.span.start + 1}-{self.span.end + 1} → {self.text!r}"
