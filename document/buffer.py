"""
document/buffer.py — document interface consumed by the propagator + in-memory implementation.

Architecture:
  Document (Protocol)  what the checklist core needs from an editor buffer
  TextDocument         list-of-lines buffer backing the CLI and the tests

The core only ever reads lines through `line_at` and materialises changes
through a single `apply_edits` call, so any editor integration only has to
provide these few methods.
"""

from __future__ import annotations

import os
import re
from pathlib import Path
from typing import Protocol, Sequence

from .errors import EditError, ErrorCode
from .types import Edit, Line, Position, TokenSpan

# Any line ending; the detected style is only used when rendering.
_LINE_BREAK_RE = re.compile(r"\r\n|\r|\n")


class Document(Protocol):
    @property
    def line_count(self) -> int: ...

    @property
    def version(self) -> int: ...

    def line_at(self, index: int) -> Line: ...

    def selection_anchor(self) -> Position: ...

    def apply_edits(self, edits: Sequence[Edit], expected_version: int | None = None) -> None: ...

    def set_caret(self, position: Position) -> None: ...


# ---------------------------------------------------------------------------
# TextDocument
# ---------------------------------------------------------------------------

class TextDocument:
    """
    Mutable text buffer with atomic, all-or-nothing edit batches.

    The newline style of the source text is detected once ("\\r\\n" wins if
    present anywhere) and reused when rendering; a trailing newline shows up
    as a final empty line, the same way editors present it.
    """

    __slots__ = ("_lines", "newline", "version", "_selection")

    def __init__(self, lines: Sequence[str], newline: str = "\n", selection: Position | None = None) -> None:
        self._lines: list[str] = list(lines) or [""]
        self.newline = newline
        self.version = 0
        self._selection = selection or Position(0, 0)

    @classmethod
    def from_text(cls, text: str, selection: Position | None = None) -> TextDocument:
        newline = "\r\n" if "\r\n" in text else "\n"
        return cls(_LINE_BREAK_RE.split(text), newline=newline, selection=selection)

    @classmethod
    def from_path(cls, path: str | os.PathLike[str], encoding: str = "utf-8") -> TextDocument:
        # newline="" keeps "\r\n" intact so the style can be detected
        with open(path, encoding=encoding, newline="") as f:
            return cls.from_text(f.read())

    def save(self, path: str | os.PathLike[str], encoding: str = "utf-8", newline: str | None = None) -> None:
        text = self.text
        if newline and newline != self.newline:
            text = newline.join(self._lines)
        Path(path).write_text(text, encoding=encoding, newline="")

    # -----------------------------------------------------------------------
    # Read access
    # -----------------------------------------------------------------------

    @property
    def text(self) -> str:
        return self.newline.join(self._lines)

    @property
    def line_count(self) -> int:
        return len(self._lines)

    def line_at(self, index: int) -> Line:
        return Line(index, self._lines[index])

    def lines(self) -> list[Line]:
        return [Line(i, t) for i, t in enumerate(self._lines)]

    def selection_anchor(self) -> Position:
        return self._selection

    def set_caret(self, position: Position) -> None:
        self._selection = position

    # -----------------------------------------------------------------------
    # Edits
    # -----------------------------------------------------------------------

    def apply_edits(self, edits: Sequence[Edit], expected_version: int | None = None) -> None:
        """
        Applies the whole batch or nothing.

        All spans are expressed in coordinates of the text as it is *before*
        the batch. Every edit is validated up front; EditError is raised
        before the first character changes.
        """
        if expected_version is not None and expected_version != self.version:
            raise EditError(
                ErrorCode.STALE_DOCUMENT,
                "document changed since the edits were computed",
                {"expected": expected_version, "actual": self.version},
            )
        for edit in edits:
            self._validate(edit.span)
        _check_overlaps([e.span for e in edits])

        if not edits:
            return

        text = self.text
        starts = self._line_offsets()
        caret = len(text)
        if self._selection.line < len(starts):
            caret = min(starts[self._selection.line] + self._selection.column, caret)
        caret_shift = 0

        # Back-to-front so earlier offsets stay valid; on ties the wider span
        # goes first and later edits land after earlier ones.
        ordered = sorted(
            enumerate(edits),
            key=lambda item: (item[1].span.line, item[1].span.start, item[1].span.end, item[0]),
            reverse=True,
        )
        for _, edit in ordered:
            begin = starts[edit.span.line] + edit.span.start
            end = starts[edit.span.line] + edit.span.end
            replacement = edit.text.replace("\r\n", "\n").replace("\n", self.newline)
            text = text[:begin] + replacement + text[end:]
            if end <= caret:
                caret_shift += len(replacement) - (end - begin)

        self._lines = text.split(self.newline)
        self.version += 1
        self._selection = self._position_of(min(caret + caret_shift, len(text)), text)

    # -----------------------------------------------------------------------
    # Helpers
    # -----------------------------------------------------------------------

    def _validate(self, span: TokenSpan) -> None:
        if not 0 <= span.line < len(self._lines):
            raise EditError(
                ErrorCode.LINE_OUT_OF_RANGE,
                f"line {span.line} outside 0..{len(self._lines) - 1}",
                {"span": span},
            )
        length = len(self._lines[span.line])
        if not 0 <= span.start <= span.end <= length:
            raise EditError(
                ErrorCode.COLUMN_OUT_OF_RANGE,
                f"columns {span.start}..{span.end} outside 0..{length} on line {span.line}",
                {"span": span},
            )

    def _line_offsets(self) -> list[int]:
        offsets: list[int] = []
        pos = 0
        for line in self._lines:
            offsets.append(pos)
            pos += len(line) + len(self.newline)
        return offsets

    def _position_of(self, offset: int, text: str) -> Position:
        head = text[:offset]
        line = head.count(self.newline)
        last = head.rfind(self.newline)
        column = offset if last < 0 else offset - last - len(self.newline)
        return Position(line, column)


def _check_overlaps(spans: list[TokenSpan]) -> None:
    filled = sorted((s for s in spans if not s.is_empty), key=lambda s: (s.line, s.start))
    for prev, cur in zip(filled, filled[1:]):
        if prev.overlaps(cur):
            raise EditError(
                ErrorCode.OVERLAPPING_EDITS,
                f"edits overlap on line {cur.line}",
                {"first": prev, "second": cur},
            )
