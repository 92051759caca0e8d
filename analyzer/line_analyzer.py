"""
analyzer/line_analyzer.py — token lookup on a single line.

All functions are pure: they read `Line.text` and return a TokenSpan, an
int or None. Nothing here raises; "not found" is always None.
"""

from __future__ import annotations

from document.types import Line, Position, TokenSpan

from .patterns import CHECKBOX, INDENT_RE, SUMMARY, UNCHECKED_GLYPH, TokenPattern


def find_checkbox(line: Line, position: Position | None = None) -> TokenSpan | None:
    """
    Span of the glyph inside the first checkbox on the line.

    With `position` given, the span is returned only when the position lies
    on it (ends inclusive); a checkbox elsewhere on the line yields None.
    """
    return _find(CHECKBOX, line, position)


def find_summary(line: Line, position: Position | None = None) -> TokenSpan | None:
    """Span of the "n/m" body of the first summary on the line; may be empty for "[/]"."""
    return _find(SUMMARY, line, position)


def indent_depth(line: Line) -> int:
    # TODO: expand tabs to the editor tab width instead of counting them as one column
    m = INDENT_RE.match(line.text)
    if m is None:
        return 0
    return len(m.group(1))


def is_checked(line: Line, checkbox: TokenSpan) -> bool:
    """Reads the glyph under `checkbox`: anything but a space counts as checked."""
    return line.text[checkbox.start:checkbox.end] != UNCHECKED_GLYPH


def _find(pattern: TokenPattern, line: Line, position: Position | None) -> TokenSpan | None:
    found = pattern.search(line.text)
    if found is None:
        return None
    span = TokenSpan(line.index, *found)
    if position is None or span.contains(position):
        return span
    return None
