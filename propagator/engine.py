"""
propagator/engine.py — toggle a checklist item and propagate the change.

Flow of one action:
  caret → classify (checkbox | summary | neither)
  → set_subtree()  cascade the new state down to every descendant
  → rollup()       recompute the parent's "checked/total" and its checkbox
  → one edit batch → Document.apply_edits() → caret reset

Everything before apply_edits() reads the document as it was when the
action started; edits are only collected, never applied one by one.

Limitations:
  - rollup() updates exactly one ancestor level per action; grandparents
    keep their summaries until they are rolled up themselves (caret on
    their summary).
  - A child without a checkbox counts towards "total" but never towards
    "checked", and its own subtree is not cascaded into.
"""

from __future__ import annotations

from dataclasses import replace

from analyzer import (
    CHECKED_GLYPH,
    UNCHECKED_GLYPH,
    find_checkbox,
    find_summary,
    is_checked,
)
from document.buffer import Document
from document.types import Edit, Line, Position, TokenSpan

from .tree import find_children, find_parent
from .types import ActionKind, UpdateResult


# ---------------------------------------------------------------------------
# Single-node writes
# ---------------------------------------------------------------------------

def set_node(line: Line, checkbox: TokenSpan | None, checked: bool, edits: list[Edit]) -> bool:
    """
    Rewrites the glyph of `checkbox` to match `checked`.

    Returns True when an edit was emitted; a missing checkbox or one already
    in the requested state produces nothing.
    """
    if checkbox is None or is_checked(line, checkbox) == checked:
        return False
    edits.append(Edit(checkbox, CHECKED_GLYPH if checked else UNCHECKED_GLYPH))
    return True


def _write_summary(summary: TokenSpan | None, checked: int, total: int, edits: list[Edit]) -> None:
    if summary is None:
        return
    edits.append(Edit(summary, f"{checked}/{total}"))


# ---------------------------------------------------------------------------
# Cascade / rollup
# ---------------------------------------------------------------------------

def set_subtree(
    document: Document,
    line: Line,
    checkbox: TokenSpan | None,
    checked: bool,
    edits: list[Edit],
) -> None:
    """Sets `line` and all of its descendants to `checked`, fixing summaries on the way."""
    if not set_node(line, checkbox, checked, edits):
        return
    children = find_children(document, line)
    for child in children:
        set_subtree(document, child, find_checkbox(child), checked, edits)
    total = len(children)
    _write_summary(find_summary(line), total if checked else 0, total, edits)


def rollup(document: Document, line: Line | None, adjustment: int, edits: list[Edit]) -> None:
    """
    Recounts the direct children of `line` and updates its summary and checkbox.

    Counting starts at `adjustment` instead of 0: after a toggle the child's
    own edit is still pending, so the stale text reports its old state.
    The checkbox of `line` is set without cascading into its children.
    """
    if line is None:
        return
    children = find_children(document, line)
    total = len(children)
    if total == 0:
        return
    checked = adjustment
    for child in children:
        checkbox = find_checkbox(child)
        if checkbox is not None and is_checked(child, checkbox):
            checked += 1
    _write_summary(find_summary(line), checked, total, edits)
    set_node(line, find_checkbox(line), checked == total, edits)


# ---------------------------------------------------------------------------
# Public API
# ---------------------------------------------------------------------------

def plan_update(document: Document, position: Position) -> UpdateResult:
    """
    Computes the edit batch for a toggle at `position` without touching the document.
    """
    if not 0 <= position.line < document.line_count:
        return UpdateResult(ActionKind.NONE)

    line = document.line_at(position.line)
    edits: list[Edit] = []

    checkbox = find_checkbox(line, position)
    if checkbox is not None:
        was_checked = is_checked(line, checkbox)
        set_subtree(document, line, checkbox, not was_checked, edits)
        rollup(document, find_parent(document, line), -1 if was_checked else 1, edits)
        return UpdateResult(ActionKind.TOGGLE, edits)

    if find_summary(line, position) is not None:
        rollup(document, line, 0, edits)
        return UpdateResult(ActionKind.ROLLUP, edits)

    # Neither token under the caret: behave like the Enter key.
    caret = Position(position.line, min(position.column, len(line.text)))
    edits.append(Edit(TokenSpan.at(caret), "\n"))
    return UpdateResult(ActionKind.NEWLINE, edits)


def update(document: Document) -> UpdateResult:
    """
    Toggles at the document's caret and commits the batch atomically.

    EditError from the document propagates unchanged; in that case nothing
    was modified and the caret is left alone.
    """
    version = document.version
    result = plan_update(document, document.selection_anchor())
    document.apply_edits(result.edits, expected_version=version)
    document.set_caret(document.selection_anchor())
    return replace(result, applied=True)
