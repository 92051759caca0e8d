"""
propagator/types.py — result of a single "toggle at cursor" action.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import StrEnum

from document.types import Edit


class ActionKind(StrEnum):
    """Which case the cursor position fell into."""
    TOGGLE  = "toggle"    # caret on a checkbox glyph
    ROLLUP  = "rollup"    # caret on a summary body
    NEWLINE = "newline"   # neither: plain line break at the caret
    NONE    = "none"      # caret outside the document


@dataclass(slots=True)
class UpdateResult:
    """
    - action:  classified case (ActionKind)
    - edits:   ordered edit batch, in pre-edit coordinates
    - applied: True once the batch has been committed to the document
    """
    action: ActionKind
    edits: list[Edit] = field(default_factory=list)
    applied: bool = False
