"""
analyzer — checkbox / summary / indentation lookup on single lines.

Public API:
  find_checkbox(line, position=None)  → TokenSpan | None
  find_summary(line, position=None)   → TokenSpan | None
  indent_depth(line)                  → int
  is_checked(line, checkbox)          → bool
"""

from .line_analyzer import find_checkbox, find_summary, indent_depth, is_checked
from .patterns      import CHECKED_GLYPH, UNCHECKED_GLYPH

__all__ = [
    "find_checkbox",
    "find_summary",
    "indent_depth",
    "is_checked",
    "CHECKED_GLYPH",
    "UNCHECKED_GLYPH",
]
