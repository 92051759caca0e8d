"""
propagator/tree.py — parent/children lookup over the indentation-implied tree.

Nothing is cached: every call rescans the document around the given line,
so the structure always matches the current text.

Irregular indentation:
  Children of a node are the lines at the smallest depth seen so far in the
  run below it. With depths 2, 6, 3 under a depth-0 parent only the depth-2
  line is a direct child; the other two are dropped from the count rather
  than re-indented.
"""

from __future__ import annotations

from analyzer import indent_depth
from document.buffer import Document
from document.types import Line


def find_parent(document: Document, line: Line) -> Line | None:
    """
    Nearest preceding line with a strictly smaller depth.

    Blank lines have depth 0 and are valid parents for indented lines.
    """
    depth = indent_depth(line)
    for index in range(line.index - 1, -1, -1):
        candidate = document.line_at(index)
        if indent_depth(candidate) < depth:
            return candidate
    return None


def find_children(document: Document, line: Line) -> list[Line]:
    """
    Direct children of `line`, in document order.

    Scans forward while lines are deeper than `line`; deeper-than-minimum
    lines are grandchildren and are reached through their own parent.
    """
    depth = indent_depth(line)
    children: list[Line] = []
    child_depth = -1
    for index in range(line.index + 1, document.line_count):
        candidate = document.line_at(index)
        candidate_depth = indent_depth(candidate)
        if candidate_depth <= depth:
            break
        if child_depth < 0 or candidate_depth <= child_depth:
            child_depth = candidate_depth
            children.append(candidate)
    return children
