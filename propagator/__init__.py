"""
propagator — cascade and rollup of checklist state over indented lines.

Public API:
  update(document)                  toggle at the caret and commit atomically
  plan_update(document, position)   → UpdateResult (edits only, nothing applied)
  set_subtree / set_node / rollup   building blocks of an action
  find_parent / find_children       indentation-implied tree lookup
  ActionKind, UpdateResult          result types
"""

from .engine import plan_update, rollup, set_node, set_subtree, update
from .tree   import find_children, find_parent
from .types  import ActionKind, UpdateResult

__all__ = [
    "update",
    "plan_update",
    "rollup",
    "set_node",
    "set_subtree",
    "find_children",
    "find_parent",
    "ActionKind",
    "UpdateResult",
]
