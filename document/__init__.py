"""
document — line-addressable text documents and edit batches.

Public API:
  Line, Position, TokenSpan, Edit   value types
  Document                          protocol consumed by the propagator
  TextDocument                      in-memory implementation (CLI, tests)
  EditError, ErrorCode              raised when a batch cannot be applied
"""

from .types  import Edit, Line, Position, TokenSpan
from .buffer import Document, TextDocument
from .errors import EditError, ErrorCode

__all__ = [
    "Edit",
    "Line",
    "Position",
    "TokenSpan",
    "Document",
    "TextDocument",
    "EditError",
    "ErrorCode",
]
