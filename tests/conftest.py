from __future__ import annotations

from pathlib import Path

import pytest

from document import Position, TextDocument


@pytest.fixture
def make_doc():
    """Builds a TextDocument from literal lines, optionally with the caret placed."""
    def _make(*lines: str, caret: Position | None = None) -> TextDocument:
        return TextDocument(list(lines), selection=caret)
    return _make


@pytest.fixture
def checklist_file(tmp_path: Path) -> Path:
    path = tmp_path / "todo.txt"
    path.write_text(
        "Release [0/2]\n"
        "  [ ] write notes\n"
        "  [ ] tag build [0/2]\n"
        "    [ ] bump version\n"
        "    [ ] push tag\n",
        encoding="utf-8",
    )
    return path
