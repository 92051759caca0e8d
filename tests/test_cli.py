from __future__ import annotations

import argparse

import pytest

from ckl.cli import build_parser, main
from ckl.commands.toggle import parse_position
from document import Position, TextDocument


def test_parse_position():
    assert parse_position("3:5") == Position(2, 4)
    assert parse_position("7") == Position(6, 0)
    with pytest.raises(argparse.ArgumentTypeError):
        parse_position("0:1")
    with pytest.raises(argparse.ArgumentTypeError):
        parse_position("a:b")


def test_subcommand_is_required():
    with pytest.raises(SystemExit):
        build_parser().parse_args([])


def test_toggle_writes_file(checklist_file, capsys):
    main(["toggle", str(checklist_file), "3:4"])

    assert checklist_file.read_text(encoding="utf-8") == (
        "Release [1/2]\n"
        "  [ ] write notes\n"
        "  [X] tag build [2/2]\n"
        "    [X] bump version\n"
        "    [X] push tag\n"
    )
    assert "toggle" in capsys.readouterr().out


def test_toggle_dry_run_leaves_file(checklist_file, capsys):
    before = checklist_file.read_text(encoding="utf-8")
    main(["toggle", str(checklist_file), "4:6", "--dry-run"])

    assert checklist_file.read_text(encoding="utf-8") == before
    out = capsys.readouterr().out
    assert "dry run" in out
    assert "2 edits" in out


def test_toggle_on_summary_recounts(checklist_file):
    main(["toggle", str(checklist_file), "4:6"])
    main(["toggle", str(checklist_file), "1:10"])

    lines = checklist_file.read_text(encoding="utf-8").split("\n")
    assert lines[0] == "Release [0/2]"
    assert lines[2] == "  [ ] tag build [1/2]"


def test_toggle_line_outside_file(checklist_file, capsys):
    with pytest.raises(SystemExit) as exc:
        main(["toggle", str(checklist_file), "40:1"])
    assert exc.value.code == 1
    assert "outside the file" in capsys.readouterr().out


def test_toggle_missing_file(tmp_path, capsys):
    with pytest.raises(SystemExit):
        main(["toggle", str(tmp_path / "nope.txt"), "1:1"])
    assert "does not exist" in capsys.readouterr().out


def test_tree_lists_items(checklist_file, capsys):
    main(["tree", str(checklist_file)])
    out = capsys.readouterr().out
    assert "bump version" in out
    assert "5 items" in out
    assert "out of date" not in out


def test_tree_flags_stale_summary(tmp_path, capsys):
    path = tmp_path / "stale.txt"
    path.write_text("[ ] p [0/2]\n  [x] a\n  [ ] b\n", encoding="utf-8")
    main(["tree", str(path)])
    out = capsys.readouterr().out
    assert "0/2 → 1/2" in out
    assert "1 items out of date" in out


def test_newline_setting(checklist_file, monkeypatch):
    monkeypatch.setenv("CKL_NEWLINE", "crlf")
    main(["toggle", str(checklist_file), "2:4"])
    data = checklist_file.read_bytes()
    assert data.startswith(b"Release [1/2]\r\n  [X] write notes\r\n")


def test_toggle_undecodable_file(tmp_path, capsys):
    path = tmp_path / "bad.txt"
    path.write_bytes(b"[ ] a \xff\n")
    with pytest.raises(SystemExit) as exc:
        main(["toggle", str(path), "1:2"])
    assert exc.value.code == 1
    assert "Cannot read" in capsys.readouterr().out
    assert path.read_bytes() == b"[ ] a \xff\n"


def test_unknown_encoding_setting(checklist_file, monkeypatch, capsys):
    monkeypatch.setenv("CKL_ENCODING", "no-such-codec")
    with pytest.raises(SystemExit) as exc:
        main(["tree", str(checklist_file)])
    assert exc.value.code == 1
    assert "Cannot read" in capsys.readouterr().out


def test_toggle_write_failure(checklist_file, monkeypatch, capsys):
    before = checklist_file.read_text(encoding="utf-8")

    def _fail(self, path, encoding="utf-8", newline=None):
        raise PermissionError(13, "Permission denied")

    monkeypatch.setattr(TextDocument, "save", _fail)
    with pytest.raises(SystemExit) as exc:
        main(["toggle", str(checklist_file), "2:4"])
    assert exc.value.code == 1
    assert "Cannot write" in capsys.readouterr().out
    assert checklist_file.read_text(encoding="utf-8") == before
