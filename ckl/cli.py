"""
ckl — command line tool for indented checklists in plain text files.

Usage:
  ckl <command> [options]

Commands:
  toggle   Toggles the checkbox (or recounts the summary) at LINE:COL and saves the file.
  tree     Shows the checklist tree inferred from indentation.

Environment:
  CKL_ENCODING   file encoding (default: utf-8)
  CKL_NEWLINE    lf | crlf, forces the newline style when saving
"""

from __future__ import annotations

import argparse
import sys

if hasattr(sys.stdout, "reconfigure"):
    sys.stdout.reconfigure(encoding="utf-8", errors="replace")
if hasattr(sys.stderr, "reconfigure"):
    sys.stderr.reconfigure(encoding="utf-8", errors="replace")

from ckl.commands import toggle as cmd_toggle
from ckl.commands import tree as cmd_tree


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="ckl",
        description="ckl — hierarchical checklists in plain text.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )
    parser.add_argument(
        "--version", action="version", version="ckl 0.1.0"
    )

    subparsers = parser.add_subparsers(
        title="commands",
        metavar="<command>",
        dest="command",
    )
    subparsers.required = True

    cmd_toggle.add_parser(subparsers)
    cmd_tree.add_parser(subparsers)

    return parser


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    args.func(args)


if __name__ == "__main__":
    main()
