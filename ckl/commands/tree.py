"""Command: ckl tree — show the checklist tree inferred from indentation."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box
from rich.markup import escape

from analyzer import find_checkbox, find_summary, indent_depth, is_checked
from ckl._settings import get_settings
from document import Edit, Line, TextDocument
from propagator import find_children, find_parent, rollup

console = Console()


# ---------------------------------------------------------------------------
# Helpers
# ---------------------------------------------------------------------------

def _box_cell(line: Line, pending: list[Edit]) -> Text:
    checkbox = find_checkbox(line)
    if checkbox is None:
        return Text("-", style="dim")
    cell = Text("[x]" if is_checked(line, checkbox) else "[ ]")
    if any(e.span == checkbox for e in pending):
        cell.append(" !", style="bold yellow")
    return cell


def _summary_cell(line: Line, pending: list[Edit]) -> Text:
    summary = find_summary(line)
    if summary is None:
        return Text("-", style="dim")
    current = line.text[summary.start:summary.end]
    for e in pending:
        if e.span == summary and e.text != current:
            return Text(f"{current} → {e.text}", style="yellow")
    return Text(current)


def stale_edits(document: TextDocument, line: Line) -> list[Edit]:
    """Edits a rollup of `line` would make right now; empty when the line is up to date."""
    edits: list[Edit] = []
    rollup(document, line, 0, edits)
    return [e for e in edits if line.text[e.span.start:e.span.end] != e.text]


# ---------------------------------------------------------------------------
# Command logic
# ---------------------------------------------------------------------------

def run(args: argparse.Namespace) -> None:
    settings = get_settings()
    path = Path(args.file)
    if not path.exists():
        console.print(f"[red]File does not exist:[/red] {path}")
        raise SystemExit(1)

    try:
        document = TextDocument.from_path(path, encoding=settings.encoding)
    except (OSError, UnicodeError, LookupError) as e:
        console.print(f"[red]Cannot read[/red] {escape(str(path))} [red](encoding={settings.encoding}):[/red] {escape(str(e))}")
        raise SystemExit(1)

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LINE",    justify="right", no_wrap=True, style="dim")
    table.add_column("DEPTH",   justify="right", no_wrap=True)
    table.add_column("BOX",     justify="center", no_wrap=True)
    table.add_column("SUMMARY", justify="center", no_wrap=True)
    table.add_column("PARENT",  justify="right", no_wrap=True, style="dim")
    table.add_column("KIDS",    justify="right", no_wrap=True)
    table.add_column("TEXT",    no_wrap=False, max_width=60)

    rows = 0
    stale = 0
    for line in document.lines():
        if not line.text.strip():
            continue
        if not args.all and find_checkbox(line) is None and find_summary(line) is None:
            continue

        pending = stale_edits(document, line)
        if pending:
            stale += 1
        parent = find_parent(document, line)
        table.add_row(
            str(line.index + 1),
            str(indent_depth(line)),
            _box_cell(line, pending),
            _summary_cell(line, pending),
            str(parent.index + 1) if parent is not None else "-",
            str(len(find_children(document, line))),
            Text(line.text.strip()[:80]),
        )
        rows += 1

    if rows == 0:
        console.print("[yellow]No checklist items.[/yellow]")
        return

    console.print()
    console.print(table)
    console.print(f"  [dim]{rows} items[/dim]")
    if stale:
        console.print(f"  [yellow]{stale} items out of date with their children[/yellow]\n")
    else:
        console.print()


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "tree",
        help="Shows the checklist tree inferred from indentation.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Lists checklist items with their depth, checkbox, summary, parent line and
number of direct children. Items whose checkbox or summary no longer match
their children are highlighted.

Examples:
  ckl tree todo.txt
  ckl tree todo.txt --all
        """,
    )
    p.add_argument(
        "file",
        metavar="FILE",
        help="Text file with the checklist.",
    )
    p.add_argument(
        "--all",
        action="store_true",
        help="Include non-blank lines without a checkbox or summary.",
    )
    p.set_defaults(func=run)
