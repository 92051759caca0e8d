"""Command: ckl toggle — toggle at LINE:COL and save the file."""

from __future__ import annotations

import argparse
from pathlib import Path

from rich.console import Console
from rich.table import Table
from rich.text import Text
from rich import box
from rich.markup import escape

from ckl._settings import get_settings
from document import EditError, Position, TextDocument
from propagator import ActionKind, UpdateResult, plan_update, update

console = Console()


# ---------------------------------------------------------------------------
# Arguments
# ---------------------------------------------------------------------------

def parse_position(raw: str) -> Position:
    """Parses "12:5" (1-based, as editors show it) into Position(11, 4)."""
    line_str, sep, col_str = raw.partition(":")
    try:
        line = int(line_str)
        column = int(col_str) if sep else 1
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected LINE:COL, got {raw!r}") from None
    if line < 1 or column < 1:
        raise argparse.ArgumentTypeError(f"LINE and COL are 1-based, got {raw!r}")
    return Position(line - 1, column - 1)


# ---------------------------------------------------------------------------
# Terminal output
# ---------------------------------------------------------------------------

def _show_edits(result: UpdateResult, document: TextDocument) -> None:
    if not result.edits:
        console.print("[yellow]No edits.[/yellow]")
        return

    table = Table(
        box=box.SIMPLE_HEAD,
        show_header=True,
        header_style="bold white",
        row_styles=["", "dim"],
        expand=False,
    )
    table.add_column("LINE", justify="right", no_wrap=True, style="dim")
    table.add_column("COLS", justify="center", no_wrap=True)
    table.add_column("OLD",  no_wrap=True, style="red")
    table.add_column("NEW",  no_wrap=True, style="bold green")

    for edit in result.edits:
        span = edit.span
        old = document.line_at(span.line).text[span.start:span.end]
        table.add_row(
            str(span.line + 1),
            f"{span.start + 1}–{span.end + 1}",
            Text(repr(old)),
            Text(repr(edit.text)),
        )

    console.print()
    console.print(table)


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
    position: Position = args.position
    document.set_caret(position)

    # Snapshot for the edits table: spans refer to the pre-edit text.
    before = TextDocument.from_text(document.text)

    if args.dry_run:
        result = plan_update(document, position)
    else:
        try:
            result = update(document)
        except EditError as e:
            console.print(f"[red]Edits rejected ({e.code}):[/red] {e.message}")
            raise SystemExit(1)

    if result.action == ActionKind.NONE:
        console.print(
            f"[yellow]Line {position.line + 1} is outside the file "
            f"({document.line_count} lines).[/yellow]"
        )
        raise SystemExit(1)

    if result.applied:
        try:
            document.save(path, encoding=settings.encoding, newline=settings.newline)
        except (OSError, UnicodeError, LookupError) as e:
            console.print(f"[red]Cannot write[/red] {escape(str(path))}[red]:[/red] {escape(str(e))}")
            raise SystemExit(1)
        console.print(
            f"[green]{result.action}:[/green] {len(result.edits)} edits written to [bold]{path}[/bold]"
        )
    else:
        console.print(f"[cyan]{result.action} (dry run):[/cyan] {len(result.edits)} edits")

    if args.show or args.dry_run:
        _show_edits(result, before)


# ---------------------------------------------------------------------------
# Parser registration
# ---------------------------------------------------------------------------

def add_parser(subparsers: argparse._SubParsersAction) -> None:  # type: ignore[type-arg]
    p = subparsers.add_parser(
        "toggle",
        help="Toggles the checkbox or recounts the summary at LINE:COL.",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        description="""
Toggles the checkbox under LINE:COL, cascading the new state to all nested
items and recounting the parent's [checked/total] summary. With the caret on
a summary the line's children are recounted instead; anywhere else a line
break is inserted.

Examples:
  ckl toggle todo.txt 3:4
  ckl toggle todo.txt 3:4 --show
  ckl toggle todo.txt 1:12 --dry-run
        """,
    )
    p.add_argument(
        "file",
        metavar="FILE",
        help="Text file with the checklist.",
    )
    p.add_argument(
        "position",
        metavar="LINE:COL",
        type=parse_position,
        help="Caret position, 1-based (COL defaults to 1).",
    )
    p.add_argument(
        "--dry-run",
        action="store_true",
        help="Show the edits without writing the file.",
    )
    p.add_argument(
        "--show",
        action="store_true",
        help="Print the table of applied edits.",
    )
    p.set_defaults(func=run)
