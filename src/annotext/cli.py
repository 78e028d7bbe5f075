"""Command line interface.

Usage:
    annotext render page.html --highlights saved.json --keyword cat
    annotext render page.html --json
    annotext flatten page.html
"""

from __future__ import annotations

import argparse
import sys
from pathlib import Path

from rich.console import Console
from rich.markup import escape
from rich.table import Table

from annotext import __version__, _setup_logging
from annotext.config import get_settings
from annotext.highlights.io import load_highlights
from annotext.markup import flatten_text, parse_markup
from annotext.render.console import collect_notes, runs_to_renderables
from annotext.render.renderer import render_tree
from annotext.render.serialise import runs_to_json

console = Console()


def _build_parser() -> argparse.ArgumentParser:
    """Build argparse parser for annotext subcommands."""
    parser = argparse.ArgumentParser(
        prog="annotext",
        description="Render HTML with overlapping highlights as styled text.",
    )
    parser.add_argument("--version", action="version", version=__version__)
    parser.add_argument(
        "--log", action="store_true", help="Write logs to the configured log dir"
    )
    sub = parser.add_subparsers(dest="command", required=True)

    # render
    render_p = sub.add_parser("render", help="Render a document with highlights")
    render_p.add_argument("file", type=Path, help="HTML file to render")
    render_p.add_argument(
        "--highlights", type=Path, default=None, help="JSON array of highlights"
    )
    render_p.add_argument(
        "--keyword",
        action="append",
        default=[],
        help="Search keyword to highlight (repeatable)",
    )
    render_p.add_argument(
        "--json", action="store_true", help="Print render runs as JSON"
    )

    # flatten
    flatten_p = sub.add_parser("flatten", help="Print the flattened plain text")
    flatten_p.add_argument("file", type=Path, help="HTML file")

    return parser


def _cmd_render(
    file: Path,
    *,
    highlights_path: Path | None = None,
    keywords: list[str] | None = None,
    as_json: bool = False,
    console: Console | None = None,
) -> int:
    """Render a document to the console. Returns the process exit code."""
    con = console or globals()["console"]
    try:
        markup = file.read_text(encoding="utf-8")
        highlights = load_highlights(highlights_path) if highlights_path else []
    except (OSError, ValueError) as exc:
        con.print(f"[red]Error:[/] {escape(str(exc))}")
        return 1

    doc = render_tree(
        parse_markup(markup),
        highlights,
        keywords=keywords or [],
        config=get_settings().render,
    )

    if as_json:
        con.print_json(runs_to_json(doc.runs))
        return 0

    for renderable in runs_to_renderables(doc.runs):
        con.print(renderable)

    notes = collect_notes(doc.runs)
    if notes:
        table = Table(title="Notes")
        table.add_column("Highlighted text", style="cyan")
        table.add_column("Note")
        for payload in notes:
            table.add_row(escape(payload.text), escape(payload.note))
        con.print(table)
    return 0


def _cmd_flatten(file: Path, *, console: Console | None = None) -> int:
    """Print the flattened text of a document."""
    con = console or globals()["console"]
    try:
        markup = file.read_text(encoding="utf-8")
    except OSError as exc:
        con.print(f"[red]Error:[/] {escape(str(exc))}")
        return 1
    con.print(flatten_text(parse_markup(markup)), markup=False, highlight=False)
    return 0


def main(argv: list[str] | None = None) -> None:
    """Entry point for the ``annotext`` command."""
    args = _build_parser().parse_args(argv)

    if args.log:
        settings = get_settings()
        _setup_logging(settings.app.log_dir, settings.app.log_level)

    if args.command == "render":
        code = _cmd_render(
            args.file,
            highlights_path=args.highlights,
            keywords=args.keyword,
            as_json=args.json,
        )
    else:
        code = _cmd_flatten(args.file)
    sys.exit(code)
