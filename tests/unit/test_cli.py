"""Tests for the annotext command line."""

from __future__ import annotations

import json
from io import StringIO
from typing import TYPE_CHECKING

import pytest
from rich.console import Console

from annotext.cli import _build_parser, _cmd_flatten, _cmd_render, main

if TYPE_CHECKING:
    from pathlib import Path


def _make_console() -> tuple[Console, StringIO]:
    buf = StringIO()
    return Console(file=buf, width=120, force_terminal=False), buf


@pytest.fixture
def page(tmp_path: Path) -> Path:
    path = tmp_path / "page.html"
    path.write_text(
        '<p>The cat <a href="https://example.org">sat</a><br>on the mat</p><hr>',
        encoding="utf-8",
    )
    return path


class TestParser:
    def test_render_args(self) -> None:
        args = _build_parser().parse_args(
            ["render", "f.html", "--keyword", "a", "--keyword", "b", "--json"]
        )
        assert args.command == "render"
        assert args.keyword == ["a", "b"]
        assert args.json

    def test_command_required(self) -> None:
        with pytest.raises(SystemExit):
            _build_parser().parse_args([])


class TestRender:
    def test_prints_document_text(self, page: Path) -> None:
        con, buf = _make_console()
        assert _cmd_render(page, console=con) == 0
        out = buf.getvalue()
        assert "The cat sat" in out
        assert "on the mat" in out

    def test_json_output(self, page: Path) -> None:
        con, buf = _make_console()
        assert _cmd_render(page, keywords=["the"], as_json=True, console=con) == 0
        runs = json.loads(buf.getvalue())
        assert "".join(r["text"] for r in runs) == "The cat sat\non the mat"
        highlighted = [
            r["text"]
            for r in runs
            if r["interaction"] and r["interaction"]["kind"] == "highlight"
        ]
        assert highlighted == ["The", "the"]

    def test_notes_table(self, page: Path, tmp_path: Path) -> None:
        hl_path = tmp_path / "hl.json"
        hl_path.write_text(
            json.dumps(
                [{"start": 4, "end": 7, "color": "#ffdc8e", "text": "cat", "note": "pet"}]
            ),
            encoding="utf-8",
        )
        con, buf = _make_console()
        assert _cmd_render(page, highlights_path=hl_path, console=con) == 0
        out = buf.getvalue()
        assert "Notes" in out
        assert "pet" in out

    def test_bad_highlight_file_exits_nonzero(self, page: Path, tmp_path: Path) -> None:
        hl_path = tmp_path / "hl.json"
        hl_path.write_text('[{"start": 0}]', encoding="utf-8")
        con, buf = _make_console()
        assert _cmd_render(page, highlights_path=hl_path, console=con) == 1
        assert "Error:" in buf.getvalue()

    def test_missing_document(self, tmp_path: Path) -> None:
        con, buf = _make_console()
        assert _cmd_render(tmp_path / "none.html", console=con) == 1
        assert "Error:" in buf.getvalue()


class TestFlatten:
    def test_prints_flattened_text(self, page: Path) -> None:
        con, buf = _make_console()
        assert _cmd_flatten(page, console=con) == 0
        assert buf.getvalue() == "The cat sat\non the mat\n"


class TestMain:
    def test_exit_code(self, page: Path, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["flatten", str(page)])
        assert exc_info.value.code == 0
