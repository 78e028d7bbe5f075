"""Tests for loading highlight records from JSON."""

from __future__ import annotations

import json
from typing import TYPE_CHECKING

import pytest

from annotext.highlights.io import (
    highlight_to_record,
    highlights_from_records,
    load_highlights,
)
from tests.helpers.factories import make_hl

if TYPE_CHECKING:
    from pathlib import Path


class TestHighlightsFromRecords:
    def test_valid_records(self) -> None:
        (hl,) = highlights_from_records(
            [{"start": 3, "end": 8, "color": "#ffdc8e", "text": "hello", "note": "n"}]
        )
        assert hl == make_hl(3, 8, "hello", note="n")

    def test_note_optional(self) -> None:
        (hl,) = highlights_from_records(
            [{"start": 0, "end": 1, "color": "#ffffff", "text": "a"}]
        )
        assert hl.note == ""

    def test_null_note_treated_as_empty(self) -> None:
        (hl,) = highlights_from_records(
            [{"start": 0, "end": 1, "color": "#ffffff", "text": "a", "note": None}]
        )
        assert hl.note == ""

    def test_missing_field_names_record(self) -> None:
        with pytest.raises(ValueError, match=r"highlight 1: missing field 'text'"):
            highlights_from_records(
                [
                    {"start": 0, "end": 1, "color": "#fff000", "text": "a"},
                    {"start": 0, "end": 1, "color": "#fff000"},
                ]
            )

    def test_wrong_type_rejected(self) -> None:
        with pytest.raises(ValueError, match="'start' must be int"):
            highlights_from_records(
                [{"start": "0", "end": 1, "color": "#fff000", "text": "a"}]
            )

    def test_bool_offset_rejected(self) -> None:
        with pytest.raises(ValueError, match="'end' must be int"):
            highlights_from_records(
                [{"start": 0, "end": True, "color": "#fff000", "text": "a"}]
            )

    def test_non_object_rejected(self) -> None:
        with pytest.raises(ValueError, match="expected an object"):
            highlights_from_records([[0, 1]])

    def test_record_round_trip_fields(self) -> None:
        hl = make_hl(1, 4, "abc", note="x")
        assert highlights_from_records([highlight_to_record(hl)]) == [hl]


class TestLoadHighlights:
    def test_reads_file(self, tmp_path: Path) -> None:
        path = tmp_path / "hl.json"
        path.write_text(
            json.dumps([{"start": 0, "end": 3, "color": "#ffff00", "text": "the"}]),
            encoding="utf-8",
        )
        assert load_highlights(path) == [make_hl(0, 3, "the", color="#ffff00")]

    def test_invalid_json(self, tmp_path: Path) -> None:
        path = tmp_path / "hl.json"
        path.write_text("[{", encoding="utf-8")
        with pytest.raises(ValueError, match="invalid JSON"):
            load_highlights(path)

    def test_top_level_must_be_array(self, tmp_path: Path) -> None:
        path = tmp_path / "hl.json"
        path.write_text("{}", encoding="utf-8")
        with pytest.raises(ValueError, match="JSON array"):
            load_highlights(path)

    def test_missing_file_raises_oserror(self, tmp_path: Path) -> None:
        with pytest.raises(OSError):
            load_highlights(tmp_path / "absent.json")
