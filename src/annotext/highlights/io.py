"""Load highlight records from JSON.

Record format (one object per highlight)::

    {"start": 3, "end": 8, "color": "#ffdc8e", "text": "hello", "note": ""}

``note`` is optional.  Malformed records raise ``ValueError`` naming the
record index; the render engine itself never raises for bad ranges.
"""

from __future__ import annotations

import json
from collections.abc import Iterable, Mapping
from pathlib import Path
from typing import Any

from annotext.models import HighlightRange

_REQUIRED_FIELDS: dict[str, type] = {
    "start": int,
    "end": int,
    "color": str,
    "text": str,
}


def _record_to_highlight(index: int, record: Any) -> HighlightRange:
    if not isinstance(record, Mapping):
        msg = f"highlight {index}: expected an object, got {type(record).__name__}"
        raise ValueError(msg)  # noqa: TRY004 - input validation surfaces as ValueError

    for name, expected in _REQUIRED_FIELDS.items():
        if name not in record:
            msg = f"highlight {index}: missing field {name!r}"
            raise ValueError(msg)
        value = record[name]
        # bool is an int subclass; reject it for offsets
        if not isinstance(value, expected) or isinstance(value, bool):
            msg = (
                f"highlight {index}: field {name!r} must be "
                f"{expected.__name__}, got {type(value).__name__}"
            )
            raise ValueError(msg)

    note = record.get("note", "")
    if note is None:
        note = ""
    if not isinstance(note, str):
        msg = f"highlight {index}: field 'note' must be str"
        raise ValueError(msg)

    return HighlightRange(
        start_offset=record["start"],
        end_offset=record["end"],
        color_token=record["color"],
        annotated_text=record["text"],
        note=note,
    )


def highlights_from_records(records: Iterable[Any]) -> list[HighlightRange]:
    """Convert decoded JSON records into highlight ranges."""
    return [_record_to_highlight(i, rec) for i, rec in enumerate(records)]


def highlight_to_record(highlight: HighlightRange) -> dict[str, Any]:
    """Inverse of the record format, for saving created highlights."""
    return {
        "start": highlight.start_offset,
        "end": highlight.end_offset,
        "color": highlight.color_token,
        "text": highlight.annotated_text,
        "note": highlight.note,
    }


def load_highlights(path: Path) -> list[HighlightRange]:
    """Read a JSON array of highlight records from *path*.

    Raises:
        OSError: The file cannot be read.
        ValueError: The file is not a JSON array of valid records.
    """
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        msg = f"{path}: invalid JSON ({exc.msg} at line {exc.lineno})"
        raise ValueError(msg) from exc

    if not isinstance(data, list):
        msg = f"{path}: expected a JSON array of highlight records"
        raise ValueError(msg)  # noqa: TRY004 - input validation surfaces as ValueError

    return highlights_from_records(data)
