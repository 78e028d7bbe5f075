"""Small builders shared by the unit tests."""

from __future__ import annotations

from collections.abc import Iterable

from annotext.models import HighlightRange, RenderRun


def make_hl(
    start: int,
    end: int,
    text: str = "",
    color: str = "#ffdc8e",
    note: str = "",
) -> HighlightRange:
    """Build a highlight range with test defaults."""
    return HighlightRange(
        start_offset=start,
        end_offset=end,
        color_token=color,
        annotated_text=text,
        note=note,
    )


def joined(runs: Iterable[RenderRun]) -> str:
    """Concatenate run texts."""
    return "".join(r.text for r in runs)
