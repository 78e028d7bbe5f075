"""Highlight creation boundary.

The engine never drives a selection toolbar or a colour/note sheet.  It only
packages what such UI needs: the selected slice with offsets in flattened-text
coordinates, and the conversion of a completed request into a
:class:`HighlightRange`.
"""

from __future__ import annotations

import re
from typing import Any

from annotext.models import HighlightRange, HighlightRequest

# Default colour choices offered for new highlights, keyed by display order.
HIGHLIGHT_PALETTE: dict[str, str] = {
    "1": "#ffdc8e",  # amber
    "2": "#fcb495",  # salmon
    "3": "#c0e09b",  # green
    "4": "#8ae1eb",  # cyan
}

DEFAULT_HIGHLIGHT_COLOR = HIGHLIGHT_PALETTE["1"]

_WHITESPACE = re.compile(r"\s+")


def is_single_word(text: str) -> bool:
    """True when *text* contains exactly one whitespace-separated word."""
    return len(_WHITESPACE.split(text.strip())) == 1


def build_highlight_request(
    full_text: str,
    start: int,
    end: int,
    *,
    page_number: int | None = None,
    metadata: Any = None,
) -> HighlightRequest:
    """Package a selection of *full_text* for highlight creation.

    Reversed selections (``start > end``) are normalised and both ends are
    clamped to ``[0, len(full_text)]``.  Offsets are in the same coordinates
    as the render output, so a presentation layer can pass selection
    positions straight through.
    """
    if start > end:
        start, end = end, start
    start = min(max(start, 0), len(full_text))
    end = min(max(end, 0), len(full_text))
    return HighlightRequest(
        selected_text=full_text[start:end],
        start_offset=start,
        end_offset=end,
        full_text=full_text,
        page_number=page_number,
        metadata=metadata,
    )


def request_to_highlight(
    request: HighlightRequest,
    color_token: str = DEFAULT_HIGHLIGHT_COLOR,
    note: str = "",
) -> HighlightRange:
    """Turn a completed request into a highlight range."""
    return HighlightRange(
        start_offset=request.start_offset,
        end_offset=request.end_offset,
        color_token=color_token,
        annotated_text=request.selected_text,
        note=note,
    )
