"""Repair stale highlight offsets against the current flattened text.

Highlights are often recorded against an earlier snapshot of a document.
When the recorded text no longer sits at the recorded offsets, the range is
moved to the first occurrence of its text at or after a small window before
the old start.  This is a narrow best-effort search, not a fuzzy match: a
highlight whose text cannot be found is returned as-is and may render over
whatever now occupies its offsets.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from dataclasses import replace

from annotext.models import HighlightRange

logger = logging.getLogger(__name__)

DEFAULT_WINDOW = 10


def reanchor_highlight(
    highlight: HighlightRange,
    text: str,
    window: int = DEFAULT_WINDOW,
) -> HighlightRange:
    """Return *highlight* with offsets consistent with *text*.

    Args:
        highlight: The recorded range.
        text: The flattened document text at render time.
        window: How many characters before the recorded start the search
            for ``annotated_text`` may begin.

    Returns:
        The same object if its offsets already cover ``annotated_text`` (or
        the text cannot be found); otherwise a new range at the first
        occurrence found.
    """
    start = highlight.start_offset
    safe_end = min(highlight.end_offset, len(text))
    if 0 <= start <= safe_end and text[start:safe_end] == highlight.annotated_text:
        return highlight

    search_from = max(0, start - window)
    found = text.find(highlight.annotated_text, search_from)
    if found == -1:
        logger.debug(
            "Highlight %r not found at or after %d; keeping stale offsets %d-%d",
            highlight.annotated_text,
            search_from,
            highlight.start_offset,
            highlight.end_offset,
        )
        return highlight

    logger.debug(
        "Reanchored highlight %d-%d to %d-%d",
        highlight.start_offset,
        highlight.end_offset,
        found,
        found + len(highlight.annotated_text),
    )
    return replace(
        highlight,
        start_offset=found,
        end_offset=found + len(highlight.annotated_text),
    )


def reanchor_highlights(
    highlights: Iterable[HighlightRange],
    text: str,
    window: int = DEFAULT_WINDOW,
) -> list[HighlightRange]:
    """Reanchor every highlight in order.  See :func:`reanchor_highlight`."""
    return [reanchor_highlight(hl, text, window) for hl in highlights]
