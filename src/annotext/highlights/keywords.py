"""Synthesised search-match highlights.

A keyword is matched case-insensitively as a plain substring (no word
boundaries, no fuzzy matching), left to right and without overlaps.  Matching
runs on the document text rather than a lower-cased copy so offsets stay
exact even where case folding changes string length.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from annotext.models import HighlightRange

logger = logging.getLogger(__name__)

SEARCH_HIGHLIGHT_COLOR = "#ffff00"


def find_keyword_highlights(
    text: str,
    keyword: str,
    color_token: str = SEARCH_HIGHLIGHT_COLOR,
) -> list[HighlightRange]:
    """Return one highlight per case-insensitive match of *keyword* in *text*.

    Empty keywords match nothing.
    """
    if not keyword:
        return []

    pattern = re.compile(re.escape(keyword), re.IGNORECASE)
    matches = [
        HighlightRange(
            start_offset=m.start(),
            end_offset=m.end(),
            color_token=color_token,
            annotated_text=m.group(),
        )
        for m in pattern.finditer(text)
    ]
    logger.debug("Keyword %r matched %d time(s)", keyword, len(matches))
    return matches


def find_all_keyword_highlights(
    text: str,
    keywords: Iterable[str],
    color_token: str = SEARCH_HIGHLIGHT_COLOR,
) -> list[HighlightRange]:
    """Scan *text* once per keyword and concatenate the matches.

    Matches of different keywords may overlap; the renderer's normal
    precedence rule decides which one is shown.
    """
    ranges: list[HighlightRange] = []
    for keyword in keywords:
        ranges.extend(find_keyword_highlights(text, keyword, color_token))
    return ranges
