"""Highlight reanchoring, overlap resolution, keyword search and creation."""

from annotext.highlights.io import (
    highlight_to_record,
    highlights_from_records,
    load_highlights,
)
from annotext.highlights.keywords import (
    find_all_keyword_highlights,
    find_keyword_highlights,
)
from annotext.highlights.reanchor import reanchor_highlight, reanchor_highlights
from annotext.highlights.regions import clip_to_leaf, resolve_segments
from annotext.highlights.selection import (
    HIGHLIGHT_PALETTE,
    build_highlight_request,
    is_single_word,
    request_to_highlight,
)

__all__ = [
    "HIGHLIGHT_PALETTE",
    "build_highlight_request",
    "clip_to_leaf",
    "find_all_keyword_highlights",
    "find_keyword_highlights",
    "highlight_to_record",
    "highlights_from_records",
    "is_single_word",
    "load_highlights",
    "reanchor_highlight",
    "reanchor_highlights",
    "request_to_highlight",
    "resolve_segments",
]
