"""Resolve overlapping highlights into disjoint segments of one text leaf.

Event-sweep algorithm: every surviving range contributes a start and an end
boundary; boundaries are sorted by position and swept left to right while an
active set tracks which ranges cover the current position.  Each stretch of
text between consecutive distinct positions becomes one segment carrying the
winning highlight of the active set.

Worked example (``"The quick brown fox"``, ranges ``[4,15)`` and ``[10,19)``):

    "The "    no highlight
    "quick "  [4,15)
    "brown"   [10,15) wins (greater start)
    " fox"    [10,19)
"""

# Pattern: Functional Core

from __future__ import annotations

from collections.abc import Iterable, Sequence
from dataclasses import replace

from annotext.models import Boundary, BoundaryKind, HighlightRange, Segment


def clip_to_leaf(
    highlights: Iterable[HighlightRange],
    leaf_start: int,
    leaf_length: int,
) -> list[HighlightRange]:
    """Translate global ranges intersecting a leaf into leaf-local ranges.

    Ranges are clipped to ``[0, leaf_length)``.  Ranges with a negative start
    or with ``start_offset >= end_offset`` are dropped, as are ranges that do
    not intersect the leaf at all.
    """
    if leaf_length <= 0:
        return []
    leaf_end = leaf_start + leaf_length
    local: list[HighlightRange] = []
    for hl in highlights:
        if hl.start_offset < 0 or hl.start_offset >= hl.end_offset:
            continue
        if hl.end_offset <= leaf_start or hl.start_offset >= leaf_end:
            continue
        local.append(
            replace(
                hl,
                start_offset=max(hl.start_offset, leaf_start) - leaf_start,
                end_offset=min(hl.end_offset, leaf_end) - leaf_start,
            )
        )
    return local


def _build_boundaries(
    highlights: Sequence[HighlightRange],
    length: int,
) -> list[Boundary]:
    boundaries: list[Boundary] = []
    for owner, hl in enumerate(highlights):
        start = max(hl.start_offset, 0)
        end = min(hl.end_offset, length)
        if start >= end or start >= length:
            continue
        boundaries.append(Boundary(start, BoundaryKind.START, owner))
        boundaries.append(Boundary(end, BoundaryKind.END, owner))

    # Start before end at the same index so that adjacent ranges hand over
    # without a gap.  sort() is stable, so input order breaks remaining ties.
    boundaries.sort(key=lambda b: (b.index, 0 if b.kind is BoundaryKind.START else 1))
    return boundaries


def _winner(
    active: dict[int, HighlightRange],
) -> HighlightRange | None:
    """Greatest start wins; ties go to the earliest-inserted range."""
    if not active:
        return None
    return max(active.values(), key=lambda hl: hl.start_offset)


def resolve_segments(
    text: str,
    highlights: Sequence[HighlightRange],
) -> list[Segment]:
    """Split *text* into segments, each tagged with its winning highlight.

    Args:
        text: The leaf's text.
        highlights: Leaf-local ranges (see :func:`clip_to_leaf`).

    Returns:
        Non-empty segments that cover *text* exactly once, in order.  Empty
        *text* yields an empty list.
    """
    if not text:
        return []

    boundaries = _build_boundaries(highlights, len(text))
    if not boundaries:
        return [Segment(text)]

    # Keyed by sweep-local identity: equal-valued ranges are distinct owners.
    active: dict[int, HighlightRange] = {}
    segments: list[Segment] = []
    current = 0

    for boundary in boundaries:
        if boundary.index > current:
            segments.append(Segment(text[current : boundary.index], _winner(active)))
            current = boundary.index
        if boundary.kind is BoundaryKind.START:
            active[boundary.owner] = highlights[boundary.owner]
        else:
            active.pop(boundary.owner, None)

    if current < len(text):
        segments.append(Segment(text[current:], _winner(active)))

    return segments
