"""Tests for stale highlight reanchoring."""

from __future__ import annotations

from annotext.highlights.reanchor import reanchor_highlight, reanchor_highlights
from tests.helpers.factories import make_hl


class TestReanchorHighlight:
    def test_matching_range_returned_unchanged(self) -> None:
        hl = make_hl(3, 8, "hello", note="n")
        assert reanchor_highlight(hl, "AAAhelloBBB") is hl

    def test_stale_range_relocated(self) -> None:
        hl = make_hl(0, 5, "hello", color="#112233", note="keep me")
        result = reanchor_highlight(hl, "AAAhelloBBB")
        assert (result.start_offset, result.end_offset) == (3, 8)
        assert result.color_token == "#112233"
        assert result.note == "keep me"
        assert result.annotated_text == "hello"

    def test_end_past_text_is_clamped_for_comparison(self) -> None:
        hl = make_hl(3, 50, "lo")
        assert reanchor_highlight(hl, "hello") is hl

    def test_search_starts_within_window_before_start(self) -> None:
        text = "x" * 20 + "cat" + "y" * 20
        hl = make_hl(25, 28, "cat")
        result = reanchor_highlight(hl, text, window=10)
        assert (result.start_offset, result.end_offset) == (20, 23)

    def test_occurrence_before_window_is_not_found(self) -> None:
        # "cat" sits at 0; the search starts at 30 - 10 = 20
        text = "cat" + "-" * 40
        hl = make_hl(30, 33, "cat")
        assert reanchor_highlight(hl, text, window=10) is hl

    def test_first_occurrence_after_window_start_wins(self) -> None:
        text = "cat cat cat"
        hl = make_hl(9, 12, "cat")
        result = reanchor_highlight(hl, text, window=2)
        assert result.start_offset == 8

    def test_missing_text_fails_open(self) -> None:
        hl = make_hl(0, 5, "zebra")
        assert reanchor_highlight(hl, "AAAhelloBBB") is hl

    def test_negative_start_is_searched_from_zero(self) -> None:
        hl = make_hl(-4, 1, "hello")
        result = reanchor_highlight(hl, "AAAhelloBBB")
        assert (result.start_offset, result.end_offset) == (3, 8)

    def test_zero_window_only_searches_forward(self) -> None:
        hl = make_hl(4, 9, "hello")
        assert reanchor_highlight(hl, "AAAhelloBBB", window=0) is hl


class TestReanchorHighlights:
    def test_order_preserved(self) -> None:
        text = "AAAhelloBBBworld"
        stale = make_hl(0, 5, "hello")
        good = make_hl(11, 16, "world")
        result = reanchor_highlights([good, stale], text)
        assert result[0] is good
        assert (result[1].start_offset, result[1].end_offset) == (3, 8)

    def test_idempotent(self) -> None:
        text = "AAAhelloBBB"
        once = reanchor_highlights([make_hl(0, 5, "hello")], text)
        twice = reanchor_highlights(once, text)
        assert twice == once
        assert twice[0] is once[0]
