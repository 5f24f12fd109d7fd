"""
Tests for vercmp.segments module.

Tests segment ordering including:
- Same-type comparison
- Cross-type priority ranking
- ExtendedText sub-parser and keyword-aware ordering
- Type-matched empty values
"""

from __future__ import annotations

import pytest

from vercmp.segments import (
    EMPTY,
    Epoch,
    ExtendedText,
    Integer,
    SegmentKind,
    Text,
    compare_segments,
)


class TestSameTypeComparison:
    """Tests for comparing segments of the same type."""

    def test_integer_by_value(self):
        """Test numeric comparison (not lexicographic)."""
        assert compare_segments(Integer(2), Integer(10)) == -1
        assert compare_segments(Integer(10), Integer(2)) == 1
        assert compare_segments(Integer(7), Integer(7)) == 0

    def test_epoch_by_value(self):
        """Test epoch comparison by value."""
        assert compare_segments(Epoch(0), Epoch(0)) == 0
        assert compare_segments(Epoch(0), Epoch(1)) == -1

    def test_text_lexicographic(self):
        """Test text comparison in codepoint order."""
        assert compare_segments(Text("alpha"), Text("beta")) == -1
        assert compare_segments(Text("rc"), Text("beta")) == 1
        assert compare_segments(Text("B"), Text("a")) == -1  # uppercase first
        assert compare_segments(Text("x"), Text("x")) == 0

    def test_empty_equals_empty(self):
        """Test that two sentinels are equal."""
        assert compare_segments(EMPTY, EMPTY) == 0


class TestCrossTypeComparison:
    """Tests for the type-priority ranking."""

    def test_epoch_outranks_integer(self):
        """Test that any epoch outranks any integer."""
        assert compare_segments(Epoch(0), Integer(1)) == 1
        assert compare_segments(Integer(1000), Epoch(0)) == -1

    def test_integer_outranks_text(self):
        """Test that numbers outrank text regardless of value."""
        assert compare_segments(Integer(0), Text("zzz")) == 1
        assert compare_segments(Text("zzz"), Integer(0)) == -1

    def test_text_outranks_extended(self):
        """Test that plain text outranks extended text."""
        assert compare_segments(Text("a"), ExtendedText(9, "post", 9)) == 1

    def test_everything_outranks_empty(self):
        """Test that the sentinel ranks lowest."""
        for seg in (Epoch(0), Integer(0), Text(""), ExtendedText(0, "", 0)):
            assert compare_segments(seg, EMPTY) == 1
            assert compare_segments(EMPTY, seg) == -1

    def test_ranking_order(self):
        """Test the full ranking is strictly descending."""
        ranked = [Epoch(0), Integer(0), Text(""), ExtendedText(0, "", 0), EMPTY]
        for i, higher in enumerate(ranked):
            for lower in ranked[i + 1 :]:
                assert compare_segments(higher, lower) == 1
                assert compare_segments(lower, higher) == -1

    def test_kind_values(self):
        """Test that lower kind values mean higher priority."""
        assert SegmentKind.EPOCH < SegmentKind.INTEGER < SegmentKind.TEXT
        assert SegmentKind.TEXT < SegmentKind.EXTENDED_TEXT < SegmentKind.EMPTY


class TestExtendedText:
    """Tests for ExtendedText parsing and ordering."""

    def test_parse_full(self):
        """Test digits/letters/digits decomposition."""
        assert ExtendedText.parse("3dev1") == ExtendedText(3, "dev", 1)
        assert ExtendedText.parse("rc2") == ExtendedText(0, "rc", 2)
        assert ExtendedText.parse("post") == ExtendedText(0, "post", 0)

    def test_parse_implicit_leading_zero(self):
        """Test that '0dev' and 'dev' are the same segment."""
        assert ExtendedText.parse("0dev") == ExtendedText.parse("dev")

    @pytest.mark.parametrize("token", ["a1b2", "1.0", "dev-1", "é1"])
    def test_parse_rejects_other_shapes(self, token):
        """Test that tokens not matching the pattern are rejected."""
        assert ExtendedText.parse(token) is None

    def test_pre_compared_first(self):
        """Test that the leading number decides before the core."""
        assert compare_segments(ExtendedText(2, "dev", 0), ExtendedText(1, "post", 0)) == 1

    def test_dev_sorts_below(self):
        """Test that a dev core sorts below a non-dev core."""
        assert compare_segments(ExtendedText(0, "dev", 0), ExtendedText(0, "", 0)) == -1
        assert compare_segments(ExtendedText(0, "a", 0), ExtendedText(0, "dev", 0)) == 1

    def test_post_sorts_above(self):
        """Test that a post core sorts above a non-post core."""
        assert compare_segments(ExtendedText(0, "post", 0), ExtendedText(0, "", 0)) == 1
        assert compare_segments(ExtendedText(0, "rc", 0), ExtendedText(0, "post", 0)) == -1

    def test_dev_checked_before_post(self):
        """Test that the dev rule wins over the post rule."""
        assert compare_segments(ExtendedText(0, "postdev", 0), ExtendedText(0, "post", 0)) == -1

    def test_release_core_above_pre_release(self):
        """Test that an empty core sorts above any pre-release core."""
        release = ExtendedText(0, "", 0)
        for core in ("a", "b", "rc", "alpha", "c"):
            assert compare_segments(ExtendedText(0, core, 9), release) == -1
            assert compare_segments(release, ExtendedText(0, core, 9)) == 1
        assert compare_segments(ExtendedText(0, "dev", 0), release) == -1
        assert compare_segments(ExtendedText(0, "post", 0), release) == 1

    def test_lexicographic_fallback(self):
        """Test plain comparison when neither or both cores carry a keyword."""
        assert compare_segments(ExtendedText(0, "a", 0), ExtendedText(0, "b", 0)) == -1
        assert compare_segments(ExtendedText(0, "rc", 0), ExtendedText(0, "b", 0)) == 1
        assert compare_segments(ExtendedText(0, "devb", 0), ExtendedText(0, "deva", 0)) == 1

    def test_post_number_last(self):
        """Test that the trailing number decides when pre and core match."""
        assert compare_segments(ExtendedText(0, "rc", 1), ExtendedText(0, "rc", 2)) == -1
        assert compare_segments(ExtendedText(0, "rc", 2), ExtendedText(0, "rc", 2)) == 0


class TestEmptyValues:
    """Tests for type-matched empty values."""

    def test_empty_per_type(self):
        """Test each segment's own empty value."""
        assert Epoch(5).empty() == Epoch(0)
        assert Integer(5).empty() == Integer(0)
        assert Text("x").empty() == Text("")
        assert ExtendedText(1, "rc", 2).empty() == ExtendedText(0, "", 0)
        assert EMPTY.empty() is EMPTY

    def test_empty_keeps_kind(self):
        """Test that padding never changes the segment type."""
        for seg in (Epoch(1), Integer(1), Text("a"), ExtendedText(1, "a", 1)):
            assert seg.empty().kind is seg.kind

    def test_str(self):
        """Test textual rendering of segments."""
        assert str(Integer(12)) == "12"
        assert str(Text("beta")) == "beta"
        assert str(Epoch(2)) == "2!"
        assert str(ExtendedText(3, "dev", 1)) == "3dev1"
        assert str(EMPTY) == ""

    def test_segments_are_immutable(self):
        """Test that segments are frozen."""
        seg = Integer(1)
        with pytest.raises(AttributeError):
            seg.value = 2  # type: ignore
