"""
Tests for segver.versioning.model module.

Tests the segment model including:
- Segment construction and kind detection
- Version accessors (major/minor/patch)
- Core version rendering
- Segment counting
- String rendering
"""

from __future__ import annotations

import dataclasses

import pytest

from segver.versioning import (
    EMPTY_VERSION,
    SegmentKind,
    Version,
    VersionSegment,
    parse_literal,
)

N = VersionSegment.of_number
T = VersionSegment.of_text
U = VersionSegment.undefined


class TestVersionSegment:
    """Tests for VersionSegment construction."""

    def test_number_segment(self):
        seg = N(42)
        assert seg.kind is SegmentKind.NUMBER
        assert seg.is_number and not seg.is_text and not seg.is_undefined
        assert seg.number == 42
        assert seg.text == ""

    def test_text_segment(self):
        seg = T("beta")
        assert seg.is_text
        assert seg.text == "beta"
        assert seg.number == 0

    def test_undefined_segment(self):
        seg = U()
        assert seg.is_undefined
        assert seg.value is None
        assert seg.number == 0
        assert seg.text == ""

    def test_mismatched_payload_rejected(self):
        """A segment carries exactly one representation."""
        with pytest.raises(TypeError):
            VersionSegment(SegmentKind.NUMBER, "1")
        with pytest.raises(TypeError):
            VersionSegment(SegmentKind.TEXT, 1)
        with pytest.raises(TypeError):
            VersionSegment(SegmentKind.UNDEFINED, 0)
        with pytest.raises(ValueError):
            VersionSegment(SegmentKind.TEXT, "")

    def test_bool_is_not_a_number(self):
        with pytest.raises(TypeError):
            VersionSegment(SegmentKind.NUMBER, True)

    @pytest.mark.parametrize(
        "value, expected",
        [
            pytest.param("7", N(7), id="digits"),
            pytest.param("-3", N(-3), id="negative"),
            pytest.param("+3", N(3), id="plus-sign"),
            pytest.param("007", N(7), id="leading-zeros"),
            pytest.param("rc1", T("rc1"), id="text"),
            pytest.param("1.5", T("1.5"), id="not-an-integer"),
            pytest.param("", U(), id="empty"),
            pytest.param("9223372036854775808", T("9223372036854775808"), id="overflow"),
        ],
    )
    def test_from_string(self, value, expected):
        assert VersionSegment.from_string(value) == expected

    def test_segments_are_immutable(self):
        seg = N(1)
        with pytest.raises(dataclasses.FrozenInstanceError):
            seg.value = 2  # type: ignore

    def test_str(self):
        assert str(N(3)) == "3"
        assert str(T("Beta")) == "Beta"
        assert str(U()) == "-"


class TestVersionAccessors:
    """Tests for major/minor/patch and counting helpers."""

    def test_major_minor_patch(self):
        v = parse_literal(4, 5, 6, 7)
        assert (v.major, v.minor, v.patch) == (4, 5, 6)

    def test_missing_positions_default_to_zero(self):
        v = parse_literal(4)
        assert (v.major, v.minor, v.patch) == (4, 0, 0)
        assert (EMPTY_VERSION.major, EMPTY_VERSION.minor, EMPTY_VERSION.patch) == (
            0,
            0,
            0,
        )

    def test_text_position_reads_as_zero(self):
        v = parse_literal(1, "beta", 3)
        assert v.minor == 0
        assert v.patch == 3

    def test_defined_segment_count(self):
        v = Version((N(1), U(), T("a"), U()))
        assert v.defined_segment_count() == 2

    def test_segment_count_modes(self):
        v = Version((N(1), U(), N(2), U(), U()))
        assert v.segment_count() == 5
        assert v.segment_count(include_trailing_undefined=False) == 3
        assert EMPTY_VERSION.segment_count(include_trailing_undefined=False) == 0

    def test_str_joins_segments(self):
        v = Version((N(1), N(8), N(0), U(), N(3)))
        assert str(v) == "1|8|0|-|3"
        assert str(EMPTY_VERSION) == ""

    def test_segments_stored_as_tuple(self):
        v = Version([N(1), N(2)])  # type: ignore[arg-type]
        assert isinstance(v.segments, tuple)
        assert len(v) == 2

    def test_raw_defaults_to_empty(self):
        assert parse_literal(1, 2).raw == ""


class TestCoreVersion:
    """Tests for the "major.minor.patch" rendering."""

    @pytest.mark.parametrize(
        "parts, expected",
        [
            pytest.param((1, "a", 3), "1.0.0", id="text-truncates"),
            pytest.param((1, 2, "b"), "1.2.0", id="text-third"),
            pytest.param((1, 2, 3, 4), "1.2.3", id="extra-ignored"),
            pytest.param((1,), "1.0.0", id="short"),
            pytest.param((), "0.0.0", id="empty"),
            pytest.param(("x", 2, 3), "0.0.0", id="text-first"),
        ],
    )
    def test_core_version(self, parts, expected):
        assert parse_literal(*parts).core_version() == expected

    def test_undefined_truncates(self):
        v = Version((N(1), U(), N(3)))
        assert v.core_version() == "1.0.0"
