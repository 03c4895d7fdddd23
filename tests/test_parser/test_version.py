"""Tests for swagmodel.parser.version -- parsing and ordering of version strings."""

from __future__ import annotations

import pytest

from swagmodel.exceptions import MalformedVersion
from swagmodel.parser.version import (
    MAX_VERSION,
    MIN_VERSION,
    V2,
    V3,
    V3_0_1,
    Ordering,
    Version,
)


# ---------------------------------------------------------------------------
# Version.parse
# ---------------------------------------------------------------------------


class TestParse:
    """Test parsing dotted numeric strings."""

    def test_two_components(self) -> None:
        assert Version.parse("2.0").parts == (2, 0)

    def test_three_components(self) -> None:
        assert Version.parse("3.0.1").parts == (3, 0, 1)

    def test_single_component(self) -> None:
        assert Version.parse("3").parts == (3,)

    def test_surrounding_whitespace_is_ignored(self) -> None:
        assert Version.parse(" 3.0.0 ").parts == (3, 0, 0)

    def test_str_keeps_original_text(self) -> None:
        assert str(Version.parse("3.0")) == "3.0"

    def test_repr(self) -> None:
        assert repr(Version.parse("2.0")) == "Version('2.0')"

    @pytest.mark.parametrize("text", ["", "3.0.x", "3..0", "v3", "3.-1", "1.2.3-beta"])
    def test_malformed_raises(self, text: str) -> None:
        with pytest.raises(MalformedVersion):
            Version.parse(text)


# ---------------------------------------------------------------------------
# Version.compare
# ---------------------------------------------------------------------------


class TestCompare:
    """Test component-wise comparison with zero padding."""

    def test_less(self) -> None:
        assert Version.parse("2.0").compare(Version.parse("3.0.0")) == Ordering.LESS

    def test_greater(self) -> None:
        assert Version.parse("3.0.1").compare(Version.parse("3.0.0")) == Ordering.GREATER

    def test_missing_components_are_zero(self) -> None:
        assert Version.parse("3.0").compare(Version.parse("3.0.0")) == Ordering.EQUAL

    def test_numeric_not_lexicographic(self) -> None:
        assert Version.parse("3.10").compare(Version.parse("3.9")) == Ordering.GREATER

    def test_ordering_values(self) -> None:
        assert int(Ordering.LESS) == -1
        assert int(Ordering.EQUAL) == 0
        assert int(Ordering.GREATER) == 1

    def test_rich_comparisons(self) -> None:
        assert V2 < V3
        assert V3 <= V3_0_1
        assert V3_0_1 > V2
        assert V3 >= Version.parse("3")

    def test_equal_versions_hash_equally(self) -> None:
        assert Version.parse("3.0") == Version.parse("3.0.0")
        assert hash(Version.parse("3.0")) == hash(Version.parse("3.0.0"))
        assert len({Version.parse("2"), Version.parse("2.0"), Version.parse("2.0.0")}) == 1

    def test_not_equal_to_string(self) -> None:
        assert Version.parse("2.0") != "2.0"


# ---------------------------------------------------------------------------
# Version.in_range
# ---------------------------------------------------------------------------


class TestInRange:
    """Test the inclusive range check used to gate accepted documents."""

    @pytest.mark.parametrize("text", ["2.0", "2.5", "3.0", "3.0.0", "3.0.1"])
    def test_accepted(self, text: str) -> None:
        assert Version.parse(text).in_range(MIN_VERSION, MAX_VERSION)

    @pytest.mark.parametrize("text", ["1.9", "1.0", "3.0.2", "3.1.0", "4.0"])
    def test_rejected(self, text: str) -> None:
        assert not Version.parse(text).in_range(MIN_VERSION, MAX_VERSION)

    def test_bounds(self) -> None:
        assert MIN_VERSION == V2
        assert MAX_VERSION == V3_0_1
