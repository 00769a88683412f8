# SPDX-License-Identifier: MIT
"""Unit tests for Versions ordering."""

import pytest

from semver_value import Version, Versions, is_sorted, parse_field, sort


def V(major="", minor="", patch="", pre_release="", metadata=""):
    return Version(major=major, minor=minor, patch=patch, pre_release=pre_release, metadata=metadata)


class TestParseField:
    """Tests for numeric field parsing."""

    @pytest.mark.parametrize(
        "text, expected",
        [
            ("0", 0),
            ("42", 42),
            ("007", 7),
            ("+3", 3),
            ("-3", -3),
            ("9223372036854775807", 2**63 - 1),
            ("-9223372036854775808", -(2**63)),
        ],
    )
    def test_numbers(self, text, expected):
        """Test strings that parse."""
        assert parse_field(text) == expected

    @pytest.mark.parametrize(
        "text", ["", " 1", "1 ", "1_000", "a", "1.0", "١", "9223372036854775808", "+", "-"]
    )
    def test_not_numbers(self, text):
        """Test strings that do not parse."""
        assert parse_field(text) is None


class TestLess:
    """Tests for Versions.less."""

    @pytest.mark.parametrize(
        "first, second, expected",
        [
            (V("1", "0", "0"), V("0", "0", "0"), True),
            (V("1", "0", "0"), V("1", "0", "0"), False),
            (V("1", "1", "0"), V("1", "0", "0"), True),
            (V("1", "0", "0"), V("1", "1", "0"), False),
            (V("1", "0", "1"), V("1", "0", "0"), True),
            (V("1", "0", "0"), V("1", "0", "1"), False),
            (V("1", "0", "0"), V("1", "0", "0", pre_release="rc1"), False),
            (V("1", "0", "0"), V("1", "0", "0", metadata="fefe"), False),
        ],
    )
    def test_less(self, first, second, expected):
        """Test the comparator on well-formed versions."""
        assert Versions([first, second]).less(0, 1) is expected

    def test_pre_release_and_metadata_ignored_both_ways(self):
        """Test that only the numbers take part in the order."""
        versions = Versions([V("1", "2", "3", pre_release="alpha"), V("1", "2", "3", metadata="b1")])
        assert versions.less(0, 1) is False
        assert versions.less(1, 0) is False

    def test_fields_checked_independently(self):
        """Test that a smaller major does not stop the minor check."""
        versions = Versions([V("1", "5", "0"), V("2", "0", "0")])
        assert versions.less(0, 1) is True
        assert versions.less(1, 0) is True

    def test_lower_everywhere_is_not_less(self):
        """Test that an element lower on every field does not go first."""
        versions = Versions([V("0", "0", "0"), V("1", "1", "1")])
        assert versions.less(0, 1) is False

    def test_unparseable_sorts_first_in_both_directions(self):
        """Test that any unparseable field makes less return True.

        Comparing two such elements gives True both ways, so the order is
        not consistent. This is existing behavior.
        """
        versions = Versions([V("a", "0", "0"), V("1", "0", "0"), V("2", "", "")])
        assert versions.less(0, 1) is True
        assert versions.less(1, 0) is True
        assert versions.less(0, 2) is True
        assert versions.less(2, 0) is True

    def test_unparseable_same_element(self):
        """Test that an unparseable element sorts before itself."""
        versions = Versions([V("x", "0", "0")])
        assert versions.less(0, 0) is True


class TestSwap:
    """Tests for Versions.swap and len."""

    def test_swap(self):
        """Test standard swap semantics."""
        a, b, c = V("1"), V("2"), V("3")
        versions = Versions([a, b, c])
        versions.swap(0, 2)
        assert versions == [c, b, a]

    def test_swap_same_index(self):
        """Test that swapping an index with itself is a no-op."""
        versions = Versions([V("1"), V("2")])
        versions.swap(1, 1)
        assert versions == [V("1"), V("2")]

    def test_len(self):
        """Test the length query."""
        assert len(Versions()) == 0
        assert len(Versions([V("1"), V("1")])) == 2


class TestSort:
    """Tests for in-place sorting."""

    @pytest.mark.parametrize(
        "have, want",
        [
            ([Version.default()], [Version.default()]),
            ([V("2"), V("1")], [V("1"), V("2")]),
            ([V("1", "2"), V("1", "1")], [V("1", "1"), V("1", "2")]),
            ([V("2"), V("2", "1")], [V("2", "1"), V("2")]),
            ([V("2"), V("2", patch="1")], [V("2", patch="1"), V("2")]),
            ([], []),
        ],
    )
    def test_sort(self, have, want):
        """Test the worked examples."""
        versions = Versions(have)
        sort(versions)
        assert versions == want

    def test_well_formed_sorted_descending(self):
        """Test that well-formed versions on one field end up descending."""
        versions = Versions([V("1", "0", "0"), V("3", "0", "0"), V("2", "0", "0")])
        sort(versions)
        assert [v.major for v in versions] == ["3", "2", "1"]
        assert is_sorted(versions)

    def test_sort_keeps_duplicates(self):
        """Test that duplicates survive sorting."""
        versions = Versions([V("1", "0", "0"), V("2", "0", "0"), V("1", "0", "0")])
        sort(versions)
        assert versions == [V("2", "0", "0"), V("1", "0", "0"), V("1", "0", "0")]

    def test_sort_in_place(self):
        """Test that the same list object is sorted."""
        versions = Versions([V("1", "0", "0"), V("2", "0", "0")])
        same = versions
        sort(versions)
        assert same is versions
        assert versions[0].major == "2"


class TestIsSorted:
    """Tests for is_sorted."""

    def test_empty_and_single(self):
        """Test trivial collections."""
        assert is_sorted(Versions()) is True
        assert is_sorted(Versions([V("1", "0", "0")])) is True

    def test_unsorted(self):
        """Test a collection out of order."""
        assert is_sorted(Versions([V("1", "0", "0"), V("2", "0", "0")])) is False

    def test_unparseable_never_sorted(self):
        """Test that unparseable neighbours always look out of order."""
        assert is_sorted(Versions([V("2"), V("1")])) is False
