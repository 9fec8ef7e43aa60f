"""Unit tests for nested entry list helpers."""

import pytest

from connector.domain.model import entries


class TestPrepend:
    def test_new_entry_goes_first(self):
        assert entries.prepend(("b", "c"), "a") == ("a", "b", "c")

    def test_empty_list(self):
        assert entries.prepend((), "a") == ("a",)


class TestIndexOf:
    def test_first_match_wins(self):
        items = ("x", "dup", "y", "dup")

        assert entries.index_of(items, lambda item: item == "dup") == 1

    def test_absent(self):
        assert entries.index_of(("x",), lambda item: item == "y") == -1


class TestRemoveAt:
    def test_removes_only_that_index(self):
        assert entries.remove_at(("a", "dup", "b", "dup"), 1) == ("a", "b", "dup")

    def test_out_of_range(self):
        with pytest.raises(IndexError):
            entries.remove_at(("a",), 3)
