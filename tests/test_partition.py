"""Tests for splitting sequences."""

import pytest

from countdown.partition import non_empty_split, split


class TestSplit:
    """Test prefix/suffix splits."""

    def test_split(self):
        assert split((1, 2, 3)).to_list() == [
            ((), (1, 2, 3)),
            ((1,), (2, 3)),
            ((1, 2), (3,)),
            ((1, 2, 3), ()),
        ]

    def test_split_empty(self):
        assert split(()).to_list() == [((), ())]

    @pytest.mark.parametrize("seq", [(), (7,), (1, 2), (5, 5, 5, 5, 5)])
    def test_every_split_rebuilds_sequence(self, seq):
        pairs = split(seq).to_list()
        assert len(pairs) == len(seq) + 1
        assert all(ls + rs == seq for ls, rs in pairs)
        assert [len(ls) for ls, _ in pairs] == list(range(len(seq) + 1))


class TestNonEmptySplit:
    """Test splits with two non-empty sides."""

    def test_non_empty_split(self):
        assert non_empty_split((1, 2, 3)).to_list() == [((1,), (2, 3)), ((1, 2), (3,))]

    def test_too_short(self):
        assert non_empty_split((1,)).to_list() == []
        assert non_empty_split(()).to_list() == []
