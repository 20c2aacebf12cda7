import pytest

from graphbuilder.errors import InvalidArgumentError
from graphbuilder.structures.pairs import OrderedPair, UnorderedPair


def test_unordered_pair_equality_ignores_order():
    assert UnorderedPair(1, 2) == UnorderedPair(2, 1)
    assert hash(UnorderedPair(1, 2)) == hash(UnorderedPair(2, 1))
    assert UnorderedPair(1, 2) != UnorderedPair(1, 3)
    assert UnorderedPair(1, 1) != UnorderedPair(1, 2)


def test_unordered_pair_as_dict_key():
    groups = {UnorderedPair("a", "b"): [1]}
    assert groups[UnorderedPair("b", "a")] == [1]


def test_unordered_pair_rejects_none():
    with pytest.raises(InvalidArgumentError, match="non-None"):
        UnorderedPair(None, 1)
    with pytest.raises(InvalidArgumentError):
        UnorderedPair(1, None)


def test_unordered_pair_accessors():
    pair = UnorderedPair(3, 7)
    assert (pair.first, pair.second) == (3, 7)
    assert list(pair) == [3, 7]
    assert pair.contains(7)
    assert not pair.contains(5)
    assert pair.other(3) == 7
    assert pair.other(7) == 3
    assert repr(pair) == "{3, 7}"

    with pytest.raises(InvalidArgumentError, match="not an element"):
        pair.other(5)


def test_unordered_pair_self_pair():
    pair = UnorderedPair(4, 4)
    assert pair.other(4) == 4
    assert pair == UnorderedPair(4, 4)


def test_ordered_pair_respects_order():
    assert OrderedPair(1, 2) != OrderedPair(2, 1)
    pair = OrderedPair("s", "t")
    assert pair.first == "s"
    assert pair.second == "t"
    assert repr(pair) == "('s', 't')"
