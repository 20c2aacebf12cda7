"""Ordered and unordered pairs.

`OrderedPair` holds edge endpoints, where position matters for directed edges.
`UnorderedPair` keys the graph's edge groups: all edges between two nodes share
one key regardless of their direction.
"""

from __future__ import annotations

from typing import Any, Generic, Iterator, NamedTuple, TypeVar

from graphbuilder.errors import InvalidArgumentError

T = TypeVar("T")


class OrderedPair(NamedTuple):
    """Two values where position is meaningful (``first`` precedes ``second``)."""

    first: Any
    second: Any

    def __repr__(self) -> str:
        return f"({self.first!r}, {self.second!r})"


class UnorderedPair(Generic[T]):
    """Two non-None values where ``UnorderedPair(a, b) == UnorderedPair(b, a)``.

    ``first`` and ``second`` keep the construction order for callers that need
    to name "one" and "the other" element, but equality and hashing ignore it.
    """

    __slots__ = ("_first", "_second")

    def __init__(self, first: T, second: T) -> None:
        if first is None or second is None:
            raise InvalidArgumentError("Elements of an UnorderedPair must be non-None.")
        self._first = first
        self._second = second

    @property
    def first(self) -> T:
        return self._first

    @property
    def second(self) -> T:
        return self._second

    def contains(self, value: T) -> bool:
        """Return True if ``value`` is one of the two elements."""
        return value == self._first or value == self._second

    def other(self, value: T) -> T:
        """Return the element that is not ``value``.

        Raises:
            InvalidArgumentError: If ``value`` is not in the pair.
        """
        if value == self._first:
            return self._second
        if value == self._second:
            return self._first
        raise InvalidArgumentError(f"{value!r} is not an element of {self!r}.")

    def __iter__(self) -> Iterator[T]:
        yield self._first
        yield self._second

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, UnorderedPair):
            return NotImplemented
        return (self._first == other._first and self._second == other._second) or (
            self._first == other._second and self._second == other._first
        )

    def __hash__(self) -> int:
        return hash(frozenset((self._first, self._second)))

    def __repr__(self) -> str:
        return f"{{{self._first!r}, {self._second!r}}}"
