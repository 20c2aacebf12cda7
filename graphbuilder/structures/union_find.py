"""Disjoint-set (union-find) structure."""

from __future__ import annotations

from typing import Dict, Generic, Hashable, Iterable, List, TypeVar

from graphbuilder.errors import InvalidArgumentError

T = TypeVar("T", bound=Hashable)


class UnionFind(Generic[T]):
    """Union-find over a fixed collection of values.

    Each set is named by one of its members. ``find`` compresses the path it
    walks; ``union`` hangs the smaller set under the larger one.

    Attributes:
        names: Map value -> value it points at; a set's name points at itself.
        sizes: Map set name -> number of members (names only).
    """

    def __init__(self, values: Iterable[T]) -> None:
        self.names: Dict[T, T] = {}
        self.sizes: Dict[T, int] = {}
        for value in values:
            self.names[value] = value
            self.sizes[value] = 1

    def __contains__(self, value: object) -> bool:
        return value in self.names

    def __len__(self) -> int:
        """Number of disjoint sets."""
        return len(self.sizes)

    def find(self, value: T) -> T:
        """Return the name of the set containing ``value``.

        Raises:
            InvalidArgumentError: If ``value`` was never added.
        """
        if value not in self.names:
            raise InvalidArgumentError(f"{value!r} is not an element of this UnionFind.")

        name = value
        walked: List[T] = []
        while name not in self.sizes:
            walked.append(name)
            name = self.names[name]

        for seen in walked:
            self.names[seen] = name
        return name

    def union(self, a: T, b: T) -> T:
        """Merge the sets containing ``a`` and ``b``.

        Returns:
            The name of the merged set.
        """
        name_a = self.find(a)
        name_b = self.find(b)
        if name_a == name_b:
            return name_a

        if self.sizes[name_a] < self.sizes[name_b]:
            name_a, name_b = name_b, name_a
        self.names[name_b] = name_a
        self.sizes[name_a] += self.sizes.pop(name_b)
        return name_a

    def connected(self, a: T, b: T) -> bool:
        """Return True iff ``a`` and ``b`` are in the same set."""
        return self.find(a) == self.find(b)

    def size_of(self, value: T) -> int:
        """Number of members of the set containing ``value``."""
        return self.sizes[self.find(value)]
