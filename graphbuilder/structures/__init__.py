"""Supporting data structures: pairs, per-node adjacency and union-find."""

from graphbuilder.structures.adjacency import AdjListData
from graphbuilder.structures.pairs import OrderedPair, UnorderedPair
from graphbuilder.structures.union_find import UnionFind

__all__ = ["AdjListData", "OrderedPair", "UnorderedPair", "UnionFind"]
