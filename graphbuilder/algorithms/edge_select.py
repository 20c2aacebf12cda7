"""Edge selection between two adjacent nodes.

Candidates are taken from the graph's edge group for the pair, so ties resolve
to the edge added first.
"""

from __future__ import annotations

from typing import List

from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.graph import Graph
from graphbuilder.structures.pairs import UnorderedPair


def edges_between(graph: Graph, a: Node, b: Node, follow_directed: bool) -> List[Edge]:
    """Return the edges joining ``a`` and ``b`` in insertion order.

    Args:
        graph: The graph holding the edges.
        a: The node the edges are walked from.
        b: The node the edges lead to. May equal ``a`` to select self-edges.
        follow_directed: If True, leave out directed edges from ``b`` to ``a``.
    """
    group = graph.edges.get(UnorderedPair(a, b), ())
    if not follow_directed or a == b:
        return list(group)
    return [edge for edge in group if not (edge.directed and edge.first == b)]


def min_weight_edge(graph: Graph, a: Node, b: Node, follow_directed: bool) -> Edge:
    """Return the edge between ``a`` and ``b`` with the smallest numeric weight.

    Raises:
        InvalidArgumentError: If no edge qualifies.
    """
    candidates = edges_between(graph, a, b, follow_directed)
    if not candidates:
        raise InvalidArgumentError(f"There are no edges between nodes {a} and {b}.")
    return min(candidates, key=lambda edge: edge.numeric_weight)


def arbitrary_edge(graph: Graph, a: Node, b: Node, follow_directed: bool) -> Edge:
    """Return some edge between ``a`` and ``b`` (the first one added).

    Raises:
        InvalidArgumentError: If no edge qualifies.
    """
    candidates = edges_between(graph, a, b, follow_directed)
    if not candidates:
        raise InvalidArgumentError(f"There are no edges between nodes {a} and {b}.")
    return candidates[0]
