"""Kruskal's minimum spanning forest."""

from __future__ import annotations

from typing import List

from graphbuilder.algorithms.edge_select import min_weight_edge
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.graph import Graph
from graphbuilder.logging import get_logger
from graphbuilder.structures.union_find import UnionFind

logger = get_logger(__name__)


def execute(graph: Graph) -> Graph:
    """Compute a minimum spanning forest of ``graph``.

    Edge direction is ignored. Of the edges joining two nodes only the
    lightest is considered, and self-edges never are. For a disconnected
    graph the result spans every component.

    Args:
        graph: The input graph. Not modified.

    Returns:
        A new graph with the same constraints and nodes as ``graph`` and a
        subset of its edges.
    """
    forest = Graph(graph.constraints)
    forest.add_nodes(graph.nodes)
    components: UnionFind[Node] = UnionFind(graph.nodes)

    candidates: List[Edge] = [
        min_weight_edge(graph, pair.first, pair.second, False)
        for pair in graph.edges
        if pair.first != pair.second
    ]
    candidates.sort(key=lambda edge: edge.numeric_weight)

    for edge in candidates:
        if len(components) == 1:
            break
        if not components.connected(edge.first, edge.second):
            components.union(edge.first, edge.second)
            forest.add_edge(edge)

    logger.debug(
        f"Kruskal kept {forest.edge_count()} of {len(candidates)} candidate edges; "
        f"{len(components)} component(s)"
    )
    return forest
