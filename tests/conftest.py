"""Global pytest configuration and shared graph builders."""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple, Union

import pytest

from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.constraints import GraphConstraint
from graphbuilder.graph.graph import Graph

SSUU = GraphConstraint.SIMPLE | GraphConstraint.UNDIRECTED | GraphConstraint.UNWEIGHTED
SSUD = GraphConstraint.SIMPLE | GraphConstraint.DIRECTED | GraphConstraint.UNWEIGHTED
SSUM = GraphConstraint.SIMPLE | GraphConstraint.MIXED | GraphConstraint.UNWEIGHTED
SWU = GraphConstraint.SIMPLE | GraphConstraint.UNDIRECTED | GraphConstraint.WEIGHTED
SWD = GraphConstraint.SIMPLE | GraphConstraint.DIRECTED | GraphConstraint.WEIGHTED
MWM = GraphConstraint.MULTIGRAPH | GraphConstraint.MIXED | GraphConstraint.WEIGHTED
MUM = GraphConstraint.MULTIGRAPH | GraphConstraint.MIXED | GraphConstraint.UNWEIGHTED


def new_nodes(count: int, first_id: int = 0) -> List[Node]:
    return [Node(first_id + i) for i in range(count)]


def new_edges(
    pairs: Sequence[Tuple[int, int]],
    directed: Union[bool, Sequence[bool]],
    nodes: Sequence[Node],
    first_id: int,
    weights: Optional[Sequence[float]] = None,
) -> List[Edge]:
    """Build edges between ``nodes[a]`` and ``nodes[b]`` with consecutive ids."""
    if isinstance(directed, bool):
        directed = [directed] * len(pairs)
    return [
        Edge(
            nodes[a],
            nodes[b],
            directed=directed[i],
            id=first_id + i,
            weight=None if weights is None else weights[i],
        )
        for i, (a, b) in enumerate(pairs)
    ]


@pytest.fixture
def make_graph():
    """Factory: ``make_graph(constraints, num_nodes, pairs, directed, weights)``.

    Edge ids start at ``num_nodes``. Returns ``(graph, nodes, edges)``; every
    edge is asserted to have been accepted.
    """

    def _make(
        constraints: GraphConstraint,
        num_nodes: int,
        pairs: Sequence[Tuple[int, int]] = (),
        directed: Union[bool, Sequence[bool]] = False,
        weights: Optional[Sequence[float]] = None,
    ) -> Tuple[Graph, List[Node], List[Edge]]:
        nodes = new_nodes(num_nodes)
        edges = new_edges(pairs, directed, nodes, num_nodes, weights)
        graph = Graph(constraints)
        graph.add_nodes(nodes)
        assert graph.add_edges(edges)
        return graph, nodes, edges

    return _make


@pytest.fixture
def complete5():
    # Weighted complete graph on 5 nodes; edge ids 5..14.
    #
    #   0-1:2  0-2:2  0-3:1  0-4:4  1-2:5
    #   1-3:3  1-4:3  2-3:2  2-4:4  3-4:8
    nodes = new_nodes(5)
    pairs = [(0, 1), (0, 2), (0, 3), (0, 4), (1, 2), (1, 3), (1, 4), (2, 3), (2, 4), (3, 4)]
    weights = [2, 2, 1, 4, 5, 3, 3, 2, 4, 8]
    edges = new_edges(pairs, False, nodes, 5, weights)
    graph = Graph(SWU)
    graph.add_nodes(nodes)
    assert graph.add_edges(edges)
    return graph, nodes, edges
