"""Graph generators."""

from __future__ import annotations

from typing import Optional

from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.constraints import GraphConstraint
from graphbuilder.graph.graph import Graph


def complete_graph(
    num_nodes: int,
    constraints: Optional[GraphConstraint] = None,
    first_id: int = 0,
) -> Graph:
    """Build a complete graph on ``num_nodes`` nodes.

    Nodes get consecutive ids starting at ``first_id``. Every pair of distinct
    nodes is joined by one unweighted undirected edge; edge ids continue after
    the last node id.

    Args:
        num_nodes: Number of nodes, at least 1.
        constraints: Constraints of the result. Must allow undirected edges.
            Defaults to ``DEFAULTS.constraints``.
        first_id: Id of the first node.

    Returns:
        The complete graph.

    Raises:
        InvalidArgumentError: If ``num_nodes`` < 1 or the constraints forbid
            undirected edges.
    """
    if num_nodes < 1:
        raise InvalidArgumentError(
            f"Cannot create a complete graph with {num_nodes} nodes; need at least 1."
        )
    graph = Graph(constraints)
    if not graph.has_constraint(GraphConstraint.UNDIRECTED):
        raise InvalidArgumentError(
            f"A complete graph needs undirected edges, got constraints {graph.constraints!r}."
        )

    nodes = [Node(first_id + i) for i in range(num_nodes)]
    graph.add_nodes(nodes)

    edge_id = first_id + num_nodes
    for i in range(num_nodes - 1):
        for j in range(i + 1, num_nodes):
            graph.add_edge(Edge(nodes[i], nodes[j], id=edge_id))
            edge_id += 1
    return graph
