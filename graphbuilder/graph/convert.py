"""Conversion between `Graph` and NetworkX graphs.

NetworkX node keys are node ids. Edge attributes carry ``weight`` (when the
edge has one) and ``id``; multigraph keys are edge ids where available.

In a directed NetworkX graph an undirected edge of a mixed `Graph` becomes two
opposing arcs, which is how NetworkX algorithms see an edge traversable in
both directions. Such arcs are not merged back by `from_networkx`.
"""

from __future__ import annotations

from typing import Dict, Hashable, Union

import networkx as nx

from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.constraints import GraphConstraint
from graphbuilder.graph.graph import Graph

NxGraph = Union[nx.Graph, nx.DiGraph, nx.MultiGraph, nx.MultiDiGraph]


def to_networkx(graph: Graph) -> NxGraph:
    """Convert a `Graph` to the matching NetworkX graph class.

    The class is a multigraph iff ``graph`` is a MULTIGRAPH, and directed iff
    ``graph`` allows directed edges.

    Args:
        graph: The graph to convert.

    Returns:
        A new NetworkX graph keyed by node id.
    """
    directed = graph.has_constraint(GraphConstraint.DIRECTED)
    multi = graph.has_constraint(GraphConstraint.MULTIGRAPH)
    if multi:
        nx_graph = nx.MultiDiGraph() if directed else nx.MultiGraph()
    else:
        nx_graph = nx.DiGraph() if directed else nx.Graph()

    nx_graph.add_nodes_from(node.id for node in graph.nodes)

    for group in graph.edges.values():
        for edge in group:
            attrs = {"id": edge.id}
            if edge.weight is not None:
                attrs["weight"] = edge.weight

            arcs = [(edge.first.id, edge.second.id)]
            if directed and not edge.directed and not edge.is_self_edge:
                arcs.append((edge.second.id, edge.first.id))

            for u, v in arcs:
                if multi:
                    nx_graph.add_edge(u, v, key=edge.id, **attrs)
                else:
                    nx_graph.add_edge(u, v, **attrs)
    return nx_graph


def from_networkx(nx_graph: NxGraph, weight: str = "weight") -> Graph:
    """Convert a NetworkX graph to a `Graph`.

    Integer node keys become node ids; other keys get fresh ids above the
    largest integer key, in iteration order. Constraints are chosen so that
    every NetworkX edge fits:

    - DIRECTED for directed inputs, UNDIRECTED otherwise;
    - MULTIGRAPH when the input is a multigraph, has self-loops or (when
      directed) holds arcs in both directions between two nodes, else SIMPLE;
    - WEIGHTED when any edge has the ``weight`` attribute, else UNWEIGHTED.

    Args:
        nx_graph: The graph to convert.
        weight: Name of the edge attribute holding the weight.

    Returns:
        A new `Graph`.

    Raises:
        InvalidArgumentError: If the inferred constraints reject an edge.
    """
    directed = nx_graph.is_directed()
    edge_data = list(
        nx_graph.edges(keys=True, data=True)
        if nx_graph.is_multigraph()
        else ((u, v, None, d) for u, v, d in nx_graph.edges(data=True))
    )

    reciprocal = directed and any(
        nx_graph.has_edge(v, u) for u, v, _, _ in edge_data if u != v
    )
    multi = nx_graph.is_multigraph() or nx.number_of_selfloops(nx_graph) > 0 or reciprocal
    weighted = any(weight in data for _, _, _, data in edge_data)

    constraints = GraphConstraint.DIRECTED if directed else GraphConstraint.UNDIRECTED
    constraints |= GraphConstraint.MULTIGRAPH if multi else GraphConstraint.SIMPLE
    constraints |= GraphConstraint.WEIGHTED if weighted else GraphConstraint.UNWEIGHTED
    graph = Graph(constraints)

    next_id = max((key for key in nx_graph.nodes if isinstance(key, int)), default=-1) + 1
    nodes: Dict[Hashable, Node] = {}
    for key in nx_graph.nodes:
        if isinstance(key, int):
            nodes[key] = Node(key)
        else:
            nodes[key] = Node(next_id)
            next_id += 1
    graph.add_nodes(nodes.values())

    for u, v, key, data in edge_data:
        edge_id = data.get("id")
        if edge_id is None and isinstance(key, int):
            edge_id = key
        edge = Edge(nodes[u], nodes[v], directed=directed, id=edge_id, weight=data.get(weight))
        if not graph.add_edge(edge):
            raise InvalidArgumentError(f"Cannot add NetworkX edge ({u!r}, {v!r}) to the graph.")
    return graph
