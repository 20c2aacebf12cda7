"""graphbuilder: in-memory graphs and classic graph algorithms.

graphbuilder provides a constraint-checked graph container for undirected,
directed and mixed graphs (simple or multigraphs, weighted or not) together
with traversals, shortest paths, spanning forests and cycle detection.

Primary API:
    Graph, Node, Edge, WeightedEdge - Graph model
    GraphConstraint - Flags selecting which edges a graph accepts
    bfs, dfs - Traversals, reachability and path search
    dijkstra, bellman_ford - Single-pair shortest paths
    kruskal - Minimum spanning forest
    cycles - Cycle detection

Example:
    from graphbuilder import Edge, Graph, GraphConstraint, Node, dijkstra

    graph = Graph(GraphConstraint.SIMPLE | GraphConstraint.UNDIRECTED)
    a, b = Node(0), Node(1)
    graph.add_nodes([a, b])
    graph.add_edge(Edge(a, b, weight=2.0))
    path = dijkstra.execute(graph, a, b)
"""

from __future__ import annotations

from graphbuilder import logging
from graphbuilder._version import __version__
from graphbuilder.algorithms import bellman_ford, bfs, cycles, dfs, dijkstra, kruskal
from graphbuilder.config import DEFAULTS, GraphDefaults
from graphbuilder.errors import (
    DuplicateRegistrationError,
    GraphError,
    InvalidArgumentError,
    MissingRegistrationError,
    NegativeCycleError,
)
from graphbuilder.graph.components import Edge, Node, WeightedEdge
from graphbuilder.graph.constraints import GraphConstraint
from graphbuilder.graph.convert import from_networkx, to_networkx
from graphbuilder.graph.factory import complete_graph
from graphbuilder.graph.graph import Graph
from graphbuilder.graph.path import Cycle, Path
from graphbuilder.structures.adjacency import AdjListData
from graphbuilder.structures.pairs import OrderedPair, UnorderedPair
from graphbuilder.structures.union_find import UnionFind

__all__ = [
    # Version
    "__version__",
    # Model
    "Graph",
    "GraphConstraint",
    "Node",
    "Edge",
    "WeightedEdge",
    "Path",
    "Cycle",
    # Structures
    "AdjListData",
    "OrderedPair",
    "UnorderedPair",
    "UnionFind",
    # Errors
    "GraphError",
    "InvalidArgumentError",
    "DuplicateRegistrationError",
    "MissingRegistrationError",
    "NegativeCycleError",
    # Algorithms
    "bfs",
    "dfs",
    "dijkstra",
    "bellman_ford",
    "kruskal",
    "cycles",
    # Helpers
    "complete_graph",
    "from_networkx",
    "to_networkx",
    # Configuration
    "DEFAULTS",
    "GraphDefaults",
    # Utilities
    "logging",
]
