"""Bellman-Ford single-pair shortest path with negative-cycle detection.

Distances are computed towards the destination: ``distances[node]`` is the
weight of the best known path from ``node`` to the destination, and
``next_hops[node]`` the first edge of that path. The shortest path is then
read forward from the start by following next hops.

An undirected edge with negative weight is a negative 2-cycle on its own, as
it can be walked back and forth. Such edges are reported before relaxation.
"""

from __future__ import annotations

from typing import Dict, List, Optional, Set

from graphbuilder.algorithms import bfs, dfs
from graphbuilder.algorithms.edge_select import min_weight_edge
from graphbuilder.errors import InvalidArgumentError, NegativeCycleError
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.graph import Graph
from graphbuilder.graph.path import Path
from graphbuilder.logging import get_logger

logger = get_logger(__name__)


def _validate(graph: Graph, start: Node, destination: Node) -> Set[Node]:
    """Check the arguments and return the nodes reachable from ``start``.

    Raises:
        InvalidArgumentError: If either node is not in the graph.
        NegativeCycleError: If a negative undirected edge lies on some walk
            from ``start`` to ``destination``.
    """
    if not graph.contains_node(start) or not graph.contains_node(destination):
        raise InvalidArgumentError(
            f"Start {start} and destination {destination} must belong to the graph."
        )

    reachable = dfs.explore(graph, start, True)
    negative_edges = {
        edge
        for edge in graph.edge_set()
        if not edge.directed
        and edge.numeric_weight < 0
        and edge.first in reachable
        and bfs.connected(graph, edge.first, destination, True)
    }
    if negative_edges:
        logger.debug(
            f"Found {len(negative_edges)} negative undirected edge(s) between "
            f"{start} and {destination}"
        )
        raise NegativeCycleError(
            "Contains negative 2-cycle(s) (undirected edges with negative weights) "
            "reachable from the start that can reach the destination.",
            negative_edges=negative_edges,
        )
    return reachable


def _relax_all(
    graph: Graph, distances: Dict[Node, float], next_hops: Dict[Node, Edge]
) -> List[Node]:
    """Relax the lightest edge from every node to each of its neighbors.

    Returns:
        The nodes whose distance decreased, in relaxation order.
    """
    updated: List[Node] = []
    for node in graph.nodes:
        for neighbor in sorted(graph.get_adj_list_of(node).neighbors(True)):
            edge = min_weight_edge(graph, node, neighbor, True)
            candidate = edge.numeric_weight + distances[neighbor]
            if candidate < distances[node]:
                distances[node] = candidate
                next_hops[node] = edge
                updated.append(node)
    return updated


def _reaches_cycle(node: Node, next_hops: Dict[Node, Edge]) -> bool:
    """Return True iff following next hops from ``node`` revisits a node."""
    seen: Set[Node] = set()
    current: Optional[Node] = node
    while current is not None:
        if current in seen:
            return True
        seen.add(current)
        edge = next_hops.get(current)
        current = edge.get_other_endpoint(current) if edge is not None else None
    return False


def execute(graph: Graph, start: Node, destination: Node) -> Optional[Path]:
    """Find a minimum-weight path from ``start`` to ``destination``.

    Args:
        graph: The graph to search. Not modified. Weights may be negative.
        start: The first node of the path.
        destination: The last node of the path.

    Returns:
        A shortest path, or None when ``destination`` is unreachable.

    Raises:
        InvalidArgumentError: If either node is not in the graph.
        NegativeCycleError: If a negative cycle reachable from ``start`` can
            reach ``destination``. Call ``negative_cycle()`` on the error to
            obtain the cycle.
    """
    reachable = _validate(graph, start, destination)
    if destination not in reachable:
        logger.debug(f"Destination {destination} is not reachable from {start}")
        return None

    distances: Dict[Node, float] = {node: float("inf") for node in graph.nodes}
    distances[destination] = 0.0
    next_hops: Dict[Node, Edge] = {}

    rounds = 0
    for rounds in range(1, len(graph)):
        if not _relax_all(graph, distances, next_hops):
            break
    logger.debug(f"Bellman-Ford ran {rounds} relaxation round(s) over {len(graph)} nodes")

    # Any further decrease on a node reachable from the start means a negative
    # cycle. Keep relaxing until the next-hop table closes that cycle, so the
    # error carries a witness whose next hops lead into it.
    max_passes = len(graph) ** 2 + 1
    for attempt in range(1, max_passes + 1):
        candidates = [
            node for node in _relax_all(graph, distances, next_hops) if node in reachable
        ]
        if not candidates:
            break
        witness = next(
            (node for node in candidates if _reaches_cycle(node, next_hops)), None
        )
        if witness is None and attempt == max_passes:
            witness = candidates[0]
        if witness is not None:
            logger.debug(f"Negative cycle detected from witness {witness}")
            raise NegativeCycleError(
                "The shortest path does not exist as the graph contains a negative cycle "
                "reachable from the start node and which can reach the destination node.",
                next_hops=next_hops,
                witness=witness,
            )

    path = Path(start)
    current = start
    visited = {start}
    while current in next_hops:
        edge = next_hops[current]
        current = edge.get_other_endpoint(current)
        if current in visited:
            raise NegativeCycleError(
                f"Next hops from {start} loop back to {current}.",
                next_hops=next_hops,
                witness=current,
            )
        visited.add(current)
        path.append_node(current, edge)
    return path
