"""Dijkstra's single-pair shortest path.

Works on every graph kind: directed edges are only walked forward, unweighted
edges count with the configured default weight, and parallel edges are
reduced to the lightest one. Negative weights are rejected; use
`bellman_ford` for those.
"""

from __future__ import annotations

from heapq import heappop, heappush
from itertools import count
from typing import Dict, List, Optional, Set, Tuple

from graphbuilder.algorithms import dfs
from graphbuilder.algorithms.edge_select import min_weight_edge
from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.graph import Graph
from graphbuilder.graph.path import Path
from graphbuilder.logging import get_logger

logger = get_logger(__name__)


def execute(graph: Graph, start: Node, destination: Node) -> Optional[Path]:
    """Find a minimum-weight path from ``start`` to ``destination``.

    Args:
        graph: The graph to search. Not modified.
        start: The first node of the path.
        destination: The last node of the path.

    Returns:
        A shortest path, a zero-length path when ``start == destination``, or
        None when ``destination`` is unreachable.

    Raises:
        InvalidArgumentError: If either node is not in the graph or any edge
            has a negative weight.
    """
    if not graph.contains_node(start):
        raise InvalidArgumentError(f"The start node {start} does not exist in the graph.")
    if not graph.contains_node(destination):
        raise InvalidArgumentError(
            f"The destination node {destination} does not exist in the graph."
        )
    for edge in graph.edge_set():
        if edge.numeric_weight < 0:
            raise InvalidArgumentError(
                f"Edge {edge!r} has negative weight; use Bellman-Ford instead."
            )

    if start == destination:
        return Path(start)

    reachable = dfs.explore(graph, start, True)
    if destination not in reachable:
        logger.debug(f"Destination {destination} is not reachable from {start}")
        return None

    # Lazy deletion: stale heap entries are skipped when popped.
    distances: Dict[Node, float] = {start: 0.0}
    previous: Dict[Node, Tuple[Node, Edge]] = {}
    settled: Set[Node] = set()
    tiebreaker = count()
    heap: List[Tuple[float, int, Node]] = [(0.0, next(tiebreaker), start)]

    while heap:
        distance, _, node = heappop(heap)
        if node in settled:
            continue
        settled.add(node)
        if node == destination:
            break

        for neighbor in sorted(graph.get_adj_list_of(node).neighbors(True)):
            if neighbor == node or neighbor in settled:
                continue
            edge = min_weight_edge(graph, node, neighbor, True)
            candidate = distance + edge.numeric_weight
            if candidate < distances.get(neighbor, float("inf")):
                distances[neighbor] = candidate
                previous[neighbor] = (node, edge)
                heappush(heap, (candidate, next(tiebreaker), neighbor))

    logger.debug(
        f"Dijkstra settled {len(settled)} of {len(reachable)} reachable nodes "
        f"from {start} to {destination}"
    )

    path = Path(destination)
    current = destination
    while current != start:
        parent, edge = previous[current]
        path.prepend_node(parent, edge)
        current = parent
    return path
