"""Worklist traversal shared by breadth-first and depth-first search.

A traversal keeps a worklist seeded with the start node and a visited set.
Nodes are marked visited when first discovered, so each node enters the
worklist at most once. A FIFO worklist gives breadth-first order, a LIFO one
depth-first order. Neighbors of a node are visited in ascending id order.

Callers observe discoveries through a callback ``(visiting, neighbor) -> bool``
which stops the traversal by returning True.
"""

from __future__ import annotations

from collections import deque
from typing import Callable, Deque, Dict, Iterable, Optional, Set

from graphbuilder.algorithms.edge_select import arbitrary_edge
from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Node
from graphbuilder.graph.graph import Graph
from graphbuilder.graph.path import Path
from graphbuilder.logging import get_logger

logger = get_logger(__name__)

DiscoverCallback = Callable[[Node, Node], bool]


def _check_member(graph: Graph, node: Node, role: str) -> None:
    if not graph.contains_node(node):
        raise InvalidArgumentError(f"The {role} node {node} does not exist in the graph.")


def traverse(
    graph: Graph,
    start: Node,
    follow_directed: bool,
    lifo: bool,
    on_discover: Optional[DiscoverCallback] = None,
) -> Set[Node]:
    """Walk the graph from ``start``.

    Args:
        graph: The graph to walk.
        start: The start node.
        follow_directed: If True, directed edges are only walked forward.
        lifo: True for depth-first order, False for breadth-first order.
        on_discover: Called with ``(visiting, neighbor)`` each time an unvisited
            neighbor is discovered. Returning True ends the traversal.

    Returns:
        The set of visited nodes.

    Raises:
        InvalidArgumentError: If ``start`` is not in the graph.
    """
    _check_member(graph, start, "start")

    visited: Set[Node] = {start}
    worklist: Deque[Node] = deque([start])
    while worklist:
        visiting = worklist.pop() if lifo else worklist.popleft()
        for neighbor in sorted(graph.get_adj_list_of(visiting).neighbors(follow_directed)):
            if neighbor in visited:
                continue
            visited.add(neighbor)
            if on_discover is not None and on_discover(visiting, neighbor):
                return visited
            worklist.append(neighbor)
    return visited


def explore(graph: Graph, start: Node, follow_directed: bool, lifo: bool) -> Set[Node]:
    """Return every node reachable from ``start``, including ``start``."""
    return traverse(graph, start, follow_directed, lifo)


def explore_all(
    graph: Graph, starts: Iterable[Node], follow_directed: bool, lifo: bool
) -> Set[Node]:
    """Return every node reachable from any node of ``starts``.

    A start already reached from an earlier start is not walked again.
    """
    reached: Set[Node] = set()
    for start in starts:
        if start not in reached:
            reached |= traverse(graph, start, follow_directed, lifo)
    return reached


def search(
    graph: Graph, start: Node, target: Node, follow_directed: bool, lifo: bool
) -> Optional[Path]:
    """Find a path from ``start`` to ``target``.

    Returns:
        The path found, a single-node path when ``start == target``, or None
        when ``target`` is unreachable.

    Raises:
        InvalidArgumentError: If ``start`` or ``target`` is not in the graph.
    """
    _check_member(graph, start, "start")
    _check_member(graph, target, "target")
    if start == target:
        return Path(start)

    parents: Dict[Node, Node] = {}

    def record_parent(visiting: Node, neighbor: Node) -> bool:
        parents[neighbor] = visiting
        return neighbor == target

    visited = traverse(graph, start, follow_directed, lifo, record_parent)
    if target not in visited:
        logger.debug(f"No path from {start} to {target} among {len(visited)} visited nodes")
        return None

    path = Path(target)
    current = target
    while current != start:
        parent = parents[current]
        path.prepend_node(parent, arbitrary_edge(graph, parent, current, follow_directed))
        current = parent
    return path


def connected(
    graph: Graph, start: Node, target: Node, follow_directed: bool, lifo: bool
) -> bool:
    """Return True iff ``target`` is reachable from ``start``.

    Raises:
        InvalidArgumentError: If ``start`` or ``target`` is not in the graph.
    """
    _check_member(graph, start, "start")
    _check_member(graph, target, "target")
    if start == target:
        return True
    visited = traverse(graph, start, follow_directed, lifo, lambda _, neighbor: neighbor == target)
    return target in visited
