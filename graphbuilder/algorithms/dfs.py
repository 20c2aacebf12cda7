"""Depth-first traversal.

Paths returned by `search` need not be shortest.
"""

from __future__ import annotations

from typing import Iterable, Optional, Set

from graphbuilder.algorithms import traversal
from graphbuilder.graph.components import Node
from graphbuilder.graph.graph import Graph
from graphbuilder.graph.path import Path

_LIFO = True


def explore(graph: Graph, start: Node, follow_directed: bool) -> Set[Node]:
    """Return every node reachable from ``start``, including ``start``.

    Raises:
        InvalidArgumentError: If ``start`` is not in the graph.
    """
    return traversal.explore(graph, start, follow_directed, _LIFO)


def explore_all(graph: Graph, starts: Iterable[Node], follow_directed: bool) -> Set[Node]:
    """Return every node reachable from any node of ``starts``."""
    return traversal.explore_all(graph, starts, follow_directed, _LIFO)


def search(graph: Graph, start: Node, target: Node, follow_directed: bool) -> Optional[Path]:
    """Return a path from ``start`` to ``target``, or None if there is none."""
    return traversal.search(graph, start, target, follow_directed, _LIFO)


def connected(graph: Graph, start: Node, target: Node, follow_directed: bool) -> bool:
    """Return True iff ``target`` is reachable from ``start``."""
    return traversal.connected(graph, start, target, follow_directed, _LIFO)
