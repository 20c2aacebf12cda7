"""Shared shortest-path scenarios.

Each scenario builds a small unweighted graph whose shortest paths are unique
and checks the string form of the path returned by ``algorithm(graph, start,
destination)``. Edge ids start at the node count.
"""

from __future__ import annotations

from typing import Callable, Optional

from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.graph import Graph
from graphbuilder.graph.path import Path
from tests.conftest import SSUD, SSUM, SSUU, new_edges, new_nodes

Algorithm = Callable[[Graph, Node, Node], Optional[Path]]


def _build(constraints, num_nodes, pairs, directed):
    graph = Graph(constraints)
    n = new_nodes(num_nodes)
    e = new_edges(pairs, directed, n, num_nodes)
    graph.add_nodes(n)
    assert graph.add_edges(e)
    return graph, n, e


def check_small_undirected(algorithm: Algorithm) -> None:
    graph, n, e = _build(SSUU, 5, [(0, 1), (1, 2), (2, 3), (3, 4), (4, 0)], False)
    assert str(algorithm(graph, n[0], n[2])) == "Path[0-(5)->1-(6)->2]"
    assert str(algorithm(graph, n[0], n[3])) == "Path[0-(9)->4-(8)->3]"

    assert graph.add_edge(Edge(n[0], n[2], id=10))
    assert str(algorithm(graph, n[0], n[2])) == "Path[0-(10)->2]"
    graph.remove_edge(e[0])
    assert str(algorithm(graph, n[0], n[1])) == "Path[0-(10)->2-(6)->1]"


def check_small_directed(algorithm: Algorithm) -> None:
    graph, n, e = _build(SSUD, 5, [(0, 1), (2, 1), (2, 3), (3, 4), (4, 0)], True)
    assert algorithm(graph, n[0], n[2]) is None
    assert str(algorithm(graph, n[2], n[0])) == "Path[2-(7)->3-(8)->4-(9)->0]"

    shortcut = Edge(n[3], n[0], directed=True, id=10)
    assert graph.add_edge(shortcut)
    assert str(algorithm(graph, n[2], n[0])) == "Path[2-(7)->3-(10)->0]"
    graph.remove_edge(shortcut)
    graph.remove_edge(e[3])
    assert algorithm(graph, n[2], n[0]) is None


def check_small_mixed(algorithm: Algorithm) -> None:
    graph, n, e = _build(
        SSUM,
        5,
        [(0, 1), (1, 2), (2, 3), (4, 3), (0, 4), (3, 0)],
        [False, True, False, True, True, False],
    )
    assert str(algorithm(graph, n[3], n[2])) == "Path[3-(7)->2]"
    assert str(algorithm(graph, n[3], n[1])) == "Path[3-(10)->0-(5)->1]"
    assert str(algorithm(graph, n[0], n[3])) == "Path[0-(10)->3]"
    graph.remove_edge(e[5])
    assert str(algorithm(graph, n[0], n[3])) == "Path[0-(9)->4-(8)->3]"
    assert algorithm(graph, n[3], n[1]) is None


def check_medium_undirected(algorithm: Algorithm) -> None:
    graph, n, e = _build(
        SSUU,
        12,
        [(0, 1), (1, 2), (1, 3), (2, 4), (3, 4), (2, 5), (5, 6), (4, 7), (3, 8), (4, 8), (8, 9), (8, 10), (7, 11)],
        False,
    )
    assert str(algorithm(graph, n[0], n[6])) == "Path[0-(12)->1-(13)->2-(17)->5-(18)->6]"
    assert str(algorithm(graph, n[0], n[9])) == "Path[0-(12)->1-(14)->3-(20)->8-(22)->9]"
    assert str(algorithm(graph, n[11], n[6])) == "Path[11-(24)->7-(19)->4-(15)->2-(17)->5-(18)->6]"

    assert graph.add_edge(Edge(n[6], n[8], id=25))
    assert str(algorithm(graph, n[11], n[6])) == "Path[11-(24)->7-(19)->4-(21)->8-(25)->6]"
    graph.remove_edge(e[1])
    assert str(algorithm(graph, n[1], n[6])) == "Path[1-(14)->3-(20)->8-(25)->6]"


def check_medium_directed(algorithm: Algorithm) -> None:
    graph, n, e = _build(
        SSUD,
        9,
        [(0, 1), (1, 2), (1, 3), (2, 3), (3, 0), (3, 5), (4, 0), (5, 4), (5, 6), (5, 7), (6, 7), (7, 2), (7, 8)],
        True,
    )
    assert str(algorithm(graph, n[0], n[8])) == "Path[0-(9)->1-(11)->3-(14)->5-(18)->7-(21)->8]"
    assert str(algorithm(graph, n[7], n[6])) == "Path[7-(20)->2-(12)->3-(14)->5-(17)->6]"
    assert str(algorithm(graph, n[6], n[0])) == "Path[6-(19)->7-(20)->2-(12)->3-(13)->0]"

    graph.remove_edge(e[4])
    assert graph.add_edges(
        [Edge(n[8], n[1], directed=True, id=22), Edge(n[0], n[3], directed=True, id=23)]
    )
    assert str(algorithm(graph, n[0], n[8])) == "Path[0-(23)->3-(14)->5-(18)->7-(21)->8]"
    assert (
        str(algorithm(graph, n[6], n[0]))
        == "Path[6-(19)->7-(20)->2-(12)->3-(14)->5-(16)->4-(15)->0]"
    )
    assert str(algorithm(graph, n[6], n[1])) == "Path[6-(19)->7-(21)->8-(22)->1]"


ALL_SCENARIOS = [
    check_small_undirected,
    check_small_directed,
    check_small_mixed,
    check_medium_undirected,
    check_medium_directed,
]
