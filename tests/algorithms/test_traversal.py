import networkx as nx
import pytest

from graphbuilder.algorithms import bfs, dfs
from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.convert import to_networkx
from graphbuilder.graph.graph import Graph
from tests.algorithms.path_templates import ALL_SCENARIOS
from tests.conftest import SSUD, SSUM, SSUU

TRAVERSALS = [bfs, dfs]


@pytest.fixture
def two_components(make_graph):
    # 0 - 1 - 2     3 -> 4 <- 5     6
    graph, n, e = make_graph(
        SSUM, 7, [(0, 1), (1, 2), (3, 4), (5, 4)], [False, False, True, True]
    )
    return graph, n


@pytest.mark.parametrize("algo", TRAVERSALS)
def test_explore(algo, two_components):
    graph, n = two_components
    assert algo.explore(graph, n[0], True) == {n[0], n[1], n[2]}
    assert algo.explore(graph, n[3], True) == {n[3], n[4]}
    assert algo.explore(graph, n[4], True) == {n[4]}
    assert algo.explore(graph, n[4], False) == {n[3], n[4], n[5]}
    assert algo.explore(graph, n[6], False) == {n[6]}


@pytest.mark.parametrize("algo", TRAVERSALS)
def test_explore_all(algo, two_components):
    graph, n = two_components
    assert algo.explore_all(graph, [n[0], n[1], n[5]], True) == {n[0], n[1], n[2], n[4], n[5]}
    assert algo.explore_all(graph, [], True) == set()


@pytest.mark.parametrize("algo", TRAVERSALS)
def test_connected(algo, two_components):
    graph, n = two_components
    assert algo.connected(graph, n[0], n[2], True)
    assert algo.connected(graph, n[6], n[6], True)
    assert algo.connected(graph, n[3], n[4], True)
    assert not algo.connected(graph, n[4], n[3], True)
    assert algo.connected(graph, n[4], n[3], False)
    assert not algo.connected(graph, n[0], n[3], False)


@pytest.mark.parametrize("algo", TRAVERSALS)
def test_search_paths_are_valid(algo, two_components):
    graph, n = two_components
    path = algo.search(graph, n[0], n[2], True)
    assert path.first_node == n[0] and path.last_node == n[2]
    for node, edge in path:
        if edge is not None:
            assert edge.has_endpoint(node)
            assert graph.contains_edge(edge)
    assert algo.search(graph, n[4], n[3], True) is None
    assert str(algo.search(graph, n[4], n[3], False)) == "Path[4-(9)->3]"


@pytest.mark.parametrize("algo", TRAVERSALS)
def test_search_start_equals_target(algo):
    graph = Graph(SSUU)
    node = Node(0)
    graph.add_node(node)
    assert str(algo.search(graph, node, node, True)) == "Path[0]"
    assert str(algo.search(graph, node, node, False)) == "Path[0]"


@pytest.mark.parametrize("algo", TRAVERSALS)
def test_membership_is_checked(algo, two_components):
    graph, n = two_components
    outsider = Node(42)
    with pytest.raises(InvalidArgumentError, match="does not exist"):
        algo.explore(graph, outsider, True)
    with pytest.raises(InvalidArgumentError):
        algo.search(graph, n[0], outsider, True)
    with pytest.raises(InvalidArgumentError):
        algo.connected(graph, outsider, n[0], True)


@pytest.mark.parametrize("scenario", ALL_SCENARIOS)
def test_bfs_search_finds_fewest_edges(scenario):
    scenario(lambda graph, start, dest: bfs.search(graph, start, dest, True))


@pytest.mark.parametrize("constraints", [SSUU, SSUD])
def test_bfs_dfs_agree_with_networkx(constraints):
    nx_graph = nx.gnp_random_graph(30, 0.08, seed=7, directed=constraints == SSUD)
    if constraints == SSUD:
        # Keep one arc of every reciprocal pair so the graph stays simple
        nx_graph.remove_edges_from([(u, v) for u, v in list(nx_graph.edges) if u > v and nx_graph.has_edge(v, u)])

    graph = Graph(constraints)
    nodes = {i: Node(i) for i in nx_graph.nodes}
    graph.add_nodes(nodes.values())
    for u, v in nx_graph.edges:
        assert graph.add_edge(Edge(nodes[u], nodes[v], directed=constraints == SSUD))

    oracle = to_networkx(graph)
    for start in (0, 5, 17):
        expected = {nodes[i] for i in nx.descendants(oracle, start)} | {nodes[start]}
        assert bfs.explore(graph, nodes[start], True) == expected
        assert dfs.explore(graph, nodes[start], True) == expected
        for target in (3, 11, 29):
            reachable = nx.has_path(oracle, start, target)
            assert bfs.connected(graph, nodes[start], nodes[target], True) == reachable
            assert dfs.connected(graph, nodes[start], nodes[target], True) == reachable
            path = bfs.search(graph, nodes[start], nodes[target], True)
            if reachable:
                assert path.edge_length == nx.shortest_path_length(oracle, start, target)
            else:
                assert path is None


def test_dfs_search_on_long_chain_is_iterative(make_graph):
    size = 5000
    graph, n, _ = make_graph(SSUU, size, [(i, i + 1) for i in range(size - 1)])
    path = dfs.search(graph, n[0], n[-1], True)
    assert path.edge_length == size - 1
