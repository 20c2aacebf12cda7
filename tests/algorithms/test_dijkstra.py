import networkx as nx
import pytest

from graphbuilder.algorithms import dijkstra
from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Node
from graphbuilder.graph.convert import from_networkx, to_networkx
from tests.algorithms.path_templates import ALL_SCENARIOS
from tests.conftest import MWM, SWD, SWU


@pytest.mark.parametrize("scenario", ALL_SCENARIOS)
def test_unweighted_scenarios(scenario):
    scenario(dijkstra.execute)


def test_complete_graph_shortest_length(complete5):
    graph, n, e = complete5
    path = dijkstra.execute(graph, n[0], n[4])
    # The direct edge 0-4 (weight 4) beats every detour.
    assert path.length() == 4
    assert path.length() == nx.dijkstra_path_length(to_networkx(graph), 0, 4)


def test_complete_graph_matches_networkx_for_all_pairs(complete5):
    graph, n, _ = complete5
    oracle = to_networkx(graph)
    for a in n:
        for b in n:
            path = dijkstra.execute(graph, a, b)
            assert path.first_node == a and path.last_node == b
            assert path.length() == nx.dijkstra_path_length(oracle, a.id, b.id)


def test_weighted_directed(make_graph):
    # 0 -> 1 -> 3 is cheaper than 0 -> 2 -> 3 and than 0 -> 3 directly
    graph, n, e = make_graph(SWD, 4, [(0, 1), (1, 3), (0, 2), (2, 3), (0, 3)], True, [1, 1, 1, 5, 10])
    path = dijkstra.execute(graph, n[0], n[3])
    assert str(path) == "Path[0-(4)->1-(5)->3]"
    assert path.length() == 2
    assert dijkstra.execute(graph, n[3], n[0]) is None


def test_parallel_edges_use_lightest_and_self_edges_are_ignored(make_graph):
    graph, n, e = make_graph(
        MWM, 3, [(0, 1), (0, 1), (1, 1), (1, 2), (2, 0)], [False, False, False, False, True], [5, 2, 0, 1, 1]
    )
    path = dijkstra.execute(graph, n[0], n[2])
    assert str(path) == "Path[0-(4)->1-(6)->2]"
    assert path.length() == 3


def test_zero_weight_edges(make_graph):
    graph, n, _ = make_graph(SWU, 3, [(0, 1), (1, 2), (0, 2)], False, [0, 0, 1])
    assert dijkstra.execute(graph, n[0], n[2]).length() == 0


def test_negative_weight_rejected(make_graph):
    graph, n, _ = make_graph(SWD, 3, [(0, 1), (1, 2)], True, [1, -1])
    with pytest.raises(InvalidArgumentError, match="Bellman-Ford"):
        dijkstra.execute(graph, n[0], n[1])


def test_unreachable_returns_none(make_graph):
    graph, n, _ = make_graph(SWD, 3, [(0, 1)], True, [1])
    assert dijkstra.execute(graph, n[1], n[0]) is None
    assert dijkstra.execute(graph, n[0], n[2]) is None


def test_start_equals_destination(complete5):
    graph, n, _ = complete5
    path = dijkstra.execute(graph, n[0], n[0])
    assert str(path) == "Path[0]"
    assert path.length() == 0


def test_nodes_must_belong_to_graph(complete5):
    graph, n, _ = complete5
    with pytest.raises(InvalidArgumentError, match="start node"):
        dijkstra.execute(graph, Node(99), n[0])
    with pytest.raises(InvalidArgumentError, match="destination node"):
        dijkstra.execute(graph, n[0], Node(99))


def test_graph_is_not_modified(complete5):
    graph, n, e = complete5
    before = graph.as_adjacency_list()
    dijkstra.execute(graph, n[1], n[4])
    assert graph.as_adjacency_list() == before
    assert graph.edge_set() == set(e)


def test_random_graphs_match_networkx():
    nx_graph = nx.gnm_random_graph(40, 120, seed=3, directed=True)
    for i, (u, v) in enumerate(nx_graph.edges):
        nx_graph[u][v]["weight"] = (i * 7) % 11
    graph = from_networkx(nx_graph)
    nodes = {node.id: node for node in graph.nodes}
    for source, target in [(0, 39), (5, 12), (17, 3), (22, 22)]:
        path = dijkstra.execute(graph, nodes[source], nodes[target])
        if nx.has_path(nx_graph, source, target):
            assert path.length() == nx.dijkstra_path_length(nx_graph, source, target)
        else:
            assert path is None
