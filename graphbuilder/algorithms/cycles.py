"""Cycle detection for undirected, directed and mixed graphs.

A mixed graph is acyclic when no way of orienting its undirected edges creates
a directed cycle. Detection runs in three stages:

1. In multigraphs, look for a self-edge (1-cycle) or a pair of nodes joined by
   two edges that can be walked in opposite directions (2-cycle).
2. In undirected or directed graphs, run a depth-first search; meeting a node
   that is still on the search stack, other than the immediate parent, closes
   a cycle.
3. In mixed graphs, first reduce the graph to its relevant nodes, then walk
   backwards through them until a node repeats.

The reduction repeats two rules until neither applies:

- a node with no way in (no incoming directed edge and no undirected edge
  oriented towards it) and no unoriented undirected edge is irrelevant;
- a node with no way in and exactly one neighbor joined by unoriented
  undirected edges can only be entered over those edges, so they are
  oriented towards it.

Every relevant node left afterwards has a way in from another relevant node,
so a backward walk cannot get stuck and the graph has a cycle.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Iterator, List, Optional, Set, Tuple

from graphbuilder.algorithms.edge_select import arbitrary_edge, edges_between
from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.constraints import GraphConstraint
from graphbuilder.graph.graph import Graph
from graphbuilder.graph.path import Cycle
from graphbuilder.logging import get_logger
from graphbuilder.structures.pairs import UnorderedPair

logger = get_logger(__name__)

Orientations = Dict[UnorderedPair[Node], Node]


class _State(Enum):
    VISITING = 1
    VISITED = 2


def is_acyclic(graph: Graph) -> bool:
    """Return True iff ``graph`` contains no cycle."""
    return find_cycle(graph) is None


def find_cycle(graph: Graph) -> Optional[Cycle]:
    """Return some cycle of ``graph``, or None if it is acyclic.

    For mixed graphs the returned cycle may walk undirected edges; it is a
    directed cycle under some orientation of them.
    """
    cycle = find_small_cycle(graph)
    if cycle is not None:
        return cycle
    if graph.has_constraint(GraphConstraint.MIXED):
        return _find_cycle_mixed(graph)
    return _find_cycle_not_mixed(graph)


def find_small_cycle(graph: Graph) -> Optional[Cycle]:
    """Return a cycle of one or two nodes, or None.

    Only multigraphs can hold such cycles: a self-edge is a 1-cycle, and two
    edges between the same nodes form a 2-cycle when they can be walked in
    opposite directions. The same undirected edge is never used twice.
    """
    if not graph.has_constraint(GraphConstraint.MULTIGRAPH):
        return None

    for node in graph.nodes:
        self_edges = edges_between(graph, node, node, True)
        if self_edges:
            return Cycle.from_nodes([node], [self_edges[0]])

    for pair, group in graph.edges.items():
        if pair.first == pair.second:
            continue
        undirected = [edge for edge in group if not edge.directed]
        forward = [edge for edge in group if edge.directed and edge.first == pair.first]
        backward = [edge for edge in group if edge.directed and edge.first == pair.second]
        if len(undirected) > 1 or (undirected and (forward or backward)) or (forward and backward):
            # Directed edges go first so an undirected edge is only used once.
            to_second = (forward + undirected)[0]
            to_first = next(edge for edge in backward + undirected if edge is not to_second)
            return Cycle.from_nodes([pair.first, pair.second], [to_second, to_first])
    return None


def _close_tree_cycle(
    graph: Graph, ancestor: Node, node: Node, parents: Dict[Node, Optional[Node]]
) -> Cycle:
    """Build the cycle ``ancestor -> ... -> node -> ancestor`` from tree parents."""
    chain = [node]
    while chain[-1] != ancestor:
        parent = parents[chain[-1]]
        if parent is None:
            raise InvalidArgumentError(f"Node {ancestor} is not an ancestor of {node}.")
        chain.append(parent)
    chain.reverse()

    edges = [arbitrary_edge(graph, a, b, True) for a, b in zip(chain, chain[1:])]
    edges.append(arbitrary_edge(graph, node, ancestor, True))
    return Cycle.from_nodes(chain, edges)


def _find_cycle_not_mixed(graph: Graph) -> Optional[Cycle]:
    """Three-color depth-first search over every component."""
    state: Dict[Node, _State] = {}
    parents: Dict[Node, Optional[Node]] = {}

    def neighbors_of(node: Node) -> Iterator[Node]:
        return iter(sorted(graph.get_adj_list_of(node).neighbors(True)))

    for root in graph.nodes:
        if root in state:
            continue
        state[root] = _State.VISITING
        parents[root] = None
        stack: List[Tuple[Node, Iterator[Node]]] = [(root, neighbors_of(root))]
        while stack:
            node, neighbors = stack[-1]
            for neighbor in neighbors:
                if neighbor == node:
                    continue
                seen = state.get(neighbor)
                if seen is _State.VISITING and parents[node] != neighbor:
                    return _close_tree_cycle(graph, neighbor, node, parents)
                if seen is None:
                    state[neighbor] = _State.VISITING
                    parents[neighbor] = node
                    stack.append((neighbor, neighbors_of(neighbor)))
                    break
            else:
                stack.pop()
                state[node] = _State.VISITED
    return None


def _reduction_pass(
    graph: Graph, relevant: Set[Node], oriented: Orientations
) -> Tuple[Set[Node], Orientations]:
    """Apply both reduction rules once to every relevant node.

    When both nodes of a pair claim it in the same pass, the first one in id
    order gets it and the other is irrelevant at once: it has no way in and
    no unoriented pair left.

    Returns:
        The nodes found irrelevant and the new orientations. Neither is
        applied yet, so every node is judged against the same state.
    """
    irrelevant: Set[Node] = set()
    new_orientations: Orientations = {}

    for current in sorted(relevant):
        adj = graph.get_adj_list_of(current)

        has_way_in = any(neighbor in relevant for neighbor in adj.incoming_edges)
        unoriented: List[Node] = []
        for neighbor in sorted(adj.undirected_edges):
            if neighbor not in relevant:
                continue
            pair = UnorderedPair(current, neighbor)
            if pair not in oriented:
                unoriented.append(neighbor)
            elif oriented[pair] == current:
                has_way_in = True

        if has_way_in:
            continue
        if not unoriented:
            irrelevant.add(current)
        elif len(unoriented) == 1:
            pair = UnorderedPair(current, unoriented[0])
            if new_orientations.setdefault(pair, current) != current:
                irrelevant.add(current)

    return irrelevant, new_orientations


def reduce_mixed(graph: Graph) -> Tuple[Set[Node], Orientations]:
    """Reduce a mixed graph to the nodes that may lie on a cycle.

    Returns:
        ``(relevant, oriented)``: the relevant nodes and, for each node pair
        whose undirected edges were oriented, the node they now point to.
    """
    relevant: Set[Node] = set(graph.nodes)
    oriented: Orientations = {}

    passes = 0
    while True:
        irrelevant, new_orientations = _reduction_pass(graph, relevant, oriented)
        if not irrelevant and not new_orientations:
            break
        passes += 1
        relevant -= irrelevant
        oriented.update(new_orientations)

    logger.debug(
        f"Mixed reduction finished after {passes} pass(es): "
        f"{len(relevant)} relevant node(s), {len(oriented)} oriented pair(s)"
    )
    return relevant, oriented


def _ways_in(
    graph: Graph,
    node: Node,
    came_from: Optional[Node],
    relevant: Set[Node],
    oriented: Orientations,
) -> List[Edge]:
    """Return the edges a backward walk may take from ``node``.

    These are directed edges into ``node`` and undirected edges that are
    unoriented or oriented towards ``node``, all from relevant nodes. The
    undirected edges back to ``came_from`` are left out.
    """
    adj = graph.get_adj_list_of(node)
    ways: List[Edge] = []
    for neighbor in sorted(adj.incoming_edges):
        if neighbor in relevant:
            ways.append(arbitrary_edge(graph, neighbor, node, True))
    for neighbor in sorted(adj.undirected_edges):
        if neighbor not in relevant or neighbor == came_from:
            continue
        if oriented.get(UnorderedPair(node, neighbor), node) == node:
            ways.append(
                next(e for e in edges_between(graph, node, neighbor, False) if not e.directed)
            )
    return ways


def _walk_mixed(
    graph: Graph, start: Node, relevant: Set[Node], oriented: Orientations
) -> Optional[Cycle]:
    """Walk backwards from ``start`` until a node of the walk repeats.

    ``path_edges[i]`` leads from ``path_nodes[i + 1]`` to ``path_nodes[i]``.
    Dead ends are backtracked.
    """
    path_nodes: List[Node] = [start]
    path_edges: List[Edge] = []
    position: Dict[Node, int] = {start: 0}
    options: List[Iterator[Edge]] = [iter(_ways_in(graph, start, None, relevant, oriented))]

    while options:
        current = path_nodes[-1]
        edge = next(options[-1], None)
        if edge is None:
            options.pop()
            del position[path_nodes.pop()]
            if path_edges:
                path_edges.pop()
            continue

        previous = edge.get_other_endpoint(current)
        if previous in position:
            # Read the loop forwards: previous, then the walk back down to it.
            k = position[previous]
            stop = k - 1 if k > 0 else None
            nodes = [previous] + path_nodes[:k:-1]
            edges = [edge] + path_edges[:stop:-1]
            return Cycle.from_nodes(nodes, edges)

        position[previous] = len(path_nodes)
        path_nodes.append(previous)
        path_edges.append(edge)
        options.append(iter(_ways_in(graph, previous, current, relevant, oriented)))
    return None


def _find_cycle_mixed(graph: Graph) -> Optional[Cycle]:
    relevant, oriented = reduce_mixed(graph)
    for start in sorted(relevant):
        cycle = _walk_mixed(graph, start, relevant, oriented)
        if cycle is not None:
            return cycle
    return None
