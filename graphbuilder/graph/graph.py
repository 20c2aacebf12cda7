"""Graph container enforcing its constraint flags.

`Graph` keeps three views of its contents in sync:

- the node set, in insertion order;
- one `AdjListData` per node, used by every traversal;
- the edge groups, a map ``UnorderedPair -> [Edge, ...]`` holding all edges
  between two nodes regardless of direction, in insertion order.

``add_edge`` reports constraint violations by returning False instead of
raising, so interactive callers can probe whether an edge is allowed. Removing
something that is not there raises `MissingRegistrationError`.
"""

from __future__ import annotations

from typing import Dict, Iterable, Iterator, List, Optional, Set

from graphbuilder.config import DEFAULTS
from graphbuilder.errors import InvalidArgumentError, MissingRegistrationError
from graphbuilder.graph.components import Edge, Node
from graphbuilder.graph.constraints import GraphConstraint
from graphbuilder.logging import get_logger
from graphbuilder.structures.adjacency import AdjListData
from graphbuilder.structures.pairs import UnorderedPair

logger = get_logger(__name__)

EdgeGroups = Dict[UnorderedPair[Node], List[Edge]]


class Graph:
    """A mutable graph of `Node` and `Edge` objects.

    Attributes:
        constraints: The active `GraphConstraint` bits.
    """

    def __init__(self, constraints: Optional[GraphConstraint] = None) -> None:
        """Initialize an empty graph.

        Args:
            constraints: Constraint bits; defaults to ``DEFAULTS.constraints``.
        """
        if constraints is None:
            constraints = DEFAULTS.constraints
        self.constraints = GraphConstraint(constraints)
        self._adjacency: Dict[Node, AdjListData] = {}
        self._edges: EdgeGroups = {}

    #
    # Constraints
    #
    def has_constraint(self, constraint: GraphConstraint) -> bool:
        """Return True iff every bit of ``constraint`` is set on this graph."""
        return (self.constraints & constraint) == constraint

    def add_constraint(self, constraint: GraphConstraint) -> None:
        """Set the bits of ``constraint``. Existing edges are not re-validated."""
        self.constraints |= constraint

    def remove_constraint(self, constraint: GraphConstraint) -> None:
        """Clear the bits of ``constraint``. Existing edges are not re-validated."""
        self.constraints &= ~constraint

    #
    # Node management
    #
    def add_node(self, node: Node) -> None:
        """Add ``node``; adding a member again is a no-op."""
        if node not in self._adjacency:
            self._adjacency[node] = AdjListData(node)

    def add_nodes(self, nodes: Iterable[Node]) -> None:
        for node in nodes:
            self.add_node(node)

    def remove_node(self, node: Node) -> Dict[UnorderedPair[Node], List[Edge]]:
        """Remove ``node`` and every edge incident to it.

        Args:
            node: The node to remove.

        Returns:
            The removed edge groups, keyed by pair, so the caller can restore
            them with `add_edge` after re-adding the node.

        Raises:
            MissingRegistrationError: If ``node`` is not in the graph.
        """
        if node not in self._adjacency:
            raise MissingRegistrationError(f"Node {node} does not exist in this graph.")

        removed: EdgeGroups = {
            pair: edges for pair, edges in self._edges.items() if pair.contains(node)
        }
        for pair, edges in removed.items():
            del self._edges[pair]
            for edge in edges:
                other = edge.get_other_endpoint(node)
                if other != node:
                    self._adjacency[other].remove_edge(edge)

        del self._adjacency[node]
        return removed

    def contains_node(self, node: Node) -> bool:
        return node in self._adjacency

    @property
    def nodes(self) -> List[Node]:
        """Member nodes in insertion order."""
        return list(self._adjacency)

    def get_adj_list_of(self, node: Node) -> AdjListData:
        """Return the adjacency data of ``node``.

        Raises:
            InvalidArgumentError: If ``node`` is not in the graph.
        """
        try:
            return self._adjacency[node]
        except KeyError:
            raise InvalidArgumentError(f"Node {node} does not exist in this graph.") from None

    #
    # Edge management
    #
    def _rejection_reason(self, edge: Edge) -> Optional[str]:
        """Return why ``edge`` cannot be added, or None if it can."""
        if edge.first not in self._adjacency or edge.second not in self._adjacency:
            return "an endpoint is not in the graph"
        pair = UnorderedPair(edge.first, edge.second)
        group = self._edges.get(pair, ())
        if any(existing is edge for existing in group):
            return "the edge is already in the graph"
        if self.has_constraint(GraphConstraint.SIMPLE) and group:
            return "the graph is simple and the pair is already joined"
        if edge.is_self_edge and not self.has_constraint(GraphConstraint.MULTIGRAPH):
            return "self-edges require a multigraph"
        if edge.directed and not self.has_constraint(GraphConstraint.DIRECTED):
            return "directed edges are not allowed"
        if not edge.directed and not self.has_constraint(GraphConstraint.UNDIRECTED):
            return "undirected edges are not allowed"
        return None

    def can_add_edge(self, edge: Edge) -> bool:
        """Return True iff `add_edge` would accept ``edge``."""
        return self._rejection_reason(edge) is None

    def add_edge(self, edge: Edge, index: Optional[int] = None) -> bool:
        """Add ``edge`` if the graph's constraints allow it.

        Args:
            edge: The edge to add. Both endpoints must already be members.
            index: Optional position inside the edge's pair group. Appends
                when omitted.

        Returns:
            True if the edge was added, False if it was rejected. A rejected
            edge leaves the graph unchanged.
        """
        reason = self._rejection_reason(edge)
        if reason is not None:
            logger.debug(f"Rejected edge {edge!r}: {reason}")
            return False

        group = self._edges.setdefault(UnorderedPair(edge.first, edge.second), [])
        if index is None:
            group.append(edge)
        else:
            group.insert(index, edge)

        self._adjacency[edge.first].add_edge(edge)
        if not edge.is_self_edge:
            self._adjacency[edge.second].add_edge(edge)
        return True

    def add_edges(self, edges: Iterable[Edge]) -> bool:
        """Add each edge in turn.

        Returns:
            True iff every edge was added.
        """
        added = True
        for edge in edges:
            added = self.add_edge(edge) and added
        return added

    def remove_edge(self, edge: Edge) -> int:
        """Remove ``edge`` from the graph.

        Returns:
            The position the edge held inside its pair group, suitable for
            `add_edge(edge, index=...)`.

        Raises:
            MissingRegistrationError: If ``edge`` is not in the graph.
        """
        pair = UnorderedPair(edge.first, edge.second)
        group = self._edges.get(pair, [])
        for index, existing in enumerate(group):
            if existing is edge:
                break
        else:
            raise MissingRegistrationError(f"Edge {edge!r} does not exist in this graph.")

        del group[index]
        if not group:
            del self._edges[pair]

        self._adjacency[edge.first].remove_edge(edge)
        if not edge.is_self_edge:
            self._adjacency[edge.second].remove_edge(edge)
        return index

    def contains_edge(self, edge: Edge) -> bool:
        group = self._edges.get(UnorderedPair(edge.first, edge.second), ())
        return any(existing is edge for existing in group)

    @property
    def edges(self) -> EdgeGroups:
        """The edge groups, ``UnorderedPair -> [Edge, ...]``. Do not mutate."""
        return self._edges

    def edge_set(self) -> Set[Edge]:
        """All edges as a flat set."""
        return {edge for group in self._edges.values() for edge in group}

    def edge_count(self) -> int:
        return sum(len(group) for group in self._edges.values())

    def is_empty(self) -> bool:
        """True iff the graph has no nodes."""
        return not self._adjacency

    #
    # Whole-graph helpers
    #
    def copy(self) -> Graph:
        """Return a structural copy sharing this graph's node and edge objects."""
        other = Graph(self.constraints)
        other.add_all(self)
        return other

    def add_all(self, other: Graph) -> bool:
        """Add every node and edge of ``other`` to this graph.

        Returns:
            True iff every edge of ``other`` was accepted.
        """
        self.add_nodes(other.nodes)
        added = True
        for group in other.edges.values():
            added = self.add_edges(group) and added
        return added

    def induced_subgraph(self, nodes: Iterable[Node]) -> Graph:
        """Return the subgraph on ``nodes`` with every edge between them.

        Raises:
            InvalidArgumentError: If any node is not in this graph.
        """
        keep = list(nodes)
        for node in keep:
            if node not in self._adjacency:
                raise InvalidArgumentError(f"Node {node} does not exist in this graph.")

        subgraph = Graph(self.constraints)
        subgraph.add_nodes(keep)
        kept = set(keep)
        for pair, group in self._edges.items():
            if pair.first in kept and pair.second in kept:
                subgraph.add_edges(group)
        return subgraph

    def as_adjacency_list(self) -> str:
        """Render one ``id:n1,n2`` line per node, following directed edges.

        A node without neighbors is rendered as its bare id.
        """
        lines = []
        for node, adj in self._adjacency.items():
            neighbors = sorted(neighbor.id for neighbor in adj.neighbors(True))
            if neighbors:
                lines.append(f"{node.id}:" + ",".join(str(n) for n in neighbors))
            else:
                lines.append(str(node.id))
        return "\n".join(lines)

    def __contains__(self, item: object) -> bool:
        if isinstance(item, Node):
            return self.contains_node(item)
        if isinstance(item, Edge):
            return self.contains_edge(item)
        return False

    def __len__(self) -> int:
        """Number of nodes."""
        return len(self._adjacency)

    def __iter__(self) -> Iterator[Node]:
        return iter(self._adjacency)

    def __repr__(self) -> str:
        return (
            f"Graph(constraints={self.constraints!r}, nodes={len(self)}, "
            f"edges={self.edge_count()})"
        )
