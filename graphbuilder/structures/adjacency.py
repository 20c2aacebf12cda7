"""Per-node adjacency index.

Each node registered in a `Graph` owns one `AdjListData`. Edges are classified
by shape when registered:

- self-edges go to ``self_edges`` only;
- undirected edges go to ``undirected_edges[other]``;
- directed edges go to ``outgoing_edges[sink]`` on the source and to
  ``incoming_edges[source]`` on the sink.

Structure::

    undirected_edges: {neighbor: {edge, ...}}
    outgoing_edges:   {neighbor: {edge, ...}}
    incoming_edges:   {neighbor: {edge, ...}}
    self_edges:       {edge, ...}
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, Set

from graphbuilder.errors import (
    DuplicateRegistrationError,
    InvalidArgumentError,
    MissingRegistrationError,
)

if TYPE_CHECKING:
    from graphbuilder.graph.components import Edge, Node

EdgeGroups = Dict["Node", Set["Edge"]]


class AdjListData:
    """Adjacency data of a single node.

    Attributes:
        node: The node this data belongs to.
        undirected_edges: Undirected edges keyed by the other endpoint.
        outgoing_edges: Directed edges leaving ``node`` keyed by their sink.
        incoming_edges: Directed edges entering ``node`` keyed by their source.
        self_edges: All self-edges of ``node``, directed or not.
    """

    def __init__(self, node: Node) -> None:
        self.node = node
        self.undirected_edges: EdgeGroups = {}
        self.outgoing_edges: EdgeGroups = {}
        self.incoming_edges: EdgeGroups = {}
        self.self_edges: Set[Edge] = set()

    def _group_of(self, edge: Edge) -> EdgeGroups:
        """Return the map a non-self edge belongs to from this node's view."""
        if not edge.directed:
            return self.undirected_edges
        if edge.first == self.node:
            return self.outgoing_edges
        return self.incoming_edges

    def has_edge(self, edge: Edge) -> bool:
        """Return True iff ``edge`` is registered with this node."""
        if not edge.has_endpoint(self.node):
            return False
        if edge.is_self_edge:
            return edge in self.self_edges
        other = edge.get_other_endpoint(self.node)
        return edge in self._group_of(edge).get(other, ())

    def add_edge(self, edge: Edge) -> None:
        """Register ``edge`` with this node.

        Raises:
            InvalidArgumentError: If ``edge`` does not touch this node.
            DuplicateRegistrationError: If ``edge`` is already registered.
        """
        if not edge.has_endpoint(self.node):
            raise InvalidArgumentError(f"Edge {edge} does not have {self.node} as an endpoint.")
        if self.has_edge(edge):
            raise DuplicateRegistrationError(
                f"Edge {edge} is already registered with node {self.node}."
            )

        if edge.is_self_edge:
            self.self_edges.add(edge)
            return

        other = edge.get_other_endpoint(self.node)
        self._group_of(edge).setdefault(other, set()).add(edge)

    def remove_edge(self, edge: Edge) -> None:
        """Unregister ``edge`` from this node.

        Raises:
            MissingRegistrationError: If ``edge`` is not registered.
        """
        if not self.has_edge(edge):
            raise MissingRegistrationError(
                f"Edge {edge} is not registered with node {self.node}."
            )

        if edge.is_self_edge:
            self.self_edges.discard(edge)
            return

        other = edge.get_other_endpoint(self.node)
        group = self._group_of(edge)
        group[other].discard(edge)
        if not group[other]:
            del group[other]

    def neighboring_edges(self, follow_directed: bool) -> EdgeGroups:
        """Map each neighbor to the edges joining it with this node.

        Self-edges are never included.

        Args:
            follow_directed: If True, leave out incoming directed edges.

        Returns:
            A fresh ``{neighbor: {edge, ...}}`` map.
        """
        neighboring: EdgeGroups = {
            neighbor: set(edges) for neighbor, edges in self.undirected_edges.items()
        }
        for neighbor, edges in self.outgoing_edges.items():
            neighboring.setdefault(neighbor, set()).update(edges)
        if not follow_directed:
            for neighbor, edges in self.incoming_edges.items():
                neighboring.setdefault(neighbor, set()).update(edges)
        return neighboring

    def edges_to_neighbor(self, neighbor: Node, follow_directed: bool) -> Set[Edge]:
        """Return the edges joining this node with ``neighbor``.

        Args:
            neighbor: The other endpoint.
            follow_directed: If True, leave out directed edges from ``neighbor``
                to this node.
        """
        edges: Set[Edge] = set(self.undirected_edges.get(neighbor, ()))
        edges.update(self.outgoing_edges.get(neighbor, ()))
        if not follow_directed:
            edges.update(self.incoming_edges.get(neighbor, ()))
        return edges

    def neighbors(self, follow_directed: bool) -> Set[Node]:
        """Return the distinct nodes joined to this node by an edge.

        The node itself is included when it has a self-edge.

        Args:
            follow_directed: If True, leave out nodes joined only by directed
                edges that point at this node.
        """
        neighbors: Set[Node] = set(self.undirected_edges)
        neighbors.update(self.outgoing_edges)
        if not follow_directed:
            neighbors.update(self.incoming_edges)
        if self.self_edges:
            neighbors.add(self.node)
        return neighbors

    def degree(self) -> int:
        """Number of edge registrations held (a self-edge counts once)."""
        groups = (self.undirected_edges, self.outgoing_edges, self.incoming_edges)
        return len(self.self_edges) + sum(
            len(edges) for group in groups for edges in group.values()
        )

    def __repr__(self) -> str:
        return f"AdjListData(node={self.node}, degree={self.degree()})"
