"""Node and edge entities.

Nodes are lightweight handles identified by an integer id; the adjacency data
for a node is owned by the `Graph` it is registered in, so a node can belong to
several graphs at once. Edges are identity-bearing: two edges with the same
endpoints are distinct members of a multigraph.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from graphbuilder.config import DEFAULTS
from graphbuilder.errors import InvalidArgumentError
from graphbuilder.structures.pairs import OrderedPair


@dataclass(frozen=True, order=True)
class Node:
    """A vertex handle. Equality and hashing use the id only."""

    id: int

    def __str__(self) -> str:
        return f"{{{self.id}}}"


class Edge:
    """An edge between two nodes.

    For directed edges ``first`` is the source and ``second`` the sink; for
    undirected edges the order only records how the edge was drawn.

    Attributes:
        endpoints: The ordered pair ``(first, second)``.
        directed: Whether the edge is directed.
        id: Optional caller-assigned identifier, used in string forms.
        weight: Optional numeric weight. Unweighted edges leave it as None.
    """

    __slots__ = ("endpoints", "directed", "id", "weight")

    def __init__(
        self,
        first: Node,
        second: Node,
        directed: bool = False,
        id: Optional[int] = None,
        weight: Optional[float] = None,
    ) -> None:
        self.endpoints = OrderedPair(first, second)
        self.directed = directed
        self.id = id
        self.weight = weight

    @property
    def first(self) -> Node:
        """The first endpoint (source of a directed edge)."""
        return self.endpoints.first

    @property
    def second(self) -> Node:
        """The second endpoint (sink of a directed edge)."""
        return self.endpoints.second

    @property
    def is_self_edge(self) -> bool:
        """True iff both endpoints are the same node."""
        return self.endpoints.first == self.endpoints.second

    @property
    def is_weighted(self) -> bool:
        return self.weight is not None

    @property
    def numeric_weight(self) -> float:
        """The weight, or the configured unweighted default (1.0)."""
        if self.weight is None:
            return DEFAULTS.unweighted_edge_weight
        return self.weight

    def has_endpoint(self, node: Node) -> bool:
        return node == self.endpoints.first or node == self.endpoints.second

    def get_other_endpoint(self, endpoint: Node) -> Node:
        """Return the endpoint opposite to ``endpoint``.

        Args:
            endpoint: One of this edge's endpoints.

        Returns:
            The other endpoint (``endpoint`` itself for a self-edge).

        Raises:
            InvalidArgumentError: If ``endpoint`` is not an endpoint of this edge.
        """
        if endpoint == self.endpoints.first:
            return self.endpoints.second
        if endpoint == self.endpoints.second:
            return self.endpoints.first
        raise InvalidArgumentError(
            f"Invalid endpoint: edge {self} does not have {endpoint} as an endpoint."
        )

    def __str__(self) -> str:
        return f"({self.first.id},{self.second.id})"

    def __repr__(self) -> str:
        arrow = "->" if self.directed else "--"
        weight = "" if self.weight is None else f", weight={self.weight}"
        return f"Edge(id={self.id}, {self.first.id}{arrow}{self.second.id}{weight})"


class WeightedEdge(Edge):
    """An edge constructed with a mandatory numeric weight."""

    __slots__ = ()

    def __init__(
        self,
        first: Node,
        second: Node,
        directed: bool,
        weight: float,
        id: Optional[int] = None,
    ) -> None:
        super().__init__(first, second, directed=directed, id=id, weight=float(weight))
