"""Paths and cycles over graph edges.

A `Path` with ``n`` nodes holds ``n - 1`` edges; edge ``i`` joins node ``i``
to node ``i + 1``. A `Cycle` is a path whose last node is its first node.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Iterator, List, Optional, Sequence, Tuple

from graphbuilder.errors import InvalidArgumentError
from graphbuilder.graph.components import Edge, Node


class Path:
    """A walk through a graph, starting at a single node."""

    def __init__(self, start: Node) -> None:
        self._nodes: Deque[Node] = deque([start])
        self._edges: Deque[Edge] = deque()

    @staticmethod
    def _check_joins(edge: Edge, a: Node, b: Node) -> None:
        if not edge.has_endpoint(a) or edge.get_other_endpoint(a) != b:
            raise InvalidArgumentError(f"Edge {edge!r} does not join {a} and {b}.")

    def append_node(self, node: Node, edge: Edge) -> None:
        """Extend the path at its end with ``edge`` leading to ``node``.

        Raises:
            InvalidArgumentError: If ``edge`` does not join the last node and
                ``node``.
        """
        self._check_joins(edge, self._nodes[-1], node)
        self._nodes.append(node)
        self._edges.append(edge)

    def prepend_node(self, node: Node, edge: Edge) -> None:
        """Extend the path at its start with ``node`` and ``edge`` leading on.

        Raises:
            InvalidArgumentError: If ``edge`` does not join ``node`` and the
                first node.
        """
        self._check_joins(edge, node, self._nodes[0])
        self._nodes.appendleft(node)
        self._edges.appendleft(edge)

    def remove_last(self) -> Tuple[Node, Edge]:
        """Drop the last node and the edge leading to it.

        Raises:
            InvalidArgumentError: If the path consists of its start node only.
        """
        if not self._edges:
            raise InvalidArgumentError("Cannot remove the only node of a path.")
        return self._nodes.pop(), self._edges.pop()

    @property
    def nodes(self) -> List[Node]:
        return list(self._nodes)

    @property
    def edges(self) -> List[Edge]:
        return list(self._edges)

    @property
    def first_node(self) -> Node:
        return self._nodes[0]

    @property
    def last_node(self) -> Node:
        return self._nodes[-1]

    @property
    def edge_length(self) -> int:
        """Number of edges."""
        return len(self._edges)

    def length(self) -> float:
        """Sum of the numeric weights of the edges."""
        return sum(edge.numeric_weight for edge in self._edges)

    @property
    def is_cycle(self) -> bool:
        return self._nodes[0] == self._nodes[-1]

    def __iter__(self) -> Iterator[Tuple[Node, Optional[Edge]]]:
        """Yield ``(node, edge_to_next)``; the last node is paired with None."""
        for node, edge in zip(self._nodes, self._edges):
            yield node, edge
        yield self._nodes[-1], None

    def __len__(self) -> int:
        """Number of nodes."""
        return len(self._nodes)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Path) or isinstance(other, Cycle) != isinstance(self, Cycle):
            return NotImplemented
        return self.nodes == other.nodes and _same_edges(self.edges, other.edges)

    # Paths are mutable, so they compare by value but cannot be hashed.
    __hash__ = None  # type: ignore[assignment]

    def _body(self) -> str:
        parts = []
        for node, edge in self:
            parts.append(str(node.id))
            if edge is not None:
                label = "" if edge.id is None else edge.id
                parts.append(f"-({label})->")
        return "".join(parts)

    def __str__(self) -> str:
        return f"Path[{self._body()}]"

    def __repr__(self) -> str:
        return str(self)


class Cycle(Path):
    """A closed path. Equality ignores which node the cycle is read from."""

    def __init__(self, start: Node) -> None:
        super().__init__(start)

    @classmethod
    def from_path(cls, path: Path) -> Cycle:
        """Build a cycle from a path that ends where it starts.

        Raises:
            InvalidArgumentError: If the path is not closed.
        """
        if not path.is_cycle:
            raise InvalidArgumentError(f"{path} does not end at its first node.")
        cycle = cls(path.first_node)
        for node, edge in zip(path.nodes[1:], path.edges):
            cycle.append_node(node, edge)
        return cycle

    @classmethod
    def from_nodes(cls, nodes: Sequence[Node], edges: Sequence[Edge]) -> Cycle:
        """Build a cycle from its nodes and the edges leaving each of them.

        Edge ``i`` joins ``nodes[i]`` to ``nodes[i + 1]``; the last edge joins
        the last node back to the first.

        Raises:
            InvalidArgumentError: If the sequences are empty, differ in length
                or an edge does not join its nodes.
        """
        if not nodes or len(nodes) != len(edges):
            raise InvalidArgumentError(
                f"A cycle needs as many edges as nodes, got {len(nodes)} nodes "
                f"and {len(edges)} edges."
            )
        cycle = cls(nodes[0])
        for i, edge in enumerate(edges):
            cycle.append_node(nodes[(i + 1) % len(nodes)], edge)
        return cycle

    @property
    def cycle_nodes(self) -> List[Node]:
        """The distinct positions of the cycle, without the closing repeat."""
        nodes = self.nodes
        return nodes[:-1] if len(nodes) > 1 else nodes

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cycle):
            return NotImplemented
        nodes, edges = self.cycle_nodes, self.edges
        other_nodes, other_edges = other.cycle_nodes, other.edges
        if len(nodes) != len(other_nodes) or len(edges) != len(other_edges):
            return False
        if not edges:
            return nodes == other_nodes
        for shift in range(len(nodes)):
            if (
                nodes[shift:] + nodes[:shift] == other_nodes
                and _same_edges(edges[shift:] + edges[:shift], other_edges)
            ):
                return True
        return False

    __hash__ = None  # type: ignore[assignment]

    def __str__(self) -> str:
        return f"Cycle[{self._body()}]"


def _same_edges(a: Sequence[Edge], b: Sequence[Edge]) -> bool:
    return len(a) == len(b) and all(x is y for x, y in zip(a, b))
