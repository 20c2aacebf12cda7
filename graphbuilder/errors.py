"""Exception types raised by the graph container and algorithms.

All errors derive from ``ValueError`` through `GraphError`, so existing code
that guards graph calls with ``except ValueError`` keeps working while newer
callers can catch the specific condition.
"""

from __future__ import annotations

from typing import TYPE_CHECKING, Dict, List, Optional, Set

if TYPE_CHECKING:
    from graphbuilder.graph.components import Edge, Node
    from graphbuilder.graph.path import Cycle


class GraphError(ValueError):
    """Base class for graphbuilder errors."""


class InvalidArgumentError(GraphError):
    """A node or edge argument is not valid for the requested operation.

    Raised when a start/destination node is not a member of the graph, when a
    node is not an endpoint of the edge it is looked up on, or when the graph
    does not satisfy an algorithm's preconditions.
    """


class DuplicateRegistrationError(GraphError):
    """An edge is registered with a node's adjacency data more than once."""


class MissingRegistrationError(GraphError):
    """A node or edge is removed from a structure that does not hold it."""


class NegativeCycleError(GraphError):
    """No shortest path exists because of a negative cycle.

    Carries one of two witnesses:

    - ``negative_edges``: undirected edges with negative weight. Each one is a
      negative 2-cycle, since it can be walked in both directions.
    - ``next_hops`` and ``witness``: the next-hop table built by Bellman-Ford
      and a node whose distance could still be reduced. Following next hops
      from the witness reaches the negative cycle; `negative_cycle()` does so.

    Attributes:
        negative_edges: Negative undirected edges, if that check failed.
        next_hops: Map node -> edge towards the next node of its best path.
        witness: Node whose distance could still be relaxed.
    """

    def __init__(
        self,
        message: str,
        negative_edges: Optional[Set[Edge]] = None,
        next_hops: Optional[Dict[Node, Edge]] = None,
        witness: Optional[Node] = None,
    ) -> None:
        super().__init__(message)
        self.negative_edges = negative_edges
        self.next_hops = next_hops
        self.witness = witness

    def negative_cycle(self) -> Optional[Cycle]:
        """Materialize the negative cycle reached from the witness node.

        Returns:
            The cycle found by following next hops from the witness, or None
            when this error carries negative undirected edges instead.
        """
        # Import here to avoid circular import
        from graphbuilder.graph.path import Cycle

        if self.next_hops is None or self.witness is None:
            return None

        order: List[Node] = []
        position: Dict[Node, int] = {}
        current: Optional[Node] = self.witness
        while current is not None and current not in position:
            position[current] = len(order)
            order.append(current)
            edge = self.next_hops.get(current)
            current = edge.get_other_endpoint(current) if edge is not None else None

        if current is None:
            return None

        cycle_nodes = order[position[current] :]
        cycle_edges = [self.next_hops[node] for node in cycle_nodes]
        return Cycle.from_nodes(cycle_nodes, cycle_edges)
