"""Configuration defaults for graphbuilder components."""

from dataclasses import dataclass

from graphbuilder.graph.constraints import GraphConstraint


@dataclass
class GraphDefaults:
    """Defaults applied when callers do not specify a value explicitly."""

    # Constraints of a Graph constructed without arguments
    constraints: GraphConstraint = (
        GraphConstraint.SIMPLE | GraphConstraint.UNDIRECTED | GraphConstraint.UNWEIGHTED
    )

    # Numeric weight reported by edges that carry no weight of their own.
    # Shared by every weight-dependent algorithm, so BFS-style unweighted
    # shortest paths and weighted Dijkstra run through one implementation.
    unweighted_edge_weight: float = 1.0


# Global configuration instance
DEFAULTS = GraphDefaults()
