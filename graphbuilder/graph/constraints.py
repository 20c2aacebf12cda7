"""Constraint flags describing which edges a Graph accepts."""

from __future__ import annotations

from enum import IntFlag


class GraphConstraint(IntFlag):
    """Bit flags selecting the graph type, edge behavior and weighting.

    Edge behavior bits are independent, so ``MIXED`` is exactly
    ``UNDIRECTED | DIRECTED``. Test with `Graph.has_constraint`, which checks
    that every bit of the queried flag is set.
    """

    #: Undirected edges are allowed.
    UNDIRECTED = 0b1
    #: Directed edges are allowed.
    DIRECTED = 0b10
    #: Both undirected and directed edges are allowed.
    MIXED = 0b11

    #: At most one edge per node pair and no self-edges.
    SIMPLE = 0b1000
    #: Parallel edges and self-edges are allowed.
    MULTIGRAPH = 0b10000

    #: Edges carry no weight; algorithms use the unweighted default.
    UNWEIGHTED = 0b100000
    #: Edges carry numeric weights.
    WEIGHTED = 0b1000000


EDGE_BEHAVIOR_MASK = GraphConstraint.MIXED
GRAPH_TYPE_MASK = GraphConstraint.SIMPLE | GraphConstraint.MULTIGRAPH
WEIGHT_MASK = GraphConstraint.UNWEIGHTED | GraphConstraint.WEIGHTED
