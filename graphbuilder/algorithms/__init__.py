"""Graph algorithms.

Each algorithm lives in its own module with an ``execute`` entry point or, for
traversals, ``explore``/``search``/``connected`` functions.
"""

from graphbuilder.algorithms import bellman_ford, bfs, cycles, dfs, dijkstra, kruskal

__all__ = ["bellman_ford", "bfs", "cycles", "dfs", "dijkstra", "kruskal"]
