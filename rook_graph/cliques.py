"""Grid clique builder.

Every row and every column of the grid is a clique. Two distinct cells never
share both a row and a column, so the two passes never touch the same pair.
No randomness; never fails for rows, cols >= 0.
"""
from __future__ import annotations

from rook_graph.adjacency import Adjacency
from rook_graph.types import GridShape


def build_cliques(shape: GridShape) -> Adjacency:
    n, m = shape.rows, shape.cols
    adj = Adjacency(shape.num_vertices)
    # Row cliques
    for i in range(n):
        for j in range(m):
            for k in range(j + 1, m):
                adj.connect(i * m + j, i * m + k)
    # Column cliques
    for j in range(m):
        for i in range(n):
            for k in range(i + 1, n):
                adj.connect(i * m + j, k * m + j)
    return adj


def clique_edge_count(shape: GridShape) -> int:
    """Edges of the unperturbed rook's graph: N*C(M,2) + M*C(N,2)."""
    n, m = shape.rows, shape.cols
    return n * (m * (m - 1) // 2) + m * (n * (n - 1) // 2)


__all__ = ["build_cliques", "clique_edge_count"]
