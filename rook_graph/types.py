# Grid types for the rook's graph: row-major cell <-> vertex id mapping.
from __future__ import annotations
from dataclasses import dataclass
from typing import List

import numpy as np


def require_count(name: str, val: int) -> None:
    if isinstance(val, bool) or not isinstance(val, (int, np.integer)):
        raise TypeError(f"{name} must be an integer; got type {type(val).__name__}.")
    if val < 0:
        raise ValueError(f"{name} must be >= 0, got {val}")


@dataclass(frozen=True)
class Coord:
    row: int
    col: int


@dataclass(frozen=True)
class GridShape:
    """N rows by M columns. Vertex id of (row, col) is row * M + col."""
    rows: int
    cols: int

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        require_count("rows", self.rows)
        require_count("cols", self.cols)

    @property
    def num_vertices(self) -> int:
        return int(self.rows) * int(self.cols)

    def in_bounds(self, c: Coord) -> bool:
        return 0 <= c.row < self.rows and 0 <= c.col < self.cols

    def vertex_id(self, c: Coord) -> int:
        if not self.in_bounds(c):
            raise ValueError(f"coord {c} outside {self.rows}x{self.cols} grid")
        return c.row * self.cols + c.col

    def coord_of(self, v: int) -> Coord:
        if not 0 <= v < self.num_vertices:
            raise ValueError(f"vertex id {v} out of range [0, {self.num_vertices})")
        row, col = divmod(int(v), self.cols)
        return Coord(row, col)

    def in_line(self, u: int, v: int) -> bool:
        """True when u and v share a row or a column (derived from ids only)."""
        for w in (u, v):
            if not 0 <= w < self.num_vertices:
                raise ValueError(f"vertex id {w} out of range [0, {self.num_vertices})")
        return u // self.cols == v // self.cols or u % self.cols == v % self.cols

    def row_ids(self) -> np.ndarray:
        """Row index of every vertex, shape (N*M,)."""
        return np.arange(self.num_vertices, dtype=np.int64) // max(1, self.cols)

    def col_ids(self) -> np.ndarray:
        """Column index of every vertex, shape (N*M,)."""
        return np.arange(self.num_vertices, dtype=np.int64) % max(1, self.cols)

    def row_members(self, i: int) -> List[int]:
        if not 0 <= i < self.rows:
            raise ValueError(f"row {i} out of range [0, {self.rows})")
        return [i * self.cols + j for j in range(self.cols)]

    def col_members(self, j: int) -> List[int]:
        if not 0 <= j < self.cols:
            raise ValueError(f"column {j} out of range [0, {self.cols})")
        return [i * self.cols + j for i in range(self.rows)]
