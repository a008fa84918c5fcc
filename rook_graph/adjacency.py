"""Adjacency relation for simple undirected graphs.

Invariants
- Symmetric: has_edge(u, v) == has_edge(v, u) after every mutation.
- Irreflexive: the diagonal is never set; self-loops are rejected.
- Frozen relations reject any mutation.

Storage is a dense (n, n) numpy bool matrix. Every mutation writes both
(u, v) and (v, u) so symmetric queries never need canonicalization.
"""
from __future__ import annotations

from typing import Iterable, Iterator, List, Tuple
import numpy as np


class FrozenAdjacencyError(RuntimeError):
    pass


class Adjacency:
    def __init__(self, n: int) -> None:
        if isinstance(n, bool) or not isinstance(n, (int, np.integer)):
            raise TypeError(f"n must be an integer; got type {type(n).__name__}.")
        if n < 0:
            raise ValueError(f"n must be >= 0, got {n}")
        self.n: int = int(n)
        self._m: np.ndarray = np.zeros((self.n, self.n), dtype=bool)

    @classmethod
    def from_edges(cls, n: int, pairs: Iterable[Tuple[int, int]]) -> "Adjacency":
        adj = cls(n)
        for u, v in pairs:
            adj.connect(int(u), int(v))
        return adj

    # --- mutation ---

    def _check_pair(self, u: int, v: int) -> None:
        if self.frozen:
            raise FrozenAdjacencyError("adjacency is frozen")
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise IndexError(f"pair ({u}, {v}) out of range for {self.n} vertices")
        if u == v:
            raise ValueError(f"self-loop on vertex {u} not allowed")

    def connect(self, u: int, v: int) -> None:
        self._check_pair(u, v)
        self._m[u, v] = True
        self._m[v, u] = True

    def disconnect(self, u: int, v: int) -> None:
        self._check_pair(u, v)
        self._m[u, v] = False
        self._m[v, u] = False

    def set_upper_row(self, u: int, values: np.ndarray) -> None:
        """
        Overwrite all pairs (u, v) with v > u in one shot, mirrored into column u.

        `values` must have shape (n - u - 1,). Used by the rewirer, which owns
        exactly one upper-triangle row per visited u.
        """
        if self.frozen:
            raise FrozenAdjacencyError("adjacency is frozen")
        if not 0 <= u < self.n:
            raise IndexError(f"vertex {u} out of range for {self.n} vertices")
        vals = np.asarray(values, dtype=bool)
        if vals.shape != (self.n - u - 1,):
            raise ValueError(f"expected {self.n - u - 1} values for row {u}, got shape {vals.shape}")
        self._m[u, u + 1:] = vals
        self._m[u + 1:, u] = vals

    def freeze(self) -> "Adjacency":
        self._m.setflags(write=False)
        return self

    @property
    def frozen(self) -> bool:
        return not self._m.flags.writeable

    # --- queries ---

    def has_edge(self, u: int, v: int) -> bool:
        if not (0 <= u < self.n and 0 <= v < self.n):
            raise IndexError(f"pair ({u}, {v}) out of range for {self.n} vertices")
        return bool(self._m[u, v])

    def upper_row(self, u: int) -> np.ndarray:
        """Read-only view of pairs (u, v) for v > u."""
        view = self._m[u, u + 1:]
        view.flags.writeable = False
        return view

    @property
    def num_edges(self) -> int:
        return int(np.count_nonzero(np.triu(self._m, k=1)))

    def degree(self, v: int) -> int:
        if not 0 <= v < self.n:
            raise IndexError(f"vertex {v} out of range for {self.n} vertices")
        return int(np.count_nonzero(self._m[v]))

    def edges(self) -> Iterator[Tuple[int, int]]:
        """Yield each edge once as (u, v), u < v, ascending by u then v."""
        for u in range(self.n):
            for v in np.flatnonzero(self._m[u, u + 1:]):
                yield u, u + 1 + int(v)

    def edge_list(self) -> List[Tuple[int, int]]:
        return list(self.edges())

    def to_matrix(self) -> np.ndarray:
        out = self._m.copy()
        out.setflags(write=False)
        return out

    def is_symmetric(self) -> bool:
        return bool(np.array_equal(self._m, self._m.T)) and not bool(np.any(np.diagonal(self._m)))

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Adjacency):
            return NotImplemented
        return self.n == other.n and bool(np.array_equal(self._m, other._m))

    def __repr__(self) -> str:
        return f"Adjacency(n={self.n}, edges={self.num_edges}, frozen={self.frozen})"


__all__ = ["Adjacency", "FrozenAdjacencyError"]
