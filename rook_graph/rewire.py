"""Probabilistic rewirer.

Invariants
- Every unordered pair (u, v), u < v, is visited exactly once.
- In-line pairs (same row or column) are removed with probability beta;
  cross pairs are added with probability alpha. Trigger is `draw < p`, so
  p <= 0 never fires and p >= 1 always fires.
- One uniform draw in [0, 1) per pair from the injected generator, consumed
  in ascending (u, v) order. No hidden global RNG.
- A pair's outcome never depends on another pair's post-rewire state.

Public API
- RewireStats
- rewire(adj, shape, alpha, beta, rng) -> RewireStats
- pair_ranges(n, chunks) -> list[(start, stop)]
- rewire_parallel(adj, shape, alpha, beta, seed=None, workers=2) -> RewireStats
"""
from __future__ import annotations

from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from typing import List, Tuple, Union
import numpy as np

from rook_graph.adjacency import Adjacency
from rook_graph.types import GridShape

SeedLike = Union[None, int, np.random.SeedSequence]


@dataclass(frozen=True)
class RewireStats:
    pairs_visited: int = 0
    removed: int = 0
    added: int = 0

    def __add__(self, other: "RewireStats") -> "RewireStats":
        return RewireStats(
            pairs_visited=self.pairs_visited + other.pairs_visited,
            removed=self.removed + other.removed,
            added=self.added + other.added,
        )


def _rewire_rows(
    adj: Adjacency,
    shape: GridShape,
    alpha: float,
    beta: float,
    rng: np.random.Generator,
    start: int,
    stop: int,
) -> RewireStats:
    n = shape.num_vertices
    row_of = shape.row_ids()
    col_of = shape.col_ids()
    visited = removed = added = 0
    for u in range(start, stop):
        k = n - u - 1
        if k <= 0:
            continue
        draws = rng.random(k)
        in_line = (row_of[u + 1:] == row_of[u]) | (col_of[u + 1:] == col_of[u])
        current = np.array(adj.upper_row(u), dtype=bool)
        drop = in_line & (draws < beta)
        add = ~in_line & (draws < alpha)
        removed += int(np.count_nonzero(current & drop))
        added += int(np.count_nonzero(~current & add))
        adj.set_upper_row(u, (current & ~drop) | add)
        visited += k
    return RewireStats(pairs_visited=visited, removed=removed, added=added)


def _check_relation(adj: Adjacency, shape: GridShape) -> None:
    if adj.n != shape.num_vertices:
        raise ValueError(
            f"adjacency has {adj.n} vertices but grid {shape.rows}x{shape.cols} has {shape.num_vertices}"
        )


def rewire(
    adj: Adjacency,
    shape: GridShape,
    alpha: float,
    beta: float,
    rng: np.random.Generator,
) -> RewireStats:
    """
    Apply one Bernoulli trial per unordered pair, mutating `adj` in place.

    Parameters
    ----------
    adj : Adjacency
        Relation produced by build_cliques(shape).
    alpha, beta : float
        Add / remove probabilities. Not validated here.
    rng : np.random.Generator
        Caller-owned random source; seed it for reproducible graphs.
    """
    _check_relation(adj, shape)
    return _rewire_rows(adj, shape, float(alpha), float(beta), rng, 0, shape.num_vertices)


def pair_ranges(n: int, chunks: int) -> List[Tuple[int, int]]:
    """
    Split [0, n) into at most `chunks` contiguous u-ranges with roughly equal
    numbers of (u, v > u) pairs. Ranges are non-empty and cover [0, n).
    """
    if int(chunks) < 1:
        raise ValueError("chunks must be >= 1")
    if n <= 0:
        return []
    per_row = np.arange(n - 1, -1, -1, dtype=np.int64)
    cum = np.cumsum(per_row)
    total = int(cum[-1])
    bounds = [0]
    for c in range(1, int(chunks)):
        target = total * c / int(chunks)
        b = int(np.searchsorted(cum, target, side="left")) + 1
        if bounds[-1] < b < n:
            bounds.append(b)
    bounds.append(n)
    return [(bounds[i], bounds[i + 1]) for i in range(len(bounds) - 1)]


def rewire_parallel(
    adj: Adjacency,
    shape: GridShape,
    alpha: float,
    beta: float,
    seed: SeedLike = None,
    workers: int = 2,
) -> RewireStats:
    """
    Rewire with the pair space split across a thread pool.

    Each chunk draws from its own generator spawned from one SeedSequence, so
    a given (seed, workers) pair is reproducible. Chunks write disjoint cells
    (the rows u they own and the mirrored column entries), so no locking.
    """
    _check_relation(adj, shape)
    if int(workers) < 1:
        raise ValueError("workers must be >= 1")
    ss = seed if isinstance(seed, np.random.SeedSequence) else np.random.SeedSequence(seed)
    ranges = pair_ranges(shape.num_vertices, int(workers))
    if not ranges:
        return RewireStats()
    children = ss.spawn(len(ranges))
    a, b = float(alpha), float(beta)

    def _run(job: Tuple[Tuple[int, int], np.random.SeedSequence]) -> RewireStats:
        (start, stop), child = job
        return _rewire_rows(adj, shape, a, b, np.random.default_rng(child), start, stop)

    total = RewireStats()
    with ThreadPoolExecutor(max_workers=int(workers)) as pool:
        for part in pool.map(_run, zip(ranges, children)):
            total = total + part
    return total


__all__ = ["RewireStats", "rewire", "pair_ranges", "rewire_parallel"]
