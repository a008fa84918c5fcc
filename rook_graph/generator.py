"""Alpha/beta rook's graph generation.

Pipeline: build_cliques(shape) -> rewire(...) -> freeze. The returned
RookGraph owns a frozen Adjacency and is safe to hand to the writer.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional, Tuple
import time

import numpy as np

from rook_graph.adjacency import Adjacency
from rook_graph.cliques import build_cliques, clique_edge_count
from rook_graph.config import RookGraphConfig
from rook_graph.log import get_logger, log_metrics
from rook_graph.rewire import RewireStats, rewire, rewire_parallel
from rook_graph.types import GridShape


@dataclass(frozen=True)
class RookGraph:
    shape: GridShape
    adjacency: Adjacency
    config: RookGraphConfig
    stats: RewireStats

    @property
    def num_vertices(self) -> int:
        return self.shape.num_vertices

    @property
    def num_edges(self) -> int:
        return self.adjacency.num_edges

    def edges(self) -> Iterator[Tuple[int, int]]:
        return self.adjacency.edges()


def generate(cfg: Optional[RookGraphConfig] = None, rng: Optional[np.random.Generator] = None) -> RookGraph:
    """
    Generate an alpha/beta rook's graph.

    Parameters
    ----------
    cfg : RookGraphConfig, optional
        Defaults to a 10x10 grid with alpha = beta = 0.1.
    rng : np.random.Generator, optional
        Random source for the serial rewire. When omitted, one is created from
        cfg.seed. Must be omitted when cfg.workers > 1 (chunks get generators
        spawned from cfg.seed).
    """
    cfg = cfg if cfg is not None else RookGraphConfig()
    if rng is not None and cfg.workers > 1:
        raise ValueError("rng cannot be injected for a parallel rewire; pass cfg.seed instead")
    shape = GridShape(rows=int(cfg.n), cols=int(cfg.m))
    t0 = time.perf_counter()

    adj = build_cliques(shape)
    if cfg.workers > 1:
        stats = rewire_parallel(adj, shape, cfg.alpha, cfg.beta, seed=cfg.seed, workers=cfg.workers)
    else:
        gen = rng if rng is not None else np.random.default_rng(cfg.seed)
        stats = rewire(adj, shape, cfg.alpha, cfg.beta, gen)
    adj.freeze()

    elapsed_ms = (time.perf_counter() - t0) * 1e3
    log_metrics(
        {
            "vertices": shape.num_vertices,
            "clique_edges": clique_edge_count(shape),
            "removed": stats.removed,
            "added": stats.added,
            "edges": adj.num_edges,
            "elapsed_ms": elapsed_ms,
        },
        logger=get_logger(),
    )
    return RookGraph(shape=shape, adjacency=adj, config=cfg, stats=stats)


__all__ = ["RookGraph", "generate"]
