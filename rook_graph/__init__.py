from __future__ import annotations

# Alpha/beta rook's graph public API surface

from .types import Coord, GridShape
from .adjacency import Adjacency, FrozenAdjacencyError
from .cliques import build_cliques, clique_edge_count
from .rewire import RewireStats, rewire, rewire_parallel, pair_ranges
from .config import RookGraphConfig, config_from_mapping, load_config_from_json
from .generator import RookGraph, generate
from .edgelist import (
    GraphWriteError,
    EdgeListFormatError,
    format_header,
    write_edge_list,
    save_edge_list,
    read_edge_list,
    load_edge_list,
)

__all__ = [
    "Coord",
    "GridShape",
    "Adjacency",
    "FrozenAdjacencyError",
    "build_cliques",
    "clique_edge_count",
    "RewireStats",
    "rewire",
    "rewire_parallel",
    "pair_ranges",
    "RookGraphConfig",
    "config_from_mapping",
    "load_config_from_json",
    "RookGraph",
    "generate",
    "GraphWriteError",
    "EdgeListFormatError",
    "format_header",
    "write_edge_list",
    "save_edge_list",
    "read_edge_list",
    "load_edge_list",
]
