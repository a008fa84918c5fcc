#!/usr/bin/env python3
"""
Alpha-Beta-Rook-Graph generator runner.

Features:
- Builds an N x M rook's graph, rewires it with alpha (add) / beta (remove)
- Optional JSON config (--config); explicit flags override file values
- Optional seed for reproducible graphs and a thread count for the rewire
- Writes the `p tww` edge list atomically and prints a one-line summary:
    Alpha-Beta-Rook-Graph generated with n='N' m='M' α='A' β='B' and saved to 'PATH'.

Exit codes: 0 on success, 1 when the output cannot be written, 2 on bad configuration.
"""

from __future__ import annotations
import argparse
import logging
from typing import List, Optional

import numpy as np

from rook_graph.config import DEFAULT_OUTPUT_FILE, config_from_mapping, load_config_from_json
from rook_graph.edgelist import GraphWriteError, save_edge_list
from rook_graph.generator import generate
from rook_graph.log import get_logger


def _fmt_probability(p: float) -> str:
    # Shortest exact decimal, never exponent notation
    return np.format_float_positional(float(p), trim="-")


def _build_parser() -> argparse.ArgumentParser:
    ap = argparse.ArgumentParser(prog="gen-rook-graph", description="AlphaBetaRookGraph Generator")
    ap.add_argument("-n", type=int, default=None, help="Width of the grid (N, default 10)")
    ap.add_argument("-m", type=int, default=None, help="Height of the grid (M, default 10)")
    ap.add_argument("-a", "--alpha", type=float, default=None, help="Edge addition probability (default 0.1)")
    ap.add_argument("-b", "--beta", type=float, default=None, help="Edge removal probability (default 0.1)")
    ap.add_argument("output_file", nargs="?", default=None, help=f"Output file name (default {DEFAULT_OUTPUT_FILE})")
    ap.add_argument("--seed", type=int, default=None, help="RNG seed (default: fresh entropy)")
    ap.add_argument("--workers", type=int, default=None, help="Rewire threads (default 1)")
    ap.add_argument("--config", default=None, help="Path to generator config JSON")
    ap.add_argument("--strict", action="store_true", default=False,
                    help="Reject alpha/beta outside [0, 1] instead of clamping")
    ap.add_argument("--log-level", default="WARNING",
                    choices=["DEBUG", "INFO", "WARNING", "ERROR"], help="Log verbosity")
    return ap


def main(argv: Optional[List[str]] = None) -> int:
    args = _build_parser().parse_args(argv)
    logger = get_logger(level=getattr(logging, args.log_level))

    try:
        raw = load_config_from_json(args.config) if args.config else {}
        cfg = config_from_mapping(
            raw,
            n=args.n,
            m=args.m,
            alpha=args.alpha,
            beta=args.beta,
            seed=args.seed,
            workers=args.workers,
            strict_probabilities=True if args.strict else None,
        )
    except (TypeError, ValueError) as e:
        logger.error(f"invalid configuration: {e}")
        return 2
    output_file = args.output_file or raw.get("output_file") or DEFAULT_OUTPUT_FILE

    graph = generate(cfg)
    try:
        save_edge_list(graph.adjacency, output_file)
    except GraphWriteError as e:
        logger.error(str(e))
        return 1

    print(
        f"Alpha-Beta-Rook-Graph generated with n='{cfg.n}' m='{cfg.m}' "
        f"α='{_fmt_probability(cfg.alpha)}' β='{_fmt_probability(cfg.beta)}' and saved to '{output_file}'."
    )
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
