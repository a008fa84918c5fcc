"""Structured logging utilities.

Invariants
- Idempotent handler installation per logger.
- Values must be finite floats; keys are logged in sorted order.

Public API
- get_logger(name="rook_graph", level=logging.INFO) -> logging.Logger
- log_metrics(metrics: dict[str, float], logger=None) -> None
"""
from __future__ import annotations

import logging
import math
from typing import Mapping, Optional


def get_logger(name: str = "rook_graph", level: Optional[int] = None) -> logging.Logger:
    """
    Return a configured logger with concise formatter.

    Idempotent: installs at most one StreamHandler marked by _rook_graph_handler.
    The level is only changed when `level` is given.
    """
    logger = logging.getLogger(name)
    if level is not None:
        logger.setLevel(int(level))
    elif logger.level == logging.NOTSET:
        logger.setLevel(logging.INFO)
    logger.propagate = False  # avoid duplicate logs through root

    has_handler = any(getattr(h, "_rook_graph_handler", False) for h in logger.handlers)
    if not has_handler:
        handler = logging.StreamHandler()
        handler._rook_graph_handler = True  # type: ignore[attr-defined]
        formatter = logging.Formatter(
            fmt="%(asctime)s %(name)s %(levelname)s: %(message)s",
            datefmt="%H:%M:%S",
        )
        handler.setFormatter(formatter)
        logger.addHandler(handler)
    return logger


def _ensure_finite_float(x: object, name: str) -> float:
    try:
        val = float(x)  # type: ignore[arg-type]
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a real number convertible to float") from e
    if not math.isfinite(val):
        raise ValueError(f"{name} must be finite, got {val}")
    return val


def format_float(x: float) -> str:
    # Deterministic concise formatting
    return f"{x:.10g}"


def log_metrics(metrics: Mapping[str, float], logger: Optional[logging.Logger] = None) -> None:
    """Log a dictionary of metrics as: "metrics k1=v1 k2=v2 ..." with sorted keys."""
    if not isinstance(metrics, Mapping) or len(metrics) == 0:
        raise ValueError("metrics must be a non-empty mapping of str->float")
    parts: list[str] = []
    for k in sorted(metrics.keys()):
        if not isinstance(k, str) or not k:
            raise ValueError("metric keys must be non-empty strings")
        v = _ensure_finite_float(metrics[k], f"value for '{k}'")
        parts.append(f"{k}={format_float(v)}")
    lg = logger if logger is not None else get_logger()
    lg.info("metrics " + " ".join(parts))


__all__ = ["get_logger", "log_metrics", "format_float"]
