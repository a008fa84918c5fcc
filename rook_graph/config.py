"""Generator configuration.

RookGraphConfig holds the generation knobs with validated defaults.
load_config_from_json() reads the same knobs (plus an output path) from a
JSON object so runs can be described in a file and replayed.

Probabilities outside [0, 1] are accepted by default and behave as
"never" (<= 0) or "always" (>= 1) during rewiring; strict_probabilities=True
turns them into a ValueError instead.
"""
from __future__ import annotations

from dataclasses import dataclass, fields
from typing import Any, Dict, Mapping, Optional
import json
import math
import os

import numpy as np

from rook_graph.log import get_logger
from rook_graph.types import require_count

DEFAULT_OUTPUT_FILE = "graph.gr"

# Keys accepted in a JSON config file
_ALLOWED_KEYS = {"n", "m", "alpha", "beta", "seed", "workers", "strict_probabilities", "output_file"}


def check_probability(name: str, p: Any, strict: bool = False) -> float:
    """
    Validate a rewiring probability.

    Non-numeric or non-finite values always fail. Out-of-range values fail
    when `strict`, otherwise they are kept as-is and a warning is logged.
    """
    if isinstance(p, bool):
        raise TypeError(f"{name} must be a real number, got bool")
    try:
        val = float(p)
    except (TypeError, ValueError) as e:
        raise TypeError(f"{name} must be a real number convertible to float") from e
    if not math.isfinite(val):
        raise ValueError(f"{name} must be finite, got {val}")
    if not 0.0 <= val <= 1.0:
        if strict:
            raise ValueError(f"{name} must lie in [0, 1], got {val}")
        behaviour = "never fires" if val <= 0.0 else "always fires"
        get_logger().warning(f"{name}={val} outside [0, 1]; trial {behaviour}")
    return val


@dataclass(frozen=True)
class RookGraphConfig:
    n: int = 10                          # grid rows, >= 0
    m: int = 10                          # grid columns, >= 0
    alpha: float = 0.1                   # add probability for cross pairs
    beta: float = 0.1                    # remove probability for in-line pairs
    seed: Optional[int] = None           # None -> fresh OS entropy
    workers: int = 1                     # > 1 -> parallel rewire
    strict_probabilities: bool = False

    def __post_init__(self) -> None:
        require_count("n", self.n)
        require_count("m", self.m)
        check_probability("alpha", self.alpha, strict=self.strict_probabilities)
        check_probability("beta", self.beta, strict=self.strict_probabilities)
        if self.seed is not None:
            require_count("seed", self.seed)
        if isinstance(self.workers, bool) or not isinstance(self.workers, (int, np.integer)):
            raise TypeError("workers must be an integer")
        if self.workers < 1:
            raise ValueError("workers must be >= 1")


def config_from_mapping(raw: Mapping[str, Any], **overrides: Any) -> RookGraphConfig:
    """
    Build a RookGraphConfig from a mapping; non-None overrides win.

    Keys outside the config fields (e.g. output_file) are ignored here.
    """
    names = {f.name for f in fields(RookGraphConfig)}
    kwargs: Dict[str, Any] = {k: v for k, v in raw.items() if k in names}
    for k, v in overrides.items():
        if k not in names:
            raise ValueError(f"unknown config field: {k}")
        if v is not None:
            kwargs[k] = v
    return RookGraphConfig(**kwargs)


def load_config_from_json(path: str) -> Dict[str, Any]:
    """
    Load a generator config JSON file and return the raw mapping.

    Raises:
      ValueError for a missing file, malformed JSON, a non-object root or unknown keys.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("load_config_from_json: path must be a non-empty string")
    if not os.path.exists(path):
        raise ValueError(f"load_config_from_json: file not found: {path}")

    try:
        with open(path, "r", encoding="utf-8") as f:
            raw = json.load(f)
    except json.JSONDecodeError as e:
        raise ValueError(f"load_config_from_json: failed to parse JSON: {e}") from e

    if not isinstance(raw, dict):
        raise ValueError("config root must be a JSON object")
    extra = sorted(k for k in raw.keys() if k not in _ALLOWED_KEYS)
    if extra:
        raise ValueError(f"unknown keys in config: {extra}")
    if "output_file" in raw and (not isinstance(raw["output_file"], str) or not raw["output_file"]):
        raise ValueError("output_file must be a non-empty string")
    return raw


__all__ = [
    "DEFAULT_OUTPUT_FILE",
    "RookGraphConfig",
    "check_probability",
    "config_from_mapping",
    "load_config_from_json",
]
