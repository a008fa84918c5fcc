"""
Edge-list writer/reader for the `p tww` graph format.

Layout:
    p tww <n_vertices> <n_edges>
    <u> <v>
    ...

Deterministic behavior:
- Vertex ids are 1-indexed in the file; u < v on every line.
- Edges ascend by u, then by v. Each unordered pair appears once.
- Lines are "\\n"-terminated; no comments or trailing metadata.

save_edge_list() is all-or-nothing: it writes to a temporary file in the
destination directory and renames it into place only after a full write.
"""

from __future__ import annotations
import os
import tempfile
from typing import List, TextIO, Tuple

from rook_graph.adjacency import Adjacency

HEADER_TAG = "p"
PROBLEM_TAG = "tww"


class GraphWriteError(OSError):
    pass


class EdgeListFormatError(ValueError):
    def __init__(self, message: str, line_no: int = 0) -> None:
        super().__init__(f"line {line_no}: {message}" if line_no else message)
        self.line_no = line_no


def format_header(n_vertices: int, n_edges: int) -> str:
    return f"{HEADER_TAG} {PROBLEM_TAG} {int(n_vertices)} {int(n_edges)}\n"


def write_edge_list(adj: Adjacency, fp: TextIO) -> int:
    """
    Write `adj` to `fp` in edge-list format.

    Returns:
        int: number of edge lines written (excluding header).
    """
    edges = adj.edge_list()
    fp.write(format_header(adj.n, len(edges)))
    for u, v in edges:
        fp.write(f"{u + 1} {v + 1}\n")
    return len(edges)


def _target_mode(abs_path: str) -> int:
    # Existing files keep their mode; new files get 0o666 filtered by the umask
    try:
        return os.stat(abs_path).st_mode & 0o7777
    except FileNotFoundError:
        umask = os.umask(0)
        os.umask(umask)
        return 0o666 & ~umask


def save_edge_list(adj: Adjacency, path: str) -> int:
    """
    Write `adj` to `path`, replacing it atomically.

    Raises:
        GraphWriteError: the file could not be created or written. No partial
        file is left behind.
    """
    if not isinstance(path, str) or not path:
        raise ValueError("path must be a non-empty string")
    abs_path = os.path.abspath(path)
    directory = os.path.dirname(abs_path)
    tmp_path = None
    try:
        fd, tmp_path = tempfile.mkstemp(prefix=".rookgraph-", suffix=".tmp", dir=directory)
        with os.fdopen(fd, "w", encoding="utf-8", newline="\n") as f:
            count = write_edge_list(adj, f)
        os.chmod(tmp_path, _target_mode(abs_path))
        os.replace(tmp_path, abs_path)
        tmp_path = None
    except OSError as e:
        raise GraphWriteError(f"failed to write graph to '{path}': {e}") from e
    finally:
        if tmp_path is not None and os.path.exists(tmp_path):
            os.remove(tmp_path)
    return count


def _parse_ints(tokens: List[str], line_no: int) -> List[int]:
    try:
        return [int(t) for t in tokens]
    except ValueError:
        raise EdgeListFormatError(f"expected integers, got {' '.join(tokens)!r}", line_no) from None


def read_edge_list(fp: TextIO) -> Tuple[int, List[Tuple[int, int]]]:
    """
    Parse an edge list back into (n_vertices, edges) with 0-indexed pairs.

    Blank lines are skipped. Edges may appear in any order but must be
    unique, loop-free and within [1, n_vertices]. The edge count must match
    the header.
    """
    n_vertices = -1
    n_edges = -1
    edges: List[Tuple[int, int]] = []
    seen = set()
    for line_no, line in enumerate(fp, start=1):
        tokens = line.split()
        if not tokens:
            continue
        if n_vertices < 0:
            if len(tokens) != 4 or tokens[0] != HEADER_TAG or tokens[1] != PROBLEM_TAG:
                raise EdgeListFormatError(f"expected '{HEADER_TAG} {PROBLEM_TAG} <n> <m>' header", line_no)
            n_vertices, n_edges = _parse_ints(tokens[2:], line_no)
            if n_vertices < 0 or n_edges < 0:
                raise EdgeListFormatError("header counts must be non-negative", line_no)
            continue
        if len(tokens) != 2:
            raise EdgeListFormatError("edge line must hold exactly two vertex ids", line_no)
        a, b = _parse_ints(tokens, line_no)
        if not (1 <= a <= n_vertices and 1 <= b <= n_vertices):
            raise EdgeListFormatError(f"vertex id out of range [1, {n_vertices}]", line_no)
        if a == b:
            raise EdgeListFormatError(f"self-loop on vertex {a}", line_no)
        key = (min(a, b) - 1, max(a, b) - 1)
        if key in seen:
            raise EdgeListFormatError(f"duplicate edge {a} {b}", line_no)
        seen.add(key)
        edges.append(key)
    if n_vertices < 0:
        raise EdgeListFormatError("missing header")
    if len(edges) != n_edges:
        raise EdgeListFormatError(f"header announces {n_edges} edges, found {len(edges)}")
    return n_vertices, edges


def load_edge_list(path: str) -> Adjacency:
    with open(path, "r", encoding="utf-8") as f:
        n_vertices, edges = read_edge_list(f)
    return Adjacency.from_edges(n_vertices, edges)


__all__ = [
    "GraphWriteError",
    "EdgeListFormatError",
    "format_header",
    "write_edge_list",
    "save_edge_list",
    "read_edge_list",
    "load_edge_list",
]
