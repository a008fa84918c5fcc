import io
import os

import pytest

from rook_graph.adjacency import Adjacency
from rook_graph.cliques import build_cliques
from rook_graph.config import RookGraphConfig
from rook_graph.edgelist import (
    EdgeListFormatError,
    GraphWriteError,
    format_header,
    load_edge_list,
    read_edge_list,
    save_edge_list,
    write_edge_list,
)
from rook_graph.generator import generate
from rook_graph.types import GridShape


def _text(adj):
    buf = io.StringIO()
    write_edge_list(adj, buf)
    return buf.getvalue()


def test_two_by_two_rook_graph_layout():
    text = _text(build_cliques(GridShape(rows=2, cols=2)))
    assert text == "p tww 4 4\n1 2\n1 3\n2 4\n3 4\n"


@pytest.mark.parametrize("rows,cols,header", [(0, 3, "p tww 0 0\n"), (3, 0, "p tww 0 0\n"), (1, 1, "p tww 1 0\n")])
def test_degenerate_headers(rows, cols, header):
    assert _text(build_cliques(GridShape(rows=rows, cols=cols))) == header


def test_header_counts_match_body_and_order():
    g = generate(RookGraphConfig(n=4, m=5, alpha=0.3, beta=0.3, seed=2))
    lines = _text(g.adjacency).splitlines()
    tag, kind, n_vertices, n_edges = lines[0].split()
    assert (tag, kind) == ("p", "tww")
    assert int(n_vertices) == 20
    assert int(n_edges) == len(lines) - 1 == g.num_edges
    pairs = [tuple(map(int, ln.split())) for ln in lines[1:]]
    assert all(1 <= u < v <= 20 for u, v in pairs)
    assert pairs == sorted(pairs)


def test_serialization_is_byte_identical():
    g = generate(RookGraphConfig(n=5, m=5, alpha=0.2, beta=0.2, seed=8))
    assert _text(g.adjacency) == _text(g.adjacency)


def test_format_header():
    assert format_header(100, 3) == "p tww 100 3\n"


def test_save_and_load(tmp_path):
    g = generate(RookGraphConfig(n=3, m=3, alpha=0.5, beta=0.5, seed=4))
    path = tmp_path / "graph.gr"
    count = save_edge_list(g.adjacency, str(path))
    assert count == g.num_edges
    assert path.read_bytes() == _text(g.adjacency).encode("utf-8")
    assert load_edge_list(str(path)) == g.adjacency
    assert [p.name for p in tmp_path.iterdir()] == ["graph.gr"]


def test_save_overwrites_existing_file(tmp_path):
    path = tmp_path / "graph.gr"
    path.write_text("stale\n", encoding="utf-8")
    save_edge_list(Adjacency(2), str(path))
    assert path.read_text(encoding="utf-8") == "p tww 2 0\n"


def test_save_to_missing_directory_fails_cleanly(tmp_path):
    target = tmp_path / "nope" / "graph.gr"
    with pytest.raises(GraphWriteError, match="graph.gr"):
        save_edge_list(Adjacency(3), str(target))
    assert not target.exists()


def test_save_onto_directory_leaves_no_temp_file(tmp_path):
    target = tmp_path / "dir"
    target.mkdir()
    with pytest.raises(GraphWriteError):
        save_edge_list(build_cliques(GridShape(rows=2, cols=2)), str(target))
    assert sorted(os.listdir(tmp_path)) == ["dir"]
    assert os.listdir(target) == []


def test_read_accepts_any_edge_order():
    n, edges = read_edge_list(io.StringIO("p tww 3 2\n3 1\n\n1 2\n"))
    assert n == 3
    assert edges == [(0, 2), (0, 1)]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "1 2\n",
        "p edge 3 1\n1 2\n",
        "p tww 3\n",
        "p tww 3 x\n",
        "p tww 3 2\n1 2\n",
        "p tww 3 1\n1 4\n",
        "p tww 3 1\n2 2\n",
        "p tww 3 2\n1 2\n2 1\n",
        "p tww 3 1\n1 2 3\n",
    ],
)
def test_read_rejects_malformed_input(text):
    with pytest.raises(EdgeListFormatError):
        read_edge_list(io.StringIO(text))


def test_format_error_carries_line_number():
    with pytest.raises(EdgeListFormatError) as ei:
        read_edge_list(io.StringIO("p tww 3 2\n1 2\n1 9\n"))
    assert ei.value.line_no == 3
    assert "line 3" in str(ei.value)


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_new_file_mode_follows_umask(tmp_path):
    path = tmp_path / "graph.gr"
    old = os.umask(0o027)
    try:
        save_edge_list(Adjacency(2), str(path))
    finally:
        os.umask(old)
    assert path.stat().st_mode & 0o777 == 0o640


@pytest.mark.skipif(os.name != "posix", reason="POSIX permission bits")
def test_overwrite_keeps_existing_mode(tmp_path):
    path = tmp_path / "graph.gr"
    path.write_text("stale\n", encoding="utf-8")
    os.chmod(path, 0o600)
    save_edge_list(build_cliques(GridShape(rows=2, cols=2)), str(path))
    assert path.stat().st_mode & 0o777 == 0o600
    assert path.read_text(encoding="utf-8").startswith("p tww 4 4\n")
