import numpy as np
import pytest

from rook_graph.adjacency import Adjacency, FrozenAdjacencyError


def test_connect_and_disconnect_are_symmetric():
    adj = Adjacency(4)
    adj.connect(2, 0)
    assert adj.has_edge(0, 2) and adj.has_edge(2, 0)
    assert adj.num_edges == 1
    adj.disconnect(0, 2)
    assert not adj.has_edge(2, 0)
    assert adj.num_edges == 0
    assert adj.is_symmetric()


def test_self_loops_and_out_of_range_rejected():
    adj = Adjacency(3)
    with pytest.raises(ValueError):
        adj.connect(1, 1)
    with pytest.raises(IndexError):
        adj.connect(0, 3)
    with pytest.raises(IndexError):
        adj.has_edge(-1, 0)
    assert not adj.has_edge(1, 1)


def test_edges_ascending_and_unique():
    adj = Adjacency.from_edges(5, [(4, 1), (0, 3), (1, 0), (3, 2)])
    assert adj.edge_list() == [(0, 1), (0, 3), (1, 4), (2, 3)]
    assert adj.degree(1) == 2


def test_set_upper_row_mirrors_column():
    adj = Adjacency(4)
    adj.set_upper_row(1, np.array([True, False]))
    assert adj.has_edge(2, 1)
    assert not adj.has_edge(3, 1)
    assert adj.is_symmetric()
    with pytest.raises(ValueError):
        adj.set_upper_row(1, np.array([True]))


def test_frozen_relation_rejects_mutation():
    adj = Adjacency.from_edges(3, [(0, 1)]).freeze()
    assert adj.frozen
    with pytest.raises(FrozenAdjacencyError):
        adj.connect(1, 2)
    with pytest.raises(FrozenAdjacencyError):
        adj.disconnect(0, 1)
    with pytest.raises(FrozenAdjacencyError):
        adj.set_upper_row(0, np.array([False, False]))
    assert adj.has_edge(0, 1)


def test_to_matrix_is_a_read_only_copy():
    adj = Adjacency.from_edges(3, [(0, 2)])
    M = adj.to_matrix()
    assert M.dtype == bool
    assert M[2, 0] and M[0, 2]
    with pytest.raises(ValueError):
        M[0, 1] = True
    assert not adj.frozen


def test_empty_relation():
    adj = Adjacency(0)
    assert adj.num_edges == 0
    assert adj.edge_list() == []
    assert adj.is_symmetric()


def test_degree_rejects_out_of_range_vertex():
    adj = Adjacency.from_edges(3, [(0, 2)])
    assert adj.degree(2) == 1
    with pytest.raises(IndexError):
        adj.degree(-1)
    with pytest.raises(IndexError):
        adj.degree(3)
