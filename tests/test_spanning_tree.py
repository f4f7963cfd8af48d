import random

import pytest

from algobox.disjoint_set import DisjointSet
from algobox.spanning_tree import (
    Edge,
    kruskal,
    mst_weight_kruskal,
    mst_weight_prim,
    prim_matrix,
)


def _random_connected_edges(seed, n):
    rng = random.Random(seed)
    weights = {}
    for v in range(1, n):
        u = rng.randrange(v)
        weights[(u, v)] = rng.randint(1, 20)
    for _ in range(n * 2):
        a, b = rng.sample(range(n), 2)
        key = (min(a, b), max(a, b))
        weights.setdefault(key, rng.randint(1, 20))
    return [(a, b, w) for (a, b), w in weights.items()]


def _adjacency(n, edges):
    adjacency = [[] for _ in range(n)]
    for a, b, w in edges:
        adjacency[a].append([b, w])
        adjacency[b].append([a, w])
    return adjacency


def _matrix(n, edges):
    matrix = [[0] * n for _ in range(n)]
    for a, b, w in edges:
        matrix[a][b] = matrix[b][a] = w
    return matrix


def test_kruskal_triangle_drops_heaviest_edge():
    edges = [(0, 1, 1), (1, 2, 2), (0, 2, 3)]
    tree = kruskal(3, edges)
    assert tree == [Edge(*edges[0]), Edge(*edges[1])]


def test_kruskal_accepts_edge_objects():
    edges = [Edge(0, 1, 5), Edge(1, 2, 4)]
    assert kruskal(3, edges) == [edges[1], edges[0]]


@pytest.mark.parametrize("seed", range(8))
def test_kruskal_spans_every_vertex(seed):
    n = 9
    edges = _random_connected_edges(seed, n)
    tree = kruskal(n, edges)
    assert len(tree) == n - 1
    sets = DisjointSet(range(n))
    for edge in tree:
        assert sets.union(edge.source, edge.target)
    assert sets.count == 1
    weights = [edge.weight for edge in tree]
    assert weights == sorted(weights)


def test_kruskal_disconnected_gives_forest():
    tree = kruskal(4, [(0, 1, 2), (2, 3, 1)])
    assert len(tree) == 2


@pytest.mark.parametrize("seed", range(8))
def test_all_methods_agree_on_weight(seed):
    n = 10
    edges = _random_connected_edges(seed, n)
    kruskal_weight = sum(edge.weight for edge in kruskal(n, edges))
    adjacency = _adjacency(n, edges)
    assert mst_weight_kruskal(adjacency) == kruskal_weight
    assert mst_weight_prim(adjacency) == kruskal_weight
    prim_tree = prim_matrix(_matrix(n, edges))
    assert sum(edge.weight for edge in prim_tree) == kruskal_weight


@pytest.mark.parametrize("seed", range(4))
def test_prim_matrix_edges_exist_in_graph(seed):
    n = 7
    edges = _random_connected_edges(seed, n)
    matrix = _matrix(n, edges)
    tree = prim_matrix(matrix)
    assert [edge.target for edge in tree] == list(range(1, n))
    for edge in tree:
        assert matrix[edge.source][edge.target] == edge.weight


def test_prim_matrix_disconnected_raises():
    with pytest.raises(ValueError):
        prim_matrix([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_weight_functions_disconnected_raise():
    adjacency = _adjacency(4, [(0, 1, 2), (2, 3, 1)])
    with pytest.raises(ValueError):
        mst_weight_kruskal(adjacency)
    with pytest.raises(ValueError):
        mst_weight_prim(adjacency)


def test_single_vertex_has_zero_weight():
    assert mst_weight_prim([[]]) == 0
    assert mst_weight_kruskal([[]]) == 0
    assert prim_matrix([[0]]) == []