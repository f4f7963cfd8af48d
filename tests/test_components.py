import random

from algobox.components import is_bipartite, possible_bipartition, strongly_connected_count


def _disjoint_rings(sizes):
    adjacency = []
    offset = 0
    for size in sizes:
        adjacency.extend([[offset + (i + 1) % size] for i in range(size)])
        offset += size
    return adjacency


def _undirected(n, edges):
    adjacency = [[] for _ in range(n)]
    for a, b in edges:
        adjacency[a].append(b)
        adjacency[b].append(a)
    return adjacency


def test_disjoint_rings_are_separate_components():
    sizes = [3, 1, 4, 2]
    assert strongly_connected_count(_disjoint_rings(sizes)) == len(sizes)


def test_rings_linked_one_way_stay_separate():
    sizes = [3, 2, 4]
    graph = _disjoint_rings(sizes)
    graph[0].append(3)
    graph[3].append(5)
    assert strongly_connected_count(graph) == len(sizes)


def test_linking_rings_both_ways_merges_them():
    graph = _disjoint_rings([3, 3])
    graph[0].append(3)
    graph[3].append(0)
    assert strongly_connected_count(graph) == 1


def test_dag_has_one_component_per_vertex():
    rng = random.Random(2)
    for _ in range(20):
        n = rng.randint(0, 10)
        dag = [[w for w in range(v + 1, n) if rng.random() < 0.3] for v in range(n)]
        assert strongly_connected_count(dag) == n


def test_even_and_odd_rings():
    even = _undirected(6, [(i, (i + 1) % 6) for i in range(6)])
    odd = _undirected(5, [(i, (i + 1) % 5) for i in range(5)])
    assert is_bipartite(even)
    assert not is_bipartite(odd)
    assert is_bipartite([])


def test_parity_graphs_are_bipartite_until_an_odd_edge():
    rng = random.Random(4)
    for _ in range(30):
        n = rng.randint(3, 10)
        edges = [
            (a, b)
            for a in range(n)
            for b in range(a + 1, n)
            if (a + b) % 2 == 1 and rng.random() < 0.4
        ]
        assert is_bipartite(_undirected(n, edges))
        edges += [(0, 1), (1, 2), (0, 2)]
        assert not is_bipartite(_undirected(n, edges))


def test_possible_bipartition_matches_is_bipartite():
    rng = random.Random(8)
    for _ in range(50):
        n = rng.randint(1, 8)
        dislikes = [
            [a, b]
            for a in range(1, n + 1)
            for b in range(a + 1, n + 1)
            if rng.random() < 0.25
        ]
        graph = _undirected(n + 1, [tuple(pair) for pair in dislikes])
        assert possible_bipartition(n, dislikes) == is_bipartite(graph)


def test_possible_bipartition_triangle_fails():
    assert not possible_bipartition(3, [[1, 2], [2, 3], [1, 3]])
    assert possible_bipartition(4, [[1, 2], [1, 3], [2, 4]])