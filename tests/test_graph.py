import pytest

from algokit.graph import NO_EDGE, Edge, SpanningTree, kruskal


def _connected(n, edges):
    parent = list(range(n + 1))

    def root(x):
        while parent[x] != x:
            x = parent[x]
        return x

    for edge in edges:
        parent[root(edge.v)] = root(edge.u)
    return len({root(v) for v in range(1, n + 1)}) == 1


SAMPLE = [
    [0, 3, 1, 6, 0, 0],
    [3, 0, 5, 0, 3, 0],
    [1, 5, 0, 5, 6, 4],
    [6, 0, 5, 0, 0, 2],
    [0, 3, 6, 0, 0, 6],
    [0, 0, 4, 2, 6, 0],
]


def test_triangle_picks_two_lightest_edges():
    tree = kruskal([[0, 1, 3], [1, 0, 2], [3, 2, 0]])
    assert list(tree) == [Edge(1, 2, 1), Edge(2, 3, 2)]
    assert tree.cost == 3


def test_tree_has_n_minus_one_edges_and_spans():
    tree = kruskal(SAMPLE)
    assert len(tree) == len(SAMPLE) - 1
    assert _connected(len(SAMPLE), tree.edges)


def test_cost_is_sum_of_edge_weights():
    tree = kruskal(SAMPLE)
    assert tree.cost == sum(edge.weight for edge in tree.edges)


def test_edges_chosen_in_nondecreasing_weight():
    weights = [edge.weight for edge in kruskal(SAMPLE)]
    assert weights == sorted(weights)


def test_edge_weights_match_matrix_and_lower_index_first():
    for edge in kruskal(SAMPLE):
        assert SAMPLE[edge.u - 1][edge.v - 1] == edge.weight
        assert edge.u < edge.v


def test_ties_resolved_in_row_major_order():
    tree = kruskal([[0, 1, 1], [1, 0, 1], [1, 1, 0]])
    assert [(edge.u, edge.v) for edge in tree] == [(1, 2), (1, 3)]


def test_single_vertex_gives_empty_tree():
    tree = kruskal([[0]])
    assert tree == SpanningTree(())
    assert tree.cost == 0


def test_disconnected_graph_raises():
    with pytest.raises(ValueError):
        kruskal([[0, 1, 0], [1, 0, 0], [0, 0, 0]])


def test_weights_at_limit_are_not_edges():
    with pytest.raises(ValueError):
        kruskal([[0, NO_EDGE], [NO_EDGE, 0]])


def test_non_square_matrix_raises():
    with pytest.raises(ValueError):
        kruskal([[0, 1], [1, 0, 2]])