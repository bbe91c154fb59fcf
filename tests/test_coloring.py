import pytest

from dsakit.coloring import color_graph


def test_single_vertex_has_no_colour():
    assert color_graph(1, []) == {1: 0}


def test_cycle_is_properly_coloured():
    edges = [(1, 2), (2, 3), (3, 4), (4, 1)]
    colors = color_graph(4, edges)
    assert sorted(colors) == [1, 2, 3, 4]
    assert all(c != 0 for c in colors.values())
    assert all(colors[a] != colors[b] for a, b in edges)


def test_colours_stay_within_range():
    n = 5
    edges = [(1, 2), (1, 3), (2, 3), (3, 4), (4, 5)]
    colors = color_graph(n, edges)
    assert all(0 <= c <= n - 1 for c in colors.values())
    assert all(colors[a] != colors[b] for a, b in edges if colors[a] and colors[b])


def test_triangle_runs_out_of_colours():
    colors = color_graph(3, [(1, 2), (2, 3), (1, 3)])
    assert colors[3] == 0
    assert colors[1] != colors[2]


def test_without_edges_all_share_one_colour():
    colors = color_graph(4, [])
    assert all(c == colors[1] for c in colors.values())
    assert colors[1] != 0


def test_rejects_bad_input():
    with pytest.raises(ValueError):
        color_graph(3, [(1, 4)])
    with pytest.raises(ValueError):
        color_graph(-1, [])