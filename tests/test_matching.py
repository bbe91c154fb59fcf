import io

import pytest

from dsakit.matching import BipartiteGraph, main


def test_no_edges_matches_nothing():
    assert BipartiteGraph(3, 3).max_matching() == 0


def test_identity_edges_match_perfectly():
    n = 5
    g = BipartiteGraph(n, n)
    for u in range(1, n + 1):
        g.add_edge(u, u)
    assert g.max_matching() == n


@pytest.mark.parametrize("m,n", [(2, 4), (4, 2), (3, 3)])
def test_complete_bipartite(m, n):
    g = BipartiteGraph(m, n)
    for u in range(1, m + 1):
        for v in range(1, n + 1):
            g.add_edge(u, v)
    assert g.max_matching() == min(m, n)


def test_star_on_one_right_vertex():
    g = BipartiteGraph(3, 2)
    for u in range(1, 4):
        g.add_edge(u, 1)
    assert g.max_matching() == 1


def test_matching_needs_augmenting_path():
    g = BipartiteGraph(4, 4)
    for u, v in [(1, 2), (1, 3), (2, 1), (3, 2), (4, 2), (4, 4)]:
        g.add_edge(u, v)
    first = g.max_matching()
    assert first <= 4
    assert g.max_matching() == first
    assert first == 4


def test_add_edge_rejects_out_of_range():
    g = BipartiteGraph(2, 2)
    with pytest.raises(ValueError):
        g.add_edge(0, 1)
    with pytest.raises(ValueError):
        g.add_edge(1, 3)


def test_main_reads_stdin(monkeypatch, capsys):
    n = 3
    lines = [f"{n} {n} {n}"] + [f"{u} {u}" for u in range(1, n + 1)]
    monkeypatch.setattr("sys.stdin", io.StringIO("\n".join(lines)))
    assert main([]) == 0
    assert capsys.readouterr().out.strip() == f"Maximum matching is {n}"


def test_main_reads_file(tmp_path, capsys):
    path = tmp_path / "graph.txt"
    path.write_text("2 3 2\n1 1\n2 1\n")
    assert main([str(path)]) == 0
    assert capsys.readouterr().out.strip() == "Maximum matching is 1"


def test_main_rejects_truncated_input(tmp_path):
    path = tmp_path / "graph.txt"
    path.write_text("2 2 3\n1 1\n")
    with pytest.raises(SystemExit):
        main([str(path)])