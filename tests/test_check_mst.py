"""
Tests for the NetworkX cross-check.
"""

import networkx as nx

from check_mst import (
    RANDOM_CHECKS,
    check_graph,
    graph_from_networkx,
    main,
    random_connected_graph,
    reference_mst_weight,
    run_checks,
    to_networkx,
)
from prim_mst import Graph, create_example_graph


def test_random_graph_is_connected_and_deterministic():
    G1 = random_connected_graph(8, 0.2, 7)
    G2 = random_connected_graph(8, 0.2, 7)

    assert nx.is_connected(G1)
    assert sorted(G1.edges(data="weight")) == sorted(G2.edges(data="weight"))
    assert all(1 <= w <= 10 for _, _, w in G1.edges(data="weight"))


def test_random_graph_with_no_edges_is_bridged():
    G = random_connected_graph(6, 0.0, 3)

    assert nx.is_connected(G)
    assert G.number_of_edges() == 5


def test_graph_from_networkx_keeps_weights():
    G = random_connected_graph(9, 0.4, 11)

    graph = graph_from_networkx(G)

    assert graph.vertices == 9
    assert sorted(graph.edges()) == sorted(
        (min(u, v), max(u, v), w) for u, v, w in G.edges(data="weight")
    )


def test_to_networkx_keeps_lightest_parallel_edge():
    g = Graph.from_edges(3, [(0, 1, 6), (0, 1, 2), (1, 2, 3)])

    G = to_networkx(g)

    assert G.number_of_nodes() == 3
    assert G[0][1]["weight"] == 2
    assert G[1][2]["weight"] == 3


def test_reference_weight_uses_component_of_root():
    g = Graph.from_edges(4, [(0, 1, 3), (2, 3, 1)])

    assert reference_mst_weight(to_networkx(g)) == 3


def test_check_graph_example():
    result = check_graph(create_example_graph())

    assert result["connected"]
    assert result["num_edges"] == 7
    assert result["prim_weight"] == 16
    assert result["networkx_weight"] == 16
    assert result["is_correct"]


def test_check_graph_counts_parallel_edges():
    g = create_example_graph()
    g.add_edge(0, 1, 50)

    result = check_graph(g)

    assert result["num_edges"] == 8
    assert result["is_correct"]


def test_check_graph_disconnected():
    result = check_graph(Graph.from_edges(4, [(0, 1, 3), (2, 3, 1)]))

    assert not result["connected"]
    assert result["prim_weight"] == 3
    assert result["is_correct"]


def test_run_checks_all_match():
    results = run_checks()

    assert len(results) == len(RANDOM_CHECKS) + 1
    assert results[0][1]["prim_weight"] == 16
    assert all(result["is_correct"] for _, result in results)


def test_main_prints_report_and_writes_nothing(capsys, tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    assert main() is True

    out = capsys.readouterr().out
    assert "example" in out
    assert f"{len(RANDOM_CHECKS) + 1}/{len(RANDOM_CHECKS) + 1} graphs match NetworkX" in out
    assert list(tmp_path.iterdir()) == []
