import networkx as nx
import pytest

from analysis import (
    compute_connectivity,
    compute_degree_distribution,
    connected_components,
    has_directed_cycle,
    is_symmetric,
    missing_vertices,
    num_edges,
    num_nodes,
    plot_graph,
    reachability_closure,
    to_networkx,
)
from dag import generate_directed_acyclic
from undirected import generate_undirected_cyclic


@pytest.fixture
def split_graph():
    # Two mirrored pairs with no edge between them.
    return {"a": ["b"], "b": ["a"], "c": ["d"], "d": ["c"]}


def test_counts(split_graph):
    assert num_nodes(split_graph) == 4
    assert num_edges(split_graph) == 2
    assert num_edges(split_graph, directed=True) == 4


def test_symmetry_detection():
    assert is_symmetric({"a": ["b"], "b": ["a"]})
    assert not is_symmetric({"a": ["b"], "b": []})
    assert not is_symmetric({"a": ["b"]})


def test_missing_vertices():
    assert missing_vertices({"a": ["b", "c"], "b": []}) == {"c"}
    assert missing_vertices({"a": [], "b": []}) == set()


def test_reachability_closure_follows_paths():
    closure = reachability_closure({"a": ["b"], "b": ["c"], "c": []})
    assert closure == {"a": {"b", "c"}, "b": {"c"}, "c": set()}


def test_cycle_detection():
    assert has_directed_cycle({"a": ["b"], "b": ["c"], "c": ["a"]})
    assert has_directed_cycle({"a": ["b"], "b": ["a"]})
    assert not has_directed_cycle({"a": ["b", "c"], "b": ["c"], "c": []})


def test_partitioned_graph_is_reported(split_graph):
    stats = compute_connectivity(split_graph)
    assert stats["num_components"] == 2
    assert stats["component_sizes"] == [2, 2]
    assert stats["connected"] is False
    assert stats["isolated_nodes"] == 0


def test_components_ignore_direction():
    comps = connected_components({"a": ["b"], "b": [], "c": ["b"], "d": []})
    assert sorted(sorted(c) for c in comps) == [["a", "b", "c"], ["d"]]


@pytest.mark.parametrize("seed", range(5))
def test_components_agree_with_networkx(seed):
    g = generate_undirected_cyclic([f"v{i}" for i in range(12)], seed=seed)
    ours = sorted(sorted(c) for c in connected_components(g))
    theirs = sorted(sorted(c) for c in nx.connected_components(to_networkx(g, directed=False)))
    assert ours == theirs


def test_degree_distribution():
    stats = compute_degree_distribution({"a": ["b", "c"], "b": ["a"], "c": ["a"]})
    assert stats["degree_histogram"] == {1: 2, 2: 1}
    assert stats["min_degree"] == 1
    assert stats["max_degree"] == 2
    assert stats["avg_degree"] == pytest.approx(4 / 3)


def test_degree_distribution_empty():
    stats = compute_degree_distribution({})
    assert stats["degree_list"] == []
    assert stats["avg_degree"] == 0.0


def test_to_networkx_keeps_vertices_without_edges():
    g = to_networkx({"a": ["b"], "b": [], "c": []}, directed=True)
    assert isinstance(g, nx.DiGraph)
    assert set(g.nodes) == {"a", "b", "c"}
    assert list(g.edges) == [("a", "b")]


def test_plot_graph_writes_png(tmp_path):
    out = tmp_path / "dag.png"
    g = generate_directed_acyclic(["a", "b", "c", "d"], seed=3)
    plot_graph(g, True, str(out), title="dag")
    assert out.exists()
    assert out.stat().st_size > 0
