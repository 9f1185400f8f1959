import networkx as nx
import pytest

from travelgraph.graph import (
    Edge,
    adjacency_map,
    as_graph,
    is_undirected,
    node_set,
    to_networkx,
    to_undirected,
)


def test_edge_make_rejects_self_loop():
    with pytest.raises(ValueError, match="Self-loop"):
        Edge.make("A", "A", 1)


def test_as_graph_accepts_lists_and_edges():
    g = as_graph([["A", "B", 1], Edge("B", "C", 2)])
    assert g == (Edge("A", "B", 1), Edge("B", "C", 2))
    assert isinstance(g, tuple)


def test_as_graph_rejects_bad_triples():
    with pytest.raises(ValueError, match="triples"):
        as_graph([["A", "B"]])
    with pytest.raises(ValueError, match="Self-loop"):
        as_graph([["A", "A", 1]])


def test_node_set(triangle):
    assert node_set(triangle) == {"A", "B", "C"}
    assert node_set([]) == frozenset()


def test_adjacency_map_last_write_wins():
    """Repeated ordered pairs keep the cost of the last occurrence only."""
    g = [["A", "B", 4], ["B", "A", 1], ["A", "B", 7], ["A", "B", 2]]
    adj = adjacency_map(g)
    assert adj == {("A", "B"): 2, ("B", "A"): 1}


def test_adjacency_map_docstring_example():
    g = [
        ["London", "Omaha", 4],
        ["London", "Medaryville", 4],
        ["Omaha", "Medaryville", 2],
        ["Medaryville", "Omaha", 4],
    ]
    assert adjacency_map(g) == {
        ("London", "Omaha"): 4,
        ("London", "Medaryville"): 4,
        ("Omaha", "Medaryville"): 2,
        ("Medaryville", "Omaha"): 4,
    }


def test_to_undirected_symmetric_edges():
    g = to_undirected([["A", "B", 3], ["B", "C", 5]])
    assert set(g) == {
        Edge("A", "B", 3),
        Edge("B", "A", 3),
        Edge("B", "C", 5),
        Edge("C", "B", 5),
    }
    assert is_undirected(g)


def test_to_undirected_last_cost_wins_per_unordered_pair():
    """A later reverse edge overwrites the earlier directed cost."""
    g = to_undirected([["A", "B", 3], ["B", "A", 8]])
    assert len(g) == 2
    assert set(g) == {Edge("A", "B", 8), Edge("B", "A", 8)}


def test_to_undirected_empty():
    assert to_undirected([]) == ()


def test_is_undirected_detects_asymmetry(directed_line, triangle):
    assert not is_undirected(directed_line)
    assert is_undirected(triangle)
    assert not is_undirected([["A", "B", 1], ["B", "A", 2]])


def test_to_networkx(triangle):
    nx_graph = to_networkx(triangle)
    assert isinstance(nx_graph, nx.DiGraph)
    assert set(nx_graph.nodes) == {"A", "B", "C"}
    assert nx_graph.number_of_edges() == 6
    assert nx_graph["B"]["C"]["cost"] == 2
