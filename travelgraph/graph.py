"""Edge-list graphs and the derived views used by connectivity and search.

A graph is an immutable tuple of ``Edge`` triples. It may be directed
(asymmetric) or undirected, where undirected means every unordered pair is
present as two symmetric edges with equal cost. The node set and adjacency
map are derived on demand and never cached.
"""

from __future__ import annotations

from typing import Dict, FrozenSet, Iterable, NamedTuple, Sequence, Tuple

import networkx as nx

from travelgraph.types import AdjacencyMap, Cost, NodeName


class Edge(NamedTuple):
    """Directed weighted edge ``src -> dst``."""

    src: NodeName
    dst: NodeName
    cost: Cost

    @classmethod
    def make(cls, src: NodeName, dst: NodeName, cost: Cost) -> Edge:
        """Build an edge, rejecting self-loops.

        Raises:
            ValueError: If ``src == dst``.
        """
        if src == dst:
            raise ValueError(f"Self-loop edges are not allowed: '{src}' -> '{dst}'")
        return cls(src, dst, cost)


#: Ordered, immutable sequence of edges.
Graph = Tuple[Edge, ...]


def as_graph(edges: Iterable[Sequence]) -> Graph:
    """Coerce an iterable of ``(src, dst, cost)`` sequences into a Graph.

    Accepts Edge instances as well as plain lists such as
    ``[["A", "B", 5], ["B", "A", 5]]``.

    Raises:
        ValueError: If an item is not a 3-sequence or is a self-loop.
    """
    result = []
    for item in edges:
        if isinstance(item, Edge):
            result.append(item)
            continue
        if len(item) != 3:
            raise ValueError(f"Edges must be (src, dst, cost) triples, got {item!r}")
        src, dst, cost = item
        result.append(Edge.make(src, dst, cost))
    return tuple(result)


def to_undirected(graph: Iterable[Sequence]) -> Graph:
    """Fold a directed graph into an undirected one.

    Edges are keyed by their unordered endpoint pair; when a pair repeats,
    the cost of the last occurrence wins, so an earlier directed cost can be
    dropped. Each surviving pair expands to two symmetric edges.

    Output order follows first appearance of each unordered pair. Callers
    must not rely on it.
    """
    costs: Dict[FrozenSet[NodeName], Tuple[NodeName, NodeName, Cost]] = {}
    for src, dst, cost in as_graph(graph):
        key = frozenset((src, dst))
        if key in costs:
            first_src, first_dst, _ = costs[key]
            costs[key] = (first_src, first_dst, cost)
        else:
            costs[key] = (src, dst, cost)

    result = []
    for src, dst, cost in costs.values():
        result.append(Edge(src, dst, cost))
        result.append(Edge(dst, src, cost))
    return tuple(result)


def node_set(graph: Iterable[Sequence]) -> FrozenSet[NodeName]:
    """Return every node that appears as either endpoint of an edge."""
    nodes = set()
    for src, dst, _ in as_graph(graph):
        nodes.add(src)
        nodes.add(dst)
    return frozenset(nodes)


def adjacency_map(graph: Iterable[Sequence]) -> AdjacencyMap:
    """Fold a graph into ``{(src, dst): cost}``; the last edge per pair wins.

    Example:
        >>> adjacency_map([("London", "Omaha", 4), ("London", "Omaha", 2)])
        {('London', 'Omaha'): 2}
    """
    result: AdjacencyMap = {}
    for src, dst, cost in as_graph(graph):
        result[(src, dst)] = cost
    return result


def is_undirected(graph: Iterable[Sequence]) -> bool:
    """True if every edge has a reverse edge with the same cost."""
    adj = adjacency_map(graph)
    return all(adj.get((dst, src)) == cost for (src, dst), cost in adj.items())


def to_networkx(graph: Iterable[Sequence]) -> nx.DiGraph:
    """Convert a graph to a NetworkX DiGraph with a ``cost`` edge attribute.

    Duplicate ordered pairs collapse with the same last-wins rule as
    ``adjacency_map``.
    """
    nx_graph = nx.DiGraph()
    edges = as_graph(graph)
    nx_graph.add_nodes_from(sorted(node_set(edges)))
    for (src, dst), cost in adjacency_map(edges).items():
        nx_graph.add_edge(src, dst, cost=cost)
    return nx_graph
