"""Connectivity checks for generated graphs.

"Connected" here means the node set admits at least one ordering in which
every consecutive hop is an edge of the graph: a Hamiltonian-style tour, not
plain reachability. The check enumerates permutations lazily and shares its
hop predicate with the path search, so a graph is connected exactly when the
path search finds at least one valid path over the same nodes.

``ConnectivityMode.REACHABILITY`` swaps in a linear-time strong-connectivity
test via NetworkX. It answers a different question and is opt-in only.
"""

from __future__ import annotations

import itertools
from enum import IntEnum
from typing import Iterable, Iterator, Mapping, Optional, Sequence, Tuple

import networkx as nx

from travelgraph.config import InvalidConfigurationError
from travelgraph.graph import adjacency_map, as_graph, node_set, to_networkx
from travelgraph.types import Hop, NodeName


class ConnectivityMode(IntEnum):
    """How ``is_connected`` interprets connectivity."""

    #: At least one permutation of all nodes is hop-valid (exhaustive).
    TOUR = 1
    #: Every node can reach every other node (strong connectivity).
    REACHABILITY = 2


class Permutations:
    """Restartable lazy sequence of permutations of a fixed node ordering.

    Nothing is materialized up front; each ``iter()`` starts a fresh
    enumeration in ``itertools.permutations`` order.
    """

    def __init__(self, nodes: Iterable[NodeName]) -> None:
        self.nodes: Tuple[NodeName, ...] = tuple(nodes)

    def __iter__(self) -> Iterator[Tuple[NodeName, ...]]:
        return itertools.permutations(self.nodes)

    def __len__(self) -> int:
        # n! candidates; 0! == 1 so the empty ordering is a single empty path
        count = 1
        for i in range(2, len(self.nodes) + 1):
            count *= i
        return count

    @classmethod
    def of_graph(
        cls, graph: Iterable[Sequence], nodes: Optional[Iterable[NodeName]] = None
    ) -> Permutations:
        """Permutations of ``nodes`` (default: the graph's node set), sorted.

        Passing ``nodes`` lets callers include nodes that no edge touches.
        """
        if nodes is None:
            nodes = node_set(graph)
        return cls(sorted(set(nodes)))


def hops(path: Sequence[NodeName]) -> Iterator[Hop]:
    """Yield each consecutive ``(from, to)`` pair of ``path``."""
    return zip(path, path[1:])


def hops_valid(adj: Mapping[Hop, object], path: Sequence[NodeName]) -> bool:
    """True if every hop in ``path`` is a key of the adjacency map ``adj``.

    Paths with fewer than two nodes have no hops and are always valid.
    """
    return all(hop in adj for hop in hops(path))


def check_search_size(node_count: int, max_nodes: Optional[int]) -> None:
    """Raise if an exhaustive search over ``node_count`` nodes is over the limit.

    ``max_nodes=None`` disables the check.
    """
    if max_nodes is not None and node_count > max_nodes:
        raise InvalidConfigurationError(
            f"Exhaustive search over {node_count} nodes exceeds the limit of "
            f"{max_nodes}"
        )


def is_connected(
    graph: Iterable[Sequence],
    nodes: Optional[Iterable[NodeName]] = None,
    mode: ConnectivityMode = ConnectivityMode.TOUR,
    max_nodes: Optional[int] = None,
) -> bool:
    """Return True if the graph is connected under ``mode``.

    In TOUR mode permutations are tried one at a time and the first hop-valid
    one ends the search. Worst case is factorial in the node count. Empty and
    single-node sets are trivially connected in both modes.

    Args:
        graph: Edges to check.
        nodes: Nodes that must be covered. Defaults to the graph's node set.
        mode: Connectivity interpretation.
        max_nodes: Refuse a TOUR search over more than this many nodes.

    Raises:
        InvalidConfigurationError: If a TOUR search would exceed ``max_nodes``.
    """
    edges = as_graph(graph)
    if mode is ConnectivityMode.REACHABILITY:
        return is_reachable(edges, nodes)

    candidates = Permutations.of_graph(edges, nodes)
    check_search_size(len(candidates.nodes), max_nodes)
    adj = adjacency_map(edges)
    for candidate in candidates:
        if hops_valid(adj, candidate):
            return True
    return False


def is_reachable(
    graph: Iterable[Sequence], nodes: Optional[Iterable[NodeName]] = None
) -> bool:
    """Return True if every node can reach every other node along edges."""
    nx_graph = to_networkx(graph)
    if nodes is not None:
        nx_graph.add_nodes_from(nodes)
    if nx_graph.number_of_nodes() <= 1:
        return True
    return nx.is_strongly_connected(nx_graph)
