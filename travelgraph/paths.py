"""Exhaustive path enumeration, scoring, and shortest-path selection.

Every permutation of the node set is a candidate visiting order. Candidates
whose hops are all edges of the graph are valid; each valid path is scored by
summing its hop costs and the cheapest one wins. The search is O(n!), so
callers can pass ``max_nodes`` to refuse graphs that are too large.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Iterable, Iterator, List, Mapping, Optional, Sequence, Tuple

from travelgraph.connectivity import (
    Permutations,
    check_search_size,
    hops,
    hops_valid,
)
from travelgraph.graph import adjacency_map, as_graph
from travelgraph.logging import get_logger
from travelgraph.types import Cost, Hop, NodeName

logger = get_logger(__name__)


@dataclass(frozen=True)
class ScoredPath:
    """A visiting order together with its total cost.

    Attributes:
        nodes: Node names in visiting order, without repeats.
        cost: Sum of hop costs along ``nodes``.
    """

    nodes: Tuple[NodeName, ...]
    cost: Cost

    def __lt__(self, other: Any) -> bool:
        """Order paths by cost only."""
        if not isinstance(other, ScoredPath):
            return NotImplemented
        return self.cost < other.cost

    def __len__(self) -> int:
        return len(self.nodes)

    def __iter__(self) -> Iterator[NodeName]:
        return iter(self.nodes)

    @property
    def hops(self) -> Tuple[Hop, ...]:
        """Consecutive ``(from, to)`` pairs of the path."""
        return tuple(hops(self.nodes))

    @property
    def src_node(self) -> NodeName:
        return self.nodes[0]

    @property
    def dst_node(self) -> NodeName:
        return self.nodes[-1]


def score(adj: Mapping[Hop, Cost], path: Sequence[NodeName]) -> Cost:
    """Sum the adjacency-map cost of every hop in ``path``.

    A hop missing from ``adj`` adds 0 rather than disqualifying the path;
    validity is a separate check (``hops_valid``). A path with no hops
    scores 0.
    """
    return sum(adj.get(hop, 0) for hop in hops(path))


def find_all_paths(
    graph: Iterable[Sequence],
    nodes: Optional[Iterable[NodeName]] = None,
    max_nodes: Optional[int] = None,
) -> Iterator[Tuple[NodeName, ...]]:
    """Lazily yield every valid visiting order of the graph's nodes.

    Order follows ``itertools.permutations`` over the sorted node set. Each
    valid permutation is yielded exactly once.

    Args:
        graph: Edges to search.
        nodes: Nodes to visit. Defaults to the graph's node set.
        max_nodes: Refuse to search more than this many nodes.

    Raises:
        InvalidConfigurationError: If the node count exceeds ``max_nodes``.
    """
    edges = as_graph(graph)
    candidates = Permutations.of_graph(edges, nodes)
    check_search_size(len(candidates.nodes), max_nodes)
    adj = adjacency_map(edges)
    for candidate in candidates:
        if hops_valid(adj, candidate):
            yield candidate


def score_all_paths(
    graph: Iterable[Sequence],
    nodes: Optional[Iterable[NodeName]] = None,
    max_nodes: Optional[int] = None,
) -> List[ScoredPath]:
    """Find all valid paths and score each one, in enumeration order."""
    edges = as_graph(graph)
    adj = adjacency_map(edges)
    scored = [
        ScoredPath(path, score(adj, path))
        for path in find_all_paths(edges, nodes, max_nodes)
    ]
    logger.debug("Valid paths found: %d", len(scored))
    return scored


def select_shortest_path(scored_paths: Iterable[ScoredPath]) -> Optional[ScoredPath]:
    """Pick the minimum-cost path; ties go to the first one seen.

    Paths with fewer than two nodes are not tours and are skipped.

    Returns:
        The cheapest path, or None when there is no solution.
    """
    best: Optional[ScoredPath] = None
    for candidate in scored_paths:
        if len(candidate) < 2:
            continue
        if best is None or candidate.cost < best.cost:
            best = candidate
    return best


def find_shortest_path(
    graph: Iterable[Sequence],
    nodes: Optional[Iterable[NodeName]] = None,
    max_nodes: Optional[int] = None,
) -> Optional[ScoredPath]:
    """Score every valid path through ``graph`` and return the cheapest.

    Returns:
        The shortest path, or None if the graph has no valid path over two or
        more nodes.
    """
    return select_shortest_path(score_all_paths(graph, nodes, max_nodes))
