"""Retry-driven generation of connected random graphs."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Optional, Tuple

from travelgraph.catalog import DEFAULT_CATALOG, clamp_node_count, select_nodes
from travelgraph.config import DEFAULT_MAX_SEARCH_NODES
from travelgraph.connectivity import check_search_size, is_connected
from travelgraph.generator import generate_graph
from travelgraph.graph import Graph, to_undirected
from travelgraph.logging import get_logger
from travelgraph.seed_manager import SeedManager
from travelgraph.types import NodeName, Status

logger = get_logger(__name__)


@dataclass(frozen=True)
class SynthesisResult:
    """Outcome of ``synthesize_connected_graph``.

    Attributes:
        status: ``Status.OK`` or ``Status.GENERATION_EXHAUSTED``.
        graph: The first connected graph, or None on exhaustion.
        nodes: Nodes drawn for the successful attempt (empty on exhaustion).
        attempts: Number of generation attempts made.
    """

    status: Status
    graph: Optional[Graph] = None
    nodes: Tuple[NodeName, ...] = field(default_factory=tuple)
    attempts: int = 0

    @property
    def ok(self) -> bool:
        return self.status.ok


def synthesize_connected_graph(
    max_tries: int,
    directed: bool,
    probability: float,
    cost_min: int,
    cost_max: int,
    node_count: int,
    catalog: Mapping = DEFAULT_CATALOG,
    rng: Optional[random.Random] = None,
    seed: Optional[int] = None,
    max_nodes: Optional[int] = DEFAULT_MAX_SEARCH_NODES,
) -> SynthesisResult:
    """Generate random graphs until one is connected or ``max_tries`` runs out.

    Each attempt draws ``node_count`` nodes from ``catalog`` (clamped to its
    size), generates a directed graph over them, folds it to undirected unless
    ``directed`` is set, and checks that the drawn nodes admit a full tour.

    Attempts are sequential. Unless ``rng`` is given, attempt ``i`` uses its
    own Random derived from ``seed``, so a seeded run is reproducible.

    Args:
        max_tries: Maximum number of attempts.
        directed: Keep generated graphs directed.
        probability: Edge probability passed to the generator.
        cost_min: Inclusive lower cost bound.
        cost_max: Exclusive upper cost bound.
        node_count: Nodes to draw per attempt.
        catalog: Node pool to draw from.
        rng: Shared random source for every attempt (overrides ``seed``).
        seed: Master seed for per-attempt random sources.
        max_nodes: Largest node count the connectivity search may cover, or
            None for no limit. Checked once, before the first attempt.

    Returns:
        SynthesisResult with the first connected graph, or with status
        ``GENERATION_EXHAUSTED`` and no graph.

    Raises:
        InvalidConfigurationError: On parameters the generator rejects, or
            when the clamped node count exceeds ``max_nodes``.
    """
    check_search_size(clamp_node_count(node_count, catalog), max_nodes)
    seed_mgr = SeedManager(seed)
    attempt = 0
    while attempt < max_tries:
        attempt_rng = rng or seed_mgr.create_random_state("synthesize", attempt)
        nodes = select_nodes(catalog, node_count, attempt_rng)
        graph = generate_graph(probability, cost_min, cost_max, nodes, attempt_rng)
        if not directed:
            graph = to_undirected(graph)
        attempt += 1

        if is_connected(graph, nodes, max_nodes=max_nodes):
            logger.debug(
                "Attempt %d produced a connected graph: %d nodes, %d edges",
                attempt,
                len(nodes),
                len(graph),
            )
            return SynthesisResult(Status.OK, graph, tuple(nodes), attempt)
        logger.debug("Attempt %d produced a disconnected graph", attempt)

    logger.warning("Failed to generate connected graph in %d tries", max_tries)
    return SynthesisResult(Status.GENERATION_EXHAUSTED, attempts=attempt)
