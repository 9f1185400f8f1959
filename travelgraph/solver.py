"""End-to-end run: synthesize a connected graph, then find its shortest tour."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import List, Optional, Tuple

from travelgraph.catalog import DEFAULT_CATALOG
from travelgraph.config import GenerationConfig
from travelgraph.graph import Graph
from travelgraph.logging import get_logger
from travelgraph.paths import ScoredPath, score_all_paths, select_shortest_path
from travelgraph.synthesizer import synthesize_connected_graph
from travelgraph.types import NodeName, Status

logger = get_logger(__name__)


@dataclass(frozen=True)
class TourResult:
    """Everything a caller needs to report on a run.

    Attributes:
        status: Overall outcome.
        config: Configuration the run used.
        graph: Connected graph, when one was generated.
        nodes: Nodes drawn for the graph.
        best: Cheapest valid path, when one exists.
        valid_path_count: Number of valid paths enumerated.
        attempts: Generation attempts made.
        problems: Configuration problems when status is INVALID_CONFIGURATION.
    """

    status: Status
    config: GenerationConfig
    graph: Optional[Graph] = None
    nodes: Tuple[NodeName, ...] = field(default_factory=tuple)
    best: Optional[ScoredPath] = None
    valid_path_count: int = 0
    attempts: int = 0
    problems: List[str] = field(default_factory=list)

    @property
    def ok(self) -> bool:
        return self.status.ok


def solve(
    config: Optional[GenerationConfig] = None,
    catalog: Mapping = DEFAULT_CATALOG,
    rng: Optional[random.Random] = None,
) -> TourResult:
    """Run generation and exhaustive search for ``config``.

    Failures come back as a status on the result. Configuration problems are
    caught before any generation happens.
    """
    config = config or GenerationConfig()

    problems = config.validate(catalog_size=len(catalog))
    if problems:
        for problem in problems:
            logger.error("Invalid configuration: %s", problem)
        return TourResult(Status.INVALID_CONFIGURATION, config, problems=problems)

    synthesis = synthesize_connected_graph(
        max_tries=config.max_tries,
        directed=config.directed,
        probability=config.probability,
        cost_min=config.cost_min,
        cost_max=config.cost_max,
        node_count=config.node_count,
        catalog=catalog,
        rng=rng,
        seed=config.seed,
        max_nodes=config.max_search_nodes,
    )
    if not synthesis.ok:
        return TourResult(
            Status.GENERATION_EXHAUSTED, config, attempts=synthesis.attempts
        )

    scored = score_all_paths(
        synthesis.graph, synthesis.nodes, max_nodes=config.max_search_nodes
    )
    best = select_shortest_path(scored)
    status = Status.OK if best is not None else Status.NO_VALID_PATH
    if best is None:
        logger.warning(
            "No valid path through %d node(s) despite a connected graph",
            len(synthesis.nodes),
        )
    else:
        logger.info(
            "Shortest path cost %s over %d nodes (%d valid paths, %d attempts)",
            best.cost,
            len(best),
            len(scored),
            synthesis.attempts,
        )

    return TourResult(
        status,
        config,
        graph=synthesis.graph,
        nodes=synthesis.nodes,
        best=best,
        valid_path_count=len(scored),
        attempts=synthesis.attempts,
    )
