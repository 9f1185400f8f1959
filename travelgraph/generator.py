"""Random directed graph generation over a node subset."""

from __future__ import annotations

import random
from typing import Optional, Sequence

from travelgraph.config import InvalidConfigurationError
from travelgraph.graph import Edge, Graph
from travelgraph.types import NodeName

#: Edge probabilities below this are raised to it. Small random graphs below
#: the floor are too often disconnected to be worth generating.
PROBABILITY_FLOOR = 0.3


def effective_probability(probability: float) -> float:
    """Apply the probability floor: ``max(probability, PROBABILITY_FLOOR)``."""
    return max(probability, PROBABILITY_FLOOR)


def generate_graph(
    probability: float,
    cost_min: int,
    cost_max: int,
    nodes: Sequence[NodeName],
    rng: Optional[random.Random] = None,
) -> Graph:
    """Generate a random directed graph over ``nodes``.

    Every ordered pair ``(a, b)`` with ``a != b`` is considered independently,
    so the result is generally asymmetric. A pair becomes an edge when a
    uniform draw in [0, 1) falls below the effective probability; its cost is
    drawn uniformly from ``[cost_min, cost_max)``.

    Args:
        probability: Chance of each ordered pair being connected, in [0, 1].
        cost_min: Inclusive lower cost bound.
        cost_max: Exclusive upper cost bound.
        nodes: Distinct node names to connect.
        rng: Random source; a fresh unseeded one is used when omitted.

    Returns:
        Directed graph as a tuple of edges, in row-major pair order.

    Raises:
        InvalidConfigurationError: On a probability outside [0, 1], an empty
            cost range, or duplicate node names.
    """
    if not 0.0 <= probability <= 1.0:
        raise InvalidConfigurationError(
            f"probability must be within [0, 1], got {probability}"
        )
    if cost_max <= cost_min:
        raise InvalidConfigurationError(
            f"cost_max ({cost_max}) must be greater than cost_min ({cost_min})"
        )
    if len(set(nodes)) != len(nodes):
        raise InvalidConfigurationError("nodes must not contain duplicates")

    rng = rng or random.Random()
    prob = effective_probability(probability)
    span = cost_max - cost_min

    edges = []
    for src in nodes:
        for dst in nodes:
            if src == dst:
                continue
            # random() is in [0, 1), so a strict comparison gives exactly `prob`
            if rng.random() < prob:
                edges.append(Edge(src, dst, cost_min + rng.randrange(span)))
    return tuple(edges)
