"""Shared type aliases and enums for graph generation and tour search."""

from __future__ import annotations

from enum import IntEnum
from typing import Dict, Tuple, Union

#: Opaque node identifier drawn from a node catalog.
NodeName = str

#: Numeric cost of an edge or a path. Generated edges always carry ints.
Cost = Union[int, float]

#: Ordered (src, dst) pair used as the key of an adjacency map.
Hop = Tuple[NodeName, NodeName]

#: Mapping from ordered node pair to edge cost.
AdjacencyMap = Dict[Hop, Cost]


class Status(IntEnum):
    """Outcome of a synthesis or solve run.

    Failures are reported as values rather than raised, so callers can retry
    with relaxed parameters.
    """

    #: A connected graph was generated and a shortest path was found.
    OK = 0
    #: Configuration was rejected before any work was done.
    INVALID_CONFIGURATION = 1
    #: Every generation attempt produced a graph that was not connected.
    GENERATION_EXHAUSTED = 2
    #: The graph admitted no valid path through all of its nodes.
    NO_VALID_PATH = 3

    @property
    def ok(self) -> bool:
        """True only for ``Status.OK``."""
        return self is Status.OK
