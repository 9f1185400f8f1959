"""Shared fixtures for travelgraph tests."""

from __future__ import annotations

import random

import pytest


class FixedRandom(random.Random):
    """Random whose ``random()`` always returns ``value``.

    Overriding ``random()`` also routes shuffles and integer draws through
    ``value``, so every draw is deterministic.
    """

    def __init__(self, value: float, seed: int = 0) -> None:
        super().__init__(seed)
        self.value = value

    def random(self) -> float:
        return self.value


@pytest.fixture
def triangle():
    # Cost:
    #        [5]        [2]
    #   A◄────────►B◄────────►C
    #   ▲                     ▲
    #   └─────────[9]─────────┘
    return [
        ["A", "B", 5],
        ["B", "A", 5],
        ["B", "C", 2],
        ["C", "B", 2],
        ["A", "C", 9],
        ["C", "A", 9],
    ]


@pytest.fixture
def directed_line():
    #   A──[1]──►B──[2]──►C──[3]──►D
    return [["A", "B", 1], ["B", "C", 2], ["C", "D", 3]]


@pytest.fixture
def star():
    # B and C only connect through A, so no tour visits all three leaves.
    #        B
    #        │
    #   C────A────D
    edges = []
    for leaf in ("B", "C", "D"):
        edges.append(["A", leaf, 1])
        edges.append([leaf, "A", 1])
    return edges


@pytest.fixture
def always_edge():
    """Random source that includes every candidate edge."""
    return FixedRandom(0.0)


@pytest.fixture
def never_edge():
    """Random source that includes no candidate edge, even at the floor."""
    return FixedRandom(0.99)
