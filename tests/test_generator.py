import random

import pytest

from travelgraph.config import InvalidConfigurationError
from travelgraph.generator import (
    PROBABILITY_FLOOR,
    effective_probability,
    generate_graph,
)

NODES = ["A", "B", "C", "D", "E"]


def test_probability_floor_policy():
    assert PROBABILITY_FLOOR == 0.3
    assert effective_probability(0.0) == 0.3
    assert effective_probability(0.1) == 0.3
    assert effective_probability(0.3) == 0.3
    assert effective_probability(0.75) == 0.75


def test_generate_complete_graph(always_edge):
    g = generate_graph(0.5, 1, 10, NODES, always_edge)
    assert len(g) == len(NODES) * (len(NODES) - 1)
    assert all(edge.src != edge.dst for edge in g)
    # Row-major pair order
    assert (g[0].src, g[0].dst) == ("A", "B")
    assert (g[-1].src, g[-1].dst) == ("E", "D")


def test_generate_no_edges(never_edge):
    assert generate_graph(0.5, 1, 10, NODES, never_edge) == ()


def test_floor_applies_to_low_probability():
    """A draw of 0.29 is kept even when probability is 0, because of the floor."""

    class Draw(random.Random):
        def random(self):
            return 0.29

    g = generate_graph(0.0, 1, 2, ["A", "B"], Draw(1))
    assert len(g) == 2


def test_costs_within_range():
    rng = random.Random(7)
    for _ in range(20):
        g = generate_graph(1.0, 3, 6, NODES, rng)
        assert g
        assert all(3 <= edge.cost < 6 for edge in g)
        assert all(isinstance(edge.cost, int) for edge in g)


def test_cost_range_of_one_value(always_edge):
    g = generate_graph(1.0, 4, 5, NODES, always_edge)
    assert {edge.cost for edge in g} == {4}


def test_generation_is_asymmetric_in_general():
    rng = random.Random(3)
    asymmetric = False
    for _ in range(20):
        g = generate_graph(0.5, 1, 10, NODES, rng)
        pairs = {(e.src, e.dst) for e in g}
        if any((dst, src) not in pairs for src, dst in pairs):
            asymmetric = True
            break
    assert asymmetric


def test_same_seed_same_graph():
    g1 = generate_graph(0.5, 1, 10, NODES, random.Random(11))
    g2 = generate_graph(0.5, 1, 10, NODES, random.Random(11))
    assert g1 == g2


def test_does_not_mutate_nodes(always_edge):
    nodes = list(NODES)
    generate_graph(0.5, 1, 10, nodes, always_edge)
    assert nodes == NODES


@pytest.mark.parametrize(
    "probability,cost_min,cost_max,nodes,match",
    [
        (1.5, 1, 10, NODES, "probability"),
        (-0.1, 1, 10, NODES, "probability"),
        (0.5, 5, 5, NODES, "cost_max"),
        (0.5, 6, 5, NODES, "cost_max"),
        (0.5, 1, 10, ["A", "A"], "duplicates"),
    ],
)
def test_invalid_parameters(probability, cost_min, cost_max, nodes, match):
    with pytest.raises(InvalidConfigurationError, match=match):
        generate_graph(probability, cost_min, cost_max, nodes, random.Random(0))


def test_invalid_configuration_is_value_error():
    with pytest.raises(ValueError):
        generate_graph(0.5, 2, 1, NODES)
