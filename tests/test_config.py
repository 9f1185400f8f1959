import pytest

from travelgraph.config import (
    GenerationConfig,
    InvalidConfigurationError,
    load_config_yaml,
)


def test_defaults_are_valid():
    config = GenerationConfig()
    assert config.validate() == []
    config.check()


def test_validate_reports_every_problem():
    config = GenerationConfig(
        probability=1.2, cost_min=3, cost_max=2, max_tries=0, node_count=-1
    )
    problems = config.validate()
    assert len(problems) == 4
    assert any("probability" in p for p in problems)
    assert any("cost_max" in p for p in problems)
    assert any("max_tries" in p for p in problems)
    assert any("node_count" in p for p in problems)


def test_search_ceiling_uses_clamped_count():
    config = GenerationConfig(node_count=20, max_search_nodes=9)
    assert config.validate(catalog_size=5) == []
    assert len(config.validate(catalog_size=13)) == 1
    assert len(config.validate()) == 1


def test_check_raises():
    with pytest.raises(InvalidConfigurationError, match="cost_max"):
        GenerationConfig(cost_min=4, cost_max=4).check()


def test_from_dict_and_to_dict_round_trip():
    data = {"max_tries": 3, "directed": True, "seed": 9}
    config = GenerationConfig.from_dict(data)
    assert config.max_tries == 3
    assert config.directed is True
    assert config.to_dict()["seed"] == 9


def test_from_dict_rejects_unknown_keys():
    with pytest.raises(ValueError, match="Unrecognized configuration key"):
        GenerationConfig.from_dict({"nodes": 3})


def test_load_config_yaml():
    config = load_config_yaml(
        """
max_tries: 20
probability: 0.4
node_count: 6
seed: 7
"""
    )
    assert config == GenerationConfig(
        max_tries=20, probability=0.4, node_count=6, seed=7
    )


def test_load_config_yaml_empty_and_invalid():
    assert load_config_yaml("") == GenerationConfig()
    with pytest.raises(ValueError, match="dictionary"):
        load_config_yaml("- 1\n- 2\n")


@pytest.mark.parametrize(
    "field,value",
    [
        ("cost_min", 1.5),
        ("cost_max", "10"),
        ("probability", "0.5"),
        ("max_tries", True),
        ("node_count", 4.0),
        ("directed", "yes"),
        ("seed", 1.5),
    ],
)
def test_validate_rejects_wrong_types(field, value):
    config = GenerationConfig(**{field: value})
    problems = config.validate()
    assert len(problems) == 1
    assert problems[0].startswith(f"{field}:")


def test_validate_skips_relational_checks_on_bad_types():
    config = GenerationConfig(cost_min="1", cost_max=None, node_count="20")
    problems = config.validate(catalog_size=13)
    assert len(problems) == 3
    assert not any("must be greater" in p for p in problems)
    assert not any("ceiling" in p for p in problems)


def test_load_config_yaml_wrong_types_fail_validation():
    config = load_config_yaml("cost_min: 1.5\ncost_max: 4\nprobability: '0.5'\n")
    with pytest.raises(InvalidConfigurationError) as exc_info:
        config.check()
    assert "cost_min" in str(exc_info.value)
    assert "probability" in str(exc_info.value)
