"""YAML boolean key handling for catalog node names."""

import textwrap

import pytest

from travelgraph.catalog import NodeCatalog
from travelgraph.yaml_utils import load_yaml_mapping, normalize_yaml_dict_keys


def test_normalize_yaml_dict_keys_boolean_keys():
    """Boolean and numeric keys become their string representations."""
    input_dict = {True: 1, False: 2, "Paris": 3, 7: 4}

    result = normalize_yaml_dict_keys(input_dict)

    assert result == {"True": 1, "False": 2, "Paris": 3, "7": 4}
    assert all(isinstance(key, str) for key in result)


def test_normalize_yaml_dict_keys_empty_dict():
    assert normalize_yaml_dict_keys({}) == {}


@pytest.mark.parametrize(
    "yaml_key,expected", [("yes", "True"), ("on", "True"), ("off", "False")]
)
def test_yaml_boolean_words_become_string_node_names(yaml_key, expected):
    yaml_str = textwrap.dedent(
        f"""
        London: 17
        {yaml_key}: 2
        """
    )
    catalog = NodeCatalog.from_yaml(yaml_str)
    assert expected in catalog
    assert catalog[expected].points == 2


def test_load_yaml_mapping_normalizes_keys():
    assert load_yaml_mapping("true: 1\n42: 2\n", "catalog") == {"True": 1, "42": 2}
