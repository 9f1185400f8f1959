"""Helpers for YAML parsing quirks."""

from typing import Any, Dict, TypeVar

import yaml

V = TypeVar("V")


def normalize_yaml_dict_keys(data: Dict[Any, V]) -> Dict[str, V]:
    """Return a copy of ``data`` whose keys are all strings.

    YAML 1.1 turns bare keys such as ``yes``, ``no``, ``on`` and ``off`` into
    booleans and numeric-looking keys into ints. Node names must stay strings,
    so booleans become "True"/"False" and everything else goes through ``str``.

    Examples:
        >>> normalize_yaml_dict_keys({True: 1, 7: 2, "Paris": 3})
        {'True': 1, '7': 2, 'Paris': 3}
    """
    normalized = {}
    for key, value in data.items():
        # YAML 1.1 reads true/yes/on and false/no/off keys as Python bools
        if isinstance(key, bool):
            key = str(key)
        key = str(key)
        normalized[key] = value
    return normalized


def load_yaml_mapping(yaml_str: str, what: str) -> Dict[str, Any]:
    """Parse ``yaml_str`` with ``yaml.safe_load`` and require a top-level mapping.

    An empty document yields an empty dict.

    Raises:
        ValueError: If the document is not a mapping.
    """
    data = yaml.safe_load(yaml_str)
    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"The provided {what} YAML must map to a dictionary at top-level.")
    return normalize_yaml_dict_keys(data)
