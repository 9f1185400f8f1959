"""Node catalog: the pool of named locations graphs are built from."""

from __future__ import annotations

import random
from collections.abc import Mapping
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, Iterator, List, Optional

from travelgraph.config import InvalidConfigurationError
from travelgraph.types import NodeName
from travelgraph.yaml_utils import load_yaml_mapping, normalize_yaml_dict_keys


@dataclass(frozen=True)
class NodeInfo:
    """Metadata attached to a catalog entry.

    No algorithm reads this yet; it travels with the catalog so that scoring
    extensions have somewhere to look.

    Attributes:
        points: Point value of visiting the node.
        attrs: Arbitrary extra key-value metadata.
    """

    points: int = 0
    attrs: Dict[str, Any] = field(default_factory=dict, compare=False)


class NodeCatalog(Mapping):
    """Read-only mapping of node name to NodeInfo.

    A catalog is built once and handed explicitly to the generator and the
    synthesizer. Keys are unique by construction.
    """

    def __init__(self, entries: Optional[Dict[NodeName, NodeInfo]] = None) -> None:
        entries = dict(entries or {})
        for name, info in entries.items():
            if not isinstance(name, str) or not name:
                raise ValueError(f"Catalog node names must be non-empty strings, got {name!r}")
            if not isinstance(info, NodeInfo):
                raise TypeError(f"Catalog entry '{name}' must be a NodeInfo")
        self._entries = MappingProxyType(entries)

    def __getitem__(self, name: NodeName) -> NodeInfo:
        return self._entries[name]

    def __iter__(self) -> Iterator[NodeName]:
        return iter(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def __repr__(self) -> str:
        return f"NodeCatalog({list(self._entries)})"

    def names(self) -> List[NodeName]:
        """Return node names in catalog order."""
        return list(self._entries)

    @classmethod
    def from_dict(cls, data: Dict[Any, Any]) -> NodeCatalog:
        """Build a catalog from a plain mapping.

        Each value is either a bare integer point value or a mapping with
        optional ``points`` and ``attrs`` keys.

        Raises:
            ValueError: On unrecognized entry keys or malformed entries.
        """
        entries: Dict[NodeName, NodeInfo] = {}
        for name, definition in normalize_yaml_dict_keys(data).items():
            if definition is None:
                entries[name] = NodeInfo()
            elif isinstance(definition, bool):
                raise ValueError(f"Catalog entry '{name}' must be a number or mapping")
            elif isinstance(definition, int):
                entries[name] = NodeInfo(points=definition)
            elif isinstance(definition, dict):
                unknown = set(definition) - {"points", "attrs"}
                if unknown:
                    raise ValueError(
                        f"Unrecognized key(s) {sorted(unknown)} in catalog entry '{name}'"
                    )
                entries[name] = NodeInfo(
                    points=int(definition.get("points", 0)),
                    attrs=dict(definition.get("attrs") or {}),
                )
            else:
                raise ValueError(f"Catalog entry '{name}' must be a number or mapping")
        return cls(entries)

    @classmethod
    def from_yaml(cls, yaml_str: str) -> NodeCatalog:
        """Build a catalog from a YAML mapping of name to entry."""
        return cls.from_dict(load_yaml_mapping(yaml_str, "catalog"))


DEFAULT_CATALOG = NodeCatalog(
    {
        "London": NodeInfo(points=17),
        "Paris": NodeInfo(points=14),
        "Nashua": NodeInfo(points=3),
        "Hudson": NodeInfo(points=1),
        "Stromsburg": NodeInfo(points=9),
        "Osceola": NodeInfo(points=8),
        "Medaryville": NodeInfo(points=10),
        "Manchester": NodeInfo(points=11),
        "Boston": NodeInfo(points=19),
        "Portland": NodeInfo(points=123),
        "Seattle": NodeInfo(points=43),
        "Robin's_Nest": NodeInfo(points=80),
        "Omaha": NodeInfo(points=71),
    }
)


def clamp_node_count(requested: int, catalog: Mapping) -> int:
    """Cap a requested node count at the catalog size.

    Asking for more nodes than the catalog holds is not an error; the request
    silently shrinks to every node in the catalog.

    Raises:
        InvalidConfigurationError: If ``requested`` is negative.
    """
    if requested < 0:
        raise InvalidConfigurationError(
            f"node_count must not be negative, got {requested}"
        )
    return min(requested, len(catalog))


def select_nodes(
    catalog: Mapping, n: int, rng: Optional[random.Random] = None
) -> List[NodeName]:
    """Randomly pick ``n`` distinct node names from ``catalog``.

    Args:
        catalog: Mapping whose keys are the candidate node names.
        n: Requested count, clamped by ``clamp_node_count``.
        rng: Random source; a fresh unseeded one is used when omitted.
    """
    rng = rng or random.Random()
    count = clamp_node_count(n, catalog)
    names = list(catalog)
    rng.shuffle(names)
    return names[:count]
