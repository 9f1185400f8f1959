"""Configuration for graph synthesis and tour search."""

from __future__ import annotations

import json
from dataclasses import asdict, dataclass, fields
from functools import lru_cache
from importlib import resources
from typing import Any, Dict, List, Optional

from jsonschema import Draft7Validator, validators

from travelgraph.yaml_utils import load_yaml_mapping

#: Default node-count ceiling for exhaustive permutation search (9! candidates).
DEFAULT_MAX_SEARCH_NODES = 9


class InvalidConfigurationError(ValueError):
    """Raised when generation or search parameters are unusable."""


def _is_strict_int(checker: Any, instance: Any) -> bool:
    # YAML booleans are ints in Python; 1.0 is not an edge cost.
    return isinstance(instance, int) and not isinstance(instance, bool)


_ConfigValidator = validators.extend(
    Draft7Validator,
    type_checker=Draft7Validator.TYPE_CHECKER.redefine("integer", _is_strict_int),
)


@lru_cache(maxsize=1)
def _config_validator() -> Any:
    """Load the packaged config schema and build its validator."""
    with (
        resources.files("travelgraph.schemas")
        .joinpath("config.json")
        .open("r", encoding="utf-8")
    ) as f:
        schema = json.load(f)
    return _ConfigValidator(schema)


@dataclass
class GenerationConfig:
    """Parameters for one synthesize-then-search run.

    Attributes:
        max_tries: Upper bound on generation attempts before giving up.
        directed: Keep the generated graph directed; otherwise fold it to an
            undirected (symmetric) graph before the connectivity check.
        probability: Chance that any ordered node pair gets an edge. Values
            below ``PROBABILITY_FLOOR`` are raised to it at generation time.
        cost_min: Inclusive lower bound of edge cost.
        cost_max: Exclusive upper bound of edge cost.
        node_count: Nodes to draw from the catalog; clamped to catalog size.
        seed: Master seed for reproducible runs, or None.
        max_search_nodes: Largest node count the exhaustive search will accept.
    """

    max_tries: int = 10
    directed: bool = False
    probability: float = 0.5
    cost_min: int = 1
    cost_max: int = 10
    node_count: int = 5
    seed: Optional[int] = None
    max_search_nodes: int = DEFAULT_MAX_SEARCH_NODES

    def validate(self, catalog_size: Optional[int] = None) -> List[str]:
        """Return a list of problems with this configuration (empty when valid).

        Field types and ranges are checked against the packaged JSON schema;
        the cost range and the search ceiling are checked only once the
        fields involved have valid types.

        Args:
            catalog_size: Size of the catalog nodes will be drawn from. When
                given, the clamped node count is compared to the search ceiling.
        """
        data = self.to_dict()
        errors = sorted(
            _config_validator().iter_errors(data), key=lambda e: list(e.path)
        )
        problems = [
            f"{'.'.join(str(p) for p in error.path) or 'config'}: {error.message}"
            for error in errors
        ]
        invalid = {error.path[0] for error in errors if error.path}

        if not {"cost_min", "cost_max"} & invalid and self.cost_max <= self.cost_min:
            problems.append(
                f"cost_max ({self.cost_max}) must be greater than "
                f"cost_min ({self.cost_min})"
            )

        if not {"node_count", "max_search_nodes"} & invalid:
            effective_count = self.node_count
            if catalog_size is not None:
                effective_count = min(self.node_count, catalog_size)
            if effective_count > self.max_search_nodes:
                problems.append(
                    f"node_count {effective_count} exceeds the exhaustive search "
                    f"ceiling of {self.max_search_nodes} nodes"
                )
        return problems

    def check(self, catalog_size: Optional[int] = None) -> None:
        """Raise InvalidConfigurationError if ``validate`` reports any problem."""
        problems = self.validate(catalog_size)
        if problems:
            raise InvalidConfigurationError("; ".join(problems))

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> GenerationConfig:
        """Build a config from a mapping, rejecting unrecognized keys.

        Raises:
            ValueError: If ``data`` contains keys that are not config fields.
        """
        allowed = {f.name for f in fields(cls)}
        extra = set(data) - allowed
        if extra:
            raise ValueError(
                f"Unrecognized configuration key(s): {', '.join(sorted(extra))}. "
                f"Allowed keys are {sorted(allowed)}"
            )
        return cls(**data)


def load_config_yaml(yaml_str: str) -> GenerationConfig:
    """Parse a YAML document into a GenerationConfig.

    Example:
        max_tries: 20
        probability: 0.4
        node_count: 6
        seed: 7
    """
    return GenerationConfig.from_dict(load_yaml_mapping(yaml_str, "configuration"))
