"""travelgraph: random connected graphs and exhaustive shortest-tour search.

Random weighted graphs are built over a catalog of named locations, retried
until the drawn nodes admit a full tour, then every visiting order is scored
to find the cheapest one.

Primary API:
    solve() - Synthesize a connected graph and find its shortest path
    synthesize_connected_graph() - Retry generation until a graph is connected
    find_shortest_path() - Exhaustive search over one graph
    GenerationConfig - Parameters for a run
    NodeCatalog - Immutable pool of node names

Example:
    from travelgraph import GenerationConfig, solve

    result = solve(GenerationConfig(node_count=5, probability=0.5, seed=42))
    if result.ok:
        print(result.best.nodes, result.best.cost)
"""

from __future__ import annotations

from travelgraph import cli, logging
from travelgraph._version import __version__
from travelgraph.catalog import (
    DEFAULT_CATALOG,
    NodeCatalog,
    NodeInfo,
    clamp_node_count,
    select_nodes,
)
from travelgraph.config import (
    DEFAULT_MAX_SEARCH_NODES,
    GenerationConfig,
    InvalidConfigurationError,
    load_config_yaml,
)
from travelgraph.connectivity import (
    ConnectivityMode,
    Permutations,
    hops_valid,
    is_connected,
    is_reachable,
)
from travelgraph.generator import (
    PROBABILITY_FLOOR,
    effective_probability,
    generate_graph,
)
from travelgraph.graph import (
    Edge,
    Graph,
    adjacency_map,
    as_graph,
    is_undirected,
    node_set,
    to_networkx,
    to_undirected,
)
from travelgraph.paths import (
    ScoredPath,
    find_all_paths,
    find_shortest_path,
    score,
    score_all_paths,
    select_shortest_path,
)
from travelgraph.seed_manager import SeedManager
from travelgraph.solver import TourResult, solve
from travelgraph.synthesizer import SynthesisResult, synthesize_connected_graph
from travelgraph.types import Status

__all__ = [
    # Version
    "__version__",
    # Catalog
    "DEFAULT_CATALOG",
    "NodeCatalog",
    "NodeInfo",
    "clamp_node_count",
    "select_nodes",
    # Configuration
    "DEFAULT_MAX_SEARCH_NODES",
    "GenerationConfig",
    "InvalidConfigurationError",
    "load_config_yaml",
    # Graph
    "Edge",
    "Graph",
    "as_graph",
    "to_undirected",
    "node_set",
    "adjacency_map",
    "is_undirected",
    "to_networkx",
    # Generation
    "PROBABILITY_FLOOR",
    "effective_probability",
    "generate_graph",
    "synthesize_connected_graph",
    "SynthesisResult",
    # Connectivity
    "ConnectivityMode",
    "Permutations",
    "hops_valid",
    "is_connected",
    "is_reachable",
    # Search
    "ScoredPath",
    "score",
    "find_all_paths",
    "score_all_paths",
    "select_shortest_path",
    "find_shortest_path",
    # Runs
    "solve",
    "TourResult",
    "Status",
    # Utilities
    "SeedManager",
    "cli",
    "logging",
]
