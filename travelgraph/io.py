"""JSON-ready representations of graphs and run results."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, Dict, Iterable, List, Optional, Sequence

from travelgraph.graph import Graph, as_graph, node_set


def graph_to_edge_list(graph: Iterable[Sequence]) -> List[List[Any]]:
    """Return the graph as ``[[src, dst, cost], ...]`` in edge order."""
    return [[src, dst, cost] for src, dst, cost in as_graph(graph)]


def edge_list_to_graph(data: Iterable[Sequence]) -> Graph:
    """Build a graph from ``[[src, dst, cost], ...]``."""
    return as_graph(data)


def graph_to_node_link(
    graph: Iterable[Sequence], catalog: Optional[Mapping] = None
) -> Dict[str, Any]:
    """
    Return a node-link representation suitable for direct JSON serialization.
    This format is supported by NetworkX and D3.js libraries.
    {"nodes": [{"id": node_name, "attr": {**attr}}, ...]
     "links": [{"source": node_n, "target": node_n, "attr": {"cost": cost}}, ...]}

    Node attributes come from ``catalog`` when given (``points`` plus any
    extra attrs), otherwise they are empty.
    """
    edges = as_graph(graph)
    node_map = {name: num for num, name in enumerate(sorted(node_set(edges)))}

    def node_attr(name: str) -> Dict[str, Any]:
        if catalog is None or name not in catalog:
            return {}
        info = catalog[name]
        return {"points": info.points, **info.attrs}

    return {
        "nodes": [{"id": name, "attr": node_attr(name)} for name in node_map],
        "links": [
            {
                "source": node_map[src],
                "target": node_map[dst],
                "attr": {"cost": cost},
            }
            for src, dst, cost in edges
        ],
    }


def result_to_dict(result: Any) -> Dict[str, Any]:
    """Render a ``TourResult`` as plain data for JSON output."""
    best = result.best
    return {
        "status": result.status.name,
        "config": result.config.to_dict(),
        "attempts": result.attempts,
        "nodes": list(result.nodes),
        "graph": graph_to_edge_list(result.graph) if result.graph is not None else None,
        "valid_path_count": result.valid_path_count,
        "shortest_path": (
            {"nodes": list(best.nodes), "cost": best.cost} if best is not None else None
        ),
        "problems": list(result.problems),
    }
