"""Command-line interface for travelgraph."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, List, Mapping, Optional

from travelgraph.catalog import DEFAULT_CATALOG, NodeCatalog
from travelgraph.config import GenerationConfig, load_config_yaml
from travelgraph.io import result_to_dict
from travelgraph.logging import (
    disable_debug_logging,
    enable_debug_logging,
    get_logger,
    set_global_log_level,
)
from travelgraph.solver import TourResult, solve

logger = get_logger(__name__)


def _format_table(
    headers: List[str],
    rows: List[List[str]],
    min_width: int = 8,
) -> str:
    """Format data as a simple ASCII table.

    Args:
        headers: Column headers
        rows: Data rows
        min_width: Minimum column width

    Returns:
        Formatted table string
    """
    if not rows:
        return ""

    all_data = [headers] + rows
    col_widths = []
    for col_idx in range(len(headers)):
        max_width = max(len(str(row[col_idx])) for row in all_data)
        col_widths.append(max(max_width, min_width))

    def format_row(row_data: List[Any]) -> str:
        return "   " + " | ".join(
            f"{str(item):<{col_widths[i]}}" for i, item in enumerate(row_data)
        )

    lines = [format_row(headers)]
    lines.append("   " + "-+-".join("-" * width for width in col_widths))
    for row in rows:
        lines.append(format_row(row))
    return "\n".join(lines)


def _plural(n: int, singular: str, plural: Optional[str] = None) -> str:
    if n == 1:
        return singular
    return plural or (singular + "s")


def _build_config(args: argparse.Namespace) -> GenerationConfig:
    """Start from the YAML config (if any) and apply explicit CLI overrides."""
    if args.config is not None:
        config = load_config_yaml(args.config.read_text(encoding="utf-8"))
    else:
        config = GenerationConfig()

    overrides = {
        "node_count": args.nodes,
        "probability": args.probability,
        "cost_min": args.cost_min,
        "cost_max": args.cost_max,
        "max_tries": args.max_tries,
        "seed": args.seed,
        "max_search_nodes": args.max_search_nodes,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    if args.directed:
        config.directed = True
    return config


def _print_result(result: TourResult) -> None:
    print(f"Status: {result.status.name}")
    if result.problems:
        for problem in result.problems:
            print(f"   - {problem}")
        return
    print(f"   Attempts: {result.attempts}")
    if result.graph is None:
        print("   Failed to generate a connected graph.")
        return

    kind = "directed" if result.config.directed else "undirected"
    print(
        f"   Graph: {len(result.nodes)} {_plural(len(result.nodes), 'node')}, "
        f"{len(result.graph)} {_plural(len(result.graph), 'edge')} ({kind})"
    )
    rows = [[src, dst, str(cost)] for src, dst, cost in result.graph]
    table = _format_table(["Source", "Target", "Cost"], rows)
    if table:
        print(table)

    print(f"   Valid paths: {result.valid_path_count:,}")
    if result.best is None:
        print("   No valid path.")
    else:
        print(f"   Shortest path: {' -> '.join(result.best.nodes)}")
        print(f"   Cost: {result.best.cost}")


def _load_catalog(path: Optional[Path]) -> Mapping:
    if path is None:
        return DEFAULT_CATALOG
    return NodeCatalog.from_yaml(path.read_text(encoding="utf-8"))


def _run_solve(args: argparse.Namespace) -> int:
    try:
        catalog = _load_catalog(args.catalog)
        config = _build_config(args)
    except FileNotFoundError as e:
        print(f"❌ ERROR: Input file not found: {e.filename}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load solve inputs: {e}")
        print("❌ ERROR: Failed to load solve inputs")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)

    result = solve(config, catalog)

    if args.json:
        print(json.dumps(result_to_dict(result), indent=2))
    else:
        _print_result(result)
    return 0 if result.ok else 1


def _run_catalog(args: argparse.Namespace) -> int:
    try:
        catalog = _load_catalog(args.catalog)
    except FileNotFoundError:
        print(f"❌ ERROR: Catalog file not found: {args.catalog}")
        sys.exit(1)
    except Exception as e:
        logger.error(f"Failed to load catalog: {e}")
        print("❌ ERROR: Failed to load catalog")
        print(f"  {type(e).__name__}: {e}")
        sys.exit(1)

    rows = [[name, str(info.points)] for name, info in catalog.items()]
    print(f"Catalog: {len(catalog)} {_plural(len(catalog), 'node')}")
    table = _format_table(["Node", "Points"], rows)
    if table:
        print(table)
    return 0


def main(argv: Optional[List[str]] = None) -> None:
    """Entry point for the ``travelgraph`` command.

    Args:
        argv: Optional list of command-line arguments. If ``None``, ``sys.argv``
            is used.

    Raises:
        SystemExit: With code 0 on success, and 1 when no tour was found or
            an input file could not be read.
    """
    parser = argparse.ArgumentParser(
        prog="travelgraph",
        description="Generate random connected graphs and find their shortest tour.",
    )
    parser.add_argument(
        "--verbose", "-v", action="store_true", help="Enable debug logging"
    )
    parser.add_argument(
        "--quiet", action="store_true", help="Only log warnings and errors"
    )

    subparsers = parser.add_subparsers(
        dest="command",
        required=True,
        title="Available commands",
        metavar="{solve,catalog}",
        help="Available commands",
    )

    solve_parser = subparsers.add_parser(
        "solve", help="Generate a connected graph and find its shortest path"
    )
    solve_parser.add_argument(
        "--config", "-c", type=Path, default=None, help="Path to YAML configuration"
    )
    solve_parser.add_argument("--nodes", "-n", type=int, help="Number of nodes")
    solve_parser.add_argument("--probability", "-p", type=float, help="Edge probability")
    solve_parser.add_argument("--cost-min", type=int, help="Minimum edge cost")
    solve_parser.add_argument(
        "--cost-max", type=int, help="Maximum edge cost (exclusive)"
    )
    solve_parser.add_argument("--max-tries", type=int, help="Generation attempts")
    solve_parser.add_argument(
        "--max-search-nodes", type=int, help="Largest node count to search"
    )
    solve_parser.add_argument("--seed", type=int, help="Master seed")
    solve_parser.add_argument(
        "--directed", action="store_true", help="Keep generated graphs directed"
    )
    solve_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )

    catalog_parser = subparsers.add_parser("catalog", help="List catalog nodes")

    for p in (solve_parser, catalog_parser):
        p.add_argument(
            "--catalog",
            type=Path,
            default=None,
            help="Path to a YAML node catalog (default: built-in catalog)",
        )

    effective_args = sys.argv[1:] if argv is None else argv
    if not effective_args:
        parser.print_help()
        raise SystemExit(0)

    args = parser.parse_args(effective_args)

    if args.verbose:
        enable_debug_logging()
        logger.debug("Debug logging enabled")
    elif args.quiet:
        set_global_log_level(logging.WARNING)
    else:
        disable_debug_logging()

    if args.command == "solve":
        code = _run_solve(args)
    else:
        code = _run_catalog(args)
    raise SystemExit(code)


if __name__ == "__main__":
    main()
