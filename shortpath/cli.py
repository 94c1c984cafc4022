"""Command-line interface for running shortest-path queries."""

from __future__ import annotations

import argparse
import json
import sys
import traceback
from dataclasses import asdict
from pathlib import Path as FilePath
from typing import Any, Dict, List, Optional

from .dijkstra import DijkstraSearch, SearchConfig
from .exceptions import ConfigError, InputError, ShortPathError
from .generator import generate_graph
from .graph import Graph
from .io import read_graph
from .logger import StdLogger

EXAMPLE_CSV = """# u,v,w
A,B,1
B,C,2
A,C,5
C,D,1
E
"""


def _build_graph_from_file(path: str, fmt: Optional[str]) -> Graph:
    """Build a :class:`Graph` from an edges file."""
    if not FilePath(path).exists():
        raise InputError(f"edges file not found: {path}")
    return read_graph(path, fmt)


def _draw(graph: Graph, result: Any, out: str) -> None:
    import matplotlib.pyplot as plt

    from .visualize import draw_graph

    ax = draw_graph(graph, result)
    ax.figure.savefig(out)
    plt.close(ax.figure)


def main(argv: Optional[List[str]] = None) -> int:
    """Entry point for the ``shortpath`` command-line tool."""
    examples = (
        "Examples:\n"
        "  shortpath --edges graph.csv --start A --dest D\n"
        "  shortpath --random --n 100 --m 300 --start v0 --dest v99\n"
        "  shortpath --example > graph.csv\n"
    )
    p = argparse.ArgumentParser(
        prog="shortpath",
        description="Shortest path between two vertices of a weighted undirected graph",
        epilog=examples,
        formatter_class=argparse.RawTextHelpFormatter,
    )
    p.add_argument("--verbose", action="store_true", help="Show full tracebacks")
    p.add_argument("--log-json", action="store_true", help="Emit structured log lines")
    p.add_argument(
        "--log-level",
        choices=["debug", "info", "warning"],
        default="warning",
        help="Log verbosity",
    )
    src = p.add_mutually_exclusive_group(required=True)
    src.add_argument("--edges", type=str, help="Path to edges file")
    src.add_argument("--random", action="store_true", help="Use a random graph")
    src.add_argument(
        "--example",
        action="store_true",
        help="Print a sample edges CSV to stdout and exit",
    )
    p.add_argument(
        "--format",
        choices=["csv", "jsonl"],
        default=None,
        help="Edge file format (auto-detected from extension)",
    )

    p.add_argument("--n", type=int, default=10, help="Vertices (random mode)")
    p.add_argument("--m", type=int, default=None, help="Edges (random mode)")
    p.add_argument("--seed", type=int, default=0, help="Seed controlling random graph generation")
    p.add_argument("--graph-type", choices=["erdos_renyi", "grid"], default="erdos_renyi")

    p.add_argument("--start", type=str, default=None, help="Start vertex label")
    p.add_argument("--dest", type=str, default=None, help="Destination vertex label")
    p.add_argument(
        "--stop-at-dest",
        action="store_true",
        help="Stop searching once the destination is finalised",
    )
    p.add_argument(
        "--check-invariants",
        action="store_true",
        help="Validate the frontier after every poll (slow)",
    )
    p.add_argument("--metrics-out", type=str, default=None, help="Write run metrics to this JSON file")
    p.add_argument("--draw", type=str, default=None, help="Save a drawing of the graph and path")

    args = p.parse_args(argv)

    if args.example:
        sys.stdout.write(EXAMPLE_CSV)
        return 0

    level = "info" if args.log_json and args.log_level == "warning" else args.log_level
    logger = StdLogger(level=level, json_fmt=args.log_json, stream=sys.stderr)

    try:
        if args.random:
            G = generate_graph(args.n, args.m, graph_type=args.graph_type, seed=args.seed)
        else:
            G = _build_graph_from_file(args.edges, args.format)

        vertices = G.vertices()
        start = args.start if args.start is not None else vertices[0]
        dest = args.dest if args.dest is not None else vertices[-1]
        if args.start is None or args.dest is None:
            logger.warning("defaulted_endpoint", start=start, dest=dest)

        cfg = SearchConfig(
            stop_at_destination=args.stop_at_dest,
            check_invariants=args.check_invariants,
        )
        if args.verbose and not args.log_json:
            sys.stderr.write(
                f"config: n={len(G)} m={G.edge_count()} start={start} dest={dest} "
                f"stop_at_dest={args.stop_at_dest} seed={args.seed}\n"
            )

        search = DijkstraSearch(G, start, dest, config=cfg, logger=logger)
        result, metrics = search.timed_run()

        out: Dict[str, Any] = {
            "start": start,
            "dest": dest,
            "reachable": result is not None,
            "total_distance": None if result is None else result.total_distance,
            "vertices": [] if result is None else result.vertices,
        }

        if args.metrics_out:
            with open(args.metrics_out, "w", encoding="utf-8") as fh:
                json.dump(asdict(metrics), fh)
        if args.draw:
            _draw(G, result, args.draw)

        print(json.dumps(out))
        return 0

    except (InputError, ConfigError) as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"error: {exc}\n")
        return 64
    except ShortPathError as exc:
        if args.verbose:
            traceback.print_exc()
        else:
            sys.stderr.write(f"internal error: {exc}\n")
        return 70


if __name__ == "__main__":
    sys.exit(main())
