import sys
import time
import argparse
from typing import List, Optional, Tuple

from forcegraph.config import DEBUG, DEFAULT_DELTA_TIME, DEFAULT_MAX_TICKS
from forcegraph.config.logging import setup_logging
from forcegraph.layout.simulation import LayoutSimulation


# ==========================================
# CLI ARGUMENTS
# ==========================================


def parse_edge(text: str) -> Tuple[int, int]:
    parts = text.split(",")
    if len(parts) != 2:
        raise argparse.ArgumentTypeError(
            f"invalid edge {text!r}: use the format source,target (e.g. 1,2)"
        )
    try:
        return int(parts[0].strip()), int(parts[1].strip())
    except ValueError:
        raise argparse.ArgumentTypeError(
            f"invalid edge {text!r}: source and target must be integers"
        )


def parse_args(argv: List[str]) -> argparse.Namespace:
    p = argparse.ArgumentParser(
        description="Lay out a directed graph with a force-directed simulation."
    )

    p.add_argument(
        "--node",
        dest="nodes",
        type=int,
        action="append",
        default=[],
        help="Integer node value to insert (repeatable).",
    )

    p.add_argument(
        "--edge",
        dest="edges",
        type=parse_edge,
        action="append",
        default=[],
        help="Directed edge as source,target (repeatable).",
    )

    p.add_argument(
        "--remove-edge",
        dest="removed_edges",
        type=parse_edge,
        action="append",
        default=[],
        help="Edge to remove after building the graph (repeatable).",
    )

    p.add_argument(
        "--remove-node",
        dest="removed_nodes",
        type=int,
        action="append",
        default=[],
        help="Node to remove after building the graph (repeatable).",
    )

    p.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Seed for initial placement and perturbation.",
    )

    p.add_argument(
        "--dt",
        type=float,
        default=DEFAULT_DELTA_TIME,
        help="Seconds of simulated time per tick.",
    )

    p.add_argument(
        "--max-ticks",
        type=int,
        default=DEFAULT_MAX_TICKS,
        help="Stop after this many ticks even if the layout is still moving.",
    )

    p.add_argument(
        "--output",
        default=None,
        help="Write a PNG of the final layout to this path.",
    )

    p.add_argument(
        "--debug",
        action="store_true",
        default=DEBUG,
        help="Enable debug logging.",
    )

    args = p.parse_args(argv)
    if args.dt <= 0:
        p.error("--dt must be positive")
    if args.max_ticks < 0:
        p.error("--max-ticks must not be negative")
    return args


# ==========================================
# MAIN
# ==========================================


def build_simulation(args: argparse.Namespace) -> LayoutSimulation:
    sim = LayoutSimulation(seed=args.seed)
    for value in args.nodes:
        sim.insert(value)
    for source, target in args.edges:
        sim.add_edge(source, target)
    for source, target in args.removed_edges:
        sim.remove_edge(source, target)
    for value in args.removed_nodes:
        sim.remove(value)
    return sim


def main(argv: Optional[List[str]] = None) -> int:
    args = parse_args(sys.argv[1:] if argv is None else argv)
    setup_logging(args.debug)

    sim = build_simulation(args)
    if sim.graph.is_empty():
        print("Graph is empty; nothing to lay out.")
        return 0

    start = time.time()
    ticks = sim.run_until_stable(args.dt, args.max_ticks)
    elapsed = time.time() - start

    state = "moving" if sim.active else "converged"
    print(f"Layout {state} after {ticks} ticks ({elapsed:.2f} seconds)")
    for node in sim.graph.nodes():
        neighbors = ", ".join(str(n.value) for n in node.neighbors)
        print(f"  {node.value}: ({node.x:.1f}, {node.y:.1f}) -> [{neighbors}]")
    bounds = sim.bounds()
    print("Bounds: ({:.1f}, {:.1f}, {:.1f}, {:.1f})".format(*bounds))

    if args.output:
        from forcegraph.viz.graph_plots import plot_layout

        path = plot_layout(
            sim.graph,
            bounds,
            output_path=args.output,
            title=f"{sim.graph.size()} nodes, {sim.graph.edge_count()} edges",
        )
        print(f"Saved plot to {path}")
    return 0


if __name__ == "__main__":
    sys.exit(main(sys.argv[1:]))
