# ===============================================================
# Random graph generation over labeled vertices
# Supports undirected-cyclic / directed-acyclic
# ===============================================================

import argparse
import logging
import sys
from typing import Callable, Dict, List, Optional

from analysis import (
    compute_connectivity,
    compute_degree_distribution,
    has_directed_cycle,
    num_edges,
    num_nodes,
    plot_graph,
)
from dag import can_add, generate_directed_acyclic
from rng import RandomSource, get_default_source, reseed
from undirected import generate_undirected_cyclic
from vertices import (
    DuplicateVertexError,
    Graph,
    InvalidInputError,
    ValidationError,
    Vertex,
    Vertices,
    validate_vertices,
)

__all__ = [
    "Vertex",
    "Vertices",
    "Graph",
    "ValidationError",
    "InvalidInputError",
    "DuplicateVertexError",
    "validate_vertices",
    "RandomSource",
    "get_default_source",
    "reseed",
    "can_add",
    "generate_undirected_cyclic",
    "generate_directed_acyclic",
    "GENERATORS",
    "main",
]


GENERATORS: Dict[str, Callable[..., Graph]] = {
    "undirected": generate_undirected_cyclic,
    "dag": generate_directed_acyclic,
}


# ===============================================================
# Report
# ===============================================================

def print_report(graph: Graph, directed: bool) -> None:
    print("=== BASIC INFO ===")
    print("Vertices:", num_nodes(graph))
    print("Edges:", num_edges(graph, directed=directed))
    if directed:
        print("Acyclic:", not has_directed_cycle(graph))

    print("\n=== ADJACENCY ===")
    for src, dsts in graph.items():
        arrow = "->" if directed else "--"
        print(f"  {src} {arrow} {', '.join(str(d) for d in dsts) or '(none)'}")

    connectivity = compute_connectivity(graph)
    print("\n=== CONNECTIVITY ===")
    print(connectivity)
    if not connectivity["connected"]:
        print("Note: graph is partitioned (generation does not guarantee connectivity).")

    degree_stats = compute_degree_distribution(graph)
    print("\n=== DEGREE DISTRIBUTION ===")
    print("Average degree:", degree_stats["avg_degree"])
    print("Min degree:", degree_stats["min_degree"])
    print("Max degree:", degree_stats["max_degree"])
    print("Histogram:", degree_stats["degree_histogram"])


# ===============================================================
# CLI entry point
# ===============================================================

def non_negative_int(text: str) -> int:
    value = int(text)
    if value < 0:
        raise argparse.ArgumentTypeError(f"seed must be non-negative, got {value}")
    return value


def main(argv: Optional[List[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Random graph generator over labeled vertices")

    parser.add_argument(
        "--model",
        type=str,
        required=True,
        choices=sorted(GENERATORS),
        help="Graph flavor to generate",
    )
    parser.add_argument(
        "--vertices",
        nargs="+",
        required=True,
        help="Distinct vertex labels (at least 2)",
    )
    parser.add_argument("--seed", type=non_negative_int, default=None, help="Random seed (>= 0)")
    parser.add_argument("--out-plot", type=str, help="Path to PNG drawing of the graph")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.seed is None:
        reseed()

    generate = GENERATORS[args.model]
    try:
        graph = generate(args.vertices, seed=args.seed)
    except ValidationError as e:
        print(f"error: {e}", file=sys.stderr)
        return 1

    directed = args.model == "dag"
    print_report(graph, directed)

    if args.out_plot:
        plot_graph(graph, directed, args.out_plot, title=f"{args.model} graph")
        print(f"\nSaved graph plot to {args.out_plot}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
