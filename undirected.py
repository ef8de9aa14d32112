# undirected.py
"""
Undirected, cyclic random graph generator.

Every edge a -> b is stored together with b -> a.

Output format (uniform across all generators):
    - Returns a dict[Vertex, list[Vertex]] mapping each vertex to its neighbors.
    - Keys are the caller's vertex labels.

Known limitation: the result is not guaranteed to be connected.
"""

import logging
from typing import Optional

from rng import RandomSource, resolve_source
from vertices import Edges, Graph, Vertices, to_graph, validate_vertices


logger = logging.getLogger(__name__)


def generate_undirected_cyclic(
    vertices: Vertices,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None
) -> Graph:
    """
    Generate a random undirected graph over the given vertices.

    Each vertex, visited in random order, is joined to a random nonzero
    number of the other vertices, also taken in random order.

    Args:
        vertices: Distinct vertex labels (at least 2).
        seed: Optional random seed for reproducibility.
        rng: Optional random source; takes precedence over seed.

    Returns:
        graph: dict[vertex] -> list(neighbors), symmetric.

    Raises:
        InvalidInputError, DuplicateVertexError: vertices rejected.
    """
    validate_vertices(vertices)
    source = resolve_source(seed, rng)

    n = len(vertices)
    vs_src = [vertices[j] for j in source.permutation(n)]
    edges: Edges = {}

    for src in vs_src:
        vs_shuf = [vs_src[j] for j in source.permutation(n)]

        # How many other vertices src gets joined to. Redraw zeros rather
        # than drawing from [1, n) so the sequence of draws stays the same.
        pick = 0
        while pick == 0:
            pick = source.uniform_int(n)

        edges.setdefault(src, {})
        picked = 0
        for dst in vs_shuf:
            if dst != src:
                edges[src][dst] = True
                edges.setdefault(dst, {})[src] = True
                picked += 1
            if picked == pick:
                break

        logger.debug("joined %r to %d vertices", src, picked)

    graph = to_graph(edges)
    logger.debug(
        "generated undirected graph: %d vertices, %d edges",
        len(graph), sum(len(dsts) for dsts in graph.values()) // 2,
    )
    return graph


if __name__ == "__main__":
    G = generate_undirected_cyclic(["a", "b", "c", "d", "e", "f"], seed=42)
    num_edges = sum(len(neigh) for neigh in G.values()) // 2
    print("Generated undirected graph with", len(G), "vertices and", num_edges, "edges.")
