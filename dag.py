# dag.py
"""
Directed acyclic random graph generator.

Every ordered pair of vertices is offered as an edge, in random order, and
accepted only if the destination cannot already reach the source.

Output format (uniform across all generators):
    - Returns a dict[Vertex, list[Vertex]] mapping each vertex to its
      outgoing neighbors.
    - Keys are the caller's vertex labels.
"""

import logging
from collections import deque
from typing import Iterable, Mapping, Optional, Set

from rng import RandomSource, resolve_source
from vertices import Edges, Graph, Vertex, Vertices, to_graph, validate_vertices


logger = logging.getLogger(__name__)


def can_add(
    adjacency: Mapping[Vertex, Iterable[Vertex]],
    src_try: Vertex,
    dst_try: Vertex
) -> bool:
    """
    Return True if adding src_try -> dst_try keeps the graph acyclic.

    BFS from dst_try over the edges already in adjacency; reaching
    src_try means the new edge would close a cycle.
    """
    if src_try == dst_try:
        return False

    q = deque([dst_try])
    seen: Set[Vertex] = {dst_try}

    while q:
        u = q.popleft()
        if u == src_try:
            return False
        for v in adjacency.get(u, ()):
            if v not in seen:
                seen.add(v)
                q.append(v)

    return True


def generate_directed_acyclic(
    vertices: Vertices,
    seed: Optional[int] = None,
    rng: Optional[RandomSource] = None
) -> Graph:
    """
    Generate a random directed acyclic graph over the given vertices.

    Args:
        vertices: Distinct vertex labels (at least 2).
        seed: Optional random seed for reproducibility.
        rng: Optional random source; takes precedence over seed.

    Returns:
        graph: dict[vertex] -> list(successors), with no directed cycle.

    Raises:
        InvalidInputError, DuplicateVertexError: vertices rejected.
    """
    validate_vertices(vertices)
    source = resolve_source(seed, rng)

    n = len(vertices)
    vs_src = [vertices[j] for j in source.permutation(n)]
    edges: Edges = {}
    refused = 0

    for src in vs_src:
        vs_shuf = [vs_src[j] for j in source.permutation(n)]
        edges.setdefault(src, {})
        for dst in vs_shuf:
            if dst == src:
                continue
            # Checked against everything committed so far, this pass included.
            if can_add(edges, src, dst):
                edges[src][dst] = True
            else:
                refused += 1

    graph = to_graph(edges)
    logger.debug(
        "generated DAG: %d vertices, %d edges, %d refused by cycle check",
        len(graph), sum(len(dsts) for dsts in graph.values()), refused,
    )
    return graph


if __name__ == "__main__":
    G = generate_directed_acyclic(["a", "b", "c", "d", "e", "f"], seed=42)
    num_edges = sum(len(succ) for succ in G.values())
    print("Generated DAG with", len(G), "vertices and", num_edges, "edges.")
