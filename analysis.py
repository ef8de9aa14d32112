"""
Checks and summaries for generated graphs.

Everything here operates on the uniform adjacency representation:

    adjacency: dict[vertex, iterable[vertex]]

so it accepts both the lists the generators return and set-based
bookkeeping. The functions do NOT care which generator produced the graph.
"""

from collections import deque
from typing import Dict, Hashable, Iterable, List, Mapping, Set

import networkx as nx
import numpy as np


Vertex = Hashable
AdjacencyLike = Mapping[Vertex, Iterable[Vertex]]


# ---------------------------------------------------------------------
# Basic helpers
# ---------------------------------------------------------------------

def num_nodes(adj: AdjacencyLike) -> int:
    return len(adj)


def num_edges(adj: AdjacencyLike, directed: bool = False) -> int:
    arcs = sum(len(set(neigh)) for neigh in adj.values())
    return arcs if directed else arcs // 2


def missing_vertices(adj: AdjacencyLike) -> Set[Vertex]:
    """Destinations referenced by some edge that have no entry of their own."""
    return {v for neigh in adj.values() for v in neigh if v not in adj}


def is_symmetric(adj: AdjacencyLike) -> bool:
    """True if every edge u -> v has its mirror v -> u."""
    for u, neigh in adj.items():
        for v in neigh:
            if u not in adj.get(v, ()):
                return False
    return True


# ---------------------------------------------------------------------
# Reachability (BFS-based)
# ---------------------------------------------------------------------

def reachable_from(adj: AdjacencyLike, start: Vertex) -> Set[Vertex]:
    """Vertices reachable from start through one or more edges."""
    reached: Set[Vertex] = set()
    q = deque(adj.get(start, ()))

    while q:
        u = q.popleft()
        if u in reached:
            continue
        reached.add(u)
        for v in adj.get(u, ()):
            if v not in reached:
                q.append(v)

    return reached


def reachability_closure(adj: AdjacencyLike) -> Dict[Vertex, Set[Vertex]]:
    return {u: reachable_from(adj, u) for u in adj}


def has_directed_cycle(adj: AdjacencyLike) -> bool:
    """A cycle exists iff some vertex can reach itself."""
    closure = reachability_closure(adj)
    return any(u in reached for u, reached in closure.items())


# ---------------------------------------------------------------------
# Connectivity
# ---------------------------------------------------------------------

def _undirected_view(adj: AdjacencyLike) -> Dict[Vertex, Set[Vertex]]:
    view: Dict[Vertex, Set[Vertex]] = {}
    for u, neigh in adj.items():
        view.setdefault(u, set())
        for v in neigh:
            view[u].add(v)
            view.setdefault(v, set()).add(u)
    return view


def connected_components(adj: AdjacencyLike) -> List[List[Vertex]]:
    """
    Weakly connected components (edge direction ignored).

    Returns:
        List of components, each = list of vertices.
    """
    view = _undirected_view(adj)
    visited: Set[Vertex] = set()
    components: List[List[Vertex]] = []

    for start in view.keys():
        if start in visited:
            continue

        stack = [start]
        visited.add(start)
        comp: List[Vertex] = []

        while stack:
            u = stack.pop()
            comp.append(u)
            for v in view[u]:
                if v not in visited:
                    visited.add(v)
                    stack.append(v)

        components.append(comp)

    return components


def compute_connectivity(adj: AdjacencyLike) -> Dict[str, object]:
    """
    Connected components and basic connectivity stats.

    Generated graphs are allowed to be partitioned; this only reports it.

    Returns:
        {
            "num_components": int,
            "component_sizes": List[int] (sorted desc),
            "giant_component_size": int,
            "isolated_nodes": int,
            "connected": bool,
        }
    """
    components = connected_components(adj)
    sizes = sorted((len(c) for c in components), reverse=True)
    giant = sizes[0] if sizes else 0
    isolated = sum(1 for c in components if len(c) == 1)

    return {
        "num_components": len(components),
        "component_sizes": sizes,
        "giant_component_size": giant,
        "isolated_nodes": isolated,
        "connected": len(components) == 1,
    }


# ---------------------------------------------------------------------
# Degree distribution / basic stats
# ---------------------------------------------------------------------

def compute_degree_distribution(adj: AdjacencyLike) -> Dict[str, object]:
    """Out-degree statistics (for an undirected graph, plain degree)."""
    degrees = np.array([len(set(adj[u])) for u in adj], dtype=int)
    if degrees.size == 0:
        return {
            "degree_list": [],
            "degree_histogram": {},
            "avg_degree": 0.0,
            "min_degree": 0,
            "max_degree": 0,
            "variance": 0.0,
        }

    values, counts = np.unique(degrees, return_counts=True)

    return {
        "degree_list": degrees.tolist(),
        "degree_histogram": {int(d): int(c) for d, c in zip(values, counts)},
        "avg_degree": float(degrees.mean()),
        "min_degree": int(degrees.min()),
        "max_degree": int(degrees.max()),
        "variance": float(degrees.var()),
    }


# ---------------------------------------------------------------------
# networkx interop + visualization
# ---------------------------------------------------------------------

def to_networkx(adj: AdjacencyLike, directed: bool):
    G = nx.DiGraph() if directed else nx.Graph()
    G.add_nodes_from(adj.keys())
    for u, neigh in adj.items():
        for v in neigh:
            G.add_edge(u, v)
    return G


def plot_graph(adj: AdjacencyLike, directed: bool, out_path: str, title: str = "") -> None:
    """Draw the graph with a spring layout and save it as a PNG."""
    import matplotlib.pyplot as plt

    G = to_networkx(adj, directed)
    pos = nx.spring_layout(G, seed=0)

    plt.figure(figsize=(6, 5))
    nx.draw_networkx(
        G,
        pos,
        arrows=directed,
        node_color="C0",
        font_color="white",
        node_size=400,
    )
    if title:
        plt.title(title)
    plt.axis("off")
    plt.tight_layout()
    plt.savefig(out_path, dpi=200)
    plt.close()
