"""
Vertex sets and the shared input check for every generator.

Output format (uniform across all generators):
    - Returns a dict[Vertex, list[Vertex]] mapping each vertex to its
      outgoing neighbors. Neighbor order is unspecified.
"""

from typing import Dict, Hashable, Iterable, List, Mapping, Optional, Sequence, Set


Vertex = Hashable
Vertices = Sequence[Vertex]
Graph = Dict[Vertex, List[Vertex]]

# Generator bookkeeping: insertion-ordered so a seeded run is reproducible.
Edges = Dict[Vertex, Dict[Vertex, bool]]


class ValidationError(ValueError):
    """Base class for rejected vertex sets."""


class InvalidInputError(ValidationError):
    """Vertex set is missing or has fewer than two vertices."""


class DuplicateVertexError(ValidationError):
    """Vertex set names the same vertex more than once."""

    def __init__(self, vertex: Vertex):
        super().__init__(f"repeated vertex {vertex!r}")
        self.vertex = vertex


def validate_vertices(vertices: Optional[Vertices]) -> None:
    """
    Reject vertex sets no generator can work with.

    Args:
        vertices: Candidate vertex labels.

    Raises:
        InvalidInputError: vertices is None or has fewer than 2 elements.
        DuplicateVertexError: a label appears twice (the first repeat
            in sequence order is reported).
    """
    if vertices is None or len(vertices) < 2:
        raise InvalidInputError("nil or inadequate vertices")

    seen: Set[Vertex] = set()
    for v in vertices:
        if v in seen:
            raise DuplicateVertexError(v)
        seen.add(v)


def to_graph(edges: Mapping[Vertex, Iterable[Vertex]]) -> Graph:
    """Turn generator bookkeeping into the returned Graph."""
    return {src: list(dsts) for src, dsts in edges.items()}
