"""
Undirected weighted graph.

Vertices are identified by a dense index (0..n-1) assigned in insertion
order. Each vertex stores a label ("key") of any type and an adjacency map
from neighbor index to edge weight. The graph carries no game semantics;
HexBoard builds the Hex topology on top of it.

Index checks are contract checks: an out-of-range index or a missing edge
raises an InvariantViolation subclass instead of returning an error value,
since vertex indices never come from user input.
"""

from typing import Dict, Generic, Iterator, List, Tuple, TypeVar

from hex_mc.config import DEFAULT_EDGE_WEIGHT
from hex_mc.error_handling import EdgeNotFoundError, VertexIndexError

K = TypeVar("K")  # vertex label type
W = TypeVar("W")  # edge weight type


class Graph(Generic[K, W]):
    """
    Graph stored as a list of vertex keys plus one adjacency dict per vertex.

    The adjacency dicts preserve insertion order, so get_neighbors() returns
    neighbors in the order their edges were added.
    """

    def __init__(self):
        self._keys: List[K] = []
        self._adjacency: List[Dict[int, W]] = []
        self._num_edges = 0

    # ------------------------------------------------------------------
    # Accessors
    # ------------------------------------------------------------------

    def get_nodes(self) -> int:
        """Number of vertices."""
        return len(self._keys)

    def get_edges(self) -> int:
        """Number of undirected edges."""
        return self._num_edges

    def __len__(self) -> int:
        return len(self._keys)

    def is_vertex(self, x: int) -> bool:
        return 0 <= x < len(self._keys)

    def _validate_vertex(self, x: int) -> None:
        if not 0 <= x < len(self._keys):
            raise VertexIndexError(f"Vertex {x} out of range [0, {len(self._keys)})")

    def _validate_vertices(self, x: int, y: int) -> None:
        self._validate_vertex(x)
        self._validate_vertex(y)

    def is_adjacent(self, x: int, y: int) -> bool:
        self._validate_vertices(x, y)
        return y in self._adjacency[x]

    def get_edge_weight(self, x: int, y: int) -> W:
        """Return the weight of edge (x, y). The edge must exist."""
        self._validate_vertices(x, y)
        try:
            return self._adjacency[x][y]
        except KeyError:
            raise EdgeNotFoundError(f"No edge between {x} and {y}") from None

    def get_vertex_key(self, x: int) -> K:
        self._validate_vertex(x)
        return self._keys[x]

    def get_neighbors(self, v: int) -> List[int]:
        """Return the indices of all neighbors of v."""
        self._validate_vertex(v)
        return list(self._adjacency[v])

    def vertex_keys(self) -> List[K]:
        """Snapshot of every vertex key, in index order."""
        return list(self._keys)

    def iter_edges(self) -> Iterator[Tuple[int, int, W]]:
        """Yield each undirected edge once as (x, y, weight) with y < x."""
        for x, neighbors in enumerate(self._adjacency):
            for y, weight in neighbors.items():
                if y < x:
                    yield x, y, weight

    # ------------------------------------------------------------------
    # Mutators
    # ------------------------------------------------------------------

    def add_vertex(self, key: K) -> int:
        """Append a vertex labelled `key` and return its index."""
        self._keys.append(key)
        self._adjacency.append({})
        return len(self._keys) - 1

    def add_edge(self, x: int, y: int, weight: W = DEFAULT_EDGE_WEIGHT) -> None:
        """
        Add an undirected edge between x and y.

        If the edge already exists only its weight is updated, so an edge is
        never duplicated.
        """
        self._validate_vertices(x, y)
        if y in self._adjacency[x]:
            self.set_edge_weight(x, y, weight)
            return
        self._adjacency[x][y] = weight
        self._adjacency[y][x] = weight
        self._num_edges += 1

    def set_edge_weight(self, x: int, y: int, weight: W) -> None:
        """Modify the weight of edge (x, y). The edge must exist."""
        self._validate_vertices(x, y)
        if y not in self._adjacency[x]:
            raise EdgeNotFoundError(f"No edge between {x} and {y}")
        self._adjacency[x][y] = weight
        self._adjacency[y][x] = weight

    def set_vertex_key(self, x: int, key: K) -> None:
        self._validate_vertex(x)
        self._keys[x] = key

    def clear(self) -> None:
        """Remove all vertices and edges."""
        self._keys = []
        self._adjacency = []
        self._num_edges = 0

    def clone(self, other: "Graph[K, W]") -> None:
        """
        Copy the vertices and edges of `other` into this graph.

        Vertices are appended after any existing ones, so clone into an empty
        graph to get an exact copy. Assumes `other` is undirected and has no
        self-loops.
        """
        offset = self.get_nodes()
        for x in range(other.get_nodes()):
            self.add_vertex(other.get_vertex_key(x))
        for x, y, weight in other.iter_edges():
            self.add_edge(x + offset, y + offset, weight)

    def __str__(self) -> str:
        return "\n".join(f"{x} {y} {weight}" for x, y, weight in self.iter_edges())

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.get_nodes()}, edges={self.get_edges()})"
