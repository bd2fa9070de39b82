"""
Graph State (Data Model)
========================
This module defines the mutable graph that every slot of the exploration tree
holds.

Why is this file needed?
------------------------
1. Structure: It stores the nodes and a symmetric boolean adjacency matrix
   (numpy) addressed by dense positional indices.
2. Identity: Nodes live in an arena keyed by their id. The positional index is
   rebuilt after every structural edit, so callers must re-resolve positions
   through ``index_of`` instead of caching them.
3. Minors: It implements edge deletion and edge contraction, the two edits
   that derive child graphs.

Classes:
    GraphState: The graph container.
"""
from __future__ import annotations

import itertools
import logging
from typing import Iterable, Iterator, Optional, Sequence, TYPE_CHECKING

import numpy as np

from minorexplorer.errors import IndexOutOfRangeError, NodeNotFoundError
from minorexplorer.model.node import Node
from minorexplorer.model.vector import Vector2

if TYPE_CHECKING:
    import numpy.typing as npt

logger = logging.getLogger(__name__)

# Reference 3x3 seed layout
GRID_SIZE: int = 3
GRID_SPACING: float = 5.0


def is_index(value: object) -> bool:
    """True for ints (numpy ints included); bool is an int subclass but never a position."""
    return isinstance(value, (int, np.integer)) and not isinstance(value, bool)


def reference_grid_edges(n: int) -> list[tuple[int, int]]:
    """Edges of the reference seed graph for an n x n grid."""
    return [(0, 1), (0, n), (0, n + 1), (n + 1, 2), (n + 1, 2 * n + 1)]


class GraphState:
    """
    Ordered nodes plus a symmetric adjacency matrix with a false diagonal.
    """

    def __init__(self) -> None:
        self._arena: dict[int, Node] = {}
        self._order: list[int] = []
        self._index: dict[int, int] = {}
        self._adjacency: npt.NDArray[np.bool_] = np.zeros((0, 0), dtype=bool)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(nodes={self.size()}, edges={self.edge_count()})"

    def __len__(self) -> int:
        return len(self._order)

    # ------------------------------------------------------------------
    # Construction
    # ------------------------------------------------------------------
    @classmethod
    def empty(cls) -> GraphState:
        return cls()

    @classmethod
    def grid(
        cls,
        n: int = GRID_SIZE,
        spacing: float = GRID_SPACING,
        edges: Optional[Sequence[tuple[int, int]]] = None,
    ) -> GraphState:
        """
        Build the reference seed graph.

        Args:
            n: Number of nodes per row and column.
            spacing: Distance between neighbouring grid points.
            edges: Index pairs to connect. Defaults to the reference edge set.

        Returns:
            A graph with ``n * n`` nodes at ``(i * spacing, j * spacing)``.
        """
        graph = cls()
        for i in range(n):
            for j in range(n):
                graph.add_node(Vector2(i * spacing, j * spacing))
        for a, b in edges if edges is not None else reference_grid_edges(n):
            graph.add_edge(a, b)
        return graph

    def clone(self) -> GraphState:
        """Deep copy that keeps node ids; the copy shares no mutable state."""
        other = GraphState()
        other._arena = {uid: node.copy() for uid, node in self._arena.items()}
        other._order = list(self._order)
        other._index = dict(self._index)
        other._adjacency = self._adjacency.copy()
        return other

    # ------------------------------------------------------------------
    # Read accessors
    # ------------------------------------------------------------------
    def size(self) -> int:
        return len(self._order)

    def nodes(self) -> tuple[Node, ...]:
        return tuple(self._arena[uid] for uid in self._order)

    def node(self, i: int) -> Node:
        self._check_index(i)
        return self._arena[self._order[i]]

    def edges(self) -> Iterator[tuple[Node, Node]]:
        """Yield each unordered adjacent pair once, lower position first."""
        rows, cols = np.nonzero(np.triu(self._adjacency, k=1))
        for i, j in zip(rows.tolist(), cols.tolist()):
            yield self._arena[self._order[i]], self._arena[self._order[j]]

    def edge_count(self) -> int:
        return int(np.count_nonzero(self._adjacency)) // 2

    def are_neighbours(self, i: int, j: int) -> bool:
        return bool(self._adjacency[i, j])

    def neighbours(self, i: int) -> list[int]:
        self._check_index(i)
        return np.flatnonzero(self._adjacency[i]).tolist()

    def degree(self, i: int) -> int:
        return len(self.neighbours(i))

    def adjacency(self) -> npt.NDArray[np.bool_]:
        """Read-only copy of the adjacency matrix."""
        matrix = self._adjacency.copy()
        matrix.flags.writeable = False
        return matrix

    def index_of(self, node: Node) -> int:
        """
        Positional index of a node, looked up by identity.

        Raises:
            NodeNotFoundError: If no node with that id is in this graph.
        """
        try:
            return self._index[node.uid]
        except KeyError:
            raise NodeNotFoundError(f"Couldn't find a node with id {node.uid} in the graph") from None

    def same_structure(self, other: GraphState) -> bool:
        """Same node ids in the same order and the same adjacency; positions are ignored."""
        return self._order == other._order and np.array_equal(self._adjacency, other._adjacency)

    def contains(self, node: Node) -> bool:
        return node.uid in self._arena

    def in_equilibrium(self) -> bool:
        return all(node.is_in_equilibrium() for node in self._arena.values())

    def log_adjacency(self) -> None:
        """Write the 0/1 adjacency table to the debug log."""
        if not logger.isEnabledFor(logging.DEBUG):
            return
        header = " ".join(str(self._arena[uid].uid) for uid in self._order)
        rows = "\n".join(
            f"{self._arena[uid].uid}: " + " ".join(str(v) for v in row)
            for uid, row in zip(self._order, self._adjacency.astype(np.int8).tolist())
        )
        logger.debug("Adjacency (%d nodes)\n   %s\n%s", self.size(), header, rows)

    # ------------------------------------------------------------------
    # Structural edits
    # ------------------------------------------------------------------
    def add_node(self, position: Vector2) -> Node:
        """Append a fresh node at the next index and grow the matrix by one."""
        node = Node(position)
        n = self.size()
        grown = np.zeros((n + 1, n + 1), dtype=bool)
        grown[:n, :n] = self._adjacency
        self._adjacency = grown
        self._arena[node.uid] = node
        self._order.append(node.uid)
        self._index[node.uid] = n
        return node

    def remove_node(self, node: Node) -> None:
        """Remove a node by identity; unknown nodes are ignored."""
        i = self._index.get(node.uid)
        if i is None:
            return
        self._adjacency = np.delete(np.delete(self._adjacency, i, axis=0), i, axis=1)
        del self._order[i]
        del self._arena[node.uid]
        self._reindex()

    def remove_nodes(self, nodes: Iterable[Node]) -> None:
        for node in list(nodes):
            self.remove_node(node)

    def add_edge(self, i: int, j: int) -> None:
        self._check_edge(i, j)
        if i == j:
            raise IndexOutOfRangeError(f"Self-loop ({i}, {j}) is not allowed")
        self._set_edge(i, j, True)

    def remove_edge(self, i: int, j: int) -> None:
        self._check_edge(i, j)
        self._set_edge(i, j, False)

    def connect_all(self, nodes: Sequence[Node]) -> None:
        """Add an edge between every pair of the given nodes."""
        indices = [self.index_of(node) for node in nodes]
        for a, b in itertools.combinations(indices, 2):
            if a != b:
                self._set_edge(a, b, True)

    def translate_nodes(self, nodes: Iterable[Node], delta: Vector2) -> None:
        residents = [self.node(self.index_of(node)) for node in nodes]
        for resident in residents:
            resident.position = resident.position + delta

    def contract_edge(self, i: int, j: int) -> Node:
        """
        Merge node ``j`` into node ``i``.

        Node ``i`` inherits every remaining neighbour of ``j``, moves to the
        midpoint of both positions, and ``j`` is removed (compacting higher
        indices).

        Args:
            i: Position of the surviving node.
            j: Position of the absorbed node.

        Returns:
            The surviving node.

        Raises:
            IndexOutOfRangeError: If either index is invalid or ``i == j``.
        """
        self._check_edge(i, j)
        if i == j:
            raise IndexOutOfRangeError(f"Cannot contract ({i}, {j}) onto itself")

        u = self.node(i)
        v = self.node(j)

        self._set_edge(i, j, False)

        for k in np.flatnonzero(self._adjacency[j]).tolist():
            self._set_edge(i, k, True)

        u.position = (u.position + v.position) * 0.5

        self.remove_node(v)
        return u

    # ------------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------------
    def _set_edge(self, i: int, j: int, value: bool) -> None:
        self._adjacency[i, j] = value
        self._adjacency[j, i] = value

    def _reindex(self) -> None:
        self._index = {uid: k for k, uid in enumerate(self._order)}

    def _check_index(self, i: object) -> None:
        if not is_index(i) or not 0 <= i < self.size():
            raise IndexOutOfRangeError(f"Invalid index {i!r}, size={self.size()}")

    def _check_edge(self, i: object, j: object) -> None:
        for k in (i, j):
            if not is_index(k) or not 0 <= k < self.size():
                raise IndexOutOfRangeError(f"Invalid edge ({i!r}, {j!r}), size={self.size()}")
