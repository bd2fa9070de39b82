"""
Exploration Tree
================
Generation-indexed tree of graph states with a linear undo history.

Layer ``L`` holds ``b ** L`` slots. A child of slot ``s`` lives at slot
``b * s + k`` of the next layer, so ancestry is pure index arithmetic and no
parent pointers are stored.

Every history entry is an immutable tuple of layer tuples. Pushing copies
only the layers it touches; reverting is a pointer swap.
"""
from __future__ import annotations

import logging
from typing import Iterator, Optional

from minorexplorer.errors import IndexOutOfRangeError, InvalidTreeTransitionError
from minorexplorer.model.graph import GraphState, is_index

logger = logging.getLogger(__name__)

Layer = tuple[Optional[GraphState], ...]
Snapshot = tuple[Layer, ...]


class ExplorationTree:
    """
    Complete b-ary tree of graph slots plus the history of published trees.
    """

    def __init__(self, branching: int = 2) -> None:
        """
        Initialize an empty tree with a single empty root slot.

        Args:
            branching: Number of children per slot.
        """
        if branching < 1:
            raise ValueError(f"Branching factor must be positive, got {branching}")
        self.branching = branching
        root: Snapshot = ((None,),)
        self._history: list[Snapshot] = [root]

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(depth={self.depth}, history={self.history_size})"

    @property
    def depth(self) -> int:
        """Index of the deepest allocated layer."""
        return len(self.snapshot()) - 1

    @property
    def history_size(self) -> int:
        return len(self._history)

    def snapshot(self) -> Snapshot:
        return self._history[-1]

    def layers(self) -> Snapshot:
        return self.snapshot()

    def layer(self, layer: int) -> Layer:
        self._check_layer(layer)
        return self.snapshot()[layer]

    def slot(self, layer: int, index: int) -> Optional[GraphState]:
        self._check_slot(layer, index)
        return self.snapshot()[layer][index]

    def occupied(self, layer: int) -> Iterator[tuple[int, GraphState]]:
        """Yield ``(index, graph)`` for every filled slot of a layer."""
        for index, graph in enumerate(self.layer(layer)):
            if graph is not None:
                yield index, graph

    def graphs(self) -> list[GraphState]:
        """Every graph resident in the current tree, root first."""
        return [graph for layer in self.snapshot() for graph in layer if graph is not None]

    def parent_of(self, layer: int, index: int) -> Optional[tuple[int, int]]:
        self._check_slot(layer, index)
        if layer == 0:
            return None
        return layer - 1, index // self.branching

    def children_of(self, layer: int, index: int) -> list[tuple[int, int]]:
        self._check_slot(layer, index)
        first = index * self.branching
        return [(layer + 1, first + k) for k in range(self.branching)]

    def ancestors(self, layer: int, index: int) -> list[tuple[int, int]]:
        """Slots from the parent up to the root."""
        chain = []
        parent = self.parent_of(layer, index)
        while parent is not None:
            chain.append(parent)
            parent = self.parent_of(*parent)
        return chain

    def push(self, layer: int, *items: tuple[GraphState, int]) -> None:
        """
        Publish graphs into slots of a layer and record the new tree.

        Args:
            layer: Target layer. May be at most one past the current depth.
            items: ``(graph, slot_index)`` pairs.

        Raises:
            InvalidTreeTransitionError: If the layer is negative or skips a generation.
            IndexOutOfRangeError: If a slot index is outside the layer.
        """
        current = self.snapshot()
        depth = len(current) - 1
        if layer < 0 or layer > depth + 1:
            raise InvalidTreeTransitionError(
                f"Cannot push to layer {layer}; current depth is {depth}"
            )

        width = self.branching ** layer
        for _, index in items:
            if not is_index(index) or not 0 <= index < width:
                raise IndexOutOfRangeError(f"Invalid slot {index!r} for layer {layer} of width {width}")

        layers = list(current)
        if layer == depth + 1:
            layers.append((None,) * width)

        slots = list(layers[layer])
        for graph, index in items:
            slots[index] = graph
        layers[layer] = tuple(slots)

        self._history.append(tuple(layers))
        logger.debug("Pushed %d graph(s) to layer %d (depth=%d)", len(items), layer, self.depth)

    def revert(self) -> bool:
        """Restore the previous tree. Returns False when there is nothing to undo."""
        if len(self._history) == 1:
            return False
        self._history.pop()
        logger.debug("Reverted to depth %d (history=%d)", self.depth, self.history_size)
        return True

    def _check_layer(self, layer: int) -> None:
        if not 0 <= layer <= self.depth:
            raise IndexOutOfRangeError(f"Invalid layer {layer}, depth={self.depth}")

    def _check_slot(self, layer: int, index: int) -> None:
        self._check_layer(layer)
        width = len(self.snapshot()[layer])
        if not 0 <= index < width:
            raise IndexOutOfRangeError(f"Invalid slot {index} for layer {layer} of width {width}")
