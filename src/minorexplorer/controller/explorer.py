"""
Explorer Session (Controller)
=============================
This module wires the exploration tree to the layout scheduler.

Why is this file needed?
------------------------
1. Edit flow: A click on an edge of a published graph derives two children
   (edge deleted, edge contracted) from clones and publishes them one layer
   down. Published graphs are never edited in place by this flow.
2. Undo: Reverting the tree also resyncs which graphs are being laid out.
3. Layout: It owns the scheduler, so every graph in the tree keeps relaxing
   until it reaches equilibrium.

Classes:
    Explorer: The session object consumed by the UI layer.
"""
from __future__ import annotations

import logging
from typing import Callable, Optional, Sequence

from minorexplorer.config import LayoutConfig
from minorexplorer.errors import IndexOutOfRangeError
from minorexplorer.layout.engine import ForceLayoutEngine
from minorexplorer.layout.scheduler import LayoutScheduler
from minorexplorer.model.graph import GraphState
from minorexplorer.model.node import Node
from minorexplorer.model.tree import ExplorationTree
from minorexplorer.model.vector import Vector2

logger = logging.getLogger(__name__)


class Explorer:
    """
    Owns the exploration tree and keeps the layout set in sync with it.
    """

    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        self.config = config if config is not None else LayoutConfig()
        self.tree = ExplorationTree(branching=self.config.branching)
        self.engine = ForceLayoutEngine(self.config)
        self.scheduler = LayoutScheduler(self.engine)

    def seed(self, graph: GraphState) -> None:
        """Publish the root graph at layer 0, slot 0."""
        self.tree.push(0, (graph, 0))
        self._sync()
        logger.info(f"Seeded exploration with {graph!r}")

    def graph_at(self, layer: int, slot: int) -> GraphState:
        graph = self.tree.slot(layer, slot)
        if graph is None:
            raise IndexOutOfRangeError(f"Slot {slot} of layer {layer} is empty")
        return graph

    def branch(self, layer: int, slot: int, i: int, j: int) -> tuple[GraphState, GraphState]:
        """
        Derive the deletion and contraction minors of edge ``(i, j)``.

        Args:
            layer: Layer of the source graph.
            slot: Slot of the source graph.
            i: Position of the surviving endpoint.
            j: Position of the absorbed endpoint.

        Returns:
            ``(deleted, contracted)`` as published at slots ``b*slot`` and ``b*slot + 1``.

        Raises:
            IndexOutOfRangeError: If the slot is empty or the edge is invalid.
            InvalidTreeTransitionError: If the next layer cannot be created.
        """
        source = self.graph_at(layer, slot)

        deleted = source.clone()
        contracted = source.clone()
        deleted.remove_edge(i, j)
        contracted.contract_edge(i, j)

        first = slot * self.tree.branching
        self.tree.push(layer + 1, (deleted, first), (contracted, first + 1))
        self._sync()
        logger.info(
            f"Branched layer {layer} slot {slot} on edge ({i}, {j}): "
            f"deleted={deleted!r}, contracted={contracted!r}"
        )
        return deleted, contracted

    def branch_on_nodes(self, layer: int, slot: int, u: Node, v: Node) -> tuple[GraphState, GraphState]:
        """Same as ``branch`` with endpoints given by identity."""
        source = self.graph_at(layer, slot)
        return self.branch(layer, slot, source.index_of(u), source.index_of(v))

    def edit(self, layer: int, slot: int, apply: Callable[[GraphState], object]) -> GraphState:
        """
        Apply a structural edit to a clone of a published graph and republish it.

        The edit is recorded in history, so it can be undone like a branch. An
        edit that leaves the structure unchanged is not recorded and the
        published graph is returned as is.
        """
        source = self.graph_at(layer, slot)
        edited = source.clone()
        apply(edited)
        if edited.same_structure(source):
            logger.debug(f"Edit of layer {layer} slot {slot} changed nothing; history untouched")
            return source
        self.tree.push(layer, (edited, slot))
        self._sync()
        return edited

    def add_node(self, layer: int, slot: int, position: Vector2) -> GraphState:
        return self.edit(layer, slot, lambda g: g.add_node(position))

    def remove_nodes(self, layer: int, slot: int, nodes: Sequence[Node]) -> GraphState:
        return self.edit(layer, slot, lambda g: g.remove_nodes(nodes))

    def connect_nodes(self, layer: int, slot: int, nodes: Sequence[Node]) -> GraphState:
        return self.edit(layer, slot, lambda g: g.connect_all(nodes))

    def move_nodes(self, layer: int, slot: int, nodes: Sequence[Node], delta: Vector2) -> None:
        """Drag nodes in place; positions are layout state, not history."""
        graph = self.graph_at(layer, slot)
        graph.translate_nodes(nodes, delta)
        self.wake(graph)

    def undo(self) -> bool:
        reverted = self.tree.revert()
        if reverted:
            self._sync()
            logger.info(f"Undo: depth is now {self.tree.depth}")
        return reverted

    def wake(self, graph: GraphState) -> None:
        """Resume layout of a graph after an interactive edit."""
        self.scheduler.track(graph)

    def tick(self) -> int:
        return self.scheduler.tick()

    @property
    def settled(self) -> bool:
        return self.scheduler.is_idle

    def _sync(self) -> None:
        self.scheduler.sync(self.tree.graphs())
