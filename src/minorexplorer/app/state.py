from __future__ import annotations

import logging
from typing import Callable, Optional, TypeVar

from PySide6.QtCore import QObject, Signal

from minorexplorer.config import LayoutConfig
from minorexplorer.controller.explorer import Explorer
from minorexplorer.errors import GraphError
from minorexplorer.model.graph import GraphState
from minorexplorer.model.node import Node
from minorexplorer.model.selection import Selection
from minorexplorer.model.vector import Vector2

logger = logging.getLogger(__name__)

T = TypeVar("T")


class ExplorerStore(QObject):
    """Central state store with signals for the graph views."""
    tree_changed = Signal(object)
    layout_ticked = Signal(int)
    settled = Signal()
    edit_failed = Signal(str)
    graph_moved = Signal(object)

    def __init__(self, config: Optional[LayoutConfig] = None) -> None:
        super().__init__()
        self.explorer = Explorer(config)
        self._selections: dict[tuple[int, int], Selection] = {}

    @property
    def config(self) -> LayoutConfig:
        return self.explorer.config

    def selection(self, layer: int, slot: int) -> Selection:
        return self._selections.setdefault((layer, slot), Selection())

    def seed(self, graph: Optional[GraphState] = None) -> None:
        self.explorer.seed(graph if graph is not None else GraphState.grid())
        self.tree_changed.emit(self.explorer.tree)

    def on_edge(self, layer: int, slot: int, u: Node, v: Node) -> bool:
        """Edge click: publish the deletion and contraction children."""
        return self._run(lambda: self.explorer.branch_on_nodes(layer, slot, u, v))

    def undo(self) -> bool:
        if not self.explorer.undo():
            return False
        self.tree_changed.emit(self.explorer.tree)
        return True

    def add_node(self, layer: int, slot: int, position: Vector2) -> bool:
        return self._run(lambda: self.explorer.add_node(layer, slot, position))

    def remove_selected(self, layer: int, slot: int) -> bool:
        selection = self.selection(layer, slot)
        ok = self._run(lambda: self.explorer.remove_nodes(layer, slot, self._selected(layer, slot)))
        if ok:
            selection.clear()
        return ok

    def connect_selected(self, layer: int, slot: int) -> bool:
        selection = self.selection(layer, slot)
        ok = self._run(lambda: self.explorer.connect_nodes(layer, slot, self._selected(layer, slot)))
        if ok:
            selection.clear()
        return ok

    def move_selected(self, layer: int, slot: int, delta: Vector2) -> bool:
        try:
            graph = self.explorer.graph_at(layer, slot)
            self.explorer.move_nodes(layer, slot, self.selection(layer, slot).resolve(graph), delta)
        except GraphError as e:
            self._report(e)
            return False
        self.graph_moved.emit(graph)
        return True

    def toggle_select_all(self, layer: int, slot: int) -> bool:
        """Select every node, or clear the selection when all are already selected."""
        try:
            graph = self.explorer.graph_at(layer, slot)
        except GraphError as e:
            self._report(e)
            return False
        nodes = graph.nodes()
        selection = self.selection(layer, slot)
        if nodes and len(selection.resolve(graph)) == len(nodes):
            selection.clear()
        else:
            selection.set(nodes)
        return True

    def tick(self) -> int:
        stepped = self.explorer.tick()
        self.layout_ticked.emit(stepped)
        if self.explorer.settled:
            self.settled.emit()
        return stepped

    def _selected(self, layer: int, slot: int) -> list[Node]:
        return self.selection(layer, slot).resolve(self.explorer.graph_at(layer, slot))

    def _report(self, error: GraphError) -> None:
        logger.error(f"Edit failed: {error}")
        self.edit_failed.emit(str(error))

    def _run(self, action: Callable[[], T]) -> bool:
        before = self.explorer.tree.snapshot()
        try:
            action()
        except GraphError as e:
            self._report(e)
            return False
        if self.explorer.tree.snapshot() is not before:
            self.tree_changed.emit(self.explorer.tree)
        return True
