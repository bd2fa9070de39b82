from __future__ import annotations

from typing import Iterable

from minorexplorer.model.graph import GraphState
from minorexplorer.model.node import Node


class Selection:
    """Ordered set of selected node ids for one graph view."""

    def __init__(self) -> None:
        self._ids: list[int] = []

    def __len__(self) -> int:
        return len(self._ids)

    def __contains__(self, node: Node) -> bool:
        return node.uid in self._ids

    @property
    def ids(self) -> tuple[int, ...]:
        return tuple(self._ids)

    def toggle(self, node: Node, clear_rest: bool = False) -> None:
        """
        Switch a node in or out of the selection.

        A node that was selected is deselected. Otherwise it is added, after
        dropping everything else when ``clear_rest`` is set.
        """
        was_selected = node.uid in self._ids
        if clear_rest:
            self._ids = []
        else:
            self._ids = [uid for uid in self._ids if uid != node.uid]
        if not was_selected:
            self._ids.append(node.uid)

    def set(self, nodes: Iterable[Node]) -> None:
        self._ids = list(dict.fromkeys(node.uid for node in nodes))

    def clear(self) -> None:
        self._ids = []

    def resolve(self, graph: GraphState) -> list[Node]:
        """Selected nodes that still exist in the graph, in selection order."""
        by_id = {node.uid: node for node in graph.nodes()}
        return [by_id[uid] for uid in self._ids if uid in by_id]
