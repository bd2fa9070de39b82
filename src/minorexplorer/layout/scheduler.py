"""
Layout Scheduler
================
Tick source bookkeeping for the force layout.

The scheduler owns no timer. Whoever drives it (the Qt timer, the headless
demo, a test) calls ``tick`` at a fixed interval; the scheduler advances every
graph that has not yet settled and drops the ones that have.
"""
from __future__ import annotations

import logging
from typing import Iterable

from minorexplorer.layout.engine import ForceLayoutEngine
from minorexplorer.model.graph import GraphState

logger = logging.getLogger(__name__)


class LayoutScheduler:
    def __init__(self, engine: ForceLayoutEngine) -> None:
        self.engine = engine
        self._tracked: list[GraphState] = []
        self._active: set[int] = set()
        self.ticks: int = 0

    def __contains__(self, graph: GraphState) -> bool:
        return any(g is graph for g in self._tracked)

    @property
    def active(self) -> list[GraphState]:
        return [g for g in self._tracked if id(g) in self._active]

    @property
    def is_idle(self) -> bool:
        return not self._active

    def track(self, graph: GraphState) -> None:
        """Start (or restart) laying out a graph."""
        if graph not in self:
            self._tracked.append(graph)
        self._active.add(id(graph))

    def untrack(self, graph: GraphState) -> None:
        self._tracked = [g for g in self._tracked if g is not graph]
        self._active.discard(id(graph))

    def sync(self, graphs: Iterable[GraphState]) -> None:
        """Make the tracked set equal to ``graphs``; new graphs start active."""
        graphs = list(graphs)
        for graph in list(self._tracked):
            if not any(graph is g for g in graphs):
                self.untrack(graph)
        for graph in graphs:
            if graph not in self:
                self.track(graph)

    def tick(self) -> int:
        """
        Step every active graph once.

        Returns:
            Number of graphs that were stepped.
        """
        stepped = self.active
        for graph in stepped:
            if self.engine.step(graph):
                self._active.discard(id(graph))
                logger.debug("Graph %r settled after %d ticks", graph, self.ticks + 1)
        self.ticks += 1
        return len(stepped)

    def run(self, max_ticks: int) -> bool:
        """Tick until idle or ``max_ticks`` is reached. Returns True when idle."""
        for _ in range(max_ticks):
            if self.is_idle:
                break
            self.tick()
        if not self.is_idle:
            logger.info(f"Layout still moving after {max_ticks} ticks ({len(self._active)} graph(s) active)")
        return self.is_idle
