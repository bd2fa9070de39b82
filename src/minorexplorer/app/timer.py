"""
Layout Timer
============
Fixed-interval Qt timer that drives the layout scheduler.

It runs on the GUI thread, so a tick never interleaves with an edit. The
timer stops itself once every graph is in equilibrium and is restarted
whenever the tree changes.
"""
from __future__ import annotations

import logging

from PySide6.QtCore import QObject, QTimer, Slot

from minorexplorer.app.state import ExplorerStore

logger = logging.getLogger(__name__)


class LayoutTimer(QObject):
    def __init__(self, store: ExplorerStore, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self.store = store
        self._timer = QTimer(self)
        self._timer.setInterval(store.config.interval_ms)
        self._timer.timeout.connect(self._on_timeout)
        store.tree_changed.connect(self._on_tree_changed)
        store.graph_moved.connect(self._on_tree_changed)

    @property
    def is_running(self) -> bool:
        return self._timer.isActive()

    def start(self) -> None:
        if not self._timer.isActive():
            self._timer.start()

    def stop(self) -> None:
        self._timer.stop()

    @Slot(object)
    def _on_tree_changed(self, _tree: object) -> None:
        self.start()

    @Slot()
    def _on_timeout(self) -> None:
        self.store.tick()
        if self.store.explorer.settled:
            logger.debug("All graphs settled; stopping layout timer")
            self.stop()
