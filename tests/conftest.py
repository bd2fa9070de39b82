import pytest

from minorexplorer.config import LayoutConfig
from minorexplorer.model.graph import GraphState
from minorexplorer.model.vector import Vector2


@pytest.fixture
def grid() -> GraphState:
    """Reference 3x3 seed graph with spacing 5."""
    return GraphState.grid()


@pytest.fixture
def segment() -> GraphState:
    g = GraphState.empty()
    g.add_node(Vector2(0.0, 0.0))
    g.add_node(Vector2(2.0, 0.0))
    g.add_edge(0, 1)
    return g


@pytest.fixture
def still_config() -> LayoutConfig:
    """All forces disabled; every graph settles on its first tick."""
    return LayoutConfig(repulsion_strength=0.0, attraction_strength=0.0, gravity_strength=0.0)


@pytest.fixture(scope="session")
def qapp():
    from PySide6.QtCore import QCoreApplication

    app = QCoreApplication.instance()
    if app is None:
        app = QCoreApplication([])
    yield app
