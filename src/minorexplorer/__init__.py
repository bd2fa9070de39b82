"""Interactive explorer for edge deletion / contraction minors of a graph."""
from minorexplorer.model import EPSILON, ExplorationTree, GraphState, Node, Selection, Vector2
from minorexplorer.layout.engine import ForceLayoutEngine
from minorexplorer.layout.scheduler import LayoutScheduler
from minorexplorer.controller.explorer import Explorer
from minorexplorer.config import LayoutConfig
from minorexplorer.errors import GraphError, IndexOutOfRangeError, InvalidTreeTransitionError, NodeNotFoundError

__version__ = "0.1.0"

__all__ = [
    "EPSILON",
    "Vector2",
    "Node",
    "GraphState",
    "ExplorationTree",
    "Selection",
    "ForceLayoutEngine",
    "LayoutScheduler",
    "Explorer",
    "LayoutConfig",
    "GraphError",
    "IndexOutOfRangeError",
    "InvalidTreeTransitionError",
    "NodeNotFoundError",
]
