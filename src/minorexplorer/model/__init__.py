"""
The MODEL layer contains the graph data structures and the edit algorithms.
It has NO knowledge of Qt or of the layout scheduling.
"""
from minorexplorer.model.vector import EPSILON, Vector2
from minorexplorer.model.node import Node
from minorexplorer.model.graph import GraphState
from minorexplorer.model.tree import ExplorationTree
from minorexplorer.model.selection import Selection

__all__ = ["EPSILON", "Vector2", "Node", "GraphState", "ExplorationTree", "Selection"]
