from .graph import Node, DirectedGraph
from .layout import ForceDirectedLayout, LayoutParameters, LayoutSimulation

__all__ = [
    "Node",
    "DirectedGraph",
    "ForceDirectedLayout",
    "LayoutParameters",
    "LayoutSimulation",
]

__version__ = "0.1.0"
