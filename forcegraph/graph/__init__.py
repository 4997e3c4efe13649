from .node import Node
from .graph import DirectedGraph

__all__ = [
    "Node",
    "DirectedGraph",
]
