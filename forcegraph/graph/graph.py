import logging
import random
from typing import Any, Iterator, List, Optional, Tuple

import networkx as nx

from forcegraph.config.constants import SPAWN_X, SPAWN_Y, SPAWN_WIDTH, SPAWN_HEIGHT
from forcegraph.graph.node import Node


class DirectedGraph:
    """Ordered collection of nodes keyed by value.

    Edges are not stored separately: an edge ``a -> b`` exists when ``b``'s
    node is in ``a``'s neighbor list. Failed mutations return ``None`` or
    ``False`` rather than raising.
    """

    def __init__(self, rng: Optional[random.Random] = None) -> None:
        self._nodes: List[Node] = []
        self._rng = rng if rng is not None else random.Random()

    def insert(self, value: Any) -> Optional[Node]:
        if self.find(value) is not None:
            logging.debug("Duplicate node value %r rejected", value)
            return None
        node = Node(
            value,
            x=SPAWN_X + self._rng.random() * SPAWN_WIDTH,
            y=SPAWN_Y + self._rng.random() * SPAWN_HEIGHT,
        )
        self._nodes.append(node)
        return node

    def remove(self, value: Any) -> bool:
        node = self.find(value)
        if node is None:
            return False
        for other in self._nodes:
            other.remove_neighbor(node)
        self._nodes = [n for n in self._nodes if n is not node]
        return True

    def add_edge(self, source: Any, target: Any) -> bool:
        source_node = self.find(source)
        target_node = self.find(target)
        if source_node is None or target_node is None:
            return False
        source_node.add_neighbor(target_node)
        return True

    def remove_edge(self, source: Any, target: Any) -> bool:
        source_node = self.find(source)
        target_node = self.find(target)
        if source_node is None or target_node is None:
            return False
        return source_node.remove_neighbor(target_node)

    def find(self, value: Any) -> Optional[Node]:
        for node in self._nodes:
            if node.value == value:
                return node
        return None

    def nodes(self) -> List[Node]:
        # A copy, so callers cannot add or drop nodes behind the graph's back.
        return list(self._nodes)

    def incoming(self, value: Any) -> List[Node]:
        """Nodes holding an edge into ``value``; empty if ``value`` is absent."""
        node = self.find(value)
        if node is None:
            return []
        return [other for other in self._nodes if other.has_neighbor(node)]

    def edges(self) -> List[Tuple[Any, Any]]:
        return [
            (node.value, neighbor.value)
            for node in self._nodes
            for neighbor in node.neighbors
        ]

    def edge_count(self) -> int:
        return sum(len(node.neighbors) for node in self._nodes)

    def clear(self) -> None:
        self._nodes.clear()

    def size(self) -> int:
        return len(self._nodes)

    def is_empty(self) -> bool:
        return not self._nodes

    def to_networkx(self) -> nx.DiGraph:
        """Export keyed by insertion index; ``value`` and ``pos`` are node attributes."""
        index = {id(node): i for i, node in enumerate(self._nodes)}
        G = nx.DiGraph()
        for i, node in enumerate(self._nodes):
            G.add_node(i, value=node.value, pos=node.position)
        G.add_edges_from(
            (index[id(node)], index[id(neighbor)])
            for node in self._nodes
            for neighbor in node.neighbors
        )
        return G

    def __len__(self) -> int:
        return len(self._nodes)

    def __contains__(self, value: Any) -> bool:
        return self.find(value) is not None

    def __iter__(self) -> Iterator[Node]:
        return iter(list(self._nodes))

    def __str__(self) -> str:
        return "nodes: {}\n\nedges: {}".format(
            ", ".join(str(node.value) for node in self._nodes),
            ", ".join(f"{u} -> {v}" for u, v in self.edges()),
        )

    def __repr__(self) -> str:
        return self.__str__()
