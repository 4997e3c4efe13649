from __future__ import annotations

import math
from typing import Any, List, Tuple


class Node:
    """A point mass in the layout with a value, a position and outgoing edges.

    ``vx``/``vy`` double as the force accumulator while forces are being
    computed and hold the damped velocity once positions are updated.
    """

    def __init__(self, value: Any, x: float = 0.0, y: float = 0.0) -> None:
        self.value: Any = value
        self.x: float = x
        self.y: float = y
        self.vx: float = 0.0
        self.vy: float = 0.0
        self.neighbors: List[Node] = []

    @property
    def position(self) -> Tuple[float, float]:
        return self.x, self.y

    def speed(self) -> float:
        return math.hypot(self.vx, self.vy)

    def has_neighbor(self, node: Node) -> bool:
        # Membership is by identity: two graphs may hold nodes with equal values.
        return any(neighbor is node for neighbor in self.neighbors)

    def add_neighbor(self, node: Node) -> None:
        if not self.has_neighbor(node):
            self.neighbors.append(node)

    def remove_neighbor(self, node: Node) -> bool:
        for i, neighbor in enumerate(self.neighbors):
            if neighbor is node:
                del self.neighbors[i]
                return True
        return False

    def __str__(self) -> str:
        return f"{self.value} ({self.x:.1f}, {self.y:.1f})"

    def __repr__(self) -> str:
        return f"Node({self.value!r})"
