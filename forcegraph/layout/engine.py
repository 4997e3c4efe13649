import math
import random
from dataclasses import dataclass
from typing import Optional, Sequence, Tuple

from forcegraph.config.constants import (
    ATTRACTION_STRENGTH,
    BASE_IDEAL_EDGE_LENGTH,
    BASE_REPULSION_STRENGTH,
    BOUNDS_MARGIN,
    CANVAS_HEIGHT,
    CANVAS_WIDTH,
    CENTER_GRAVITY,
    DAMPING,
    DEFAULT_BOUNDS,
    EDGE_REACTION_FACTOR,
    EDGE_REPULSION_FACTOR,
    LARGE_GRAPH_SCALING,
    MAX_VELOCITY,
    MEDIUM_GRAPH_MAX_NODES,
    MEDIUM_GRAPH_SCALING,
    MIN_DISTANCE,
    PERTURBATION_RANGE,
    SMALL_GRAPH_MAX_NODES,
    SMALL_GRAPH_SCALING,
    STABILITY_THRESHOLD,
)
from forcegraph.graph.node import Node

Bounds = Tuple[float, float, float, float]

_GOLDEN_ANGLE = math.pi * (3.0 - math.sqrt(5.0))


@dataclass(frozen=True)
class LayoutParameters:
    repulsion_strength: float
    ideal_edge_length: float

    @property
    def edge_repulsion_strength(self) -> float:
        return self.repulsion_strength * EDGE_REPULSION_FACTOR


def parameters_for(node_count: int) -> LayoutParameters:
    """Spacing tier for a graph of ``node_count`` nodes."""
    if node_count <= SMALL_GRAPH_MAX_NODES:
        repulsion_scale, length_scale = SMALL_GRAPH_SCALING
    elif node_count <= MEDIUM_GRAPH_MAX_NODES:
        repulsion_scale, length_scale = MEDIUM_GRAPH_SCALING
    else:
        repulsion_scale, length_scale = LARGE_GRAPH_SCALING
    return LayoutParameters(
        repulsion_strength=BASE_REPULSION_STRENGTH * repulsion_scale,
        ideal_edge_length=BASE_IDEAL_EDGE_LENGTH * length_scale,
    )


def _coincident_direction(i: int, j: int) -> Tuple[float, float]:
    # Golden-angle seed per pair keeps the split deterministic and avoids
    # pushing several coincident pairs along the same axis.
    angle = ((i + j) * _GOLDEN_ANGLE) % (2.0 * math.pi)
    return math.cos(angle), math.sin(angle)


class ForceDirectedLayout:
    """Force-directed placement over a list of nodes.

    The engine keeps no per-node state of its own: positions and velocities
    live on the nodes, and the only mutable field here is the center that
    gravity pulls toward.
    """

    def __init__(
        self,
        center_x: float = CANVAS_WIDTH / 2,
        center_y: float = CANVAS_HEIGHT / 2,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.center_x = center_x
        self.center_y = center_y
        self._rng = rng if rng is not None else random.Random()

    def set_center(self, center_x: float, center_y: float) -> None:
        self.center_x = center_x
        self.center_y = center_y

    def tick(self, nodes: Sequence[Node], delta_time: float) -> None:
        self.calculate_forces(nodes)
        self.update_positions(nodes, delta_time)

    def calculate_forces(self, nodes: Sequence[Node]) -> None:
        if not nodes:
            return
        params = parameters_for(len(nodes))

        for node in nodes:
            node.vx = 0.0
            node.vy = 0.0

        self._apply_repulsion(nodes, params)
        for node_a in nodes:
            for node_b in node_a.neighbors:
                self._apply_edge_forces(nodes, node_a, node_b, params)
        self._apply_gravity(nodes)

    def _apply_repulsion(self, nodes: Sequence[Node], params: LayoutParameters) -> None:
        for i in range(len(nodes)):
            node1 = nodes[i]
            for j in range(i + 1, len(nodes)):
                node2 = nodes[j]
                dx = node2.x - node1.x
                dy = node2.y - node1.y
                distance = math.hypot(dx, dy)
                if distance == 0.0:
                    dx, dy = _coincident_direction(i, j)
                distance = max(distance, MIN_DISTANCE)

                force = params.repulsion_strength / (distance * distance)
                fx = dx / distance * force
                fy = dy / distance * force

                node1.vx -= fx
                node1.vy -= fy
                node2.vx += fx
                node2.vy += fy

    def _apply_edge_forces(
        self,
        nodes: Sequence[Node],
        node_a: Node,
        node_b: Node,
        params: LayoutParameters,
    ) -> None:
        dx_ab = node_b.x - node_a.x
        dy_ab = node_b.y - node_a.y
        dist_ab = math.hypot(dx_ab, dy_ab)
        # Self-loops and coincident endpoints have no axis to act along.
        if dist_ab == 0.0:
            return

        # Spring toward the ideal length, applied to both ends.
        attraction = ATTRACTION_STRENGTH * (dist_ab - params.ideal_edge_length)
        fx = dx_ab / dist_ab * attraction
        fy = dy_ab / dist_ab * attraction
        node_a.vx += fx
        node_a.vy += fy
        node_b.vx -= fx
        node_b.vy -= fy

        # Keep other nodes off the segment.
        corridor = params.ideal_edge_length / 2
        length_sq = dist_ab * dist_ab
        for node_c in nodes:
            if node_c is node_a or node_c is node_b:
                continue
            t = ((node_c.x - node_a.x) * dx_ab + (node_c.y - node_a.y) * dy_ab) / length_sq
            if t < 0.0 or t > 1.0:
                continue

            dx_pc = node_c.x - (node_a.x + t * dx_ab)
            dy_pc = node_c.y - (node_a.y + t * dy_ab)
            dist_pc = max(math.hypot(dx_pc, dy_pc), MIN_DISTANCE)
            if dist_pc >= corridor:
                continue

            force = params.edge_repulsion_strength / (dist_pc * dist_pc)
            fx_rep = dx_pc / dist_pc * force
            fy_rep = dy_pc / dist_pc * force

            node_c.vx += fx_rep
            node_c.vy += fy_rep
            node_a.vx -= fx_rep * EDGE_REACTION_FACTOR
            node_a.vy -= fy_rep * EDGE_REACTION_FACTOR
            node_b.vx -= fx_rep * EDGE_REACTION_FACTOR
            node_b.vy -= fy_rep * EDGE_REACTION_FACTOR

    def _apply_gravity(self, nodes: Sequence[Node]) -> None:
        for node in nodes:
            node.vx += (self.center_x - node.x) * CENTER_GRAVITY
            node.vy += (self.center_y - node.y) * CENTER_GRAVITY

    def update_positions(self, nodes: Sequence[Node], delta_time: float) -> None:
        """Turn accumulated forces into damped, clamped velocities and move."""
        for node in nodes:
            vx = node.vx * DAMPING
            vy = node.vy * DAMPING

            speed = math.hypot(vx, vy)
            if speed > MAX_VELOCITY:
                vx = vx / speed * MAX_VELOCITY
                vy = vy / speed * MAX_VELOCITY

            node.x += vx * delta_time
            node.y += vy * delta_time
            node.vx = vx
            node.vy = vy

    def bounds(self, nodes: Sequence[Node]) -> Bounds:
        if not nodes:
            return DEFAULT_BOUNDS
        min_x = min(node.x for node in nodes)
        min_y = min(node.y for node in nodes)
        max_x = max(node.x for node in nodes)
        max_y = max(node.y for node in nodes)
        return (
            min_x - BOUNDS_MARGIN,
            min_y - BOUNDS_MARGIN,
            max_x + BOUNDS_MARGIN,
            max_y + BOUNDS_MARGIN,
        )

    def is_stable(self, nodes: Sequence[Node]) -> bool:
        return all(node.speed() <= STABILITY_THRESHOLD for node in nodes)

    def perturb(self, nodes: Sequence[Node]) -> None:
        for node in nodes:
            node.vx += self._rng.uniform(-PERTURBATION_RANGE, PERTURBATION_RANGE)
            node.vy += self._rng.uniform(-PERTURBATION_RANGE, PERTURBATION_RANGE)


def bounds_center(bounds: Bounds) -> Tuple[float, float]:
    min_x, min_y, max_x, max_y = bounds
    return (min_x + max_x) / 2, (min_y + max_y) / 2
