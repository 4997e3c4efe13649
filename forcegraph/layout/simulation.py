import logging
import random
import threading
from typing import Any, Optional

from forcegraph.config.constants import DEFAULT_DELTA_TIME, DEFAULT_MAX_TICKS
from forcegraph.graph.graph import DirectedGraph
from forcegraph.graph.node import Node
from forcegraph.layout.engine import Bounds, ForceDirectedLayout, bounds_center


class LayoutSimulation:
    """Drives a ForceDirectedLayout over a DirectedGraph.

    The layout is either active (forces are computed and integrated on every
    step) or converged (nodes hold still). Any successful mutation made
    through this object re-activates it. Mutations and steps share one lock,
    so a step never observes a half-applied mutation.

    Velocities stored on the nodes right after an activation are left over
    from before the mutation (new nodes carry zero), so the stability check
    is skipped until at least one integration has run.
    """

    def __init__(
        self,
        graph: Optional[DirectedGraph] = None,
        layout: Optional[ForceDirectedLayout] = None,
        seed: Optional[int] = None,
    ) -> None:
        rng = random.Random(seed)
        self.graph = graph if graph is not None else DirectedGraph(rng)
        self.layout = layout if layout is not None else ForceDirectedLayout(rng=rng)
        self.active: bool = True
        self.ticks: int = 0
        self._fresh: bool = True
        self._last_timestamp: Optional[float] = None
        self._lock = threading.RLock()

    # --- State machine -------------------------------------------------------

    def activate(self) -> None:
        with self._lock:
            self.active = True
            self._fresh = True

    def step(self, delta_time: float) -> bool:
        """Run one tick; returns whether the layout is still active."""
        with self._lock:
            nodes = self.graph.nodes()
            if not nodes:
                return self.active

            self.layout.set_center(*bounds_center(self.layout.bounds(nodes)))

            if self.active and not self._fresh and self.layout.is_stable(nodes):
                self.active = False
                logging.debug("Layout converged after %d ticks", self.ticks)

            if self.active:
                self.layout.tick(nodes, delta_time)
                self._fresh = False
                self.ticks += 1
            return self.active

    def advance(self, timestamp: float) -> bool:
        """Step using a monotonic ``timestamp`` in seconds.

        The first call has no previous timestamp to measure against, so it
        only records it.
        """
        with self._lock:
            if self._last_timestamp is None:
                self._last_timestamp = timestamp
                return self.active
            delta_time = timestamp - self._last_timestamp
            self._last_timestamp = timestamp
            return self.step(delta_time)

    def run_until_stable(
        self,
        delta_time: float = DEFAULT_DELTA_TIME,
        max_ticks: int = DEFAULT_MAX_TICKS,
    ) -> int:
        if self.graph.is_empty():
            return 0
        ticks = 0
        while ticks < max_ticks and self.step(delta_time):
            ticks += 1
        if self.active:
            logging.warning("Layout still moving after %d ticks", ticks)
        return ticks

    def perturb(self) -> None:
        with self._lock:
            self.layout.perturb(self.graph.nodes())
            self.active = True

    def bounds(self) -> Bounds:
        with self._lock:
            return self.layout.bounds(self.graph.nodes())

    def is_stable(self) -> bool:
        with self._lock:
            return self.layout.is_stable(self.graph.nodes())

    # --- Mutation API --------------------------------------------------------

    def insert(self, value: Any) -> Optional[Node]:
        with self._lock:
            node = self.graph.insert(value)
            if node is None:
                logging.info("Node %s already exists; values must be unique", value)
                return None
            self.activate()
            logging.info("Added node %s. Total nodes: %d", value, self.graph.size())
            return node

    def remove(self, value: Any) -> bool:
        with self._lock:
            node = self.graph.find(value)
            if node is None:
                logging.info("Node %s not found", value)
                return False
            edge_total = len(node.neighbors) + len(self.graph.incoming(value))
            if node.has_neighbor(node):
                edge_total -= 1
            self.graph.remove(value)
            self.activate()
            logging.info(
                "Removed node %s and %d edge(s). Remaining nodes: %d",
                value,
                edge_total,
                self.graph.size(),
            )
            return True

    def add_edge(self, source: Any, target: Any) -> bool:
        with self._lock:
            if source == target:
                logging.debug("Adding self-loop on node %s", source)
            if not self.graph.add_edge(source, target):
                logging.info(
                    "Cannot add edge %s -> %s: both nodes must exist", source, target
                )
                return False
            self.activate()
            logging.info("Added edge %s -> %s", source, target)
            return True

    def remove_edge(self, source: Any, target: Any) -> bool:
        with self._lock:
            if not self.graph.remove_edge(source, target):
                logging.info("No edge %s -> %s in the graph", source, target)
                return False
            self.activate()
            logging.info("Removed edge %s -> %s", source, target)
            return True

    def clear(self) -> int:
        with self._lock:
            removed = self.graph.size()
            self.graph.clear()
            self.active = False
            logging.info("Cleared %d node(s) and all their edges", removed)
            return removed
