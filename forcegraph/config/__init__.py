from .constants import (
    BASE_REPULSION_STRENGTH,
    ATTRACTION_STRENGTH,
    DAMPING,
    CENTER_GRAVITY,
    BASE_IDEAL_EDGE_LENGTH,
    EDGE_REPULSION_FACTOR,
    EDGE_REACTION_FACTOR,
    MIN_DISTANCE,
    MAX_VELOCITY,
    STABILITY_THRESHOLD,
    PERTURBATION_RANGE,
    BOUNDS_MARGIN,
    DEFAULT_BOUNDS,
    CANVAS_WIDTH,
    CANVAS_HEIGHT,
    DEFAULT_DELTA_TIME,
    DEFAULT_MAX_TICKS,
    DEBUG,
)

from .paths import (
    OUTPUT_DIR,
    GRAPHS_OUTPUT_DIR,
)

__all__ = [
    # Force model
    "BASE_REPULSION_STRENGTH",
    "ATTRACTION_STRENGTH",
    "DAMPING",
    "CENTER_GRAVITY",
    "BASE_IDEAL_EDGE_LENGTH",
    "EDGE_REPULSION_FACTOR",
    "EDGE_REACTION_FACTOR",
    "MIN_DISTANCE",
    "MAX_VELOCITY",
    # Convergence
    "STABILITY_THRESHOLD",
    "PERTURBATION_RANGE",
    # Geometry
    "BOUNDS_MARGIN",
    "DEFAULT_BOUNDS",
    "CANVAS_WIDTH",
    "CANVAS_HEIGHT",
    # Driver defaults
    "DEFAULT_DELTA_TIME",
    "DEFAULT_MAX_TICKS",
    "DEBUG",
    # Paths
    "OUTPUT_DIR",
    "GRAPHS_OUTPUT_DIR",
]
