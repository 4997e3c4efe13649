# Force model
BASE_REPULSION_STRENGTH = 8000.0
ATTRACTION_STRENGTH = 0.05
DAMPING = 0.85
CENTER_GRAVITY = 0.01
BASE_IDEAL_EDGE_LENGTH = 180.0
EDGE_REPULSION_FACTOR = 0.5
EDGE_REACTION_FACTOR = 0.5
MIN_DISTANCE = 1.0
MAX_VELOCITY = 50.0

# Adaptive tiers: (max node count, repulsion multiplier, edge length multiplier)
SMALL_GRAPH_MAX_NODES = 3
MEDIUM_GRAPH_MAX_NODES = 10
SMALL_GRAPH_SCALING = (1.5, 1.3)
MEDIUM_GRAPH_SCALING = (1.0, 1.0)
LARGE_GRAPH_SCALING = (0.8, 0.9)

# Convergence
STABILITY_THRESHOLD = 0.5
PERTURBATION_RANGE = 10.0

# Geometry
BOUNDS_MARGIN = 100.0
DEFAULT_BOUNDS = (0.0, 0.0, 800.0, 600.0)
CANVAS_WIDTH = 800.0
CANVAS_HEIGHT = 600.0

# New nodes spawn uniformly inside [x, x + width) x [y, y + height)
SPAWN_X = 200.0
SPAWN_Y = 150.0
SPAWN_WIDTH = 400.0
SPAWN_HEIGHT = 300.0

DEFAULT_DELTA_TIME = 1.0 / 60.0
DEFAULT_MAX_TICKS = 20000
DEBUG = False
