from .engine import (
    Bounds,
    ForceDirectedLayout,
    LayoutParameters,
    bounds_center,
    parameters_for,
)
from .simulation import LayoutSimulation

__all__ = [
    "Bounds",
    "ForceDirectedLayout",
    "LayoutParameters",
    "bounds_center",
    "parameters_for",
    "LayoutSimulation",
]
