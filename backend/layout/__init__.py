"""Layout module - computes canvas layouts for mission steps."""

from .constants import HORIZONTAL_GAP, NODE_HEIGHT, NODE_WIDTH, VERTICAL_GAP
from .edges import compute_mission_edges
from .grid_layout import compute_grid_layout
from .mission_layout import compute_mission_layout

__all__ = [
    "HORIZONTAL_GAP",
    "NODE_HEIGHT",
    "NODE_WIDTH",
    "VERTICAL_GAP",
    "compute_grid_layout",
    "compute_mission_edges",
    "compute_mission_layout",
]
