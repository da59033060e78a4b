"""
Grid layout: fixed slots, row-major, no graph analysis.
Used for missions too large to lay out as a tree.
"""

import math
from typing import Any, Dict, Iterable, Mapping

from shared.graph import as_step_list

from .constants import HORIZONTAL_GAP, NODE_HEIGHT, NODE_WIDTH, VERTICAL_GAP


def compute_grid_layout(
    steps: Iterable[Mapping[str, Any]],
    node_w: int = NODE_WIDTH,
    node_h: int = NODE_HEIGHT,
    h_gap: int = HORIZONTAL_GAP,
    v_gap: int = VERTICAL_GAP,
) -> Dict[str, Any]:
    """Place steps in a near-square grid. Same result shape as compute_mission_layout."""
    ids = []
    for s in as_step_list(steps):
        sid = s.get("id")
        if sid and sid not in ids:
            ids.append(sid)
    if not ids:
        return {"positions": {}, "totalWidth": 0, "totalHeight": 0}

    cols = math.ceil(math.sqrt(len(ids)))
    positions = {}
    for idx, sid in enumerate(ids):
        row, col = divmod(idx, cols)
        positions[sid] = {"x": col * (node_w + h_gap), "y": row * (node_h + v_gap)}

    total_width = max(p["x"] + node_w for p in positions.values())
    total_height = max(p["y"] + node_h for p in positions.values())
    return {"positions": positions, "totalWidth": total_width, "totalHeight": total_height}
