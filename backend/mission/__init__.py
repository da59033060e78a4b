"""
Mission Module
Builds the canvas payload (layout, edges, canvas size, progress) from mission steps.
"""

from typing import Any, Dict, Iterable, Mapping, Optional

from loguru import logger

from db import LAYOUT_DEFAULTS
from layout import compute_grid_layout, compute_mission_edges, compute_mission_layout
from shared.graph import as_step_list


def _progress(steps) -> Dict[str, int]:
    return {
        "total": len(steps),
        "done": sum(1 for s in steps if s.get("status") == "done"),
        "inProgress": sum(1 for s in steps if s.get("status") == "in_progress"),
    }


def build_mission_view(
    steps: Iterable[Mapping[str, Any]],
    settings: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """
    Build the mission canvas payload.
    Returns {layout, layoutMode, edges, canvas: {width, height}, progress}.
    Missions above settings["maxLayoutSteps"] get a grid layout instead of the tree layout.
    """
    cfg = {**LAYOUT_DEFAULTS, **(settings or {})}
    items = as_step_list(steps)

    if len(items) > cfg["maxLayoutSteps"]:
        logger.warning(
            "Mission has {} steps (limit {}), using grid layout",
            len(items), cfg["maxLayoutSteps"],
        )
        layout = compute_grid_layout(items)
        mode = "grid"
    else:
        layout = compute_mission_layout(items)
        mode = "tree"

    padding = cfg["canvasPadding"]
    return {
        "layout": layout,
        "layoutMode": mode,
        "edges": compute_mission_edges(items, layout["positions"]),
        "canvas": {
            "width": max(layout["totalWidth"] + padding * 2, cfg["minCanvasWidth"]),
            "height": max(layout["totalHeight"] + padding * 2, cfg["minCanvasHeight"]),
        },
        "progress": _progress(items),
    }
