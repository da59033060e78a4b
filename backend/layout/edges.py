"""Edge geometry for the mission canvas (containment + dependency edges)."""

from typing import Any, Dict, Iterable, List, Mapping

from shared.graph import as_step_list, index_steps, known_children

from .constants import NODE_HEIGHT, NODE_WIDTH


def _curve_points(sp: Mapping[str, float], dp: Mapping[str, float], node_w: int, node_h: int) -> List[List[float]]:
    """Cubic curve from bottom-center of src to top-center of dst: [start, c1, c2, end]."""
    start_x = sp["x"] + node_w / 2
    start_y = sp["y"] + node_h
    end_x = dp["x"] + node_w / 2
    end_y = dp["y"]
    mid_y = (start_y + end_y) / 2
    return [
        [round(start_x, 1), round(start_y, 1)],
        [round(start_x, 1), round(mid_y, 1)],
        [round(end_x, 1), round(mid_y, 1)],
        [round(end_x, 1), round(end_y, 1)],
    ]


def compute_mission_edges(
    steps: Iterable[Mapping[str, Any]],
    positions: Mapping[str, Mapping[str, float]],
    node_w: int = NODE_WIDTH,
    node_h: int = NODE_HEIGHT,
) -> List[Dict[str, Any]]:
    """
    Edges as drawn on the canvas, in step order.
    Containment edges carry the child's status, dependency edges the dependent's.
    Returns [{from, to, isDependency, status, points}]; edges without positions are skipped.
    """
    items = as_step_list(steps)
    step_by_id = index_steps(items)
    edges: List[Dict[str, Any]] = []

    for s in items:
        sid = s.get("id")
        if not sid or sid not in positions:
            continue
        for cid in known_children(s, step_by_id):
            if cid not in positions:
                continue
            child = step_by_id.get(cid) or {}
            edges.append({
                "from": sid,
                "to": cid,
                "isDependency": False,
                "status": child.get("status") or "pending",
                "points": _curve_points(positions[sid], positions[cid], node_w, node_h),
            })
        for dep in s.get("dependencies") or []:
            if dep not in step_by_id or dep not in positions:
                continue
            edges.append({
                "from": dep,
                "to": sid,
                "isDependency": True,
                "status": s.get("status") or "pending",
                "points": _curve_points(positions[dep], positions[sid], node_w, node_h),
            })
    return edges
