"""
Layered top-to-bottom layout for mission steps.

Pipeline:
1. Graph construction (shared.graph.build_step_graph)
2. Layer assignment (Kahn's algorithm, longest path; unreached -> layer 0)
3. Ordering within layers (by earliest predecessor position)
4. Subtree widths (bottom-up along children)
5. Coordinates: row layout, parent centering, overlap repair
"""

from typing import Any, Dict, Iterable, List, Mapping

import networkx as nx
from loguru import logger

from shared.graph import as_step_list, build_step_graph, index_steps, known_children

from .constants import HORIZONTAL_GAP, NODE_HEIGHT, NODE_WIDTH, VERTICAL_GAP


def compute_mission_layout(
    steps: Iterable[Mapping[str, Any]],
    node_w: int = NODE_WIDTH,
    node_h: int = NODE_HEIGHT,
    h_gap: int = HORIZONTAL_GAP,
    v_gap: int = VERTICAL_GAP,
) -> Dict[str, Any]:
    """
    Compute a deterministic, non-overlapping layout for mission steps.

    steps: sequence of {id, children, dependencies, ...}. Unknown ids are ignored,
    cycles degrade to layer 0.
    Returns {positions: {id: {x, y}}, totalWidth, totalHeight}.
    """
    steps = as_step_list(steps)
    G = build_step_graph(steps)
    if G.number_of_nodes() == 0:
        return {"positions": {}, "totalWidth": 0, "totalHeight": 0}

    step_by_id = index_steps(steps)
    children_map = {sid: known_children(s, step_by_id) for sid, s in step_by_id.items()}

    node_layer = assign_layers(G)
    layers = order_layers(G, node_layer)
    widths = compute_subtree_widths(layers, children_map, node_w, h_gap)

    positions = place_rows(layers, widths, node_w, node_h, h_gap, v_gap)
    center_parents(layers, children_map, positions, node_w)
    resolve_overlaps(layers, positions, node_w, h_gap)

    logger.debug(
        "Mission layout: {} steps, {} edges, {} layers",
        G.number_of_nodes(), G.number_of_edges(), len(layers),
    )

    total_width = max(p["x"] + node_w for p in positions.values())
    total_height = max(p["y"] + node_h for p in positions.values())
    return {"positions": positions, "totalWidth": total_width, "totalHeight": total_height}


# ---------------------------------------------------------------------------
# 2. Layer assignment (Kahn's algorithm, longest path)
# ---------------------------------------------------------------------------

def assign_layers(G: nx.DiGraph) -> Dict[str, int]:
    """Layer = longest path from any root. Nodes only reachable through a cycle get 0."""
    in_degree = {n: G.in_degree(n) for n in G.nodes}
    node_layer: Dict[str, int] = {}

    queue: List[str] = []
    for n in G.nodes:
        if in_degree[n] == 0:
            queue.append(n)
            node_layer[n] = 0

    head = 0
    while head < len(queue):
        n = queue[head]
        head += 1
        for succ in G.successors(n):
            node_layer[succ] = max(node_layer.get(succ, 0), node_layer[n] + 1)
            in_degree[succ] -= 1
            if in_degree[succ] == 0:
                queue.append(succ)

    for n in G.nodes:
        if n not in node_layer:
            node_layer[n] = 0
    return node_layer


# ---------------------------------------------------------------------------
# 3. Ordering within layers
# ---------------------------------------------------------------------------

def order_layers(G: nx.DiGraph, node_layer: Dict[str, int]) -> List[List[str]]:
    """Group by layer (input order), then sort rows 1.. by the min index of their predecessors."""
    max_layer = max(node_layer.values()) if node_layer else 0
    layers: List[List[str]] = [[] for _ in range(max_layer + 1)]
    for n in G.nodes:
        layers[node_layer[n]].append(n)

    layer_pos: Dict[str, int] = {}
    for layer in layers:
        for i, n in enumerate(layer):
            layer_pos[n] = i

    def min_parent_idx(n: str) -> float:
        idxs = [layer_pos[p] for p in G.predecessors(n) if p in layer_pos]
        return min(idxs) if idxs else float("inf")

    for lyr in range(1, len(layers)):
        layers[lyr] = sorted(layers[lyr], key=min_parent_idx)
        for i, n in enumerate(layers[lyr]):
            layer_pos[n] = i

    return layers


# ---------------------------------------------------------------------------
# 4. Subtree widths
# ---------------------------------------------------------------------------

def compute_subtree_widths(
    layers: List[List[str]],
    children_map: Mapping[str, List[str]],
    node_w: int = NODE_WIDTH,
    h_gap: int = HORIZONTAL_GAP,
) -> Dict[str, float]:
    """Bottom-up: a parent reserves room for all its children side by side."""
    widths: Dict[str, float] = {}
    for layer in reversed(layers):
        for n in layer:
            kids = children_map.get(n) or []
            if not kids:
                widths[n] = node_w
                continue
            total = sum(widths.get(c, node_w) for c in kids) + (len(kids) - 1) * h_gap
            widths[n] = max(node_w, total)
    return widths


# ---------------------------------------------------------------------------
# 5. Coordinate assignment
# ---------------------------------------------------------------------------

def place_rows(
    layers: List[List[str]],
    widths: Mapping[str, float],
    node_w: int = NODE_WIDTH,
    node_h: int = NODE_HEIGHT,
    h_gap: int = HORIZONTAL_GAP,
    v_gap: int = VERTICAL_GAP,
) -> Dict[str, Dict[str, float]]:
    """Each layer is a row; each box sits centered in its reserved subtree slot."""
    positions: Dict[str, Dict[str, float]] = {}
    for layer_idx, layer in enumerate(layers):
        y = layer_idx * (node_h + v_gap)
        cursor = 0
        for n in layer:
            w = widths.get(n, node_w)
            positions[n] = {"x": cursor + (w - node_w) / 2, "y": y}
            cursor += w + h_gap
    return positions


def center_parents(
    layers: List[List[str]],
    children_map: Mapping[str, List[str]],
    positions: Dict[str, Dict[str, float]],
    node_w: int = NODE_WIDTH,
) -> None:
    """Center each parent over the span of its children's boxes (in-place, bottom-up)."""
    for layer_idx in range(len(layers) - 2, -1, -1):
        for n in layers[layer_idx]:
            kids = [positions[c] for c in children_map.get(n) or [] if c in positions]
            if not kids:
                continue
            min_x = min(p["x"] for p in kids)
            max_x = max(p["x"] + node_w for p in kids)
            positions[n]["x"] = min_x + (max_x - min_x - node_w) / 2


def resolve_overlaps(
    layers: List[List[str]],
    positions: Dict[str, Dict[str, float]],
    node_w: int = NODE_WIDTH,
    h_gap: int = HORIZONTAL_GAP,
) -> None:
    """Push boxes right until each row keeps node_w + h_gap between neighbours (in-place)."""
    for layer in layers:
        row = sorted((n for n in layer if n in positions), key=lambda n: positions[n]["x"])
        for prev, curr in zip(row, row[1:]):
            min_x = positions[prev]["x"] + node_w + h_gap
            if positions[curr]["x"] < min_x:
                positions[curr]["x"] = min_x
