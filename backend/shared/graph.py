"""
Graph utilities for mission steps (children hierarchy + dependencies).
Shared by layout (engine) and api (connection checks).
"""

from typing import Any, Dict, Iterable, List, Mapping, Optional

import networkx as nx


def as_step_list(steps: Any) -> List[Mapping[str, Any]]:
    """Materialize steps once. None / non-mapping records are caller errors."""
    if steps is None or isinstance(steps, (str, bytes, Mapping)):
        raise TypeError("steps must be a collection of step mappings")
    items = list(steps)
    for s in items:
        if not isinstance(s, Mapping):
            raise TypeError(f"step records must be mappings, got {type(s).__name__}")
    return items


def index_steps(steps: Iterable[Mapping[str, Any]]) -> Dict[str, Mapping[str, Any]]:
    """id -> step. Later duplicates overwrite earlier ones."""
    return {s["id"]: s for s in steps if s.get("id")}


def known_children(step: Mapping[str, Any], step_by_id: Mapping[str, Any]) -> List[str]:
    """Children present in step_by_id, in declared order, without repeats."""
    out: List[str] = []
    for cid in step.get("children") or []:
        if cid in step_by_id and cid not in out:
            out.append(cid)
    return out


def subtree_leaves(children_map: Mapping[str, List[str]], step_id: str) -> List[str]:
    """
    Leaf descendants of step_id via children (pre-order, visited-guarded).
    A step whose children are all visited already counts as a leaf itself.
    """
    leaves: List[str] = []
    visited = set()
    stack = [step_id]
    while stack:
        sid = stack.pop()
        if sid in visited:
            continue
        visited.add(sid)
        kids = [c for c in children_map.get(sid, []) if c not in visited]
        if not kids:
            leaves.append(sid)
            continue
        stack.extend(reversed(kids))
    return leaves


def build_step_graph(steps: Iterable[Mapping[str, Any]]) -> nx.DiGraph:
    """
    Build the layering graph from mission steps.

    Nodes are known step ids in input order. Edges:
      - parent -> child for every known child (containment);
      - dep -> step for a dependency without children;
      - leaf -> step for every leaf under a dependency that has children, so the
        dependent lands below the whole subtree, not just below its root.
    Unknown ids and self edges are skipped.
    """
    items = as_step_list(steps)
    step_by_id = index_steps(items)
    children_map = {sid: known_children(s, step_by_id) for sid, s in step_by_id.items()}

    G = nx.DiGraph()
    for s in items:
        if s.get("id"):
            G.add_node(s["id"])

    for s in items:
        sid = s.get("id")
        if not sid:
            continue
        for cid in children_map.get(sid, []):
            if cid != sid:
                G.add_edge(sid, cid)
        for dep in s.get("dependencies") or []:
            if dep not in step_by_id:
                continue
            sources = subtree_leaves(children_map, dep) if children_map.get(dep) else [dep]
            for src in sources:
                if src != sid:
                    G.add_edge(src, sid)
    return G


def get_parent_ids(steps: Iterable[Mapping[str, Any]], step_id: str) -> List[str]:
    """All steps that list step_id among their children."""
    return [s["id"] for s in steps if s.get("id") and step_id in (s.get("children") or [])]


def is_ancestor(steps: Iterable[Mapping[str, Any]], step_id: str, target_id: str) -> bool:
    """True if target_id is reachable walking up the containment parents of step_id."""
    items = as_step_list(steps)
    visited = set()
    frontier = [step_id]
    while frontier:
        curr = frontier.pop()
        if curr in visited:
            continue
        visited.add(curr)
        for parent in get_parent_ids(items, curr):
            if parent == target_id:
                return True
            frontier.append(parent)
    return False


def check_connection(steps: Iterable[Mapping[str, Any]], from_id: str, to_id: str) -> Optional[str]:
    """
    Validate adding to_id as a child of from_id.
    Returns None if allowed, otherwise a short reason.
    """
    items = as_step_list(steps)
    if from_id == to_id:
        return "Cannot connect a step to itself"
    step_by_id = index_steps(items)
    from_step = step_by_id.get(from_id)
    if from_step is None or to_id not in step_by_id:
        return "Unknown step"
    if to_id in (from_step.get("children") or []):
        return "Steps are already connected"
    if is_ancestor(items, from_id, to_id):
        return "Connection would create a cycle"
    return None
