"""Shared utilities for layout and api."""

from .graph import build_step_graph, check_connection, index_steps, known_children

__all__ = ["build_step_graph", "check_connection", "index_steps", "known_children"]
