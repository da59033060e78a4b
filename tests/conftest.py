"""Shared fixtures: step builder and an isolated settings directory."""

import pytest

import db


def make_step(step_id, children=(), dependencies=(), **extra):
    """Minimal mission step record."""
    return {"id": step_id, "children": list(children), "dependencies": list(dependencies), **extra}


@pytest.fixture
def settings_dir(tmp_path, monkeypatch):
    """Point db/settings.json at a temp dir."""
    monkeypatch.setattr(db, "DB_DIR", tmp_path)
    return tmp_path
