"""
Database Module
File-based storage: db/settings.json holds canvas/layout settings.
Uses orjson for faster JSON parsing.
"""

from pathlib import Path

import aiofiles
import orjson
from loguru import logger

from layout.constants import (
    DEFAULT_CANVAS_PADDING,
    DEFAULT_MAX_LAYOUT_STEPS,
    DEFAULT_MIN_CANVAS_HEIGHT,
    DEFAULT_MIN_CANVAS_WIDTH,
)

DB_DIR = Path(__file__).parent
SETTINGS_FILE = "settings.json"

LAYOUT_DEFAULTS = {
    "maxLayoutSteps": DEFAULT_MAX_LAYOUT_STEPS,
    "canvasPadding": DEFAULT_CANVAS_PADDING,
    "minCanvasWidth": DEFAULT_MIN_CANVAS_WIDTH,
    "minCanvasHeight": DEFAULT_MIN_CANVAS_HEIGHT,
}


def _resolve_layout_settings(raw: dict) -> dict:
    """Merge settings["layout"] over defaults. Missing, negative or non-numeric values fall back."""
    layout = (raw or {}).get("layout")
    if not isinstance(layout, dict):
        layout = {}
    cfg = dict(LAYOUT_DEFAULTS)
    for key, default in LAYOUT_DEFAULTS.items():
        v = layout.get(key)
        if v is None or isinstance(v, bool):
            continue
        try:
            v = int(v)
        except (TypeError, ValueError):
            logger.warning("Ignoring invalid layout setting {}={!r}", key, layout.get(key))
            continue
        cfg[key] = v if v >= 0 else default
    return cfg


async def get_settings() -> dict:
    """Get full settings from db/settings.json. For frontend and other modules."""
    file_path = DB_DIR / SETTINGS_FILE
    try:
        async with aiofiles.open(file_path, "rb") as f:
            data = await f.read()
            settings = orjson.loads(data)
    except FileNotFoundError:
        return {}
    except orjson.JSONDecodeError as e:
        logger.warning("Invalid JSON in {}: {}", file_path, e)
        return {}
    return settings if isinstance(settings, dict) else {}


async def get_layout_settings() -> dict:
    """Get effective layout settings (defaults applied)."""
    raw = await get_settings()
    return _resolve_layout_settings(raw)


async def save_settings(settings: dict) -> dict:
    """Save settings to db/settings.json. Atomic write to avoid corruption."""
    file_path = DB_DIR / SETTINGS_FILE
    tmp_path = file_path.with_suffix(file_path.suffix + ".tmp")
    content = orjson.dumps(settings or {}, option=orjson.OPT_INDENT_2).decode("utf-8")
    async with aiofiles.open(tmp_path, "w", encoding="utf-8") as f:
        await f.write(content)
    tmp_path.replace(file_path)
    return {"success": True}
