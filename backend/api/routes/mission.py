"""Mission API - canvas layout and connection checks."""

from fastapi import APIRouter
from fastapi.responses import JSONResponse
from loguru import logger

from db import get_layout_settings
from mission import build_mission_view
from shared.graph import check_connection

from ..schemas import ConnectCheckRequest, MissionLayoutRequest

router = APIRouter()


def _step_dicts(steps):
    return [s.model_dump() for s in steps]


@router.post("/layout")
async def mission_layout(body: MissionLayoutRequest):
    try:
        settings = await get_layout_settings()
        return build_mission_view(_step_dicts(body.steps), settings)
    except Exception as e:
        logger.exception("Error computing mission layout")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to compute layout"})


@router.post("/connect/check")
async def mission_connect_check(body: ConnectCheckRequest):
    """Check whether toStepId may become a child of fromStepId."""
    try:
        reason = check_connection(_step_dicts(body.steps), body.from_step_id, body.to_step_id)
        return {"allowed": reason is None, "reason": reason}
    except Exception as e:
        logger.exception("Error checking mission connection")
        return JSONResponse(status_code=500, content={"error": str(e) or "Failed to check connection"})
