"""Pydantic request/response schemas for API."""

from typing import List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field

MissionStepStatus = Literal["pending", "in_progress", "done", "blocked"]


class MissionStep(BaseModel):
    """A mission step as sent by the canvas. Only id/children/dependencies affect layout."""
    model_config = ConfigDict(populate_by_name=True, extra="allow")
    id: str = Field(..., min_length=1)
    title: Optional[str] = None
    status: MissionStepStatus = "pending"
    parent_id: Optional[str] = Field(default=None, alias="parentId")
    children: List[str] = Field(default_factory=list)
    dependencies: List[str] = Field(default_factory=list)


class MissionLayoutRequest(BaseModel):
    """Request for mission canvas layout."""
    model_config = ConfigDict(populate_by_name=True)
    steps: List[MissionStep] = Field(default_factory=list)


class ConnectCheckRequest(BaseModel):
    """Request for validating a new parent -> child connection."""
    model_config = ConfigDict(populate_by_name=True)
    steps: List[MissionStep] = Field(default_factory=list)
    from_step_id: str = Field(..., alias="fromStepId")
    to_step_id: str = Field(..., alias="toStepId")
