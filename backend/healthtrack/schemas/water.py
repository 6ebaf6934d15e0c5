"""
Pydantic schemas for the water tracker.
"""
from pydantic import Field
from typing import List, Optional
from healthtrack.schemas.base import CamelModel
from healthtrack.schemas.tracked import TrackedRecordResponse


class WaterCreate(CamelModel):
    """Initial target and consumption; both default to zero."""
    water_target: Optional[int] = Field(default=None, ge=0)
    water_consumed: Optional[int] = Field(default=None, ge=0)


class WaterTargetUpdate(CamelModel):
    water_target: int = Field(ge=0)


class WaterConsumedUpdate(CamelModel):
    """Amount drunk since the last update, added to the stored total."""
    water_consumed: int = Field(ge=0)
    water_list_id: Optional[int] = None


class WaterRestart(CamelModel):
    water_list_id: Optional[int] = None


class WaterResponse(TrackedRecordResponse):
    water_target: int
    water_consumed: int


class WaterList(CamelModel):
    water_list: List[WaterResponse]
