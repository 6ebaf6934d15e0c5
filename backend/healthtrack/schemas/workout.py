"""
Pydantic schemas for workout entries.
"""
from pydantic import Field
from typing import List
from datetime import date
from healthtrack.schemas.base import CamelModel
from healthtrack.schemas.tracked import TrackedRecordResponse


class WorkoutBase(CamelModel):
    """Base workout schema."""
    tracker_date: date = Field(alias="date")
    tracker_workout: str = Field(alias="workout", min_length=1, max_length=100)
    tracker_duration: int = Field(alias="duration", ge=0)  # Minutes


class WorkoutCreate(WorkoutBase):
    """Schema for workout creation."""
    pass


class WorkoutUpdate(WorkoutBase):
    """Schema for workout update (full overwrite)."""
    pass


class WorkoutResponse(WorkoutBase, TrackedRecordResponse):
    """Schema for workout response."""
    pass


class WorkoutList(CamelModel):
    list: List[WorkoutResponse]
