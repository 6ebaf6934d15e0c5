"""
Pydantic schemas for the calorie tracker and its running totals.
"""
from pydantic import Field
from typing import List
from decimal import Decimal
from healthtrack.schemas.base import CamelModel
from healthtrack.schemas.tracked import TrackedRecordResponse


class CalorieEntryBase(CamelModel):
    """Base calorie entry schema."""
    food_input: str = Field(min_length=1, max_length=255)
    cal_input: float = Field(ge=0)
    price_input: Decimal = Field(default=Decimal(0), ge=0)
    fat_input: float = Field(default=0, ge=0)
    carbs_input: float = Field(default=0, ge=0)
    protein_input: float = Field(default=0, ge=0)


class CalorieEntryCreate(CalorieEntryBase):
    """Schema for calorie entry creation."""
    pass


class CalorieEntryUpdate(CalorieEntryBase):
    """Schema for calorie entry update (full overwrite)."""
    pass


class CalorieEntryResponse(CalorieEntryBase, TrackedRecordResponse):
    """Schema for calorie entry response."""
    pass


class CalorieEntryList(CamelModel):
    list: List[CalorieEntryResponse]


class CalorieTotalBase(CamelModel):
    """Running totals of the calorie tracker."""
    cal_total: float = 0
    price_total: Decimal = Decimal(0)
    carbs_total: float = 0
    protein_total: float = 0
    fat_total: float = 0


class CalorieTotalUpdate(CalorieTotalBase):
    pass


class CalorieTotalResponse(CalorieTotalBase, TrackedRecordResponse):
    pass


class CalorieTotalList(CamelModel):
    total: List[CalorieTotalResponse]
