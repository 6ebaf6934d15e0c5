"""
Pydantic schemas for BMR/BMI calculator results.
"""
from typing import List, Optional
from healthtrack.schemas.base import CamelModel
from healthtrack.schemas.tracked import TrackedRecordResponse


class BodyProfileBase(CamelModel):
    """Values computed by the client-side BMR/BMI calculator."""
    bmi: Optional[float] = None
    bmr: Optional[float] = None
    water_intake: Optional[float] = None
    weight_gain: Optional[float] = None
    weight_loss: Optional[float] = None
    tdee: Optional[float] = None
    macro_ratio: Optional[str] = None
    protein_macro_ratio: Optional[float] = None
    fat_macro_ratio: Optional[float] = None
    carbs_macro_ratio: Optional[float] = None


class BodyProfileSave(BodyProfileBase):
    pass


class BodyProfileResponse(BodyProfileBase, TrackedRecordResponse):
    pass


class BodyProfileList(CamelModel):
    bmi_calculation: List[BodyProfileResponse]
