"""
BMR/BMI calculator routes.
"""
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from healthtrack.core.security import Identity
from healthtrack.schemas.body_profile import BodyProfileSave, BodyProfileList
from healthtrack.services.trackers import body_profile
from healthtrack.api.dependencies import get_db, get_current_identity

router = APIRouter(prefix="/bmr", tags=["bmr"])


@router.get("", response_model=BodyProfileList)
async def get_body_profile(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Get the saved calculation (empty list until the first save)."""
    return {"bmi_calculation": body_profile.list_active(db, identity.user_id)}


@router.post("", response_model=BodyProfileList)
async def save_body_profile(
    profile_data: BodyProfileSave,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Save a calculation, replacing the previous one."""
    return {"bmi_calculation": body_profile.insert(db, identity.user_id, profile_data.model_dump())}
