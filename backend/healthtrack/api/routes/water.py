"""
Water tracker routes.

The tracker is a single row per user holding the daily target and the
amount consumed so far. Consumption updates add to the stored amount.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from healthtrack.core.security import Identity
from healthtrack.schemas.water import (
    WaterCreate, WaterTargetUpdate, WaterConsumedUpdate, WaterRestart, WaterList
)
from healthtrack.services.trackers import water
from healthtrack.api.dependencies import get_db, get_current_identity

router = APIRouter(prefix="/water", tags=["water"])


@router.get("", response_model=WaterList)
async def get_water_tracker(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Get the current user's water tracker (empty list until created)."""
    return {"water_list": water.list_active(db, identity.user_id)}


@router.post("", response_model=WaterList, status_code=status.HTTP_201_CREATED)
async def create_water_tracker(
    water_data: WaterCreate,
    response: Response,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Create the water tracker; an existing tracker takes the values as an update (200)."""
    rows, created = water.upsert(db, identity.user_id, water_data.model_dump(exclude_none=True))
    if not created:
        response.status_code = status.HTTP_200_OK
    return {"water_list": rows}


@router.put("/target", response_model=WaterList)
async def update_water_target(
    target_data: WaterTargetUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Set the daily water target."""
    return {"water_list": water.update(db, identity.user_id, None, {"water_target": target_data.water_target})}


@router.put("/consumed", response_model=WaterList)
async def add_water_consumed(
    consumed_data: WaterConsumedUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Add a drink to the amount consumed."""
    return {
        "water_list": water.update(
            db, identity.user_id, consumed_data.water_list_id,
            {"water_consumed": consumed_data.water_consumed}
        )
    }


@router.put("/restart", response_model=WaterList)
async def restart_water_tracker(
    restart_data: WaterRestart,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Reset target and consumption to zero."""
    return {"water_list": water.reset(db, identity.user_id, restart_data.water_list_id)}
