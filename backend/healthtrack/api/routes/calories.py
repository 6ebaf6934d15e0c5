"""
Calorie tracker routes: food entries and the running totals.
"""
from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.orm import Session
from healthtrack.core.security import Identity
from healthtrack.schemas.calorie import (
    CalorieEntryCreate, CalorieEntryUpdate, CalorieEntryList,
    CalorieTotalUpdate, CalorieTotalList
)
from healthtrack.services.trackers import calorie_entries, calorie_totals
from healthtrack.api.dependencies import get_db, get_current_identity

router = APIRouter(tags=["calories"])


@router.get("/calories", response_model=CalorieEntryList)
async def list_calorie_entries(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """List the current user's food entries."""
    return {"list": calorie_entries.list_active(db, identity.user_id)}


@router.post("/calories", response_model=CalorieEntryList, status_code=status.HTTP_201_CREATED)
async def create_calorie_entry(
    entry_data: CalorieEntryCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Add a food entry."""
    return {"list": calorie_entries.insert(db, identity.user_id, entry_data.model_dump())}


@router.put("/calories/{entry_id}", response_model=CalorieEntryList)
async def update_calorie_entry(
    entry_id: int,
    entry_data: CalorieEntryUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Edit one of the current user's food entries."""
    return {"list": calorie_entries.update(db, identity.user_id, entry_id, entry_data.model_dump())}


@router.delete("/calories/{entry_id}", response_model=CalorieEntryList)
async def delete_calorie_entry(
    entry_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Soft-delete one of the current user's food entries."""
    return {"list": calorie_entries.soft_delete(db, identity.user_id, entry_id)}


@router.get("/calorie-totals", response_model=CalorieTotalList)
async def get_calorie_totals(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Get the running totals row (empty list until created)."""
    return {"total": calorie_totals.list_active(db, identity.user_id)}


@router.post("/calorie-totals", response_model=CalorieTotalList, status_code=status.HTTP_201_CREATED)
async def create_calorie_totals(
    response: Response,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Create the zeroed totals row; an existing row is left as it is (200)."""
    rows, created = calorie_totals.upsert(db, identity.user_id, {})
    if not created:
        response.status_code = status.HTTP_200_OK
    return {"total": rows}


@router.put("/calorie-totals", response_model=CalorieTotalList)
async def update_calorie_totals(
    totals_data: CalorieTotalUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Overwrite the running totals."""
    return {"total": calorie_totals.update(db, identity.user_id, None, totals_data.model_dump())}
