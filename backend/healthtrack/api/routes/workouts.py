"""
Workout tracker routes.
"""
from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session
from healthtrack.core.security import Identity
from healthtrack.schemas.workout import WorkoutCreate, WorkoutUpdate, WorkoutList
from healthtrack.services.trackers import workouts
from healthtrack.api.dependencies import get_db, get_current_identity

router = APIRouter(prefix="/workouts", tags=["workouts"])


@router.get("", response_model=WorkoutList)
async def list_workouts(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """List the current user's workouts."""
    return {"list": workouts.list_active(db, identity.user_id)}


@router.post("", response_model=WorkoutList, status_code=status.HTTP_201_CREATED)
async def create_workout(
    workout_data: WorkoutCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Log a workout session."""
    return {"list": workouts.insert(db, identity.user_id, workout_data.model_dump())}


@router.put("/{workout_id}", response_model=WorkoutList)
async def update_workout(
    workout_id: int,
    workout_data: WorkoutUpdate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Edit one of the current user's workouts."""
    return {"list": workouts.update(db, identity.user_id, workout_id, workout_data.model_dump())}


@router.delete("/{workout_id}", response_model=WorkoutList)
async def delete_workout(
    workout_id: int,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Soft-delete one of the current user's workouts."""
    return {"list": workouts.soft_delete(db, identity.user_id, workout_id)}
