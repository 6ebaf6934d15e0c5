"""
User identity routes.
"""
from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from healthtrack.schemas.user import UserNameResponse
from healthtrack.models.user import User
from healthtrack.core.security import Identity
from healthtrack.api.dependencies import get_db, get_current_identity

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/me/name", response_model=UserNameResponse)
async def get_user_name(
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity)
):
    """Get the display name of the current user."""
    user = db.query(User).filter(User.id == identity.user_id).first()
    if not user:
        raise HTTPException(
            status_code=status.HTTP_404_NOT_FOUND,
            detail="User not found"
        )
    return user
