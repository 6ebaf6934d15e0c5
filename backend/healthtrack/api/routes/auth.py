"""
Authentication routes for registration and log-in.
"""
import logging
from fastapi import APIRouter, Depends, Request, status
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session
from healthtrack.db.session import get_db
from healthtrack.schemas.user import UserCreate, UserLogin, AuthResult
from healthtrack.models.user import User
from healthtrack.core.errors import StorageError
from healthtrack.core.security import TokenCodec, verify_password, get_password_hash

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/auth", tags=["auth"])


def _failure(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content=AuthResult(success=False, err=message).model_dump(exclude_none=True)
    )


@router.post("/register", response_model=AuthResult, response_model_exclude_none=True,
             status_code=status.HTTP_201_CREATED)
async def register(user_data: UserCreate, request: Request, db: Session = Depends(get_db)):
    """Register a new user and log them in."""
    # Check if username already exists
    existing_user = db.query(User).filter(User.user_name == user_data.username).first()
    if existing_user:
        return _failure(status.HTTP_400_BAD_REQUEST, "Username already exists")

    new_user = User(
        user_name=user_data.username,
        user_password=get_password_hash(user_data.password)
    )
    try:
        db.add(new_user)
        db.commit()
    except SQLAlchemyError as e:
        db.rollback()
        logger.error(f"Could not register user '{user_data.username}': {e}", exc_info=True)
        raise StorageError("Could not register user") from e

    codec: TokenCodec = request.app.state.token_codec
    token = codec.issue(new_user.id, {"username": new_user.user_name})
    logger.info(f"Registered user {new_user.id}")

    return AuthResult(success=True, jwt=token)


@router.post("/login", response_model=AuthResult, response_model_exclude_none=True)
async def login(credentials: UserLogin, request: Request, db: Session = Depends(get_db)):
    """Log in and get a JWT token."""
    user = db.query(User).filter(User.user_name == credentials.username).first()

    if not user:
        return _failure(status.HTTP_401_UNAUTHORIZED, "Username not found")

    if not verify_password(credentials.password, user.user_password):
        return _failure(status.HTTP_401_UNAUTHORIZED, "Password is wrong")

    codec: TokenCodec = request.app.state.token_codec
    token = codec.issue(user.id, {"username": user.user_name})

    return AuthResult(success=True, jwt=token)
