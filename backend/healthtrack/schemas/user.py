"""
Pydantic schemas for User entity.
"""
from pydantic import BaseModel, Field
from typing import Optional
from healthtrack.schemas.base import CamelModel


class UserCreate(BaseModel):
    """Schema for user registration."""
    username: str = Field(min_length=1, max_length=50)
    password: str = Field(min_length=1)


class UserLogin(BaseModel):
    """Schema for user login."""
    username: str
    password: str


class AuthResult(BaseModel):
    """Outcome of register / log-in. ``jwt`` is only set on success."""
    success: bool
    jwt: Optional[str] = None
    err: Optional[str] = None


class UserNameResponse(CamelModel):
    """Display name of the caller."""
    user_name: str
