"""
User model for authentication.
"""
from sqlalchemy import Column, String
from sqlalchemy.orm import relationship
from healthtrack.db.base import BaseModel


class User(BaseModel):
    """User model with immutable username."""
    __tablename__ = "person"

    user_name = Column(String(50), unique=True, nullable=False, index=True)
    user_password = Column(String(255), nullable=False)  # bcrypt hash

    # Relationships
    workouts = relationship("WorkoutEntry", back_populates="user")
    calorie_entries = relationship("CalorieEntry", back_populates="user")
