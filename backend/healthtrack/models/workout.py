"""
Workout session model.
"""
from sqlalchemy import Column, String, Date, Integer
from sqlalchemy.orm import relationship
from healthtrack.models.tracked import TrackedRecord


class WorkoutEntry(TrackedRecord):
    """One logged workout session."""
    __tablename__ = "workout_tracker"

    tracker_date = Column(Date, nullable=False, index=True)
    tracker_workout = Column(String(100), nullable=False)
    tracker_duration = Column(Integer, nullable=False)  # Minutes

    user = relationship("User", back_populates="workouts")
