"""Models package - Import all models for SQLAlchemy registration."""
from healthtrack.models.user import User
from healthtrack.models.workout import WorkoutEntry
from healthtrack.models.calorie import CalorieEntry, CalorieTotal
from healthtrack.models.water import WaterTracker
from healthtrack.models.body_profile import BodyProfile

__all__ = [
    "User",
    "WorkoutEntry",
    "CalorieEntry",
    "CalorieTotal",
    "WaterTracker",
    "BodyProfile",
]
