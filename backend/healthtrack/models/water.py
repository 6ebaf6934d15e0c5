"""
Water intake tracker model.
"""
from sqlalchemy import Column, Integer, UniqueConstraint
from healthtrack.models.tracked import TrackedRecord


class WaterTracker(TrackedRecord):
    """Daily water target and amount consumed so far, one row per user."""
    __tablename__ = "water_tracker"

    water_target = Column(Integer, nullable=False, default=0)
    water_consumed = Column(Integer, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint('user_id', name='uq_user_water_tracker'),
    )
