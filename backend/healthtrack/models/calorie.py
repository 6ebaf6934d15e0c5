"""
Calorie tracker models: food entries and the per-user running totals.
"""
from sqlalchemy import Column, String, Numeric, Float, UniqueConstraint
from sqlalchemy.orm import relationship
from healthtrack.models.tracked import TrackedRecord


class CalorieEntry(TrackedRecord):
    """A single food entry with its calories, price and macros."""
    __tablename__ = "cal_tracker"

    food_input = Column(String(255), nullable=False)
    cal_input = Column(Float, nullable=False)
    price_input = Column(Numeric(10, 2), nullable=False, default=0)
    fat_input = Column(Float, nullable=False, default=0)
    carbs_input = Column(Float, nullable=False, default=0)
    protein_input = Column(Float, nullable=False, default=0)

    user = relationship("User", back_populates="calorie_entries")


class CalorieTotal(TrackedRecord):
    """Running totals of the calorie tracker, one row per user."""
    __tablename__ = "total_from_cal_tracker"

    cal_total = Column(Float, nullable=False, default=0)
    price_total = Column(Numeric(10, 2), nullable=False, default=0)
    carbs_total = Column(Float, nullable=False, default=0)
    protein_total = Column(Float, nullable=False, default=0)
    fat_total = Column(Float, nullable=False, default=0)

    __table_args__ = (
        UniqueConstraint('user_id', name='uq_user_calorie_total'),
    )
