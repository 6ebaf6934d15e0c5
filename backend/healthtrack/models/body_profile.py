"""
BMR/BMI calculator results model.
"""
from sqlalchemy import Column, Float, String, UniqueConstraint
from healthtrack.models.tracked import TrackedRecord


class BodyProfile(TrackedRecord):
    """Latest BMR/BMI calculation and macro split for a user."""
    __tablename__ = "bmr_bmi_calculator"

    bmi = Column(Float, nullable=True)
    bmr = Column(Float, nullable=True)
    water_intake = Column(Float, nullable=True)
    weight_gain = Column(Float, nullable=True)  # Daily calories to gain weight
    weight_loss = Column(Float, nullable=True)  # Daily calories to lose weight
    tdee = Column(Float, nullable=True)
    macro_ratio = Column(String(50), nullable=True)
    protein_macro_ratio = Column(Float, nullable=True)
    fat_macro_ratio = Column(Float, nullable=True)
    carbs_macro_ratio = Column(Float, nullable=True)

    __table_args__ = (
        UniqueConstraint('user_id', name='uq_user_body_profile'),
    )
