"""
Columns shared by every per-user tracked record.
"""
from sqlalchemy import Column, Boolean, ForeignKey, Integer
from sqlalchemy.orm import declared_attr
from healthtrack.db.base import BaseModel


class TrackedRecord(BaseModel):
    """Abstract record owned by one user and hidden by ``deleted_flag``."""
    __abstract__ = True

    @declared_attr
    def user_id(cls):
        return Column(Integer, ForeignKey("person.id"), nullable=False, index=True)

    deleted_flag = Column(Boolean, default=False, server_default="0", nullable=False)
