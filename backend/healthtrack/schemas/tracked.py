"""
Fields shared by every tracked record response.
"""
from datetime import datetime
from healthtrack.schemas.base import CamelModel


class TrackedRecordResponse(CamelModel):
    id: int
    user_id: int
    deleted_flag: bool
    created_at: datetime
    updated_at: datetime
