"""
Pydantic schemas for third-party API credentials handed to the client.
"""
from healthtrack.schemas.base import CamelModel


class ApiCredentials(CamelModel):
    api_id: str
    api_key: str
