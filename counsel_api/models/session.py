"""
Session domain models and schemas.

Request/response schemas for session operations.

Dependencies: pydantic
System role: Session API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from counsel_api.core.ids import parse_int_id
from counsel_api.models.common import CamelModel


class CreateSessionRequest(CamelModel):
    """Request schema for creating a new session."""

    user_id: int = Field(description="Owning user id")
    title: str = Field(min_length=1, description="Session title")

    @field_validator("user_id", mode="before")
    @classmethod
    def _parse_user_id(cls, value: Any) -> int:
        parsed = parse_int_id(value)
        if parsed is None:
            raise ValueError("userId must be an integer")
        return parsed


class SessionResponse(CamelModel):
    """Response schema for session operations."""

    id: int
    user_id: int
    title: str
    created_at: datetime
