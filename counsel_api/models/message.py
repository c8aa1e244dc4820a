"""
Message domain models and schemas.

Request/response schemas for message operations.

Dependencies: pydantic
System role: Message API contracts
"""

from datetime import datetime
from typing import Any

from pydantic import Field, field_validator

from counsel_api.boundary.db.models.message_model import Sender
from counsel_api.core.ids import parse_int_id
from counsel_api.models.common import CamelModel


class PostMessageRequest(CamelModel):
    """
    Request schema for posting a user message.

    Every field is required and must be truthy: empty text and zero ids
    are rejected along with missing ones.
    """

    text: str = Field(min_length=1, description="User message text")
    user_id: int = Field(description="Author user id")
    session_id: int = Field(description="Target session id")

    @field_validator("user_id", "session_id", mode="before")
    @classmethod
    def _parse_nonzero_id(cls, value: Any) -> int:
        parsed = parse_int_id(value)
        if not parsed:
            raise ValueError("id must be a non-zero integer")
        return parsed


class MessageResponse(CamelModel):
    """Single stored message."""

    id: int
    text: str
    sender: Sender
    user_id: int
    session_id: int
    created_at: datetime


class MessageListResponse(CamelModel):
    """One page of messages plus the total number of matches."""

    messages: list[MessageResponse]
    total: int = Field(description="Total number of matching messages")
