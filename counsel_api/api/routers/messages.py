"""
Message API endpoints.

Routes:
- GET /messages/{user_id} - List a user's messages (paged, optional session filter)
- POST /messages - Store a user message and the counselor reply

Dependencies: counsel_api.application.services.message_service, counsel_api.models
System role: Chat messaging HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException, Query
from pydantic import ValidationError as PydanticValidationError

from counsel_api.api.deps import get_message_service
from counsel_api.api.routers.params import paging_value, require_int_id
from counsel_api.application.services.message_service import MessageService
from counsel_api.core.exceptions import ValidationError
from counsel_api.models.common import ErrorResponse
from counsel_api.models.message import (
    MessageListResponse,
    MessageResponse,
    PostMessageRequest,
)

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/messages",
    tags=["messages"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)

DEFAULT_PAGE = 0
DEFAULT_LIMIT = 10


@router.get("/{user_id}", response_model=MessageListResponse)
async def list_messages(
    user_id: str,
    page: str | None = None,
    limit: str | None = None,
    session_id: str | None = Query(default=None, alias="sessionId"),
    message_service: MessageService = Depends(get_message_service),
) -> MessageListResponse:
    """
    List a user's messages oldest first, one page at a time.

    Args:
        user_id: User id path segment
        page: Zero-based page number (default 0)
        limit: Page size (default 10)
        session_id: Restrict to one session when given
        message_service: Injected MessageService

    Returns:
        MessageListResponse: Page of messages and the total match count

    Raises:
        ValidationError: Malformed id or paging value (400)
        HTTPException(500): Retrieval failed
    """
    parsed_user_id = require_int_id(user_id, "userId")
    parsed_session_id = require_int_id(session_id, "sessionId") if session_id else None
    page_number = paging_value(page, DEFAULT_PAGE, "page")
    page_size = paging_value(limit, DEFAULT_LIMIT, "limit")

    try:
        result = await message_service.list_messages(
            user_id=parsed_user_id,
            session_id=parsed_session_id,
            page=page_number,
            limit=page_size,
        )
    except Exception as e:
        logger.exception(f"Error fetching messages for user {parsed_user_id}")
        raise HTTPException(status_code=500, detail=str(e))

    return MessageListResponse(
        messages=[MessageResponse(**m) for m in result["messages"]],
        total=result["total"],
    )


@router.post("", response_model=list[MessageResponse])
async def post_message(
    payload: Any = Body(None),
    message_service: MessageService = Depends(get_message_service),
) -> list[MessageResponse]:
    """
    Store a user message and reply to it as the counselor.

    Args:
        payload: JSON body with text, userId, sessionId; any other shape
            is rejected the same way as missing fields
        message_service: Injected MessageService

    Returns:
        list[MessageResponse]: [user message, counselor message]

    Raises:
        ValidationError: Missing or falsy field, or body is not an object (400)
        HTTPException(500): Storage or completion failed; the user message
            may already be stored
    """
    try:
        request = PostMessageRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            "need text, userId and sessionId",
            field="body",
            details={"errors": e.error_count()},
        ) from e

    try:
        messages = await message_service.post_message(
            text=request.text,
            user_id=request.user_id,
            session_id=request.session_id,
        )
    except Exception as e:
        logger.exception("Error saving message")
        raise HTTPException(status_code=500, detail=str(e))

    return [MessageResponse(**m) for m in messages]
