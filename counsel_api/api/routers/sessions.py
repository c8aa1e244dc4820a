"""
Session API endpoints.

Routes:
- POST /sessions - Create new session
- GET /sessions/{user_id} - List a user's sessions

Dependencies: counsel_api.application.services.session_service, counsel_api.models
System role: Session management HTTP API
"""

import logging
from typing import Any

from fastapi import APIRouter, Body, Depends, HTTPException
from pydantic import ValidationError as PydanticValidationError

from counsel_api.api.deps import get_session_service
from counsel_api.api.routers.params import require_int_id
from counsel_api.application.services.session_service import SessionService
from counsel_api.core.exceptions import ValidationError
from counsel_api.models.common import ErrorResponse
from counsel_api.models.session import CreateSessionRequest, SessionResponse

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/sessions",
    tags=["sessions"],
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)


@router.post("", response_model=SessionResponse)
async def create_session(
    payload: Any = Body(None),
    session_service: SessionService = Depends(get_session_service),
) -> SessionResponse:
    """
    Create new session for a user.

    Args:
        payload: JSON body with userId and title
        session_service: Injected SessionService

    Returns:
        SessionResponse: Created session

    Raises:
        ValidationError: Invalid request (400)
        HTTPException(500): Creation failed
    """
    try:
        request = CreateSessionRequest.model_validate(payload)
    except PydanticValidationError as e:
        raise ValidationError(
            "need userId and title",
            field="body",
            details={"errors": e.error_count()},
        ) from e

    try:
        session_data = await session_service.create_session(
            user_id=request.user_id,
            title=request.title,
        )
    except Exception as e:
        logger.exception("Error creating session")
        raise HTTPException(status_code=500, detail=str(e))

    return SessionResponse(**session_data)


@router.get("/{user_id}", response_model=list[SessionResponse])
async def list_sessions(
    user_id: str,
    session_service: SessionService = Depends(get_session_service),
) -> list[SessionResponse]:
    """
    List all sessions of a user, oldest first.

    Args:
        user_id: User id path segment
        session_service: Injected SessionService

    Returns:
        list[SessionResponse]: Sessions of the user

    Raises:
        ValidationError: Malformed user id (400)
        HTTPException(500): Retrieval failed
    """
    parsed_user_id = require_int_id(user_id, "userId")

    try:
        sessions = await session_service.get_user_sessions(parsed_user_id)
    except Exception as e:
        logger.exception(f"Error fetching sessions for user {parsed_user_id}")
        raise HTTPException(status_code=500, detail=str(e))

    return [SessionResponse(**s) for s in sessions]
