"""
Custom exception hierarchy for the wellness API.

Rule: every HTTP error has a machine-readable `code` string so clients
can branch on it without parsing English messages.

The scoring engine never raises; these errors belong to the service and
HTTP layers only.
"""
from __future__ import annotations

import logging
from datetime import date
from typing import Any

from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette import status

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Exception classes
# ---------------------------------------------------------------------------

class WellnessException(Exception):
    """Base class for all application-level errors."""
    http_status: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    code: str = "INTERNAL_ERROR"

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_dict(self) -> dict:
        payload: dict[str, Any] = {"code": self.code, "message": self.message}
        if self.details:
            payload["details"] = self.details
        return payload


class UserNotFoundError(WellnessException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "USER_NOT_FOUND"

    def __init__(self, user_id: int):
        super().__init__(
            message=f"User {user_id} does not exist.",
            details={"user_id": user_id},
        )


class EmailAlreadyRegisteredError(WellnessException):
    http_status = status.HTTP_409_CONFLICT
    code = "EMAIL_ALREADY_REGISTERED"

    def __init__(self, email: str):
        super().__init__(
            message=f"A user with email {email} already exists.",
            details={"email": email},
        )


class AssignmentNotFoundError(WellnessException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "ASSIGNMENT_NOT_FOUND"

    def __init__(self, assignment_id: int):
        super().__init__(
            message=f"Assignment {assignment_id} not found for this user.",
            details={"assignment_id": assignment_id},
        )


class AlertNotFoundError(WellnessException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "ALERT_NOT_FOUND"

    def __init__(self, alert_id: int):
        super().__init__(
            message=f"Predictive alert {alert_id} not found for this user.",
            details={"alert_id": alert_id},
        )


class NoBurnoutDataError(WellnessException):
    http_status = status.HTTP_409_CONFLICT
    code = "NO_BURNOUT_DATA"

    def __init__(self, user_id: int):
        super().__init__(
            message="No burnout score has been calculated yet. Call GET /burnout first.",
            details={"user_id": user_id},
        )


class CounselorSessionNotFoundError(WellnessException):
    http_status = status.HTTP_404_NOT_FOUND
    code = "COUNSELOR_SESSION_NOT_FOUND"

    def __init__(self, session_id: int):
        super().__init__(
            message=f"Counselor session {session_id} not found for this user.",
            details={"session_id": session_id},
        )


class SessionDateInPastError(WellnessException):
    http_status = status.HTTP_422_UNPROCESSABLE_ENTITY
    code = "SESSION_DATE_IN_PAST"

    def __init__(self, session_date: date):
        super().__init__(
            message=f"Cannot book a counselor session on {session_date.isoformat()}, which is in the past.",
            details={"session_date": session_date.isoformat()},
        )


class SessionNotCancellableError(WellnessException):
    http_status = status.HTTP_409_CONFLICT
    code = "SESSION_NOT_CANCELLABLE"

    def __init__(self, session_id: int, current_status: str):
        super().__init__(
            message=f"Counselor session {session_id} is {current_status} and can no longer be cancelled.",
            details={"session_id": session_id, "status": current_status},
        )


# ---------------------------------------------------------------------------
# FastAPI exception handlers
# ---------------------------------------------------------------------------

async def wellness_exception_handler(request: Request, exc: WellnessException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.http_status,
        content=exc.to_dict(),
    )


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Return structured 422 with machine-readable field errors."""
    field_errors = []
    for error in exc.errors():
        field_errors.append({
            "field": ".".join(str(loc) for loc in error["loc"] if loc != "body"),
            "message": error["msg"],
            "type": error["type"],
        })
    return JSONResponse(
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        content={
            "code": "VALIDATION_ERROR",
            "message": "Request validation failed.",
            "details": {"errors": field_errors},
        },
    )


async def unhandled_exception_handler(request: Request, exc: Exception) -> JSONResponse:
    logger.exception("Unhandled error on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={
            "code": "INTERNAL_ERROR",
            "message": "An unexpected error occurred.",
        },
    )
