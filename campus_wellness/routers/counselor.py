"""
Counselor booking router.

POST /users/{user_id}/counselor-sessions
GET  /users/{user_id}/counselor-sessions
POST /users/{user_id}/counselor-sessions/{session_id}/cancel
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, status
from sqlalchemy.orm import Session

from campus_wellness.db.base import get_db
from campus_wellness.models.counselor_session import CounselorSession
from campus_wellness.schemas.common import error_responses
from campus_wellness.schemas.counselor import CounselorSessionRequest, CounselorSessionResponse
from campus_wellness.services.counselor import book_session, cancel_session, list_sessions
from campus_wellness.services.users import get_user

router = APIRouter(prefix="/users/{user_id}/counselor-sessions", tags=["counselor"])


def _ev(v) -> str:
    return v.value if hasattr(v, "value") else str(v)


def _session_to_response(s: CounselorSession) -> CounselorSessionResponse:
    return CounselorSessionResponse(
        id=s.id,
        session_type=_ev(s.session_type),
        session_date=str(s.session_date),
        time_slot=s.time_slot,
        anonymous=s.anonymous,
        notes=s.notes,
        status=_ev(s.status),
        created_at=s.created_at.isoformat() if s.created_at else "",
    )


@router.post(
    "",
    response_model=CounselorSessionResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Request a counselor session",
    responses=error_responses(404, 422),
)
def request_session(
    user_id: int,
    payload: CounselorSessionRequest,
    db: Session = Depends(get_db),
):
    """
    Book an ACADEMIC, PERSONAL or CAREER session for today or a later day.
    The booking starts as `PENDING`. Raises **422** `SESSION_DATE_IN_PAST`
    for an earlier date.
    """
    booking = book_session(
        db=db,
        user_id=user_id,
        session_date=payload.session_date,
        time_slot=payload.time_slot,
        session_type=payload.session_type,
        anonymous=payload.anonymous,
        notes=payload.notes,
    )
    return _session_to_response(booking)


@router.get(
    "",
    response_model=list[CounselorSessionResponse],
    summary="Counselor sessions (latest date first)",
    responses=error_responses(404),
)
def read_sessions(
    user_id: int,
    upcoming_only: bool = Query(
        default=False,
        description="Only PENDING or CONFIRMED sessions dated today or later.",
    ),
    db: Session = Depends(get_db),
):
    return [
        _session_to_response(s)
        for s in list_sessions(db, user_id, upcoming_only=upcoming_only)
    ]


@router.post(
    "/{session_id}/cancel",
    response_model=CounselorSessionResponse,
    summary="Cancel a booked session",
    responses=error_responses(404, 409),
)
def cancel(user_id: int, session_id: int, db: Session = Depends(get_db)):
    """Cancelling twice is a no-op. A COMPLETED session answers **409**."""
    get_user(db, user_id)
    return _session_to_response(cancel_session(db=db, user_id=user_id, session_id=session_id))
