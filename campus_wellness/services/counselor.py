"""
Counselor booking service.

Students book sessions for today or later; every booking starts PENDING.
Cancelling is allowed until the session is COMPLETED and is a no-op on an
already cancelled session.
"""
from __future__ import annotations

import logging
from datetime import date, datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from campus_wellness.core.errors import (
    CounselorSessionNotFoundError,
    SessionDateInPastError,
    SessionNotCancellableError,
)
from campus_wellness.models.counselor_session import CounselorSession, SessionStatus, SessionType
from campus_wellness.services.users import get_user

logger = logging.getLogger(__name__)

_OPEN = (SessionStatus.PENDING, SessionStatus.CONFIRMED)


def _today() -> date:
    return datetime.now(tz=timezone.utc).date()


def book_session(
    db: Session,
    user_id: int,
    session_date: date,
    time_slot: str,
    session_type: SessionType | str = SessionType.PERSONAL,
    anonymous: bool = False,
    notes: Optional[str] = None,
    today: Optional[date] = None,
) -> CounselorSession:
    get_user(db, user_id)
    if session_date < (today or _today()):
        raise SessionDateInPastError(session_date)

    booking = CounselorSession(
        user_id=user_id,
        session_type=SessionType(session_type),
        session_date=session_date,
        time_slot=time_slot,
        anonymous=anonymous,
        notes=notes,
        status=SessionStatus.PENDING,
    )
    db.add(booking)
    db.commit()
    db.refresh(booking)
    logger.info(
        "Booked counselor session %d for user %d (%s on %s %s)",
        booking.id, user_id, SessionType(session_type).value, session_date, time_slot,
    )
    return booking


def list_sessions(
    db: Session,
    user_id: int,
    upcoming_only: bool = False,
    today: Optional[date] = None,
) -> list[CounselorSession]:
    """Latest session date first. `upcoming_only` keeps open bookings from today on."""
    get_user(db, user_id)
    q = db.query(CounselorSession).filter(CounselorSession.user_id == user_id)
    if upcoming_only:
        q = q.filter(
            CounselorSession.session_date >= (today or _today()),
            CounselorSession.status.in_(_OPEN),
        )
    return q.order_by(CounselorSession.session_date.desc(), CounselorSession.id.desc()).all()


def cancel_session(db: Session, user_id: int, session_id: int) -> CounselorSession:
    booking = (
        db.query(CounselorSession)
        .filter(CounselorSession.id == session_id, CounselorSession.user_id == user_id)
        .first()
    )
    if booking is None:
        raise CounselorSessionNotFoundError(session_id)

    current = SessionStatus(booking.status)
    if current == SessionStatus.CANCELLED:
        return booking
    if current not in _OPEN:
        raise SessionNotCancellableError(session_id, current.value)

    booking.status = SessionStatus.CANCELLED
    db.commit()
    db.refresh(booking)
    logger.info("Cancelled counselor session %d for user %d", session_id, user_id)
    return booking
