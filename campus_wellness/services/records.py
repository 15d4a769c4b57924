"""
Records service: the raw inputs of the scoring engine.

Check-ins, assignments and academic snapshots are written here and read
back as engine value types (`to_*` mappers). Nothing in this module scores.
"""
from __future__ import annotations

from datetime import date, datetime, timedelta, timezone
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_wellness.core.errors import AssignmentNotFoundError
from campus_wellness.engine.numeric import as_utc
from campus_wellness.engine.types import (
    AcademicSnapshot,
    AssignmentItem,
    CheckInSample,
    Priority,
)
from campus_wellness.models.academic import AcademicRecord
from campus_wellness.models.assignment import Assignment
from campus_wellness.models.checkin import DailyCheckIn
from campus_wellness.services.users import get_user

MAX_CHECKIN_WINDOW = 30


def _today() -> date:
    return datetime.now(tz=timezone.utc).date()


def _ev(v) -> str:
    return v.value if hasattr(v, "value") else str(v)


# ---------------------------------------------------------------------------
# Mappers — ORM row → engine value
# ---------------------------------------------------------------------------

def to_check_in_sample(c: DailyCheckIn) -> CheckInSample:
    return CheckInSample(
        day=c.day,
        mood=c.mood,
        sleep_hours=c.sleep_hours,
        stress_level=c.stress_level,
        energy_level=c.energy_level,
    )


def to_assignment_item(a: Assignment) -> AssignmentItem:
    return AssignmentItem(
        due_date=as_utc(a.due_date),
        priority=Priority(_ev(a.priority)),
        completed=a.completed,
    )


def to_academic_snapshot(r: AcademicRecord) -> AcademicSnapshot:
    return AcademicSnapshot(recorded_on=r.recorded_on, attendance_percent=r.attendance_percent)


# ---------------------------------------------------------------------------
# Check-ins
# ---------------------------------------------------------------------------

def _find_check_in(db: Session, user_id: int, day: date) -> Optional[DailyCheckIn]:
    return (
        db.query(DailyCheckIn)
        .filter(DailyCheckIn.user_id == user_id, DailyCheckIn.day == day)
        .first()
    )


def upsert_check_in(
    db: Session,
    user_id: int,
    mood: int,
    sleep_hours: float,
    stress_level: int,
    energy_level: int,
    notes: Optional[str] = None,
    day: Optional[date] = None,
) -> tuple[DailyCheckIn, bool]:
    """
    Create or replace the user's check-in for `day` (default today UTC).
    Returns (check_in, created).
    """
    get_user(db, user_id)
    target = day or _today()
    values = {
        "mood": mood,
        "sleep_hours": sleep_hours,
        "stress_level": stress_level,
        "energy_level": energy_level,
        "notes": notes,
    }

    existing = _find_check_in(db, user_id, target)
    if existing is None:
        check_in = DailyCheckIn(user_id=user_id, day=target, **values)
        db.add(check_in)
        try:
            db.commit()
            db.refresh(check_in)
            return check_in, True
        except IntegrityError:
            # Another request created today's check-in first; update it instead
            db.rollback()
            existing = _find_check_in(db, user_id, target)
            if existing is None:
                raise

    for field, value in values.items():
        setattr(existing, field, value)
    db.commit()
    db.refresh(existing)
    return existing, False


def list_check_ins(
    db: Session,
    user_id: int,
    limit: int = MAX_CHECKIN_WINDOW,
    since: Optional[date] = None,
) -> list[DailyCheckIn]:
    """Newest first."""
    q = db.query(DailyCheckIn).filter(DailyCheckIn.user_id == user_id)
    if since is not None:
        q = q.filter(DailyCheckIn.day >= since)
    return q.order_by(DailyCheckIn.day.desc()).limit(limit).all()


# ---------------------------------------------------------------------------
# Assignments
# ---------------------------------------------------------------------------

def create_assignment(
    db: Session,
    user_id: int,
    title: str,
    due_date: datetime,
    priority: Priority | str = Priority.MEDIUM,
    description: Optional[str] = None,
) -> Assignment:
    get_user(db, user_id)
    assignment = Assignment(
        user_id=user_id,
        title=title,
        description=description,
        due_date=as_utc(due_date),
        priority=Priority(priority),
        completed=False,
    )
    db.add(assignment)
    db.commit()
    db.refresh(assignment)
    return assignment


def list_assignments(
    db: Session,
    user_id: int,
    incomplete_only: bool = False,
) -> list[Assignment]:
    """Ordered by due date, soonest first."""
    q = db.query(Assignment).filter(Assignment.user_id == user_id)
    if incomplete_only:
        q = q.filter(Assignment.completed == False)  # noqa: E712
    return q.order_by(Assignment.due_date.asc(), Assignment.id.asc()).all()


def complete_assignment(db: Session, user_id: int, assignment_id: int) -> Assignment:
    assignment = (
        db.query(Assignment)
        .filter(Assignment.id == assignment_id, Assignment.user_id == user_id)
        .first()
    )
    if assignment is None:
        raise AssignmentNotFoundError(assignment_id)
    assignment.completed = True
    db.commit()
    db.refresh(assignment)
    return assignment


# ---------------------------------------------------------------------------
# Academic snapshots
# ---------------------------------------------------------------------------

def record_academic_snapshot(
    db: Session,
    user_id: int,
    attendance_percent: float,
    recorded_on: Optional[date] = None,
) -> AcademicRecord:
    get_user(db, user_id)
    record = AcademicRecord(
        user_id=user_id,
        recorded_on=recorded_on or _today(),
        attendance_percent=attendance_percent,
    )
    db.add(record)
    db.commit()
    db.refresh(record)
    return record


def list_academic_snapshots(
    db: Session,
    user_id: int,
    since: Optional[date] = None,
) -> list[AcademicRecord]:
    """Newest first."""
    q = db.query(AcademicRecord).filter(AcademicRecord.user_id == user_id)
    if since is not None:
        q = q.filter(AcademicRecord.recorded_on >= since)
    return q.order_by(AcademicRecord.recorded_on.desc(), AcademicRecord.id.desc()).all()


def history_start(days: int, today: Optional[date] = None) -> date:
    return (today or _today()) - timedelta(days=days)
