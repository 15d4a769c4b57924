"""
Records router — the raw inputs to burnout scoring.

POST /users/{user_id}/check-ins
GET  /users/{user_id}/check-ins
POST /users/{user_id}/assignments
GET  /users/{user_id}/assignments
POST /users/{user_id}/assignments/{assignment_id}/complete
POST /users/{user_id}/academic-snapshots
GET  /users/{user_id}/academic-snapshots
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query, Response, status
from sqlalchemy.orm import Session

from campus_wellness.db.base import get_db
from campus_wellness.engine.numeric import as_utc
from campus_wellness.models.academic import AcademicRecord
from campus_wellness.models.assignment import Assignment
from campus_wellness.models.checkin import DailyCheckIn
from campus_wellness.schemas.academic import (
    AcademicSnapshotRequest,
    AcademicSnapshotResponse,
    AssignmentCreateRequest,
    AssignmentResponse,
)
from campus_wellness.schemas.checkin import CheckInRequest, CheckInResponse
from campus_wellness.schemas.common import error_responses
from campus_wellness.services.records import (
    MAX_CHECKIN_WINDOW,
    complete_assignment,
    create_assignment,
    list_academic_snapshots,
    list_assignments,
    list_check_ins,
    record_academic_snapshot,
    upsert_check_in,
)
from campus_wellness.services.users import get_user

router = APIRouter(prefix="/users/{user_id}", tags=["records"])


# ---------------------------------------------------------------------------
# Serialization helpers
# ---------------------------------------------------------------------------

def _ev(v) -> str:
    return v.value if hasattr(v, "value") else str(v)


def _check_in_to_response(c: DailyCheckIn, created: bool = False) -> CheckInResponse:
    return CheckInResponse(
        id=c.id,
        day=str(c.day),
        mood=c.mood,
        sleep_hours=c.sleep_hours,
        stress_level=c.stress_level,
        energy_level=c.energy_level,
        notes=c.notes,
        created=created,
    )


def _assignment_to_response(a: Assignment) -> AssignmentResponse:
    return AssignmentResponse(
        id=a.id,
        title=a.title,
        description=a.description,
        due_date=as_utc(a.due_date).isoformat(),
        priority=_ev(a.priority),
        completed=a.completed,
    )


def _snapshot_to_response(r: AcademicRecord) -> AcademicSnapshotResponse:
    return AcademicSnapshotResponse(
        id=r.id,
        recorded_on=str(r.recorded_on),
        attendance_percent=r.attendance_percent,
    )


# ---------------------------------------------------------------------------
# Check-ins
# ---------------------------------------------------------------------------

@router.post(
    "/check-ins",
    response_model=CheckInResponse,
    summary="Submit today's check-in (upsert per day)",
    responses={
        201: {"description": "Check-in created."},
        **error_responses(404, 422),
    },
)
def submit_check_in(
    user_id: int,
    payload: CheckInRequest,
    response: Response,
    db: Session = Depends(get_db),
):
    """
    Record mood, sleep, stress and energy for a day. A second submission
    for the same day replaces the first (200); the first one returns 201.
    """
    check_in, created = upsert_check_in(
        db=db,
        user_id=user_id,
        mood=payload.mood,
        sleep_hours=payload.sleep_hours,
        stress_level=payload.stress_level,
        energy_level=payload.energy_level,
        notes=payload.notes,
        day=payload.day,
    )
    response.status_code = status.HTTP_201_CREATED if created else status.HTTP_200_OK
    return _check_in_to_response(check_in, created=created)


@router.get(
    "/check-ins",
    response_model=list[CheckInResponse],
    summary="Recent check-ins (newest first)",
    responses=error_responses(404),
)
def read_check_ins(
    user_id: int,
    limit: int = Query(default=MAX_CHECKIN_WINDOW, ge=1, le=MAX_CHECKIN_WINDOW),
    db: Session = Depends(get_db),
):
    get_user(db, user_id)
    return [_check_in_to_response(c) for c in list_check_ins(db, user_id, limit=limit)]


# ---------------------------------------------------------------------------
# Assignments
# ---------------------------------------------------------------------------

@router.post(
    "/assignments",
    response_model=AssignmentResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Add an assignment",
    responses=error_responses(404, 422),
)
def add_assignment(user_id: int, payload: AssignmentCreateRequest, db: Session = Depends(get_db)):
    assignment = create_assignment(
        db=db,
        user_id=user_id,
        title=payload.title,
        description=payload.description,
        due_date=payload.due_date,
        priority=payload.priority,
    )
    return _assignment_to_response(assignment)


@router.get(
    "/assignments",
    response_model=list[AssignmentResponse],
    summary="All assignments (soonest due first)",
    responses=error_responses(404),
)
def read_assignments(
    user_id: int,
    incomplete_only: bool = Query(default=False),
    db: Session = Depends(get_db),
):
    get_user(db, user_id)
    return [
        _assignment_to_response(a)
        for a in list_assignments(db, user_id, incomplete_only=incomplete_only)
    ]


@router.post(
    "/assignments/{assignment_id}/complete",
    response_model=AssignmentResponse,
    summary="Mark an assignment as completed",
    responses=error_responses(404),
)
def finish_assignment(user_id: int, assignment_id: int, db: Session = Depends(get_db)):
    get_user(db, user_id)
    return _assignment_to_response(complete_assignment(db, user_id, assignment_id))


# ---------------------------------------------------------------------------
# Academic snapshots
# ---------------------------------------------------------------------------

@router.post(
    "/academic-snapshots",
    response_model=AcademicSnapshotResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Record an attendance snapshot",
    responses=error_responses(404, 422),
)
def add_academic_snapshot(
    user_id: int,
    payload: AcademicSnapshotRequest,
    db: Session = Depends(get_db),
):
    record = record_academic_snapshot(
        db=db,
        user_id=user_id,
        attendance_percent=payload.attendance_percent,
        recorded_on=payload.recorded_on,
    )
    return _snapshot_to_response(record)


@router.get(
    "/academic-snapshots",
    response_model=list[AcademicSnapshotResponse],
    summary="Attendance snapshots (newest first)",
    responses=error_responses(404),
)
def read_academic_snapshots(user_id: int, db: Session = Depends(get_db)):
    get_user(db, user_id)
    return [_snapshot_to_response(r) for r in list_academic_snapshots(db, user_id)]
