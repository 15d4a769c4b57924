"""
Mentor router.

GET /mentor/students — consenting students at MODERATE risk or above
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from campus_wellness.db.base import get_db
from campus_wellness.schemas.mentor import AtRiskStudent, MentorOverviewResponse, MentorStats
from campus_wellness.services.mentor import at_risk_overview

router = APIRouter(prefix="/mentor", tags=["mentor"])


@router.get(
    "/students",
    response_model=MentorOverviewResponse,
    summary="At-risk students who share data with mentors",
)
def students(db: Session = Depends(get_db)):
    """
    List students whose latest stored risk level is MODERATE, HIGH or
    CRITICAL, highest score first. Only students with
    `share_with_mentors = true` are considered.
    """
    overview = at_risk_overview(db)
    return MentorOverviewResponse(
        students=[
            AtRiskStudent(
                id=e.user.id,
                name=e.user.name or "Anonymous",
                email=e.user.email,
                burnout_score=e.score,
                risk_level=e.risk_level.value,
                last_check_in=str(e.last_check_in) if e.last_check_in else None,
            )
            for e in overview.students
        ],
        stats=MentorStats(
            total=overview.total,
            critical=overview.critical,
            high=overview.high,
            moderate=overview.moderate,
        ),
    )
