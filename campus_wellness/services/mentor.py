"""
Mentor overview — consenting students whose latest stored risk is
MODERATE or worse, highest score first.

Students without `share_with_mentors` never appear, not even in counts.
"""
from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from sqlalchemy import func
from sqlalchemy.orm import Session

from campus_wellness.engine.types import RiskLevel
from campus_wellness.models.checkin import DailyCheckIn
from campus_wellness.models.user import User, UserRole
from campus_wellness.services.burnout import latest_score

_FLAGGED = (RiskLevel.MODERATE, RiskLevel.HIGH, RiskLevel.CRITICAL)


@dataclass
class AtRiskEntry:
    user: User
    score: int
    risk_level: RiskLevel
    last_check_in: Optional[date]


@dataclass
class MentorOverview:
    students: list[AtRiskEntry]
    total: int
    critical: int
    high: int
    moderate: int


def _last_check_in(db: Session, user_id: int) -> Optional[date]:
    return (
        db.query(func.max(DailyCheckIn.day))
        .filter(DailyCheckIn.user_id == user_id)
        .scalar()
    )


def at_risk_overview(db: Session) -> MentorOverview:
    students = (
        db.query(User)
        .filter(
            User.role == UserRole.STUDENT,
            User.share_with_mentors == True,  # noqa: E712
        )
        .all()
    )

    flagged: list[AtRiskEntry] = []
    for student in students:
        latest = latest_score(db, student.id)
        if latest is None:
            continue
        level = RiskLevel(latest.risk_level)
        if level not in _FLAGGED:
            continue
        flagged.append(AtRiskEntry(
            user=student,
            score=latest.score,
            risk_level=level,
            last_check_in=_last_check_in(db, student.id),
        ))

    flagged.sort(key=lambda e: e.score, reverse=True)
    return MentorOverview(
        students=flagged,
        total=len(students),
        critical=sum(1 for e in flagged if e.risk_level == RiskLevel.CRITICAL),
        high=sum(1 for e in flagged if e.risk_level == RiskLevel.HIGH),
        moderate=sum(1 for e in flagged if e.risk_level == RiskLevel.MODERATE),
    )
