"""
Burnout router.

GET /users/{user_id}/burnout          — score now and store the result
GET /users/{user_id}/burnout/history  — stored scores (paginated, newest first)
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, Query
from sqlalchemy.orm import Session

from campus_wellness.db.base import get_db
from campus_wellness.models.burnout_score import BurnoutScore
from campus_wellness.schemas.burnout import (
    BurnoutFactorsOut,
    BurnoutHistoryResponse,
    BurnoutResponse,
)
from campus_wellness.schemas.common import error_responses
from campus_wellness.services.burnout import calculate_and_store, get_history

router = APIRouter(prefix="/users/{user_id}/burnout", tags=["burnout"])


def _ev(v) -> str:
    return v.value if hasattr(v, "value") else str(v)


def _score_to_response(row: BurnoutScore) -> BurnoutResponse:
    return BurnoutResponse(
        id=row.id,
        score=row.score,
        risk_level=_ev(row.risk_level),
        factors=BurnoutFactorsOut(
            sleep_deficit=row.sleep_deficit,
            stress_trend=row.stress_trend,
            deadline_density=row.deadline_density,
            attendance_drop=row.attendance_drop,
            activity_change=row.activity_change,
        ),
        calculated_at=row.created_at.isoformat() if row.created_at else "",
    )


@router.get(
    "",
    response_model=BurnoutResponse,
    summary="Calculate the current burnout score",
    responses=error_responses(404),
)
def burnout(user_id: int, db: Session = Depends(get_db)):
    """
    Score the last 30 days of check-ins and attendance plus all assignments.

    ### Weights
    | Factor | Weight |
    |---|---|
    | `sleep_deficit`    | 0.25 |
    | `stress_trend`     | 0.30 |
    | `deadline_density` | 0.20 |
    | `attendance_drop`  | 0.15 |
    | `activity_change`  | 0.10 |

    Risk: ≥75 CRITICAL, ≥50 HIGH, ≥25 MODERATE, otherwise LOW.
    Each call appends a row to `burnout_scores`.
    """
    return _score_to_response(calculate_and_store(db=db, user_id=user_id))


@router.get(
    "/history",
    response_model=BurnoutHistoryResponse,
    summary="Stored burnout scores (newest first)",
    responses=error_responses(404),
)
def burnout_history(
    user_id: int,
    limit: int = Query(default=30, ge=1, le=100, description="Page size."),
    offset: int = Query(default=0, ge=0, description="Skip N items."),
    db: Session = Depends(get_db),
):
    total, items = get_history(db=db, user_id=user_id, limit=limit, offset=offset)
    return BurnoutHistoryResponse(
        total=total,
        items=[_score_to_response(row) for row in items],
    )
