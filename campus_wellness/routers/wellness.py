"""
Wellness router.

GET  /users/{user_id}/recommendations
POST /users/{user_id}/recommendations
GET  /users/{user_id}/mood-insights
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from campus_wellness.db.base import get_db
from campus_wellness.models.recommendation import RecommendationRecord
from campus_wellness.schemas.common import error_responses
from campus_wellness.schemas.wellness import MoodInsightResponse, RecommendationResponse
from campus_wellness.services.wellness import (
    generate_recommendations,
    list_recommendations,
    mood_insights,
)

router = APIRouter(prefix="/users/{user_id}", tags=["wellness"])


def _ev(v) -> str:
    return v.value if hasattr(v, "value") else str(v)


def _rec_to_response(r: RecommendationRecord) -> RecommendationResponse:
    return RecommendationResponse(
        id=r.id,
        type=_ev(r.rec_type),
        title=r.title,
        description=r.description,
        created_at=r.created_at.isoformat() if r.created_at else "",
    )


@router.get(
    "/recommendations",
    response_model=list[RecommendationResponse],
    summary="Latest stored recommendations",
    responses=error_responses(404),
)
def read_recommendations(user_id: int, db: Session = Depends(get_db)):
    return [_rec_to_response(r) for r in list_recommendations(db, user_id)]


@router.post(
    "/recommendations",
    response_model=list[RecommendationResponse],
    status_code=status.HTTP_201_CREATED,
    summary="Generate recommendations from the latest burnout score",
    responses=error_responses(404, 409),
)
def create_recommendations(user_id: int, db: Session = Depends(get_db)):
    """
    Derive up to 5 recommendations from the latest stored burnout
    breakdown. Raises **409** `NO_BURNOUT_DATA` if no score exists yet.
    """
    return [_rec_to_response(r) for r in generate_recommendations(db, user_id)]


@router.get(
    "/mood-insights",
    response_model=MoodInsightResponse,
    summary="Averages, trend and weekday patterns over the last 30 check-ins",
    responses=error_responses(404),
)
def read_mood_insights(user_id: int, db: Session = Depends(get_db)):
    insight = mood_insights(db, user_id)
    return MoodInsightResponse(
        avg_mood=insight.avg_mood,
        avg_sleep=insight.avg_sleep,
        avg_stress=insight.avg_stress,
        avg_energy=insight.avg_energy,
        mood_trend=insight.mood_trend.value,
        top_stressor=insight.top_stressor,
        best_day_of_week=insight.best_day_of_week,
        worst_day_of_week=insight.worst_day_of_week,
    )
