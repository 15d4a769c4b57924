"""
Wellness service: rule-based recommendations and mood insights.
"""
from __future__ import annotations

import logging

from sqlalchemy.orm import Session

from campus_wellness.core.errors import NoBurnoutDataError
from campus_wellness.engine import BurnoutFactors, MoodInsight, recommend, summarize_mood
from campus_wellness.engine.insights import INSIGHT_WINDOW
from campus_wellness.models.recommendation import RecommendationRecord
from campus_wellness.services.burnout import latest_score
from campus_wellness.services.records import list_check_ins, to_check_in_sample
from campus_wellness.services.users import get_user

logger = logging.getLogger(__name__)

RECENT_CHECKINS = 7
RECOMMENDATION_PAGE = 10


def generate_recommendations(db: Session, user_id: int) -> list[RecommendationRecord]:
    """
    Build recommendations from the latest stored burnout breakdown and the
    newest check-ins, persist them, and return the stored rows.
    """
    get_user(db, user_id)
    latest = latest_score(db, user_id)
    if latest is None:
        raise NoBurnoutDataError(user_id)

    factors = BurnoutFactors(
        sleep_deficit=latest.sleep_deficit,
        stress_trend=latest.stress_trend,
        deadline_density=latest.deadline_density,
        attendance_drop=latest.attendance_drop,
        activity_change=latest.activity_change,
    )
    check_ins = list_check_ins(db, user_id, limit=RECENT_CHECKINS)

    rows = [
        RecommendationRecord(
            user_id=user_id,
            rec_type=rec.rec_type,
            title=rec.title,
            description=rec.description,
        )
        for rec in recommend(factors, [to_check_in_sample(c) for c in check_ins])
    ]
    db.add_all(rows)
    db.commit()
    for row in rows:
        db.refresh(row)
    logger.info("Stored %d recommendation(s) for user %d", len(rows), user_id)
    return rows


def list_recommendations(db: Session, user_id: int) -> list[RecommendationRecord]:
    get_user(db, user_id)
    return (
        db.query(RecommendationRecord)
        .filter(RecommendationRecord.user_id == user_id)
        .order_by(RecommendationRecord.created_at.desc(), RecommendationRecord.id.desc())
        .limit(RECOMMENDATION_PAGE)
        .all()
    )


def mood_insights(db: Session, user_id: int) -> MoodInsight:
    get_user(db, user_id)
    check_ins = list_check_ins(db, user_id, limit=INSIGHT_WINDOW)
    return summarize_mood([to_check_in_sample(c) for c in check_ins])
