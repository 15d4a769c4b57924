"""
Burnout service — load a user's records, score them, store the result.

The engine call itself is pure; this module owns the I/O around it:

  check-ins          last CHECKIN_HISTORY_DAYS days, newest first, max 30
  assignments        all of the user's assignments
  academic snapshots last CHECKIN_HISTORY_DAYS days, newest first

Every call appends a new burnout_scores row.
"""
from __future__ import annotations

import logging
from datetime import datetime
from typing import Optional

from sqlalchemy.orm import Session

from campus_wellness.core.config import settings
from campus_wellness.engine import DEFAULT_CONFIG, ScoringConfig, calculate_burnout_score
from campus_wellness.engine.types import BurnoutResult
from campus_wellness.models.burnout_score import BurnoutScore
from campus_wellness.services.records import (
    MAX_CHECKIN_WINDOW,
    history_start,
    list_academic_snapshots,
    list_assignments,
    list_check_ins,
    to_academic_snapshot,
    to_assignment_item,
    to_check_in_sample,
)
from campus_wellness.services.users import get_user

logger = logging.getLogger(__name__)


def score_user(
    db: Session,
    user_id: int,
    now: Optional[datetime] = None,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> BurnoutResult:
    """Compute (without storing) the burnout result for one user."""
    since = history_start(settings.CHECKIN_HISTORY_DAYS)
    check_ins = list_check_ins(db, user_id, limit=MAX_CHECKIN_WINDOW, since=since)
    assignments = list_assignments(db, user_id)
    snapshots = list_academic_snapshots(db, user_id, since=since)

    return calculate_burnout_score(
        [to_check_in_sample(c) for c in check_ins],
        [to_assignment_item(a) for a in assignments],
        [to_academic_snapshot(s) for s in snapshots],
        now=now,
        config=config,
    )


def calculate_and_store(
    db: Session,
    user_id: int,
    now: Optional[datetime] = None,
) -> BurnoutScore:
    get_user(db, user_id)
    result = score_user(db, user_id, now=now)
    row = BurnoutScore(
        user_id=user_id,
        score=result.score,
        risk_level=result.risk_level,
        **result.factors.as_dict(),
    )
    db.add(row)
    db.commit()
    db.refresh(row)
    logger.info(
        "Burnout score for user %d: %d (%s)",
        user_id, result.score, result.risk_level.value,
    )
    return row


def latest_score(db: Session, user_id: int) -> Optional[BurnoutScore]:
    return (
        db.query(BurnoutScore)
        .filter(BurnoutScore.user_id == user_id)
        .order_by(BurnoutScore.created_at.desc(), BurnoutScore.id.desc())
        .first()
    )


def get_history(
    db: Session,
    user_id: int,
    limit: int = 30,
    offset: int = 0,
) -> tuple[int, list[BurnoutScore]]:
    """Return (total, page) of stored scores, newest first."""
    get_user(db, user_id)
    q = db.query(BurnoutScore).filter(BurnoutScore.user_id == user_id)
    total = q.count()
    items = (
        q.order_by(BurnoutScore.created_at.desc(), BurnoutScore.id.desc())
        .offset(offset)
        .limit(limit)
        .all()
    )
    return total, items
