"""
Predictive alert service — gating, persistence and dismissal around the
pure generator in campus_wellness.engine.predictions.

Generation only happens when the user has no active (non-dismissed)
alerts; otherwise the existing active alerts are returned untouched.
Dismissal is terminal and idempotent.
"""
from __future__ import annotations

import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Optional

from sqlalchemy.orm import Session

from campus_wellness.core.errors import AlertNotFoundError
from campus_wellness.engine import generate_predictive_alerts
from campus_wellness.engine.predictions import TREND_WINDOW
from campus_wellness.models.predictive_alert import PredictiveAlertRecord
from campus_wellness.services.burnout import latest_score
from campus_wellness.services.records import (
    list_assignments,
    list_check_ins,
    to_assignment_item,
    to_check_in_sample,
)
from campus_wellness.services.users import get_user

logger = logging.getLogger(__name__)


@dataclass
class AlertRunResult:
    generated: int
    active: list[PredictiveAlertRecord]


def active_alerts(db: Session, user_id: int) -> list[PredictiveAlertRecord]:
    return (
        db.query(PredictiveAlertRecord)
        .filter(
            PredictiveAlertRecord.user_id == user_id,
            PredictiveAlertRecord.dismissed == False,  # noqa: E712
        )
        .order_by(PredictiveAlertRecord.created_at.desc(), PredictiveAlertRecord.id.desc())
        .all()
    )


def get_or_generate_alerts(
    db: Session,
    user_id: int,
    now: Optional[datetime] = None,
) -> AlertRunResult:
    get_user(db, user_id)
    existing = active_alerts(db, user_id)
    if existing:
        logger.debug("User %d has %d active alert(s); skipping generation", user_id, len(existing))
        return AlertRunResult(generated=0, active=existing)

    check_ins = list_check_ins(db, user_id, limit=2 * TREND_WINDOW)
    assignments = list_assignments(db, user_id, incomplete_only=True)
    latest = latest_score(db, user_id)

    drafts = generate_predictive_alerts(
        [to_check_in_sample(c) for c in check_ins],
        [to_assignment_item(a) for a in assignments],
        latest.score if latest is not None else None,
        active_alert_count=0,
        now=now,
    )
    if not drafts:
        return AlertRunResult(generated=0, active=[])

    for alert in drafts:
        db.add(PredictiveAlertRecord(
            user_id=user_id,
            alert_type=alert.alert_type,
            severity=alert.severity,
            prediction=alert.prediction,
            recommendation=alert.recommendation,
            days_ahead=alert.days_ahead,
            dismissed=False,
        ))
    db.commit()
    logger.info(
        "Generated %d predictive alert(s) for user %d: %s",
        len(drafts), user_id, ", ".join(a.alert_type.value for a in drafts),
    )
    return AlertRunResult(generated=len(drafts), active=active_alerts(db, user_id))


def dismiss_alert(db: Session, user_id: int, alert_id: int) -> PredictiveAlertRecord:
    alert = (
        db.query(PredictiveAlertRecord)
        .filter(
            PredictiveAlertRecord.id == alert_id,
            PredictiveAlertRecord.user_id == user_id,
        )
        .first()
    )
    if alert is None:
        raise AlertNotFoundError(alert_id)
    if not alert.dismissed:
        alert.dismissed = True
        alert.dismissed_at = datetime.now(tz=timezone.utc)
        db.commit()
        db.refresh(alert)
    return alert
