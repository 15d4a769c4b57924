"""
Predictive alerts router.

GET  /users/{user_id}/predictive-alerts
POST /users/{user_id}/predictive-alerts/{alert_id}/dismiss
"""
from __future__ import annotations

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from campus_wellness.db.base import get_db
from campus_wellness.models.predictive_alert import PredictiveAlertRecord
from campus_wellness.schemas.alerts import PredictiveAlertListResponse, PredictiveAlertResponse
from campus_wellness.schemas.common import error_responses
from campus_wellness.services.alerts import dismiss_alert, get_or_generate_alerts
from campus_wellness.services.users import get_user

router = APIRouter(prefix="/users/{user_id}/predictive-alerts", tags=["alerts"])


def _ev(v) -> str:
    return v.value if hasattr(v, "value") else str(v)


def _alert_to_response(a: PredictiveAlertRecord) -> PredictiveAlertResponse:
    return PredictiveAlertResponse(
        id=a.id,
        alert_type=_ev(a.alert_type),
        severity=_ev(a.severity),
        prediction=a.prediction,
        recommendation=a.recommendation,
        days_ahead=a.days_ahead,
        dismissed=a.dismissed,
        dismissed_at=a.dismissed_at.isoformat() if a.dismissed_at else None,
        created_at=a.created_at.isoformat() if a.created_at else "",
    )


@router.get(
    "",
    response_model=PredictiveAlertListResponse,
    summary="Active predictive alerts (generates new ones when none are active)",
    responses=error_responses(404),
)
def predictive_alerts(user_id: int, db: Session = Depends(get_db)):
    """
    Return the user's active alerts. When there are none and at least 7
    check-ins exist, the rule table is evaluated first:

    | Alert | Trigger | Severity | Days ahead |
    |---|---|---|---|
    | `SLEEP_CRISIS`    | recent sleep < older − 1h and < 6h | CRITICAL if < 5h, else HIGH | 3 |
    | `BURNOUT_WARNING` | latest stored score > 60 | CRITICAL if > 75, else HIGH | 5 |
    | `STRESS_SPIKE`    | recent stress > 7 and ≥ 3 deadlines in 1–7 days | HIGH | 2 |
    | `MOOD_DECLINE`    | recent mood < 5 and below recent stress | MEDIUM | 4 |

    These are deterministic heuristics, not a statistical forecast.
    """
    run = get_or_generate_alerts(db=db, user_id=user_id)
    return PredictiveAlertListResponse(
        generated=run.generated,
        items=[_alert_to_response(a) for a in run.active],
    )


@router.post(
    "/{alert_id}/dismiss",
    response_model=PredictiveAlertResponse,
    summary="Dismiss an alert (terminal)",
    responses=error_responses(404),
)
def dismiss(user_id: int, alert_id: int, db: Session = Depends(get_db)):
    """Dismissing an already-dismissed alert is a no-op."""
    get_user(db, user_id)
    return _alert_to_response(dismiss_alert(db=db, user_id=user_id, alert_id=alert_id))
