"""
Predictive-alert generator — forward-looking warnings from short-term trends.

This is a transparent rule table, not a statistical forecast: there is no
model and no confidence output beyond the four-level severity.

Rules (each evaluated independently; up to all four may fire per run)
---------------------------------------------------------------------
  1. SLEEP_CRISIS
     Trigger  : recent_sleep < older_sleep - 1  AND  recent_sleep < 6
     Severity : CRITICAL if recent_sleep < 5 else HIGH      days_ahead 3

  2. BURNOUT_WARNING
     Trigger  : latest stored composite score > 60
     Severity : CRITICAL if score > 75 else HIGH            days_ahead 5

  3. STRESS_SPIKE
     Trigger  : recent_stress > 7  AND  >= 3 incomplete assignments due
                in 1..7 whole days from now
     Severity : HIGH                                        days_ahead 2

  4. MOOD_DECLINE
     Trigger  : recent_mood < 5  AND  recent_mood < recent_stress
     Severity : MEDIUM                                      days_ahead 4

"recent" is the newest 7 check-ins, "older" the 7 before them. With no
older window, older_sleep equals recent_sleep and rule 1 cannot fire.

Gating: the generator only runs when at least 7 check-ins exist and the
user has no active (non-dismissed) alerts. It is one-shot per dismissal
cycle, not a continuous monitor.
"""
from __future__ import annotations

import math
from dataclasses import dataclass
from datetime import datetime, timedelta
from typing import Callable, Optional, Sequence

from campus_wellness.engine.numeric import (
    as_utc,
    mean,
    most_recent,
    newest_first,
    prior_window,
    utcnow,
)
from campus_wellness.engine.types import (
    AlertType,
    AssignmentItem,
    CheckInSample,
    PredictiveAlert,
    Severity,
)

MIN_CHECKINS = 7
TREND_WINDOW = 7

_SLEEP_DROP_HOURS = 1.0
_SLEEP_CRISIS_HOURS = 6.0
_SLEEP_CRITICAL_HOURS = 5.0
_BURNOUT_WARNING_SCORE = 60
_BURNOUT_CRITICAL_SCORE = 75
_STRESS_SPIKE_LEVEL = 7.0
_STRESS_SPIKE_DEADLINES = 3
_STRESS_SPIKE_HORIZON_DAYS = 7
_LOW_MOOD_LEVEL = 5.0


# ---------------------------------------------------------------------------
# Trend snapshot — everything the rules read
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class TrendSnapshot:
    recent_sleep: float
    older_sleep: float
    recent_stress: float
    recent_mood: float
    deadlines_next_week: int
    latest_score: Optional[int]


def days_until(due: datetime, now: datetime) -> int:
    """Whole days until `due`, rounded up (due in 26 hours -> 2)."""
    seconds = (as_utc(due) - as_utc(now)).total_seconds()
    return math.ceil(seconds / timedelta(days=1).total_seconds())


def count_deadlines_next_week(
    assignments: Sequence[AssignmentItem],
    now: datetime,
) -> int:
    return sum(
        1 for a in assignments
        if not a.completed
        and 0 < days_until(a.due_date, now) <= _STRESS_SPIKE_HORIZON_DAYS
    )


def build_trend_snapshot(
    check_ins: Sequence[CheckInSample],
    assignments: Sequence[AssignmentItem],
    latest_score: Optional[int],
    now: datetime,
) -> TrendSnapshot:
    ordered = newest_first(check_ins, key=lambda c: c.day)
    recent = most_recent(ordered, TREND_WINDOW)
    older = prior_window(ordered, TREND_WINDOW, offset=TREND_WINDOW)

    recent_sleep = mean(c.sleep_hours for c in recent)
    older_sleep = mean(c.sleep_hours for c in older) if older else recent_sleep

    return TrendSnapshot(
        recent_sleep=recent_sleep,
        older_sleep=older_sleep,
        recent_stress=mean(c.stress_level for c in recent),
        recent_mood=mean(c.mood for c in recent),
        deadlines_next_week=count_deadlines_next_week(assignments, now),
        latest_score=latest_score,
    )


# ---------------------------------------------------------------------------
# Individual rule evaluators
# ---------------------------------------------------------------------------

def _rule_sleep_crisis(t: TrendSnapshot) -> Optional[PredictiveAlert]:
    """Rule 1: sleep dropped by more than an hour and is under 6h."""
    if not (t.recent_sleep < t.older_sleep - _SLEEP_DROP_HOURS
            and t.recent_sleep < _SLEEP_CRISIS_HOURS):
        return None
    severity = Severity.CRITICAL if t.recent_sleep < _SLEEP_CRITICAL_HOURS else Severity.HIGH
    return PredictiveAlert(
        alert_type=AlertType.SLEEP_CRISIS,
        severity=severity,
        prediction=(
            f"Your sleep has dropped to {t.recent_sleep:.1f}h a night "
            f"(from {t.older_sleep:.1f}h the week before). At this pace you're "
            "at risk of sleep deprivation by next week."
        ),
        recommendation=(
            "Prioritize 7-8 hours of sleep tonight. Set a bedtime alarm and "
            "avoid screens 30 min before bed."
        ),
        days_ahead=3,
    )


def _rule_burnout_warning(t: TrendSnapshot) -> Optional[PredictiveAlert]:
    """Rule 2: latest stored burnout score above 60."""
    if t.latest_score is None or t.latest_score <= _BURNOUT_WARNING_SCORE:
        return None
    severity = (
        Severity.CRITICAL if t.latest_score > _BURNOUT_CRITICAL_SCORE else Severity.HIGH
    )
    return PredictiveAlert(
        alert_type=AlertType.BURNOUT_WARNING,
        severity=severity,
        prediction=(
            f"Your burnout score is {t.latest_score}/100. The current trend "
            "suggests you may hit critical levels within 5-7 days."
        ),
        recommendation=(
            "Book a counselor session now. Take a mental health day if possible. "
            "Practice daily self-care."
        ),
        days_ahead=5,
    )


def _rule_stress_spike(t: TrendSnapshot) -> Optional[PredictiveAlert]:
    """Rule 3: high stress with a cluster of deadlines in the next week."""
    if t.recent_stress <= _STRESS_SPIKE_LEVEL:
        return None
    if t.deadlines_next_week < _STRESS_SPIKE_DEADLINES:
        return None
    return PredictiveAlert(
        alert_type=AlertType.STRESS_SPIKE,
        severity=Severity.HIGH,
        prediction=(
            f"You have {t.deadlines_next_week} deadlines in the next week and "
            f"your stress is averaging {t.recent_stress:.1f}/10. "
            "Stress will likely intensify."
        ),
        recommendation=(
            "Use the Pomodoro technique. Break tasks into smaller chunks. "
            "Don't wait until the last minute!"
        ),
        days_ahead=2,
    )


def _rule_mood_decline(t: TrendSnapshot) -> Optional[PredictiveAlert]:
    """Rule 4: low mood that sits below the stress level."""
    if not (t.recent_mood < _LOW_MOOD_LEVEL and t.recent_mood < t.recent_stress):
        return None
    return PredictiveAlert(
        alert_type=AlertType.MOOD_DECLINE,
        severity=Severity.MEDIUM,
        prediction=(
            f"Your mood has averaged {t.recent_mood:.1f}/10 this week, below your "
            f"stress level of {t.recent_stress:.1f}/10. This could affect your "
            "academic performance."
        ),
        recommendation=(
            "Try the breathing exercises. Connect with friends. "
            "Consider talking to a counselor."
        ),
        days_ahead=4,
    )


AlertRule = Callable[[TrendSnapshot], Optional[PredictiveAlert]]

ALERT_RULES: tuple[AlertRule, ...] = (
    _rule_sleep_crisis,
    _rule_burnout_warning,
    _rule_stress_spike,
    _rule_mood_decline,
)


# ---------------------------------------------------------------------------
# Public — main entry point
# ---------------------------------------------------------------------------

def should_generate(check_in_count: int, active_alert_count: int) -> bool:
    return check_in_count >= MIN_CHECKINS and active_alert_count == 0


def generate_predictive_alerts(
    check_ins: Sequence[CheckInSample],
    assignments: Sequence[AssignmentItem],
    latest_score: Optional[int],
    *,
    active_alert_count: int = 0,
    now: Optional[datetime] = None,
    rules: Sequence[AlertRule] = ALERT_RULES,
) -> list[PredictiveAlert]:
    """
    Evaluate every rule against the trend snapshot and return the alerts
    that fired, in rule order. Returns [] when gated off.
    """
    if not should_generate(len(check_ins), active_alert_count):
        return []

    trend = build_trend_snapshot(check_ins, assignments, latest_score, now or utcnow())
    alerts = []
    for rule in rules:
        alert = rule(trend)
        if alert is not None:
            alerts.append(alert)
    return alerts
