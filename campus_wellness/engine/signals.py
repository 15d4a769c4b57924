"""
Signal extractor: reduces raw records into five independent [0, 100] factors.

Sparse history means "insufficient evidence", not an error: every factor
falls back to 0 when its window is too short.

  factor            window                          saturates at
  ----------------  ------------------------------  -------------------------
  sleep_deficit     newest 7 check-ins              3 h below ideal sleep
  stress_trend      newest 7 check-ins              mean stress 10/10
  deadline_density  incomplete, due in next 7 days  5 items (+10 per HIGH)
  attendance_drop   newest vs. next 3 snapshots     20-point drop
  activity_change   newest 3 vs. preceding 4        5-point energy drop
"""
from __future__ import annotations

from datetime import datetime, timedelta
from typing import Optional, Sequence

from campus_wellness.engine.config import DEFAULT_CONFIG, ScoringConfig
from campus_wellness.engine.numeric import (
    as_utc,
    clamp,
    mean,
    most_recent,
    newest_first,
    prior_window,
    utcnow,
)
from campus_wellness.engine.types import (
    AcademicSnapshot,
    AssignmentItem,
    BurnoutFactors,
    CheckInSample,
    Priority,
)

CHECKIN_WINDOW = 7
SLEEP_DEFICIT_SATURATION = 3.0

DEADLINE_HORIZON = timedelta(days=7)
DEADLINE_SATURATION = 5
HIGH_PRIORITY_BOOST = 10.0

ATTENDANCE_MIN_SNAPSHOTS = 2
ATTENDANCE_BASELINE_SIZE = 3
ATTENDANCE_DROP_SATURATION = 20.0

ACTIVITY_MIN_CHECKINS = 7
ACTIVITY_RECENT_SIZE = 3
ACTIVITY_BASELINE_SIZE = 4
ENERGY_DROP_SATURATION = 5.0


def _by_day(c: CheckInSample):
    return c.day


def _recent_check_ins(check_ins: Sequence[CheckInSample], n: int) -> list[CheckInSample]:
    return most_recent(newest_first(check_ins, key=_by_day), n)


# ---------------------------------------------------------------------------
# Factors
# ---------------------------------------------------------------------------

def sleep_deficit(
    check_ins: Sequence[CheckInSample],
    config: ScoringConfig = DEFAULT_CONFIG,
) -> float:
    window = _recent_check_ins(check_ins, CHECKIN_WINDOW)
    if not window:
        return 0.0
    deficit = config.ideal_sleep_hours - mean(c.sleep_hours for c in window)
    return clamp(deficit / SLEEP_DEFICIT_SATURATION * 100)


def stress_trend(check_ins: Sequence[CheckInSample]) -> float:
    window = _recent_check_ins(check_ins, CHECKIN_WINDOW)
    if not window:
        return 0.0
    return clamp(mean(c.stress_level for c in window) / 10 * 100)


def upcoming_deadlines(
    assignments: Sequence[AssignmentItem],
    now: Optional[datetime] = None,
) -> list[AssignmentItem]:
    """Incomplete assignments due in [now, now + 7 days]."""
    start = as_utc(now or utcnow())
    end = start + DEADLINE_HORIZON
    return [
        a for a in assignments
        if not a.completed and start <= as_utc(a.due_date) <= end
    ]


def deadline_density(
    assignments: Sequence[AssignmentItem],
    now: Optional[datetime] = None,
) -> float:
    upcoming = upcoming_deadlines(assignments, now)
    density = clamp(len(upcoming) / DEADLINE_SATURATION * 100)
    boost = HIGH_PRIORITY_BOOST * sum(1 for a in upcoming if a.priority == Priority.HIGH)
    return clamp(density + boost)


def attendance_drop(snapshots: Sequence[AcademicSnapshot]) -> float:
    if len(snapshots) < ATTENDANCE_MIN_SNAPSHOTS:
        return 0.0
    ordered = newest_first(snapshots, key=lambda s: s.recorded_on)
    current = ordered[0].attendance_percent
    baseline = mean(
        s.attendance_percent
        for s in prior_window(ordered, ATTENDANCE_BASELINE_SIZE, offset=1)
    )
    return clamp((baseline - current) / ATTENDANCE_DROP_SATURATION * 100)


def activity_change(check_ins: Sequence[CheckInSample]) -> float:
    if len(check_ins) < ACTIVITY_MIN_CHECKINS:
        return 0.0
    ordered = newest_first(check_ins, key=_by_day)
    recent = mean(c.energy_level for c in most_recent(ordered, ACTIVITY_RECENT_SIZE))
    baseline = mean(
        c.energy_level
        for c in prior_window(ordered, ACTIVITY_BASELINE_SIZE, offset=ACTIVITY_RECENT_SIZE)
    )
    return clamp((baseline - recent) / ENERGY_DROP_SATURATION * 100)


# ---------------------------------------------------------------------------
# Public — all five at once
# ---------------------------------------------------------------------------

def extract_factors(
    check_ins: Sequence[CheckInSample],
    assignments: Sequence[AssignmentItem],
    snapshots: Sequence[AcademicSnapshot],
    now: Optional[datetime] = None,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> BurnoutFactors:
    return BurnoutFactors(
        sleep_deficit=sleep_deficit(check_ins, config),
        stress_trend=stress_trend(check_ins),
        deadline_density=deadline_density(assignments, now),
        attendance_drop=attendance_drop(snapshots),
        activity_change=activity_change(check_ins),
    )
