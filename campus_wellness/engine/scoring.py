"""
Score composer and risk classifier.

  score = sleep_deficit*0.25 + stress_trend*0.30 + deadline_density*0.20
        + attendance_drop*0.15 + activity_change*0.10

The composite is clamped to [0, 100] and rounded half-up; the factors keep
full precision for display.

  score >= 75  CRITICAL
  score >= 50  HIGH
  score >= 25  MODERATE
  otherwise    LOW
"""
from __future__ import annotations

from datetime import datetime
from typing import Optional, Sequence

from campus_wellness.engine.config import (
    DEFAULT_CONFIG,
    RiskThresholds,
    ScoringConfig,
    ScoringWeights,
)
from campus_wellness.engine.numeric import clamp, round_half_up
from campus_wellness.engine.signals import extract_factors
from campus_wellness.engine.types import (
    AcademicSnapshot,
    AssignmentItem,
    BurnoutFactors,
    BurnoutResult,
    CheckInSample,
    RiskLevel,
)


def compose_score(
    factors: BurnoutFactors,
    weights: ScoringWeights = DEFAULT_CONFIG.weights,
) -> int:
    weighted = (
        factors.sleep_deficit * weights.sleep_deficit
        + factors.stress_trend * weights.stress_trend
        + factors.deadline_density * weights.deadline_density
        + factors.attendance_drop * weights.attendance_drop
        + factors.activity_change * weights.activity_change
    )
    return round_half_up(clamp(weighted))


def classify_risk(
    score: float,
    thresholds: RiskThresholds = DEFAULT_CONFIG.thresholds,
) -> RiskLevel:
    if score >= thresholds.critical:
        return RiskLevel.CRITICAL
    if score >= thresholds.high:
        return RiskLevel.HIGH
    if score >= thresholds.moderate:
        return RiskLevel.MODERATE
    return RiskLevel.LOW


def calculate_burnout_score(
    check_ins: Sequence[CheckInSample],
    assignments: Sequence[AssignmentItem],
    snapshots: Sequence[AcademicSnapshot],
    *,
    now: Optional[datetime] = None,
    config: ScoringConfig = DEFAULT_CONFIG,
) -> BurnoutResult:
    """
    Full pipeline for one user: extract factors, compose, classify.
    Pure; recomputes from scratch on every call.
    """
    factors = extract_factors(check_ins, assignments, snapshots, now=now, config=config)
    score = compose_score(factors, config.weights)
    return BurnoutResult(
        score=score,
        risk_level=classify_risk(score, config.thresholds),
        factors=factors,
    )
