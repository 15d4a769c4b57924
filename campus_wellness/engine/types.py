"""
Value types consumed and produced by the scoring engine.

Plain frozen dataclasses, no ORM, no Pydantic. The service layer maps
database rows into the input types and serializes the output types.
"""
from __future__ import annotations

import enum
from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional


# ---------------------------------------------------------------------------
# Enums
# ---------------------------------------------------------------------------

class Priority(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"


class RiskLevel(str, enum.Enum):
    LOW = "LOW"
    MODERATE = "MODERATE"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class Severity(str, enum.Enum):
    LOW = "LOW"
    MEDIUM = "MEDIUM"
    HIGH = "HIGH"
    CRITICAL = "CRITICAL"


class AlertType(str, enum.Enum):
    SLEEP_CRISIS = "SLEEP_CRISIS"
    BURNOUT_WARNING = "BURNOUT_WARNING"
    STRESS_SPIKE = "STRESS_SPIKE"
    MOOD_DECLINE = "MOOD_DECLINE"


class RecommendationType(str, enum.Enum):
    REST_PLAN = "REST_PLAN"
    STUDY_PACING = "STUDY_PACING"
    BREAK_REMINDER = "BREAK_REMINDER"
    WELLNESS_TIP = "WELLNESS_TIP"
    ACTIVITY_SUGGESTION = "ACTIVITY_SUGGESTION"


class MoodTrend(str, enum.Enum):
    IMPROVING = "IMPROVING"
    STABLE = "STABLE"
    DECLINING = "DECLINING"


# ---------------------------------------------------------------------------
# Inputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class CheckInSample:
    """One self-reported daily wellness sample."""
    day: date
    mood: int            # 1-10
    sleep_hours: float   # 0-24
    stress_level: int    # 1-10
    energy_level: int    # 1-10


@dataclass(frozen=True)
class AssignmentItem:
    due_date: datetime
    priority: Priority = Priority.MEDIUM
    completed: bool = False


@dataclass(frozen=True)
class AcademicSnapshot:
    recorded_on: date
    attendance_percent: float   # 0-100


# ---------------------------------------------------------------------------
# Outputs
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class BurnoutFactors:
    """Per-factor breakdown of the composite score. Each value is in [0, 100]."""
    sleep_deficit: float
    stress_trend: float
    deadline_density: float
    attendance_drop: float
    activity_change: float

    def as_dict(self) -> dict[str, float]:
        return {
            "sleep_deficit": self.sleep_deficit,
            "stress_trend": self.stress_trend,
            "deadline_density": self.deadline_density,
            "attendance_drop": self.attendance_drop,
            "activity_change": self.activity_change,
        }


@dataclass(frozen=True)
class BurnoutResult:
    score: int                 # 0-100
    risk_level: RiskLevel
    factors: BurnoutFactors


@dataclass(frozen=True)
class PredictiveAlert:
    """A rule-triggered, forward-looking warning."""
    alert_type: AlertType
    severity: Severity
    prediction: str
    recommendation: str
    days_ahead: int


@dataclass(frozen=True)
class Recommendation:
    rec_type: RecommendationType
    title: str
    description: str


@dataclass(frozen=True)
class MoodInsight:
    avg_mood: float
    avg_sleep: float
    avg_stress: float
    avg_energy: float
    mood_trend: MoodTrend
    top_stressor: Optional[str]
    best_day_of_week: Optional[str]
    worst_day_of_week: Optional[str]
