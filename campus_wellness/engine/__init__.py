from .config import DEFAULT_CONFIG, RiskThresholds, ScoringConfig, ScoringWeights
from .insights import summarize_mood
from .predictions import generate_predictive_alerts
from .recommendations import recommend
from .scoring import calculate_burnout_score, classify_risk, compose_score
from .signals import extract_factors
from .types import (
    AcademicSnapshot,
    AlertType,
    AssignmentItem,
    BurnoutFactors,
    BurnoutResult,
    CheckInSample,
    MoodInsight,
    MoodTrend,
    PredictiveAlert,
    Priority,
    Recommendation,
    RecommendationType,
    RiskLevel,
    Severity,
)

__all__ = [
    "DEFAULT_CONFIG",
    "RiskThresholds",
    "ScoringConfig",
    "ScoringWeights",
    "summarize_mood",
    "generate_predictive_alerts",
    "recommend",
    "calculate_burnout_score",
    "classify_risk",
    "compose_score",
    "extract_factors",
    "AcademicSnapshot",
    "AlertType",
    "AssignmentItem",
    "BurnoutFactors",
    "BurnoutResult",
    "CheckInSample",
    "MoodInsight",
    "MoodTrend",
    "PredictiveAlert",
    "Priority",
    "Recommendation",
    "RecommendationType",
    "RiskLevel",
    "Severity",
]
