"""
Process-wide scoring constants.

These are not runtime settings. `calculate_burnout_score`, `extract_factors`
and `sleep_deficit` take a `config` keyword defaulting to DEFAULT_CONFIG;
tests build a variant with `dataclasses.replace` instead of patching module
state. Alert thresholds live beside the rule table in `predictions.py`.
"""
from __future__ import annotations

from dataclasses import dataclass, field


@dataclass(frozen=True)
class ScoringWeights:
    sleep_deficit: float = 0.25
    stress_trend: float = 0.30
    deadline_density: float = 0.20
    attendance_drop: float = 0.15
    activity_change: float = 0.10

    def total(self) -> float:
        return (
            self.sleep_deficit
            + self.stress_trend
            + self.deadline_density
            + self.attendance_drop
            + self.activity_change
        )


@dataclass(frozen=True)
class RiskThresholds:
    """Lower bounds (inclusive) of each risk level above LOW."""
    moderate: float = 25
    high: float = 50
    critical: float = 75


@dataclass(frozen=True)
class ScoringConfig:
    weights: ScoringWeights = field(default_factory=ScoringWeights)
    thresholds: RiskThresholds = field(default_factory=RiskThresholds)
    ideal_sleep_hours: float = 7.5


DEFAULT_CONFIG = ScoringConfig()
