"""Rule-based wellness recommendations derived from a burnout breakdown."""
from __future__ import annotations

from typing import Sequence

from campus_wellness.engine.numeric import most_recent, newest_first
from campus_wellness.engine.types import (
    BurnoutFactors,
    CheckInSample,
    Recommendation,
    RecommendationType,
)

MAX_RECOMMENDATIONS = 5

_SLEEP_DEFICIT_TRIGGER = 50
_STRESS_TREND_TRIGGER = 70
_DEADLINE_DENSITY_TRIGGER = 60
_LOW_ENERGY_TRIGGER = 4


def recommend(
    factors: BurnoutFactors,
    check_ins: Sequence[CheckInSample] = (),
) -> list[Recommendation]:
    """
    Map elevated factors (and a low-energy latest check-in) to concrete
    suggestions. A Pomodoro break reminder is always included.
    """
    recs: list[Recommendation] = []

    if factors.sleep_deficit > _SLEEP_DEFICIT_TRIGGER:
        recs.append(Recommendation(
            rec_type=RecommendationType.REST_PLAN,
            title="Prioritize Sleep Tonight",
            description=(
                "Your sleep deficit is elevated. Aim for at least 7-8 hours tonight. "
                "Set a bedtime alarm and avoid screens 1 hour before bed."
            ),
        ))

    if factors.stress_trend > _STRESS_TREND_TRIGGER:
        recs.append(Recommendation(
            rec_type=RecommendationType.WELLNESS_TIP,
            title="Try the 5-4-3-2-1 Grounding Technique",
            description=(
                "When feeling stressed, identify 5 things you see, 4 you can touch, "
                "3 you hear, 2 you smell, and 1 you taste. This helps reduce anxiety."
            ),
        ))

    if factors.deadline_density > _DEADLINE_DENSITY_TRIGGER:
        recs.append(Recommendation(
            rec_type=RecommendationType.STUDY_PACING,
            title="Break Down Large Assignments",
            description=(
                "You have multiple deadlines coming up. Break each assignment into "
                "smaller tasks and tackle them across multiple days instead of cramming."
            ),
        ))

    latest = most_recent(newest_first(check_ins, key=lambda c: c.day), 1)
    if latest and latest[0].energy_level < _LOW_ENERGY_TRIGGER:
        recs.append(Recommendation(
            rec_type=RecommendationType.ACTIVITY_SUGGESTION,
            title="Take a 10-Minute Walk",
            description=(
                "Low energy detected. A short walk outdoors can boost your energy "
                "and improve focus. Even 10 minutes makes a difference!"
            ),
        ))

    recs.append(Recommendation(
        rec_type=RecommendationType.BREAK_REMINDER,
        title="Use the Pomodoro Technique",
        description=(
            "Work for 25 minutes, then take a 5-minute break. After 4 cycles, take a "
            "longer 15-30 minute break. This prevents burnout while studying."
        ),
    ))

    return recs[:MAX_RECOMMENDATIONS]
