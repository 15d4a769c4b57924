"""
Mood insights over the newest 30 check-ins.

Averages are rounded to one decimal. The trend compares the newest 7
check-ins against the 7 before them; a difference of more than one point
on the mood scale counts as a change.
"""
from __future__ import annotations

from collections import defaultdict
from typing import Optional, Sequence

from campus_wellness.engine.numeric import mean, most_recent, newest_first, prior_window
from campus_wellness.engine.types import CheckInSample, MoodInsight, MoodTrend

INSIGHT_WINDOW = 30
TREND_WINDOW = 7
_TREND_MARGIN = 1.0

_WEEKDAYS = ("Monday", "Tuesday", "Wednesday", "Thursday", "Friday", "Saturday", "Sunday")


def _mood_trend(ordered: Sequence[CheckInSample]) -> MoodTrend:
    older = prior_window(ordered, TREND_WINDOW, offset=TREND_WINDOW)
    if not older:
        return MoodTrend.STABLE
    recent_mood = mean(c.mood for c in most_recent(ordered, TREND_WINDOW))
    older_mood = mean(c.mood for c in older)
    if recent_mood > older_mood + _TREND_MARGIN:
        return MoodTrend.IMPROVING
    if recent_mood < older_mood - _TREND_MARGIN:
        return MoodTrend.DECLINING
    return MoodTrend.STABLE


def _top_stressor(avg_sleep: float, avg_stress: float, avg_energy: float) -> Optional[str]:
    if avg_stress > 7:
        return "High academic pressure"
    if avg_sleep < 6:
        return "Sleep deprivation"
    if avg_energy < 4:
        return "Low energy levels"
    return None


def _best_and_worst_weekday(
    check_ins: Sequence[CheckInSample],
) -> tuple[Optional[str], Optional[str]]:
    moods: dict[str, list[int]] = defaultdict(list)
    for c in check_ins:
        moods[_WEEKDAYS[c.day.weekday()]].append(c.mood)
    if not moods:
        return None, None
    averages = {day: mean(values) for day, values in moods.items()}
    best = max(averages, key=averages.__getitem__)
    worst = min(averages, key=averages.__getitem__)
    return best, worst


def summarize_mood(check_ins: Sequence[CheckInSample]) -> MoodInsight:
    ordered = most_recent(newest_first(check_ins, key=lambda c: c.day), INSIGHT_WINDOW)
    if not ordered:
        return MoodInsight(
            avg_mood=0.0,
            avg_sleep=0.0,
            avg_stress=0.0,
            avg_energy=0.0,
            mood_trend=MoodTrend.STABLE,
            top_stressor=None,
            best_day_of_week=None,
            worst_day_of_week=None,
        )

    avg_mood = mean(c.mood for c in ordered)
    avg_sleep = mean(c.sleep_hours for c in ordered)
    avg_stress = mean(c.stress_level for c in ordered)
    avg_energy = mean(c.energy_level for c in ordered)
    best, worst = _best_and_worst_weekday(ordered)

    return MoodInsight(
        avg_mood=round(avg_mood, 1),
        avg_sleep=round(avg_sleep, 1),
        avg_stress=round(avg_stress, 1),
        avg_energy=round(avg_energy, 1),
        mood_trend=_mood_trend(ordered),
        top_stressor=_top_stressor(avg_sleep, avg_stress, avg_energy),
        best_day_of_week=best,
        worst_day_of_week=worst,
    )
