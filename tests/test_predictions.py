"""
Tests for the predictive-alert generator.

Covered rules:
  1) SLEEP_CRISIS     : recent < older − 1 and < 6; CRITICAL below 5h (5.0 → HIGH, 4.99 → CRITICAL)
  2) BURNOUT_WARNING  : latest score > 60; CRITICAL above 75
  3) STRESS_SPIKE     : stress > 7 and ≥ 3 deadlines 1–7 days out
  4) MOOD_DECLINE     : mood < 5 and below stress

Additional:
  - Gating: < 7 check-ins, or any active alert → nothing
  - All four rules can fire in one run, in rule order
  - No older window → sleep rule cannot fire
"""
from __future__ import annotations

from datetime import timedelta

import pytest

from campus_wellness.engine.predictions import (
    ALERT_RULES,
    build_trend_snapshot,
    days_until,
    generate_predictive_alerts,
)
from campus_wellness.engine.types import AlertType, Severity

from engine_factories import NOW, assignment, check_ins


def _two_weeks(recent: dict, older: dict) -> list:
    return check_ins(7, **recent) + check_ins(7, start=7, **older)


_CALM = {"mood": 7, "sleep": 7.5, "stress": 3}


def _types(alerts) -> list[AlertType]:
    return [a.alert_type for a in alerts]


# ---------------------------------------------------------------------------
# Gating
# ---------------------------------------------------------------------------

class TestGating:
    def test_fewer_than_seven_check_ins(self):
        data = check_ins(6, mood=2, sleep=3.0, stress=10)
        assert generate_predictive_alerts(data, [], 90, now=NOW) == []

    def test_active_alerts_suppress_generation(self):
        data = check_ins(7, mood=2, sleep=3.0, stress=10)
        assert generate_predictive_alerts(data, [], 90, active_alert_count=1, now=NOW) == []

    def test_calm_user_gets_nothing(self):
        assert generate_predictive_alerts(_two_weeks(_CALM, _CALM), [], 20, now=NOW) == []

    def test_empty_everything(self):
        assert generate_predictive_alerts([], [], None, now=NOW) == []


# ---------------------------------------------------------------------------
# Rule 1 : sleep crisis
# ---------------------------------------------------------------------------

class TestSleepCrisis:
    def test_boundary_five_hours_is_high(self):
        data = _two_weeks({**_CALM, "sleep": 5.0}, _CALM)
        alerts = generate_predictive_alerts(data, [], None, now=NOW)
        assert _types(alerts) == [AlertType.SLEEP_CRISIS]
        assert alerts[0].severity == Severity.HIGH
        assert alerts[0].days_ahead == 3

    def test_just_under_five_hours_is_critical(self):
        data = _two_weeks({**_CALM, "sleep": 4.99}, _CALM)
        alerts = generate_predictive_alerts(data, [], None, now=NOW)
        assert alerts[0].severity == Severity.CRITICAL

    def test_template_mentions_numbers(self):
        data = _two_weeks({**_CALM, "sleep": 5.0}, _CALM)
        alert = generate_predictive_alerts(data, [], None, now=NOW)[0]
        assert "5.0h" in alert.prediction
        assert "7.5h" in alert.prediction

    def test_drop_of_exactly_one_hour_does_not_fire(self):
        data = _two_weeks({**_CALM, "sleep": 5.5}, {**_CALM, "sleep": 6.5})
        assert generate_predictive_alerts(data, [], None, now=NOW) == []

    def test_short_but_stable_sleep_does_not_fire(self):
        data = _two_weeks({**_CALM, "sleep": 5.0}, {**_CALM, "sleep": 5.5})
        assert generate_predictive_alerts(data, [], None, now=NOW) == []

    def test_six_hours_does_not_fire(self):
        data = _two_weeks({**_CALM, "sleep": 6.0}, {**_CALM, "sleep": 9.0})
        assert generate_predictive_alerts(data, [], None, now=NOW) == []

    def test_no_older_window(self):
        data = check_ins(7, **{**_CALM, "sleep": 3.0})
        assert AlertType.SLEEP_CRISIS not in _types(generate_predictive_alerts(data, [], None, now=NOW))


# ---------------------------------------------------------------------------
# Rule 2 : burnout warning
# ---------------------------------------------------------------------------

class TestBurnoutWarning:
    @pytest.mark.parametrize("score,severity", [
        (61, Severity.HIGH),
        (75, Severity.HIGH),
        (76, Severity.CRITICAL),
        (100, Severity.CRITICAL),
    ])
    def test_fires_above_sixty(self, score, severity):
        alerts = generate_predictive_alerts(check_ins(7, **_CALM), [], score, now=NOW)
        assert _types(alerts) == [AlertType.BURNOUT_WARNING]
        assert alerts[0].severity == severity
        assert alerts[0].days_ahead == 5
        assert f"{score}/100" in alerts[0].prediction

    @pytest.mark.parametrize("score", [None, 0, 60])
    def test_silent_at_or_below_sixty(self, score):
        assert generate_predictive_alerts(check_ins(7, **_CALM), [], score, now=NOW) == []


# ---------------------------------------------------------------------------
# Rule 3 : stress spike
# ---------------------------------------------------------------------------

class TestStressSpike:
    _STRESSED = {"mood": 7, "sleep": 7.5, "stress": 8}

    def _deadlines(self, *offsets):
        return [assignment(due_in=o) for o in offsets]

    def test_fires_with_three_deadlines(self):
        tasks = self._deadlines(timedelta(days=2), timedelta(days=5), timedelta(days=7))
        alerts = generate_predictive_alerts(check_ins(7, **self._STRESSED), tasks, None, now=NOW)
        assert _types(alerts) == [AlertType.STRESS_SPIKE]
        assert alerts[0].severity == Severity.HIGH
        assert alerts[0].days_ahead == 2
        assert "3 deadlines" in alerts[0].prediction

    def test_two_deadlines_not_enough(self):
        tasks = self._deadlines(timedelta(days=2), timedelta(days=5))
        assert generate_predictive_alerts(check_ins(7, **self._STRESSED), tasks, None, now=NOW) == []

    def test_stress_of_exactly_seven_does_not_fire(self):
        tasks = self._deadlines(*(timedelta(days=d) for d in (1, 2, 3)))
        data = check_ins(7, **{**self._STRESSED, "stress": 7})
        assert generate_predictive_alerts(data, tasks, None, now=NOW) == []

    def test_due_now_and_past_eighth_day_excluded(self):
        tasks = self._deadlines(
            timedelta(0),
            timedelta(days=7, hours=1),
            timedelta(days=-1),
            timedelta(days=3),
            timedelta(days=4),
        )
        assert generate_predictive_alerts(check_ins(7, **self._STRESSED), tasks, None, now=NOW) == []

    def test_completed_assignments_excluded(self):
        tasks = [assignment(due_in=timedelta(days=d), completed=True) for d in (1, 2, 3)]
        assert generate_predictive_alerts(check_ins(7, **self._STRESSED), tasks, None, now=NOW) == []

    def test_days_until_rounds_up(self):
        assert days_until(NOW + timedelta(hours=1), NOW) == 1
        assert days_until(NOW + timedelta(hours=26), NOW) == 2
        assert days_until(NOW + timedelta(days=7), NOW) == 7
        assert days_until(NOW, NOW) == 0


# ---------------------------------------------------------------------------
# Rule 4 : mood decline
# ---------------------------------------------------------------------------

class TestMoodDecline:
    def test_low_mood_below_stress(self):
        data = check_ins(7, mood=4, sleep=7.5, stress=6)
        alerts = generate_predictive_alerts(data, [], None, now=NOW)
        assert _types(alerts) == [AlertType.MOOD_DECLINE]
        assert alerts[0].severity == Severity.MEDIUM
        assert alerts[0].days_ahead == 4

    def test_low_mood_above_stress(self):
        data = check_ins(7, mood=4, sleep=7.5, stress=3)
        assert generate_predictive_alerts(data, [], None, now=NOW) == []

    def test_mood_of_five_does_not_fire(self):
        data = check_ins(7, mood=5, sleep=7.5, stress=7)
        assert generate_predictive_alerts(data, [], None, now=NOW) == []


# ---------------------------------------------------------------------------
# Combined
# ---------------------------------------------------------------------------

class TestCombined:
    def test_all_four_fire_in_rule_order(self):
        data = _two_weeks({"mood": 3, "sleep": 4.0, "stress": 9}, {"mood": 6, "sleep": 8.0, "stress": 4})
        tasks = [assignment(due_in=timedelta(days=d)) for d in (1, 3, 6)]
        alerts = generate_predictive_alerts(data, tasks, 80, now=NOW)
        assert _types(alerts) == [
            AlertType.SLEEP_CRISIS,
            AlertType.BURNOUT_WARNING,
            AlertType.STRESS_SPIKE,
            AlertType.MOOD_DECLINE,
        ]
        assert len(alerts) <= len(ALERT_RULES)

    def test_only_fourteen_newest_are_read(self):
        data = _two_weeks(_CALM, _CALM) + check_ins(10, start=14, mood=1, sleep=12.0, stress=10)
        trend = build_trend_snapshot(data, [], None, NOW)
        assert trend.older_sleep == pytest.approx(7.5)
        assert trend.recent_mood == pytest.approx(7.0)

    def test_deterministic(self):
        data = _two_weeks({"mood": 3, "sleep": 4.0, "stress": 9}, _CALM)
        assert generate_predictive_alerts(data, [], 70, now=NOW) == \
            generate_predictive_alerts(data, [], 70, now=NOW)
