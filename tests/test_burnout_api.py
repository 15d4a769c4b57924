"""
Integration tests for scoring, predictive alerts, recommendations,
mood insights and the mentor overview.

Check-in days and deadlines are relative to the real clock because the
endpoints score "now".
"""
import uuid
from datetime import datetime, timedelta, timezone

import pytest


def _today():
    return datetime.now(tz=timezone.utc).date()


def _new_user(client, **fields) -> dict:
    body = {"name": "Student", "email": f"s-{uuid.uuid4().hex[:12]}@campus.edu"}
    body.update(fields)
    r = client.post("/users", json=body)
    assert r.status_code == 201
    return r.json()


def _submit_days(client, user_id, days, start=0, mood=7, sleep=7.5, stress=3, energy=6):
    for i in range(start, start + days):
        r = client.post(f"/users/{user_id}/check-ins", json={
            "day": str(_today() - timedelta(days=i)),
            "mood": mood,
            "sleep_hours": sleep,
            "stress_level": stress,
            "energy_level": energy,
        })
        assert r.status_code == 201


def _score(client, user_id) -> dict:
    r = client.get(f"/users/{user_id}/burnout")
    assert r.status_code == 200
    return r.json()


class TestBurnout:
    def test_no_data_scores_zero(self, client, user):
        body = _score(client, user["id"])
        assert body["score"] == 0
        assert body["risk_level"] == "LOW"
        assert all(v == 0 for v in body["factors"].values())

    def test_short_sleep_and_high_stress(self, client, user):
        _submit_days(client, user["id"], 7, sleep=4.5, stress=8)
        body = _score(client, user["id"])
        assert body["factors"]["sleep_deficit"] == pytest.approx(100.0)
        assert body["factors"]["stress_trend"] == pytest.approx(80.0)
        assert body["score"] == 49
        assert body["risk_level"] == "MODERATE"

    def test_high_priority_deadlines_saturate(self, client, user):
        due = (datetime.now(tz=timezone.utc) + timedelta(days=3)).isoformat()
        for i in range(6):
            client.post(f"/users/{user['id']}/assignments", json={
                "title": f"Task {i}", "due_date": due, "priority": "HIGH",
            })
        body = _score(client, user["id"])
        assert body["factors"]["deadline_density"] == pytest.approx(100.0)
        assert body["score"] == 20

    def test_offset_deadline_near_window_edge(self, client, user):
        plus_five = timezone(timedelta(hours=5))
        due = (datetime.now(tz=timezone.utc) + timedelta(days=7, hours=-2)).astimezone(plus_five)
        client.post(f"/users/{user['id']}/assignments", json={
            "title": "Near the edge", "due_date": due.isoformat(),
        })
        assert _score(client, user["id"])["factors"]["deadline_density"] == pytest.approx(20.0)

    def test_completed_assignments_ignored(self, client, user):
        due = (datetime.now(tz=timezone.utc) + timedelta(days=2)).isoformat()
        created = client.post(f"/users/{user['id']}/assignments", json={
            "title": "Done", "due_date": due,
        }).json()
        client.post(f"/users/{user['id']}/assignments/{created['id']}/complete")
        assert _score(client, user["id"])["factors"]["deadline_density"] == 0

    def test_attendance_drop(self, client, user):
        url = f"/users/{user['id']}/academic-snapshots"
        client.post(url, json={"attendance_percent": 90, "recorded_on": str(_today() - timedelta(days=7))})
        client.post(url, json={"attendance_percent": 80})
        assert _score(client, user["id"])["factors"]["attendance_drop"] == pytest.approx(50.0)

    def test_history_newest_first(self, client, user):
        _score(client, user["id"])
        _submit_days(client, user["id"], 7, sleep=4.5, stress=8)
        _score(client, user["id"])

        r = client.get(f"/users/{user['id']}/burnout/history")
        assert r.status_code == 200
        body = r.json()
        assert body["total"] == 2
        assert [i["score"] for i in body["items"]] == [49, 0]

        page = client.get(f"/users/{user['id']}/burnout/history", params={"limit": 1, "offset": 1}).json()
        assert page["total"] == 2
        assert [i["score"] for i in page["items"]] == [0]


class TestPredictiveAlerts:
    def _sleep_crash(self, client, user_id):
        _submit_days(client, user_id, 7, sleep=4.5)
        _submit_days(client, user_id, 7, start=7, sleep=8.0)

    def test_too_few_check_ins(self, client, user):
        _submit_days(client, user["id"], 6, sleep=3.0, mood=2, stress=9)
        body = client.get(f"/users/{user['id']}/predictive-alerts").json()
        assert body == {"generated": 0, "items": []}

    def test_sleep_crisis_generated_once(self, client, user):
        self._sleep_crash(client, user["id"])
        url = f"/users/{user['id']}/predictive-alerts"

        first = client.get(url).json()
        assert first["generated"] == 1
        alert = first["items"][0]
        assert alert["alert_type"] == "SLEEP_CRISIS"
        assert alert["severity"] == "CRITICAL"
        assert alert["days_ahead"] == 3
        assert alert["dismissed"] is False

        second = client.get(url).json()
        assert second["generated"] == 0
        assert [a["id"] for a in second["items"]] == [alert["id"]]

    def test_dismiss_then_regenerate(self, client, user):
        self._sleep_crash(client, user["id"])
        url = f"/users/{user['id']}/predictive-alerts"
        alert_id = client.get(url).json()["items"][0]["id"]

        r = client.post(f"{url}/{alert_id}/dismiss")
        assert r.status_code == 200
        assert r.json()["dismissed"] is True
        assert r.json()["dismissed_at"] is not None

        again = client.post(f"{url}/{alert_id}/dismiss")
        assert again.status_code == 200
        assert again.json()["dismissed_at"] == r.json()["dismissed_at"]

        regenerated = client.get(url).json()
        assert regenerated["generated"] == 1
        assert regenerated["items"][0]["id"] != alert_id

    def test_burnout_warning_uses_stored_score(self, client, user):
        _submit_days(client, user["id"], 7, sleep=4.5, stress=9, mood=7)
        due = (datetime.now(tz=timezone.utc) + timedelta(days=2)).isoformat()
        for i in range(5):
            client.post(f"/users/{user['id']}/assignments", json={
                "title": f"Task {i}", "due_date": due, "priority": "HIGH",
            })
        assert _score(client, user["id"])["score"] > 60

        types = {a["alert_type"] for a in client.get(f"/users/{user['id']}/predictive-alerts").json()["items"]}
        assert types == {"BURNOUT_WARNING", "STRESS_SPIKE"}

    def test_dismiss_unknown_alert(self, client, user):
        r = client.post(f"/users/{user['id']}/predictive-alerts/999999/dismiss")
        assert r.status_code == 404
        assert r.json()["code"] == "ALERT_NOT_FOUND"

    def test_cannot_dismiss_another_users_alert(self, client, user):
        other = _new_user(client)
        self._sleep_crash(client, other["id"])
        alert_id = client.get(f"/users/{other['id']}/predictive-alerts").json()["items"][0]["id"]
        r = client.post(f"/users/{user['id']}/predictive-alerts/{alert_id}/dismiss")
        assert r.status_code == 404


class TestRecommendations:
    def test_requires_a_stored_score(self, client, user):
        r = client.post(f"/users/{user['id']}/recommendations")
        assert r.status_code == 409
        assert r.json()["code"] == "NO_BURNOUT_DATA"

    def test_generated_from_latest_score(self, client, user):
        _submit_days(client, user["id"], 7, sleep=4.5, stress=8, energy=3)
        _score(client, user["id"])

        r = client.post(f"/users/{user['id']}/recommendations")
        assert r.status_code == 201
        assert [rec["type"] for rec in r.json()] == [
            "REST_PLAN",
            "WELLNESS_TIP",
            "ACTIVITY_SUGGESTION",
            "BREAK_REMINDER",
        ]

        stored = client.get(f"/users/{user['id']}/recommendations").json()
        assert len(stored) == 4

    def test_calm_student_gets_break_reminder_only(self, client, user):
        _submit_days(client, user["id"], 7)
        _score(client, user["id"])
        recs = client.post(f"/users/{user['id']}/recommendations").json()
        assert [rec["type"] for rec in recs] == ["BREAK_REMINDER"]


class TestMoodInsights:
    def test_empty(self, client, user):
        r = client.get(f"/users/{user['id']}/mood-insights")
        assert r.status_code == 200
        body = r.json()
        assert body["avg_mood"] == 0
        assert body["mood_trend"] == "STABLE"
        assert body["top_stressor"] is None

    def test_declining_mood(self, client, user):
        _submit_days(client, user["id"], 7, mood=3, stress=8)
        _submit_days(client, user["id"], 7, start=7, mood=8, stress=8)
        body = client.get(f"/users/{user['id']}/mood-insights").json()
        assert body["avg_mood"] == pytest.approx(5.5)
        assert body["mood_trend"] == "DECLINING"
        assert body["top_stressor"] == "High academic pressure"
        assert body["best_day_of_week"] is not None


class TestMentorOverview:
    def _flagged_ids(self, client) -> set:
        return {s["id"] for s in client.get("/mentor/students").json()["students"]}

    def test_moderate_consenting_student_listed(self, client):
        student = _new_user(client)
        _submit_days(client, student["id"], 7, sleep=4.5, stress=8)
        _score(client, student["id"])

        body = client.get("/mentor/students").json()
        entry = next(s for s in body["students"] if s["id"] == student["id"])
        assert entry["burnout_score"] == 49
        assert entry["risk_level"] == "MODERATE"
        assert entry["last_check_in"] == str(_today())
        assert body["stats"]["moderate"] >= 1

    def test_non_consenting_student_hidden(self, client):
        before = client.get("/mentor/students").json()["stats"]["total"]
        student = _new_user(client, share_with_mentors=False)
        _submit_days(client, student["id"], 7, sleep=4.5, stress=8)
        _score(client, student["id"])

        body = client.get("/mentor/students").json()
        assert student["id"] not in {s["id"] for s in body["students"]}
        assert body["stats"]["total"] == before

    def test_opting_out_removes_student(self, client):
        student = _new_user(client)
        _submit_days(client, student["id"], 7, sleep=4.5, stress=8)
        _score(client, student["id"])
        assert student["id"] in self._flagged_ids(client)

        client.put(f"/users/{student['id']}/privacy", json={"share_with_mentors": False})
        assert student["id"] not in self._flagged_ids(client)

    def test_low_risk_student_not_listed(self, client):
        student = _new_user(client)
        _submit_days(client, student["id"], 7)
        assert _score(client, student["id"])["risk_level"] == "LOW"
        assert student["id"] not in self._flagged_ids(client)

    def test_sorted_by_score_descending(self, client):
        scores = [s["burnout_score"] for s in client.get("/mentor/students").json()["students"]]
        assert scores == sorted(scores, reverse=True)
