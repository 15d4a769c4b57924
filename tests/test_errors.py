"""
Tests for error handling: structured error responses, HTTP status codes,
and the custom exception classes.
"""
from datetime import date

import pytest

from campus_wellness.core.errors import (
    AlertNotFoundError,
    AssignmentNotFoundError,
    CounselorSessionNotFoundError,
    EmailAlreadyRegisteredError,
    NoBurnoutDataError,
    SessionDateInPastError,
    SessionNotCancellableError,
    UserNotFoundError,
    WellnessException,
)


# ---------------------------------------------------------------------------
# Unit tests on exception classes
# ---------------------------------------------------------------------------

class TestExceptionClasses:
    def test_user_not_found_error(self):
        err = UserNotFoundError(user_id=42)
        assert err.http_status == 404
        assert err.code == "USER_NOT_FOUND"
        assert "42" in err.message
        d = err.to_dict()
        assert d["code"] == "USER_NOT_FOUND"
        assert d["details"]["user_id"] == 42

    def test_email_already_registered_error(self):
        err = EmailAlreadyRegisteredError(email="ana@campus.edu")
        assert err.http_status == 409
        assert err.code == "EMAIL_ALREADY_REGISTERED"
        assert err.details["email"] == "ana@campus.edu"

    def test_assignment_not_found_error(self):
        err = AssignmentNotFoundError(assignment_id=7)
        assert err.http_status == 404
        assert err.code == "ASSIGNMENT_NOT_FOUND"
        assert err.to_dict()["details"]["assignment_id"] == 7

    def test_alert_not_found_error(self):
        err = AlertNotFoundError(alert_id=3)
        assert err.http_status == 404
        assert err.code == "ALERT_NOT_FOUND"

    def test_no_burnout_data_error(self):
        err = NoBurnoutDataError(user_id=1)
        assert err.http_status == 409
        assert err.code == "NO_BURNOUT_DATA"

    def test_counselor_session_errors(self):
        assert CounselorSessionNotFoundError(session_id=5).http_status == 404
        past = SessionDateInPastError(date(2026, 3, 1))
        assert past.http_status == 422
        assert past.details["session_date"] == "2026-03-01"
        closed = SessionNotCancellableError(session_id=5, current_status="COMPLETED")
        assert closed.http_status == 409
        assert closed.code == "SESSION_NOT_CANCELLABLE"
        assert closed.to_dict()["details"] == {"session_id": 5, "status": "COMPLETED"}

    def test_to_dict_without_details(self):
        err = WellnessException("boom")
        d = err.to_dict()
        assert d == {"code": "INTERNAL_ERROR", "message": "boom"}
        # details should not be in dict when empty
        assert "details" not in d


# ---------------------------------------------------------------------------
# Integration tests on HTTP error responses
# ---------------------------------------------------------------------------

def _check_in(**overrides) -> dict:
    body = {"mood": 6, "sleep_hours": 7.0, "stress_level": 4, "energy_level": 6}
    body.update(overrides)
    return body


class TestValidationErrors:
    @pytest.mark.parametrize("field,value", [
        ("mood", 0),
        ("mood", 11),
        ("stress_level", 11),
        ("energy_level", 0),
        ("sleep_hours", -0.5),
        ("sleep_hours", 24.5),
    ])
    def test_out_of_range_check_in_rejected(self, client, user, field, value):
        r = client.post(f"/users/{user['id']}/check-ins", json=_check_in(**{field: value}))
        assert r.status_code == 422
        body = r.json()
        assert body["code"] == "VALIDATION_ERROR"
        fields = [e["field"] for e in body["details"]["errors"]]
        assert any(field in f for f in fields)

    def test_missing_field_returns_validation_error(self, client, user):
        body = _check_in()
        del body["mood"]
        r = client.post(f"/users/{user['id']}/check-ins", json=body)
        assert r.status_code == 422
        assert isinstance(r.json()["details"]["errors"], list)

    def test_invalid_day_format_returns_validation_error(self, client, user):
        r = client.post(f"/users/{user['id']}/check-ins", json=_check_in(day="not-a-date"))
        assert r.status_code == 422
        assert r.json()["code"] == "VALIDATION_ERROR"

    def test_blank_assignment_title(self, client, user):
        r = client.post(f"/users/{user['id']}/assignments", json={
            "title": "   ",
            "due_date": "2026-04-01T12:00:00Z",
        })
        assert r.status_code == 422
        assert r.json()["code"] == "VALIDATION_ERROR"

    @pytest.mark.parametrize("priority", ["URGENT", "high", ""])
    def test_invalid_priority(self, client, user, priority):
        r = client.post(f"/users/{user['id']}/assignments", json={
            "title": "Essay",
            "due_date": "2026-04-01T12:00:00Z",
            "priority": priority,
        })
        assert r.status_code == 422

    @pytest.mark.parametrize("attendance", [-1, 100.5])
    def test_attendance_out_of_range(self, client, user, attendance):
        r = client.post(
            f"/users/{user['id']}/academic-snapshots",
            json={"attendance_percent": attendance},
        )
        assert r.status_code == 422

    def test_invalid_email(self, client):
        r = client.post("/users", json={"email": "not-an-email"})
        assert r.status_code == 422
        assert r.json()["code"] == "VALIDATION_ERROR"


class TestNotFoundErrors:
    @pytest.mark.parametrize("path", [
        "/users/999999",
        "/users/999999/check-ins",
        "/users/999999/burnout",
        "/users/999999/predictive-alerts",
        "/users/999999/mood-insights",
        "/users/999999/recommendations",
        "/users/999999/counselor-sessions",
    ])
    def test_unknown_user(self, client, path):
        r = client.get(path)
        assert r.status_code == 404
        body = r.json()
        assert body["code"] == "USER_NOT_FOUND"
        assert body["details"]["user_id"] == 999999

    def test_check_in_for_unknown_user(self, client):
        r = client.post("/users/999999/check-ins", json=_check_in())
        assert r.status_code == 404
        assert r.json()["code"] == "USER_NOT_FOUND"
