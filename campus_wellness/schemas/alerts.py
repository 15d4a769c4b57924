"""
Predictive alert schemas.

GET  /users/{id}/predictive-alerts                   → PredictiveAlertListResponse
POST /users/{id}/predictive-alerts/{alert_id}/dismiss → PredictiveAlertResponse
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class PredictiveAlertResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    alert_type: str = Field(
        description='"SLEEP_CRISIS" | "BURNOUT_WARNING" | "STRESS_SPIKE" | "MOOD_DECLINE"'
    )
    severity: str = Field(description='"LOW" | "MEDIUM" | "HIGH" | "CRITICAL"')
    prediction: str
    recommendation: str
    days_ahead: int = Field(description="Lead time of the warning, in days.")
    dismissed: bool
    dismissed_at: Optional[str] = None
    created_at: str


class PredictiveAlertListResponse(BaseModel):
    generated: int = Field(description="Alerts created by this request (0 if gated off).")
    items: list[PredictiveAlertResponse] = Field(description="Active alerts, newest first.")
