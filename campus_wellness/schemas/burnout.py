"""
Burnout score schemas.

GET /users/{id}/burnout          → BurnoutResponse
GET /users/{id}/burnout/history  → BurnoutHistoryResponse
"""
from pydantic import BaseModel, ConfigDict, Field


class BurnoutFactorsOut(BaseModel):
    """Per-factor breakdown, each 0–100, full precision."""
    sleep_deficit: float
    stress_trend: float
    deadline_density: float
    attendance_drop: float
    activity_change: float


class BurnoutResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int = Field(description="ID of the stored burnout_scores row.")
    score: int = Field(description="Composite score, 0–100.", examples=[74])
    risk_level: str = Field(description='"LOW" | "MODERATE" | "HIGH" | "CRITICAL"')
    factors: BurnoutFactorsOut
    calculated_at: str


class BurnoutHistoryResponse(BaseModel):
    total: int
    items: list[BurnoutResponse] = Field(description="Stored scores, newest first.")
