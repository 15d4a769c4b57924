"""
Mentor overview schemas.

GET /mentor/students → MentorOverviewResponse
"""
from typing import Optional
from pydantic import BaseModel, Field


class AtRiskStudent(BaseModel):
    id: int
    name: str
    email: str
    burnout_score: int
    risk_level: str
    last_check_in: Optional[str] = Field(default=None, description="ISO date of the newest check-in.")


class MentorStats(BaseModel):
    total: int = Field(description="Consenting students considered.")
    critical: int
    high: int
    moderate: int


class MentorOverviewResponse(BaseModel):
    students: list[AtRiskStudent] = Field(description="Highest score first.")
    stats: MentorStats
