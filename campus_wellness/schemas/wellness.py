"""
Recommendation and mood-insight schemas.
"""
from typing import Optional
from pydantic import BaseModel, ConfigDict, Field


class RecommendationResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    type: str = Field(
        description='"REST_PLAN" | "STUDY_PACING" | "BREAK_REMINDER" | "WELLNESS_TIP" | "ACTIVITY_SUGGESTION"'
    )
    title: str
    description: str
    created_at: str


class MoodInsightResponse(BaseModel):
    avg_mood: float
    avg_sleep: float
    avg_stress: float
    avg_energy: float
    mood_trend: str = Field(description='"IMPROVING" | "STABLE" | "DECLINING"')
    top_stressor: Optional[str] = None
    best_day_of_week: Optional[str] = None
    worst_day_of_week: Optional[str] = None
