"""
Daily check-in schemas.

POST /users/{id}/check-ins → CheckInRequest → CheckInResponse

Range checks live here, at the boundary: the scoring engine trusts its
inputs and only clamps its outputs.
"""
from __future__ import annotations

from datetime import date
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class CheckInRequest(BaseModel):
    """One self-reported daily wellness sample."""
    mood: int = Field(ge=1, le=10, description="1 (very low) – 10 (great).", examples=[6])
    sleep_hours: float = Field(ge=0, le=24, description="Hours slept last night.", examples=[6.5])
    stress_level: int = Field(ge=1, le=10, description="1 (calm) – 10 (overwhelmed).", examples=[7])
    energy_level: int = Field(ge=1, le=10, description="1 (drained) – 10 (energized).", examples=[5])
    notes: Optional[str] = Field(default=None, max_length=2_000)
    day: Optional[date] = Field(
        default=None,
        description="Calendar day of the check-in. Defaults to today (UTC).",
        examples=["2026-02-20"],
    )


class CheckInResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    day: str
    mood: int
    sleep_hours: float
    stress_level: int
    energy_level: int
    notes: Optional[str]
    created: bool = Field(
        default=False,
        description="True if this request created the day's check-in, False if it updated it.",
    )
