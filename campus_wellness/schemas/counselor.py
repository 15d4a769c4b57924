"""
Counselor booking schemas.

POST /users/{id}/counselor-sessions → CounselorSessionRequest → CounselorSessionResponse
"""
from __future__ import annotations

from datetime import date
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field

from campus_wellness.models.counselor_session import SessionType


class CounselorSessionRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    session_type: SessionType = Field(default=SessionType.PERSONAL)
    session_date: date = Field(examples=["2026-02-24"])
    time_slot: Annotated[str, Field(
        pattern=r"^(0[1-9]|1[0-2]):[0-5][0-9] (AM|PM)$",
        description="12-hour slot label.",
        examples=["02:00 PM"],
    )]
    anonymous: bool = Field(
        default=False,
        description="Ask the counselor not to see the student's name.",
    )
    notes: Optional[str] = Field(default=None, max_length=2_000)


class CounselorSessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    session_type: str
    session_date: str
    time_slot: str
    anonymous: bool
    notes: Optional[str]
    status: str = Field(description='"PENDING" | "CONFIRMED" | "COMPLETED" | "CANCELLED"')
    created_at: str
