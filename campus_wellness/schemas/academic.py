"""
Academic input schemas: assignments and attendance snapshots.
"""
from __future__ import annotations

from datetime import date, datetime
from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campus_wellness.engine.types import Priority


class AssignmentCreateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    title: Annotated[str, Field(min_length=1, max_length=256, examples=["Chemistry Lab Report"])]
    description: Optional[str] = Field(default=None, max_length=5_000)
    due_date: datetime = Field(
        description="Deadline. Naive timestamps are taken as UTC.",
        examples=["2026-02-24T23:59:00Z"],
    )
    priority: Priority = Field(default=Priority.MEDIUM)

    @field_validator("title", mode="before")
    @classmethod
    def strip_and_check_empty(cls, v: str) -> str:
        stripped = v.strip() if isinstance(v, str) else v
        if not stripped:
            raise ValueError("title must not be empty after stripping whitespace")
        return stripped


class AssignmentResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    title: str
    description: Optional[str]
    due_date: str
    priority: str
    completed: bool


class AcademicSnapshotRequest(BaseModel):
    attendance_percent: float = Field(ge=0, le=100, examples=[82.5])
    recorded_on: Optional[date] = Field(
        default=None,
        description="Day the attendance figure applies to. Defaults to today (UTC).",
    )


class AcademicSnapshotResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    recorded_on: str
    attendance_percent: float
