"""
User schemas.

POST /users                → UserCreateRequest → UserResponse
PUT  /users/{id}/privacy   → PrivacyUpdateRequest → UserResponse
"""
from __future__ import annotations

from typing import Annotated, Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from campus_wellness.models.user import UserRole


class UserCreateRequest(BaseModel):
    model_config = ConfigDict(use_enum_values=True)

    name: Optional[str] = Field(default=None, max_length=128, examples=["Ana Torres"])
    email: Annotated[str, Field(
        min_length=3,
        max_length=256,
        pattern=r"^[^@\s]+@[^@\s]+$",
        description="Unique login email. Stored lower-cased.",
        examples=["ana@campus.edu"],
    )]
    role: UserRole = Field(default=UserRole.STUDENT)
    share_with_mentors: bool = Field(
        default=True,
        description="Consent to appear in the mentor risk overview.",
    )

    @field_validator("email")
    @classmethod
    def normalise_email(cls, v: str) -> str:
        return v.strip().lower()


class PrivacyUpdateRequest(BaseModel):
    share_with_mentors: bool


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    name: Optional[str]
    email: str
    role: str
    share_with_mentors: bool
    created_at: str
