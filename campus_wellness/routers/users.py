"""
Users router.

POST /users
GET  /users/{user_id}
PUT  /users/{user_id}/privacy
"""
from __future__ import annotations

from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from campus_wellness.db.base import get_db
from campus_wellness.models.user import User
from campus_wellness.schemas.common import error_responses
from campus_wellness.schemas.users import PrivacyUpdateRequest, UserCreateRequest, UserResponse
from campus_wellness.services.users import create_user, get_user, update_privacy

router = APIRouter(prefix="/users", tags=["users"])


def _ev(v) -> str:
    return v.value if hasattr(v, "value") else str(v)


def user_to_response(user: User) -> UserResponse:
    return UserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        role=_ev(user.role),
        share_with_mentors=user.share_with_mentors,
        created_at=user.created_at.isoformat() if user.created_at else "",
    )


@router.post(
    "",
    response_model=UserResponse,
    status_code=status.HTTP_201_CREATED,
    summary="Register a student or mentor",
    responses=error_responses(409, 422),
)
def register_user(payload: UserCreateRequest, db: Session = Depends(get_db)):
    """Create a user. Raises **409** if the email is already registered."""
    user = create_user(
        db=db,
        email=payload.email,
        name=payload.name,
        role=payload.role,
        share_with_mentors=payload.share_with_mentors,
    )
    return user_to_response(user)


@router.get(
    "/{user_id}",
    response_model=UserResponse,
    summary="Fetch a user",
    responses=error_responses(404),
)
def read_user(user_id: int, db: Session = Depends(get_db)):
    return user_to_response(get_user(db, user_id))


@router.put(
    "/{user_id}/privacy",
    response_model=UserResponse,
    summary="Update mentor data-sharing consent",
    responses=error_responses(404, 422),
)
def set_privacy(user_id: int, payload: PrivacyUpdateRequest, db: Session = Depends(get_db)):
    """
    Toggle `share_with_mentors`. Students who opt out are excluded from
    `GET /mentor/students` entirely.
    """
    user = update_privacy(db, user_id, payload.share_with_mentors)
    return user_to_response(user)
