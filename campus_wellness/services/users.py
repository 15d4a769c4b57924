"""
User service: registration, lookup, privacy consent.
"""
from __future__ import annotations

import logging
from typing import Optional

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from campus_wellness.core.errors import EmailAlreadyRegisteredError, UserNotFoundError
from campus_wellness.models.user import User, UserRole

logger = logging.getLogger(__name__)


def get_user(db: Session, user_id: int) -> User:
    """Return the user or raise UserNotFoundError."""
    user: Optional[User] = db.get(User, user_id)
    if user is None:
        raise UserNotFoundError(user_id)
    return user


def create_user(
    db: Session,
    email: str,
    name: Optional[str] = None,
    role: UserRole | str = UserRole.STUDENT,
    share_with_mentors: bool = True,
) -> User:
    if db.query(User.id).filter(User.email == email).first() is not None:
        raise EmailAlreadyRegisteredError(email)

    user = User(
        email=email,
        name=name,
        role=UserRole(role),
        share_with_mentors=share_with_mentors,
    )
    db.add(user)
    try:
        db.commit()
    except IntegrityError:
        # Concurrent registration with the same email won the race
        db.rollback()
        raise EmailAlreadyRegisteredError(email)
    db.refresh(user)
    logger.info("Registered user %d (%s)", user.id, UserRole(user.role).value)
    return user


def update_privacy(db: Session, user_id: int, share_with_mentors: bool) -> User:
    user = get_user(db, user_id)
    user.share_with_mentors = share_with_mentors
    db.commit()
    db.refresh(user)
    return user
