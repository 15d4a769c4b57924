"""
CounselorSession — a student's booking request with campus counseling.

Lifecycle: PENDING -> CONFIRMED -> COMPLETED, or CANCELLED from either of
the first two. Bookings are created PENDING; confirmation happens on the
counseling side.
"""
import enum
from datetime import date, datetime
from sqlalchemy import Integer, String, Text, Boolean, Date, DateTime, Enum, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from campus_wellness.db.base import Base


class SessionType(str, enum.Enum):
    ACADEMIC = "ACADEMIC"
    PERSONAL = "PERSONAL"
    CAREER = "CAREER"


class SessionStatus(str, enum.Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


class CounselorSession(Base):
    __tablename__ = "counselor_sessions"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    session_type: Mapped[str] = mapped_column(
        Enum(SessionType, name="session_type_enum"),
        nullable=False,
        default=SessionType.PERSONAL,
    )
    session_date: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    # Display slot as chosen by the student, e.g. "02:00 PM".
    time_slot: Mapped[str] = mapped_column(String(16), nullable=False)
    anonymous: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    status: Mapped[str] = mapped_column(
        Enum(SessionStatus, name="session_status_enum"),
        nullable=False,
        default=SessionStatus.PENDING,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
