from datetime import datetime, date
from sqlalchemy import Integer, Float, DateTime, Date, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from campus_wellness.db.base import Base


class AcademicRecord(Base):
    """Periodic academic standing (attendance) for a student."""

    __tablename__ = "academic_snapshots"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    recorded_on: Mapped[date] = mapped_column(Date, nullable=False, index=True)
    attendance_percent: Mapped[float] = mapped_column(Float, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
