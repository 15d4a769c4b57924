"""
BurnoutScore — one row per scoring run. Append-only.

The newest row is the "latest stored composite score" read by the
predictive-alert generator and the mentor overview.
"""
from datetime import datetime
from sqlalchemy import Integer, Float, DateTime, Enum, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from campus_wellness.db.base import Base
from campus_wellness.engine.types import RiskLevel


class BurnoutScore(Base):
    __tablename__ = "burnout_scores"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    score: Mapped[int] = mapped_column(Integer, nullable=False)
    risk_level: Mapped[str] = mapped_column(
        Enum(RiskLevel, name="risk_level_enum"), nullable=False
    )
    sleep_deficit: Mapped[float] = mapped_column(Float, nullable=False)
    stress_trend: Mapped[float] = mapped_column(Float, nullable=False)
    deadline_density: Mapped[float] = mapped_column(Float, nullable=False)
    attendance_drop: Mapped[float] = mapped_column(Float, nullable=False)
    activity_change: Mapped[float] = mapped_column(Float, nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False, index=True
    )
