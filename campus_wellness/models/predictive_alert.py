"""
PredictiveAlertRecord — persisted output of the predictive-alert generator.

Lifecycle: CREATED -> ACTIVE (dismissed = False) -> DISMISSED (terminal).
A dismissed alert is never reactivated; new alerts are only generated once
the user has no active alerts left.
"""
from datetime import datetime
from sqlalchemy import Integer, Text, Boolean, DateTime, Enum, ForeignKey, func
from sqlalchemy.orm import Mapped, mapped_column

from campus_wellness.db.base import Base
from campus_wellness.engine.types import AlertType, Severity


class PredictiveAlertRecord(Base):
    __tablename__ = "predictive_alerts"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    user_id: Mapped[int] = mapped_column(
        Integer, ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    alert_type: Mapped[str] = mapped_column(
        Enum(AlertType, name="alert_type_enum"), nullable=False
    )
    severity: Mapped[str] = mapped_column(
        Enum(Severity, name="severity_enum"), nullable=False
    )
    prediction: Mapped[str] = mapped_column(Text, nullable=False)
    recommendation: Mapped[str] = mapped_column(Text, nullable=False)
    days_ahead: Mapped[int] = mapped_column(Integer, nullable=False)
    dismissed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False, index=True)
    dismissed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
