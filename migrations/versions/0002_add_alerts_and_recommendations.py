"""add predictive_alerts and recommendations tables

Revision ID: 0002
Revises: 0001
Create Date: 2026-10-19

predictive_alerts stores generator output; `dismissed` is the terminal
lifecycle flag. recommendations is append-only.
"""
from alembic import op
import sqlalchemy as sa

revision = "0002"
down_revision = "0001"
branch_labels = None
depends_on = None

_ALERT_TYPES = ("SLEEP_CRISIS", "BURNOUT_WARNING", "STRESS_SPIKE", "MOOD_DECLINE")
_SEVERITIES = ("LOW", "MEDIUM", "HIGH", "CRITICAL")
_RECOMMENDATION_TYPES = (
    "REST_PLAN", "STUDY_PACING", "BREAK_REMINDER", "WELLNESS_TIP", "ACTIVITY_SUGGESTION",
)


def upgrade() -> None:
    op.create_table(
        "predictive_alerts",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("alert_type", sa.Enum(*_ALERT_TYPES, name="alert_type_enum"), nullable=False),
        sa.Column("severity", sa.Enum(*_SEVERITIES, name="severity_enum"), nullable=False),
        sa.Column("prediction", sa.Text(), nullable=False),
        sa.Column("recommendation", sa.Text(), nullable=False),
        sa.Column("days_ahead", sa.Integer(), nullable=False),
        sa.Column("dismissed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("dismissed_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_predictive_alerts_user_id", "predictive_alerts", ["user_id"])
    op.create_index("ix_predictive_alerts_dismissed", "predictive_alerts", ["dismissed"])

    op.create_table(
        "recommendations",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column(
            "rec_type",
            sa.Enum(*_RECOMMENDATION_TYPES, name="recommendation_type_enum"),
            nullable=False,
        ),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=False),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_recommendations_user_id", "recommendations", ["user_id"])


def downgrade() -> None:
    op.drop_index("ix_recommendations_user_id", table_name="recommendations")
    op.drop_table("recommendations")
    op.drop_index("ix_predictive_alerts_dismissed", table_name="predictive_alerts")
    op.drop_index("ix_predictive_alerts_user_id", table_name="predictive_alerts")
    op.drop_table("predictive_alerts")
    sa.Enum(name="recommendation_type_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="severity_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="alert_type_enum").drop(op.get_bind(), checkfirst=True)
