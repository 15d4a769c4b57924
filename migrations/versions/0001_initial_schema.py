"""initial schema

Revision ID: 0001
Revises:
Create Date: 2026-10-19 00:00:00.000000

Users plus the three scoring inputs (check-ins, assignments, academic
snapshots) and the append-only burnout_scores output table.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "0001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # --- ENUM types ---
    user_role_enum = sa.Enum("STUDENT", "MENTOR", "ADMIN", name="user_role_enum")
    user_role_enum.create(op.get_bind(), checkfirst=True)

    priority_enum = sa.Enum("LOW", "MEDIUM", "HIGH", name="priority_enum")
    priority_enum.create(op.get_bind(), checkfirst=True)

    risk_level_enum = sa.Enum("LOW", "MODERATE", "HIGH", "CRITICAL", name="risk_level_enum")
    risk_level_enum.create(op.get_bind(), checkfirst=True)

    # --- users ---
    op.create_table(
        "users",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("name", sa.String(128), nullable=True),
        sa.Column("email", sa.String(256), nullable=False),
        sa.Column("role", sa.Enum(
            "STUDENT", "MENTOR", "ADMIN", name="user_role_enum", create_type=False,
        ), nullable=False),
        sa.Column("share_with_mentors", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_users_id", "users", ["id"])
    op.create_index("ix_users_email", "users", ["email"], unique=True)

    # --- daily_check_ins ---
    op.create_table(
        "daily_check_ins",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("day", sa.Date(), nullable=False),
        sa.Column("mood", sa.Integer(), nullable=False),
        sa.Column("sleep_hours", sa.Float(), nullable=False),
        sa.Column("stress_level", sa.Integer(), nullable=False),
        sa.Column("energy_level", sa.Integer(), nullable=False),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("user_id", "day", name="uq_check_in_user_day"),
    )
    op.create_index("ix_daily_check_ins_id", "daily_check_ins", ["id"])
    op.create_index("ix_daily_check_ins_user_id", "daily_check_ins", ["user_id"])
    op.create_index("ix_daily_check_ins_day", "daily_check_ins", ["day"])

    # --- assignments ---
    op.create_table(
        "assignments",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("title", sa.String(256), nullable=False),
        sa.Column("description", sa.Text(), nullable=True),
        sa.Column("due_date", sa.DateTime(timezone=True), nullable=False),
        sa.Column("priority", sa.Enum(
            "LOW", "MEDIUM", "HIGH", name="priority_enum", create_type=False,
        ), nullable=False),
        sa.Column("completed", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_assignments_id", "assignments", ["id"])
    op.create_index("ix_assignments_user_id", "assignments", ["user_id"])
    op.create_index("ix_assignments_due_date", "assignments", ["due_date"])

    # --- academic_snapshots ---
    op.create_table(
        "academic_snapshots",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("recorded_on", sa.Date(), nullable=False),
        sa.Column("attendance_percent", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_academic_snapshots_id", "academic_snapshots", ["id"])
    op.create_index("ix_academic_snapshots_user_id", "academic_snapshots", ["user_id"])
    op.create_index("ix_academic_snapshots_recorded_on", "academic_snapshots", ["recorded_on"])

    # --- burnout_scores ---
    op.create_table(
        "burnout_scores",
        sa.Column("id", sa.Integer(), nullable=False),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("score", sa.Integer(), nullable=False),
        sa.Column("risk_level", sa.Enum(
            "LOW", "MODERATE", "HIGH", "CRITICAL", name="risk_level_enum", create_type=False,
        ), nullable=False),
        sa.Column("sleep_deficit", sa.Float(), nullable=False),
        sa.Column("stress_trend", sa.Float(), nullable=False),
        sa.Column("deadline_density", sa.Float(), nullable=False),
        sa.Column("attendance_drop", sa.Float(), nullable=False),
        sa.Column("activity_change", sa.Float(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_burnout_scores_id", "burnout_scores", ["id"])
    op.create_index("ix_burnout_scores_user_id", "burnout_scores", ["user_id"])
    op.create_index("ix_burnout_scores_created_at", "burnout_scores", ["created_at"])


def downgrade() -> None:
    op.drop_table("burnout_scores")
    op.drop_table("academic_snapshots")
    op.drop_table("assignments")
    op.drop_table("daily_check_ins")
    op.drop_table("users")
    sa.Enum(name="risk_level_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="priority_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="user_role_enum").drop(op.get_bind(), checkfirst=True)
