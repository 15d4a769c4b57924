"""add counselor_sessions table

Revision ID: 0003
Revises: 0002
Create Date: 2026-10-20

Student booking requests with campus counseling. New rows start PENDING.
"""
from alembic import op
import sqlalchemy as sa

revision = "0003"
down_revision = "0002"
branch_labels = None
depends_on = None

_SESSION_TYPES = ("ACADEMIC", "PERSONAL", "CAREER")
_SESSION_STATUSES = ("PENDING", "CONFIRMED", "COMPLETED", "CANCELLED")


def upgrade() -> None:
    op.create_table(
        "counselor_sessions",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("user_id", sa.Integer(), sa.ForeignKey("users.id", ondelete="CASCADE"), nullable=False),
        sa.Column("session_type", sa.Enum(*_SESSION_TYPES, name="session_type_enum"), nullable=False),
        sa.Column("session_date", sa.Date(), nullable=False),
        sa.Column("time_slot", sa.String(16), nullable=False),
        sa.Column("anonymous", sa.Boolean(), nullable=False, server_default=sa.false()),
        sa.Column("notes", sa.Text(), nullable=True),
        sa.Column(
            "status",
            sa.Enum(*_SESSION_STATUSES, name="session_status_enum"),
            nullable=False,
            server_default="PENDING",
        ),
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.func.now(),
            nullable=False,
        ),
    )
    op.create_index("ix_counselor_sessions_user_id", "counselor_sessions", ["user_id"])
    op.create_index("ix_counselor_sessions_session_date", "counselor_sessions", ["session_date"])


def downgrade() -> None:
    op.drop_index("ix_counselor_sessions_session_date", table_name="counselor_sessions")
    op.drop_index("ix_counselor_sessions_user_id", table_name="counselor_sessions")
    op.drop_table("counselor_sessions")
    sa.Enum(name="session_status_enum").drop(op.get_bind(), checkfirst=True)
    sa.Enum(name="session_type_enum").drop(op.get_bind(), checkfirst=True)
