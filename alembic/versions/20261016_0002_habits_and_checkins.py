"""habits and daily check-ins

Revision ID: 20261016_0002
Revises: 20261016_0001
Create Date: 2026-10-16
"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


revision: str = "20261016_0002"
down_revision: Union[str, None] = "20261016_0001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "habits",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("owner_id", sa.String(length=450), nullable=False),
        sa.Column("workspace_id", sa.Integer(), sa.ForeignKey("workspaces.id", ondelete="CASCADE"), nullable=False),
        sa.Column("strategy_id", sa.Integer(), sa.ForeignKey("strategies.id", ondelete="SET NULL"), nullable=True),
        sa.Column("title", sa.String(length=200), nullable=False),
        sa.Column("description", sa.String(length=2000), nullable=True),
        sa.Column("frequency", sa.String(length=16), nullable=False, server_default="Daily"),
        sa.Column("target_count", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("is_active", sa.Boolean(), nullable=False, server_default=sa.true()),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.Column("updated_at", sa.DateTime(), nullable=True),
        sa.CheckConstraint("target_count >= 1", name="ck_habits_target_count_positive"),
    )
    op.create_index("ix_habits_owner_id", "habits", ["owner_id"], unique=False)
    op.create_index("ix_habits_workspace_id", "habits", ["workspace_id"], unique=False)
    op.create_index("ix_habits_strategy_id", "habits", ["strategy_id"], unique=False)

    op.create_table(
        "habit_checkins",
        sa.Column("id", sa.Integer(), primary_key=True),
        sa.Column("habit_id", sa.Integer(), nullable=False),
        sa.Column("owner_id", sa.String(length=450), nullable=False),
        sa.Column("occurred_on", sa.Date(), nullable=False),
        sa.Column("count", sa.Integer(), nullable=False, server_default="1"),
        sa.Column("note", sa.String(length=500), nullable=True),
        sa.Column("created_at", sa.DateTime(), nullable=False, server_default=sa.func.now()),
        sa.UniqueConstraint("habit_id", "owner_id", "occurred_on", name="uq_habit_checkin_per_day"),
    )
    op.create_index("ix_habit_checkins_habit_id", "habit_checkins", ["habit_id"], unique=False)
    op.create_index("ix_habit_checkins_owner_id", "habit_checkins", ["owner_id"], unique=False)
    op.create_index("ix_habit_checkins_occurred_on", "habit_checkins", ["occurred_on"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_habit_checkins_occurred_on", table_name="habit_checkins")
    op.drop_index("ix_habit_checkins_owner_id", table_name="habit_checkins")
    op.drop_index("ix_habit_checkins_habit_id", table_name="habit_checkins")
    op.drop_table("habit_checkins")

    op.drop_index("ix_habits_strategy_id", table_name="habits")
    op.drop_index("ix_habits_workspace_id", table_name="habits")
    op.drop_index("ix_habits_owner_id", table_name="habits")
    op.drop_table("habits")
