"""
============================================================
CRC CARD (Class / Responsibilities / Collaborators)
============================================================
Class: 001_foundation (Alembic Migration)

Responsibilities:
  - Create the full schema from scratch (baseline migration).
  - Tables: users, user_otps, user_device_tokens, work_hours, notes.

Collaborators:
  - PostgreSQL 14+
  - infrastructure/repositories/postgres (uses this schema as contract)

Policy:
  - Baseline migration. Downgrade drops everything.
  - Naming convention:
      pk_<table>                         - Primary keys
      uq_<table>_<col>                   - Unique constraints
      ix_<table>_<col>                   - Indexes
      fk_<table>_<col>__<ref_table>      - Foreign keys
============================================================
"""

from typing import Sequence, Union

import sqlalchemy as sa
from alembic import op

revision: str = "001_foundation"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column(
            "created_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
        sa.Column(
            "updated_at",
            sa.DateTime(timezone=True),
            server_default=sa.text("now()"),
            nullable=False,
        ),
    ]


def upgrade() -> None:
    # =========================================================
    # 1) IDENTITY
    # =========================================================
    op.create_table(
        "users",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("first_name", sa.String(255), nullable=False),
        sa.Column("last_name", sa.String(255), nullable=True),
        sa.Column("country_code", sa.String(8), nullable=False),
        sa.Column("mobile", sa.String(20), nullable=False),
        sa.Column("email", sa.String(320), nullable=True),
        sa.Column("account_id", sa.String(32), nullable=False),
        # role/status are strings to avoid DB enum coupling.
        sa.Column(
            "role", sa.String(20), nullable=False, server_default=sa.text("'User'")
        ),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'Active'"),
        ),
        *_timestamps(),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_users"),
        sa.UniqueConstraint("account_id", name="uq_users_account_id"),
    )
    op.create_index("ix_users_country_code", "users", ["country_code", "mobile"])

    op.create_table(
        "user_otps",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("country_code", sa.String(8), nullable=False),
        sa.Column("mobile", sa.String(20), nullable=False),
        sa.Column("otp", sa.String(6), nullable=False),
        sa.Column(
            "status",
            sa.String(20),
            nullable=False,
            server_default=sa.text("'Active'"),
        ),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_user_otps"),
    )
    op.create_index(
        "ix_user_otps_country_code", "user_otps", ["country_code", "mobile"]
    )

    op.create_table(
        "user_device_tokens",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("user_id", sa.BigInteger, nullable=False),
        sa.Column("token", sa.String(512), nullable=False),
        *_timestamps(),
        sa.PrimaryKeyConstraint("id", name="pk_user_device_tokens"),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_user_device_tokens_user_id__users",
            ondelete="CASCADE",
        ),
    )
    op.create_index(
        "ix_user_device_tokens_user_id", "user_device_tokens", ["user_id"]
    )

    # =========================================================
    # 2) WORK HOURS
    # =========================================================
    op.create_table(
        "work_hours",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("user_id", sa.BigInteger, nullable=False),
        # Instants are stored in UTC; timezone is the IANA name they were
        # entered in and drives month bucketing.
        sa.Column("start_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("end_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column("timezone", sa.String(64), nullable=False),
        sa.Column("total_hours", sa.String(16), nullable=False),
        sa.Column("summary", sa.Text, nullable=True),
        *_timestamps(),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_work_hours"),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_work_hours_user_id__users",
            ondelete="CASCADE",
        ),
        sa.CheckConstraint("end_at >= start_at", name="ck_work_hours_range"),
    )
    op.create_index("ix_work_hours_user_id", "work_hours", ["user_id", "start_at"])

    # =========================================================
    # 3) NOTES
    # =========================================================
    op.create_table(
        "notes",
        sa.Column("id", sa.BigInteger, sa.Identity(), nullable=False),
        sa.Column("user_id", sa.BigInteger, nullable=False),
        sa.Column("title", sa.String(255), nullable=False),
        sa.Column("description", sa.Text, nullable=True),
        *_timestamps(),
        sa.Column("deleted_at", sa.DateTime(timezone=True), nullable=True),
        sa.PrimaryKeyConstraint("id", name="pk_notes"),
        sa.ForeignKeyConstraint(
            ["user_id"],
            ["users.id"],
            name="fk_notes_user_id__users",
            ondelete="CASCADE",
        ),
    )
    op.create_index("ix_notes_user_id", "notes", ["user_id"])


def downgrade() -> None:
    op.drop_table("notes")
    op.drop_table("work_hours")
    op.drop_table("user_device_tokens")
    op.drop_table("user_otps")
    op.drop_table("users")
