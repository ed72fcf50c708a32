"""Letter and addendum tables.

Revision ID: 001
Revises: None
Create Date: 2026-10-18
"""

from typing import Sequence, Union

import sqlalchemy as sa

from alembic import op

revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # Assignment letters
    op.create_table(
        "letter",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("branch_name", sa.String(200), nullable=False),
        sa.Column("assigment_letter", sa.String(100), nullable=True),
        sa.Column("team", sa.Text, nullable=True),
        sa.Column("leader", sa.String(200), nullable=True),
        sa.Column("audit_start_date", sa.Date, nullable=True),
        sa.Column("audit_end_date", sa.Date, nullable=True),
        sa.Column("audit_type", sa.String(100), nullable=True),
        sa.Column("status", sa.String(30), nullable=True),
        sa.Column(
            "created_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index("idx_letter_assigment_letter", "letter", ["assigment_letter"])

    # Addendums (reference their letter by number, not by FK)
    op.create_table(
        "addendum",
        sa.Column("id", sa.Integer, primary_key=True, autoincrement=True),
        sa.Column("branch_name", sa.String(200), nullable=False),
        sa.Column("addendum_letter_no", sa.String(100), nullable=True),
        sa.Column("assignment_letter_before", sa.String(100), nullable=True),
        sa.Column("team", sa.Text, nullable=True),
        sa.Column("leader", sa.String(200), nullable=True),
        sa.Column("new_team", sa.Text, nullable=True),
        sa.Column("new_leader", sa.String(200), nullable=True),
        sa.Column("start_date", sa.Date, nullable=True),
        sa.Column("end_date", sa.Date, nullable=True),
        sa.Column("addendum_type", sa.String(100), nullable=True),
        sa.Column("status", sa.String(30), nullable=True),
        sa.Column(
            "created_at", sa.DateTime, nullable=False, server_default=sa.func.now()
        ),
    )
    op.create_index(
        "idx_addendum_letter_before", "addendum", ["assignment_letter_before"]
    )


def downgrade() -> None:
    op.drop_table("addendum")
    op.drop_table("letter")
