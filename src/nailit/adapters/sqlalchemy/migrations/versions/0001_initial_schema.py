"""Initial owner, project and email message schema.

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-19 09:00:00
"""

from __future__ import annotations

import sqlalchemy as sa
from alembic import op

revision = "0001_initial_schema"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "owner",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("email", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_owner"),
        sa.UniqueConstraint("email", name="uq_owner_email"),
    )
    op.create_table(
        "project",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("description", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_project"),
    )
    op.create_index("ix_project_owner_id", "project", ["owner_id"])
    op.create_table(
        "email_message",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("external_message_id", sa.String(), nullable=False),
        sa.Column("subject", sa.String(), nullable=True),
        sa.Column("owner_id", sa.String(), nullable=False),
        sa.Column("project_id", sa.String(), nullable=True),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.PrimaryKeyConstraint("id", name="pk_email_message"),
        sa.UniqueConstraint(
            "external_message_id", name="uq_email_message_external_message_id"
        ),
    )
    op.create_index("ix_email_message_owner_id", "email_message", ["owner_id"])
    op.create_index("ix_email_message_project_id", "email_message", ["project_id"])
    op.create_index("ix_email_message_created_at", "email_message", ["created_at"])


def downgrade() -> None:
    op.drop_index("ix_email_message_created_at", table_name="email_message")
    op.drop_index("ix_email_message_project_id", table_name="email_message")
    op.drop_index("ix_email_message_owner_id", table_name="email_message")
    op.drop_table("email_message")
    op.drop_index("ix_project_owner_id", table_name="project")
    op.drop_table("project")
    op.drop_table("owner")
