# This project was developed with assistance from AI tools.
"""add applications and document requests

Revision ID: 3a1f9c2d7e40
Revises:
Create Date: 2026-09-28 10:12:41.503118

"""

import sqlalchemy as sa
from alembic import op

revision = "3a1f9c2d7e40"
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    op.create_table(
        "applications",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("resident_id", sa.String(255), nullable=False),
        sa.Column("status", sa.String(50), nullable=False, server_default="draft"),
        sa.Column("submitted_at", sa.DateTime(timezone=True), nullable=True),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column(
            "updated_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index("ix_applications_resident_id", "applications", ["resident_id"])
    op.create_index(
        "ix_applications_resident_submitted", "applications", ["resident_id", "submitted_at"]
    )

    op.create_table(
        "document_requests",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("token", sa.String(64), nullable=False),
        sa.Column("application_id", sa.Integer(), nullable=False),
        sa.Column("document_type_id", sa.String(100), nullable=False),
        sa.Column("applicant_type", sa.String(50), nullable=False, server_default="general"),
        sa.Column("applicant_uuid", sa.String(36), nullable=True),
        sa.Column("applicant_name", sa.String(255), nullable=True),
        sa.Column("custom_message", sa.Text(), nullable=True),
        sa.Column("requested_by", sa.String(255), nullable=True),
        sa.Column("status", sa.String(50), nullable=False, server_default="pending"),
        sa.Column(
            "requested_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.Column("expires_at", sa.DateTime(timezone=True), nullable=False),
        sa.Column(
            "created_at", sa.DateTime(timezone=True), server_default=sa.text("now()"), nullable=False
        ),
        sa.ForeignKeyConstraint(["application_id"], ["applications.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
        sa.UniqueConstraint("token"),
    )
    op.create_index(
        "ix_document_requests_application_id", "document_requests", ["application_id"]
    )
    op.create_index(
        "ix_document_requests_app_status", "document_requests", ["application_id", "status"]
    )


def downgrade() -> None:
    op.drop_index("ix_document_requests_app_status", table_name="document_requests")
    op.drop_index("ix_document_requests_application_id", table_name="document_requests")
    op.drop_table("document_requests")
    op.drop_index("ix_applications_resident_submitted", table_name="applications")
    op.drop_index("ix_applications_resident_id", table_name="applications")
    op.drop_table("applications")
