"""Initial schema - registry_state and document_record.

Revision ID: 001
Revises:
Create Date: 2026-10-19

"""

from collections.abc import Sequence

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "001"
down_revision: str | None = None
branch_labels: str | Sequence[str] | None = None
depends_on: str | Sequence[str] | None = None


def upgrade() -> None:
    op.create_table(
        "registry_state",
        sa.Column("id", sa.SmallInteger(), primary_key=True),
        sa.Column("administrator", sa.Text(), nullable=False),
        sa.Column("sequence", sa.BigInteger(), nullable=False, server_default="0"),
        sa.CheckConstraint("id = 1", name="ck_registry_state_single_row"),
        sa.CheckConstraint("sequence >= 0", name="ck_registry_state_sequence"),
    )

    op.create_table(
        "document_record",
        sa.Column("id", sa.BigInteger(), primary_key=True, autoincrement=False),
        sa.Column("locator", sa.Text(), nullable=False),
        sa.Column("title", sa.Text(), nullable=False),
        sa.Column("content_hash", sa.LargeBinary(), nullable=False),
        sa.Column("author", sa.Text(), nullable=False),
        sa.Column("created_at", sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint("locator", name="uq_document_record_locator"),
        sa.UniqueConstraint("title", name="uq_document_record_title"),
        sa.CheckConstraint("octet_length(content_hash) = 32", name="ck_document_record_hash"),
        sa.CheckConstraint("octet_length(title) BETWEEN 1 AND 32", name="ck_document_record_title"),
    )
    op.create_index("ix_document_record_content_hash", "document_record", ["content_hash"])


def downgrade() -> None:
    op.drop_index("ix_document_record_content_hash", table_name="document_record")
    op.drop_table("document_record")
    op.drop_table("registry_state")
