"""create_beta_table

Create the beta invite table:
- One row per issued invite code
- Unique email (optional) and unique code
- Wildcard rows are deleted when redeemed

Revision ID: 3c1f0a9d2b7e
Revises:
Create Date: 2025-11-04 10:12:41.513204

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = "3c1f0a9d2b7e"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        "beta",
        sa.Column("id", postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column("email", sa.String(length=255), nullable=True),
        sa.Column("code", sa.String(length=255), nullable=False),
        sa.Column(
            "golden_ticket",
            sa.Boolean(),
            nullable=False,
            server_default=sa.text("false"),
        ),
        sa.Column(
            "wildcard", sa.Boolean(), nullable=False, server_default=sa.text("false")
        ),
        sa.Column(
            "added_at",
            postgresql.TIMESTAMP(timezone=True),
            nullable=False,
            server_default=sa.text("NOW()"),
        ),
        sa.UniqueConstraint("email", name="beta_email_key"),
        sa.UniqueConstraint("code", name="beta_code_key"),
    )

    # Wildcard redemption looks up by code and flag
    op.create_index(
        "idx_beta_code_wildcard",
        "beta",
        ["code"],
        postgresql_where=sa.text("wildcard"),
    )


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index("idx_beta_code_wildcard", table_name="beta")
    op.drop_table("beta")
