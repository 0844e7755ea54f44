"""Create birds table

Revision ID: 001
Revises: None
Create Date: 2019-05-09 11:07:00.000000+00:00

What:  Creates the `birds` table read by GET /birds.
How:   Integer autoincrement primary key, nullable name/species, and
       non-null created_at/updated_at timestamps with time zone.

Rollback: downgrade() drops the table (all seeded birds are lost; re-run
`python -m app.seeds` after upgrading again).
"""

from typing import Sequence, Union
from alembic import op
import sqlalchemy as sa

# revision identifiers
revision: str = "001"
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create the birds table. Column docs live in app/models/bird.py."""
    op.create_table(
        "birds",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column(
            "name",
            sa.String(255),
            nullable=True,
            comment="Common name, e.g. Black-Capped Chickadee",
        ),
        sa.Column(
            "species",
            sa.String(255),
            nullable=True,
            comment="Binomial name, e.g. Poecile Atricapillus",
        ),
        sa.Column(
            "created_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this bird was created (UTC)",
        ),
        sa.Column(
            "updated_at",
            sa.TIMESTAMP(timezone=True),
            server_default=sa.text("CURRENT_TIMESTAMP"),
            nullable=False,
            comment="When this bird was last modified (UTC)",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    """Drop the birds table."""
    op.drop_table("birds")
