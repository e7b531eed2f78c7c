"""Create restaurants table

Revision ID: 001
Revises: None
Create Date: 2026-10-19 00:00:00.000000+00:00

What:  Creates the `restaurants` table backing /api/v1/restaurants.
How:   Integer identity primary key plus four text columns; image_url is
       nullable and holds a /uploads/Images/... path.

Rollback: downgrade() drops the table (all listings lost).
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
    op.create_table(
        "restaurants",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("rname", sa.String(255), nullable=False),
        sa.Column("location", sa.String(255), nullable=False),
        sa.Column(
            "price_range",
            sa.String(20),
            nullable=False,
            comment="Price band, e.g. '$$'",
        ),
        sa.Column(
            "image_url",
            sa.String(255),
            nullable=True,
            comment="Public path of an uploaded image; not checked against disk",
        ),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("restaurants")
