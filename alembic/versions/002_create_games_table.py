"""create games table

Revision ID: 002
Revises: 001
Create Date: 2025-02-03 10:10:00.000000

"""

from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision: str = "002"
down_revision: Union[str, None] = "001"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "games",
        sa.Column("id", sa.Integer(), autoincrement=True, nullable=False),
        sa.Column("name", sa.String(length=255), nullable=False),
        sa.Column("image", sa.String(), nullable=False),
        sa.Column("stock_total", sa.Integer(), nullable=False),
        sa.Column("category_id", sa.Integer(), nullable=False),
        sa.Column("price_per_day", sa.Integer(), nullable=False),
        sa.Column("open_rentals", sa.Integer(), nullable=False, server_default="0"),
        sa.PrimaryKeyConstraint("id"),
        sa.ForeignKeyConstraint(["category_id"], ["categories.id"]),
        sa.CheckConstraint("stock_total >= 1", name="ck_games_stock_total_positive"),
        sa.CheckConstraint("price_per_day >= 1", name="ck_games_price_per_day_positive"),
        # Availability counter: rentals are only inserted while it is below stock_total
        sa.CheckConstraint(
            "open_rentals >= 0 AND open_rentals <= stock_total",
            name="ck_games_open_rentals_within_stock",
        ),
    )
    op.create_index("ix_games_id", "games", ["id"], unique=False)
    op.create_index("ix_games_category_id", "games", ["category_id"], unique=False)


def downgrade() -> None:
    op.drop_index("ix_games_category_id", table_name="games")
    op.drop_index("ix_games_id", table_name="games")
    op.drop_table("games")
