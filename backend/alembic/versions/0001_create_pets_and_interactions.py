"""create pets and interaction logs

Revision ID: 0001
Revises:
Create Date: 2021-05-07 13:54:39

"""
from alembic import op
import sqlalchemy as sa


revision = "0001"
down_revision = None
branch_labels = None
depends_on = None

INTERACTION_TABLES = ("playtimes", "feedings", "scoldings")


def upgrade() -> None:
    op.create_table(
        "pets",
        sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column("name", sa.String(), nullable=True),
        sa.Column("birthday", sa.DateTime(), nullable=False),
        sa.Column("hunger_level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("happiness_level", sa.Integer(), nullable=False, server_default="0"),
        sa.Column("last_interacted_with_date", sa.DateTime(), nullable=False),
    )
    for table in INTERACTION_TABLES:
        op.create_table(
            table,
            sa.Column("id", sa.Integer(), primary_key=True, autoincrement=True),
            sa.Column(
                "pet_id",
                sa.Integer(),
                sa.ForeignKey("pets.id", ondelete="CASCADE"),
                nullable=False,
            ),
            sa.Column("when", sa.DateTime(), nullable=False),
        )
        op.create_index(f"ix_{table}_pet_id", table, ["pet_id"])


def downgrade() -> None:
    for table in reversed(INTERACTION_TABLES):
        op.drop_index(f"ix_{table}_pet_id", table_name=table)
        op.drop_table(table)
    op.drop_table("pets")
