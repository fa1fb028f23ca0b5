"""create battles

Revision ID: 2023102714_create_battles
Revises: 2023102714_create_monsters
Create Date: 2023-10-27 14:30:47.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "2023102714_create_battles"
down_revision: Union[str, Sequence[str], None] = "2023102714_create_monsters"
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    # monster_a / monster_b are plain columns; only winner references monsters
    op.create_table(
        "battles",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("monster_a", sa.String(), nullable=False),
        sa.Column("monster_b", sa.String(), nullable=False),
        sa.Column("winner", sa.String(), nullable=False),
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.ForeignKeyConstraint(["winner"], ["monsters.id"], ondelete="CASCADE"),
        sa.PrimaryKeyConstraint("id"),
    )
    op.create_index(op.f("ix_battles_winner"), "battles", ["winner"], unique=False)


def downgrade() -> None:
    op.drop_index(op.f("ix_battles_winner"), table_name="battles")
    op.drop_table("battles")
