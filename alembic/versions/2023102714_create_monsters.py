"""create monsters

Revision ID: 2023102714_create_monsters
Revises:
Create Date: 2023-10-27 14:30:39.000000
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa

revision: str = "2023102714_create_monsters"
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        "monsters",
        sa.Column("id", sa.String(), nullable=False),
        sa.Column("image_url", sa.String(), nullable=False),
        sa.Column("name", sa.String(), nullable=False),
        sa.Column("attack", sa.Integer(), nullable=False),
        sa.Column("defense", sa.Integer(), nullable=False),
        sa.Column("hp", sa.Integer(), nullable=False),
        sa.Column("speed", sa.Integer(), nullable=False),
        # kept current by monster_arena.models.timestamps; defaults cover raw inserts
        sa.Column("created_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.Column("updated_at", sa.DateTime(), server_default=sa.func.now(), nullable=False),
        sa.PrimaryKeyConstraint("id"),
    )


def downgrade() -> None:
    op.drop_table("monsters")
