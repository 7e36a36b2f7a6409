"""Create summaries table

Revision ID: a1b2c3d4e5f6
Revises:
Create Date: 2026-10-19 09:00:00.000000

Saved video summaries, newest first by timestamp. The app also creates this
table at startup, so the upgrade leaves an existing table in place.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = 'a1b2c3d4e5f6'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Create summaries table unless application startup already did."""
    inspector = sa.inspect(op.get_bind())
    if inspector.has_table('summaries'):
        existing = {index['name'] for index in inspector.get_indexes('summaries')}
        if 'ix_summaries_timestamp' not in existing:
            op.create_index('ix_summaries_timestamp', 'summaries', ['timestamp'])
        return

    op.create_table(
        'summaries',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('youtube_url', sa.Text(), nullable=False),
        sa.Column('title', sa.Text(), nullable=False),
        sa.Column('channel_title', sa.Text(), nullable=False),
        sa.Column('thumbnail_url', sa.Text(), nullable=False),
        sa.Column('summary', sa.Text(), nullable=False),
        sa.Column('timestamp', sa.DateTime(timezone=True), server_default=sa.func.now(), nullable=True),
    )
    op.create_index('ix_summaries_timestamp', 'summaries', ['timestamp'])


def downgrade() -> None:
    """Drop summaries table."""
    op.drop_index('ix_summaries_timestamp', table_name='summaries')
    op.drop_table('summaries')
