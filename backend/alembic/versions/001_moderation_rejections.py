"""Create moderation_rejections table.

Revision ID: 001_moderation_rejections
Revises:
Create Date: 2026-10-19
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa
from sqlalchemy.dialects import postgresql


# revision identifiers, used by Alembic.
revision: str = '001_moderation_rejections'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'moderation_rejections',
        sa.Column('id', postgresql.UUID(as_uuid=True), primary_key=True),
        sa.Column('subject', sa.String(20), nullable=False),
        sa.Column('field', sa.String(20), nullable=False),
        sa.Column('error_key', sa.String(64), nullable=False),
        sa.Column('params', sa.JSON(), nullable=False),
        sa.Column('excerpt', sa.String(200), nullable=False, server_default=''),
        sa.Column('locale', sa.String(5), nullable=False, server_default='ru'),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_index(
        'ix_moderation_rejections_created_at',
        'moderation_rejections', ['created_at'],
    )


def downgrade() -> None:
    op.drop_index(
        'ix_moderation_rejections_created_at', table_name='moderation_rejections',
    )
    op.drop_table('moderation_rejections')
