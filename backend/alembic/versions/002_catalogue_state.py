"""Create catalogue state tables: settings, URI overrides, event log.

Revision ID: 002_catalogue_state
Revises: 001_balances
Create Date: 2026-10-19

Base URI, administrator and overrides outlive a restart; event offsets stay stable.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '002_catalogue_state'
down_revision: Union[str, None] = '001_balances'
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'catalogue_settings',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('base_uri', sa.Text(), nullable=False, server_default=''),
        sa.Column('administrator', sa.String(255), nullable=True),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        'token_uri_overrides',
        sa.Column('token_id', sa.String(78), primary_key=True),
        sa.Column('uri', sa.Text(), nullable=False),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
    )
    op.create_table(
        'catalogue_events',
        sa.Column('position', sa.Integer(), primary_key=True, autoincrement=False),
        sa.Column('kind', sa.String(40), nullable=False),
        sa.Column('payload', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
    )


def downgrade() -> None:
    op.drop_table('catalogue_events')
    op.drop_table('token_uri_overrides')
    op.drop_table('catalogue_settings')
