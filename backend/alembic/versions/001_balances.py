"""Create balances table for the ledger.

Revision ID: 001_balances
Revises:
Create Date: 2026-10-19

One row per (holder, token_id). token_id is the decimal string of a uint256.
"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# revision identifiers, used by Alembic.
revision: str = '001_balances'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    op.create_table(
        'balances',
        sa.Column('id', sa.Integer(), primary_key=True, autoincrement=True),
        sa.Column('holder', sa.String(255), nullable=False),
        sa.Column('token_id', sa.String(78), nullable=False),
        sa.Column('amount', sa.Integer(), nullable=False, server_default='0'),
        sa.Column('updated_at', sa.DateTime(timezone=True), nullable=False),
        sa.UniqueConstraint('holder', 'token_id', name='uq_balances_holder_token'),
    )
    op.create_index('ix_balances_holder', 'balances', ['holder'])
    op.create_index('ix_balances_token_id', 'balances', ['token_id'])


def downgrade() -> None:
    op.drop_index('ix_balances_token_id', table_name='balances')
    op.drop_index('ix_balances_holder', table_name='balances')
    op.drop_table('balances')
