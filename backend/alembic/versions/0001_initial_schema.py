"""Initial schema: parts, movements, users

Revision ID: 0001_initial_schema
Revises:
Create Date: 2026-10-18 09:12:41.338015

"""
from typing import Sequence, Union

from alembic import op
import sqlalchemy as sa


# Revision identifiers used by Alembic
revision: str = '0001_initial_schema'
down_revision: Union[str, Sequence[str], None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def upgrade() -> None:
    """Upgrade schema."""
    op.create_table(
        'parts',
        sa.Column('reference', sa.String(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.Column('category', sa.String(), nullable=False),
        sa.Column('stock_quantity', sa.Integer(), nullable=False),
        sa.Column('min_quantity', sa.Integer(), nullable=False),
        sa.Column('location', sa.String(), nullable=True),
        sa.Column('supplier', sa.String(), nullable=True),
        sa.Column('photo', sa.String(), nullable=True),
        sa.CheckConstraint('stock_quantity >= 0 AND stock_quantity <= 2147483647'),
        sa.CheckConstraint('min_quantity >= 0 AND min_quantity <= 2147483647'),
        sa.PrimaryKeyConstraint('reference'),
    )
    op.create_index(op.f('ix_parts_reference'), 'parts', ['reference'], unique=False)
    op.create_index(op.f('ix_parts_name'), 'parts', ['name'], unique=False)

    # part_reference has no foreign key: movements outlive deleted parts
    op.create_table(
        'movements',
        sa.Column('id', sa.Integer(), autoincrement=True, nullable=False),
        sa.Column('part_reference', sa.String(), nullable=False),
        sa.Column('kind', sa.String(), nullable=False),
        sa.Column('quantity', sa.Integer(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False),
        sa.Column('user', sa.String(), nullable=False),
        sa.Column('machine', sa.String(), nullable=True),
        sa.Column('comment', sa.String(), nullable=True),
        sa.CheckConstraint('quantity > 0'),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_movements_id'), 'movements', ['id'], unique=False)
    op.create_index(op.f('ix_movements_part_reference'), 'movements', ['part_reference'], unique=False)
    op.create_index(op.f('ix_movements_created_at'), 'movements', ['created_at'], unique=False)

    op.create_table(
        'users',
        sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sa.String(), nullable=False),
        sa.PrimaryKeyConstraint('id'),
    )
    op.create_index(op.f('ix_users_id'), 'users', ['id'], unique=False)
    op.create_index(op.f('ix_users_name'), 'users', ['name'], unique=True)


def downgrade() -> None:
    """Downgrade schema."""
    op.drop_index(op.f('ix_users_name'), table_name='users')
    op.drop_index(op.f('ix_users_id'), table_name='users')
    op.drop_table('users')
    op.drop_index(op.f('ix_movements_created_at'), table_name='movements')
    op.drop_index(op.f('ix_movements_part_reference'), table_name='movements')
    op.drop_index(op.f('ix_movements_id'), table_name='movements')
    op.drop_table('movements')
    op.drop_index(op.f('ix_parts_name'), table_name='parts')
    op.drop_index(op.f('ix_parts_reference'), table_name='parts')
    op.drop_table('parts')
