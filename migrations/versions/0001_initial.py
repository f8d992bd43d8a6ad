"""Initial migration

Revision ID: 0001_initial
Revises: 
Create Date: 2026-10-19 00:00:00.000000
"""
from alembic import op
import sqlalchemy as sa
from sqlalchemy.sql import func

# revision identifiers, used by Alembic.
revision = '0001_initial'
down_revision = None
branch_labels = None
depends_on = None

POS_TYPES = ('CAFE', 'BAKERY', 'VENDING_MACHINE', 'CAFETERIA')
CAMPUS_TYPES = ('ALTSTADT', 'BERGHEIM', 'INF')


def upgrade():
    op.create_table(
        'pos',
        sa.Column('id', sa.Integer(), primary_key=True),
        sa.Column('name', sa.String(length=255), nullable=False, unique=True, comment="Уникальное название точки продаж"),
        sa.Column('description', sa.String(length=1024), nullable=False),
        sa.Column('type', sa.Enum(*POS_TYPES, name='pos_type'), nullable=False),
        sa.Column('campus', sa.Enum(*CAMPUS_TYPES, name='campus_type'), nullable=False),
        sa.Column('street', sa.String(length=255), nullable=False),
        sa.Column('house_number', sa.String(length=32), nullable=False),
        sa.Column('postal_code', sa.Integer(), nullable=False),
        sa.Column('city', sa.String(length=255), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), server_default=func.now(), nullable=False, comment="Когда запись была создана"),
        sa.Column('updated_at', sa.DateTime(timezone=True), server_default=func.now(), nullable=False, comment="Когда запись была обновлена"),
    )
    op.create_index('ix_pos_id', 'pos', ['id'])


def downgrade():
    op.drop_index('ix_pos_id', table_name='pos')
    op.drop_table('pos')
    sa.Enum(name='campus_type').drop(op.get_bind(), checkfirst=True)
    sa.Enum(name='pos_type').drop(op.get_bind(), checkfirst=True)
