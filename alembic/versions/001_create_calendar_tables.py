"""Create calendar tables: events, emojis, settings and holiday cache

Revision ID: 001
Revises:
Create Date: 2026-10-18
"""
from alembic import op
import sqlalchemy as sa


# revision identifiers
revision = '001'
down_revision = None
branch_labels = None
depends_on = None


def upgrade() -> None:
    """Create calendar tables."""
    op.create_table(
        'calendar_events',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('date', sa.String(10), nullable=False),
        sa.Column('text', sa.Text, nullable=False),
        sa.Column('category', sa.String(20), nullable=False, server_default='other'),
        sa.Column('emoji', sa.String(64), nullable=True),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.func.now()),
    )
    op.create_index('ix_calendar_events_date', 'calendar_events', ['date'])

    op.create_table(
        'custom_emojis',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('name', sa.String(32), nullable=False, unique=True),
        sa.Column('content_type', sa.String(32), nullable=False),
        sa.Column('data', sa.LargeBinary, nullable=False),
        sa.Column('created_at', sa.DateTime, nullable=False, server_default=sa.func.now()),
    )

    op.create_table(
        'user_settings',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('setting_name', sa.String(64), nullable=False, unique=True),
        sa.Column('setting_value', sa.Text, nullable=True),
    )

    op.create_table(
        'holiday_records',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('country', sa.String(8), nullable=False),
        sa.Column('year', sa.Integer, nullable=False),
        sa.Column('date', sa.String(10), nullable=False),
        sa.Column('name', sa.String(200), nullable=False),
        sa.Column('is_public', sa.Boolean, nullable=False, server_default=sa.true()),
        sa.Column('updated_at', sa.DateTime, nullable=True),
        sa.UniqueConstraint('country', 'date', name='uq_holiday_records_country_date'),
    )
    # Fast lookups of a whole (country, year) set
    op.create_index('ix_holiday_records_country_year', 'holiday_records', ['country', 'year'])

    op.create_table(
        'holiday_cache_status',
        sa.Column('id', sa.Integer, primary_key=True, autoincrement=True),
        sa.Column('country', sa.String(8), nullable=False),
        sa.Column('year', sa.Integer, nullable=False),
        sa.Column('last_updated', sa.DateTime, nullable=False),
        sa.UniqueConstraint('country', 'year', name='uq_holiday_cache_status_country_year'),
    )


def downgrade() -> None:
    """Drop calendar tables."""
    op.drop_table('holiday_cache_status')
    op.drop_index('ix_holiday_records_country_year', table_name='holiday_records')
    op.drop_table('holiday_records')
    op.drop_table('user_settings')
    op.drop_table('custom_emojis')
    op.drop_index('ix_calendar_events_date', table_name='calendar_events')
    op.drop_table('calendar_events')
