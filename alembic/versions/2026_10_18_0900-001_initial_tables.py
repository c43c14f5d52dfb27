"""Add athletes, activities, wellness_entries and race_events tables

Revision ID: 001
Revises:
Create Date: 2026-10-18 09:00:00.000000

"""
from typing import Sequence, Union

import sqlalchemy as sa
import sqlmodel
from alembic import op

# revision identifiers, used by Alembic.
revision: str = '001'
down_revision: Union[str, None] = None
branch_labels: Union[str, Sequence[str], None] = None
depends_on: Union[str, Sequence[str], None] = None


def _timestamps() -> list[sa.Column]:
    return [
        sa.Column('created_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
        sa.Column('updated_at', sa.DateTime(), nullable=False, server_default=sa.text('(CURRENT_TIMESTAMP)')),
    ]


def upgrade() -> None:
    """Create the athlete data tables."""
    op.create_table('athletes', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('date_of_birth', sa.Date(), nullable=True),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        *_timestamps(),
        sa.PrimaryKeyConstraint('id'))

    op.create_table('activities', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('external_id', sqlmodel.sql.sqltypes.AutoString(length=100), nullable=True),
        sa.Column('start_time', sa.DateTime(), nullable=False),
        sa.Column('type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=True),
        sa.Column('velocity', sa.JSON(), nullable=True),
        sa.Column('max_speed', sa.Float(), nullable=False),
        sa.Column('training_load', sa.Float(), nullable=True),
        sa.Column('atl', sa.Float(), nullable=False),
        sa.Column('ctl', sa.Float(), nullable=False),
        *_timestamps(),
        sa.ForeignKeyConstraint(['athlete_id'], ['athletes.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'external_id', name='uq_activity_athlete_external'))
    op.create_index(op.f('ix_activities_athlete_id'), 'activities', ['athlete_id'])
    op.create_index(op.f('ix_activities_start_time'), 'activities', ['start_time'])

    op.create_table('wellness_entries', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('hrv', sa.Float(), nullable=True),
        sa.Column('resting_hr', sa.Integer(), nullable=True),
        sa.Column('readiness', sa.Float(), nullable=True),
        sa.Column('weight_kg', sa.Float(), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['athlete_id'], ['athletes.id']),
        sa.PrimaryKeyConstraint('id'),
        sa.UniqueConstraint('athlete_id', 'date', name='uq_wellness_athlete_date'))
    op.create_index(op.f('ix_wellness_entries_athlete_id'), 'wellness_entries', ['athlete_id'])
    op.create_index(op.f('ix_wellness_entries_date'), 'wellness_entries', ['date'])

    op.create_table('race_events', sa.Column('id', sa.Integer(), nullable=False),
        sa.Column('athlete_id', sa.Integer(), nullable=False),
        sa.Column('name', sqlmodel.sql.sqltypes.AutoString(length=200), nullable=False),
        sa.Column('date', sa.Date(), nullable=False),
        sa.Column('type', sqlmodel.sql.sqltypes.AutoString(length=50), nullable=False),
        sa.Column('distance_m', sa.Integer(), nullable=True),
        sa.Column('category', sqlmodel.sql.sqltypes.AutoString(length=20), nullable=True),
        *_timestamps(),
        sa.ForeignKeyConstraint(['athlete_id'], ['athletes.id']),
        sa.PrimaryKeyConstraint('id'))
    op.create_index(op.f('ix_race_events_athlete_id'), 'race_events', ['athlete_id'])
    op.create_index(op.f('ix_race_events_date'), 'race_events', ['date'])


def downgrade() -> None:
    """Drop the athlete data tables."""
    op.drop_index(op.f('ix_race_events_date'), table_name='race_events')
    op.drop_index(op.f('ix_race_events_athlete_id'), table_name='race_events')
    op.drop_table('race_events')
    op.drop_index(op.f('ix_wellness_entries_date'), table_name='wellness_entries')
    op.drop_index(op.f('ix_wellness_entries_athlete_id'), table_name='wellness_entries')
    op.drop_table('wellness_entries')
    op.drop_index(op.f('ix_activities_start_time'), table_name='activities')
    op.drop_index(op.f('ix_activities_athlete_id'), table_name='activities')
    op.drop_table('activities')
    op.drop_table('athletes')
