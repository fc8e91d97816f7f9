"""create user profile and plan tables

Revision ID: create_profile_and_plan_tables
Revises:
Create Date: 2026-10-19 10:00:00.000000

"""
from alembic import op
import sqlalchemy as sa

# revision identifiers, used by Alembic.
revision = 'create_profile_and_plan_tables'
down_revision = None
branch_labels = None
depends_on = None

def upgrade():
    op.create_table(
        'user_profiles',
        sa.Column('user_id', sa.String(length=255), primary_key=True),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('email', sa.String(length=255), nullable=False, unique=True),
        sa.Column('age', sa.Integer(), nullable=False),
        sa.Column('gender', sa.String(length=20), nullable=False),
        sa.Column('height', sa.Float(), nullable=False),
        sa.Column('curr_weight', sa.Float(), nullable=False),
        sa.Column('desired_weight', sa.Float(), nullable=False),
        sa.Column('target_days', sa.Integer(), nullable=False),
    )
    op.create_index('ix_user_profiles_user_id', 'user_profiles', ['user_id'])

    op.create_table(
        'exercise_plans',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(length=255), sa.ForeignKey('user_profiles.user_id', ondelete='CASCADE'), nullable=False),
        sa.Column('goal', sa.String(length=20), nullable=False),
        sa.Column('daily_calorie_change', sa.Float(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_exercise_plans_user_id_created_at', 'exercise_plans', ['user_id', 'created_at'])

    op.create_table(
        'exercise_sets',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('exercise_plan_id', sa.BigInteger(), sa.ForeignKey('exercise_plans.id', ondelete='CASCADE'), nullable=False),
        sa.Column('name', sa.String(length=100), nullable=False),
        sa.Column('equipment', sa.String(length=100)),
        sa.Column('duration_minutes', sa.Integer(), nullable=False),
        sa.Column('sessions_per_week', sa.Integer(), nullable=False),
    )
    op.create_index('ix_exercise_sets_exercise_plan_id', 'exercise_sets', ['exercise_plan_id'])

    op.create_table(
        'nutrition_plans',
        sa.Column('id', sa.BigInteger(), primary_key=True, autoincrement=True),
        sa.Column('user_id', sa.String(length=255), sa.ForeignKey('user_profiles.user_id', ondelete='CASCADE'), nullable=False),
        sa.Column('daily_calories_to_eat', sa.Float(), nullable=False),
        sa.Column('breakfast_calories', sa.Float(), nullable=False),
        sa.Column('lunch_calories', sa.Float(), nullable=False),
        sa.Column('dinner_calories', sa.Float(), nullable=False),
        sa.Column('pre_workout_calories', sa.Float()),
        sa.Column('post_workout_calories', sa.Float()),
        sa.Column('breakfast_foods', sa.JSON(), nullable=False),
        sa.Column('lunch_foods', sa.JSON(), nullable=False),
        sa.Column('dinner_foods', sa.JSON(), nullable=False),
        sa.Column('pre_workout_foods', sa.JSON(), nullable=False),
        sa.Column('post_workout_foods', sa.JSON(), nullable=False),
        sa.Column('created_at', sa.DateTime(timezone=True), nullable=False, server_default=sa.text('CURRENT_TIMESTAMP')),
    )
    op.create_index('ix_nutrition_plans_user_id_created_at', 'nutrition_plans', ['user_id', 'created_at'])

def downgrade():
    op.drop_index('ix_nutrition_plans_user_id_created_at', table_name='nutrition_plans')
    op.drop_table('nutrition_plans')
    op.drop_index('ix_exercise_sets_exercise_plan_id', table_name='exercise_sets')
    op.drop_table('exercise_sets')
    op.drop_index('ix_exercise_plans_user_id_created_at', table_name='exercise_plans')
    op.drop_table('exercise_plans')
    op.drop_index('ix_user_profiles_user_id', table_name='user_profiles')
    op.drop_table('user_profiles')
