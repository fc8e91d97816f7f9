"""Diet plan schemas.

This module contains Pydantic models for serializing generated exercise and
nutrition plans. Plans never re-embed their owning profile.
"""

from typing import List, Optional

from app.schemas.base import BaseSchema, TimestampedSchema


class ExerciseSetResponse(BaseSchema):
    """A single exercise entry of an exercise plan."""

    id: Optional[int] = None
    name: str
    equipment: Optional[str] = None
    duration_minutes: int
    sessions_per_week: int


class ExercisePlanSummary(TimestampedSchema):
    """Exercise plan as embedded in a profile, without its exercise sets."""

    goal: str
    daily_calorie_change: float


class ExercisePlanResponse(ExercisePlanSummary):
    """Full exercise plan including its ordered exercise sets."""

    exercise_sets: List[ExerciseSetResponse] = []


class NutritionPlanResponse(TimestampedSchema):
    """Nutrition plan with per-meal calorie targets and suggested foods."""

    daily_calories_to_eat: float
    breakfast_calories: float
    lunch_calories: float
    dinner_calories: float
    pre_workout_calories: Optional[float] = None
    post_workout_calories: Optional[float] = None
    breakfast_foods: List[str] = []
    lunch_foods: List[str] = []
    dinner_foods: List[str] = []
    pre_workout_foods: List[str] = []
    post_workout_foods: List[str] = []


class DietPlanResponse(BaseSchema):
    """The most recent exercise and nutrition plan pair for a user."""

    exercise_plan: ExercisePlanResponse
    nutrition_plan: NutritionPlanResponse
