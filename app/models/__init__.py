"""Database models."""

# Import all models here to ensure they're recognized by SQLAlchemy
from app.models.exercise_plan import ExercisePlan, ExerciseSet
from app.models.nutrition_plan import NutritionPlan
from app.models.user_profile import GenderType, UserProfile

__all__ = [
    "UserProfile",
    "GenderType",
    "ExercisePlan",
    "ExerciseSet",
    "NutritionPlan",
]
