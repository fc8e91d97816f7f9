"""Pydantic schemas for request and response validation."""

# Diet plan schemas
from .diet_plan import (
    ExerciseSetResponse,
    ExercisePlanSummary,
    ExercisePlanResponse,
    NutritionPlanResponse,
    DietPlanResponse,
)

# User profile schemas
from .user_profile import (
    UserProfileBase,
    UserProfileSave,
    UserProfileResponse,
)

__all__ = [
    "ExerciseSetResponse",
    "ExercisePlanSummary",
    "ExercisePlanResponse",
    "NutritionPlanResponse",
    "DietPlanResponse",
    "UserProfileBase",
    "UserProfileSave",
    "UserProfileResponse",
]
