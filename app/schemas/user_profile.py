"""User profile schemas.

This module contains Pydantic models for user profile data validation and serialization.
"""

from typing import List, Optional

from pydantic import EmailStr, Field, field_validator

from app.models.user_profile import GenderType
from app.schemas.base import BaseSchema
from app.schemas.diet_plan import ExercisePlanSummary, NutritionPlanResponse


class UserProfileBase(BaseSchema):
    """Base schema for user profile operations.

    Contains the biometric and contact fields shared by requests and responses.
    """

    name: str = Field(..., min_length=1, max_length=100, description="Display name")
    email: EmailStr = Field(..., max_length=255, description="Unique email address")
    age: int = Field(..., ge=1, le=100, description="Age in years")
    gender: str = Field(..., description="MALE, FEMALE or OTHER (case-insensitive)")
    height: float = Field(..., gt=0, description="Height in cm")
    curr_weight: float = Field(..., gt=0, description="Current weight in kg")
    desired_weight: float = Field(..., gt=0, description="Desired weight in kg")
    target_days: int = Field(..., gt=0, description="Days to reach the desired weight")

    @field_validator("name")
    @classmethod
    def name_not_blank(cls, value: str) -> str:
        if not value.strip():
            raise ValueError("Name is required")
        return value

    @field_validator("gender")
    @classmethod
    def gender_known(cls, value: str) -> str:
        allowed = {gender.value for gender in GenderType}
        if value.strip().upper() not in allowed:
            raise ValueError(f"Gender must be one of {', '.join(sorted(allowed))}")
        return value.strip()


class UserProfileSave(UserProfileBase):
    """Schema for creating or fully replacing a user profile.

    The id is optional; a fresh one is generated when it is missing or empty.
    Plan collections sent by clients are ignored.
    """

    user_id: Optional[str] = Field(None, max_length=255)


class UserProfileResponse(UserProfileBase):
    """Schema for user profile API responses.

    Embeds plan summaries; exercise plans are listed without their sets.
    """

    user_id: str
    exercise_plans: List[ExercisePlanSummary] = []
    nutrition_plans: List[NutritionPlanResponse] = []
