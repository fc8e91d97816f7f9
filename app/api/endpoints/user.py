"""User API endpoints.

This module contains the API endpoints for saving, fetching, listing and
deleting user profiles, and for fetching a user's diet plan.
NotFoundError and PersistenceError raised by the services are translated to
HTTP responses by the handlers registered in ``app.main``.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.db.async_session import get_async_db
from app.schemas.diet_plan import DietPlanResponse, ExercisePlanResponse, NutritionPlanResponse
from app.schemas.user_profile import UserProfileResponse, UserProfileSave
from app.services.async_diet_plan import AsyncDietPlanService
from app.services.async_user_profile import AsyncUserProfileService
from app.utils.logger import api_logger

router = APIRouter()


@router.post("/save", response_model=UserProfileResponse)
async def save_user(
    profile_data: UserProfileSave,
    db: AsyncSession = Depends(get_async_db),
):
    """Create a new user profile or replace an existing one."""
    api_logger.info("Save profile request", "SAVE", user_id=profile_data.user_id or "<new>")
    return await AsyncUserProfileService.save_profile(db=db, profile_data=profile_data)


@router.get("", response_model=List[UserProfileResponse])
async def get_all_users(db: AsyncSession = Depends(get_async_db)):
    """List every user profile."""
    return await AsyncUserProfileService.list_profiles(db=db)


@router.get("/{user_id}", response_model=UserProfileResponse)
async def get_user(user_id: str, db: AsyncSession = Depends(get_async_db)):
    """Get a user profile by id."""
    return await AsyncUserProfileService.get_profile(db=db, user_id=user_id)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_user(user_id: str, db: AsyncSession = Depends(get_async_db)):
    """Delete a user profile and all of its plans."""
    api_logger.info("Delete profile request", "DELETE", user_id=user_id)
    await AsyncUserProfileService.delete_profile(db=db, user_id=user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{user_id}/diet-plan", response_model=DietPlanResponse)
async def get_diet_plan(user_id: str, db: AsyncSession = Depends(get_async_db)):
    """Get the user's current diet plan, generating it on first request."""
    api_logger.debug("Diet plan request", "PLAN", user_id=user_id)
    plan = await AsyncDietPlanService.get_or_create_diet_plan(db=db, user_id=user_id)
    return DietPlanResponse(
        exercise_plan=ExercisePlanResponse.model_validate(plan.exercise_plan),
        nutrition_plan=NutritionPlanResponse.model_validate(plan.nutrition_plan),
    )
