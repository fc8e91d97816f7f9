"""Async User profile service.

This module contains the async business logic for storing user profiles and
their generated plans: saving, retrieval, listing and cascading deletion.
"""

from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import select, delete, desc
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import selectinload
from typing import List, Optional

from app.models.exercise_plan import ExercisePlan, ExerciseSet
from app.models.nutrition_plan import NutritionPlan
from app.models.user_profile import UserProfile, generate_user_id
from app.schemas.user_profile import UserProfileSave
from app.services.async_error_handler import AsyncErrorHandler, NotFoundError, PersistenceError
from app.utils.logger import profile_logger


class AsyncUserProfileService:
    """Async service class for user profile operations.

    Profiles are keyed by a string user id. Each profile exclusively owns its
    exercise and nutrition plans, which are append-only.
    """

    @staticmethod
    def _profile_query(user_id: Optional[str] = None):
        stmt = select(UserProfile).options(
            selectinload(UserProfile.exercise_plans),
            selectinload(UserProfile.nutrition_plans),
        )
        if user_id is not None:
            stmt = stmt.where(UserProfile.user_id == user_id)
        return stmt

    @staticmethod
    async def get_profile_optional(db: AsyncSession, user_id: str) -> Optional[UserProfile]:
        """Get user profile by user ID asynchronously, returning None if not found."""
        stmt = AsyncUserProfileService._profile_query(user_id).execution_options(
            populate_existing=True
        )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_profile(db: AsyncSession, user_id: str) -> UserProfile:
        """Get user profile by user ID asynchronously."""
        profile = await AsyncUserProfileService.get_profile_optional(db, user_id)
        if not profile:
            raise NotFoundError("User", user_id)
        return profile

    @staticmethod
    async def get_profile_by_email(db: AsyncSession, email: str) -> Optional[UserProfile]:
        """Get user profile by email address, returning None if not found."""
        stmt = select(UserProfile).where(UserProfile.email == email)
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def list_profiles(db: AsyncSession) -> List[UserProfile]:
        """Get all user profiles."""
        stmt = AsyncUserProfileService._profile_query().order_by(UserProfile.name)
        result = await db.execute(stmt)
        return list(result.scalars().all())

    @staticmethod
    async def save_profile(db: AsyncSession, profile_data: UserProfileSave) -> UserProfile:
        """Insert a new profile or fully replace an existing one.

        A missing or empty id is replaced by a freshly generated one before
        anything is written. Owned plans are left untouched.
        """
        user_id = profile_data.user_id or generate_user_id()
        fields = profile_data.model_dump(exclude={"user_id"})

        try:
            owner = await AsyncUserProfileService.get_profile_by_email(db, profile_data.email)
            if owner is not None and owner.user_id != user_id:
                raise PersistenceError(f"Email already registered: {profile_data.email}")

            profile = await db.get(UserProfile, user_id)
            if profile is None:
                profile = UserProfile(user_id=user_id, **fields)
                db.add(profile)
                profile_logger.info("Creating profile", user_id=user_id)
            else:
                for field, value in fields.items():
                    setattr(profile, field, value)
                profile_logger.info("Replacing profile", user_id=user_id)

            await db.commit()
        except PersistenceError:
            await db.rollback()
            raise
        except SQLAlchemyError as e:
            await db.rollback()
            raise AsyncErrorHandler.to_persistence_error(e, "save_profile") from e

        return await AsyncUserProfileService.get_profile(db, user_id)

    @staticmethod
    async def delete_profile(db: AsyncSession, user_id: str) -> None:
        """Delete a profile together with every plan it owns.

        Any failure, including a missing profile, surfaces as NotFoundError.
        """
        try:
            profile = await db.get(UserProfile, user_id)
            if profile is None:
                raise NotFoundError("User", user_id)

            plan_ids = select(ExercisePlan.id).where(ExercisePlan.user_id == user_id)
            await db.execute(
                delete(ExerciseSet).where(ExerciseSet.exercise_plan_id.in_(plan_ids))
            )
            await db.execute(delete(ExercisePlan).where(ExercisePlan.user_id == user_id))
            await db.execute(delete(NutritionPlan).where(NutritionPlan.user_id == user_id))
            await db.execute(delete(UserProfile).where(UserProfile.user_id == user_id))
            await db.commit()
        except NotFoundError:
            await db.rollback()
            raise
        except SQLAlchemyError as e:
            await db.rollback()
            profile_logger.error("Profile deletion failed", user_id=user_id, error=str(e))
            raise NotFoundError("User", user_id, original_error=e) from e

        profile_logger.success("Deleted profile and owned plans", user_id=user_id)

    @staticmethod
    async def get_latest_exercise_plan(db: AsyncSession, user_id: str) -> Optional[ExercisePlan]:
        """Most recently created exercise plan of a user, with its sets."""
        stmt = (
            select(ExercisePlan)
            .options(selectinload(ExercisePlan.exercise_sets))
            .where(ExercisePlan.user_id == user_id)
            .order_by(desc(ExercisePlan.created_at), desc(ExercisePlan.id))
            .limit(1)
        )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def get_latest_nutrition_plan(db: AsyncSession, user_id: str) -> Optional[NutritionPlan]:
        """Most recently created nutrition plan of a user."""
        stmt = (
            select(NutritionPlan)
            .where(NutritionPlan.user_id == user_id)
            .order_by(desc(NutritionPlan.created_at), desc(NutritionPlan.id))
            .limit(1)
        )
        result = await db.execute(stmt)
        return result.scalar_one_or_none()

    @staticmethod
    async def add_plan_pair(
        db: AsyncSession, exercise_plan: ExercisePlan, nutrition_plan: NutritionPlan
    ) -> None:
        """Persist a freshly generated plan pair in a single transaction."""
        try:
            db.add(exercise_plan)
            db.add(nutrition_plan)
            await db.commit()
        except SQLAlchemyError as e:
            await db.rollback()
            raise AsyncErrorHandler.to_persistence_error(e, "add_plan_pair") from e
