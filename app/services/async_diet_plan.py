"""Async diet plan service.

Returns the most recent exercise/nutrition plan pair of a user, generating
and storing a new pair only when one of the two is missing.
"""

from typing import NamedTuple

from sqlalchemy.ext.asyncio import AsyncSession

from app.models.exercise_plan import ExercisePlan
from app.models.nutrition_plan import NutritionPlan
from app.services.async_user_profile import AsyncUserProfileService
from app.services.plan_generator import DietPlanGenerator
from app.utils.logger import plan_logger


class DietPlan(NamedTuple):
    exercise_plan: ExercisePlan
    nutrition_plan: NutritionPlan


class AsyncDietPlanService:
    """Async service for the get-or-create diet plan operation."""

    @staticmethod
    async def get_or_create_diet_plan(db: AsyncSession, user_id: str) -> DietPlan:
        """Get the latest plan pair for a user, generating one if needed.

        The latest exercise plan and the latest nutrition plan are looked up
        independently. When both exist they are returned as stored, even if
        the profile changed since. When either is missing a whole new pair is
        generated and saved. Concurrent calls for the same user are not
        serialized and may each store a pair.

        Raises:
            NotFoundError: If no profile exists for ``user_id``
        """
        profile = await AsyncUserProfileService.get_profile(db, user_id)

        exercise_plan = await AsyncUserProfileService.get_latest_exercise_plan(db, user_id)
        nutrition_plan = await AsyncUserProfileService.get_latest_nutrition_plan(db, user_id)

        if exercise_plan is not None and nutrition_plan is not None:
            plan_logger.debug(
                "Reusing stored plan pair",
                user_id=user_id,
                exercise_plan_id=exercise_plan.id,
                nutrition_plan_id=nutrition_plan.id,
            )
            return DietPlan(exercise_plan, nutrition_plan)

        if exercise_plan is not None or nutrition_plan is not None:
            plan_logger.warning("Found a partial plan pair, generating a fresh one", user_id=user_id)

        exercise_plan, nutrition_plan = DietPlanGenerator.generate(profile)
        await AsyncUserProfileService.add_plan_pair(db, exercise_plan, nutrition_plan)

        plan_logger.success(
            "Generated diet plan",
            user_id=user_id,
            goal=exercise_plan.goal,
            daily_calories=round(nutrition_plan.daily_calories_to_eat, 2),
        )
        return DietPlan(exercise_plan, nutrition_plan)
