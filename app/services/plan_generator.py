"""Diet plan generator.

Derives an exercise plan and a nutrition plan from a user's biometric data.
The generator is pure: it only builds new, unsaved ORM records and never
touches the database.
"""

import enum
from typing import Dict, List, NamedTuple, Tuple

from app.models import ExercisePlan, ExerciseSet, NutritionPlan, UserProfile


class Goal(str, enum.Enum):
    LOSE_WEIGHT = "LOSE_WEIGHT"
    GAIN_WEIGHT = "GAIN_WEIGHT"
    MAINTAIN = "MAINTAIN"


class ExerciseTemplate(NamedTuple):
    name: str
    equipment: str
    duration_minutes: int
    sessions_per_week: int


# Weight differences below this many kg count as maintaining
MAINTAIN_THRESHOLD_KG = 0.5
# Energy content of one kg of body mass
KCAL_PER_KG = 7700
MIN_DAILY_CALORIES = 1200

EXERCISE_TABLE: Dict[Goal, Tuple[ExerciseTemplate, ...]] = {
    Goal.LOSE_WEIGHT: (
        ExerciseTemplate("Brisk Walking", "None", 30, 5),
        ExerciseTemplate("Jumping Jacks", "Bodyweight", 15, 4),
        ExerciseTemplate("Bodyweight Squats", "Bodyweight", 15, 4),
        ExerciseTemplate("Plank", "Mat", 5, 5),
    ),
    Goal.GAIN_WEIGHT: (
        ExerciseTemplate("Push Ups", "Bodyweight", 15, 4),
        ExerciseTemplate("Squats", "Bodyweight", 15, 4),
        ExerciseTemplate("Resistance Band Rows", "Band", 15, 3),
        ExerciseTemplate("Plank", "Mat", 5, 5),
    ),
    Goal.MAINTAIN: (
        ExerciseTemplate("Walking", "None", 30, 4),
        ExerciseTemplate("Stretching", "Mat", 15, 5),
    ),
}

# Share of the daily calories per meal slot; sums to 1.0
MEAL_SPLIT: Dict[str, float] = {
    "breakfast": 0.25,
    "lunch": 0.35,
    "dinner": 0.25,
    "pre_workout": 0.075,
    "post_workout": 0.075,
}

MEAL_FOODS: Dict[str, Tuple[str, ...]] = {
    "breakfast": ("Oats", "Boiled Eggs / Paneer", "Fruit"),
    "lunch": ("Rice / Roti", "Dal / Chicken", "Vegetables", "Curd"),
    "dinner": ("Grilled Paneer / Chicken", "Salad"),
    "pre_workout": ("Banana", "Black Coffee"),
    "post_workout": ("Protein Shake", "Milk / Boiled Eggs"),
}


class DietPlanGenerator:
    """Builds a plan pair from a profile.

    Every step is exposed as a static method so the individual calculations
    can be reused and tested on their own.
    """

    @staticmethod
    def detect_goal(curr_weight: float, desired_weight: float) -> Goal:
        diff = desired_weight - curr_weight
        if abs(diff) < MAINTAIN_THRESHOLD_KG:
            return Goal.MAINTAIN
        if diff < 0:
            return Goal.LOSE_WEIGHT
        return Goal.GAIN_WEIGHT

    @staticmethod
    def daily_calorie_change(
        curr_weight: float, desired_weight: float, target_days: int, goal: Goal
    ) -> float:
        """Signed kcal per day needed to reach the desired weight in time.

        Negative for a deficit, positive for a surplus. A non-positive
        ``target_days`` yields no change.
        """
        total_change = KCAL_PER_KG * abs(desired_weight - curr_weight)
        daily_change = total_change / target_days if target_days > 0 else 0.0
        if goal is Goal.LOSE_WEIGHT:
            daily_change = -daily_change
        return daily_change

    @staticmethod
    def calculate_bmr(gender: str, weight: float, height: float, age: int) -> float:
        """Mifflin-St Jeor basal metabolic rate.

        Only a case-insensitive "MALE" uses the male constant; every other
        gender value, OTHER included, falls back to the female formula.
        """
        base = 10 * weight + 6.25 * height - 5 * age
        if (gender or "").strip().upper() == "MALE":
            return base + 5
        return base - 161

    @staticmethod
    def build_exercise_sets(goal: Goal) -> List[ExerciseSet]:
        return [
            ExerciseSet(
                name=template.name,
                equipment=template.equipment,
                duration_minutes=template.duration_minutes,
                sessions_per_week=template.sessions_per_week,
            )
            for template in EXERCISE_TABLE[goal]
        ]

    @staticmethod
    def split_meals(daily_calories: float) -> Dict[str, float]:
        return {meal: daily_calories * share for meal, share in MEAL_SPLIT.items()}

    @classmethod
    def generate(cls, profile: UserProfile) -> Tuple[ExercisePlan, NutritionPlan]:
        """Create a new, unsaved exercise and nutrition plan for ``profile``."""
        goal = cls.detect_goal(profile.curr_weight, profile.desired_weight)
        daily_change = cls.daily_calorie_change(
            profile.curr_weight, profile.desired_weight, profile.target_days, goal
        )

        exercise_plan = ExercisePlan(
            user_id=profile.user_id,
            goal=goal.value,
            daily_calorie_change=daily_change,
            exercise_sets=cls.build_exercise_sets(goal),
        )

        bmr = cls.calculate_bmr(profile.gender, profile.curr_weight, profile.height, profile.age)
        daily_calories = max(bmr + daily_change, MIN_DAILY_CALORIES)
        meals = cls.split_meals(daily_calories)

        nutrition_plan = NutritionPlan(
            user_id=profile.user_id,
            daily_calories_to_eat=daily_calories,
            breakfast_calories=meals["breakfast"],
            lunch_calories=meals["lunch"],
            dinner_calories=meals["dinner"],
            pre_workout_calories=meals["pre_workout"],
            post_workout_calories=meals["post_workout"],
            breakfast_foods=list(MEAL_FOODS["breakfast"]),
            lunch_foods=list(MEAL_FOODS["lunch"]),
            dinner_foods=list(MEAL_FOODS["dinner"]),
            pre_workout_foods=list(MEAL_FOODS["pre_workout"]),
            post_workout_foods=list(MEAL_FOODS["post_workout"]),
        )

        return exercise_plan, nutrition_plan
