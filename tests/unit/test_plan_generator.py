"""
Unit tests for DietPlanGenerator.

Covers goal detection, calorie change, BMR, the calorie floor, the meal
split, the exercise tables and the fixed food lists. No database involved.
"""

import math

import pytest

from app.models import ExercisePlan, NutritionPlan, UserProfile
from app.services.plan_generator import (
    DietPlanGenerator,
    EXERCISE_TABLE,
    Goal,
    MEAL_SPLIT,
    MIN_DAILY_CALORIES,
)


def make_profile(**overrides) -> UserProfile:
    fields = dict(
        user_id="user-1",
        name="Asha Rao",
        email="asha@example.com",
        age=30,
        gender="FEMALE",
        height=165,
        curr_weight=70,
        desired_weight=60,
        target_days=100,
    )
    fields.update(overrides)
    return UserProfile(**fields)


def meal_total(plan: NutritionPlan) -> float:
    return (
        plan.breakfast_calories
        + plan.lunch_calories
        + plan.dinner_calories
        + plan.pre_workout_calories
        + plan.post_workout_calories
    )


# ── goal detection ──────────────────────────────────────────────────

@pytest.mark.parametrize(
    "curr, desired, expected",
    [
        (70, 70, Goal.MAINTAIN),
        (70, 70.49, Goal.MAINTAIN),
        (70, 69.51, Goal.MAINTAIN),
        (70, 69.5, Goal.LOSE_WEIGHT),
        (70, 60, Goal.LOSE_WEIGHT),
        (70, 70.5, Goal.GAIN_WEIGHT),
        (55, 65, Goal.GAIN_WEIGHT),
    ],
)
def test_detect_goal(curr, desired, expected):
    assert DietPlanGenerator.detect_goal(curr, desired) is expected


# ── calorie change ──────────────────────────────────────────────────

def test_daily_calorie_change_is_deficit_when_losing():
    change = DietPlanGenerator.daily_calorie_change(70, 60, 100, Goal.LOSE_WEIGHT)
    assert change == pytest.approx(-770)


def test_daily_calorie_change_is_surplus_when_gaining():
    change = DietPlanGenerator.daily_calorie_change(60, 65, 50, Goal.GAIN_WEIGHT)
    assert change == pytest.approx(770)


def test_daily_calorie_change_without_target_days_is_zero():
    assert DietPlanGenerator.daily_calorie_change(70, 60, 0, Goal.LOSE_WEIGHT) == 0


def test_maintain_change_is_near_zero():
    exercise_plan, _ = DietPlanGenerator.generate(make_profile(desired_weight=70.2))
    assert exercise_plan.goal == "MAINTAIN"
    # 0.2 kg over 100 days
    assert abs(exercise_plan.daily_calorie_change) < 7700 * 0.5 / 100


# ── BMR ─────────────────────────────────────────────────────────────

def test_bmr_male():
    expected = 10 * 80 + 6.25 * 180 - 5 * 25 + 5
    assert math.isclose(DietPlanGenerator.calculate_bmr("MALE", 80, 180, 25), expected)


def test_bmr_male_is_case_insensitive():
    assert DietPlanGenerator.calculate_bmr("male", 80, 180, 25) == DietPlanGenerator.calculate_bmr(
        "MALE", 80, 180, 25
    )


def test_bmr_male_ignores_surrounding_whitespace():
    expected = 10 * 80 + 6.25 * 180 - 5 * 25 + 5
    assert math.isclose(DietPlanGenerator.calculate_bmr(" male ", 80, 180, 25), expected)


@pytest.mark.parametrize("gender", ["FEMALE", "female", "OTHER", "other"])
def test_bmr_non_male_uses_female_formula(gender):
    expected = 10 * 70 + 6.25 * 165 - 5 * 30 - 161
    assert math.isclose(DietPlanGenerator.calculate_bmr(gender, 70, 165, 30), expected)


# ── full generation ─────────────────────────────────────────────────

def test_worked_example_female_losing_weight():
    exercise_plan, nutrition_plan = DietPlanGenerator.generate(make_profile())

    assert exercise_plan.goal == "LOSE_WEIGHT"
    assert exercise_plan.daily_calorie_change == pytest.approx(-770)

    # BMR 1420.25 - 770 = 650.25, floored to 1200
    assert nutrition_plan.daily_calories_to_eat == pytest.approx(1200)
    assert nutrition_plan.breakfast_calories == pytest.approx(300)
    assert nutrition_plan.lunch_calories == pytest.approx(420)
    assert nutrition_plan.dinner_calories == pytest.approx(300)
    assert nutrition_plan.pre_workout_calories == pytest.approx(90)
    assert nutrition_plan.post_workout_calories == pytest.approx(90)


def test_male_gaining_weight_above_floor():
    profile = make_profile(gender="Male", age=25, height=180, curr_weight=60, desired_weight=66, target_days=120)
    exercise_plan, nutrition_plan = DietPlanGenerator.generate(profile)

    bmr = 10 * 60 + 6.25 * 180 - 5 * 25 + 5
    change = 7700 * 6 / 120
    assert exercise_plan.goal == "GAIN_WEIGHT"
    assert exercise_plan.daily_calorie_change == pytest.approx(change)
    assert nutrition_plan.daily_calories_to_eat == pytest.approx(bmr + change)


@pytest.mark.parametrize(
    "overrides",
    [
        {},
        {"desired_weight": 70},
        {"desired_weight": 90, "target_days": 30},
        {"gender": "MALE", "curr_weight": 120, "desired_weight": 80, "target_days": 10},
        {"gender": "OTHER", "age": 100, "height": 120, "curr_weight": 35, "desired_weight": 34},
    ],
)
def test_meals_sum_to_daily_calories_and_respect_floor(overrides):
    _, nutrition_plan = DietPlanGenerator.generate(make_profile(**overrides))

    assert nutrition_plan.daily_calories_to_eat >= MIN_DAILY_CALORIES
    assert meal_total(nutrition_plan) == pytest.approx(nutrition_plan.daily_calories_to_eat)


def test_meal_split_sums_to_one():
    assert sum(MEAL_SPLIT.values()) == pytest.approx(1.0)


@pytest.mark.parametrize(
    "desired, expected_names",
    [
        (60, ["Brisk Walking", "Jumping Jacks", "Bodyweight Squats", "Plank"]),
        (80, ["Push Ups", "Squats", "Resistance Band Rows", "Plank"]),
        (70, ["Walking", "Stretching"]),
    ],
)
def test_exercise_sets_follow_goal_table(desired, expected_names):
    exercise_plan, _ = DietPlanGenerator.generate(make_profile(desired_weight=desired))
    assert [exercise.name for exercise in exercise_plan.exercise_sets] == expected_names


def test_exercise_set_details_for_weight_gain():
    sets = DietPlanGenerator.build_exercise_sets(Goal.GAIN_WEIGHT)
    rows = sets[2]
    assert (rows.name, rows.equipment, rows.duration_minutes, rows.sessions_per_week) == (
        "Resistance Band Rows",
        "Band",
        15,
        3,
    )


def test_every_goal_has_an_exercise_table():
    assert set(EXERCISE_TABLE) == set(Goal)


def test_food_lists_do_not_depend_on_goal():
    _, losing = DietPlanGenerator.generate(make_profile(desired_weight=60))
    _, gaining = DietPlanGenerator.generate(make_profile(desired_weight=80))

    assert losing.breakfast_foods == ["Oats", "Boiled Eggs / Paneer", "Fruit"]
    assert losing.lunch_foods == ["Rice / Roti", "Dal / Chicken", "Vegetables", "Curd"]
    assert losing.dinner_foods == ["Grilled Paneer / Chicken", "Salad"]
    assert losing.pre_workout_foods == ["Banana", "Black Coffee"]
    assert losing.post_workout_foods == ["Protein Shake", "Milk / Boiled Eggs"]
    for slot in ("breakfast_foods", "lunch_foods", "dinner_foods", "pre_workout_foods", "post_workout_foods"):
        assert getattr(losing, slot) == getattr(gaining, slot)


def test_generate_builds_new_unsaved_records_for_the_profile():
    profile = make_profile()
    exercise_plan, nutrition_plan = DietPlanGenerator.generate(profile)

    assert isinstance(exercise_plan, ExercisePlan)
    assert isinstance(nutrition_plan, NutritionPlan)
    assert exercise_plan.id is None and nutrition_plan.id is None
    assert exercise_plan.user_id == profile.user_id
    assert nutrition_plan.user_id == profile.user_id
    # The profile itself is left alone
    assert profile.exercise_plans == []
    assert profile.nutrition_plans == []


def test_generate_is_deterministic():
    first_exercise, first_nutrition = DietPlanGenerator.generate(make_profile())
    second_exercise, second_nutrition = DietPlanGenerator.generate(make_profile())

    assert first_exercise.daily_calorie_change == second_exercise.daily_calorie_change
    assert first_nutrition.daily_calories_to_eat == second_nutrition.daily_calories_to_eat
    assert [s.name for s in first_exercise.exercise_sets] == [s.name for s in second_exercise.exercise_sets]
