"""Meal templates and daily calorie distribution."""

import math

from routine_forge.domain.plan import MealItem
from routine_forge.domain.profile import DietPreference, Goal

BREAKFAST = "Breakfast"
MID_MORNING_SNACK = "Mid-morning Snack"
LUNCH = "Lunch"
EVENING_SNACK = "Evening Snack"
DINNER = "Dinner"

MEAL_SLOTS: dict[int, tuple[str, ...]] = {
    3: (BREAKFAST, LUNCH, DINNER),
    4: (BREAKFAST, LUNCH, EVENING_SNACK, DINNER),
    5: (BREAKFAST, MID_MORNING_SNACK, LUNCH, EVENING_SNACK, DINNER),
}

MEAL_WEIGHTS: dict[int, tuple[float, ...]] = {
    3: (0.25, 0.40, 0.35),
    4: (0.25, 0.35, 0.15, 0.25),
    5: (0.22, 0.10, 0.35, 0.13, 0.20),
}

# Keyed by (is_veg, is_fat_loss).
_MEAL_DESCRIPTIONS: dict[tuple[bool, bool], dict[str, str]] = {
    (True, True): {
        BREAKFAST: "Moong dal chilla + curd / tofu dip",
        MID_MORNING_SNACK: "Buttermilk + roasted chana",
        LUNCH: "Dal + salad + 2 rotis (or quinoa) + sabzi",
        EVENING_SNACK: "Sprouts chaat or a fruit bowl",
        DINNER: "Paneer/tofu bhurji + veggies + light roti",
    },
    (True, False): {
        BREAKFAST: "Oats + fruits + nuts (add milk/curd or soy milk)",
        MID_MORNING_SNACK: "Banana + peanut butter",
        LUNCH: "Rajma/chole + rice + salad + curd (optional)",
        EVENING_SNACK: "Paneer/tofu sandwich or roasted makhana",
        DINNER: "Paneer/tofu + veggies + 2 rotis",
    },
    (False, True): {
        BREAKFAST: "Egg omelette + fruit",
        MID_MORNING_SNACK: "Boiled eggs + cucumber",
        LUNCH: "Grilled chicken/fish + salad + small rice/roti",
        EVENING_SNACK: "Greek yogurt or clear chicken soup",
        DINNER: "Chicken curry (lean) + veggies + light roti",
    },
    (False, False): {
        BREAKFAST: "Oats + fruits + nuts + eggs",
        MID_MORNING_SNACK: "Egg sandwich + fruit",
        LUNCH: "Grilled chicken + rice + veggies",
        EVENING_SNACK: "Chicken wrap or protein shake",
        DINNER: "Fish/chicken + veggies + roti",
    },
}


def total_calories(goal: Goal) -> int:
    """Daily calorie budget; diet does not change it."""
    if goal is Goal.FAT_LOSS:
        return 1700
    if goal is Goal.MAINTENANCE:
        return 2000
    return 2400


def distribute_calories(total: int, weights: tuple[float, ...]) -> list[int]:
    """Split ``total`` by weight so the parts sum to it exactly.

    Every part but the last is rounded half-up; the last takes the remainder.
    """
    if not weights:
        return []
    parts = [_round_half_up(total * weight) for weight in weights[:-1]]
    parts.append(total - sum(parts))
    return parts


def plan_meals(
    diet: DietPreference, goal: Goal, meals_per_day: int
) -> tuple[list[MealItem], int]:
    """Return the meal slots for the day and the calorie total."""
    slots = MEAL_SLOTS.get(meals_per_day, MEAL_SLOTS[3])
    weights = MEAL_WEIGHTS[len(slots)]
    descriptions = _MEAL_DESCRIPTIONS[
        (diet is not DietPreference.NONVEG, goal is Goal.FAT_LOSS)
    ]
    total = total_calories(goal)
    kcal_parts = distribute_calories(total, weights)
    meals = [
        MealItem(name=slot, desc=descriptions[slot], kcal=kcal)
        for slot, kcal in zip(slots, kcal_parts, strict=True)
    ]
    return meals, total


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)
