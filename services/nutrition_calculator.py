"""Nutrition calculation helpers.

Derives BMR, TDEE, a goal-adjusted calorie target and a macro split from a
person's anthropometrics. Everything here is a pure function over the fixed
lookup tables below; there is no instance or module state to manage.
"""

import math
from types import MappingProxyType
from typing import Dict

from core.exceptions import InvalidInputError
from core.logger import get_logger
from schemas.nutrition_schema import (
    ActivityLevel,
    AnthropometricInput,
    ExperienceLevel,
    Goal,
    KCAL_PER_G_CARBS,
    KCAL_PER_G_FAT,
    KCAL_PER_G_PROTEIN,
    MacroGoals,
    NutritionProfile,
    Sex,
)

logger = get_logger("services.nutrition_calculator")

MIN_SAFE_CALORIES = 1200
DEFICIT_KCAL = 500
SURPLUS_KCAL = 400

ACTIVITY_MULTIPLIERS = MappingProxyType({
    ActivityLevel.SEDENTARY: 1.2,
    ActivityLevel.LIGHT: 1.375,
    ActivityLevel.MODERATE: 1.55,
    ActivityLevel.ACTIVE: 1.725,
    ActivityLevel.VERY_ACTIVE: 1.9,
})

# (protein, fat, carbs) as fractions of total calories
MACRO_SPLITS = MappingProxyType({
    Goal.LOSE: (0.35, 0.30, 0.35),
    Goal.GAIN: (0.25, 0.25, 0.50),
    Goal.MAINTAIN: (0.30, 0.30, 0.40),
})

# g of protein per kg body weight, scaling up with training experience
PROTEIN_PER_KG = MappingProxyType({
    Goal.LOSE: MappingProxyType({
        ExperienceLevel.BEGINNER: 1.6,
        ExperienceLevel.INTERMEDIATE: 1.8,
        ExperienceLevel.ADVANCED: 2.2,
    }),
    Goal.GAIN: MappingProxyType({
        ExperienceLevel.BEGINNER: 1.4,
        ExperienceLevel.INTERMEDIATE: 1.6,
        ExperienceLevel.ADVANCED: 1.8,
    }),
    Goal.MAINTAIN: MappingProxyType({
        ExperienceLevel.BEGINNER: 1.2,
        ExperienceLevel.INTERMEDIATE: 1.4,
        ExperienceLevel.ADVANCED: 1.6,
    }),
})

MEAL_DISTRIBUTION = MappingProxyType({
    "breakfast": 0.25,
    "lunch": 0.30,
    "dinner": 0.30,
    "snack": 0.15,
})

WATER_ML_PER_KG = 35
WATER_ACTIVITY_FACTORS = MappingProxyType({
    ActivityLevel.SEDENTARY: 1.0,
    ActivityLevel.LIGHT: 1.1,
    ActivityLevel.MODERATE: 1.2,
    ActivityLevel.ACTIVE: 1.3,
    ActivityLevel.VERY_ACTIVE: 1.4,
})


def round_half_up(value: float) -> int:
    """Round to the nearest integer with halves rounding up (2.5 -> 3)."""
    return int(math.floor(value + 0.5))


def _require_positive(field: str, value) -> float:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        raise InvalidInputError(field, value, reason="must be a number")
    if not math.isfinite(value) or value <= 0:
        raise InvalidInputError(field, value)
    return float(value)


def validate_anthropometrics(anthro: AnthropometricInput) -> None:
    """Check that weight, height and age are finite positive numbers.

    Raises:
        InvalidInputError: naming the first offending field.
    """
    _require_positive("weight", anthro.weight)
    _require_positive("height", anthro.height)
    _require_positive("age", anthro.age)


def calculate_bmr(weight_kg: float, height_cm: float, age: float, sex: Sex) -> float:
    """Calculate BMR using the Mifflin-St Jeor equation."""
    offset = 5 if Sex(sex) is Sex.MALE else -161
    return 10 * weight_kg + 6.25 * height_cm - 5 * age + offset


def calculate_tdee(bmr: float, activity_level: ActivityLevel) -> int:
    """Scale BMR by the activity multiplier and round to whole kcal."""
    val = round_half_up(bmr * ACTIVITY_MULTIPLIERS[ActivityLevel(activity_level)])
    logger.debug("TDEE calculated: %s", val)
    return val


def calculate_target_calories(tdee: int, goal: Goal) -> int:
    """Derive a daily calorie target from TDEE based on a goal.

    Weight loss applies a fixed deficit but never drops below 1200 kcal.
    """
    goal = Goal(goal)
    if goal is Goal.LOSE:
        val = max(MIN_SAFE_CALORIES, tdee - DEFICIT_KCAL)
    elif goal is Goal.GAIN:
        val = tdee + SURPLUS_KCAL
    else:
        val = tdee
    logger.debug("Target calories for goal %s: %s", goal.value, val)
    return val


def calculate_macros(target_calories: int, goal: Goal) -> MacroGoals:
    """Allocate macronutrient targets (grams) from a calorie target.

    Each gram amount is rounded independently, so the calories implied by
    the grams can differ from the target by up to 8.5 kcal.
    """
    protein_pct, fat_pct, carb_pct = MACRO_SPLITS[Goal(goal)]
    macros = MacroGoals(
        protein_g=round_half_up(target_calories * protein_pct / KCAL_PER_G_PROTEIN),
        carbs_g=round_half_up(target_calories * carb_pct / KCAL_PER_G_CARBS),
        fats_g=round_half_up(target_calories * fat_pct / KCAL_PER_G_FAT),
        calories=target_calories,
    )
    logger.debug("Macros calculated: %s", macros)
    return macros


def calculate_protein_needs(weight_kg: float, experience_level: ExperienceLevel, goal: Goal) -> int:
    """Daily protein advisory in grams, from a per-kg goal/experience table."""
    weight_kg = _require_positive("weight", weight_kg)
    per_kg = PROTEIN_PER_KG[Goal(goal)][ExperienceLevel(experience_level)]
    return round_half_up(weight_kg * per_kg)


def distribute_meal_calories(total_calories: int) -> Dict[str, int]:
    """Split a daily calorie total across breakfast, lunch, dinner and a snack."""
    return {meal: round_half_up(total_calories * share) for meal, share in MEAL_DISTRIBUTION.items()}


def calculate_water_needs(weight_kg: float, activity_level: ActivityLevel) -> int:
    """Daily water target in millilitres: 35 ml/kg scaled up with activity."""
    weight_kg = _require_positive("weight", weight_kg)
    factor = WATER_ACTIVITY_FACTORS[ActivityLevel(activity_level)]
    return round_half_up(weight_kg * WATER_ML_PER_KG * factor)


def derive_profile(anthro: AnthropometricInput) -> NutritionProfile:
    """Derive a complete nutrition profile from anthropometric input.

    Args:
        anthro: Weight, height, age, sex, activity level and goal.

    Returns:
        A new `NutritionProfile`; identical input always yields an equal profile.

    Raises:
        InvalidInputError: If weight, height or age is not a positive number,
            or together they imply a non-positive BMR.
    """
    validate_anthropometrics(anthro)
    bmr = calculate_bmr(anthro.weight, anthro.height, anthro.age, anthro.sex)
    if bmr <= 0:
        raise InvalidInputError("bmr", bmr, reason="weight, height and age yield a non-positive BMR")
    tdee = calculate_tdee(bmr, anthro.activity_level)
    target_calories = calculate_target_calories(tdee, anthro.goal)
    macros = calculate_macros(target_calories, anthro.goal)
    return NutritionProfile(
        bmr=round_half_up(bmr),
        tdee=tdee,
        target_calories=target_calories,
        goal=Goal(anthro.goal),
        macro_goals=macros,
    )


__all__ = [
    "ACTIVITY_MULTIPLIERS",
    "MACRO_SPLITS",
    "PROTEIN_PER_KG",
    "MIN_SAFE_CALORIES",
    "round_half_up",
    "validate_anthropometrics",
    "calculate_bmr",
    "calculate_tdee",
    "calculate_target_calories",
    "calculate_macros",
    "calculate_protein_needs",
    "distribute_meal_calories",
    "calculate_water_needs",
    "derive_profile",
]
