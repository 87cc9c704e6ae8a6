"""Nutrition API router.

Exposes profile derivation and profile validation. Route functions are
thin: they hand the request payload to the nutrition services and shape
the result; `InvalidInputError` is turned into a 400 by the app's handlers.
"""

from fastapi import APIRouter
from core.logger import get_logger
from schemas import (
    AnthropometricInput,
    NutritionProfile,
    ProfileRequest,
    ProfileResponse,
    ValidationReport,
)
from services import goal_validator
from services.nutrition_calculator import (
    calculate_protein_needs,
    calculate_water_needs,
    derive_profile,
    distribute_meal_calories,
)

logger = get_logger("api.nutrition")
router = APIRouter(prefix="/api/nutrition", tags=["nutrition"])


@router.post("/profile", response_model=ProfileResponse)
def create_profile(payload: ProfileRequest):
    """Derive a nutrition profile and its advisories for one person.

    Args:
        payload: `ProfileRequest` with anthropometrics, goal and experience level.

    Returns:
        `ProfileResponse` with the profile, safety warnings, protein advisory,
        per-meal calorie split and daily water target.

    Raises:
        InvalidInputError: If weight, height or age is not a positive number.
    """
    logger.info("Deriving profile (goal=%s, activity=%s)", payload.goal.value, payload.activity_level.value)
    anthro = AnthropometricInput(**payload.model_dump(exclude={"experience_level"}))
    profile = derive_profile(anthro)
    return ProfileResponse(
        profile=profile,
        warnings=goal_validator.validate(profile),
        protein_needs_g=calculate_protein_needs(payload.weight, payload.experience_level, payload.goal),
        meal_distribution=distribute_meal_calories(profile.target_calories),
        water_ml=calculate_water_needs(payload.weight, payload.activity_level),
    )


@router.post("/validate", response_model=ValidationReport)
def validate_profile(profile: NutritionProfile):
    """Check an existing profile against the safety thresholds."""
    report = goal_validator.build_report(profile)
    logger.info("Validated profile: valid=%s warnings=%s", report.valid, len(report.warnings))
    return report
