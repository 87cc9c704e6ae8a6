"""Advisory safety checks for nutrition profiles.

Validation never raises: a self-consistent profile that breaches a
threshold is reported through warnings, not treated as a failure.
"""

from typing import List

from core.logger import get_logger
from schemas.nutrition_schema import (
    NutritionProfile,
    ValidationReport,
    ValidationWarning,
    WarningKind,
)
from services.nutrition_calculator import KCAL_PER_G_FAT, KCAL_PER_G_PROTEIN, MIN_SAFE_CALORIES

logger = get_logger("services.goal_validator")

MIN_PROTEIN_SHARE = 0.15
MIN_FAT_SHARE = 0.20

WARNING_MESSAGES = {
    WarningKind.CALORIES_TOO_LOW: "Calorie target may be too low for safe weight loss",
    WarningKind.PROTEIN_TOO_LOW: "Protein intake may be insufficient for muscle maintenance",
    WarningKind.FAT_TOO_LOW: "Fat intake may be too low for hormone production and nutrient absorption",
}


def _warning(kind: WarningKind) -> ValidationWarning:
    return ValidationWarning(kind=kind, message=WARNING_MESSAGES[kind])


def validate(profile: NutritionProfile) -> List[ValidationWarning]:
    """Check a profile against calorie, protein and fat thresholds.

    All rules are evaluated; an empty list means no issues were found.
    """
    target = profile.target_calories
    macros = profile.macro_goals
    if target > 0:
        protein_share = macros.protein_g * KCAL_PER_G_PROTEIN / target
        fat_share = macros.fats_g * KCAL_PER_G_FAT / target
    else:
        protein_share = fat_share = 0.0

    warnings = []
    if target < MIN_SAFE_CALORIES:
        warnings.append(_warning(WarningKind.CALORIES_TOO_LOW))
    if protein_share < MIN_PROTEIN_SHARE:
        warnings.append(_warning(WarningKind.PROTEIN_TOO_LOW))
    if fat_share < MIN_FAT_SHARE:
        warnings.append(_warning(WarningKind.FAT_TOO_LOW))

    if warnings:
        logger.debug("Profile warnings: %s", [w.kind.value for w in warnings])
    return warnings


def build_report(profile: NutritionProfile) -> ValidationReport:
    """Wrap `validate` into a report with an overall `valid` flag."""
    warnings = validate(profile)
    return ValidationReport(valid=not warnings, warnings=warnings)
