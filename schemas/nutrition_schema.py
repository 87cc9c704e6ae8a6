"""Schemas for anthropometric input and derived nutrition targets."""

from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List


class Sex(str, Enum):
    MALE = "male"
    FEMALE = "female"


class ActivityLevel(str, Enum):
    SEDENTARY = "sedentary"
    LIGHT = "light"
    MODERATE = "moderate"
    ACTIVE = "active"
    VERY_ACTIVE = "very-active"


class Goal(str, Enum):
    LOSE = "lose"
    MAINTAIN = "maintain"
    GAIN = "gain"


class ExperienceLevel(str, Enum):
    BEGINNER = "beginner"
    INTERMEDIATE = "intermediate"
    ADVANCED = "advanced"


# kcal per gram of each macronutrient
KCAL_PER_G_PROTEIN = 4
KCAL_PER_G_CARBS = 4
KCAL_PER_G_FAT = 9


class WarningKind(str, Enum):
    CALORIES_TOO_LOW = "calories-too-low"
    PROTEIN_TOO_LOW = "protein-too-low"
    FAT_TOO_LOW = "fat-too-low"


class AnthropometricInput(BaseModel):
    """A person's physical parameters, activity level and goal.

    Numeric ranges are checked by `derive_profile`, which raises
    `InvalidInputError` naming the offending field.
    """

    model_config = ConfigDict(frozen=True)

    weight: float = Field(..., examples=[70.0], description="Body weight in kilograms")
    height: float = Field(..., examples=[175.0], description="Height in centimeters")
    age: float = Field(..., examples=[30], description="Age in years")
    sex: Sex = Field(..., examples=["male"], description="Biological sex: male or female")
    activity_level: ActivityLevel = Field(..., examples=["moderate"], description="Activity level: sedentary, light, moderate, active, very-active")
    goal: Goal = Field(..., examples=["lose"], description="Goal: lose, maintain, gain")


class MacroGoals(BaseModel):
    """Daily macronutrient targets in grams plus the calorie total they split."""

    model_config = ConfigDict(frozen=True)

    protein_g: int = Field(..., ge=0)
    carbs_g: int = Field(..., ge=0)
    fats_g: int = Field(..., ge=0)
    calories: int = Field(..., ge=0)

    @property
    def macro_calories(self) -> int:
        """Calories implied by the gram targets."""
        return (
            self.protein_g * KCAL_PER_G_PROTEIN
            + self.carbs_g * KCAL_PER_G_CARBS
            + self.fats_g * KCAL_PER_G_FAT
        )


class NutritionProfile(BaseModel):
    """Derived energy and macro targets.

    Profiles are replaced, never edited. `target_calories` is not bounded
    here so that externally supplied profiles can still be validated.
    """

    model_config = ConfigDict(frozen=True)

    bmr: int
    tdee: int
    target_calories: int
    goal: Goal = Goal.MAINTAIN
    macro_goals: MacroGoals


class ValidationWarning(BaseModel):
    """Advisory warning raised against a nutrition profile."""

    model_config = ConfigDict(frozen=True)

    kind: WarningKind
    message: str


class ValidationReport(BaseModel):
    """Outcome of validating a nutrition profile."""

    valid: bool
    warnings: List[ValidationWarning] = []


class ProfileRequest(AnthropometricInput):
    """Request payload for deriving a nutrition profile."""

    experience_level: ExperienceLevel = Field(ExperienceLevel.BEGINNER, examples=["intermediate"], description="Training experience used for the protein advisory")


class ProfileResponse(BaseModel):
    """Derived profile plus its advisory outputs."""

    profile: NutritionProfile
    warnings: List[ValidationWarning]
    protein_needs_g: int
    meal_distribution: Dict[str, int]
    water_ml: int
