"""Pydantic schema package for engine inputs, outputs and API payloads."""

from .nutrition_schema import (
    ActivityLevel,
    AnthropometricInput,
    ExperienceLevel,
    Goal,
    MacroGoals,
    NutritionProfile,
    ProfileRequest,
    ProfileResponse,
    Sex,
    ValidationReport,
    ValidationWarning,
    WarningKind,
)
from .activity_schema import (
    DashboardRequest,
    DashboardStats,
    MetricSample,
    StrengthMetric,
    WorkoutRecord,
    WorkoutType,
)

__all__ = [
    "ActivityLevel",
    "AnthropometricInput",
    "ExperienceLevel",
    "Goal",
    "MacroGoals",
    "NutritionProfile",
    "ProfileRequest",
    "ProfileResponse",
    "Sex",
    "ValidationReport",
    "ValidationWarning",
    "WarningKind",
    "DashboardRequest",
    "DashboardStats",
    "MetricSample",
    "StrengthMetric",
    "WorkoutRecord",
    "WorkoutType",
]
