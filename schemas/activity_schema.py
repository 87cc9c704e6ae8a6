"""Schemas for logged workouts, body metrics and dashboard statistics."""

import datetime as dt
from enum import Enum
from pydantic import BaseModel, ConfigDict, Field
from typing import Dict, List, Optional, Union


class WorkoutType(str, Enum):
    STRENGTH = "strength"
    CARDIO = "cardio"
    FLEXIBILITY = "flexibility"
    RECOVERY = "recovery"


class WorkoutRecord(BaseModel):
    """A single logged workout session."""

    model_config = ConfigDict(frozen=True)

    date: Union[dt.datetime, dt.date] = Field(..., examples=["2024-05-01T07:30:00"], description="When the session happened; truncated to the day for streaks")
    workout_type: WorkoutType = Field(WorkoutType.STRENGTH, examples=["strength"])
    calories_burned: float = Field(0, ge=0, examples=[320], description="Estimated energy burned (kcal)")
    duration_minutes: Optional[float] = Field(None, ge=0, examples=[45])
    completed: bool = True


class StrengthMetric(BaseModel):
    """Best lift figures for one exercise."""

    model_config = ConfigDict(frozen=True)

    max_weight: float = Field(0, ge=0)
    max_reps: int = Field(0, ge=0)
    volume: float = Field(0, ge=0)


class MetricSample(BaseModel):
    """A body-metric measurement. Every measurement is optional."""

    model_config = ConfigDict(frozen=True)

    date: Union[dt.datetime, dt.date]
    weight: Optional[float] = Field(None, examples=[72.4], description="Body weight in kilograms")
    body_fat_percentage: Optional[float] = Field(None, examples=[18.5])
    strength_metrics: Dict[str, StrengthMetric] = {}


class DashboardStats(BaseModel):
    """Rolling behavioral statistics, recomputed on every request."""

    model_config = ConfigDict(frozen=True)

    workout_streak: int = 0
    total_workouts: int = 0
    calories_burned_30d: float = 0
    weekly_goal_progress: float = Field(0, ge=0, le=100)
    most_recent_weight: Optional[float] = None


class DashboardRequest(BaseModel):
    """Request payload carrying the raw records to aggregate."""

    sessions: List[WorkoutRecord] = []
    metrics: List[MetricSample] = []
    as_of: Optional[Union[dt.datetime, dt.date]] = Field(None, description="Reference day for streaks and windows; defaults to today")
