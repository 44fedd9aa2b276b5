"""Domain models for user-logged measurements and goals."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID


@dataclass(frozen=True)
class WeightLog:
    """A body weight reading in kilograms."""

    logged_at: datetime
    weight: float
    notes: str = ""


@dataclass(frozen=True)
class WaistLog:
    """A waist circumference reading in centimeters."""

    logged_at: datetime
    waist: float
    notes: str = ""


@dataclass(frozen=True)
class StepsLog:
    """A step count entry."""

    logged_at: datetime
    steps: int
    notes: str = ""


@dataclass(frozen=True)
class WorkoutLog:
    """A workout session; duration is in minutes."""

    logged_at: datetime
    duration: float = 0
    workout_type: str = ""
    notes: str = ""


@dataclass(frozen=True)
class FoodEntry:
    """A logged food with its protein grams and calories."""

    logged_at: datetime
    protein: float
    calories: float
    food_name: str = ""


@dataclass(frozen=True)
class Goals:
    """Optional user targets."""

    target_weight: float | None = None
    target_waist: float | None = None
    daily_protein_target: float | None = None


@dataclass(frozen=True)
class UserProfile:
    """Stored report preferences for a user."""

    user_id: UUID
    goals: Goals
    timezone: str | None = None


@dataclass(frozen=True)
class UserContext:
    """The authenticated user a request acts on behalf of."""

    user_id: UUID


@dataclass(frozen=True)
class ReportLogs:
    """Log collections feeding a report."""

    weight: list[WeightLog] = field(default_factory=list)
    waist: list[WaistLog] = field(default_factory=list)
    food: list[FoodEntry] = field(default_factory=list)
    workouts: list[WorkoutLog] = field(default_factory=list)
    steps: list[StepsLog] = field(default_factory=list)
