"""Domain models for period reports."""

from dataclasses import dataclass, field
from datetime import date
from enum import StrEnum


@dataclass(frozen=True)
class DateRange:
    """Inclusive range of calendar days."""

    start: date
    end: date

    @property
    def days(self) -> int:
        """Number of calendar days covered, both ends included."""
        return (self.end - self.start).days + 1

    def contains(self, day: date) -> bool:
        """Return True when the day falls inside the range."""
        return self.start <= day <= self.end


class MetricStatus(StrEnum):
    """Direction-aware classification of a metric's change."""

    IMPROVING = "improving"
    NEEDS_ATTENTION = "needsAttention"
    STABLE = "stable"


@dataclass(frozen=True)
class Change:
    """Difference between a metric's end and start values."""

    absolute: float
    percent: float
    is_positive: bool


@dataclass(frozen=True)
class TrendPoint:
    """A single day in a trend series."""

    day: date
    value: float


@dataclass(frozen=True)
class MetricReport:
    """Start/end values, change and trend for one tracked metric.

    ``start_is_duration`` and ``end_is_duration`` are only set for workouts,
    where a boundary value is either total minutes or a session count.
    """

    start: float | None = None
    end: float | None = None
    change: Change | None = None
    trend: list[TrendPoint] = field(default_factory=list)
    status: MetricStatus = MetricStatus.STABLE
    goal_progress: float | None = None
    start_is_duration: bool | None = None
    end_is_duration: bool | None = None


@dataclass(frozen=True)
class Report:
    """Aggregated report for a date range."""

    period: DateRange
    weight: MetricReport
    waist: MetricReport
    protein: MetricReport
    workout: MetricReport
    steps: MetricReport
    avg_calories: float
    avg_protein: float
    avg_steps: float
    total_workout_minutes: float
    calories_trend: list[TrendPoint] = field(default_factory=list)
