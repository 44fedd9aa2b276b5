"""Pydantic response models for report endpoints."""

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

from fitness_reports.domain.reports import (
    Change,
    MetricStatus,
    Report,
    TrendPoint,
)


class CamelModel(BaseModel):
    """Base model serialized with camelCase field names."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


class ChangePayload(CamelModel):
    """Change between the start and end of a period."""

    absolute: float
    percent: float
    is_positive: bool

    @classmethod
    def from_change(cls, change: Change | None) -> "ChangePayload | None":
        if change is None:
            return None
        return cls(
            absolute=change.absolute,
            percent=change.percent,
            is_positive=change.is_positive,
        )


class TrendPointPayload(CamelModel):
    """One day of a trend series."""

    date: str
    value: float


class PeriodPayload(CamelModel):
    """Report period as ISO dates."""

    start: str
    end: str


class WeeklyReportResponse(CamelModel):
    """Flat report payload consumed by the dashboard."""

    weight_start: float | None
    weight_end: float | None
    weight_change: ChangePayload | None
    weight_trend: list[TrendPointPayload]
    weight_status: MetricStatus
    weight_goal_progress: float | None
    waist_start: float | None
    waist_end: float | None
    waist_change: ChangePayload | None
    waist_trend: list[TrendPointPayload]
    waist_status: MetricStatus
    waist_goal_progress: float | None
    protein_start: float | None
    protein_end: float | None
    protein_change: ChangePayload | None
    protein_trend: list[TrendPointPayload]
    protein_status: MetricStatus
    protein_goal_progress: float | None
    workout_start: float | None
    workout_end: float | None
    workout_start_is_duration: bool
    workout_end_is_duration: bool
    workout_change: ChangePayload | None
    workout_trend: list[TrendPointPayload]
    workout_status: MetricStatus
    steps_start: float | None
    steps_end: float | None
    steps_change: ChangePayload | None
    steps_trend: list[TrendPointPayload]
    steps_status: MetricStatus
    avg_calories: int
    avg_protein: float
    avg_steps: int
    total_workout_minutes: float
    calories_trend: list[TrendPointPayload]
    period: PeriodPayload
    summary: str

    @classmethod
    def from_report(cls, report: Report, summary: str) -> "WeeklyReportResponse":
        """Flatten a report into the response shape."""
        return cls(
            weight_start=report.weight.start,
            weight_end=report.weight.end,
            weight_change=ChangePayload.from_change(report.weight.change),
            weight_trend=_trend(report.weight.trend),
            weight_status=report.weight.status,
            weight_goal_progress=report.weight.goal_progress,
            waist_start=report.waist.start,
            waist_end=report.waist.end,
            waist_change=ChangePayload.from_change(report.waist.change),
            waist_trend=_trend(report.waist.trend),
            waist_status=report.waist.status,
            waist_goal_progress=report.waist.goal_progress,
            protein_start=report.protein.start,
            protein_end=report.protein.end,
            protein_change=ChangePayload.from_change(report.protein.change),
            protein_trend=_trend(report.protein.trend),
            protein_status=report.protein.status,
            protein_goal_progress=report.protein.goal_progress,
            workout_start=report.workout.start,
            workout_end=report.workout.end,
            workout_start_is_duration=bool(report.workout.start_is_duration),
            workout_end_is_duration=bool(report.workout.end_is_duration),
            workout_change=ChangePayload.from_change(report.workout.change),
            workout_trend=_trend(report.workout.trend),
            workout_status=report.workout.status,
            steps_start=report.steps.start,
            steps_end=report.steps.end,
            steps_change=ChangePayload.from_change(report.steps.change),
            steps_trend=_trend(report.steps.trend),
            steps_status=report.steps.status,
            avg_calories=int(report.avg_calories),
            avg_protein=report.avg_protein,
            avg_steps=int(report.avg_steps),
            total_workout_minutes=report.total_workout_minutes,
            calories_trend=_trend(report.calories_trend),
            period=PeriodPayload(
                start=report.period.start.isoformat(),
                end=report.period.end.isoformat(),
            ),
            summary=summary,
        )


def _trend(points: list[TrendPoint]) -> list[TrendPointPayload]:
    return [
        TrendPointPayload(date=point.day.isoformat(), value=point.value)
        for point in points
    ]
