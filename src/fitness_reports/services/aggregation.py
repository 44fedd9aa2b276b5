"""Period report aggregation over logged measurements.

Everything here is pure: callers pass records already limited to the user and
localized to the user's timezone, and get a fresh ``Report`` back.
"""

from collections.abc import Callable
from datetime import date

from fitness_reports.domain.logs import (
    FoodEntry,
    Goals,
    ReportLogs,
    StepsLog,
    WaistLog,
    WeightLog,
    WorkoutLog,
)
from fitness_reports.domain.reports import (
    Change,
    DateRange,
    MetricReport,
    MetricStatus,
    Report,
)
from fitness_reports.services.trends import (
    EntryT,
    build_trend,
    daily_totals,
    entries_in_range,
    group_by_day,
    round_half_up,
)

STATUS_THRESHOLD_PERCENT = 2
FULL_PROGRESS = 100.0


def compute_report(period: DateRange, logs: ReportLogs, goals: Goals) -> Report:
    """Aggregate the logs falling inside ``period`` into a report."""
    weight_logs = entries_in_range(logs.weight, period)
    waist_logs = entries_in_range(logs.waist, period)
    food = entries_in_range(logs.food, period)
    workouts = entries_in_range(logs.workouts, period)
    steps_logs = entries_in_range(logs.steps, period)
    days = period.days

    avg_protein = round_half_up(sum(entry.protein for entry in food) / days, 1)

    return Report(
        period=period,
        weight=_body_metric(period, weight_logs, _weight, goals.target_weight),
        waist=_body_metric(period, waist_logs, _waist, goals.target_waist),
        protein=_protein_metric(period, food, avg_protein, goals),
        workout=_workout_metric(period, workouts),
        steps=_steps_metric(period, steps_logs),
        avg_calories=round_half_up(sum(entry.calories for entry in food) / days),
        avg_protein=avg_protein,
        avg_steps=round_half_up(sum(log.steps for log in steps_logs) / days),
        total_workout_minutes=sum(log.duration or 0 for log in workouts),
        calories_trend=build_trend(food, _calories, reduction="sum", digits=0),
    )


def calculate_change(
    start: float | None, end: float | None, lower_is_better: bool = False
) -> Change | None:
    """Return the change from start to end, or None when either is missing.

    ``is_positive`` marks a favorable change, so a drop counts as positive when
    lower values are better. No change is never favorable.
    """
    if start is None or end is None:
        return None
    delta = end - start
    if start != 0:
        percent = delta / start * 100
    elif end != 0:
        percent = 100.0
    else:
        percent = 0.0
    return Change(
        absolute=round_half_up(delta, 1),
        percent=round_half_up(percent, 1),
        is_positive=delta < 0 if lower_is_better else delta > 0,
    )


def get_status(change: Change | None) -> MetricStatus:
    """Classify a change; moves under 2% are stable."""
    if change is None or abs(change.percent) < STATUS_THRESHOLD_PERCENT:
        return MetricStatus.STABLE
    if change.is_positive:
        return MetricStatus.IMPROVING
    return MetricStatus.NEEDS_ATTENTION


def calculate_goal_progress(
    start: float | None, end: float | None, target: float | None
) -> float | None:
    """Return percent of the distance from start to target covered by end."""
    if target is None or start is None or end is None:
        return None
    losing = start > target
    total_needed = abs(start - target)
    progress_made = abs(start - end)
    moving_correctly = end < start if losing else end > start
    if total_needed > 0 and moving_correctly:
        return min(FULL_PROGRESS, progress_made / total_needed * 100)
    if start == target:
        return FULL_PROGRESS
    return 0.0


def calculate_protein_goal_progress(
    avg_protein: float, daily_target: float | None
) -> float | None:
    """Return average protein as a capped percentage of the daily target."""
    if daily_target is None or daily_target <= 0:
        return None
    return min(FULL_PROGRESS, avg_protein / daily_target * 100)


def _body_metric(
    period: DateRange,
    entries: list[EntryT],
    selector: Callable[[EntryT], float],
    target: float | None,
) -> MetricReport:
    start = _closest_reading(entries, period.start, selector)
    end = _closest_reading(entries, period.end, selector, latest=True)
    change = calculate_change(start, end, lower_is_better=True)
    return MetricReport(
        start=start,
        end=end,
        change=change,
        trend=build_trend(entries, selector),
        status=get_status(change),
        goal_progress=calculate_goal_progress(start, end, target),
    )


def _protein_metric(
    period: DateRange, food: list[FoodEntry], avg_protein: float, goals: Goals
) -> MetricReport:
    if not food:
        return MetricReport()
    totals = daily_totals(food, _protein)
    start = round_half_up(_total_on(totals, period.start, min(totals)), 1)
    end = round_half_up(_total_on(totals, period.end, max(totals)), 1)
    change = calculate_change(start, end)
    return MetricReport(
        start=start,
        end=end,
        change=change,
        trend=build_trend(food, _protein, reduction="sum"),
        status=get_status(change),
        goal_progress=calculate_protein_goal_progress(
            avg_protein, goals.daily_protein_target
        ),
    )


def _steps_metric(period: DateRange, steps_logs: list[StepsLog]) -> MetricReport:
    if not steps_logs:
        return MetricReport()
    totals = daily_totals(steps_logs, _steps)
    start = _total_on(totals, period.start, min(totals))
    end = _total_on(totals, period.end, max(totals))
    change = calculate_change(start, end)
    return MetricReport(
        start=start,
        end=end,
        change=change,
        trend=build_trend(steps_logs, _steps),
        status=get_status(change),
    )


def _workout_metric(period: DateRange, workouts: list[WorkoutLog]) -> MetricReport:
    if not workouts:
        return MetricReport(start_is_duration=False, end_is_duration=False)
    by_day = group_by_day(workouts)
    start, start_is_duration = _workout_volume(
        by_day.get(period.start) or by_day[min(by_day)]
    )
    end, end_is_duration = _workout_volume(
        by_day.get(period.end) or by_day[max(by_day)]
    )
    change = calculate_change(start, end)
    return MetricReport(
        start=start,
        end=end,
        change=change,
        trend=build_trend(workouts, _duration, reduction="sum"),
        status=get_status(change),
        start_is_duration=start_is_duration,
        end_is_duration=end_is_duration,
    )


def _closest_reading(
    entries: list[EntryT],
    day: date,
    selector: Callable[[EntryT], float],
    latest: bool = False,
) -> float | None:
    """Return the reading nearest to the day.

    Ties on day distance go to the earliest reading, or the latest one when
    ``latest`` is set, so the end of a range uses the last reading of its day.
    """
    if not entries:
        return None
    ordered = sorted(entries, key=lambda entry: entry.logged_at, reverse=latest)
    closest = min(
        ordered, key=lambda entry: abs((entry.logged_at.date() - day).days)
    )
    return round_half_up(selector(closest), 1)


def _total_on(totals: dict[date, float], day: date, fallback: date) -> float:
    return totals[day] if day in totals else totals[fallback]


def _workout_volume(sessions: list[WorkoutLog]) -> tuple[float, bool]:
    """Return total minutes, or the session count when no duration was logged."""
    minutes = sum(session.duration or 0 for session in sessions)
    if minutes > 0:
        return minutes, True
    return len(sessions), False


def _weight(log: WeightLog) -> float:
    return log.weight


def _waist(log: WaistLog) -> float:
    return log.waist


def _protein(entry: FoodEntry) -> float:
    return entry.protein


def _calories(entry: FoodEntry) -> float:
    return entry.calories


def _steps(log: StepsLog) -> float:
    return log.steps


def _duration(log: WorkoutLog) -> float:
    return log.duration
