"""Report service that loads user logs and runs the aggregation."""

import logging
from collections.abc import Callable
from dataclasses import dataclass, field, replace
from datetime import UTC, date, datetime, time, timedelta
from typing import Protocol
from uuid import UUID
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from fitness_reports.domain.logs import (
    FoodEntry,
    Goals,
    ReportLogs,
    StepsLog,
    UserContext,
    UserProfile,
    WaistLog,
    WeightLog,
    WorkoutLog,
)
from fitness_reports.domain.reports import DateRange, Report
from fitness_reports.services.aggregation import compute_report
from fitness_reports.services.trends import EntryT

_logger = logging.getLogger(__name__)


class ReportRepository(Protocol):
    """Persistence interface for report inputs.

    Every ``list_*`` method returns records with ``start <= logged_at < end``,
    ascending by timestamp.
    """

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the user's goals and timezone, if stored."""

    def list_weight_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WeightLog]:
        """Return weight readings within a time range."""

    def list_waist_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WaistLog]:
        """Return waist readings within a time range."""

    def list_food_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        """Return food entries within a time range."""

    def list_workout_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WorkoutLog]:
        """Return workouts within a time range."""

    def list_steps_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[StepsLog]:
        """Return step counts within a time range."""


def _utc_now() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class ReportService:
    """Service for building period reports in the user's timezone."""

    repository: ReportRepository
    default_timezone: str = "UTC"
    default_days: int = 7
    clock: Callable[[], datetime] = field(default=_utc_now)

    def get_report(
        self,
        user: UserContext,
        start: date | None = None,
        end: date | None = None,
    ) -> Report:
        """Return the report for a day range, or the default recent range."""
        profile = self.repository.get_profile(user.user_id)
        tz = self._resolve_timezone(profile)
        period = self.resolve_period(tz, start, end)
        window_start = datetime.combine(period.start, time.min, tzinfo=tz)
        window_end = datetime.combine(
            period.end + timedelta(days=1), time.min, tzinfo=tz
        )
        query = (
            user.user_id,
            window_start.astimezone(UTC),
            window_end.astimezone(UTC),
        )
        logs = ReportLogs(
            weight=_localize(self.repository.list_weight_logs(*query), tz),
            waist=_localize(self.repository.list_waist_logs(*query), tz),
            food=_localize(self.repository.list_food_entries(*query), tz),
            workouts=_localize(self.repository.list_workout_logs(*query), tz),
            steps=_localize(self.repository.list_steps_logs(*query), tz),
        )
        _logger.info(
            "Report: user_id=%s start=%s end=%s weight=%s waist=%s food=%s "
            "workouts=%s steps=%s",
            user.user_id,
            period.start,
            period.end,
            len(logs.weight),
            len(logs.waist),
            len(logs.food),
            len(logs.workouts),
            len(logs.steps),
        )
        goals = profile.goals if profile else Goals()
        return compute_report(period, logs, goals)

    def _resolve_timezone(self, profile: UserProfile | None) -> ZoneInfo:
        if profile and profile.timezone:
            try:
                return ZoneInfo(profile.timezone)
            except (ZoneInfoNotFoundError, ValueError):
                _logger.warning(
                    "Unknown timezone for user_id=%s: %s, using %s",
                    profile.user_id,
                    profile.timezone,
                    self.default_timezone,
                )
        return ZoneInfo(self.default_timezone)

    def resolve_period(
        self, tz: ZoneInfo, start: date | None, end: date | None
    ) -> DateRange:
        """Return the requested range, or the last ``default_days`` days."""
        if start is None and end is None:
            today = self.clock().astimezone(tz).date()
            return DateRange(
                start=today - timedelta(days=self.default_days - 1), end=today
            )
        if start is None or end is None:
            raise ValueError("Both start and end dates are required")
        if start > end:
            raise ValueError("Start date must be before or equal to end date")
        return DateRange(start=start, end=end)


def _localize(entries: list[EntryT], tz: ZoneInfo) -> list[EntryT]:
    return [
        replace(entry, logged_at=entry.logged_at.astimezone(tz)) for entry in entries
    ]
