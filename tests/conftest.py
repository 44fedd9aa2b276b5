"""Shared test fixtures."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import UUID, uuid4

import pytest

from fitness_reports.config import Settings
from fitness_reports.containers import AppContainer
from fitness_reports.domain.logs import (
    FoodEntry,
    StepsLog,
    UserProfile,
    WaistLog,
    WeightLog,
    WorkoutLog,
)
from fitness_reports.services.reports import ReportRepository, ReportService


@dataclass
class InMemoryReportRepository(ReportRepository):
    """In-memory report repository for tests."""

    profiles: dict[UUID, UserProfile] = field(default_factory=dict)
    weight: list[WeightLog] = field(default_factory=list)
    waist: list[WaistLog] = field(default_factory=list)
    food: list[FoodEntry] = field(default_factory=list)
    workouts: list[WorkoutLog] = field(default_factory=list)
    steps: list[StepsLog] = field(default_factory=list)
    queries: list[tuple[datetime, datetime]] = field(default_factory=list)

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        return self.profiles.get(user_id)

    def list_weight_logs(self, user_id: UUID, start, end) -> list[WeightLog]:
        self.queries.append((start, end))
        return _window(self.weight, start, end)

    def list_waist_logs(self, user_id: UUID, start, end) -> list[WaistLog]:
        return _window(self.waist, start, end)

    def list_food_entries(self, user_id: UUID, start, end) -> list[FoodEntry]:
        return _window(self.food, start, end)

    def list_workout_logs(self, user_id: UUID, start, end) -> list[WorkoutLog]:
        return _window(self.workouts, start, end)

    def list_steps_logs(self, user_id: UUID, start, end) -> list[StepsLog]:
        return _window(self.steps, start, end)


def _window(entries, start, end):  # type: ignore[no-untyped-def]
    return sorted(
        (entry for entry in entries if start <= entry.logged_at < end),
        key=lambda entry: entry.logged_at,
    )


@pytest.fixture
def settings() -> Settings:
    return Settings(
        supabase_url="https://example.supabase.co",
        supabase_service_key="test.service.key",
        api_token="api-token",
    )


@pytest.fixture
def user_id() -> UUID:
    return uuid4()


@pytest.fixture
def report_repository() -> InMemoryReportRepository:
    return InMemoryReportRepository()


@pytest.fixture
def container(
    settings: Settings, report_repository: InMemoryReportRepository
) -> AppContainer:
    report_service = ReportService(
        repository=report_repository,
        default_timezone=settings.default_timezone,
        default_days=settings.default_report_days,
    )
    return AppContainer(settings=settings, report_service=report_service)
