"""Dependency container wiring for the application."""

from dataclasses import dataclass

from supabase import create_client

from fitness_reports.adapters.supabase_report_repository import (
    SupabaseReportRepository,
)
from fitness_reports.config import Settings
from fitness_reports.services.reports import ReportService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    report_service: ReportService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    supabase_client = create_client(
        resolved_settings.supabase_url, resolved_settings.supabase_service_key
    )
    report_service = ReportService(
        repository=SupabaseReportRepository(supabase_client),
        default_timezone=resolved_settings.default_timezone,
        default_days=resolved_settings.default_report_days,
    )
    return AppContainer(settings=resolved_settings, report_service=report_service)
