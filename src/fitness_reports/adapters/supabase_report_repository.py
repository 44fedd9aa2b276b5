"""Supabase repository for report inputs."""

from dataclasses import dataclass
from datetime import UTC, datetime
from uuid import UUID

from supabase import Client

from fitness_reports.domain.logs import (
    FoodEntry,
    Goals,
    StepsLog,
    UserProfile,
    WaistLog,
    WeightLog,
    WorkoutLog,
)
from fitness_reports.services.reports import ReportRepository


@dataclass
class SupabaseReportRepository(ReportRepository):
    """Supabase implementation for report queries."""

    client: Client

    def get_profile(self, user_id: UUID) -> UserProfile | None:
        """Return the stored goals and timezone for a user."""
        response = (
            self.client.table("user_profiles")
            .select("timezone, target_weight, target_waist, daily_protein_target")
            .eq("user_id", str(user_id))
            .limit(1)
            .execute()
        )
        if not response.data:
            return None
        row = response.data[0]
        return UserProfile(
            user_id=user_id,
            goals=Goals(
                target_weight=_optional_float(row.get("target_weight")),
                target_waist=_optional_float(row.get("target_waist")),
                daily_protein_target=_optional_float(row.get("daily_protein_target")),
            ),
            timezone=row.get("timezone") or None,
        )

    def list_weight_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WeightLog]:
        """Return weight readings in the time range."""
        rows = self._select_range(
            "weight_logs", "logged_at, weight, notes", user_id, start, end
        )
        return [
            WeightLog(
                logged_at=_parse_timestamp(row.get("logged_at")),
                weight=float(row.get("weight") or 0.0),
                notes=str(row.get("notes") or ""),
            )
            for row in rows
        ]

    def list_waist_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WaistLog]:
        """Return waist readings in the time range."""
        rows = self._select_range(
            "waist_logs", "logged_at, waist, notes", user_id, start, end
        )
        return [
            WaistLog(
                logged_at=_parse_timestamp(row.get("logged_at")),
                waist=float(row.get("waist") or 0.0),
                notes=str(row.get("notes") or ""),
            )
            for row in rows
        ]

    def list_food_entries(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[FoodEntry]:
        """Return food entries in the time range."""
        rows = self._select_range(
            "food_entries",
            "logged_at, food_name, protein, calories",
            user_id,
            start,
            end,
        )
        return [
            FoodEntry(
                logged_at=_parse_timestamp(row.get("logged_at")),
                protein=float(row.get("protein") or 0.0),
                calories=float(row.get("calories") or 0.0),
                food_name=str(row.get("food_name") or ""),
            )
            for row in rows
        ]

    def list_workout_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[WorkoutLog]:
        """Return workouts in the time range."""
        rows = self._select_range(
            "workout_logs",
            "logged_at, workout_type, duration, notes",
            user_id,
            start,
            end,
        )
        return [
            WorkoutLog(
                logged_at=_parse_timestamp(row.get("logged_at")),
                duration=float(row.get("duration") or 0.0),
                workout_type=str(row.get("workout_type") or ""),
                notes=str(row.get("notes") or ""),
            )
            for row in rows
        ]

    def list_steps_logs(
        self, user_id: UUID, start: datetime, end: datetime
    ) -> list[StepsLog]:
        """Return step counts in the time range."""
        rows = self._select_range(
            "steps_logs", "logged_at, steps, notes", user_id, start, end
        )
        return [
            StepsLog(
                logged_at=_parse_timestamp(row.get("logged_at")),
                steps=int(row.get("steps") or 0),
                notes=str(row.get("notes") or ""),
            )
            for row in rows
        ]

    def _select_range(  # noqa: PLR0913
        self,
        table: str,
        columns: str,
        user_id: UUID,
        start: datetime,
        end: datetime,
    ) -> list[dict[str, object]]:
        response = (
            self.client.table(table)
            .select(columns)
            .eq("user_id", str(user_id))
            .gte("logged_at", start.isoformat())
            .lt("logged_at", end.isoformat())
            .order("logged_at", desc=False)
            .execute()
        )
        return response.data or []


def _parse_timestamp(raw: object) -> datetime:
    if not isinstance(raw, str) or not raw:
        raise ValueError("Log row is missing logged_at")
    parsed = datetime.fromisoformat(raw)
    if parsed.tzinfo is None:
        return parsed.replace(tzinfo=UTC)
    return parsed


def _optional_float(value: object) -> float | None:
    if value is None or value == "":
        return None
    return float(value)
