"""Report API endpoints."""

from __future__ import annotations

import logging
from datetime import date, datetime
from typing import TYPE_CHECKING

from fastapi import APIRouter, Depends, HTTPException, Query, Request, status

from fitness_reports.api.auth import require_user
from fitness_reports.api.report_models import WeeklyReportResponse
from fitness_reports.domain.logs import UserContext
from fitness_reports.services.insights import summarize_report

if TYPE_CHECKING:
    from fitness_reports.containers import AppContainer

router = APIRouter(prefix="/reports", tags=["reports"])
logger = logging.getLogger(__name__)


@router.get("/weekly", response_model=WeeklyReportResponse)
async def weekly_report(
    request: Request,
    user: UserContext = Depends(require_user),
    start_date: str | None = Query(default=None, alias="startDate"),
    end_date: str | None = Query(default=None, alias="endDate"),
) -> WeeklyReportResponse:
    """Return the report for a date range, defaulting to the last week."""
    container: AppContainer = request.app.state.container
    start, end = _parse_range(start_date, end_date)
    try:
        report = container.report_service.get_report(user, start, end)
    except Exception:
        logger.exception("Failed to build report", extra={"user_id": user.user_id})
        raise
    return WeeklyReportResponse.from_report(report, summarize_report(report))


def _parse_range(
    start_raw: str | None, end_raw: str | None
) -> tuple[date | None, date | None]:
    if start_raw is None and end_raw is None:
        return None, None
    if start_raw is None or end_raw is None:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Both startDate and endDate are required",
        )
    try:
        start = datetime.fromisoformat(start_raw).date()
        end = datetime.fromisoformat(end_raw).date()
    except ValueError as exc:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST, detail="Invalid date format"
        ) from exc
    if start > end:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Start date must be before or equal to end date",
        )
    return start, end
