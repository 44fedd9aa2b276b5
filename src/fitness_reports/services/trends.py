"""Daily grouping and trend series for logged measurements."""

import math
from collections import defaultdict
from collections.abc import Callable, Iterable
from datetime import date, datetime
from typing import Literal, Protocol, TypeVar

from fitness_reports.domain.reports import DateRange, TrendPoint


class Timestamped(Protocol):
    """Any log record carrying a localized timestamp."""

    @property
    def logged_at(self) -> datetime:
        """Timestamp already converted to the user's timezone."""


EntryT = TypeVar("EntryT", bound=Timestamped)
Reduction = Literal["mean", "sum"]


def round_half_up(value: float, digits: int = 0) -> float:
    """Round halves away from negative infinity, like ``Math.round``."""
    factor = 10**digits
    return math.floor(value * factor + 0.5) / factor


def entries_in_range(entries: Iterable[EntryT], period: DateRange) -> list[EntryT]:
    """Return entries whose calendar day falls inside the period."""
    return [entry for entry in entries if period.contains(entry.logged_at.date())]


def group_by_day(entries: Iterable[EntryT]) -> dict[date, list[EntryT]]:
    """Group entries by calendar day, ascending by day then timestamp."""
    grouped: dict[date, list[EntryT]] = defaultdict(list)
    for entry in sorted(entries, key=lambda item: item.logged_at):
        grouped[entry.logged_at.date()].append(entry)
    return dict(sorted(grouped.items()))


def daily_totals(
    entries: Iterable[EntryT], selector: Callable[[EntryT], float | None]
) -> dict[date, float]:
    """Sum the selected value per calendar day."""
    return {
        day: sum(selector(item) or 0 for item in items)
        for day, items in group_by_day(entries).items()
    }


def build_trend(
    entries: Iterable[EntryT],
    selector: Callable[[EntryT], float | None],
    reduction: Reduction = "mean",
    digits: int = 1,
) -> list[TrendPoint]:
    """Build a sparse daily series from log entries.

    Days with several entries are reduced with ``reduction``: ``mean`` for point
    samples such as weight, ``sum`` for daily totals such as protein. Entries
    whose selected value is ``None`` are ignored, and days left without values
    are omitted rather than zero-filled.
    """
    points: list[TrendPoint] = []
    for day, items in group_by_day(entries).items():
        values = [value for value in map(selector, items) if value is not None]
        if not values:
            continue
        total = sum(values)
        value = total / len(values) if reduction == "mean" else total
        points.append(TrendPoint(day=day, value=round_half_up(value, digits)))
    return points
