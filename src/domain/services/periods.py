"""Reporting period helpers for transaction lists."""

from collections.abc import Iterable
from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum

from src.domain.models.records import Transaction


class Period(str, Enum):
    """Reporting periods offered by the dashboard."""

    DAY = "Day"
    MONTH = "Month"
    YEAR = "Year"
    TOTAL = "Total"
    CUSTOM = "Custom"


@dataclass(frozen=True)
class DateRange:
    """Inclusive calendar date range."""

    start: date
    end: date

    @property
    def is_valid(self) -> bool:
        return self.start <= self.end


def period_bounds(
    period: Period | str,
    today: date,
    custom_range: DateRange | None = None,
) -> tuple[date | None, date | None]:
    """Return inclusive start and end dates for a period.

    Args:
        period: Selected reporting period.
        today: Reference date for relative periods.
        custom_range: Range used when ``period`` is Custom.

    Returns:
        tuple: ``(start, end)``; None means unbounded on that side.
    """
    period = Period(period)
    if period == Period.DAY:
        return today, today
    if period == Period.MONTH:
        return date(today.year, today.month, 1), today
    if period == Period.YEAR:
        return date(today.year, 1, 1), today
    if period == Period.CUSTOM and custom_range is not None:
        return custom_range.start, custom_range.end
    return None, None


def filter_by_period(
    transactions: Iterable[Transaction],
    period: Period | str,
    today: date,
    custom_range: DateRange | None = None,
) -> list[Transaction]:
    """Return transactions dated within the selected period.

    A custom range whose start is after its end matches nothing.
    """
    if custom_range is not None and Period(period) == Period.CUSTOM:
        if not custom_range.is_valid:
            return []
    start, end = period_bounds(period, today, custom_range)
    selected = []
    for tx in transactions:
        tx_date = _as_date(tx.date)
        if start is not None and tx_date < start:
            continue
        if end is not None and tx_date > end:
            continue
        selected.append(tx)
    return selected


def _as_date(value: date) -> date:
    if isinstance(value, datetime):
        return value.date()
    return value


__all__ = ["Period", "DateRange", "period_bounds", "filter_by_period"]
