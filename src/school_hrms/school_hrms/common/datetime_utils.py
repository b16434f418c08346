from __future__ import annotations

from datetime import date, datetime
from typing import Any, Optional

from ..core.constants import SERVICE_PLACEHOLDER


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD string into date."""
    return datetime.strptime(value, "%Y-%m-%d").date()


def now_local() -> datetime:
    """Current local time.

    Note: Wrapped so callers can inject a fixed clock in tests.
    """
    return datetime.now()


def coerce_date(value: Any) -> Optional[date]:
    """Best-effort conversion of a stored date value; never raises.

    Accepts ``date``/``datetime`` objects and ISO strings, with or without a
    time part (``2019-06-01`` or ``2019-06-01T00:00:00.000Z``).
    Anything else (including malformed strings) yields ``None``.
    """
    if value is None:
        return None
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        text = value.strip()[:10]
        try:
            return parse_iso_date(text)
        except ValueError:
            return None
    return None


def months_between(start: date, end: date) -> int:
    """Whole calendar months from ``start`` to ``end``.

    The month is only counted once the day-of-month has been reached, so
    2020-01-31 -> 2020-02-29 is 0 months. Negative when ``start`` is after ``end``.
    """
    months = (end.year - start.year) * 12 + (end.month - start.month)
    if end.day < start.day:
        months -= 1
    return months


def service_months(hire_date: Any, *, today: Optional[date] = None) -> Optional[int]:
    """Elapsed whole months of service, or None when unknown/in the future."""
    hire = coerce_date(hire_date)
    if hire is None:
        return None
    months = months_between(hire, today or now_local().date())
    if months < 0:
        return None
    return months


def service_years(hire_date: Any, *, today: Optional[date] = None) -> Optional[int]:
    months = service_months(hire_date, today=today)
    if months is None:
        return None
    return months // 12


def _plural(count: int, unit: str) -> str:
    return f"{count} {unit}" if count == 1 else f"{count} {unit}s"


def format_years_of_service(hire_date: Any, *, today: Optional[date] = None) -> str:
    """Human readable length of service, e.g. ``"3 years, 1 month"``.

    Unknown, unparsable or future hire dates render as a single space.
    """
    months = service_months(hire_date, today=today)
    if months is None:
        return SERVICE_PLACEHOLDER
    if months == 0:
        return "less than a month"
    if months < 12:
        return _plural(months, "month")

    years, rem = divmod(months, 12)
    if rem == 0:
        return _plural(years, "year")
    return f"{_plural(years, 'year')}, {_plural(rem, 'month')}"


def format_date(value: Any) -> str:
    d = coerce_date(value)
    return d.strftime("%Y-%m-%d") if d else ""
