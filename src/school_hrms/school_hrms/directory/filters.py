from __future__ import annotations

from datetime import date
from typing import Iterable, Optional

from ..common.datetime_utils import now_local, service_years
from .model import DirectoryCriteria, Record


def _matches_name(record: Record, name: str) -> bool:
    if not name:
        return True
    full_name = f"{record.first_name or ''} {record.last_name or ''}".lower()
    return name.lower() in full_name


def _matches_exact(value: str, wanted: str) -> bool:
    return not wanted or value == wanted


def _matches_service(record: Record, criteria: DirectoryCriteria, today: date) -> bool:
    if criteria.years_of_service is None:
        return True
    years = service_years(record.hire_date, today=today)
    if years is None:
        return False
    return criteria.years_of_service.contains(years)


def matches(record: Record, criteria: DirectoryCriteria, *, today: Optional[date] = None) -> bool:
    """True when ``record`` passes every set criterion (all criteria are ANDed)."""
    today = today or now_local().date()
    return (
        _matches_name(record, criteria.name)
        and _matches_exact(record.department, criteria.department)
        and _matches_exact(record.position, criteria.position)
        and (criteria.status is None or record.employment_status == criteria.status)
        and _matches_service(record, criteria, today)
    )


def filter_records(records: Iterable[Record], criteria: DirectoryCriteria, *, today: Optional[date] = None) -> list[Record]:
    today = today or now_local().date()
    return [r for r in records if matches(r, criteria, today=today)]
