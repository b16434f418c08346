from __future__ import annotations

import csv
import io
from datetime import date
from typing import Iterable

from ..common.datetime_utils import format_date
from ..core.constants import CSV_HEADERS
from .model import Record

CSV_MIMETYPE = "text/csv"


def export_filename(today: date) -> str:
    return f"employee_directory_{today.isoformat()}.csv"


def _csv_row(record: Record) -> dict:
    employment = record.employment
    return dict(
        zip(
            CSV_HEADERS,
            (
                record.first_name,
                record.last_name,
                record.middle_name,
                record.position,
                record.department,
                record.contact.email or "",
                record.contact.phone or "",
                record.contact.messenger_name or "",
                record.contact.fb_link or "",
                employment.status.value if employment and employment.status else "",
                format_date(employment.hire_date) if employment else "",
                format_date(employment.resignation_date) if employment else "",
            ),
        )
    )


def records_to_csv(records: Iterable[Record]) -> str:
    """Serialize records with the fixed directory column order.

    Fields containing a comma, quote or newline are quoted, with inner quotes doubled.
    """
    out = io.StringIO()
    writer = csv.DictWriter(out, fieldnames=list(CSV_HEADERS))
    writer.writeheader()
    for record in records:
        writer.writerow(_csv_row(record))
    return out.getvalue()
