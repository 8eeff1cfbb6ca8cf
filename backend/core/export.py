"""CSV export of the yearly breakdown table."""

from __future__ import annotations

import csv
import io
from typing import Iterable, List

from backend.core.sip import YearRecord

# Column order is consumed by downstream spreadsheets; do not reorder.
CSV_HEADERS: List[str] = [
    "Year",
    "Monthly SIP",
    "Yearly Investment",
    "Total Invested",
    "Year-End Value",
    "Returns",
]


def _row(record: YearRecord) -> List[int]:
    return [
        record.year,
        record.monthly_contribution,
        record.yearly_contribution,
        record.cumulative_contributed,
        record.end_of_year_value,
        record.gain,
    ]


def yearly_breakdown_to_csv(records: Iterable[YearRecord]) -> str:
    """Serialize the breakdown as comma-separated text, one line per year.

    Returns an empty string when there is nothing to export.
    """
    rows = [_row(record) for record in records]
    if not rows:
        return ""

    buffer = io.StringIO()
    writer = csv.writer(buffer, lineterminator="\n")
    writer.writerow(CSV_HEADERS)
    writer.writerows(rows)
    return buffer.getvalue().rstrip("\n")


def _plain_number(value: float) -> str:
    if float(value).is_integer():
        return str(int(value))
    return str(value)


def export_filename(monthly_investment: float, years: int) -> str:
    return f"yearly_breakdown_{_plain_number(monthly_investment)}x{years}y.csv"
