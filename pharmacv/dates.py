"""
Month arithmetic and fr-FR formatting for CV periods.

Dates are stored as ``YYYY-MM`` strings; day-of-month is not modeled.
Anything that does not parse is treated as absent. The current date is
always passed in explicitly.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from datetime import date
from typing import Iterable, Optional, Tuple

from .logging_utils import LOG

YearMonth = Tuple[int, int]

_YEAR_MONTH_RE = re.compile(r"^\s*(\d{4})-(\d{1,2})(?:-\d{1,2})?\s*$")

# toLocaleDateString("fr-FR", {month: "short"})
FRENCH_SHORT_MONTHS = (
    "janv.", "févr.", "mars", "avr.", "mai", "juin",
    "juil.", "août", "sept.", "oct.", "nov.", "déc.",
)

PRESENT_LABEL = "Présent"


def parse_year_month(value: Optional[str]) -> Optional[YearMonth]:
    """Parse ``YYYY-MM`` (a trailing ``-DD`` is tolerated and ignored)."""
    if not value or not isinstance(value, str):
        return None
    m = _YEAR_MONTH_RE.match(value)
    if not m:
        LOG.debug("Unparseable date ignored: %r", value)
        return None
    year, month = int(m.group(1)), int(m.group(2))
    if not 1 <= month <= 12:
        LOG.debug("Month out of range ignored: %r", value)
        return None
    return year, month


def year_month_of(day: date) -> YearMonth:
    return day.year, day.month


def months_between(start: YearMonth, end: YearMonth) -> int:
    months = (end[0] - start[0]) * 12 + (end[1] - start[1])
    return max(0, months)


def format_month_year(value: Optional[str]) -> str:
    parsed = parse_year_month(value)
    if parsed is None:
        return ""
    year, month = parsed
    return f"{FRENCH_SHORT_MONTHS[month - 1]} {year}"


def format_period(start_date: Optional[str], end_date: Optional[str], is_current: bool) -> str:
    """``"mars 2020 - Présent"`` or ``"mars 2020 - juin 2022"``; empty without a start."""
    start = format_month_year(start_date)
    if not start:
        return ""
    end = "" if is_current else format_month_year(end_date)
    return f"{start} - {end or PRESENT_LABEL}"


def experience_months(
    start_date: Optional[str],
    end_date: Optional[str],
    is_current: bool,
    now: date,
) -> Optional[int]:
    """
    Whole months spent in a position.

    Returns None when the start date does not parse. Current positions and
    positions without a usable end date run until ``now``.
    """
    start = parse_year_month(start_date)
    if start is None:
        return None
    end = None if is_current else parse_year_month(end_date)
    if end is None:
        end = year_month_of(now)
    return months_between(start, end)


def _plural_years(years: int) -> str:
    return f"{years} an{'s' if years > 1 else ''}"


def format_duration(months: Optional[int]) -> str:
    if months is None:
        return ""
    if months < 1:
        return "Moins d'1 mois"
    if months < 12:
        return f"{months} mois"
    years, remaining = divmod(months, 12)
    if remaining == 0:
        return _plural_years(years)
    return f"{_plural_years(years)} et {remaining} mois"


def format_total_months(months: int) -> str:
    """Coarse experience bucket; precise tenure is not exposed."""
    if months < 1:
        return "Débutant"
    if months < 12:
        return f"{months} mois"
    years = months // 12
    if years < 2:
        return "1 an"
    if years < 5:
        return f"{years} ans"
    if years < 10:
        return "5+ ans"
    return "10+ ans"


@dataclass(frozen=True)
class TotalExperience:
    months: int
    years: int
    formatted: str


def total_experience(experiences: Iterable, now: date) -> TotalExperience:
    """
    Sum the month counts of all experiences.

    Entries with an unparseable start date contribute nothing.
    """
    total = 0
    for exp in experiences or []:
        months = experience_months(
            getattr(exp, "start_date", None),
            getattr(exp, "end_date", None),
            bool(getattr(exp, "is_current", False)),
            now,
        )
        if months is not None:
            total += months
    return TotalExperience(months=total, years=total // 12, formatted=format_total_months(total))


def format_day(day: date) -> str:
    """``dd/mm/yyyy`` as printed by fr-FR locales."""
    return day.strftime("%d/%m/%Y")
