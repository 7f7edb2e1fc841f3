# office_terms\core\domain\dates\calendar.py
"""
dates.calendar
==============

The `CalendarValue` partial-precision date, plus the canonical English
month table every locale translates into.

A CalendarValue is known to year, year+month, or year+month+day
precision and serializes to exactly one of:

    - "YYYY"
    - "YYYY-MM"
    - "YYYY-MM-DD"

Values are fully ordered on (year, month, day), with a missing component
sorting before any present one (2004 < 2004-01 < 2004-01-01).
"""

from __future__ import annotations

import calendar
import datetime
import functools
import re
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

# ---------------------------------------------------------------------------
# Canonical month table
# ---------------------------------------------------------------------------

MONTH_NAMES: Tuple[str, ...] = (
    "January",
    "February",
    "March",
    "April",
    "May",
    "June",
    "July",
    "August",
    "September",
    "October",
    "November",
    "December",
)

# Lower-cased full names and common English abbreviations → month number.
_MONTH_INDEX: Dict[str, int] = {}
for _number, _name in enumerate(MONTH_NAMES, start=1):
    _MONTH_INDEX[_name.lower()] = _number
    _MONTH_INDEX[_name[:3].lower()] = _number
_MONTH_INDEX["sept"] = 9


def month_number(token: str) -> Optional[int]:
    """
    Return the 1-based month for an English month name or abbreviation.

    >>> month_number("March")
    3
    >>> month_number("sept")
    9
    >>> month_number("Brumaire") is None
    True
    """
    return _MONTH_INDEX.get((token or "").strip().rstrip(".").lower())


def month_name(number: int) -> str:
    """Canonical English name for a 1-based month number."""
    return MONTH_NAMES[number - 1]


_ISO_RE = re.compile(r"^(\d{4})(?:-(\d{2})(?:-(\d{2}))?)?$")


# ---------------------------------------------------------------------------
# CalendarValue
# ---------------------------------------------------------------------------


@functools.total_ordering
@dataclass(frozen=True, eq=True)
class CalendarValue:
    """
    An immutable partial-precision calendar date.

    Invariants (checked on construction):
        - `day` implies `month`
        - `month` is 1..12
        - `day` exists in that month of that year
    """

    year: int
    month: Optional[int] = None
    day: Optional[int] = None

    def __post_init__(self) -> None:
        if self.day is not None and self.month is None:
            raise ValueError("A CalendarValue with a day must also have a month.")
        if self.month is not None and not 1 <= self.month <= 12:
            raise ValueError(f"Month out of range: {self.month}")
        if self.day is not None:
            last = calendar.monthrange(self.year, self.month)[1]
            if not 1 <= self.day <= last:
                raise ValueError(
                    f"Day out of range for {self.year}-{self.month:02d}: {self.day}"
                )

    # -- construction ------------------------------------------------------

    @classmethod
    def from_iso(cls, text: str) -> "CalendarValue":
        """
        Parse "YYYY", "YYYY-MM" or "YYYY-MM-DD".

        Raises ValueError on anything else.
        """
        match = _ISO_RE.match((text or "").strip())
        if not match:
            raise ValueError(f"Not an ISO partial date: {text!r}")
        year, month, day = match.groups()
        return cls(
            year=int(year),
            month=int(month) if month else None,
            day=int(day) if day else None,
        )

    @classmethod
    def from_date(cls, value: datetime.date) -> "CalendarValue":
        return cls(value.year, value.month, value.day)

    # -- introspection -----------------------------------------------------

    @property
    def precision(self) -> str:
        """One of "year", "month", "day"."""
        if self.day is not None:
            return "day"
        if self.month is not None:
            return "month"
        return "year"

    def sort_key(self) -> Tuple[int, int, int]:
        return (self.year, self.month or 0, self.day or 0)

    def __lt__(self, other: object) -> bool:
        if not isinstance(other, CalendarValue):
            return NotImplemented
        return self.sort_key() < other.sort_key()

    # -- conversion --------------------------------------------------------

    def first_day(self) -> datetime.date:
        """Earliest real date this value can denote."""
        return datetime.date(self.year, self.month or 1, self.day or 1)

    def last_day(self) -> datetime.date:
        """Latest real date this value can denote."""
        month = self.month or 12
        day = self.day or calendar.monthrange(self.year, month)[1]
        return datetime.date(self.year, month, day)

    def isoformat(self) -> str:
        text = f"{self.year:04d}"
        if self.month is not None:
            text += f"-{self.month:02d}"
        if self.day is not None:
            text += f"-{self.day:02d}"
        return text

    def __str__(self) -> str:
        return self.isoformat()


__all__ = [
    "MONTH_NAMES",
    "CalendarValue",
    "month_number",
    "month_name",
]
