# office_terms\core\domain\terms\experience.py
"""
terms/experience.py
===================

How long someone has held office, as a count of distinct calendar days.

Periods may overlap, abut, or be listed in any order; every day is
counted once. Inverted periods (end before start) contribute nothing.
Endpoints may be partial-precision: a start widens to its first day
and an end to its last ("2004" → 2004-01-01 .. 2004-12-31). An open
period (end None) runs to `as_of`, today by default.

    Experience(("2022-01-01", "2022-01-31"), ("2022-02-01", "2022-02-28")).total()
    # 59
"""

from __future__ import annotations

import datetime
from typing import Iterable, List, Optional, Tuple, Union

from ..dates.calendar import CalendarValue
from ..models import OfficeTerm

Endpoint = Union[CalendarValue, datetime.date, str, None]
Interval = Tuple[datetime.date, datetime.date]

__all__ = ["Experience"]


def _coerce(value: Endpoint) -> Optional[CalendarValue]:
    if value is None or isinstance(value, CalendarValue):
        return value
    if isinstance(value, datetime.date):
        return CalendarValue.from_date(value)
    return CalendarValue.from_iso(value)


class Experience:
    """Distinct days covered by a set of (start, end) periods."""

    def __init__(self, *periods: Tuple[Endpoint, Endpoint], as_of: Optional[datetime.date] = None):
        self.as_of = as_of or datetime.date.today()
        self._intervals = self._merge(self._interval(start, end) for start, end in periods)

    @classmethod
    def from_terms(cls, terms: Iterable[OfficeTerm], as_of: Optional[datetime.date] = None) -> "Experience":
        """Build from office terms; terms without a readable start are skipped."""
        periods = [(t.start_date, t.end_date) for t in terms if t.start_date is not None]
        return cls(*periods, as_of=as_of)

    def _interval(self, start: Endpoint, end: Endpoint) -> Optional[Interval]:
        first = _coerce(start)
        if first is None:
            return None
        last = _coerce(end)
        last_day = last.last_day() if last is not None else self.as_of
        first_day = first.first_day()
        if last_day < first_day:
            return None
        return first_day, last_day

    @staticmethod
    def _merge(intervals: Iterable[Optional[Interval]]) -> List[Interval]:
        merged: List[Interval] = []
        for first, last in sorted(i for i in intervals if i is not None):
            if merged and first <= merged[-1][1] + datetime.timedelta(days=1):
                if last > merged[-1][1]:
                    merged[-1] = (merged[-1][0], last)
            else:
                merged.append((first, last))
        return merged

    def total(self) -> int:
        """Number of distinct days in office."""
        return sum((last - first).days + 1 for first, last in self._intervals)

    def before(self, cutoff: Endpoint) -> int:
        """Number of distinct days in office strictly before `cutoff`."""
        cut = _coerce(cutoff)
        if cut is None:
            return self.total()
        cut_day = cut.first_day()
        days = 0
        for first, last in self._intervals:
            if first >= cut_day:
                break
            days += (min(last, cut_day - datetime.timedelta(days=1)) - first).days + 1
        return days
