# office_terms\core\domain\dates\normalizer.py
"""
dates/normalizer.py
===================

Turn one free-text date expression into a :class:`CalendarValue`.

Pipeline
--------

1. Tidy (NFKC, whitespace) and rewrite dotted numeric dates
   ("24.12.2007") to ISO.
2. Apply the locale's `pretidy` transform.
3. Apply the locale's ordered token remap (local month names → English,
   incumbency markers → "").
4. Classify the result against four shapes, first match wins:

       ISO             "2004", "2004-06", "2004-06-03"
       day + month     "3 June 2004", "June 3, 2004"
       month + year    "June 2004"
       bare year       "987", "2004"

   Anything else raises :class:`UnrecognizedDateShape`; the normalizer
   never guesses.

Day-precision values go through `dateutil`'s parser; month- and
year-precision values are assembled directly from the matched numbers
and the month table, so a valid partial date is never rejected for
lacking a day.

An empty input, or one that collapses to nothing once incumbency
markers are removed, yields ``None`` ("no date"), which is distinct from
a raised :class:`DateError` ("a date we cannot read").
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Optional

from dateutil import parser as dateutil_parser

from ..exceptions import (
    DateError,
    InvalidCalendarDate,
    MissingRequiredLocaleToken,
    UnrecognizedDateShape,
)
from ..text import tidy
from .calendar import CalendarValue, month_name, month_number
from .locales import LocaleDateRules

# ---------------------------------------------------------------------------
# Shapes
# ---------------------------------------------------------------------------

_DOTTED_DMY_RE = re.compile(r"^(\d{1,2})\.\s?(\d{1,2})\.\s?(\d{4})\.?$")

_ISO_RE = re.compile(r"^(\d{4})(?:-(\d{1,2})(?:-(\d{1,2}))?)?$")
_DMY_RE = re.compile(r"^(\d{1,2}) ([^\W\d_]+),? (\d{4})$")
_MDY_RE = re.compile(r"^([^\W\d_]+) (\d{1,2}),? (\d{4})$")
_MY_RE = re.compile(r"^([^\W\d_]+),? (\d{4})$")
_YEAR_RE = re.compile(r"^(\d{3,4})$")


# ---------------------------------------------------------------------------
# Explicit result type
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class DateResult:
    """
    Outcome of a non-raising normalization.

    Exactly one of three states:
        - ok with a value            (a date)
        - ok with value None         (no date / incumbent)
        - not ok, carrying `error`   (unreadable date)
    """

    value: Optional[CalendarValue] = None
    error: Optional[DateError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    def unwrap(self) -> Optional[CalendarValue]:
        if self.error is not None:
            raise self.error
        return self.value


# ---------------------------------------------------------------------------
# Steps
# ---------------------------------------------------------------------------


def _dotted_to_iso(text: str) -> str:
    match = _DOTTED_DMY_RE.match(text)
    if not match:
        return text
    day, month, year = match.groups()
    return f"{year}-{int(month):02d}-{int(day):02d}"


def translate(raw: object, rules: LocaleDateRules) -> str:
    """
    Tidy, pre-tidy and remap `raw` into the canonical English form the
    shape classifier understands. Returns "" for empty / incumbent input.
    """
    text = tidy(raw)
    if not text:
        return ""
    text = _dotted_to_iso(text)
    text = rules.pretidy(text)
    text = rules.remap_tokens(text)
    return tidy(text)


def _require_month(token: str, raw: str, rules: LocaleDateRules) -> int:
    number = month_number(token)
    if number is None:
        raise MissingRequiredLocaleToken(token, raw=raw, locale=rules.ui_locale_code)
    return number


def _day_precision(
    year: int, month: int, day: int, raw: str, rules: LocaleDateRules
) -> CalendarValue:
    text = f"{day} {month_name(month)} {year:04d}"
    try:
        parsed = dateutil_parser.parse(text, dayfirst=True)
    except (ValueError, OverflowError) as e:
        raise InvalidCalendarDate(raw, str(e), locale=rules.ui_locale_code) from e
    return CalendarValue.from_date(parsed.date())


def _month_precision(
    year: int, month: int, raw: str, rules: LocaleDateRules
) -> CalendarValue:
    try:
        return CalendarValue(year, month)
    except ValueError as e:
        raise InvalidCalendarDate(raw, str(e), locale=rules.ui_locale_code) from e


def classify(
    translated: str, rules: LocaleDateRules, raw: Optional[str] = None
) -> Optional[CalendarValue]:
    """
    Build a CalendarValue from an already-translated string.

    `raw` is only used for error messages; it defaults to `translated`.
    """
    raw = translated if raw is None else raw
    text = tidy(translated)
    if not text:
        return None

    match = _ISO_RE.match(text)
    if match:
        year, month, day = match.groups()
        if day is not None:
            return _day_precision(int(year), int(month), int(day), raw, rules)
        if month is not None:
            return _month_precision(int(year), int(month), raw, rules)
        return CalendarValue(int(year))

    match = _DMY_RE.match(text)
    if match:
        day, token, year = match.groups()
        month = _require_month(token, raw, rules)
        return _day_precision(int(year), month, int(day), raw, rules)

    match = _MDY_RE.match(text)
    if match:
        token, day, year = match.groups()
        month = _require_month(token, raw, rules)
        return _day_precision(int(year), month, int(day), raw, rules)

    match = _MY_RE.match(text)
    if match:
        token, year = match.groups()
        month = _require_month(token, raw, rules)
        return _month_precision(int(year), month, raw, rules)

    match = _YEAR_RE.match(text)
    if match:
        return CalendarValue(int(match.group(1)))

    raise UnrecognizedDateShape(raw, translated=text, locale=rules.ui_locale_code)


def normalize(raw: object, rules: LocaleDateRules) -> Optional[CalendarValue]:
    """
    Normalize one date expression.

    Returns:
        CalendarValue, or None when the input is empty or only an
        incumbency marker.

    Raises:
        UnrecognizedDateShape, MissingRequiredLocaleToken,
        InvalidCalendarDate (all DateError).
    """
    raw_text = tidy(raw)
    return classify(translate(raw_text, rules), rules, raw=raw_text)


def try_normalize(raw: object, rules: LocaleDateRules) -> DateResult:
    """Non-raising variant of :func:`normalize`."""
    try:
        return DateResult(value=normalize(raw, rules))
    except DateError as e:
        return DateResult(error=e)


__all__ = [
    "DateResult",
    "translate",
    "classify",
    "normalize",
    "try_normalize",
]
