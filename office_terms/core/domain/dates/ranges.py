# office_terms\core\domain\dates\ranges.py
"""
dates/ranges.py
===============

Split one "start – end" string into two dates.

Handles, among others::

    1990 - 1994                      → 1990, 1994
    April-June 2004                  → 2004-04, 2004-06
    3-10 June, 2004                  → 2004-06-03, 2004-06-10
    August 28 – October 10, 2018     → 2018-08-28, 2018-10-10
    January 2004 - 12 February 2005  → 2004-01, 2005-02-12
    2007-  /  2007 - Incumbent       → 2007, None
    since 6 April 2022               → 2022-04-06, None
    2003                             → 2003, 2003

Every dash-like character (and a locale's word separators such as
" to " or " bis ") becomes one canonical separator; hyphens inside ISO
dates are left alone.

Precision back-fill: a start fragment with no four-digit year borrows the
missing pieces from the end fragment. Whatever the start states (day,
month) stays; only the year, and for a bare day also the month, come
from the end. A start that already has a year is never touched.
"""

from __future__ import annotations

import re
from typing import Optional, Tuple

from ..exceptions import DateError, UnrecognizedDateShape
from ..text import tidy
from .calendar import CalendarValue, month_name
from .locales import INCUMBENT_TOKEN, LocaleDateRules
from .normalizer import DateResult, classify, translate

SEPARATOR = "–"

_DASH_RE = re.compile(r"\s*[-‐‑‒–—―−﹘﹣－]\s*")
_ISO_IN_TEXT_RE = re.compile(r"\b\d{4}-\d{2}(?:-\d{2})?\b")
# Stand-in for hyphens inside ISO dates while separators are rewritten.
_ISO_JOINER = "\ue000"

_HAS_YEAR_RE = re.compile(r"\b\d{4}\b")
_DAY_ONLY_RE = re.compile(r"^(\d{1,2})$")
_MONTH_ONLY_RE = re.compile(r"^([^\W\d_]+)$")
_DAY_MONTH_RE = re.compile(r"^(\d{1,2}) ([^\W\d_]+)$")
_MONTH_DAY_RE = re.compile(r"^([^\W\d_]+) (\d{1,2}),?$")


def _protect_iso(text: str) -> str:
    return _ISO_IN_TEXT_RE.sub(lambda m: m.group(0).replace("-", _ISO_JOINER), text)


def _restore_iso(text: str) -> str:
    return text.replace(_ISO_JOINER, "-")


def _canonical_separators(text: str, rules: LocaleDateRules) -> str:
    for word in rules.range_words:
        text = re.sub(re.escape(word), SEPARATOR, text, flags=re.IGNORECASE)
    text = _DASH_RE.sub(SEPARATOR, text)

    for marker in rules.open_markers:
        match = re.match(rf"{re.escape(marker)}\s+", text, flags=re.IGNORECASE)
        if match:
            text = text[match.end():]
            if SEPARATOR not in text:
                text += SEPARATOR
            break

    if text.endswith(SEPARATOR):
        text += INCUMBENT_TOKEN
    return text


def _raw_parts(raw: object, rules: LocaleDateRules) -> Tuple[str, str]:
    text = tidy(raw)
    if not text:
        return "", ""
    text = _canonical_separators(_protect_iso(text), rules)
    parts = [_restore_iso(part).strip() for part in text.split(SEPARATOR, 1)]
    if len(parts) == 1:
        return parts[0], parts[0]
    return parts[0], parts[1]


def _backfill(
    start: str, end_value: Optional[CalendarValue], raw_start: str, rules: LocaleDateRules
) -> str:
    """Give a year-less start fragment the missing components of `end_value`."""
    if end_value is None:
        return start

    year = f"{end_value.year:04d}"

    match = _DAY_ONLY_RE.match(start)
    if match:
        if end_value.month is None:
            raise UnrecognizedDateShape(
                raw_start, translated=start, locale=rules.ui_locale_code
            )
        return f"{match.group(1)} {month_name(end_value.month)} {year}"

    match = _MONTH_ONLY_RE.match(start)
    if match:
        return f"{match.group(1)} {year}"

    match = _DAY_MONTH_RE.match(start)
    if match:
        return f"{match.group(1)} {match.group(2)} {year}"

    match = _MONTH_DAY_RE.match(start)
    if match:
        return f"{match.group(2)} {match.group(1)} {year}"

    return start


def _complete_start(
    raw_start: str, end: str, end_value: Optional[CalendarValue], rules: LocaleDateRules
) -> str:
    start = translate(raw_start, rules)
    if start and end and not _HAS_YEAR_RE.search(start):
        start = _backfill(start, end_value, raw_start, rules)
    return start


def _translate_parts(
    raw_start: str, raw_end: str, rules: LocaleDateRules
) -> Tuple[str, str]:
    end = translate(raw_end, rules)
    end_value = classify(end, rules, raw=raw_end)
    return _complete_start(raw_start, end, end_value, rules), end


def split_fragments(raw: object, rules: LocaleDateRules) -> Tuple[str, str]:
    """
    Split and translate a combined range into (start, end) fragments.

    Fragments are in the canonical English form accepted by
    :func:`normalizer.classify`; "" means that side has no date (an
    empty input, or an open / incumbent end).
    """
    return _translate_parts(*_raw_parts(raw, rules), rules)


def split(
    raw: object, rules: LocaleDateRules
) -> Tuple[Optional[CalendarValue], Optional[CalendarValue]]:
    """
    Resolve a combined range into (start, end) CalendarValues.

    Either side may be None (no date / open term). A side that cannot be
    read raises DateError; failures are never swallowed.
    """
    raw_start, raw_end = _raw_parts(raw, rules)
    start, end = _translate_parts(raw_start, raw_end, rules)
    return (
        classify(start, rules, raw=raw_start),
        classify(end, rules, raw=raw_end),
    )


def try_split(raw: object, rules: LocaleDateRules) -> Tuple[DateResult, DateResult]:
    """
    Non-raising variant of :func:`split`; each side carries its own outcome.

    The end is read first and on its own. The start borrows from the end
    only when the end was readable, and a start that still cannot be read
    fails with its own text.
    """
    raw_start, raw_end = _raw_parts(raw, rules)

    try:
        end = translate(raw_end, rules)
        end_result = DateResult(value=classify(end, rules, raw=raw_end))
    except DateError as e:
        end, end_result = "", DateResult(error=e)

    try:
        start = _complete_start(raw_start, end, end_result.value, rules)
        start_result = DateResult(value=classify(start, rules, raw=raw_start))
    except DateError as e:
        start_result = DateResult(error=e)

    return start_result, end_result


__all__ = [
    "SEPARATOR",
    "split_fragments",
    "split",
    "try_split",
]
