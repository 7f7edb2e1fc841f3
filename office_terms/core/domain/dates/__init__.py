# office_terms\core\domain\dates\__init__.py
"""
Date engine: partial-precision calendar values, per-locale rules, the
single-date normalizer and the combined-range splitter.

    from office_terms.core.domain.dates import get_locale_rules, normalize, split

    rules = get_locale_rules("de")
    normalize("18. März 2004", rules)        # CalendarValue(2004, 3, 18)
    split("18.–23. März 2004", rules)        # (2004-03-18, 2004-03-23)
"""

from .calendar import MONTH_NAMES, CalendarValue, month_name, month_number
from .locales import (
    INCUMBENT_TOKEN,
    LOCALE_RULES,
    LocaleDateRules,
    get_locale_rules,
    supported_locales,
)
from .normalizer import DateResult, classify, normalize, translate, try_normalize
from .ranges import SEPARATOR, split, split_fragments, try_split

__all__ = [
    "MONTH_NAMES",
    "CalendarValue",
    "month_name",
    "month_number",
    "INCUMBENT_TOKEN",
    "LOCALE_RULES",
    "LocaleDateRules",
    "get_locale_rules",
    "supported_locales",
    "DateResult",
    "classify",
    "normalize",
    "translate",
    "try_normalize",
    "SEPARATOR",
    "split",
    "split_fragments",
    "try_split",
]
