# office_terms\core\domain\text.py
"""
Small, deterministic text helpers shared by the date and term engines.
"""

from __future__ import annotations

import re
import unicodedata

__all__ = ["tidy", "deordinaled"]

# Matches any run of Unicode whitespace characters.
_WHITESPACE_RE = re.compile(r"\s+")

_ORDINAL = r"\d+(?:st|nd|rd|th)"
_ORDINAL_PAIR_RE = re.compile(rf"^{_ORDINAL} (?:and|&) {_ORDINAL} ")
_ORDINAL_RE = re.compile(rf"^{_ORDINAL} ")


def tidy(text: object) -> str:
    """
    Collapse and trim whitespace in a Unicode-safe way.

    Steps:
      * Unicode NFKC normalization (full-width forms, NBSP, ...).
      * Convert all whitespace runs to a single ASCII space.
      * Strip leading and trailing spaces.

    Non-strings (including None) become "".
    """
    if not isinstance(text, str):
        return ""

    text = unicodedata.normalize("NFKC", text)
    text = _WHITESPACE_RE.sub(" ", text)
    return text.strip()


def deordinaled(text: object) -> str:
    """
    Strip a leading English ordinal (or ordinal pair) from an office label.

    >>> deordinaled("2nd Presidential Chief of Staff")
    'Presidential Chief of Staff'
    >>> deordinaled("1st and 3rd Minister of Finance")
    'Minister of Finance'
    """
    label = tidy(text)
    label = _ORDINAL_PAIR_RE.sub("", label)
    return _ORDINAL_RE.sub("", label)
