# office_terms\core\domain\terms\field_frame.py
"""
terms/field_frame.py
====================

Numbered infobox blocks.

An officeholder infobox describes several terms in one flat mapping by
suffixing field names with a block number:

    office      = Minister of Finance          (block 0)
    term_start  = 3 May 2001
    office2     = Minister of Justice          (block 2)
    term_start2 = 12 June 2005
    subterm2    = ...                          ("sub" prefix dropped)

:func:`group_fields` splits such a mapping into one :class:`FieldFrame`
per block number, sorted by that number. A FieldFrame is read-only and
exposes the handful of fields the term builder cares about under stable
names, whatever spelling the template used.
"""

from __future__ import annotations

import re
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, Dict, List, Mapping, Optional, Sequence

from ..exceptions import MalformedFieldFrame
from ..models import LinkedText
from ..text import tidy

# ---------------------------------------------------------------------------
# Field-name vocabulary (stems, after suffix and "sub" removal)
# ---------------------------------------------------------------------------

# Explicit title sources, first present wins.
TITLE_FIELDS = ("office", "title", "order")

RANGE_FIELDS = ("term", "reign")
START_FIELDS = ("term_start", "termstart")
END_FIELDS = ("term_end", "termend")

CONSTITUENCY_FIELDS = (
    "constituency_mp",
    "constituency_am",
    "constituency",
    "riding",
    "district",
)

# Raw-text sources for a derived label, scanned in this order.
LABEL_SOURCE_FIELDS = (
    "office",
    "order",
    "title",
    "succession",
    "jr/sr",
    "parliament",
    "state_house",
    "state_senate",
    "state_assembly",
    "assembly",
    "state_delegate",
    "constituency_mp",
    "constituency_am",
    "state",
    "district",
    "ambassador_from",
)

# Keys that let the position labeler recognize a role without a title.
LABELER_KEY_FIELDS = (
    "ambassador_from",
    "constituency_mp",
    "parliament",
    "assembly",
    "state_delegate",
    "jr/sr",
    "state_house",
    "state_legislature",
    "state_senate",
    "state_assembly",
    "state",
)

_TERM_FIELDS = frozenset(
    RANGE_FIELDS
    + START_FIELDS
    + END_FIELDS
    + CONSTITUENCY_FIELDS
    + LABELER_KEY_FIELDS
    + ("order", "predecessor", "successor", "succession")
)

_OFFICE_FIELDS = _TERM_FIELDS | frozenset(TITLE_FIELDS)

_FIELD_NAME_RE = re.compile(r"^(?P<stem>.*?)(?P<index>\d*)$", re.DOTALL)
_LEADING_INT_RE = re.compile(r"^(\d+)")


# ---------------------------------------------------------------------------
# FieldFrame
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FieldFrame:
    """
    One numbered office-term block of an infobox.

    Fields
    ------

    index:
        The numeric suffix shared by the block's field names (0 when the
        names carry none). Determines document order.

    fields:
        Normalized stem → LinkedText. Read-only.
    """

    index: int
    fields: Mapping[str, LinkedText] = field(default_factory=dict)

    def __post_init__(self) -> None:
        object.__setattr__(self, "fields", MappingProxyType(dict(self.fields)))

    # -- raw access --------------------------------------------------------

    def has(self, name: str) -> bool:
        return name in self.fields

    def get(self, name: str) -> Optional[LinkedText]:
        return self.fields.get(name)

    def text(self, name: str) -> str:
        """Tidied display text of a field, "" when absent."""
        value = self.fields.get(name)
        return tidy(value.stated_as) if value is not None else ""

    def first_of(self, names: Sequence[str]) -> Optional[LinkedText]:
        """First field among `names` that is present with non-empty text."""
        for name in names:
            value = self.fields.get(name)
            if value is not None and tidy(value.stated_as):
                return value
        return None

    def _first_text(self, names: Sequence[str]) -> Optional[str]:
        value = self.first_of(names)
        return tidy(value.stated_as) if value is not None else None

    # -- semantic views ----------------------------------------------------

    @property
    def office(self) -> Optional[LinkedText]:
        """Explicit title (office, title or order field)."""
        return self.first_of(TITLE_FIELDS)

    @property
    def start_raw(self) -> Optional[str]:
        return self._first_text(START_FIELDS)

    @property
    def end_raw(self) -> Optional[str]:
        return self._first_text(END_FIELDS)

    @property
    def combined_range_raw(self) -> Optional[str]:
        return self._first_text(RANGE_FIELDS)

    @property
    def predecessor(self) -> Optional[LinkedText]:
        return self.first_of(("predecessor",))

    @property
    def successor(self) -> Optional[LinkedText]:
        return self.first_of(("successor",))

    @property
    def constituency(self) -> Optional[LinkedText]:
        return self.first_of(CONSTITUENCY_FIELDS)

    @property
    def ordinal_raw(self) -> Optional[str]:
        """Text of the "order" field when it starts with a number."""
        order = self.text("order")
        return order if _LEADING_INT_RE.match(order) else None

    @property
    def has_term_fields(self) -> bool:
        """True when the block describes a term (dates, succession, seat, ...)."""
        return any(name in _TERM_FIELDS for name in self.fields)

    def with_office(self, office: LinkedText) -> "FieldFrame":
        """Copy of this frame with `office` set as its explicit title."""
        fields: Dict[str, LinkedText] = dict(self.fields)
        fields["office"] = office
        return FieldFrame(index=self.index, fields=fields)


def parse_ordinal(text: Optional[str]) -> Optional[int]:
    """
    Leading integer of an ordinal text; 0 counts as absent.

    >>> parse_ordinal("44th President of the United States")
    44
    >>> parse_ordinal("0") is None
    True
    """
    match = _LEADING_INT_RE.match(tidy(text))
    if not match:
        return None
    value = int(match.group(1))
    return value or None


# ---------------------------------------------------------------------------
# Tokenizer
# ---------------------------------------------------------------------------


def split_field_name(name: Any) -> tuple:
    """
    Split a raw field name into (stem, index).

    >>> split_field_name("term_start2")
    ('term_start', 2)
    >>> split_field_name("SubTerm")
    ('term', 0)

    Raises MalformedFieldFrame for non-string names, names that are only
    a number, and stems that still contain digits.
    """
    if not isinstance(name, str):
        raise MalformedFieldFrame(name, "field names must be strings")

    match = _FIELD_NAME_RE.match(name.strip())
    stem = match.group("stem").strip().lower()
    digits = match.group("index")

    if stem.startswith("sub"):
        stem = stem[3:]
    if not stem:
        raise MalformedFieldFrame(name, "no field name before the block number")
    if any(ch.isdigit() for ch in stem):
        raise MalformedFieldFrame(name, "digits inside the field name")

    return stem, int(digits) if digits else 0


def group_fields(fields: Mapping[Any, Any]) -> List[FieldFrame]:
    """
    Group one infobox's flat field mapping into FieldFrames.

    Each value must be a mapping shaped like ``{"text": ..., "links":
    [{"page": ...}, ...]}``. When two spellings of the same stem land in
    one block ("term2" and "subterm2"), the first one seen is kept.
    """
    blocks: Dict[int, Dict[str, LinkedText]] = {}

    for name, value in fields.items():
        stem, index = split_field_name(name)
        if not isinstance(value, Mapping):
            raise MalformedFieldFrame(name, "field value must be a mapping")
        blocks.setdefault(index, {}).setdefault(stem, LinkedText.from_field(value))

    return [FieldFrame(index=index, fields=blocks[index]) for index in sorted(blocks)]


def is_office_infobox(fields: Mapping[Any, Any]) -> bool:
    """
    True when any field name (of any block) is a title, term, ordinal,
    succession or labeler field. Names that would not tokenize are
    ignored here, so a non-office infobox is never rejected for them.
    """
    for name in fields:
        if not isinstance(name, str):
            continue
        stem = _FIELD_NAME_RE.match(name.strip()).group("stem").strip().lower()
        if stem.startswith("sub"):
            stem = stem[3:]
        if stem in _OFFICE_FIELDS:
            return True
    return False


__all__ = [
    "TITLE_FIELDS",
    "RANGE_FIELDS",
    "START_FIELDS",
    "END_FIELDS",
    "CONSTITUENCY_FIELDS",
    "LABEL_SOURCE_FIELDS",
    "LABELER_KEY_FIELDS",
    "FieldFrame",
    "parse_ordinal",
    "split_field_name",
    "group_fields",
    "is_office_infobox",
]
