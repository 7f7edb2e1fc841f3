# office_terms\core\domain\models.py
from typing import Any, Dict, Iterable, List, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field

from office_terms.core.domain.dates.calendar import CalendarValue

# --- Value Objects ---

class LinkedText(BaseModel):
    """
    Display text of an infobox field plus the pages it links to.
    Both are kept verbatim; no disambiguation is attempted.
    """
    model_config = ConfigDict(frozen=True)

    stated_as: str = Field(..., description="Text as it appears in the infobox")
    links: List[str] = Field(default_factory=list, description="Linked page titles, in order")

    @classmethod
    def from_field(cls, data: Mapping[str, Any]) -> "LinkedText":
        """Build from a parser field value: {"text": ..., "links": [{"page": ...}]}."""
        links = [
            link["page"]
            for link in (data.get("links") or [])
            if isinstance(link, Mapping) and link.get("page")
        ]
        return cls(stated_as=str(data.get("text") or ""), links=links)

    def to_dict(self) -> Dict[str, Any]:
        return {"stated_as": self.stated_as, "links": list(self.links)}

# --- Entities ---

class OfficeTerm(BaseModel):
    """
    One contiguous (or open-ended) period in one office.

    Dates are CalendarValues when they could be read. When a date could
    not be read and the builder was allowed to fall back, the tidied
    source text is kept in `start_date_raw` / `end_date_raw` instead.
    """
    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    position_label: str
    office: Optional[LinkedText] = None

    start_date: Optional[CalendarValue] = None
    end_date: Optional[CalendarValue] = None
    start_date_raw: Optional[str] = None
    end_date_raw: Optional[str] = None

    ordinal: Optional[int] = None
    predecessor: Optional[LinkedText] = None
    successor: Optional[LinkedText] = None
    constituency: Optional[LinkedText] = None

    # Block number the term came from (document order)
    index: int = 0

    @property
    def start(self) -> Optional[str]:
        """Wire value of the start: ISO partial date, raw fallback, or None."""
        if self.start_date is not None:
            return self.start_date.isoformat()
        return self.start_date_raw

    @property
    def end(self) -> Optional[str]:
        if self.end_date is not None:
            return self.end_date.isoformat()
        return self.end_date_raw

    @property
    def is_open(self) -> bool:
        """True when the term has a start but no end (still serving)."""
        return self.start is not None and self.end is None

    def to_record(self) -> Dict[str, Any]:
        """Flat record; absent values produce no key."""
        return _compact({
            "positionLabel": self.position_label,
            "office": self.office.to_dict() if self.office else None,
            "startDate": self.start,
            "endDate": self.end,
            "ordinal": str(self.ordinal) if self.ordinal is not None else None,
            "predecessor": self.predecessor.to_dict() if self.predecessor else None,
            "successor": self.successor.to_dict() if self.successor else None,
            "constituency": self.constituency.to_dict() if self.constituency else None,
        })

    def to_claims(self) -> Dict[str, Any]:
        """
        The same data keyed by Wikidata qualifier properties:
        P580 start time, P582 end time, P1545 series ordinal,
        P1365 replaces, P1366 replaced by, P768 electoral district.
        """
        office = self.office or LinkedText(stated_as=self.position_label)
        return _compact({
            "office": office.to_dict(),
            "P580": self.start,
            "P582": self.end,
            "P1545": str(self.ordinal) if self.ordinal is not None else None,
            "P1365": self.predecessor.to_dict() if self.predecessor else None,
            "P1366": self.successor.to_dict() if self.successor else None,
            "P768": self.constituency.to_dict() if self.constituency else None,
        })

# --- Helpers ---

def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    return {key: value for key, value in data.items() if value is not None}


def sort_terms(terms: Iterable[OfficeTerm]) -> List[OfficeTerm]:
    """
    Stable chronological sort by start date.
    Undated terms (and raw-fallback starts) keep their relative order at the end.
    """
    def key(term: OfficeTerm):
        if term.start_date is None:
            return (1, (0, 0, 0))
        return (0, term.start_date.sort_key())

    return sorted(terms, key=key)
