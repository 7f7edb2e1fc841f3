# office_terms\core\domain\terms\term_builder.py
"""
terms/term_builder.py
=====================

Assemble OfficeTerm records from the numbered blocks of one infobox.

Steps, once per document, in block-number order:

1. Gap-fill. A block without an explicit title that still describes a
   term borrows the explicit title of the block right after it (as the
   next block stated it, before any filling). Continuation blocks such
   as "term_start2" without "office2" are the usual case.
2. Label. Explicit (or inherited) title text, otherwise the
   PositionLabeler. Leading English ordinals are stripped.
3. Dates. A combined range field ("term", "reign") goes through the
   range splitter; otherwise start and end fields are normalized
   separately. Missing sides stay None.
4. Ordinal. Leading integer of the "order" field; 0 means absent.
5. Links. Office, predecessor, successor and constituency keep their
   text and link targets verbatim.
6. Blocks whose label ends up empty are dropped. Nothing else is.

Date failures
-------------
A DateError is never swallowed. With `raw_date_fallback` enabled the
builder logs a `raw_date_fallback` warning and keeps the tidied source
text for that side in `start_date_raw` / `end_date_raw`; with it
disabled the error propagates to the caller.
"""

from __future__ import annotations

from typing import List, Optional, Sequence, Tuple

import structlog

from office_terms.shared.config import settings

from ..dates.calendar import CalendarValue
from ..dates.locales import LocaleDateRules
from ..dates.normalizer import DateResult, try_normalize
from ..dates.ranges import try_split
from ..models import OfficeTerm
from ..text import deordinaled, tidy
from .field_frame import FieldFrame, parse_ordinal
from .position_labeler import PositionLabeler

logger = structlog.get_logger()

__all__ = ["TermBuilder"]


class TermBuilder:
    """
    Turns one document's FieldFrames into an ordered list of OfficeTerms.

    Instances hold only configuration and may be reused across documents.
    """

    def __init__(
        self,
        rules: LocaleDateRules,
        raw_date_fallback: Optional[bool] = None,
        labeler: Optional[PositionLabeler] = None,
    ):
        self.rules = rules
        self.raw_date_fallback = (
            settings.RAW_DATE_FALLBACK if raw_date_fallback is None else raw_date_fallback
        )
        self.labeler = labeler or PositionLabeler()

    def build(self, frames: Sequence[FieldFrame]) -> List[OfficeTerm]:
        ordered = sorted(frames, key=lambda frame: frame.index)
        terms: List[OfficeTerm] = []

        for frame in self._fill_gaps(ordered):
            term = self._build_term(frame)
            if term is None:
                logger.debug("term_dropped", index=frame.index, reason="empty_label")
                continue
            terms.append(term)

        return terms

    # -- step 1 ------------------------------------------------------------

    @staticmethod
    def _fill_gaps(frames: Sequence[FieldFrame]) -> List[FieldFrame]:
        filled: List[FieldFrame] = []
        for position, frame in enumerate(frames):
            following = frames[position + 1] if position + 1 < len(frames) else None
            if (
                frame.office is None
                and frame.has_term_fields
                and following is not None
                and following.office is not None
            ):
                frame = frame.with_office(following.office)
            filled.append(frame)
        return filled

    # -- steps 2-5 ---------------------------------------------------------

    def _build_term(self, frame: FieldFrame) -> Optional[OfficeTerm]:
        office = frame.office
        label = tidy(office.stated_as) if office is not None else self.labeler.label(frame)
        label = deordinaled(label)
        if not label:
            return None

        (start, start_raw), (end, end_raw) = self._resolve_dates(frame)

        return OfficeTerm(
            position_label=label,
            office=office,
            start_date=start,
            end_date=end,
            start_date_raw=start_raw,
            end_date_raw=end_raw,
            ordinal=parse_ordinal(frame.ordinal_raw),
            predecessor=frame.predecessor,
            successor=frame.successor,
            constituency=frame.constituency,
            index=frame.index,
        )

    def _resolve_dates(self, frame: FieldFrame):
        combined = frame.combined_range_raw
        if combined is not None:
            start_result, end_result = try_split(combined, self.rules)
        else:
            start_result = try_normalize(frame.start_raw, self.rules)
            end_result = try_normalize(frame.end_raw, self.rules)

        return (
            self._settle(start_result, frame, "start"),
            self._settle(end_result, frame, "end"),
        )

    def _settle(
        self, result: DateResult, frame: FieldFrame, side: str
    ) -> Tuple[Optional[CalendarValue], Optional[str]]:
        if result.ok:
            return result.value, None

        error = result.error
        if not self.raw_date_fallback:
            raise error

        logger.warning(
            "raw_date_fallback",
            index=frame.index,
            side=side,
            raw=error.raw,
            locale=self.rules.ui_locale_code,
            error=error.message,
        )
        return None, error.raw or None
