# office_terms\core\use_cases\extract_office_terms.py
from typing import Any, List, Mapping, Optional, Sequence

import structlog

from office_terms.core.domain.dates.locales import LocaleDateRules, get_locale_rules
from office_terms.core.domain.models import OfficeTerm, sort_terms
from office_terms.core.domain.terms.field_frame import group_fields, is_office_infobox
from office_terms.core.domain.terms.term_builder import TermBuilder
from office_terms.core.ports.infobox_source import IInfoboxSource
from office_terms.shared.config import settings
from office_terms.shared.observability import get_tracer

logger = structlog.get_logger()
tracer = get_tracer(__name__)


class ExtractOfficeTerms:
    """
    Use Case: Extracts the office terms held by the subject of one page.

    Responsibilities:
    1. Reads the page's infoboxes through the source Port.
    2. Keeps only infoboxes that describe offices (a leading person or
       party infobox is skipped).
    3. Runs the TermBuilder on each office infobox, in document order.
    4. Traces the extraction and logs term counts.
    """

    def __init__(
        self,
        source: Optional[IInfoboxSource] = None,
        locale: Optional[str] = None,
        raw_date_fallback: Optional[bool] = None,
    ):
        # We inject the Port, not the concrete adapter
        self.source = source
        self.rules: LocaleDateRules = get_locale_rules(locale or settings.DEFAULT_LOCALE)
        self.builder = TermBuilder(self.rules, raw_date_fallback=raw_date_fallback)

    def execute(self, name: str, chronological: bool = False) -> List[OfficeTerm]:
        """
        Loads page `name` from the source and extracts its terms.

        Args:
            name: Page name (or path) understood by the source.
            chronological: Sort by start date instead of document order.

        Raises:
            PageNotFoundError / MalformedPageError from the source,
            MalformedFieldFrame for untokenizable office infoboxes,
            DateError when raw date fallback is disabled.
        """
        if self.source is None:
            raise ValueError("ExtractOfficeTerms.execute() needs an infobox source.")
        boxes = self.source.get_infoboxes(name)
        return self.from_infoboxes(boxes, chronological=chronological, page=name)

    def from_infoboxes(
        self,
        boxes: Sequence[Mapping[str, Any]],
        chronological: bool = False,
        page: Optional[str] = None,
    ) -> List[OfficeTerm]:
        """Extracts terms from already-loaded infobox field mappings."""
        with tracer.start_as_current_span("use_case.extract_office_terms") as span:
            span.set_attribute("app.locale", self.rules.ui_locale_code)
            if page:
                span.set_attribute("app.page", page)

            office_boxes = [box for box in boxes if is_office_infobox(box)]
            skipped = len(boxes) - len(office_boxes)
            if skipped:
                logger.debug("non_office_infoboxes_skipped", page=page, count=skipped)

            terms: List[OfficeTerm] = []
            for box in office_boxes:
                terms.extend(self.builder.build(group_fields(box)))

            if chronological:
                terms = sort_terms(terms)

            span.set_attribute("app.infobox_count", len(office_boxes))
            span.set_attribute("app.term_count", len(terms))
            logger.info(
                "office_terms_extracted",
                page=page,
                locale=self.rules.ui_locale_code,
                infoboxes=len(office_boxes),
                terms=len(terms),
            )
            return terms
