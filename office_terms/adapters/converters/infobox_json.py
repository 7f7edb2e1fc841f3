# office_terms\adapters\converters\infobox_json.py
from typing import Any, Dict, List, Mapping, Optional

import structlog

from office_terms.core.domain.exceptions import MalformedPageError

logger = structlog.get_logger()


def _field_value(value: Any) -> Any:
    """
    Normalizes one infobox value to the {"text", "links"} shape.
    Plain strings and numbers (some parser versions emit them) are wrapped;
    anything else is passed through for the tokenizer to judge.
    """
    if isinstance(value, str):
        return {"text": value, "links": []}
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return {"text": str(value), "links": []}
    return value


def infoboxes_from_page(page: Mapping[str, Any], source: Optional[str] = None) -> List[Dict[str, Any]]:
    """
    Extracts every infobox of a parsed page, in document order.

    Expects the wtf_wikipedia JSON layout:

        {"title": "...",
         "sections": [{"title": "...", "infoboxes": [{field: {"text": ..., "links": [...]}}]}]}

    Sections without infoboxes (missing key or null) are skipped.

    Raises:
        MalformedPageError: If the page, its sections, or an infobox has the wrong type.
    """
    if not isinstance(page, Mapping):
        raise MalformedPageError("page must be a JSON object", source=source)

    sections = page.get("sections") or []
    if not isinstance(sections, list):
        raise MalformedPageError("'sections' must be a list", source=source)

    boxes: List[Dict[str, Any]] = []
    for position, section in enumerate(sections):
        if not isinstance(section, Mapping):
            raise MalformedPageError(f"section {position} is not an object", source=source)

        for box in section.get("infoboxes") or []:
            if not isinstance(box, Mapping):
                raise MalformedPageError(
                    f"an infobox in section {position} is not an object", source=source
                )
            boxes.append({name: _field_value(value) for name, value in box.items()})

    logger.debug("page_infoboxes_read", title=page.get("title"), count=len(boxes))
    return boxes


def page_title(page: Mapping[str, Any]) -> Optional[str]:
    """The page's own title, if the document carries one."""
    title = page.get("title") if isinstance(page, Mapping) else None
    return title if isinstance(title, str) and title else None
