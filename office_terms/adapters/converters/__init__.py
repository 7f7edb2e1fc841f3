# office_terms\adapters\converters\__init__.py
"""
Converters from upstream parser output to the field mappings the core
consumes.
"""

from .infobox_json import infoboxes_from_page, page_title

__all__ = ["infoboxes_from_page", "page_title"]
