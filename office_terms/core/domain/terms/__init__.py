# office_terms\core\domain\terms\__init__.py
"""
Office-term engine: numbered infobox blocks in, ordered OfficeTerm
records out.
"""

from .experience import Experience
from .field_frame import (
    FieldFrame,
    group_fields,
    is_office_infobox,
    parse_ordinal,
    split_field_name,
)
from .position_labeler import POSITION_RULES, PositionLabeler, PositionRule
from .term_builder import TermBuilder

__all__ = [
    "Experience",
    "FieldFrame",
    "group_fields",
    "is_office_infobox",
    "parse_ordinal",
    "split_field_name",
    "POSITION_RULES",
    "PositionLabeler",
    "PositionRule",
    "TermBuilder",
]
