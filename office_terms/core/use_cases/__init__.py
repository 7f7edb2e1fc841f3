# office_terms\core\use_cases\__init__.py
"""
Core Use Cases (Application Logic).

Interactors that compose the domain engines with the source Port.
"""

from .extract_office_terms import ExtractOfficeTerms

__all__ = [
    "ExtractOfficeTerms",
]
