# office_terms\__init__.py
"""
Office Terms - "who held what office, when" extraction.

This package turns semi-structured biographical infobox data written in
dozens of languages into ordered office-term records with canonical
partial-precision dates. It follows Hexagonal Architecture
(Ports & Adapters): the date and term engines live in `core`, the
page readers in `adapters`, and cross-cutting concerns in `shared`.
"""

__version__ = "1.0.0"
