# tests\__init__.py
"""
Test Suite for Office Terms.

Organization:
- `core`: Domain engines (dates, terms, models) and the extraction use case.
- `adapters`: Page converters and the filesystem source, against `data/` fixtures.
- top level: CLI smoke tests.
"""
