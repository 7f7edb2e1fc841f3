# office_terms\adapters\__init__.py
"""
Infrastructure Adapters.

Concrete implementations of the Ports defined in `office_terms.core.ports`,
plus converters from upstream parser output:
- `converters`: wtf_wikipedia page JSON -> infobox field mappings.
- `persistence`: Secondary Adapter (Driven) - page JSON files on disk.

Dependencies point INWARD. These modules depend on `office_terms.core`,
but `office_terms.core` never imports from here.
"""
