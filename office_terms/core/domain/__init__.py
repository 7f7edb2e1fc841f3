# office_terms\core\domain\__init__.py
"""
Pure domain layer: models, exceptions, the date engine and the
office-term engine. Nothing here performs I/O.
"""
