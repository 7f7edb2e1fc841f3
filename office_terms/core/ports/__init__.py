# office_terms\core\ports\__init__.py
"""
Core Ports (Interfaces).

Protocols the adapters implement, so the use cases can read pages
without knowing where they are stored.
"""

from .infobox_source import IInfoboxSource

__all__ = [
    "IInfoboxSource",
]
