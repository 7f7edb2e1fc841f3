# office_terms\adapters\persistence\__init__.py
from .filesystem_source import FileSystemInfoboxSource

__all__ = ["FileSystemInfoboxSource"]
