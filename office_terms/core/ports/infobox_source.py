# office_terms\core\ports\infobox_source.py
from typing import Any, Dict, List, Protocol


class IInfoboxSource(Protocol):
    """
    Port for obtaining parsed biography pages.
    Implementations:
    - FileSystemInfoboxSource (wtf_wikipedia-style JSON files on disk)
    """

    def get_page(self, name: str) -> Dict[str, Any]:
        """
        Loads one parsed page document.

        Args:
            name: A page name, or a path understood by the implementation.

        Returns:
            The page as a JSON-like mapping: {"title", "sections": [...]}.

        Raises:
            PageNotFoundError: If the source has no such page.
            MalformedPageError: If the stored document cannot be decoded.
        """
        ...

    def get_infoboxes(self, name: str) -> List[Dict[str, Any]]:
        """
        Returns every infobox of page `name` as a flat field mapping
        ({field_name: {"text": ..., "links": [...]}}), in document order.
        """
        ...

    def list_pages(self) -> List[str]:
        """Returns the names of every page the source can serve."""
        ...
