# office_terms\adapters\persistence\filesystem_source.py
import json
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import structlog

from office_terms.adapters.converters.infobox_json import infoboxes_from_page, page_title
from office_terms.core.domain.exceptions import MalformedPageError, PageNotFoundError
from office_terms.core.ports.infobox_source import IInfoboxSource

logger = structlog.get_logger()


class FileSystemInfoboxSource(IInfoboxSource):
    """
    Serves parsed pages stored as JSON files.

    A name resolves to `<root>/<name>.json`; a name that is itself a path
    to an existing file is read directly.
    """

    def __init__(self, root: Optional[Union[str, Path]] = None):
        self.root = Path(root) if root is not None else Path.cwd()

    def _get_file_path(self, name: str) -> Path:
        direct = Path(name)
        if direct.suffix == ".json" and direct.is_file():
            return direct
        return self.root / f"{name}.json"

    def get_page(self, name: str) -> Dict[str, Any]:
        path = self._get_file_path(name)
        if not path.is_file():
            logger.warning("page_not_found", name=name, path=str(path))
            raise PageNotFoundError(name)

        try:
            with path.open(encoding="utf-8") as f:
                page = json.load(f)
        except json.JSONDecodeError as e:
            logger.error("page_decode_failed", path=str(path), error=str(e))
            raise MalformedPageError(f"invalid JSON ({e.msg} at line {e.lineno})", source=str(path)) from e
        except UnicodeDecodeError as e:
            logger.error("page_decode_failed", path=str(path), error=str(e))
            raise MalformedPageError(f"not UTF-8 text (byte {e.start})", source=str(path)) from e

        if not isinstance(page, dict):
            raise MalformedPageError("page must be a JSON object", source=str(path))

        logger.debug("page_loaded", name=name, path=str(path))
        return page

    def get_infoboxes(self, name: str) -> List[Dict[str, Any]]:
        path = self._get_file_path(name)
        page = self.get_page(name)
        boxes = infoboxes_from_page(page, source=str(path))
        logger.debug("infoboxes_loaded", name=name, title=page_title(page), count=len(boxes))
        return boxes

    def list_pages(self) -> List[str]:
        if not self.root.is_dir():
            return []
        return sorted(path.stem for path in self.root.glob("*.json"))
