# tests\adapters\test_filesystem_source.py
import pytest
from structlog.testing import capture_logs

from office_terms.adapters.persistence.filesystem_source import FileSystemInfoboxSource
from office_terms.core.domain.exceptions import MalformedPageError, PageNotFoundError


class TestFileSystemInfoboxSource:
    def test_get_page_by_name(self, data_dir):
        source = FileSystemInfoboxSource(data_dir)
        assert source.get_page("officeholder")["title"] == "Jane Example"

    def test_get_page_by_path(self, data_dir, tmp_path):
        source = FileSystemInfoboxSource(tmp_path)
        page = source.get_page(str(data_dir / "bad_date.json"))
        assert page["title"] == "Sam Unreadable"

    def test_get_infoboxes(self, data_dir):
        boxes = FileSystemInfoboxSource(data_dir).get_infoboxes("de_politiker")
        assert boxes[0]["order2"] == {"text": "3", "links": []}

    def test_missing_page(self, tmp_path):
        with pytest.raises(PageNotFoundError) as excinfo:
            FileSystemInfoboxSource(tmp_path).get_page("Nobody")
        assert excinfo.value.name == "Nobody"

    def test_invalid_json(self, tmp_path):
        (tmp_path / "broken.json").write_text("{not json", encoding="utf-8")
        with pytest.raises(MalformedPageError):
            FileSystemInfoboxSource(tmp_path).get_page("broken")

    def test_top_level_must_be_an_object(self, tmp_path):
        (tmp_path / "list.json").write_text("[]", encoding="utf-8")
        with pytest.raises(MalformedPageError):
            FileSystemInfoboxSource(tmp_path).get_page("list")

    def test_list_pages(self, data_dir, tmp_path):
        assert {"officeholder", "bad_date", "de_politiker"} <= set(FileSystemInfoboxSource(data_dir).list_pages())
        assert FileSystemInfoboxSource(tmp_path / "missing").list_pages() == []

    def test_page_that_is_not_utf8(self, tmp_path):
        """
        Scenario: The page file holds bytes that are not valid UTF-8.
        Expected: A MalformedPageError naming the file, not a decode crash.
        """
        (tmp_path / "latin.json").write_bytes(b'{"title": "\xff\xfe", "sections": []}')

        with pytest.raises(MalformedPageError) as excinfo:
            FileSystemInfoboxSource(tmp_path).get_page("latin")

        assert "UTF-8" in excinfo.value.reason
        assert excinfo.value.source.endswith("latin.json")

    def test_get_infoboxes_logs_page_title(self, data_dir):
        with capture_logs() as logs:
            boxes = FileSystemInfoboxSource(data_dir).get_infoboxes("officeholder")

        loaded = [entry for entry in logs if entry["event"] == "infoboxes_loaded"]
        assert loaded[0]["title"] == "Jane Example"
        assert loaded[0]["count"] == len(boxes) == 2
