# tests\conftest.py
from pathlib import Path

import pytest
import structlog

from office_terms.core.domain.dates.locales import get_locale_rules
from office_terms.core.domain.terms.field_frame import group_fields

DATA_DIR = Path(__file__).parent / "data"


@pytest.fixture(autouse=True)
def reset_structlog():
    """The CLI configures structlog globally; restore defaults after every test."""
    yield
    structlog.reset_defaults()


@pytest.fixture
def data_dir():
    """Directory holding the page JSON fixtures."""
    return DATA_DIR


@pytest.fixture
def en_rules():
    return get_locale_rules("en")


@pytest.fixture
def de_rules():
    return get_locale_rules("de")


@pytest.fixture
def rules_for():
    """Factory: locale key -> LocaleDateRules."""
    return get_locale_rules


@pytest.fixture
def frames_from():
    """
    Factory building FieldFrames from a compact {field_name: text} mapping.
    A value may also be a full {"text", "links"} mapping.
    """
    def _build(fields):
        normalized = {
            name: value if isinstance(value, dict) else {"text": value, "links": []}
            for name, value in fields.items()
        }
        return group_fields(normalized)

    return _build
