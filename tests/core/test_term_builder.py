# tests\core\test_term_builder.py
import pytest
from structlog.testing import capture_logs

from office_terms.core.domain.dates.calendar import CalendarValue
from office_terms.core.domain.exceptions import UnrecognizedDateShape
from office_terms.core.domain.terms.term_builder import TermBuilder


@pytest.fixture
def builder(en_rules):
    return TermBuilder(en_rules, raw_date_fallback=True)


@pytest.fixture
def strict_builder(en_rules):
    return TermBuilder(en_rules, raw_date_fallback=False)


class TestGapFill:
    def test_untitled_block_inherits_next_title(self, builder, frames_from):
        """
        Scenario: Block 1 has dates but no title; block 2 has both.
        Expected: Block 1 takes block 2's title exactly; no label is derived.
        """
        frames = frames_from(
            {
                "term_start1": "1 May 1997",
                "term_end1": "7 June 2001",
                "office2": {"text": "Minister of Finance", "links": [{"page": "Minister of Finance (Malta)"}]},
                "term_start2": "8 June 2001",
            }
        )

        terms = builder.build(frames)

        assert [t.position_label for t in terms] == ["Minister of Finance", "Minister of Finance"]
        assert terms[0].office.links == ["Minister of Finance (Malta)"]
        assert terms[0].start_date == CalendarValue(1997, 5, 1)

    def test_inheritance_is_one_step_only(self, builder, frames_from):
        frames = frames_from(
            {
                "term_start1": "1990",
                "term_start2": "1995",
                "office3": "Mayor",
                "term_start3": "2000",
            }
        )

        terms = builder.build(frames)

        assert [(t.index, t.position_label) for t in terms] == [(2, "Mayor"), (3, "Mayor")]

    def test_inherited_title_beats_labeler(self, builder, frames_from):
        frames = frames_from(
            {
                "constituency_mp1": "Tongatapu 5",
                "term_start1": "25 November 2010",
                "office2": "Minister of Police",
            }
        )
        assert builder.build(frames)[0].position_label == "Minister of Police"

    def test_bio_only_block_never_receives_a_title(self, builder, frames_from):
        frames = frames_from({"name": "Jane Example", "office1": "Mayor", "term_start1": "2001"})
        terms = builder.build(frames)
        assert [t.index for t in terms] == [1]


class TestLabels:
    def test_labeler_used_without_any_title(self, builder, frames_from):
        frames = frames_from({"constituency_mp": "Tongatapu 5", "parliament": "Tongan"})
        term = builder.build(frames)[0]
        assert term.position_label == "Tongan MP"
        assert term.office is None
        assert term.constituency.stated_as == "Tongatapu 5"

    @pytest.mark.parametrize(
        "office, expected",
        [
            ("2nd Presidential Chief of Staff", "Presidential Chief of Staff"),
            ("1st and 3rd Minister of Finance", "Minister of Finance"),
            ("1st & 3rd Minister of Finance", "Minister of Finance"),
            ("  Minister   of State ", "Minister of State"),
        ],
    )
    def test_labels_are_tidied_and_deordinaled(self, builder, frames_from, office, expected):
        term = builder.build(frames_from({"office": office}))[0]
        assert term.position_label == expected
        assert term.office.stated_as == office

    def test_empty_label_drops_the_block(self, builder, frames_from):
        frames = frames_from({"name": "Jane", "office2": "", "office3": "Mayor"})
        with capture_logs() as logs:
            terms = builder.build(frames)
        assert [t.index for t in terms] == [3]
        assert any(entry["event"] == "term_dropped" for entry in logs)


class TestDates:
    def test_combined_range_field(self, builder, frames_from):
        term = builder.build(frames_from({"office": "Mayor", "term": "3-10 June, 2004"}))[0]
        assert (term.start, term.end) == ("2004-06-03", "2004-06-10")

    def test_reign_field(self, builder, frames_from):
        term = builder.build(frames_from({"title": "King", "reign": "1820 – 1830"}))[0]
        assert (term.start, term.end) == ("1820", "1830")

    def test_separate_fields_with_open_end(self, builder, frames_from):
        term = builder.build(
            frames_from({"office": "Mayor", "term_start": "26 July 2019", "term_end": "Incumbent"})
        )[0]
        assert term.start_date == CalendarValue(2019, 7, 26)
        assert term.end_date is None
        assert term.is_open

    def test_missing_dates_stay_absent(self, builder, frames_from):
        term = builder.build(frames_from({"office": "Mayor"}))[0]
        assert term.start is None and term.end is None

    def test_raw_fallback_is_logged(self, builder, frames_from):
        """
        Scenario: A start date cannot be read and raw fallback is enabled.
        Expected: The record survives with the raw text, and a warning is logged.
        """
        frames = frames_from({"office": "Mayor", "term_start": "sometime in spring", "term_end": "2004"})

        with capture_logs() as logs:
            term = builder.build(frames)[0]

        assert term.start_date is None
        assert term.start_date_raw == "sometime in spring"
        assert term.end_date == CalendarValue(2004)
        assert term.to_record()["startDate"] == "sometime in spring"
        warnings = [entry for entry in logs if entry["event"] == "raw_date_fallback"]
        assert len(warnings) == 1
        assert warnings[0]["log_level"] == "warning"
        assert warnings[0]["side"] == "start"

    def test_strict_builder_raises(self, strict_builder, frames_from):
        frames = frames_from({"office": "Mayor", "term_start": "sometime in spring"})
        with pytest.raises(UnrecognizedDateShape):
            strict_builder.build(frames)

    def test_combined_range_falls_back_per_side(self, builder, frames_from):
        """
        Scenario: A combined range whose start cannot be read but whose end can.
        Expected: Only the start falls back to raw text; the end is normalized.
        """
        with capture_logs() as logs:
            term = builder.build(frames_from({"office": "Mayor", "term": "3 – 2004"}))[0]

        assert term.to_record()["startDate"] == "3"
        assert term.to_record()["endDate"] == "2004"
        assert [entry["side"] for entry in logs if entry["event"] == "raw_date_fallback"] == ["start"]


class TestOrdinalsAndLinks:
    def test_ordinal_from_order_field(self, builder, frames_from):
        term = builder.build(frames_from({"office": "President", "order": "44th"}))[0]
        assert term.ordinal == 44
        assert term.to_record()["ordinal"] == "44"

    def test_zero_ordinal_is_absent(self, builder, frames_from):
        term = builder.build(frames_from({"office": "President", "order": "0"}))[0]
        assert term.ordinal is None
        assert "ordinal" not in term.to_record()

    def test_succession_links_kept_verbatim(self, builder, frames_from):
        frames = frames_from(
            {
                "office": "Mayor",
                "predecessor": {"text": "A. Smith", "links": [{"page": "Alan Smith (politician)"}]},
                "successor": {"text": "B. Jones", "links": []},
            }
        )
        term = builder.build(frames)[0]
        assert term.predecessor.stated_as == "A. Smith"
        assert term.predecessor.links == ["Alan Smith (politician)"]
        assert term.successor.links == []


class TestOrdering:
    def test_document_order_not_chronological(self, builder, frames_from):
        frames = frames_from(
            {
                "office": "Later",
                "term_start": "2010",
                "office2": "Earlier",
                "term_start2": "1990",
            }
        )
        assert [t.position_label for t in builder.build(frames)] == ["Later", "Earlier"]

    def test_input_list_order_does_not_matter(self, builder, frames_from):
        frames = frames_from({"office": "A", "office2": "B", "office3": "C"})
        assert [t.position_label for t in builder.build(list(reversed(frames)))] == ["A", "B", "C"]

    @pytest.mark.parametrize(
        "fields",
        [
            {},
            {"name": "Jane"},
            {"office": "A", "term_start2": "1990", "office3": "B"},
            {"term_start": "1990", "term_start2": "1991", "office3": "C", "successor4": "X"},
        ],
    )
    def test_never_more_terms_than_blocks(self, builder, frames_from, fields):
        frames = frames_from(fields)
        assert len(builder.build(frames)) <= len(frames)
