# tests\core\test_range_splitter.py
import pytest

from office_terms.core.domain.dates.calendar import CalendarValue
from office_terms.core.domain.dates.ranges import split, split_fragments, try_split
from office_terms.core.domain.exceptions import DateError, UnrecognizedDateShape


def _iso(pair):
    return tuple(value.isoformat() if value is not None else None for value in pair)


class TestOpenRanges:
    @pytest.mark.parametrize(
        "raw",
        ["2007-", "2007 -", "2007 - Incumbent", "2007–present", "since 2007", "from 2007"],
    )
    def test_open_end(self, en_rules, raw):
        """
        Scenario: A range with a trailing separator, incumbency marker or "since".
        Expected: Start 2007, no end.
        """
        assert _iso(split(raw, en_rules)) == ("2007", None)

    def test_open_end_with_day_precision(self, en_rules):
        assert _iso(split("since 6 April 2022", en_rules)) == ("2022-04-06", None)

    def test_current_marker(self, en_rules):
        assert _iso(split("April 2022–Current", en_rules)) == ("2022-04", None)


class TestClosedRanges:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("1990 - 1994", ("1990", "1994")),
            ("January 2004 - February 2005", ("2004-01", "2005-02")),
            ("January 2004 - 12 February 2005", ("2004-01", "2005-02-12")),
            ("January 2004 to March 2005", ("2004-01", "2005-03")),
            ("1950－1952", ("1950", "1952")),
            ("1950 — 1952", ("1950", "1952")),
            ("2004-06-03 – 2005-01-02", ("2004-06-03", "2005-01-02")),
            ("2004-06-03", ("2004-06-03", "2004-06-03")),
            ("2003", ("2003", "2003")),
        ],
    )
    def test_explicit_sides(self, en_rules, raw, expected):
        assert _iso(split(raw, en_rules)) == expected

    def test_empty_input(self, en_rules):
        assert split("", en_rules) == (None, None)


class TestPrecisionBackfill:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            ("3-10 June, 2004", ("2004-06-03", "2004-06-10")),
            ("3–10 December 2001", ("2001-12-03", "2001-12-10")),
            ("August 28 – October 10, 2018", ("2018-08-28", "2018-10-10")),
            ("28 August – 10 October 2018", ("2018-08-28", "2018-10-10")),
            ("April-June 2004", ("2004-04", "2004-06")),
        ],
    )
    def test_start_borrows_from_end(self, en_rules, raw, expected):
        assert _iso(split(raw, en_rules)) == expected

    def test_start_with_year_is_never_touched(self, en_rules):
        """
        Scenario: The start already carries a four-digit year.
        Expected: It keeps its own precision, even though the end is more precise.
        """
        assert _iso(split("2004 – 10 October 2005", en_rules)) == ("2004", "2005-10-10")

    def test_german_dotted_days(self, de_rules):
        assert _iso(split("18.–23. März 2004", de_rules)) == ("2004-03-18", "2004-03-23")

    def test_german_word_separator(self, de_rules):
        assert _iso(split("März 2004 bis Mai 2005", de_rules)) == ("2004-03", "2005-05")

    def test_fragments_are_backfilled_and_translated(self, de_rules):
        assert split_fragments("18.–23. März 2004", de_rules) == (
            "18 March 2004",
            "23 March 2004",
        )

    def test_day_start_needs_a_month_from_the_end(self, en_rules):
        with pytest.raises(UnrecognizedDateShape):
            split("3 – 2004", en_rules)


class TestOtherLocales:
    @pytest.mark.parametrize(
        "locale, raw, expected",
        [
            ("pt", "15 de março de 1983 - 14 de maio de 1986", ("1983-03-15", "1986-05-14")),
            ("vi", "9 tháng 4 năm 2016 – 12 tháng 11 năm 2020", ("2016-04-09", "2020-11-12")),
            ("vi", "Từ 12 tháng 11 năm 2020", ("2020-11-12", None)),
            ("fr", "depuis le 1er mai 2017", ("2017-05-01", None)),
            ("fr", "le 1er mai 2017 – ?", None),
            ("es", "2004 - actualidad", ("2004", None)),
            ("ru", "с 12 мая 2012 года", ("2012-05-12", None)),
            ("ja", "2004年3月〜2005年4月", ("2004-03", "2005-04")),
            ("ja", "2004年3月18日から", ("2004-03-18", None)),
        ],
    )
    def test_local_ranges(self, rules_for, locale, raw, expected):
        rules = rules_for(locale)
        if expected is None:
            with pytest.raises(DateError):
                split(raw, rules)
        else:
            assert _iso(split(raw, rules)) == expected


class TestTrySplit:
    def test_each_side_reports_separately(self, en_rules):
        """
        Scenario: The start is readable but the end is not.
        Expected: The start result is ok; the end result carries the error.
        """
        start, end = try_split("2004 – sometime later", en_rules)
        assert start.ok and start.value == CalendarValue(2004)
        assert not end.ok
        assert isinstance(end.error, UnrecognizedDateShape)

    def test_open_end_is_ok_without_value(self, en_rules):
        start, end = try_split("2007-", en_rules)
        assert start.value == CalendarValue(2007)
        assert end.ok and end.value is None

    def test_unreadable_start_keeps_readable_end(self, en_rules):
        """
        Scenario: A bare day starts the range but the end has no month to lend.
        Expected: Only the start fails, with its own text; the end is still read.
        """
        start, end = try_split("3 – 2004", en_rules)

        assert not start.ok
        assert isinstance(start.error, UnrecognizedDateShape)
        assert start.error.raw == "3"
        assert end.ok and end.value == CalendarValue(2004)

    def test_unreadable_end_does_not_leak_into_start(self, en_rules):
        start, end = try_split("June – Foo 2005", en_rules)

        assert end.error.raw == "Foo 2005"
        assert start.error.raw == "June"
