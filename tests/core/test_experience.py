# tests\core\test_experience.py
import datetime

import pytest

from office_terms.core.domain.dates.calendar import CalendarValue
from office_terms.core.domain.models import OfficeTerm
from office_terms.core.domain.terms.experience import Experience

JANUARY = ("2022-01-01", "2022-01-31")


class TestTotal:
    def test_no_periods(self):
        assert Experience().total() == 0

    @pytest.mark.parametrize(
        "period, days",
        [
            (("2022-01-01", "2022-01-01"), 1),
            (("2022-01-01", "2022-01-02"), 2),
            (JANUARY, 31),
            (("2022-01-11", "2022-01-01"), 0),
        ],
    )
    def test_single_period(self, period, days):
        assert Experience(period).total() == days

    @pytest.mark.parametrize(
        "second, days",
        [
            (("2022-03-01", "2022-03-31"), 62),  # discontinuous
            (("2022-02-01", "2022-02-28"), 59),  # abutting
            (("2022-01-01", "2022-01-31"), 31),  # identical
            (("2022-01-21", "2022-02-28"), 59),  # partial overlap
            (("2022-01-01", "2022-02-28"), 59),  # superset
            (("2022-01-10", "2022-01-20"), 31),  # subset
            (("2021-12-01", "2022-01-10"), 62),  # earlier
        ],
    )
    def test_two_periods(self, second, days):
        assert Experience(JANUARY, second).total() == days

    def test_four_periods(self):
        experience = Experience(
            ("2022-01-01", "2022-01-31"),
            ("2022-04-01", "2022-05-30"),
            ("2022-01-10", "2022-02-10"),
            ("2022-03-01", "2022-03-01"),
        )
        assert experience.total() == 102


class TestBefore:
    @pytest.fixture
    def experience(self):
        return Experience(
            ("2022-01-01", "2022-01-31"),
            ("2022-04-01", "2022-05-30"),
            ("2022-01-10", "2022-02-10"),
            ("2022-03-01", "2022-03-01"),
        )

    @pytest.mark.parametrize(
        "cutoff, days",
        [("2022-01-01", 0), ("2022-01-02", 1), ("2022-03-02", 42), ("2023-01-01", 102)],
    )
    def test_days_before_cutoff(self, experience, cutoff, days):
        assert experience.before(cutoff) == days


class TestPartialPrecisionAndOpenPeriods:
    def test_year_precision_widens_to_whole_year(self):
        assert Experience(("2004", "2004")).total() == 366

    def test_month_precision_widens_to_whole_month(self):
        assert Experience((CalendarValue(2022, 1), CalendarValue(2022, 2))).total() == 59

    def test_open_period_runs_to_as_of(self):
        experience = Experience(("2022-01-01", None), as_of=datetime.date(2022, 1, 10))
        assert experience.total() == 10

    def test_from_terms(self):
        terms = [
            OfficeTerm(position_label="A", start_date=CalendarValue(2022, 1, 1), end_date=CalendarValue(2022, 1, 31)),
            OfficeTerm(position_label="B", start_date_raw="sometime"),
        ]
        assert Experience.from_terms(terms).total() == 31
