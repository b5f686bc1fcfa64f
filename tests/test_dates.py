"""Tests for month arithmetic and French date formatting."""

from datetime import date

import pytest

from pharmacv.dates import (
    experience_months,
    format_day,
    format_duration,
    format_month_year,
    format_period,
    format_total_months,
    months_between,
    parse_year_month,
    total_experience,
)
from pharmacv.models import Experience


class TestParsing:
    """Tests for YYYY-MM parsing."""

    def test_valid_value(self):
        assert parse_year_month("2020-03") == (2020, 3)

    def test_trailing_day_is_ignored(self):
        assert parse_year_month("2020-03-15") == (2020, 3)

    @pytest.mark.parametrize("value", [None, "", "2020", "03/2020", "2020-13", "2020-00", "soon"])
    def test_unparseable_values(self, value):
        """Anything else is treated as absent."""
        assert parse_year_month(value) is None

    def test_months_between_is_floored_at_zero(self):
        assert months_between((2024, 1), (2023, 1)) == 0


class TestFormatting:
    """Tests for period and duration strings."""

    def test_format_month_year(self):
        assert format_month_year("2020-03") == "mars 2020"
        assert format_month_year("2021-02") == "févr. 2021"
        assert format_month_year("bad") == ""

    def test_current_period(self):
        """A current position ends at 'Présent', whatever its end date."""
        assert format_period("2020-03", "2021-01", True) == "mars 2020 - Présent"

    def test_closed_period(self):
        assert format_period("2017-09", "2020-02", False) == "sept. 2017 - févr. 2020"

    def test_missing_end_is_present(self):
        assert format_period("2017-09", None, False) == "sept. 2017 - Présent"

    def test_missing_start_is_empty(self):
        assert format_period("", "2020-02", False) == ""

    @pytest.mark.parametrize(
        "months, expected",
        [
            (None, ""),
            (0, "Moins d'1 mois"),
            (5, "5 mois"),
            (12, "1 an"),
            (24, "2 ans"),
            (14, "1 an et 2 mois"),
            (29, "2 ans et 5 mois"),
        ],
    )
    def test_format_duration(self, months, expected):
        assert format_duration(months) == expected

    def test_format_day(self):
        assert format_day(date(2024, 3, 1)) == "01/03/2024"


class TestExperienceMonths:
    """Tests for per-position and aggregate durations."""

    def test_current_job_scenario(self, now):
        """Started 2020-03, current, evaluated in 2024-03: four years."""
        months = experience_months("2020-03", None, True, now)
        assert months == 48
        assert format_duration(months) == "4 ans"
        assert format_period("2020-03", None, True) == "mars 2020 - Présent"

    def test_end_date_ignored_when_current(self, now):
        assert experience_months("2020-03", "2020-06", True, now) == 48

    def test_unparseable_start_is_none(self, now):
        assert experience_months("n/a", "2020-06", False, now) is None

    def test_unparseable_end_runs_until_now(self, now):
        assert experience_months("2023-03", "later", False, now) == 12

    def test_duration_is_monotonic_in_end_date(self):
        """A later end date never reports fewer months."""
        previous = -1
        for year in range(2020, 2026):
            for month in range(1, 13):
                months = experience_months("2020-06", f"{year}-{month:02d}", False, date(2030, 1, 1))
                assert months >= previous
                previous = months

    def test_total_experience_sums_and_skips_unparseable(self, now):
        experiences = [
            Experience(start_date="2020-03", is_current=True),
            Experience(start_date="2017-09", end_date="2020-02"),
            Experience(start_date="unknown"),
        ]
        total = total_experience(experiences, now)
        assert total.months == 48 + 29
        assert total.years == 6
        assert total.formatted == "5+ ans"

    def test_total_experience_empty(self, now):
        assert total_experience([], now).formatted == "Débutant"

    @pytest.mark.parametrize(
        "months, expected",
        [(0, "Débutant"), (7, "7 mois"), (12, "1 an"), (23, "1 an"), (36, "3 ans"), (60, "5+ ans"), (130, "10+ ans")],
    )
    def test_total_buckets(self, months, expected):
        assert format_total_months(months) == expected
