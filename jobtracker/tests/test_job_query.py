"""Tests for listing-parameter parsing and the stats reshaping helpers."""

import pytest

from jobtracker.db import MAX_ROW_BOUND
from jobtracker.domain.jobs import (
    JobPage,
    JobQuery,
    JobSort,
    build_monthly_series,
    build_status_histogram,
    month_label,
    parse_filter,
    parse_positive_int,
)


class TestParsePositiveInt:
    @pytest.mark.parametrize(
        "raw, expected",
        [
            (None, 7),
            ("", 7),
            ("abc", 7),
            ("2.5", 7),
            ("0", 7),
            ("-3", 7),
            (0, 7),
            (True, 7),
            ("4", 4),
            (" 12 ", 12),
            (3, 3),
        ],
    )
    def test_falls_back_to_default(self, raw, expected):
        assert parse_positive_int(raw, 7) == expected

    @pytest.mark.parametrize("raw", ["99999999999999999999", 10**30, str(MAX_ROW_BOUND + 1)])
    def test_clamps_values_the_store_cannot_hold(self, raw):
        assert parse_positive_int(raw, 7) == MAX_ROW_BOUND

    def test_largest_storable_value_is_kept(self):
        assert parse_positive_int(str(MAX_ROW_BOUND), 7) == MAX_ROW_BOUND


class TestParseFilter:
    def test_all_sentinel_means_no_constraint(self):
        assert parse_filter("all") is None

    def test_missing_and_blank_mean_no_constraint(self):
        assert parse_filter(None) is None
        assert parse_filter("") is None
        assert parse_filter("   ") is None

    def test_concrete_value_is_kept(self):
        assert parse_filter("interview") == "interview"

    def test_unknown_value_is_kept_as_exact_match(self):
        assert parse_filter("archived") == "archived"


class TestJobSort:
    @pytest.mark.parametrize("raw", ["latest", "oldest", "a-z", "z-a"])
    def test_known_keys(self, raw):
        assert JobSort.parse(raw).value == raw

    @pytest.mark.parametrize("raw", [None, "", "newest", "LATEST", "position"])
    def test_unknown_keys_mean_unordered(self, raw):
        assert JobSort.parse(raw) is None


class TestJobQuery:
    def test_defaults(self):
        query = JobQuery.from_params()
        assert query == JobQuery(
            search=None, status=None, job_type=None, sort=None, page=1, limit=10
        )
        assert query.skip == 0

    def test_full_parameter_bag(self):
        query = JobQuery.from_params(
            search="engineer",
            status="declined",
            job_type="all",
            sort="z-a",
            page="3",
            limit="25",
        )
        assert query.search == "engineer"
        assert query.status == "declined"
        assert query.job_type is None
        assert query.sort is JobSort.Z_A
        assert query.page == 3
        assert query.limit == 25
        assert query.skip == 50

    def test_non_numeric_paging_uses_defaults(self):
        query = JobQuery.from_params(page="first", limit="many")
        assert (query.page, query.limit) == (1, 10)

    def test_default_limit_can_be_configured(self):
        assert JobQuery.from_params(default_limit=20).limit == 20

    def test_limit_has_no_upper_bound(self):
        assert JobQuery.from_params(limit="100000").limit == 100000

    def test_huge_page_and_limit_keep_skip_storable(self):
        query = JobQuery.from_params(page="99999999999999999999", limit="99999999999999999999")
        assert query.page == query.limit == MAX_ROW_BOUND
        assert query.skip == MAX_ROW_BOUND

    def test_huge_limit_on_first_page_skips_nothing(self):
        assert JobQuery.from_params(limit="99999999999999999999").skip == 0

    def test_empty_search_is_dropped(self):
        assert JobQuery.from_params(search="").search is None


class TestJobPage:
    @pytest.mark.parametrize(
        "total, limit, pages",
        [(0, 10, 0), (1, 10, 1), (10, 10, 1), (11, 10, 2), (25, 5, 5), (7, 1, 7)],
    )
    def test_page_count_is_ceiling(self, total, limit, pages):
        assert JobPage.build([], total, limit).page_count == pages


class TestStatusHistogram:
    def test_fills_missing_statuses_with_zero(self):
        assert build_status_histogram([("interview", 2)]) == {
            "pending": 0,
            "interview": 2,
            "declined": 0,
        }

    def test_drops_unknown_statuses(self):
        histogram = build_status_histogram([("pending", 1), ("ghosted", 4), ("declined", 3)])
        assert histogram == {"pending": 1, "interview": 0, "declined": 3}

    def test_empty(self):
        assert build_status_histogram([]) == {"pending": 0, "interview": 0, "declined": 0}


class TestMonthlySeries:
    @pytest.mark.parametrize(
        "year, month, label",
        [(2024, 1, "Jan 2024"), (2023, 12, "Dec 2023"), (2025, 6, "Jun 2025")],
    )
    def test_label_uses_calendar_month(self, year, month, label):
        assert month_label(year, month) == label

    def test_labels_are_english_regardless_of_locale(self):
        assert [month_label(2024, month) for month in range(1, 13)] == [
            f"{name} 2024"
            for name in (
                "Jan", "Feb", "Mar", "Apr", "May", "Jun",
                "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
            )
        ]

    def test_reverses_newest_first_rows(self):
        series = build_monthly_series([(2024, 3, 5), (2024, 2, 1), (2023, 12, 2)])
        assert [(item.date, item.count) for item in series] == [
            ("Dec 2023", 2),
            ("Feb 2024", 1),
            ("Mar 2024", 5),
        ]

    def test_empty(self):
        assert build_monthly_series([]) == []
