"""Job-specific domain helpers.

Listing parameters arrive as loosely typed strings. ``JobQuery.from_params`` is
the one place they are normalized: the ``"all"`` sentinel becomes ``None``,
unknown sort keys fall back to the store's natural order and unusable page
numbers fall back to defaults. Nothing here raises on bad input.
"""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Iterable, Optional, Sequence

from jobtracker.db import JOB_STATUSES, MAX_ROW_BOUND, Job

ALL_SENTINEL = "all"
DEFAULT_PAGE = 1
DEFAULT_LIMIT = 10

_MONTH_ABBR = (
    "Jan", "Feb", "Mar", "Apr", "May", "Jun",
    "Jul", "Aug", "Sep", "Oct", "Nov", "Dec",
)


class JobSort(str, Enum):
    LATEST = "latest"
    OLDEST = "oldest"
    A_Z = "a-z"
    Z_A = "z-a"

    @classmethod
    def parse(cls, value: Any) -> Optional["JobSort"]:
        """Map a raw sort key to a member; unrecognized keys mean "unordered"."""
        try:
            return cls(value)
        except ValueError:
            return None


def parse_positive_int(value: Any, default: int) -> int:
    """Lenient integer parse used for ``page`` and ``limit``.

    Missing, non-numeric and non-positive values yield ``default``; values
    beyond ``MAX_ROW_BOUND`` are clamped to it.
    """
    if value is None or isinstance(value, bool):
        return default
    if isinstance(value, int):
        parsed = value
    else:
        try:
            parsed = int(str(value).strip())
        except ValueError:
            return default
    if parsed < 1:
        return default
    return min(parsed, MAX_ROW_BOUND)


def parse_filter(value: Optional[str]) -> Optional[str]:
    """Translate an exact-match filter value; empty or ``"all"`` means no constraint."""
    if value is None:
        return None
    value = value.strip()
    if not value or value == ALL_SENTINEL:
        return None
    return value


@dataclass(slots=True)
class JobQuery:
    search: Optional[str] = None
    status: Optional[str] = None
    job_type: Optional[str] = None
    sort: Optional[JobSort] = None
    page: int = DEFAULT_PAGE
    limit: int = DEFAULT_LIMIT

    @classmethod
    def from_params(
        cls,
        *,
        search: Optional[str] = None,
        status: Optional[str] = None,
        job_type: Optional[str] = None,
        sort: Optional[str] = None,
        page: Any = None,
        limit: Any = None,
        default_limit: int = DEFAULT_LIMIT,
    ) -> "JobQuery":
        return cls(
            search=search if search else None,
            status=parse_filter(status),
            job_type=parse_filter(job_type),
            sort=JobSort.parse(sort),
            page=parse_positive_int(page, DEFAULT_PAGE),
            limit=parse_positive_int(limit, default_limit),
        )

    @property
    def skip(self) -> int:
        return min((self.page - 1) * self.limit, MAX_ROW_BOUND)


@dataclass(slots=True)
class JobPage:
    jobs: Sequence[Job]
    total_count: int
    page_count: int

    @classmethod
    def build(cls, jobs: Sequence[Job], total_count: int, limit: int) -> "JobPage":
        return cls(jobs=jobs, total_count=total_count, page_count=math.ceil(total_count / limit))


@dataclass(slots=True)
class MonthlyApplications:
    date: str
    count: int


@dataclass(slots=True)
class JobStats:
    status_counts: dict[str, int] = field(default_factory=dict)
    monthly_applications: list[MonthlyApplications] = field(default_factory=list)


def build_status_histogram(rows: Iterable[tuple[str, int]]) -> dict[str, int]:
    """Reshape ``(status, count)`` rows into the fixed pending/interview/declined shape.

    Statuses outside the known three are dropped.
    """
    observed = {status: count for status, count in rows}
    return {status: observed.get(status, 0) for status in JOB_STATUSES}


def month_label(year: int, month: int) -> str:
    """``(2024, 1)`` -> ``"Jan 2024"``; ``month`` is the 1-indexed calendar month."""
    return f"{_MONTH_ABBR[month - 1]} {year}"


def build_monthly_series(rows: Iterable[tuple[int, int, int]]) -> list[MonthlyApplications]:
    """Turn most-recent-first ``(year, month, count)`` rows into an oldest-first series."""
    series = [
        MonthlyApplications(date=month_label(int(year), int(month)), count=count)
        for year, month, count in rows
    ]
    series.reverse()
    return series
