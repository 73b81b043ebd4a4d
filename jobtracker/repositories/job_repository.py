"""Job persistence helpers.

Every query here starts from ``Job.owner_id == owner_id``; there is no
unscoped read path.
"""

from __future__ import annotations

from typing import Optional, Sequence

from sqlalchemy import extract, func
from sqlalchemy.orm import Query

from jobtracker.db import MAX_ID, Job
from jobtracker.domain.jobs import JobSort
from jobtracker.repositories.base import SQLAlchemyRepository

_SORT_ORDER = {
    JobSort.LATEST: (Job.created_at.desc(), Job.id.desc()),
    JobSort.OLDEST: (Job.created_at.asc(), Job.id.asc()),
    JobSort.A_Z: (Job.position.asc(), Job.id.asc()),
    JobSort.Z_A: (Job.position.desc(), Job.id.desc()),
}


class JobRepository(SQLAlchemyRepository[Job]):
    """Encapsulates owner-scoped job queries."""

    def _scoped(self, owner_id: int) -> Query:
        return self.session.query(Job).filter(Job.owner_id == owner_id)

    def _filtered(
        self,
        owner_id: int,
        *,
        search: Optional[str] = None,
        status: Optional[str] = None,
        job_type: Optional[str] = None,
    ) -> Query:
        query = self._scoped(owner_id)
        if search:
            query = query.filter(Job.position.icontains(search, autoescape=True))
        if status:
            query = query.filter(Job.status == status)
        if job_type:
            query = query.filter(Job.job_type == job_type)
        return query

    def get_for_owner(self, job_id: int, owner_id: int) -> Optional[Job]:
        # Ids outside the column range cannot exist and would overflow the driver
        if not 1 <= job_id <= MAX_ID:
            return None
        return self._scoped(owner_id).filter(Job.id == job_id).first()

    def find_for_owner(
        self,
        owner_id: int,
        *,
        search: Optional[str] = None,
        status: Optional[str] = None,
        job_type: Optional[str] = None,
        sort: Optional[JobSort] = None,
        skip: int = 0,
        limit: int = 10,
    ) -> Sequence[Job]:
        query = self._filtered(owner_id, search=search, status=status, job_type=job_type)
        if sort is not None:
            query = query.order_by(*_SORT_ORDER[sort])
        return query.offset(skip).limit(limit).all()

    def count_for_owner(
        self,
        owner_id: int,
        *,
        search: Optional[str] = None,
        status: Optional[str] = None,
        job_type: Optional[str] = None,
    ) -> int:
        return self._filtered(owner_id, search=search, status=status, job_type=job_type).count()

    def count_by_status(self, owner_id: int) -> list[tuple[str, int]]:
        rows = (
            self.session.query(Job.status, func.count(Job.id))
            .filter(Job.owner_id == owner_id)
            .group_by(Job.status)
            .all()
        )
        return [(status, count) for status, count in rows]

    def count_by_month(self, owner_id: int, *, limit: int) -> list[tuple[int, int, int]]:
        """Return ``(year, month, count)`` for the ``limit`` most recent months, newest first."""
        year = extract("year", Job.created_at).label("year")
        month = extract("month", Job.created_at).label("month")
        rows = (
            self.session.query(year, month, func.count(Job.id))
            .filter(Job.owner_id == owner_id)
            .group_by(year, month)
            .order_by(year.desc(), month.desc())
            .limit(limit)
            .all()
        )
        return [(int(y), int(m), count) for y, m, count in rows]
