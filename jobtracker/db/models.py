"""Database models."""

from datetime import UTC, datetime

from sqlalchemy import DateTime, ForeignKey, Index, Integer, String
from sqlalchemy.orm import DeclarativeBase, Mapped, mapped_column, relationship

JOB_STATUSES = ("pending", "interview", "declined")
JOB_TYPES = ("full-time", "part-time", "remote", "internship")

# Largest primary key an Integer column holds on every supported backend
MAX_ID = 2**31 - 1
# Largest value accepted for LIMIT / OFFSET (signed 64-bit)
MAX_ROW_BOUND = 2**63 - 1


def _now() -> datetime:
    return datetime.now(UTC)


class Base(DeclarativeBase):
    """Base class for all models."""

    pass


class User(Base):
    """Account that owns job records."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False)
    last_name: Mapped[str] = mapped_column(String(20), nullable=False, default="lastName")
    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    location: Mapped[str] = mapped_column(String(20), nullable=False, default="my city")
    hashed_password: Mapped[str] = mapped_column(String(255), nullable=False)
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, nullable=False
    )

    jobs: Mapped[list["Job"]] = relationship(
        "Job", back_populates="owner", cascade="all, delete-orphan"
    )


class Job(Base):
    """A single job application tracked by its owner."""

    __tablename__ = "jobs"
    __table_args__ = (
        Index("ix_jobs_owner_id", "owner_id"),
        Index("ix_jobs_owner_status", "owner_id", "status"),
        Index("ix_jobs_owner_created_at", "owner_id", "created_at"),
    )

    id: Mapped[int] = mapped_column(Integer, primary_key=True, index=True)
    owner_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    company: Mapped[str] = mapped_column(String(50), nullable=False)
    position: Mapped[str] = mapped_column(String(100), nullable=False)
    # Not constrained in storage; the stats histogram only reports JOB_STATUSES
    status: Mapped[str] = mapped_column(String(20), nullable=False, default="pending")
    job_type: Mapped[str] = mapped_column(String(20), nullable=False, default="full-time")
    job_location: Mapped[str] = mapped_column(String(100), nullable=False, default="my city")
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, nullable=False
    )
    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), default=_now, onupdate=_now, nullable=False
    )

    owner: Mapped["User"] = relationship("User", back_populates="jobs")
