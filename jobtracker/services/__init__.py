"""Service layer entry points."""

from .job_service import JobService
from .user_service import UserService

__all__ = ["JobService", "UserService"]
