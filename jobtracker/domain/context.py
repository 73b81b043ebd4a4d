"""Request-scoped context helpers for owner-scoped operations."""

from dataclasses import dataclass

from jobtracker.core.config import settings
from jobtracker.db import User
from jobtracker.domain.exceptions import BadRequestError


@dataclass(slots=True)
class OwnerContext:
    """Wraps the authenticated user whose records a request may touch."""

    user: User

    @property
    def owner_id(self) -> int:
        return self.user.id

    @property
    def is_demo(self) -> bool:
        return self.user.email.lower() == settings.demo_user_email.lower()

    def assert_writable(self) -> None:
        """The shared demo account may browse but never write."""
        if self.is_demo:
            raise BadRequestError("Test User. Read Only!")
