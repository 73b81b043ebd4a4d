"""Account lookups."""

from __future__ import annotations

from typing import Optional

from sqlalchemy import func

from jobtracker.db import User
from jobtracker.repositories.base import SQLAlchemyRepository


class UserRepository(SQLAlchemyRepository[User]):
    def get_by_email(self, email: str) -> Optional[User]:
        """Emails are compared case-insensitively and without surrounding whitespace."""
        normalized = email.strip().lower()
        return self.session.query(User).filter(func.lower(User.email) == normalized).first()
