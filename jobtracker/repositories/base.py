"""Session-bound repository base class."""

from __future__ import annotations

from typing import Generic, TypeVar

from sqlalchemy.orm import Session

TModel = TypeVar("TModel")


class SQLAlchemyRepository(Generic[TModel]):
    """Wraps a request-scoped session; every write commits immediately."""

    def __init__(self, session: Session) -> None:
        self.session = session

    def save(self, instance: TModel) -> TModel:
        """Insert ``instance`` and reload it so defaults such as ``id`` are populated."""
        self.session.add(instance)
        return self.commit_and_refresh(instance)

    def commit_and_refresh(self, instance: TModel) -> TModel:
        self.session.commit()
        self.session.refresh(instance)
        return instance

    def delete(self, instance: TModel) -> None:
        self.session.delete(instance)
        self.session.commit()
