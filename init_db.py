"""Database initialization entrypoint for local development."""

from jobtracker.core.logging import get_logger, setup_logging
from jobtracker.db import Base, engine


def init_db() -> None:
    """Create all tables on the configured engine (idempotent)."""
    Base.metadata.create_all(bind=engine)
    get_logger(__name__).info("Database tables ensured on %s", engine.url)


if __name__ == "__main__":
    setup_logging()
    init_db()
