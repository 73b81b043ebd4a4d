"""HTTP routers and error translation."""

from . import auth, errors, health, jobs

__all__ = ["auth", "errors", "health", "jobs"]
