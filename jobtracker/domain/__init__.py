"""Domain layer primitives (contexts, value objects, exceptions)."""

from . import exceptions, jobs
from .context import OwnerContext

__all__ = ["OwnerContext", "exceptions", "jobs"]
