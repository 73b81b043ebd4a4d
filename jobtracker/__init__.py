"""Job application tracker: owner-scoped job queries and statistics."""

__version__ = "0.1.0"
