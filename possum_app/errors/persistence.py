"""
Persistence error classifications for the state table.
"""

from typing import Optional

from .base import PossumError


class PersistenceError(PossumError):
    """Base class for backing-store failures."""

    def __init__(self, message: str, operation: Optional[str] = None,
                 possum: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.operation = operation
        self.possum = possum


class SchemaError(PersistenceError):
    """The state table could not be created."""


class StoreError(PersistenceError):
    """A query against the state table failed."""


class NotFound(PersistenceError):
    """No state record exists for the requested possum."""
