"""
Error classification for the possum state tracker.

Environment errors come from reading service bindings, persistence errors
from the state table, and ``InvalidArgument`` from caller preconditions.
"""

from .base import (
    PossumError,
    InvalidArgument,
)
from .environment import (
    EnvironmentBindingError,
    EnvironmentUnavailable,
    TypeMismatch,
)
from .persistence import (
    PersistenceError,
    SchemaError,
    StoreError,
    NotFound,
)

__all__ = [
    "PossumError",
    "InvalidArgument",
    # Environment
    "EnvironmentBindingError",
    "EnvironmentUnavailable",
    "TypeMismatch",
    # Persistence
    "PersistenceError",
    "SchemaError",
    "StoreError",
    "NotFound",
]
