"""
State persistence module.

Stores one liveness record per possum in the ``state`` table.
"""

from .models import PossumState, StateRecord
from .state_store import StateStore

__all__ = ["PossumState", "StateRecord", "StateStore"]
