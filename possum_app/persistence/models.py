"""
Possum state data models.

Immutable representations of rows in the ``state`` table.
"""

from dataclasses import dataclass
from enum import Enum

from possum_app.errors import InvalidArgument


class PossumState(str, Enum):
    """Liveness states a possum can be recorded in."""
    ALIVE = "alive"
    DEAD = "dead"

    @classmethod
    def parse(cls, value: object) -> "PossumState":
        """Return the matching state or raise InvalidArgument."""
        try:
            return cls(value)
        except ValueError:
            raise InvalidArgument(
                f'The state should have been "alive" or "dead" not "{value}"',
                argument="state",
                value=value,
            ) from None


@dataclass(frozen=True)
class StateRecord:
    """One row of the state table."""
    possum: str
    state: str
