"""Passel membership resolution from service credentials."""

from collections.abc import Iterator, Mapping
from dataclasses import dataclass
from typing import Any

from possum_app.errors import TypeMismatch

DEFAULT_PASSEL_KEY = "passel"


@dataclass(frozen=True)
class Passel:
    """Ordered, validated list of possum names."""
    members: tuple[str, ...]

    def __iter__(self) -> Iterator[str]:
        return iter(self.members)

    def __len__(self) -> int:
        return len(self.members)

    def __contains__(self, possum: object) -> bool:
        return possum in self.members


def resolve_passel(credentials: Mapping[str, Any], key: str = DEFAULT_PASSEL_KEY) -> Passel:
    """
    Extract the passel from a membership service's credentials.

    Args:
        credentials: Credential mapping of the membership service binding
        key: Credential key holding the member list

    Returns:
        Passel preserving the source order

    Raises:
        TypeMismatch: the value is missing, not a list, or has a non-string member
    """
    raw = credentials.get(key)

    if raw is None:
        raise TypeMismatch(
            f"Credential {key!r} is missing",
            field=key, expected="list[str]", actual="missing",
        )

    # str is a sequence too, so only real lists are accepted
    if not isinstance(raw, (list, tuple)):
        raise TypeMismatch(
            f"Credential {key!r} was not a list",
            field=key, expected="list[str]", actual=type(raw).__name__,
        )

    for index, possum in enumerate(raw):
        if not isinstance(possum, str):
            raise TypeMismatch(
                f"possum was not a string: {key}[{index}] is {type(possum).__name__}",
                field=f"{key}[{index}]",
                expected="str",
                actual=type(possum).__name__,
                context={"value": possum},
            )

    return Passel(members=tuple(raw))
