"""
Typed views over service-binding credentials.

Credential payloads arrive as untyped JSON. These models are the single
place where they are checked and turned into values the rest of the
package can rely on.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any, Optional

from possum_app.errors import TypeMismatch


@dataclass(frozen=True)
class ServiceBinding:
    """A single bound service as published in VCAP_SERVICES."""
    name: str
    label: str = ""
    credentials: Mapping[str, Any] = field(default_factory=dict)

    def credential_str(self, key: str) -> str:
        """Return a string credential, or "" when the key is absent or null."""
        value = self.credentials.get(key)
        if value is None:
            return ""
        if not isinstance(value, str):
            raise TypeMismatch(
                f"Credential {key!r} of service {self.name!r} was not a string",
                field=key,
                expected="str",
                actual=type(value).__name__,
            )
        return value


def _first_present(credentials: Mapping[str, Any], *keys: str) -> Optional[Any]:
    for key in keys:
        value = credentials.get(key)
        if value is not None:
            return value
    return None


@dataclass(frozen=True)
class ConnectionInfo:
    """Database connection details for the state table."""
    host: str
    port: str
    username: str
    password: str
    database: str

    @classmethod
    def from_credentials(cls, credentials: Mapping[str, Any]) -> "ConnectionInfo":
        """
        Build connection details from a database binding's credentials.

        ``host`` falls back to ``hostname`` and ``database`` falls back to
        ``name`` when the primary key is absent.
        """
        host = _first_present(credentials, "host", "hostname")
        if host is None:
            raise TypeMismatch(
                "Database credentials have neither 'host' nor 'hostname'",
                field="host", expected="str", actual="missing",
            )

        database = _first_present(credentials, "database", "name")
        if database is None:
            raise TypeMismatch(
                "Database credentials have neither 'database' nor 'name'",
                field="database", expected="str", actual="missing",
            )

        port = credentials.get("port")

        return cls(
            host=str(host),
            port="" if port is None else str(port),
            username=str(credentials.get("username") or ""),
            password=str(credentials.get("password") or ""),
            database=str(database),
        )

    def to_dsn(self) -> str:
        """Render as ``username:password@tcp(host:port)/database``."""
        return f"{self.username}:{self.password}@tcp({self.host}:{self.port})/{self.database}"

    def __repr__(self) -> str:
        return (
            f"ConnectionInfo(host={self.host!r}, port={self.port!r}, "
            f"username={self.username!r}, password='***', database={self.database!r})"
        )
