"""
Service-binding environment providers.

Components receive an ``EnvironmentProvider`` at construction instead of
reading process environment themselves, so tests can hand in a
``StaticEnvironment`` while deployments use ``CloudFoundryEnvironment``.
"""

import json
import os
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any, Optional, Protocol

from possum_app.config.defaults import EnvironmentParams
from possum_app.errors import EnvironmentUnavailable, TypeMismatch
from possum_app.logging.config import get_environment_logger

from .models import ConnectionInfo, ServiceBinding
from .passel import Passel, resolve_passel

VCAP_SERVICES = "VCAP_SERVICES"
VCAP_APPLICATION = "VCAP_APPLICATION"


class EnvironmentProvider(Protocol):
    """Source of service credentials and application metadata."""

    def connection_info(self) -> ConnectionInfo: ...

    def passel(self) -> Passel: ...

    def basic_auth_username(self) -> str: ...

    def basic_auth_password(self) -> str: ...

    def application_uris(self) -> list[str]: ...


def _checked_credentials(name: str, credentials: Any) -> Mapping[str, Any]:
    """Null credentials become {}; anything other than an object is rejected."""
    if credentials is None:
        return {}
    if not isinstance(credentials, Mapping):
        raise TypeMismatch(
            f"Credentials of service {name!r} were not an object",
            field="credentials",
            expected="object",
            actual=type(credentials).__name__,
            context={"service_name": name},
        )
    return credentials


class _BindingEnvironment(ABC):
    """Shared credential lookups over a set of named service bindings."""

    def __init__(self, params: Optional[EnvironmentParams] = None):
        self.params = params or EnvironmentParams()
        self.logger = get_environment_logger(__name__)

    @abstractmethod
    def service(self, name: str) -> ServiceBinding:
        """Return the binding with the given name or raise EnvironmentUnavailable."""
        pass

    @abstractmethod
    def application_uris(self) -> list[str]:
        """Return the URIs the application is reachable under."""
        pass

    def connection_info(self) -> ConnectionInfo:
        binding = self.service(self.params.db_service_name)
        return ConnectionInfo.from_credentials(binding.credentials)

    def passel(self) -> Passel:
        binding = self.service(self.params.passel_service_name)
        return resolve_passel(binding.credentials, key=self.params.passel_key)

    def basic_auth_username(self) -> str:
        return self.service(self.params.passel_service_name).credential_str("username")

    def basic_auth_password(self) -> str:
        return self.service(self.params.passel_service_name).credential_str("password")


class CloudFoundryEnvironment(_BindingEnvironment):
    """Reads bindings from VCAP_SERVICES and metadata from VCAP_APPLICATION."""

    def __init__(
        self,
        environ: Optional[Mapping[str, str]] = None,
        params: Optional[EnvironmentParams] = None,
    ):
        super().__init__(params)
        self.environ = os.environ if environ is None else environ

    def _load_json(self, variable: str) -> dict[str, Any]:
        raw = self.environ.get(variable)
        if raw is None:
            self.logger.debug("Environment variable not set", variable=variable)
            raise EnvironmentUnavailable(
                f"{variable} is not set; check the service binding",
                context={"variable": variable},
            )

        try:
            payload = json.loads(raw)
        except json.JSONDecodeError as e:
            raise EnvironmentUnavailable(
                f"{variable} is not valid JSON: {e}",
                context={"variable": variable},
            ) from e

        if not isinstance(payload, dict):
            raise EnvironmentUnavailable(
                f"{variable} must be a JSON object",
                context={"variable": variable},
            )
        return payload

    def bindings(self) -> list[ServiceBinding]:
        """All service bindings across every service label."""
        services = self._load_json(VCAP_SERVICES)
        result = []
        for label, instances in services.items():
            if not isinstance(instances, list):
                continue
            for instance in instances:
                if not isinstance(instance, dict) or "name" not in instance:
                    continue
                result.append(ServiceBinding(
                    name=instance["name"],
                    label=label,
                    credentials=_checked_credentials(instance["name"], instance.get("credentials")),
                ))
        return result

    def service(self, name: str) -> ServiceBinding:
        for binding in self.bindings():
            if binding.name == name:
                return binding

        self.logger.debug("Service binding not found", service_name=name)
        raise EnvironmentUnavailable(
            f"no service with name {name}",
            service_name=name,
        )

    def application_uris(self) -> list[str]:
        application = self._load_json(VCAP_APPLICATION)
        uris = application.get("application_uris")
        if uris is None:
            uris = application.get("uris", [])

        if not isinstance(uris, list) or not all(isinstance(u, str) for u in uris):
            raise TypeMismatch(
                "application_uris was not a list of strings",
                field="application_uris",
                expected="list[str]",
                actual=type(uris).__name__,
            )
        return list(uris)


class StaticEnvironment(_BindingEnvironment):
    """In-memory provider built from plain credential dictionaries."""

    def __init__(
        self,
        services: Optional[Mapping[str, Mapping[str, Any]]] = None,
        application_uris: Optional[list[str]] = None,
        params: Optional[EnvironmentParams] = None,
    ):
        super().__init__(params)
        self.services = dict(services or {})
        self._application_uris = list(application_uris or [])

    def service(self, name: str) -> ServiceBinding:
        if name not in self.services:
            raise EnvironmentUnavailable(
                f"no service with name {name}",
                service_name=name,
            )
        return ServiceBinding(name=name, credentials=_checked_credentials(name, self.services[name]))

    def application_uris(self) -> list[str]:
        return list(self._application_uris)
