"""
Service-binding environment module.

Reads database credentials, the passel and basic auth settings from the
platform environment and validates them at the boundary.
"""

from .models import ConnectionInfo, ServiceBinding
from .passel import Passel, resolve_passel
from .provider import CloudFoundryEnvironment, EnvironmentProvider, StaticEnvironment

__all__ = [
    "ConnectionInfo",
    "ServiceBinding",
    "Passel",
    "resolve_passel",
    "EnvironmentProvider",
    "CloudFoundryEnvironment",
    "StaticEnvironment",
]
