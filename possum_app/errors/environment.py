"""
Service-binding environment error classifications.

Raised while reading credentials and application metadata from the
platform environment.
"""

from typing import Optional

from .base import PossumError


class EnvironmentBindingError(PossumError):
    """Base class for failures reading the service-binding environment."""


class EnvironmentUnavailable(EnvironmentBindingError):
    """The environment, or a named service binding inside it, cannot be read."""

    def __init__(self, message: str, service_name: Optional[str] = None, **kwargs):
        super().__init__(message, **kwargs)
        self.service_name = service_name


class TypeMismatch(EnvironmentBindingError):
    """A credential value is missing or has the wrong type."""

    def __init__(self, message: str, field: Optional[str] = None,
                 expected: Optional[str] = None, actual: Optional[str] = None,
                 **kwargs):
        super().__init__(message, **kwargs)
        self.field = field
        self.expected = expected
        self.actual = actual
