"""
Root of the possum error hierarchy.

Every error raised by the package carries a ``context`` dictionary so that
callers and log processors can inspect the offending member or value without
parsing the message text.
"""

from typing import Any, Dict, Optional


class PossumError(Exception):
    """Base class for every error raised by possum_app."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.context = context or {}
        self.recoverable = False


class InvalidArgument(PossumError):
    """A caller-supplied value violates a precondition."""

    def __init__(self, message: str, argument: Optional[str] = None,
                 value: Any = None, **kwargs):
        super().__init__(message, **kwargs)
        self.argument = argument
        self.value = value
