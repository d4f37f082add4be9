"""
Core error classes for the corsgate application.
"""

from typing import Any


class AccessControlConfigError(ValueError):
    """Raised when an ``access-control`` block cannot be turned into a policy."""

    def __init__(self, message: str, value: Any = None) -> None:
        self.value = value
        super().__init__(message)


class ResourceDefinitionError(ValueError):
    """Raised when a resource definition is malformed."""

    pass


class ResourcesFileNotFoundError(Exception):
    """Raised when the resources file does not exist."""

    pass
