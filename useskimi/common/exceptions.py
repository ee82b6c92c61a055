"""
Custom exceptions for the usEskimi adapter.
"""

from typing import Any


class AdapterError(Exception):
    """Base exception for the adapter."""

    def __init__(self, message: str, details: dict[str, Any] | None = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigError(AdapterError):
    """Configuration related errors."""

    pass


class BadInputError(AdapterError):
    """The auction request or a bid refers to data the adapter cannot use."""

    pass


class SerializationError(AdapterError):
    """JSON encoding or decoding failed."""

    pass


class BadServerResponseError(AdapterError):
    """The exchange answered with an unexpected HTTP status."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message, {"status_code": status_code})
        self.status_code = status_code
