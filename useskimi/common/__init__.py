"""
Common utilities and shared modules.
"""

from useskimi.common.config import get_settings
from useskimi.common.exceptions import (
    AdapterError,
    BadInputError,
    BadServerResponseError,
    ConfigError,
    SerializationError,
)
from useskimi.common.logger import get_logger

__all__ = [
    "get_settings",
    "get_logger",
    "AdapterError",
    "BadInputError",
    "BadServerResponseError",
    "ConfigError",
    "SerializationError",
]
