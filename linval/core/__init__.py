"""Core utilities package"""

from .config import Settings, settings, get_settings
from .logging import setup_logging, get_logger, get_context_logger
from .errors import (
    LinvalError,
    ImmutabilityViolationError,
    TypeMismatchError,
    DimensionMismatchError,
    UnsupportedOperationError,
)

__all__ = [
    "Settings",
    "settings",
    "get_settings",
    "setup_logging",
    "get_logger",
    "get_context_logger",
    "LinvalError",
    "ImmutabilityViolationError",
    "TypeMismatchError",
    "DimensionMismatchError",
    "UnsupportedOperationError",
]
