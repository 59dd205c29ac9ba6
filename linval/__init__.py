"""linval - immutable Vector and Matrix values.

Main namespace package:
- linval.math: Vector and Matrix value types
- linval.core: configuration, logging and exceptions
"""

from .core.errors import (
    DimensionMismatchError,
    ImmutabilityViolationError,
    LinvalError,
    TypeMismatchError,
    UnsupportedOperationError,
)
from .math import Matrix, MathValueAdapter, Vector

__version__ = "0.1.0"

__all__ = [
    "Vector",
    "Matrix",
    "MathValueAdapter",
    "LinvalError",
    "ImmutabilityViolationError",
    "TypeMismatchError",
    "DimensionMismatchError",
    "UnsupportedOperationError",
]
