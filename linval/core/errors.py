"""
Library exceptions.

Every error raised by linval derives from LinvalError and also from the
builtin exception callers would naturally catch for the same failure.
"""

from typing import Any, Dict, Optional


class LinvalError(Exception):
    """Base exception for linval errors"""

    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(self.message)


class ImmutabilityViolationError(LinvalError, AttributeError):
    """Raised when a value is written after construction"""

    def __init__(self, type_name: str, attribute: str):
        super().__init__(
            message=f"{type_name} is immutable after construction; cannot set '{attribute}'",
            details={"type": type_name, "attribute": attribute}
        )


class TypeMismatchError(LinvalError, TypeError):
    """Raised when an operand is not a Matrix, Vector or scalar where one is required"""

    def __init__(self, operation: str, operand: Any):
        operand_type = type(operand).__name__
        super().__init__(
            message=f"bad value for {operation}: {operand_type}",
            details={"operation": operation, "operand_type": operand_type}
        )


class DimensionMismatchError(LinvalError, ValueError):
    """Raised when operand shapes are incompatible"""

    def __init__(self, message: str, **details: Any):
        super().__init__(message=message, details=details)


class UnsupportedOperationError(LinvalError, ArithmeticError):
    """Raised for operations the value types deliberately do not define"""

    def __init__(self, operation: str):
        super().__init__(
            message=f"{operation} is not supported",
            details={"operation": operation}
        )
