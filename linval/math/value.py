"""
Base MathValue class for the linval value types.

This module provides the foundation shared by Vector and Matrix:
- Immutable pydantic storage (writes after construction are rejected)
- A ``kind`` discriminator for mixed-operand dispatch and deserialization
- Fuzzy equality with configurable tolerance
- Multiple output formats (string, TeX, Python, NumPy)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict

from ..core.errors import ImmutabilityViolationError


class ValueKind(str, Enum):
    """
    Discriminator identifying each concrete value type.

    Members compare equal to their string values, so ``value.kind == "Matrix"``
    and ``value.kind == ValueKind.MATRIX`` are interchangeable.
    """

    VECTOR = "Vector"
    MATRIX = "Matrix"


class ToleranceMode:
    """Modes for fuzzy comparison."""

    RELATIVE = "relative"  # |a - b| / max(|a|, |b|) <= tol
    ABSOLUTE = "absolute"  # |a - b| <= tol


class MathValue(BaseModel, ABC):
    """
    Base class for all linear-algebra value objects.

    Provides:
    - Write-protected storage: every field is fixed once validation finishes
    - Value equality through ``compare`` using the configured tolerance
    - String representations built on ``to_string``

    Subclasses must declare a ``kind`` field and implement the abstract methods.
    """

    model_config = ConfigDict(arbitrary_types_allowed=True)

    kind: str

    # NumPy scalars on the left defer to our reflected operators
    __array_ufunc__ = None

    # Tolerance-based equality is not transitive, so no hash can agree with it
    __hash__ = None

    @abstractmethod
    def compare(
        self,
        other: Any,
        tolerance: float | None = None,
        mode: str | None = None,
    ) -> bool:
        """
        Fuzzy comparison with tolerance.

        Args:
            other: Value to compare against
            tolerance: Tolerance for comparison (None = configured default)
            mode: Tolerance mode (None = configured default)

        Returns:
            True if values are equal within tolerance
        """

    # String representations

    @abstractmethod
    def to_string(self) -> str:
        """Convert to human-readable string."""

    @abstractmethod
    def to_tex(self) -> str:
        """Convert to LaTeX representation."""

    @abstractmethod
    def to_python(self) -> Any:
        """Convert to Python native types."""

    def __str__(self) -> str:
        """String representation (uses to_string)."""
        return self.to_string()

    def __repr__(self) -> str:
        """Debug representation."""
        return f"{self.__class__.__name__}({self.to_string()})"

    # Immutability

    def __setattr__(self, name: str, value: Any) -> None:
        raise ImmutabilityViolationError(self.__class__.__name__, name)

    def __delattr__(self, name: str) -> None:
        raise ImmutabilityViolationError(self.__class__.__name__, name)

    # Comparison operators (using fuzzy comparison)

    def __eq__(self, other: Any) -> bool:
        """Equality with the configured default tolerance."""
        if not isinstance(other, MathValue):
            return False
        return self.compare(other)

    def __ne__(self, other: Any) -> bool:
        """Inequality."""
        return not self.__eq__(other)
