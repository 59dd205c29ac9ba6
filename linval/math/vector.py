"""
Vector value type.

A Vector is an immutable, ordered, fixed-length sequence of real scalars. It is
the column type Matrix is built from.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Iterable, Iterator, Literal

import numpy as np
from pydantic import Field, model_validator

from ..core.errors import DimensionMismatchError, TypeMismatchError
from .scalar import format_scalar, fuzzy_compare, is_scalar
from .value import MathValue, ValueKind


class Vector(MathValue):
    """
    Vector in n-dimensional space.

    Supports elementwise arithmetic against another Vector of the same size or
    against a scalar, plus dot product and Euclidean magnitude.

    Examples:
        >>> v = Vector(3, 4)
        >>> v.magnitude
        5.0
        >>> (v * 2).to_python()
        [6.0, 8.0]
    """

    components: tuple[float, ...] = Field(min_length=1)
    size: int = 0
    magnitude: float = 0.0
    kind: Literal["Vector"] = ValueKind.VECTOR.value

    def __init__(
        self,
        *args: Any,
        components: Iterable[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a Vector from scalars, a single sequence, or ``components=``."""
        if components is not None and args:
            raise ValueError("Vector accepts either components or positional arguments, not both")

        if components is None:
            components = self._parse_arguments(args)

        super().__init__(components=self._coerce_components(components), **kwargs)

    @staticmethod
    def _parse_arguments(args: tuple[Any, ...]) -> list[Any]:
        """Parse positional constructor arguments."""
        if len(args) == 1 and isinstance(args[0], (list, tuple, np.ndarray)):
            single = args[0]
            if isinstance(single, np.ndarray):
                if single.ndim != 1:
                    raise DimensionMismatchError(
                        "Vector requires a one-dimensional array",
                        shape=single.shape,
                    )
                return single.tolist()
            return list(single)
        return list(args)

    @staticmethod
    def _coerce_components(raw_components: Iterable[Any]) -> tuple[float, ...]:
        """Convert raw component values into floats."""
        coerced = []
        for component in raw_components:
            if not is_scalar(component):
                raise TypeMismatchError("Vector component", component)
            coerced.append(float(component))

        if not coerced:
            raise DimensionMismatchError("Vector requires at least one component")
        return tuple(coerced)

    @model_validator(mode="before")
    @classmethod
    def _derive_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and "components" in data:
            components = cls._coerce_components(data["components"])
            data = {
                **data,
                "components": components,
                "size": len(components),
                "magnitude": math.hypot(*components),
            }
        return data

    # Canonical constructors

    @classmethod
    def one(cls, size: int) -> Vector:
        """All-ones vector of the given size."""
        return cls([1.0] * size)

    @classmethod
    def zero(cls, size: int) -> Vector:
        """All-zeros vector of the given size."""
        return cls([0.0] * size)

    @classmethod
    def identity(cls, size: int, index: int) -> Vector:
        """
        One-hot vector: 1 at ``index`` (0-based), 0 elsewhere.

        Raises:
            IndexError: If index is outside ``range(size)``
        """
        if not 0 <= index < size:
            raise IndexError(f"One-hot index {index} out of range for size {size}")
        return cls([1.0 if i == index else 0.0 for i in range(size)])

    # Accessors

    def to_scalars(self) -> list[float]:
        """Components in order, as a fresh list."""
        return list(self.components)

    def get_scalars(self) -> list[float]:
        """Alias for to_scalars()."""
        return self.to_scalars()

    def __len__(self) -> int:
        """Dimension of the vector."""
        return self.size

    def __iter__(self) -> Iterator[float]:  # type: ignore[override]
        return iter(self.components)

    def __getitem__(self, index: int) -> float:
        """Get component by 0-based index."""
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeMismatchError("Vector index", index) from None
        return self.components[position]

    def compare(
        self,
        other: Any,
        tolerance: float | None = None,
        mode: str | None = None,
    ) -> bool:
        """Compare vectors component-wise."""
        if not isinstance(other, Vector):
            return False

        if self.size != other.size:
            return False

        return all(
            fuzzy_compare(c1, c2, tolerance, mode)
            for c1, c2 in zip(self.components, other.components)
        )

    def to_string(self) -> str:
        """Convert to string."""
        comps_str = ", ".join(format_scalar(c) for c in self.components)
        return f"<{comps_str}>"

    def to_tex(self) -> str:
        """Convert to LaTeX."""
        comps_str = ", ".join(format_scalar(c) for c in self.components)
        return f"\\left\\langle {comps_str} \\right\\rangle"

    def to_python(self) -> list[float]:
        """Convert to Python list."""
        return list(self.components)

    def to_numpy(self) -> np.ndarray:
        """Convert to NumPy array."""
        return np.array(self.components, dtype=float)

    # Vector operations

    def dot(self, other: Vector) -> float:
        """
        Dot product with another vector.

        Raises:
            DimensionMismatchError: If sizes differ
            TypeMismatchError: If other is not a Vector
        """
        if not isinstance(other, Vector):
            raise TypeMismatchError("dot product", other)
        if self.size != other.size:
            raise DimensionMismatchError(
                "Vectors must have same dimension",
                left=self.size,
                right=other.size,
            )
        return math.fsum(c1 * c2 for c1, c2 in zip(self.components, other.components))

    # Arithmetic operators

    def _elementwise(
        self,
        other: Any,
        op: Callable[[float, float], float],
        symbol: str,
        reflected: bool = False,
    ) -> Vector:
        """Apply ``op`` per component against a Vector or a broadcast scalar."""
        if isinstance(other, Vector):
            if self.size != other.size:
                raise DimensionMismatchError(
                    "Vectors must have same dimension",
                    operation=symbol,
                    left=self.size,
                    right=other.size,
                )
            operands: Iterable[float] = other.components
        elif is_scalar(other):
            operands = [float(other)] * self.size
        elif isinstance(other, MathValue):
            # Let the other type's reflected operator decide
            return NotImplemented
        else:
            raise TypeMismatchError(symbol, other)

        if reflected:
            return Vector([op(b, a) for a, b in zip(self.components, operands)])
        return Vector([op(a, b) for a, b in zip(self.components, operands)])

    def __add__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.add, "+")

    def __radd__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.add, "+", reflected=True)

    def __sub__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.sub, "-")

    def __rsub__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.sub, "-", reflected=True)

    def __mul__(self, other: Any) -> Vector:
        """Elementwise product (use dot() or @ for the scalar product)."""
        return self._elementwise(other, operator.mul, "*")

    def __rmul__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.mul, "*", reflected=True)

    def __truediv__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.truediv, "/")

    def __rtruediv__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.truediv, "/", reflected=True)

    def __mod__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.mod, "%")

    def __rmod__(self, other: Any) -> Vector:
        return self._elementwise(other, operator.mod, "%", reflected=True)

    def __pow__(self, other: Any) -> Vector:
        # math.pow raises ValueError instead of returning complex numbers
        return self._elementwise(other, math.pow, "**")

    def __rpow__(self, other: Any) -> Vector:
        return self._elementwise(other, math.pow, "**", reflected=True)

    def __matmul__(self, other: Any) -> float:
        """Dot product: v @ w."""
        if isinstance(other, Vector):
            return self.dot(other)
        if isinstance(other, MathValue):
            return NotImplemented
        raise TypeMismatchError("@", other)

    def __neg__(self) -> Vector:
        """Negation."""
        return Vector([-c for c in self.components])

    def __pos__(self) -> Vector:
        """Unary positive."""
        return Vector(list(self.components))

    def __abs__(self) -> float:
        """Magnitude (norm)."""
        return self.magnitude
