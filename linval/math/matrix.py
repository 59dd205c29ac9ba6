"""
Matrix value type.

A Matrix is an immutable, fixed-size collection of equal-length Vectors
interpreted as its columns. Rows are derived, never stored.

Operand conventions for the elementwise operators (+, -, **, %):
- Matrix: combined column by column; dimensions must match.
- Vector: supplies one scalar per column, positionally, so its size must equal
  the column count. A Vector is never broadcast whole onto every column.
- scalar: broadcast to every column.
"""

from __future__ import annotations

import math
import operator
from typing import Any, Callable, Iterable, Iterator, Literal, Sequence

import numpy as np
from pydantic import Field, model_validator

from ..core.errors import (
    DimensionMismatchError,
    TypeMismatchError,
    UnsupportedOperationError,
)
from ..core.logging import get_context_logger
from .scalar import format_scalar, is_scalar
from .value import MathValue, ValueKind
from .vector import Vector

logger = get_context_logger(__name__, value_type=ValueKind.MATRIX.value)


class Matrix(MathValue):
    """
    Matrix stored as an ordered tuple of column Vectors.

    ``dimensions`` is ``(number_of_columns, column_length)`` and ``magnitude``
    is the sum of the column magnitudes; both are derived once at construction.

    Examples:
        >>> m = Matrix(Vector(1, 2), Vector(3, 4))
        >>> m.dimensions
        (2, 2)
        >>> print(m)
        1|3
        2|4
    """

    columns: tuple[Vector, ...] = Field(min_length=1)
    dimensions: tuple[int, int] = (0, 0)
    magnitude: float = 0.0
    kind: Literal["Matrix"] = ValueKind.MATRIX.value

    def __init__(
        self,
        *args: Any,
        columns: Iterable[Any] | None = None,
        **kwargs: Any,
    ) -> None:
        """Initialize a Matrix from column Vectors (or scalar sequences)."""
        if columns is not None and args:
            raise ValueError("Matrix accepts either columns or positional arguments, not both")

        if columns is None:
            columns = self._parse_arguments(args)

        super().__init__(columns=self._coerce_columns(columns), **kwargs)

    @staticmethod
    def _parse_arguments(args: tuple[Any, ...]) -> list[Any]:
        """Accept ``Matrix(v1, v2)`` as well as ``Matrix([v1, v2])``."""
        if len(args) == 1 and isinstance(args[0], (list, tuple)):
            single = args[0]
            if single and all(not is_scalar(item) for item in single):
                return list(single)
        return list(args)

    @staticmethod
    def _coerce_columns(raw_columns: Iterable[Any]) -> tuple[Vector, ...]:
        """Convert raw columns into Vectors and check they form a rectangle."""
        columns: list[Vector] = []
        for column in raw_columns:
            if isinstance(column, Vector):
                columns.append(column)
            elif isinstance(column, dict):
                columns.append(Vector.model_validate(column))
            elif isinstance(column, (list, tuple, np.ndarray)):
                columns.append(Vector(column))
            else:
                raise TypeMismatchError("Matrix column", column)

        if not columns:
            raise DimensionMismatchError("Matrix requires at least one column")

        length = columns[0].size
        for position, column in enumerate(columns):
            if column.size != length:
                raise DimensionMismatchError(
                    "Matrix columns must all have same length",
                    column=position,
                    expected=length,
                    actual=column.size,
                )
        return tuple(columns)

    @model_validator(mode="before")
    @classmethod
    def _derive_fields(cls, data: Any) -> Any:
        if isinstance(data, dict) and "columns" in data:
            columns = cls._coerce_columns(data["columns"])
            data = {
                **data,
                "columns": columns,
                "dimensions": (len(columns), columns[0].size),
                "magnitude": math.fsum(column.magnitude for column in columns),
            }
        return data

    # Constructors

    @classmethod
    def new(cls, *columns: Vector) -> Matrix:
        """Build a Matrix from column Vectors."""
        return cls(*columns)

    @classmethod
    def from_rows(cls, rows: Iterable[Any]) -> Matrix:
        """Build a Matrix from row Vectors (or scalar sequences)."""
        return cls(columns=rows).transpose()

    @classmethod
    def from_numpy(cls, array: np.ndarray | Sequence[Sequence[float]]) -> Matrix:
        """
        Build a Matrix from a 2-D array in conventional row-major layout.

        ``array[r][c]`` becomes the ``r``-th scalar of column ``c``.
        """
        values = np.asarray(array, dtype=float)
        if values.ndim != 2:
            raise DimensionMismatchError(
                "Matrix requires a two-dimensional array",
                shape=values.shape,
            )
        return cls(*(Vector(column) for column in values.T))

    @staticmethod
    def _check_dimensions(dimensions: Sequence[int] | Vector) -> tuple[int, int]:
        """Accept a ``(columns, length)`` pair of whole numbers, or a 2-component Vector."""
        if isinstance(dimensions, Vector):
            dimensions = dimensions.components
        try:
            values = tuple(dimensions)
        except TypeError:
            raise TypeMismatchError("Matrix dimensions", dimensions) from None
        if len(values) != 2:
            raise DimensionMismatchError(
                "Matrix dimensions must be a (columns, length) pair",
                dimensions=values,
            )
        for value in values:
            if not is_scalar(value) or not float(value).is_integer():
                raise TypeMismatchError("Matrix dimensions", value)
        count, length = (int(value) for value in values)
        if count < 1 or length < 1:
            raise DimensionMismatchError(
                "Matrix dimensions must be positive",
                dimensions=(count, length),
            )
        return count, length

    @classmethod
    def one(cls, dimensions: Sequence[int] | Vector) -> Matrix:
        """``dimensions[0]`` all-ones columns of length ``dimensions[1]``."""
        count, length = cls._check_dimensions(dimensions)
        logger.debug(
            "Building all-ones matrix %sx%s", count, length,
            extra_data={"operation": "one", "dimensions": (count, length)},
        )
        return cls(*(Vector.one(length) for _ in range(count)))

    @classmethod
    def zero(cls, dimensions: Sequence[int] | Vector) -> Matrix:
        """``dimensions[0]`` all-zeros columns of length ``dimensions[1]``."""
        count, length = cls._check_dimensions(dimensions)
        return cls(*(Vector.zero(length) for _ in range(count)))

    @classmethod
    def identity(cls, dimensions: Sequence[int] | Vector) -> Matrix:
        """
        Column ``i`` is the one-hot Vector with its 1 at position ``i``.

        This is a true identity matrix only when the dimensions are square.

        Raises:
            DimensionMismatchError: If there are more columns than column slots
        """
        count, length = cls._check_dimensions(dimensions)
        if count > length:
            raise DimensionMismatchError(
                "Identity needs column length >= number of columns",
                dimensions=(count, length),
            )
        logger.debug(
            "Building identity matrix %sx%s", count, length,
            extra_data={"operation": "identity", "dimensions": (count, length)},
        )
        return cls(*(Vector.identity(length, i) for i in range(count)))

    # Accessors

    def to_columns(self) -> list[Vector]:
        """Column Vectors in original order, as a fresh list."""
        return list(self.columns)

    def to_rows(self) -> list[Vector]:
        """
        Reinterpret the column storage as rows.

        Row ``j`` collects the ``j``-th scalar of every column, so there are
        ``dimensions[1]`` rows of size ``dimensions[0]``.
        """
        return [Vector(list(row)) for row in zip(*(column.components for column in self.columns))]

    def transpose(self) -> Matrix:
        """New Matrix whose columns are this matrix's rows."""
        return Matrix(*self.to_rows())

    def column(self, index: int) -> Vector:
        """Column Vector by 0-based index."""
        return self[index]

    def row(self, index: int) -> Vector:
        """Row Vector by 0-based index."""
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeMismatchError("Matrix row index", index) from None
        return Vector([column.components[position] for column in self.columns])

    def __getitem__(self, index: int) -> Vector:
        """Column Vector by 0-based index; named fields are plain attributes."""
        try:
            position = operator.index(index)
        except TypeError:
            raise TypeMismatchError("Matrix column index", index) from None
        return self.columns[position]

    def __len__(self) -> int:
        """Number of columns."""
        return len(self.columns)

    def __iter__(self) -> Iterator[Vector]:  # type: ignore[override]
        return iter(self.columns)

    def compare(
        self,
        other: Any,
        tolerance: float | None = None,
        mode: str | None = None,
    ) -> bool:
        """Compare matrices column by column."""
        if other is False or not isinstance(other, Matrix):
            return False

        if self.dimensions != other.dimensions:
            return False

        return all(
            c1.compare(c2, tolerance, mode) for c1, c2 in zip(self.columns, other.columns)
        )

    def to_string(self) -> str:
        """Rows on separate lines, scalars in a row separated by ``|``."""
        return "\n".join(
            "|".join(format_scalar(value) for value in row.components)
            for row in self.to_rows()
        )

    def to_tex(self) -> str:
        """Convert to LaTeX (pmatrix)."""
        rows_tex = " \\\\ ".join(
            " & ".join(format_scalar(value) for value in row.components)
            for row in self.to_rows()
        )
        return f"\\begin{{pmatrix}} {rows_tex} \\end{{pmatrix}}"

    def to_python(self) -> list[list[float]]:
        """Convert to row-major nested lists."""
        return [row.to_python() for row in self.to_rows()]

    def to_numpy(self) -> np.ndarray:
        """Convert to a row-major NumPy array of shape (column_length, columns)."""
        return np.array([column.components for column in self.columns], dtype=float).T

    def __repr__(self) -> str:
        """Debug representation."""
        columns_str = ", ".join(column.to_string() for column in self.columns)
        return f"Matrix({columns_str})"

    # Elementwise operators

    def _columnwise(
        self,
        other: Any,
        op: Callable[[Any, Any], Vector],
        symbol: str,
        reflected: bool = False,
    ) -> Matrix:
        """Apply ``op`` per column against a Matrix, a per-column Vector, or a scalar."""
        count = self.dimensions[0]
        if isinstance(other, Matrix):
            if other.dimensions != self.dimensions:
                raise DimensionMismatchError(
                    "Matrices must have same dimensions",
                    operation=symbol,
                    left=self.dimensions,
                    right=other.dimensions,
                )
            operands: Sequence[Any] = other.columns
        elif isinstance(other, Vector):
            if other.size != count:
                raise DimensionMismatchError(
                    "Vector operand must supply one scalar per column",
                    operation=symbol,
                    columns=count,
                    size=other.size,
                )
            operands = other.components
        elif is_scalar(other):
            operands = [float(other)] * count
        else:
            raise TypeMismatchError(symbol, other)

        if reflected:
            return Matrix(*(op(b, a) for a, b in zip(self.columns, operands)))
        return Matrix(*(op(a, b) for a, b in zip(self.columns, operands)))

    def __add__(self, other: Any) -> Matrix:
        return self._columnwise(other, operator.add, "+")

    def __radd__(self, other: Any) -> Matrix:
        return self._columnwise(other, operator.add, "+", reflected=True)

    def __sub__(self, other: Any) -> Matrix:
        return self._columnwise(other, operator.sub, "-")

    def __rsub__(self, other: Any) -> Matrix:
        return self._columnwise(other, operator.sub, "-", reflected=True)

    def __pow__(self, other: Any) -> Matrix:
        """Elementwise power (not repeated matrix multiplication)."""
        return self._columnwise(other, operator.pow, "**")

    def __rpow__(self, other: Any) -> Matrix:
        return self._columnwise(other, operator.pow, "**", reflected=True)

    def __mod__(self, other: Any) -> Matrix:
        return self._columnwise(other, operator.mod, "%")

    def __rmod__(self, other: Any) -> Matrix:
        return self._columnwise(other, operator.mod, "%", reflected=True)

    def __neg__(self) -> Matrix:
        """Negation."""
        return Matrix(*(-column for column in self.columns))

    def __pos__(self) -> Matrix:
        """Unary positive."""
        return Matrix(*(+column for column in self.columns))

    # Multiplication

    def _matrix_product(self, other: Matrix) -> Matrix:
        """
        Row-by-column product.

        ``product[y][x]`` is the dot product of row ``y`` of self with column
        ``x`` of other, and row ``y`` of the result is ``product[y]``.
        """
        count, length = self.dimensions
        if count != length:
            raise DimensionMismatchError(
                "Matrix multiplication requires a square left operand",
                dimensions=self.dimensions,
            )
        if other.dimensions != self.dimensions:
            raise DimensionMismatchError(
                "Matrix multiplication requires equal dimensions",
                left=self.dimensions,
                right=other.dimensions,
            )
        logger.debug(
            "Multiplying %sx%s matrices", count, length,
            extra_data={"operation": "product", "dimensions": (count, length)},
        )
        return Matrix.from_numpy(self.to_numpy() @ other.to_numpy())

    def _vector_product(self, other: Vector) -> Vector:
        """Linear combination of the columns weighted by the vector's components."""
        if other.size != self.dimensions[0]:
            raise DimensionMismatchError(
                "Vector size must equal the number of columns",
                columns=self.dimensions[0],
                size=other.size,
            )
        return Vector(self.to_numpy() @ other.to_numpy())

    def __mul__(self, other: Any) -> MathValue:
        """Matrix product, matrix-vector product, or scalar scaling."""
        if isinstance(other, Matrix):
            return self._matrix_product(other)
        if isinstance(other, Vector):
            return self._vector_product(other)
        if is_scalar(other):
            return Matrix(*(column * other for column in self.columns))
        raise TypeMismatchError("*", other)

    def __rmul__(self, other: Any) -> Matrix:
        """Right multiplication (scalar only)."""
        if is_scalar(other):
            return Matrix(*(float(other) * column for column in self.columns))
        raise TypeMismatchError("*", other)

    def __matmul__(self, other: Any) -> MathValue:
        """Matrix product or matrix-vector product: m @ other."""
        if isinstance(other, Matrix):
            return self._matrix_product(other)
        if isinstance(other, Vector):
            return self._vector_product(other)
        raise TypeMismatchError("@", other)

    # Division

    def __truediv__(self, other: Any) -> Matrix:
        """Scalar division; dividing by a Matrix is unsupported."""
        if isinstance(other, Matrix):
            raise UnsupportedOperationError("Matrix division")
        if is_scalar(other):
            if other == 0:
                raise ZeroDivisionError("Matrix division by zero")
            return Matrix(*(column / other for column in self.columns))
        raise TypeMismatchError("/", other)

    def __rtruediv__(self, other: Any) -> Matrix:
        """Division by a Matrix is unsupported; other left operands are bad values."""
        if is_scalar(other) or isinstance(other, MathValue):
            raise UnsupportedOperationError("Division by a matrix")
        raise TypeMismatchError("/", other)
