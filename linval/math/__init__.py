"""
linval.math - immutable linear-algebra value types

- Vector: fixed-length sequence of real scalars
- Matrix: fixed-size collection of equal-length column Vectors
- Fuzzy equality with configurable tolerance
- Multiple output formats (string, TeX, Python, NumPy)
- Discriminated loading of either type from dicts or JSON
"""

from typing import Annotated, Union

from pydantic import Field, TypeAdapter

from .matrix import Matrix
from .scalar import format_scalar, fuzzy_compare, is_scalar
from .value import MathValue, ToleranceMode, ValueKind
from .vector import Vector

MathValueAdapter: TypeAdapter[Union[Vector, Matrix]] = TypeAdapter(
    Annotated[Union[Vector, Matrix], Field(discriminator="kind")]
)

__all__ = [
    "MathValue",
    "ValueKind",
    "ToleranceMode",
    "Vector",
    "Matrix",
    "MathValueAdapter",
    "is_scalar",
    "fuzzy_compare",
    "format_scalar",
]
