"""
Scalar helpers shared by Vector and Matrix.

Scalars are plain Python or NumPy real numbers; booleans are not scalars.
"""

from __future__ import annotations

import numbers
from typing import Any

from ..core.config import get_settings
from .value import ToleranceMode

# Use epsilon for floating point comparisons to avoid precision issues
EPSILON = 1e-12


def is_scalar(value: Any) -> bool:
    """True for real numbers (int, float, NumPy numbers), False for bools."""
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def fuzzy_compare(
    a: float,
    b: float,
    tolerance: float | None = None,
    mode: str | None = None,
) -> bool:
    """
    Compare two floats with tolerance.

    Args:
        a: First value
        b: Second value
        tolerance: Tolerance value (None = ``Settings.TOLERANCE``)
        mode: Comparison mode, relative or absolute (None = ``Settings.TOLERANCE_MODE``)

    Returns:
        True if values are equal within tolerance
    """
    if a == b:
        return True

    if tolerance is None or mode is None:
        config = get_settings()
        tolerance = config.TOLERANCE if tolerance is None else tolerance
        mode = config.TOLERANCE_MODE if mode is None else mode

    if mode == ToleranceMode.ABSOLUTE:
        return abs(a - b) <= tolerance + EPSILON

    if mode == ToleranceMode.RELATIVE:
        max_abs = max(abs(a), abs(b))
        if max_abs == 0:
            return abs(a - b) <= tolerance + EPSILON
        return abs(a - b) / max_abs <= tolerance + EPSILON

    raise ValueError(f"Unknown tolerance mode: {mode!r}")


def format_scalar(value: float) -> str:
    """Render a scalar, dropping ``.0`` from integral values."""
    value = float(value)
    if value.is_integer() and abs(value) < 1e10:
        return str(int(value))
    return str(value)
