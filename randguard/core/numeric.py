"""
randguard.core.numeric

Numeric width descriptors.

Python integers are unbounded and Python floats are always 64-bit, so the
width a value is meant to occupy is declared explicitly as a numpy dtype.
Each supported dtype resolves to a NumericWidth carrying its kind and
representable limits.
"""

import math
import numbers
from dataclasses import dataclass
from typing import Any, Dict, Union

import numpy as np

from .exceptions import ValidationError


DTypeLike = Union[str, type, np.dtype]


@dataclass(frozen=True)
class NumericWidth:
    """A supported numeric width.
    
    Attributes:
        dtype: The numpy dtype.
        name: Canonical name ("int32", "float64", ...).
        kind: "int", "uint" or "float".
        min_value: Smallest representable value (most negative finite for floats).
        max_value: Largest representable value (largest finite for floats).
    """
    dtype: np.dtype
    name: str
    kind: str
    min_value: Union[int, float]
    max_value: Union[int, float]
    
    @property
    def is_integer(self) -> bool:
        return self.kind in ("int", "uint")
    
    @property
    def is_floating(self) -> bool:
        return self.kind == "float"
    
    def fits(self, value: Union[int, float]) -> bool:
        """Whether value is representable in this width.

        For floats, NaN and infinities are representable; only finite
        values that round to infinity overflow.
        """
        if self.is_floating:
            return not math.isfinite(value) or math.isfinite(self.round(value))
        return self.min_value <= value <= self.max_value

    def round(self, value: float) -> float:
        """Round a float to this width's precision.

        Values too large for the width become +/-inf.
        """
        with np.errstate(over="ignore"):
            return float(self.dtype.type(value))

    def is_finite(self, value: float) -> bool:
        """Whether value, rounded to this width, is neither NaN nor infinite."""
        return math.isfinite(self.round(value))


def _integer_width(dtype: np.dtype, kind: str) -> NumericWidth:
    info = np.iinfo(dtype)
    return NumericWidth(
        dtype=dtype,
        name=dtype.name,
        kind=kind,
        min_value=int(info.min),
        max_value=int(info.max),
    )


def _float_width(dtype: np.dtype) -> NumericWidth:
    info = np.finfo(dtype)
    return NumericWidth(
        dtype=dtype,
        name=dtype.name,
        kind="float",
        min_value=float(info.min),
        max_value=float(info.max),
    )


INT32 = _integer_width(np.dtype(np.int32), "int")
INT64 = _integer_width(np.dtype(np.int64), "int")
UINT32 = _integer_width(np.dtype(np.uint32), "uint")
UINT64 = _integer_width(np.dtype(np.uint64), "uint")
FLOAT32 = _float_width(np.dtype(np.float32))
FLOAT64 = _float_width(np.dtype(np.float64))

SUPPORTED_WIDTHS: Dict[str, NumericWidth] = {
    w.name: w for w in (INT32, INT64, UINT32, UINT64, FLOAT32, FLOAT64)
}


def resolve_width(dtype: Union[DTypeLike, NumericWidth]) -> NumericWidth:
    """Resolve a dtype-like to one of the supported widths.
    
    Args:
        dtype: NumericWidth, numpy dtype, scalar type or dtype name.
    
    Raises:
        ValidationError: If dtype is not understood or not supported.
    """
    if isinstance(dtype, NumericWidth):
        return dtype
    if dtype is None:
        raise ValidationError("dtype must not be None")
    
    try:
        resolved = np.dtype(dtype)
    except TypeError as e:
        raise ValidationError(f"Unknown dtype: {dtype!r}") from e
    
    width = SUPPORTED_WIDTHS.get(resolved.name)
    if width is None:
        raise ValidationError(
            f"Unsupported dtype {resolved.name}, "
            f"expected one of {sorted(SUPPORTED_WIDTHS)}"
        )
    return width


def as_integer(value: Any, name: str) -> int:
    """Coerce an integral value (Python or numpy) to a Python int."""
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Integral):
        raise ValidationError(
            f"{name} must be an integer, got {type(value).__name__}"
        )
    return int(value)


def as_float(value: Any, name: str) -> float:
    """Coerce a real value (Python or numpy) to a Python float.
    
    Integers too large for a float become +/-inf.
    """
    if isinstance(value, (bool, np.bool_)) or not isinstance(value, numbers.Real):
        raise ValidationError(
            f"{name} must be a real number, got {type(value).__name__}"
        )
    try:
        return float(value)
    except OverflowError:
        return math.inf if value > 0 else -math.inf
