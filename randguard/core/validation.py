"""
randguard.core.validation

Guards for the parameters of random-number-generation entry points.

Design: Validate at API boundaries, trust internally.
Call the matching guard first, before consuming entropy or allocating
output. Every guard is pure: it returns None on acceptance and raises
OutOfRangeError on rejection. Width/kind mistakes raise ValidationError.
"""

import math
from typing import Any, Union

from .exceptions import OutOfRangeError, ValidationError
from .numeric import (
    INT32,
    INT64,
    DTypeLike,
    NumericWidth,
    as_float,
    as_integer,
    resolve_width,
)


def _integer_in_width(value: Any, name: str, width: NumericWidth) -> int:
    """Coerce value to int and check it is representable in width."""
    v = as_integer(value, name)
    if not width.fits(v):
        raise OutOfRangeError(name, value, f"must fit in {width.name}")
    return v


def validate_stream_size(size: int) -> None:
    """Validate the number of values a stream should produce.

    Args:
        size: Stream size (int64).

    Raises:
        OutOfRangeError: If size is negative.
    """
    v = _integer_in_width(size, "size", INT64)
    if v < 0:
        raise OutOfRangeError("size", size, "must be >= 0")


def validate_upper_bound(
    bound: Union[int, float],
    dtype: Union[DTypeLike, NumericWidth] = INT64,
) -> None:
    """Validate an exclusive upper bound.

    For integer widths only non-negativity is enforced; a bound of 0 is
    accepted here and callers decide what an empty bound means. For
    floating widths the bound, rounded to the width, must satisfy
    0 < bound <= max finite value, which rejects zero, negatives, NaN and +inf.

    Args:
        bound: The exclusive upper bound on the value to be returned.
        dtype: Declared width of bound. Selects integer or floating rules.

    Raises:
        OutOfRangeError: If bound is outside its valid range.
        ValidationError: If dtype is unsupported or bound has the wrong kind.
    """
    width = resolve_width(dtype)

    if width.is_floating:
        b = width.round(as_float(bound, "bound"))
        # Written as a negated conjunction so NaN fails
        if not (0.0 < b <= width.max_value):
            raise OutOfRangeError(
                "bound", bound, f"must be in (0, {width.max_value!r}]"
            )
        return

    b = _integer_in_width(bound, "bound", width)
    if b < 0:
        raise OutOfRangeError("bound", bound, "must be >= 0")


def validate_range(
    origin: Union[int, float],
    bound: Union[int, float],
    dtype: Union[DTypeLike, NumericWidth] = INT64,
) -> None:
    """Validate the range [origin, bound).

    Integer ranges (signed or unsigned) require origin < bound. Floating
    endpoints are rounded to the declared width first, then must be
    finite and ordered.

    Args:
        origin: Inclusive lower bound on the value to be returned.
        bound: Exclusive upper bound on the value to be returned.
        dtype: Declared width shared by origin and bound.

    Raises:
        OutOfRangeError: If origin >= bound, or a floating endpoint is
            NaN, infinite or too large for the width.
        ValidationError: If dtype is unsupported or an endpoint has the
            wrong kind.
    """
    width = resolve_width(dtype)

    if width.is_floating:
        o = width.round(as_float(origin, "origin"))
        b = width.round(as_float(bound, "bound"))
        if o >= b or not math.isfinite(o) or not math.isfinite(b):
            raise OutOfRangeError("origin", origin, "must be finite and < bound")
        return

    o = _integer_in_width(origin, "origin", width)
    b = _integer_in_width(bound, "bound", width)
    if o >= b:
        raise OutOfRangeError("origin", origin, "must be < bound")


def validate_from_index_size(
    from_index: int,
    size: int,
    length: int,
    dtype: Union[DTypeLike, NumericWidth] = INT32,
) -> None:
    """Validate that [from_index, from_index + size) lies within [0, length).

    Args:
        from_index: Inclusive lower bound of the sub-range.
        size: Number of elements in the sub-range.
        length: Exclusive upper bound of the enclosing range.
        dtype: Declared signed integer width of the three arguments.

    Raises:
        OutOfRangeError: If the sub-range is out of bounds.
        ValidationError: If dtype is not a signed integer width.
    """
    width = resolve_width(dtype)
    if width.kind != "int":
        raise ValidationError(
            f"from_index/size/length dtype must be a signed integer, got {width.name}"
        )

    f = _integer_in_width(from_index, "from_index", width)
    s = _integer_in_width(size, "size", width)
    n = _integer_in_width(length, "length", width)

    if (f | s) < 0 or s > n - f:
        raise OutOfRangeError(
            "size",
            size,
            f"Range [{f}, {f + s}) out of bounds for length {n}",
        )
