"""
randguard.core

Core of randguard.

Exports:
- Exception classes
- Numeric width descriptors
- Validation guards
- Width-bound guard bundle
"""

from .exceptions import (
    RandGuardError,
    ValidationError,
    OutOfRangeError,
    ConfigError,
)

from .numeric import (
    NumericWidth,
    INT32,
    INT64,
    UINT32,
    UINT64,
    FLOAT32,
    FLOAT64,
    SUPPORTED_WIDTHS,
    resolve_width,
)

from .validation import (
    validate_stream_size,
    validate_upper_bound,
    validate_range,
    validate_from_index_size,
)

from .guards import BoundGuards

__all__ = [
    # Exceptions
    "RandGuardError",
    "ValidationError",
    "OutOfRangeError",
    "ConfigError",
    # Widths
    "NumericWidth",
    "INT32",
    "INT64",
    "UINT32",
    "UINT64",
    "FLOAT32",
    "FLOAT64",
    "SUPPORTED_WIDTHS",
    "resolve_width",
    # Validation
    "validate_stream_size",
    "validate_upper_bound",
    "validate_range",
    "validate_from_index_size",
    # Bound guards
    "BoundGuards",
]
