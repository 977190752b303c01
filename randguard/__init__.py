"""
randguard

Parameter guards for random-number-generation entry points.
"""

from .core import (
    RandGuardError,
    ValidationError,
    OutOfRangeError,
    ConfigError,
    validate_stream_size,
    validate_upper_bound,
    validate_range,
    validate_from_index_size,
    BoundGuards,
)
from .config import GuardConfig, load_config

__version__ = "0.1.0"

__all__ = [
    "RandGuardError",
    "ValidationError",
    "OutOfRangeError",
    "ConfigError",
    "validate_stream_size",
    "validate_upper_bound",
    "validate_range",
    "validate_from_index_size",
    "BoundGuards",
    "GuardConfig",
    "load_config",
]
