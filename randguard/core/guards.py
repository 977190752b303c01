"""
randguard.core.guards

Guards pre-bound to configured numeric widths.

An RNG surface usually settles on one integer width, one floating width
and one index width. BoundGuards holds those resolved widths so call sites
do not repeat the dtype on every call.
"""

from dataclasses import dataclass
from typing import TYPE_CHECKING

from .numeric import INT32, INT64, FLOAT64, NumericWidth, resolve_width
from .validation import (
    validate_stream_size,
    validate_upper_bound,
    validate_range,
    validate_from_index_size,
)

if TYPE_CHECKING:
    from ..config.schema import GuardConfig


@dataclass(frozen=True)
class BoundGuards:
    """Validator bound to fixed widths.
    
    Usage:
        guards = BoundGuards.from_config(GuardConfig(int_dtype="int32"))
        guards.range(origin, bound)
        guards.float_upper_bound(1.5)
    """
    
    int_width: NumericWidth = INT64
    float_width: NumericWidth = FLOAT64
    index_width: NumericWidth = INT32
    
    def __post_init__(self):
        # Accept dtype-likes; store resolved widths
        object.__setattr__(self, "int_width", resolve_width(self.int_width))
        object.__setattr__(self, "float_width", resolve_width(self.float_width))
        object.__setattr__(self, "index_width", resolve_width(self.index_width))
    
    @classmethod
    def from_config(cls, config: "GuardConfig") -> "BoundGuards":
        """Build guards from a GuardConfig."""
        return cls(
            int_width=resolve_width(config.int_dtype),
            float_width=resolve_width(config.float_dtype),
            index_width=resolve_width(config.index_dtype),
        )
    
    def stream_size(self, size: int) -> None:
        validate_stream_size(size)
    
    def upper_bound(self, bound: int) -> None:
        validate_upper_bound(bound, self.int_width)
    
    def float_upper_bound(self, bound: float) -> None:
        validate_upper_bound(bound, self.float_width)
    
    def range(self, origin: int, bound: int) -> None:
        validate_range(origin, bound, self.int_width)
    
    def float_range(self, origin: float, bound: float) -> None:
        validate_range(origin, bound, self.float_width)
    
    def from_index_size(self, from_index: int, size: int, length: int) -> None:
        validate_from_index_size(from_index, size, length, self.index_width)
