"""
randguard.config.schema

Configuration schema using dataclasses.

Design: All config fields have explicit types. Defaults only here.
"""

from dataclasses import dataclass

from ..core.numeric import SUPPORTED_WIDTHS


INT_DTYPES = tuple(n for n, w in SUPPORTED_WIDTHS.items() if w.is_integer)
FLOAT_DTYPES = tuple(n for n, w in SUPPORTED_WIDTHS.items() if w.is_floating)
INDEX_DTYPES = tuple(n for n, w in SUPPORTED_WIDTHS.items() if w.kind == "int")


@dataclass(frozen=True)
class GuardConfig:
    """Widths the guards apply to.
    
    Attributes:
        int_dtype: Width of integer bounds and ranges.
        float_dtype: Width of floating bounds and ranges.
        index_dtype: Width of sub-range index/size/length (signed).
    """
    int_dtype: str = "int64"     # "int32" | "int64" | "uint32" | "uint64"
    float_dtype: str = "float64"  # "float32" | "float64"
    index_dtype: str = "int32"   # "int32" | "int64"
    
    def __post_init__(self):
        if self.int_dtype not in INT_DTYPES:
            raise ValueError(f"Invalid int_dtype: {self.int_dtype}")
        if self.float_dtype not in FLOAT_DTYPES:
            raise ValueError(f"Invalid float_dtype: {self.float_dtype}")
        if self.index_dtype not in INDEX_DTYPES:
            raise ValueError(f"Invalid index_dtype: {self.index_dtype}")
    
    @classmethod
    def minimal(cls) -> "GuardConfig":
        """Factory for 32-bit widths throughout."""
        return cls(int_dtype="int32", float_dtype="float32", index_dtype="int32")
