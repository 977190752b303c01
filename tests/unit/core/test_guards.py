"""
Tests for randguard.core.guards

Verify BoundGuards delegates with its configured widths.
"""

import dataclasses

import pytest
from randguard.config.schema import GuardConfig
from randguard.core.guards import BoundGuards
from randguard.core.numeric import INT32, INT64, UINT64, FLOAT32, FLOAT64
from randguard.core.exceptions import OutOfRangeError, ValidationError


class TestConstruction:
    """Tests for building BoundGuards."""
    
    def test_defaults(self):
        g = BoundGuards()
        assert g.int_width is INT64
        assert g.float_width is FLOAT64
        assert g.index_width is INT32
    
    def test_from_config(self, minimal_config):
        g = BoundGuards.from_config(minimal_config)
        assert g.int_width is INT32
        assert g.float_width is FLOAT32
    
    def test_dtype_names_resolved(self):
        g = BoundGuards(int_width="uint64")
        assert g.int_width is UINT64
    
    def test_unsupported_width_raises(self):
        with pytest.raises(ValidationError):
            BoundGuards(float_width="float16")
    
    def test_frozen(self, guards):
        with pytest.raises(dataclasses.FrozenInstanceError):
            guards.int_width = INT32


class TestDelegation:
    """Bound methods apply the configured widths."""
    
    def test_stream_size(self, guards):
        guards.stream_size(0)
        with pytest.raises(OutOfRangeError):
            guards.stream_size(-1)
    
    def test_upper_bound_uses_int_width(self, guards, guards32):
        guards.upper_bound(2 ** 31)
        with pytest.raises(OutOfRangeError):
            guards32.upper_bound(2 ** 31)
    
    def test_float_upper_bound_uses_float_width(self, guards, guards32):
        guards.float_upper_bound(1e39)
        with pytest.raises(OutOfRangeError):
            guards32.float_upper_bound(1e39)
        with pytest.raises(OutOfRangeError):
            guards.float_upper_bound(0.0)
    
    def test_range(self, guards):
        guards.range(4, 5)
        with pytest.raises(OutOfRangeError):
            guards.range(5, 5)
    
    def test_unsigned_range(self):
        g = BoundGuards.from_config(GuardConfig(int_dtype="uint32"))
        g.range(0, 1)
        with pytest.raises(OutOfRangeError):
            g.range(-1, 1)
    
    def test_float_range(self, guards):
        guards.float_range(0.0, 1.0)
        with pytest.raises(OutOfRangeError):
            guards.float_range(0.0, float("inf"))
    
    def test_from_index_size(self, guards):
        guards.from_index_size(2, 2, 4)
        with pytest.raises(OutOfRangeError):
            guards.from_index_size(2, 3, 4)
