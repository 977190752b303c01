"""
randguard.config

Configuration management for randguard.

Exports:
- Config schema
- Loading/saving utilities
"""

from .schema import GuardConfig

from .load import (
    load_config,
    save_config,
    config_from_dict,
    config_to_dict,
)

__all__ = [
    # Schema
    "GuardConfig",
    # Load/save
    "load_config",
    "save_config",
    "config_from_dict",
    "config_to_dict",
]
