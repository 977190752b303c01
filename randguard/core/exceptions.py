"""
randguard.core.exceptions

All custom exceptions for randguard.

Design: Fail fast and loud with informative errors.
"""

from typing import Any


class RandGuardError(Exception):
    """Base exception for all randguard errors."""
    pass


class ValidationError(RandGuardError):
    """Input validation failed.
    
    Raised when a parameter has the wrong kind or names an unsupported
    numeric width.
    """
    pass


class OutOfRangeError(ValidationError, ValueError):
    """A parameter lies outside its valid range.
    
    Carries the offending parameter's name, its value and a description
    of the constraint it violated.
    
    Attributes:
        name: Parameter name (e.g. "bound").
        value: The rejected value.
        constraint: Human-readable constraint (e.g. "must be >= 0").
    """
    
    def __init__(self, name: str, value: Any, constraint: str):
        self.name = name
        self.value = value
        self.constraint = constraint
        super().__init__(f"{name} {constraint}, got {value!r}")
    
    def __reduce__(self):
        return (type(self), (self.name, self.value, self.constraint))


class ConfigError(RandGuardError):
    """Configuration invalid or missing.
    
    Raised when config files are malformed or fields hold unsupported values.
    """
    pass
