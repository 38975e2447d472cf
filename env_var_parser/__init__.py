"""
ABOUTME: Typed environment variable access with fail-fast validation
ABOUTME: Exposes required and optional string, boolean, integer and float accessors
"""

__version__ = "0.1.0"

from .config import (
    as_boolean,
    as_float,
    as_integer,
    as_optional_boolean,
    as_optional_float,
    as_optional_integer,
    as_optional_string,
    as_string,
)
from .exceptions import (
    ConfigError,
    EmptyVariableError,
    InvalidBooleanError,
    InvalidFloatError,
    InvalidIntegerError,
    InvalidValueError,
    MissingVariableError,
    VariableNotSetError,
)

__all__ = [
    "as_string",
    "as_optional_string",
    "as_boolean",
    "as_optional_boolean",
    "as_integer",
    "as_optional_integer",
    "as_float",
    "as_optional_float",
    "ConfigError",
    "VariableNotSetError",
    "MissingVariableError",
    "EmptyVariableError",
    "InvalidValueError",
    "InvalidBooleanError",
    "InvalidIntegerError",
    "InvalidFloatError",
]
