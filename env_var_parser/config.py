"""
ABOUTME: Typed accessors for environment variables
ABOUTME: Required and optional string, boolean, integer and float lookups against the live environment
"""

import logging
import os
from typing import Mapping, Optional

from .exceptions import (
    EmptyVariableError,
    InvalidBooleanError,
    InvalidFloatError,
    InvalidIntegerError,
    MissingVariableError,
    VariableNotSetError,
)
from .parsing import parse_boolean, parse_float_prefix, parse_integer_prefix


def _to_boolean(name: str, value: str) -> bool:
    parsed = parse_boolean(value)
    if parsed is None:
        raise InvalidBooleanError(name, value)
    return parsed


def _to_integer(name: str, value: str) -> int:
    try:
        result = parse_integer_prefix(value)
    except ValueError as e:
        # int() refuses digit runs beyond sys.get_int_max_str_digits()
        raise InvalidIntegerError(name, value) from e
    if result is None:
        raise InvalidIntegerError(name, value)
    parsed, rest = result
    if rest:
        logging.debug(f"Ignored trailing text in integer variable '{name}'")
    return parsed


def _to_float(name: str, value: str) -> float:
    result = parse_float_prefix(value)
    if result is None:
        raise InvalidFloatError(name, value)
    parsed, rest = result
    if rest:
        logging.debug(f"Ignored trailing text in float variable '{name}'")
    return parsed


def as_string(name: str, *, environ: Optional[Mapping[str, str]] = None) -> str:
    """
    Get a required environment variable as a string.

    The value is returned exactly as stored, without trimming or case changes.

    Parameters:
        name (str): Name of the environment variable.
        environ (Mapping[str, str], optional): Store to read from. Defaults to ``os.environ``,
            looked up at call time.

    Returns:
        str: The variable's value.

    Raises:
        MissingVariableError: If the variable does not exist.
        EmptyVariableError: If the variable is an empty string.
    """
    store = os.environ if environ is None else environ
    value = store.get(name)
    if value is None:
        raise MissingVariableError(name)
    if value == "":
        raise EmptyVariableError(name)
    return value


def as_optional_string(
    name: str, *, environ: Optional[Mapping[str, str]] = None
) -> Optional[str]:
    """Get an environment variable as a string, or None if it is missing or empty."""
    try:
        return as_string(name, environ=environ)
    except VariableNotSetError:
        logging.debug(f"Optional environment variable '{name}' is not set")
        return None


def as_boolean(name: str, *, environ: Optional[Mapping[str, str]] = None) -> bool:
    """
    Get a required environment variable as a boolean.

    ``true``, ``t`` and ``1`` map to True; ``false``, ``f`` and ``0`` map to False.
    Comparison is case-insensitive. Surrounding whitespace is not stripped.

    Raises:
        MissingVariableError: If the variable does not exist.
        EmptyVariableError: If the variable is an empty string.
        InvalidBooleanError: If the value is not one of the accepted tokens.
    """
    return _to_boolean(name, as_string(name, environ=environ))


def as_optional_boolean(
    name: str, *, environ: Optional[Mapping[str, str]] = None
) -> Optional[bool]:
    """
    Get an environment variable as a boolean, or None if it is missing or empty.

    Raises:
        InvalidBooleanError: If the variable is set to an unrecognised token.
    """
    value = as_optional_string(name, environ=environ)
    if value is None:
        return None
    return _to_boolean(name, value)


def as_integer(name: str, *, environ: Optional[Mapping[str, str]] = None) -> int:
    """
    Get a required environment variable as an integer.

    Parsing is permissive: the leading signed run of decimal digits is used and
    anything after it is ignored, so ``"111test"`` and ``"111.55"`` both give 111.

    Raises:
        MissingVariableError: If the variable does not exist.
        EmptyVariableError: If the variable is an empty string.
        InvalidIntegerError: If the value does not start with an integer.
    """
    return _to_integer(name, as_string(name, environ=environ))


def as_optional_integer(
    name: str, *, environ: Optional[Mapping[str, str]] = None
) -> Optional[int]:
    """
    Get an environment variable as an integer, or None if it is missing or empty.

    Raises:
        InvalidIntegerError: If the variable is set but does not start with an integer.
    """
    value = as_optional_string(name, environ=environ)
    if value is None:
        return None
    return _to_integer(name, value)


def as_float(name: str, *, environ: Optional[Mapping[str, str]] = None) -> float:
    """
    Get a required environment variable as a float.

    Like as_integer, the longest leading number is used (``"111.6test"`` gives 111.6).

    Raises:
        MissingVariableError: If the variable does not exist.
        EmptyVariableError: If the variable is an empty string.
        InvalidFloatError: If the value does not start with a number.
    """
    return _to_float(name, as_string(name, environ=environ))


def as_optional_float(
    name: str, *, environ: Optional[Mapping[str, str]] = None
) -> Optional[float]:
    """Get an environment variable as a float, or None if it is missing or empty."""
    value = as_optional_string(name, environ=environ)
    if value is None:
        return None
    return _to_float(name, value)


# type name -> (required accessor, optional accessor)
ACCESSORS = {
    "string": (as_string, as_optional_string),
    "boolean": (as_boolean, as_optional_boolean),
    "integer": (as_integer, as_optional_integer),
    "float": (as_float, as_optional_float),
}
