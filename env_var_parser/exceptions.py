"""
ABOUTME: Custom exception classes for typed environment variable access
ABOUTME: Provides specific error types for missing, empty, and unparsable variables
"""

from typing import Optional


class ConfigError(Exception):
    """Configuration validation error."""

    pass


class VariableNotSetError(ConfigError):
    """An environment variable is absent or empty."""

    def __init__(self, name: str, message: str):
        super().__init__(message)
        self.name = name


class MissingVariableError(VariableNotSetError):
    """The environment variable does not exist."""

    def __init__(self, name: str):
        super().__init__(name, f"missing environment variable '{name}'")


class EmptyVariableError(VariableNotSetError):
    """The environment variable exists but holds an empty string."""

    def __init__(self, name: str):
        super().__init__(name, f"empty environment variable '{name}'")


class InvalidValueError(ConfigError):
    """An environment variable is set but does not parse as the requested type."""

    expected = "value"

    def __init__(self, name: str, value: str, message: Optional[str] = None):
        """
        Parameters:
            name (str): Name of the offending environment variable.
            value (str): Raw text that failed to parse.
            message (str, optional): Overrides the default message built from ``expected``.
        """
        if message is None:
            message = (
                f"expecting environment variable '{name} = {value}' "
                f"to be parsable as {self.expected}"
            )
        super().__init__(message)
        self.name = name
        self.value = value


class InvalidBooleanError(InvalidValueError):
    """Boolean parse error."""

    expected = "a boolean"

    def __init__(self, name: str, value: str):
        super().__init__(
            name,
            value,
            f"expecting environment variable '{name}' to be either 'true' "
            f"(or 't' or '1') or 'false' (or 'f' or '0'), but got '{value}' "
            "(note: input is not case sensitive)",
        )


class InvalidIntegerError(InvalidValueError):
    """Integer parse error."""

    expected = "an integer"


class InvalidFloatError(InvalidValueError):
    """Float parse error."""

    expected = "a float"
