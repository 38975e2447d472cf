"""
ABOUTME: Coercion primitives for environment variable text
ABOUTME: Boolean token tables and permissive leading-prefix integer/float parsing
"""

import re

TRUE_VALUES = frozenset({"true", "t", "1"})
FALSE_VALUES = frozenset({"false", "f", "0"})

# Tab, line terminators, NBSP, BOM and the Unicode space separators.
_WHITESPACE = r"[\t\n\v\f\r \u00a0\u1680\u2000-\u200a\u2028\u2029\u202f\u205f\u3000\ufeff]*"

# Leading whitespace is skipped; everything after the numeric prefix is ignored.
_INTEGER_PREFIX = re.compile(_WHITESPACE + r"([+-]?[0-9]+)")
_FLOAT_PREFIX = re.compile(
    _WHITESPACE
    + r"([+-]?(?:Infinity|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?))"
)


def parse_boolean(text: str) -> bool | None:
    """Map a case-insensitive token to a bool, or None when it is not a known token."""
    lowered = text.lower()
    if lowered in TRUE_VALUES:
        return True
    if lowered in FALSE_VALUES:
        return False
    return None


def parse_integer_prefix(text: str) -> tuple[int, str] | None:
    """
    Parse the longest leading signed run of decimal digits in ``text``.

    Parameters:
        text (str): Raw variable value.

    Returns:
        tuple[int, str] | None: The parsed integer and the trailing text that was
        ignored, or None if ``text`` does not start with an integer.

    Raises:
        ValueError: If the digit run exceeds the interpreter's integer string conversion limit.
    """
    match = _INTEGER_PREFIX.match(text)
    if match is None:
        return None
    return int(match.group(1)), text[match.end():]


def parse_float_prefix(text: str) -> tuple[float, str] | None:
    """
    Parse the longest leading decimal number in ``text``.

    Accepts an optional sign, digits with an optional fractional part (or a bare
    fraction such as ``.5``), an optional complete exponent, and ``Infinity``.

    Returns:
        tuple[float, str] | None: The parsed float and the ignored trailing text,
        or None if ``text`` does not start with a number.
    """
    match = _FLOAT_PREFIX.match(text)
    if match is None:
        return None
    return float(match.group(1)), text[match.end():]
