"""
Type checks - Does a raw string look like the declared type?

Every environment value is a string; a type tag only asserts that the
string converts cleanly. Unknown tags are permissive and always pass.
"""

import json
import math
import re

from pydantic import AnyUrl, TypeAdapter
from pydantic import ValidationError as PydanticValidationError

from envkeeper.core.models import VariableType

# Decimal literal with optional sign, fraction and exponent
DECIMAL_PATTERN = re.compile(r"[+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?", re.ASCII)
# Unsigned 0x / 0o / 0b integer literals
RADIX_PATTERN = re.compile(r"0(?:[xX][0-9a-fA-F]+|[oO][0-7]+|[bB][01]+)")
EMAIL_PATTERN = re.compile(r"[^\s@]+@[^\s@]+\.[^\s@]+")
# Leading / trailing whitespace, byte-order marks included
EDGE_WHITESPACE = re.compile(r"^[\s\ufeff]+|[\s\ufeff]+$")

BOOLEAN_VALUES = frozenset({"true", "false", "1", "0"})
MAX_PORT = 65535

_url_adapter = TypeAdapter(AnyUrl)


def to_number(value: str) -> float | None:
    """
    Convert a string to a finite number.

    Args:
        value: Raw variable value

    Returns:
        The numeric value, or None if the string is not a finite number
    """
    text = EDGE_WHITESPACE.sub("", value)
    if not text:
        return 0.0

    if RADIX_PATTERN.fullmatch(text):
        try:
            return float(int(text, 0))
        except OverflowError:
            return None

    if not DECIMAL_PATTERN.fullmatch(text):
        return None

    number = float(text)
    if not math.isfinite(number):
        return None
    return number


def _reject_constant(name: str) -> float:
    raise ValueError(f"Invalid JSON constant: {name}")


def _is_json(value: str) -> bool:
    try:
        json.loads(value, parse_constant=_reject_constant)
        return True
    except (ValueError, RecursionError):
        return False


def _is_url(value: str) -> bool:
    try:
        _url_adapter.validate_python(value)
        return True
    except PydanticValidationError:
        return False


def _is_port(value: str) -> bool:
    number = to_number(value)
    return number is not None and number.is_integer() and 0 < number <= MAX_PORT


def check_type(value: str, type_tag: str) -> bool:
    """
    Check a raw value against a type tag.

    Args:
        value: Raw variable value
        type_tag: Type name, matched case-insensitively

    Returns:
        True if the value satisfies the type (or the tag is unknown)
    """
    try:
        var_type = VariableType(type_tag.lower())
    except ValueError:
        return True

    if var_type == VariableType.STRING:
        return True
    if var_type == VariableType.NUMBER:
        return to_number(value) is not None
    if var_type == VariableType.BOOLEAN:
        return value.lower() in BOOLEAN_VALUES
    if var_type == VariableType.URL:
        return _is_url(value)
    if var_type == VariableType.EMAIL:
        return EMAIL_PATTERN.fullmatch(value) is not None
    if var_type == VariableType.JSON:
        return _is_json(value)
    if var_type == VariableType.PORT:
        return _is_port(value)
    return True
