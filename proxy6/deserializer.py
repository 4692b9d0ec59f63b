"""Lenient conversions of decoded JSON values into the types the API models use."""

from __future__ import annotations

import ipaddress
import re
from typing import Any

_U16_MAX = 2**16 - 1
_U64_MAX = 2**64 - 1

_UNSIGNED_RE = re.compile(r"\+?[0-9]+")
_FLOAT_RE = re.compile(
    r"[+-]?(?:inf|infinity|nan|(?:[0-9]+\.?[0-9]*|\.[0-9]+)(?:[eE][+-]?[0-9]+)?)",
    re.IGNORECASE,
)

_NUMBER_EXPECTED = "number or string parsed to number"


class DeserializeError(ValueError):
    """A JSON value does not have the shape a model expects."""


def _invalid(unexpected: str, expected: str) -> DeserializeError:
    return DeserializeError(f"invalid type: {unexpected}, expected {expected}")


def _is_number(value: Any) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def _number_text(value: int | float) -> str:
    return str(value) if isinstance(value, int) else repr(value)


def _parse_unsigned(value: Any, maximum: int) -> int:
    if _is_number(value):
        text = _number_text(value)
        unexpected = "number cannot parse to needed number"
    elif isinstance(value, str):
        text = value
        unexpected = "string cannot parse to number"
    else:
        raise _invalid("non-number/string value", _NUMBER_EXPECTED)

    if _UNSIGNED_RE.fullmatch(text) is None:
        raise _invalid(unexpected, _NUMBER_EXPECTED)
    number = int(text)
    if number > maximum:
        raise _invalid(unexpected, _NUMBER_EXPECTED)
    return number


def to_u16(value: Any) -> int:
    """Read a 16-bit unsigned integer from a JSON number or numeric string."""
    return _parse_unsigned(value, _U16_MAX)


def to_usize(value: Any) -> int:
    """Read an unsigned integer from a JSON number or numeric string."""
    return _parse_unsigned(value, _U64_MAX)


def to_f64(value: Any) -> float:
    """Read a float from a JSON number or numeric string."""
    if _is_number(value):
        try:
            return float(value)
        except OverflowError:
            raise _invalid(
                "number cannot parse to needed number", _NUMBER_EXPECTED
            ) from None
    if isinstance(value, str):
        if _FLOAT_RE.fullmatch(value) is None:
            raise _invalid("string cannot parse to number", _NUMBER_EXPECTED)
        return float(value)
    raise _invalid("non-number/string value", _NUMBER_EXPECTED)


def parse_proxy_status(value: Any) -> bool:
    """Read the proxy activity flag, sent as the string "0" or "1"."""
    if not isinstance(value, str):
        raise _invalid("non-string value", "string 0 or 1")
    if value == "0":
        return False
    if value == "1":
        return True
    raise _invalid("string must be 0 or 1", "string 0 or 1")


def to_string(value: Any) -> str:
    """Read a string from a JSON string or number."""
    if _is_number(value):
        return _number_text(value)
    if isinstance(value, str):
        return value
    raise _invalid("non-number/string value", "a number or string")


def _field(data: Any, key: str) -> Any:
    if not isinstance(data, dict):
        raise DeserializeError("invalid type: expected a JSON object")
    try:
        return data[key]
    except KeyError:
        raise DeserializeError(f"missing field `{key}`") from None


def _expect_str(value: Any) -> str:
    if not isinstance(value, str):
        raise _invalid(type(value).__name__, "a string")
    return value


def _expect_u64(value: Any) -> int:
    if isinstance(value, bool) or not isinstance(value, int) or not 0 <= value <= _U64_MAX:
        raise _invalid(repr(value), "an unsigned integer")
    return value


def _expect_f64(value: Any) -> float:
    if not _is_number(value):
        raise _invalid(repr(value), "a number")
    return float(value)


def _expect_bool(value: Any) -> bool:
    if not isinstance(value, bool):
        raise _invalid(repr(value), "a boolean")
    return value


def _expect_list(value: Any) -> list[Any]:
    if not isinstance(value, list):
        raise _invalid(type(value).__name__, "a sequence")
    return value


def _expect_ip(value: Any) -> ipaddress.IPv4Address | ipaddress.IPv6Address:
    text = _expect_str(value)
    try:
        return ipaddress.ip_address(text)
    except ValueError:
        raise DeserializeError(f"invalid IP address syntax: {text!r}") from None