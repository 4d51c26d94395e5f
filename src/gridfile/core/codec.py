"""Conversion between raw field strings and typed values."""
from collections.abc import Callable, Iterable
from decimal import Decimal
from typing import Any, TypeVar

from .errors import ValueParseError

T = TypeVar("T")

_BOOL_LITERALS = {"true": True, "false": False}


def _parse_bool(text: str) -> bool:
    try:
        return _BOOL_LITERALS[text]
    except KeyError:
        raise ValueError("expected 'true' or 'false'") from None


_PARSERS: dict[Any, Callable[[str], Any]] = {
    str: str,
    int: int,
    float: float,
    bool: _parse_bool,
    Decimal: Decimal,
}


def parse_value(raw: str, value_type: Callable[[str], T] = str) -> T:
    """Parse a raw field into a typed value.

    Surrounding whitespace is stripped before conversion. ``bool`` accepts
    only the literals ``true`` and ``false``. Any callable other than the
    built-in scalar types is applied to the stripped text as-is.

    Args:
        raw: Raw field text
        value_type: Target type or converter callable

    Returns:
        Converted value

    Raises:
        ValueParseError: If the conversion fails
    """
    text = raw.strip()
    parser = _PARSERS.get(value_type, value_type)

    try:
        return parser(text)
    except (ValueError, TypeError, ArithmeticError) as e:
        raise ValueParseError(raw, value_type, str(e)) from e


def parse_fields(fields: Iterable[str], value_type: Callable[[str], T] = str) -> list[T]:
    """Parse every field; the first failure aborts the whole list."""
    return [parse_value(field, value_type) for field in fields]


def format_value(value: Any) -> str:
    """Serialize a value into field text."""
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    return str(value)
