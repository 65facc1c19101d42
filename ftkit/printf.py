"""A small printf: the %c %s %p %d %i %u %x %X and %% conversions."""

from __future__ import annotations

import operator
import sys
from collections.abc import Iterator
from typing import Any, TextIO

from ftkit.chars import itoa

_UINT_MODULUS = 2**32
_ULONG_MODULUS = 2**64
_INT_MIN = -(2**31)

_NULL_STRING = "(null)"
_NULL_POINTER = "(nil)"


def _as_int32(value: Any) -> int:
    """Reduce an integer to the 32-bit signed range, as passing it as a C int does."""
    return (operator.index(value) - _INT_MIN) % _UINT_MODULUS + _INT_MIN


def _as_uint32(value: Any) -> int:
    """Reduce an integer to the 32-bit unsigned range."""
    return operator.index(value) % _UINT_MODULUS


def num_length(n: int) -> int:
    """Number of characters in the decimal form of n, the minus sign included."""
    return len(str(operator.index(n)))


def to_hex(n: int, upper: bool = False) -> str:
    """Hexadecimal digits of n taken as a 64-bit unsigned value, without prefix."""
    value = operator.index(n) % _ULONG_MODULUS
    return format(value, "X" if upper else "x")


def format_pointer(address: int | None) -> str:
    """Render an address as 0x followed by lower-case hex; a null address as (nil)."""
    if address is None or operator.index(address) == 0:
        return _NULL_POINTER
    return "0x" + to_hex(address, upper=False)


def _format_char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"%c expects a single character, got {value!r}")
        return value
    return chr(operator.index(value) & 0xFF)


def _format_str(value: Any) -> str:
    if value is None:
        return _NULL_STRING
    if not isinstance(value, str):
        raise TypeError(f"%s expects a string or None, got {type(value).__name__}")
    return value


def _convert(conversion: str, args: Iterator[Any]) -> str:
    """Render one conversion, drawing its argument from args when it takes one."""
    if conversion == "%":
        return "%"
    handlers = {
        "c": _format_char,
        "d": lambda v: itoa(_as_int32(v)),
        "i": lambda v: itoa(_as_int32(v)),
        "s": _format_str,
        "u": lambda v: str(_as_uint32(v)),
        "x": lambda v: to_hex(_as_uint32(v), upper=False),
        "X": lambda v: to_hex(_as_uint32(v), upper=True),
        "p": format_pointer,
    }
    handler = handlers.get(conversion)
    if handler is None:
        return ""
    try:
        value = next(args)
    except StopIteration:
        raise TypeError("not enough arguments for format string") from None
    return handler(value)


def _pieces(fmt: str, args: tuple[Any, ...]) -> Iterator[str]:
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            yield ch
            continue
        conversion = next(chars, None)
        if conversion is None:
            yield "%"
        else:
            yield _convert(conversion, remaining)


def format_string(fmt: str, *args: Any) -> str:
    """Expand the conversions in fmt with args and return the text.

    An unknown conversion produces nothing and consumes no argument; a lone
    '%' at the very end is kept as it is. Extra arguments are ignored.
    """
    return "".join(_pieces(fmt, args))


def printf(fmt: str, *args: Any, stream: TextIO | None = None) -> int:
    """Write the expansion of fmt to stream (stdout by default); return its length."""
    text = format_string(fmt, *args)
    (sys.stdout if stream is None else stream).write(text)
    return len(text)