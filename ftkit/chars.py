"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

import itertools
import operator

INT_MIN = -(2**31)
INT_MAX = 2**31 - 1

_WHITESPACE = " \t\n\v\f\r"


def _code(c: int | str) -> int:
    """Return the code of a character given as an int or a one-character string."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    return operator.index(c)


def _wrap_int32(value: int) -> int:
    """Reduce an integer to the range of a 32-bit two's complement int."""
    return (value - INT_MIN) % 2**32 + INT_MIN


def is_alpha(c: int | str) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: int | str) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: int | str) -> bool:
    """True for an ASCII letter or digit."""
    return is_digit(c) or is_alpha(c)


def is_ascii(c: int | str) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: int | str) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) <= 126


def _shift_case(c: int | str, low: str, high: str, delta: int) -> int | str:
    code = _code(c)
    if ord(low) <= code <= ord(high):
        code += delta
    return chr(code) if isinstance(c, str) else code


def to_upper(c: int | str) -> int | str:
    """Upper-case an ASCII lower-case letter; anything else is returned as is."""
    return _shift_case(c, "a", "z", -32)


def to_lower(c: int | str) -> int | str:
    """Lower-case an ASCII upper-case letter; anything else is returned as is."""
    return _shift_case(c, "A", "Z", 32)


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way C's atoi does.

    Leading whitespace is skipped, one optional sign is accepted, and digits
    are read until the first non-digit. Text without digits gives 0. The
    result wraps around to the 32-bit signed range.
    """
    rest = text.lstrip(_WHITESPACE)
    sign = 1
    if rest[:1] in ("-", "+"):
        if rest[0] == "-":
            sign = -1
        rest = rest[1:]
    digits = "".join(itertools.takewhile(lambda ch: "0" <= ch <= "9", rest))
    return _wrap_int32(sign * int(digits or "0"))


def itoa(n: int) -> str:
    """Render a 32-bit signed integer in decimal."""
    n = operator.index(n)
    if not INT_MIN <= n <= INT_MAX:
        raise OverflowError(f"{n} does not fit in a 32-bit signed int")
    return str(n)