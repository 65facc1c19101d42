"""String search, comparison, bounded copy and construction helpers."""

from __future__ import annotations

import operator
from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _non_negative(name: str, value: int) -> int:
    value = operator.index(value)
    if value < 0:
        raise ValueError(f"{name} must not be negative, got {value}")
    return value


def _as_char(c: int | str) -> str:
    """Turn an int (truncated to a byte) or a one-character string into a character."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    return chr(operator.index(c) & 0xFF)


def _c_remainder(value: int, modulus: int) -> int:
    """Remainder whose sign follows the dividend, as C's % operator gives."""
    remainder = abs(value) % modulus
    return -remainder if value < 0 else remainder


def strchr(s: str, c: int | str) -> int | None:
    """Index of the first occurrence of c in s, or None.

    Searching for the NUL character finds the end of the string, so its
    index is len(s).
    """
    target = _as_char(c)
    if target == _NUL:
        index = s.find(_NUL)
        return len(s) if index < 0 else index
    index = s.find(target)
    return index if index >= 0 else None


def strrchr(s: str, c: int | str) -> int | None:
    """Index of the last occurrence of c in s, or None.

    An integer c is first reduced modulo 128; a value that reduces to 0
    finds the end of the string, so its index is len(s).
    """
    if isinstance(c, str):
        target = _as_char(c)
    else:
        target = chr(_c_remainder(operator.index(c), 128) & 0xFF)
    if target == _NUL:
        return len(s)
    index = s.rfind(target)
    return index if index >= 0 else None


def strnstr(haystack: str, needle: str, length: int) -> int | None:
    """Index of the first needle lying wholly within the first length characters.

    An empty needle is found at index 0.
    """
    length = _non_negative("length", length)
    if not needle:
        return 0
    if length < len(needle):
        return None
    index = haystack.find(needle, 0, length)
    return index if index >= 0 else None


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most n characters, returning the difference of the first mismatch.

    Comparison stops as soon as either string runs out, so a string and
    any longer string it is a prefix of compare equal.
    """
    n = _non_negative("n", n)
    for a, b in zip(s1[:n], s2[:n]):
        if a != b:
            return ord(a) - ord(b)
    return 0


def strlcpy(src: str, size: int) -> tuple[str, int]:
    """Copy src into a buffer of size characters including the terminator.

    Returns the copied text and the full length of src, so truncation
    happened when that length is at least size.
    """
    size = _non_negative("size", size)
    if size == 0:
        return "", len(src)
    return src[:size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append src to dst within a buffer of size characters including the terminator.

    Returns the resulting text and the length the full concatenation would
    have had. When size does not exceed len(dst), dst is left unchanged and
    the length reported is size + len(src).
    """
    size = _non_negative("size", size)
    if size <= len(dst):
        return dst, size + len(src)
    room = size - len(dst) - 1
    return dst + src[:room], len(dst) + len(src)


def substr(s: str, start: int, length: int) -> str:
    """At most length characters of s beginning at start; empty past the end."""
    start = _non_negative("start", start)
    length = _non_negative("length", length)
    if start >= len(s):
        return ""
    return s[start:start + length]


def strjoin(s1: str, s2: str) -> str:
    """Concatenate two strings."""
    if not isinstance(s1, str) or not isinstance(s2, str):
        raise TypeError("strjoin expects two strings")
    return s1 + s2


def strtrim(s: str, charset: str) -> str:
    """Remove characters found in charset from both ends of s."""
    return s.strip(charset)


def split(s: str, sep: str) -> list[str]:
    """Split s on the single character sep, dropping empty pieces."""
    sep = _as_char(sep)
    if sep == _NUL:
        return [s] if s else []
    return [piece for piece in s.split(sep) if piece]


def strmapi(s: str, func: Callable[[int, str], str]) -> str:
    """Build a new string from func(index, character) for each character of s."""
    return "".join(func(index, ch) for index, ch in enumerate(s))


def striteri(chars: MutableSequence, func: Callable[[int, object], object]) -> None:
    """Replace each element of chars in place with func(index, element)."""
    for index, element in enumerate(list(chars)):
        chars[index] = func(index, element)