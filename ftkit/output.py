"""Writing characters, strings and integers to a text stream."""

from __future__ import annotations

import sys
from typing import TextIO

from ftkit.chars import itoa


def _target(stream: TextIO | None) -> TextIO:
    return sys.stdout if stream is None else stream


def put_char(c: str | int, stream: TextIO | None = None) -> None:
    """Write one character; an int is truncated to a byte first."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        ch = c
    else:
        ch = chr(int(c) & 0xFF)
    _target(stream).write(ch)


def put_str(s: str, stream: TextIO | None = None) -> None:
    """Write a string."""
    if not isinstance(s, str):
        raise TypeError("put_str expects a string")
    _target(stream).write(s)


def put_endl(s: str, stream: TextIO | None = None) -> None:
    """Write a string followed by a newline."""
    put_str(s, stream)
    put_char("\n", stream)


def put_nbr(n: int, stream: TextIO | None = None) -> None:
    """Write a 32-bit signed integer in decimal."""
    put_str(itoa(n), stream)