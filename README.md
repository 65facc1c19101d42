# ftkit

A small toolkit of character, memory, string and linked-list helpers, together
with a compact printf-style formatter that supports `%c`, `%d`, `%i`, `%s`,
`%u`, `%x`, `%X`, `%p` and `%%`.

The helpers follow the conventions of the classic C string and memory
routines (32-bit integer wrap-around, NUL handling, `strlcpy`-style length
reporting) but work on Python strings, `bytearray` buffers and indices rather
than pointers.

## Installation

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Modules

- `ftkit.chars`: character classification (`is_alpha`, `is_digit`, `is_alnum`,
  `is_ascii`, `is_print`), case conversion (`to_upper`, `to_lower`) and integer
  conversion (`atoi`, `itoa`). Characters may be given as one-character
  strings or as integer codes; `atoi` wraps its result to the 32-bit signed
  range and `itoa` raises `OverflowError` outside it.
- `ftkit.memory`: byte-buffer helpers (`memset`, `bzero`, `memcpy`, `memmove`,
  `memchr`, `memcmp`, `calloc`). They work on mutable buffers such as
  `bytearray`; `memmove` copies between two offsets of the same buffer, and
  `memchr` returns an index or `None`. A byte count larger than a buffer
  raises `ValueError`.
- `ftkit.strings`: string searching, comparison, bounded copying and building
  (`strchr`, `strrchr`, `strnstr`, `strncmp`, `strlcpy`, `strlcat`, `substr`,
  `strjoin`, `strtrim`, `split`, `strmapi`, `striteri`). The search functions
  return an index or `None`; `strlcpy` and `strlcat` return the resulting text
  together with the length the untruncated result would have had.
- `ftkit.lists`: a singly linked list (`Node`, `LinkedList`, `delete_node`).
  `LinkedList` can be built from an iterable, supports `len()`, iteration and
  truth testing, and offers `add_front`, `add_back`, `last`, `clear`,
  `iterate`, `map` and `nodes`.
- `ftkit.output`: writing characters, strings, lines and numbers to a stream,
  standard output by default (`put_char`, `put_str`, `put_endl`, `put_nbr`).
- `ftkit.printf`: printf-style formatting (`format_string`, `printf`,
  `to_hex`, `format_pointer`, `num_length`).

## Examples

```python
from ftkit.chars import atoi, itoa
from ftkit.strings import split, strtrim
from ftkit.printf import format_string

atoi("   -42abc")             # -42
itoa(-2147483648)             # "-2147483648"
split("  hello  world ", " ") # ["hello", "world"]
strtrim("xxhixx", "x")        # "hi"
format_string("%s is %d (%x)", "answer", 42, 42)  # "answer is 42 (2a)"
```

`printf` writes to a stream and returns the number of characters written:

```python
import io
from ftkit.printf import printf

buffer = io.StringIO()
count = printf("%p and %u%%", 255, 7, stream=buffer)
buffer.getvalue()  # "0xff and 7%"
count              # 11
```

## Formatting rules

- `%d` and `%i` reduce their argument to a 32-bit signed int; `%u`, `%x` and
  `%X` to a 32-bit unsigned int.
- `%s` with `None` gives `(null)`; `%p` with `None` or `0` gives `(nil)`.
- An unknown conversion produces nothing and consumes no argument; a lone `%`
  at the very end of the format is kept. Extra arguments are ignored, and too
  few raise `TypeError`.

## What it does not do

The formatter has no flags, field widths, precisions or length modifiers, and
no floating-point conversions. The package has no command-line interface; it
is used as a library.