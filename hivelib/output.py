"""Writing characters, strings and numbers to a file descriptor or stream."""

from __future__ import annotations

import os
import sys
from typing import TextIO, Union

from hivelib.chars import itoa

Target = Union[int, TextIO, None]


def _write(text: str, fd: Target) -> None:
    """Write ``text`` to a file descriptor number or a text stream."""
    if fd is None:
        sys.stdout.write(text)
    elif isinstance(fd, int) and not isinstance(fd, bool):
        data = text.encode("utf-8")
        while data:
            written = os.write(fd, data)
            data = data[written:]
    else:
        fd.write(text)


def put_char(c: str, fd: Target = None) -> None:
    """Write the single character ``c``."""
    if not isinstance(c, str) or len(c) != 1:
        raise ValueError(f"expected a single character, got {c!r}")
    _write(c, fd)


def put_str(s: str, fd: Target = None) -> None:
    """Write the string ``s``."""
    if s is None:
        raise TypeError("string is missing")
    _write(s, fd)


def put_endl(s: str, fd: Target = None) -> None:
    """Write the string ``s`` followed by a newline."""
    put_str(s, fd)
    _write("\n", fd)


def put_nbr(n: int, fd: Target = None) -> None:
    """Write the decimal text of the 32-bit signed integer ``n``."""
    _write(itoa(n), fd)