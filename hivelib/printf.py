"""A small printf supporting %c %s %p %d %i %u %x %X and %%."""

from __future__ import annotations

import sys
from typing import Any, TextIO

from hivelib.chars import itoa

_UINT_MASK = 0xFFFFFFFF
_POINTER_MASK = (1 << 64) - 1
_UNSUPPORTED_MESSAGE = "Not supported format\n"


class UnsupportedFormatError(ValueError):
    """Raised for a conversion character that is not supported.

    ``partial`` holds the text produced before the bad conversion.
    """

    def __init__(self, conversion: str, partial: str = "") -> None:
        shown = conversion if conversion else "end of format"
        super().__init__(f"unsupported conversion: {shown!r}")
        self.conversion = conversion
        self.partial = partial


def _char(value: Any) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError(f"expected a single character, got {value!r}")
        return value
    return chr(int(value) & 0xFF)


def _pointer(value: Any) -> str:
    if value is None:
        address = 0
    elif isinstance(value, int) and not isinstance(value, bool):
        address = value & _POINTER_MASK
    else:
        address = id(value)
    if address == 0:
        return "(nil)"
    return "0x" + format(address, "x")


def _convert(conversion: str, value: Any) -> str:
    if conversion == "c":
        return _char(value)
    if conversion == "s":
        return "(null)" if value is None else str(value)
    if conversion == "p":
        return _pointer(value)
    if conversion in ("d", "i"):
        return itoa(int(value))
    if conversion == "u":
        return str(int(value) & _UINT_MASK)
    if conversion in ("x", "X"):
        return format(int(value) & _UINT_MASK, conversion)
    raise UnsupportedFormatError(conversion)


def format_string(fmt: str, *args: Any) -> str:
    """Return ``fmt`` with its conversions replaced by ``args``.

    Raises UnsupportedFormatError for an unknown conversion or a trailing
    lone ``%``, and TypeError when there are too few arguments.
    """
    pieces: list[str] = []
    remaining = iter(args)
    chars = iter(fmt)
    for ch in chars:
        if ch != "%":
            pieces.append(ch)
            continue
        conversion = next(chars, "")
        if conversion == "%":
            pieces.append("%")
            continue
        if conversion not in ("c", "s", "p", "d", "i", "u", "x", "X"):
            raise UnsupportedFormatError(conversion, "".join(pieces))
        try:
            value = next(remaining)
        except StopIteration:
            raise TypeError(
                f"not enough arguments for conversion %{conversion}"
            ) from None
        pieces.append(_convert(conversion, value))
    return "".join(pieces)


def printf(fmt: str, *args: Any, file: TextIO | None = None) -> int:
    """Write the formatted text to ``file`` (stdout by default).

    Returns the number of characters written.  On an unsupported
    conversion the text before it and a notice are written, then
    UnsupportedFormatError is raised.
    """
    out = sys.stdout if file is None else file
    try:
        text = format_string(fmt, *args)
    except UnsupportedFormatError as error:
        out.write(error.partial)
        out.write(_UNSUPPORTED_MESSAGE)
        raise
    out.write(text)
    return len(text)