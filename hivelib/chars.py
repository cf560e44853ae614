"""Character classification, case conversion and integer/text conversion."""

from __future__ import annotations

_INT_BITS = 32
_INT_MOD = 1 << _INT_BITS
_INT_MIN = -(1 << (_INT_BITS - 1))

# Characters skipped before a number by ``atoi``.
_ATOI_BLANKS = frozenset(" \t\n\r\v\f")
# Characters reported as white space by ``is_space``.
_SPACE = frozenset(("\n", "\t", " "))


def _code(c: str | int) -> int:
    """Return the code point of a one-character string, or an int unchanged."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return ord(c)
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return c


def _wrap_int32(value: int) -> int:
    """Reduce ``value`` to a signed 32-bit integer, wrapping on overflow."""
    value %= _INT_MOD
    return value - _INT_MOD if value >= -_INT_MIN else value


def is_alpha(c: str | int) -> bool:
    """True for an ASCII letter."""
    code = _code(c)
    return ord("a") <= code <= ord("z") or ord("A") <= code <= ord("Z")


def is_digit(c: str | int) -> bool:
    """True for an ASCII decimal digit."""
    return ord("0") <= _code(c) <= ord("9")


def is_alnum(c: str | int) -> bool:
    """True for an ASCII letter or digit."""
    return is_alpha(c) or is_digit(c)


def is_ascii(c: str | int) -> bool:
    """True for a code in the 7-bit ASCII range."""
    return 0 <= _code(c) <= 127


def is_print(c: str | int) -> bool:
    """True for a printable ASCII character, space included."""
    return 32 <= _code(c) < 127


def is_space(c: str | int) -> bool:
    """True for a newline, a tab or a space."""
    code = _code(c)
    return any(code == ord(s) for s in _SPACE)


def to_lower(c: str | int) -> str | int:
    """Lower-case an ASCII capital letter; anything else is returned as is."""
    code = _code(c)
    if ord("A") <= code <= ord("Z"):
        code = code - ord("A") + ord("a")
        return chr(code) if isinstance(c, str) else code
    return c


def to_upper(c: str | int) -> str | int:
    """Upper-case an ASCII small letter; anything else is returned as is."""
    code = _code(c)
    if ord("a") <= code <= ord("z"):
        code = code - ord("a") + ord("A")
        return chr(code) if isinstance(c, str) else code
    return c


def atoi(text: str) -> int:
    """Parse a leading decimal integer the way a C ``int`` parser does.

    Leading blanks are skipped, one optional sign is read, then digits up to
    the first non-digit.  Text with no digits gives 0.  The result wraps like
    a 32-bit signed integer.
    """
    pos = 0
    length = len(text)
    while pos < length and text[pos] in _ATOI_BLANKS:
        pos += 1
    sign = 1
    if pos < length and text[pos] in "+-":
        if text[pos] == "-":
            sign = -1
        pos += 1
    result = 0
    while pos < length and "0" <= text[pos] <= "9":
        result = 10 * result + (ord(text[pos]) - ord("0"))
        pos += 1
    return _wrap_int32(sign * result)


def itoa(n: int) -> str:
    """Return the decimal text of a 32-bit signed integer."""
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an int, got {type(n).__name__}")
    n = _wrap_int32(n)
    if n == 0:
        return "0"
    negative = n < 0
    magnitude = -n if negative else n
    digits = []
    while magnitude:
        magnitude, digit = divmod(magnitude, 10)
        digits.append(chr(ord("0") + digit))
    if negative:
        digits.append("-")
    return "".join(reversed(digits))