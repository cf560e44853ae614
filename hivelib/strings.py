"""String searching, comparison, copying and splitting helpers."""

from __future__ import annotations

from collections.abc import Callable, MutableSequence

_NUL = "\0"


def _char(c: str | int) -> str:
    """Return a one-character string for a character or a character code."""
    if isinstance(c, str):
        if len(c) != 1:
            raise ValueError(f"expected a single character, got {c!r}")
        return c
    if isinstance(c, bool) or not isinstance(c, int):
        raise TypeError(f"expected a character or an int, got {type(c).__name__}")
    return chr(c)


def _code_at(s: str, index: int) -> int:
    """Code point at ``index``, or 0 past the end (the terminator)."""
    return ord(s[index]) if index < len(s) else 0


def strlen(s: str) -> int:
    """Number of characters in ``s``."""
    return len(s)


def strchr(s: str, c: str | int) -> int | None:
    """Index of the first ``c`` in ``s``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.find(ch)
    return None if index < 0 else index


def strrchr(s: str, c: str | int) -> int | None:
    """Index of the last ``c`` in ``s``, or None.

    Searching for the NUL character gives the index just past the end.
    """
    ch = _char(c)
    if ch == _NUL:
        return len(s)
    index = s.rfind(ch)
    return None if index < 0 else index


def strncmp(s1: str, s2: str, n: int) -> int:
    """Compare at most ``n`` characters.

    Returns the difference of the first unequal character codes, with the
    end of a string counting as code 0, or 0 when they agree.
    """
    if n < 0:
        raise ValueError(f"negative length: {n}")
    if n == 0:
        return 0
    index = 0
    limit = min(len(s1), len(s2), n - 1)
    while index < limit and s1[index] == s2[index]:
        index += 1
    return _code_at(s1, index) - _code_at(s2, index)


def strnstr(big: str, little: str, length: int) -> int | None:
    """Index of ``little`` wholly inside the first ``length`` characters of ``big``.

    An empty ``little`` is found at index 0.
    """
    if length < 0:
        raise ValueError(f"negative length: {length}")
    if not little:
        return 0
    index = big[:length].find(little)
    return None if index < 0 else index


def strlcpy(dst: str, src: str, size: int) -> tuple[str, int]:
    """Copy ``src`` into a buffer of ``size`` characters, terminator included.

    Returns the new buffer content and the length of ``src``.  With a size
    of 0 the buffer is left as it was.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    if size == 0:
        return dst, len(src)
    return src[: size - 1], len(src)


def strlcat(dst: str, src: str, size: int) -> tuple[str, int]:
    """Append ``src`` to ``dst`` within a buffer of ``size`` characters.

    Returns the new buffer content and the length the full result would
    have had.  When ``size`` does not exceed the length of ``dst`` nothing
    is appended and ``size + len(src)`` is reported.
    """
    if size < 0:
        raise ValueError(f"negative size: {size}")
    destlen = len(dst)
    srclen = len(src)
    if size <= destlen:
        return dst, size + srclen
    return dst + src[: size - 1 - destlen], destlen + srclen


def strdup(s: str) -> str:
    """Return a copy of ``s``."""
    return "".join(s)


def substr(s: str, start: int, length: int) -> str:
    """At most ``length`` characters of ``s`` from ``start``; empty past the end."""
    if start < 0 or length < 0:
        raise ValueError("start and length must not be negative")
    if start >= len(s):
        return ""
    return s[start : start + length]


def strjoin(s1: str | None, s2: str) -> str:
    """Concatenate ``s1`` and ``s2``; a missing ``s1`` counts as empty."""
    if s2 is None:
        raise TypeError("second string is missing")
    return ("" if s1 is None else s1) + s2


def strtrim(s: str | None, charset: str | None) -> str:
    """Strip characters of ``charset`` from both ends of ``s``.

    A missing ``s`` gives an empty string; a missing ``charset`` leaves
    ``s`` unchanged.
    """
    if s is None:
        return ""
    if charset is None:
        return strdup(s)
    return s.strip(charset.replace(_NUL, ""))


def split(s: str, sep: str | int) -> list[str]:
    """Split ``s`` on the character ``sep``, dropping empty words."""
    ch = _char(sep)
    return [word for word in s.split(ch) if word]


def strmapi(s: str, f: Callable[[int, str], str]) -> str:
    """Build a string from ``f(index, char)`` for every character of ``s``."""
    if s is None or f is None:
        raise TypeError("string and function are required")
    return "".join(f(index, ch) for index, ch in enumerate(s))


def striteri(s: MutableSequence[str], f: Callable[[int, str], str | None]) -> None:
    """Call ``f(index, char)`` for every character of ``s``, in place.

    Where ``f`` returns a value, that value replaces the character.
    """
    if s is None or f is None:
        return
    for index, ch in enumerate(list(s)):
        replacement = f(index, ch)
        if replacement is not None:
            s[index] = replacement