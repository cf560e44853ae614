"""Small numeric, string and sequence helpers."""

from __future__ import annotations

import math
import string
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any, TypeVar

T = TypeVar("T")


@dataclass
class Point:
    """A point on an integer grid."""

    x: int = 0
    y: int = 0


def alphabet() -> str:
    """The lower-case ASCII letters, a to z."""
    return string.ascii_lowercase


def digits() -> str:
    """The decimal digits, 0 to 9."""
    return string.digits


def sign_letter(n: int) -> str:
    """``"N"`` for a negative integer, ``"P"`` otherwise.

    Raises TypeError when ``n`` is not an integer.
    """
    if isinstance(n, bool) or not isinstance(n, int):
        raise TypeError(f"expected an integer, got {type(n).__name__}")
    if n < 0:
        return "N"
    return "P"


def div_mod(a: int, b: int) -> tuple[int, int]:
    """Quotient truncated toward zero and the remainder with the sign of ``a``.

    Raises ZeroDivisionError when ``b`` is 0.
    """
    if b == 0:
        raise ZeroDivisionError("integer division by zero")
    quotient = abs(a) // abs(b)
    if (a < 0) != (b < 0):
        quotient = -quotient
    return quotient, a - quotient * b


def factorial_iterative(n: int) -> int:
    """``n!`` computed with a loop; 0 for a negative ``n``."""
    if n < 0:
        return 0
    result = 1
    for factor in range(2, n + 1):
        result *= factor
    return result


def factorial_recursive(n: int) -> int:
    """``n!`` computed by recursion; 0 for a negative ``n``."""
    if n < 0:
        return 0
    if n in (0, 1):
        return 1
    return factorial_recursive(n - 1) * n


def exact_sqrt(n: int) -> int:
    """The integer square root of a perfect square, else 0."""
    if n <= 0:
        return 0
    root = math.isqrt(n)
    return root if root * root == n else 0


def strcmp(s1: str, s2: str) -> int:
    """Difference of the first unequal character codes, the end counting as 0."""
    for a, b in zip(s1, s2):
        if a != b:
            return ord(a) - ord(b)
    common = min(len(s1), len(s2))
    first = ord(s1[common]) if common < len(s1) else 0
    second = ord(s2[common]) if common < len(s2) else 0
    return first - second


def int_range(low: int, high: int) -> list[int]:
    """The integers from ``low`` up to but not including ``high``.

    Empty when ``low`` is not below ``high``.
    """
    return list(range(low, high))


def abs_value(value: Any) -> Any:
    """The absolute value of anything that compares with 0 and negates."""
    return -value if value < 0 else value


def foreach(items: Iterable[T], f: Callable[[T], Any]) -> None:
    """Call ``f`` on every item in order."""
    for item in items:
        f(item)


def count_if(items: Iterable[T], f: Callable[[T], Any]) -> int:
    """Number of items for which ``f`` gives a true value."""
    return sum(1 for item in items if f(item))