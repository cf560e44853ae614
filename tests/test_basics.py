import math
import string

import pytest

from hivelib.basics import (
    Point,
    abs_value,
    alphabet,
    count_if,
    digits,
    div_mod,
    exact_sqrt,
    factorial_iterative,
    factorial_recursive,
    foreach,
    int_range,
    sign_letter,
    strcmp,
)


def test_alphabet():
    assert alphabet() == string.ascii_lowercase


def test_digits():
    assert digits() == string.digits


@pytest.mark.parametrize("n,letter", [(-1, "N"), (-100, "N"), (0, "P"), (42, "P")])
def test_sign_letter(n, letter):
    assert sign_letter(n) == letter


@pytest.mark.parametrize("a", [-17, -7, -1, 0, 1, 7, 17])
@pytest.mark.parametrize("b", [-5, -2, 1, 2, 5])
def test_div_mod_invariants(a, b):
    q, r = div_mod(a, b)
    assert q * b + r == a
    assert abs(r) < abs(b)
    assert r == 0 or (r < 0) == (a < 0)


def test_div_mod_by_zero():
    with pytest.raises(ZeroDivisionError):
        div_mod(5, 0)


@pytest.mark.parametrize("n", range(0, 15))
def test_factorials_match(n):
    assert factorial_iterative(n) == math.factorial(n)
    assert factorial_recursive(n) == math.factorial(n)


@pytest.mark.parametrize("n", [-1, -5])
def test_factorial_negative(n):
    assert factorial_iterative(n) == 0
    assert factorial_recursive(n) == 0


def test_exact_sqrt_of_squares():
    for root in range(1, 60):
        assert exact_sqrt(root * root) == root


@pytest.mark.parametrize("n", [0, -4, 2, 3, 8, 99])
def test_exact_sqrt_non_squares(n):
    assert exact_sqrt(n) == 0


def test_strcmp_equal():
    assert strcmp("hello", "hello") == 0


def test_strcmp_difference():
    assert strcmp("abc", "abd") == ord("c") - ord("d")
    assert strcmp("ab", "abc") == -ord("c")
    assert strcmp("abc", "ab") == ord("c")


@pytest.mark.parametrize("a,b", [("a", "b"), ("B", "a"), ("zz", "z"), ("", "x")])
def test_strcmp_sign_matches_ordering(a, b):
    result = strcmp(a, b)
    assert (result < 0) == (a < b)
    assert (result > 0) == (a > b)


def test_int_range():
    assert int_range(3, 7) == list(range(3, 7))
    assert int_range(-2, 1) == [-2, -1, 0]


@pytest.mark.parametrize("low,high", [(5, 5), (7, 3)])
def test_int_range_empty(low, high):
    assert int_range(low, high) == []


@pytest.mark.parametrize("value", [-5, 5, 0, -2.5])
def test_abs_value(value):
    assert abs_value(value) == abs(value)


def test_point():
    p = Point(1, 2)
    assert (p.x, p.y) == (1, 2)
    assert Point() == Point(0, 0)


def test_foreach_visits_in_order():
    seen = []
    foreach([3, 1, 2], seen.append)
    assert seen == [3, 1, 2]


def test_count_if():
    words = ["a", "", "bc", "", "d"]
    assert count_if(words, len) == 3
    assert count_if([], len) == 0