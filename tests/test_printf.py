import io

import pytest

from hivelib.printf import UnsupportedFormatError, format_string, printf


def test_plain_text_unchanged():
    assert format_string("hello world\n") == "hello world\n"


def test_char_and_string():
    assert format_string("%c, %s", "a", "HIVE") == "a, HIVE"


def test_char_from_code():
    assert format_string("%c", ord("z")) == "z"


def test_nul_char_is_emitted():
    result = format_string("%c, %c", "\0", "\n")
    assert result == "\0, \n"
    assert len(result) == 4


def test_null_string():
    assert format_string("%s", None) == "(null)"


def test_null_pointer():
    assert format_string("%p", None) == "(nil)"
    assert format_string("%p", 0) == "(nil)"


def test_pointer_hex_roundtrip():
    result = format_string("%p", 4096)
    assert result.startswith("0x")
    assert int(result[2:], 16) == 4096
    assert result == result.lower()


def test_signed_integers_roundtrip():
    for n in (-42, 1001, 2147483548, 0):
        assert int(format_string("%d", n)) == n
        assert int(format_string("%i", n)) == n


def test_int_min():
    assert format_string("%d", -2147483648) == "-2147483648"


def test_unsigned_wraps_negative():
    result = int(format_string("%u", -100000))
    assert result == (1 << 32) - 100000
    assert int(format_string("%u", 1147483548)) == 1147483548


def test_hex_case_and_roundtrip():
    lower = format_string("%x", 255)
    upper = format_string("%X", 255)
    assert int(lower, 16) == 255
    assert lower.upper() == upper
    assert lower == lower.lower()


def test_hex_zero_and_max():
    assert int(format_string("%x", 0), 16) == 0
    assert int(format_string("%X", 0xFFFFFFFF), 16) == 0xFFFFFFFF


def test_percent_literal():
    assert format_string("%%") == "%"


def test_unsupported_conversion_raises():
    with pytest.raises(UnsupportedFormatError) as info:
        format_string("ab%z")
    assert info.value.conversion == "z"
    assert info.value.partial == "ab"


def test_trailing_percent_raises():
    with pytest.raises(UnsupportedFormatError):
        format_string("100%")


def test_missing_argument_raises():
    with pytest.raises(TypeError):
        format_string("%d, %s", 1)


def test_printf_writes_and_counts():
    out = io.StringIO()
    count = printf("%d\n", 123123123, file=out)
    assert out.getvalue() == "123123123\n"
    assert count == len(out.getvalue())


def test_printf_hello_count():
    out = io.StringIO()
    assert printf("Hello\n", file=out) == len("Hello\n")


def test_printf_unsupported_writes_notice_then_raises():
    out = io.StringIO()
    with pytest.raises(UnsupportedFormatError):
        printf("x%q", file=out)
    assert out.getvalue() == "xNot supported format\n"


def test_printf_defaults_to_stdout(capsys):
    count = printf("%s!", "hi")
    assert capsys.readouterr().out == "hi!"
    assert count == 3