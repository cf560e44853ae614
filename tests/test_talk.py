import pytest

from hivelib.talk import BitDecoder, client_main, encode_char, encode_message


def _decode(bits):
    decoder = BitDecoder()
    return b"".join(out for out in map(decoder.feed, bits) if out is not None)


def test_encode_char_least_significant_first():
    assert encode_char("A") == [1, 0, 0, 0, 0, 0, 1, 0]


def test_encode_char_zero():
    assert encode_char(0) == [0] * 8


def test_encode_char_rejects_multiple_bytes():
    with pytest.raises(ValueError):
        encode_char("ab")


def test_empty_message_is_only_terminator():
    assert encode_message("") == [0] * 8


def test_message_length():
    assert len(encode_message("hello")) == 8 * 6


@pytest.mark.parametrize("text", ["hi", "Hello, HIVE!!!", "", "h\u00e9"])
def test_round_trip(text):
    assert _decode(encode_message(text)) == text.encode("utf-8") + b"\n"


def test_decoder_waits_for_full_byte():
    decoder = BitDecoder()
    assert [decoder.feed(b) for b in encode_char("z")[:7]] == [None] * 7
    assert decoder.bit_pos == 7


def test_decoder_resets_after_byte():
    decoder = BitDecoder()
    for bit in encode_char("q"):
        last = decoder.feed(bit)
    assert last == b"q"
    assert (decoder.c, decoder.bit_pos) == (0, 0)


def test_zero_byte_gives_newline():
    assert _decode([0] * 8) == b"\n"


def test_client_usage(capsys):
    assert client_main(["123"]) == 1
    assert "Usage" in capsys.readouterr().out


@pytest.mark.parametrize("pid", ["0", "-5", "abc"])
def test_client_invalid_pid(pid, capsys):
    assert client_main([pid, "message"]) == 1
    assert capsys.readouterr().out == "Invalid server PID.\n"