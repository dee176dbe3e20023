import signal

import pytest

from minitalk.protocol import BITS_PER_BYTE, BitDecoder, encode_bits, iter_signals


def _decode(bits):
    decoder = BitDecoder()
    out = bytearray()
    for bit in bits:
        byte = decoder.feed(bit)
        if byte is not None:
            out.append(byte)
    return bytes(out)


def test_encode_single_ascii_char():
    assert encode_bits("a") == "01100001"


def test_encode_empty_message():
    assert encode_bits("") == ""


def test_encode_length_is_eight_per_byte():
    message = "héllo wörld"
    assert len(encode_bits(message)) == BITS_PER_BYTE * len(message.encode("utf-8"))


def test_encode_stops_at_nul():
    assert encode_bits(b"ab\0cd") == encode_bits(b"ab")


@pytest.mark.parametrize("message", ["hello", "Привет", "tab\tand\nnewline", "~!@#"])
def test_round_trip_text(message):
    assert _decode(encode_bits(message)).decode("utf-8") == message


def test_round_trip_all_nonzero_bytes():
    data = bytes(range(1, 256))
    assert _decode(encode_bits(data)) == data


def test_iter_signals_maps_bits():
    assert list(iter_signals("10")) == [signal.SIGUSR1, signal.SIGUSR2]


def test_iter_signals_non_one_is_sigusr2():
    assert list(iter_signals("x")) == [signal.SIGUSR2]


def test_decoder_partial_byte_returns_none():
    decoder = BitDecoder()
    results = [decoder.feed(bit) for bit in "0110000"]
    assert results == [None] * 7
    assert decoder.feed("1") == ord("a")


def test_decoder_accepts_int_bits():
    decoder = BitDecoder()
    results = [decoder.feed(int(bit)) for bit in encode_bits("Z")]
    assert results[-1] == ord("Z")


def test_decoder_rejects_bad_bit():
    with pytest.raises(ValueError):
        BitDecoder().feed("2")


def test_feed_signal_round_trip():
    decoder = BitDecoder()
    out = bytearray()
    for signum in iter_signals(encode_bits("ok")):
        byte = decoder.feed_signal(signum)
        if byte is not None:
            out.append(byte)
    assert bytes(out) == b"ok"