import logging

import pytest

from gsm0338_lib import (
    EXTENSION_TABLE,
    GSM_TO_CODE_POINT,
    GSMOutOfMemoryError,
    TranscodeResult,
    Transcoder,
    decode_text,
    encode_text,
    from_utf8,
    to_utf8,
)

NBSP_UTF8 = "\u00a0".encode("utf-8")

# U+00A0 maps to 0x1B, which reads back as a dangling escape.
REPRESENTABLE = sorted(
    {cp for cp in GSM_TO_CODE_POINT if cp != 0x00A0}
    | {row.code_point for row in EXTENSION_TABLE}
)


def test_empty_input():
    assert from_utf8(b"") == TranscodeResult(True, b"")
    assert to_utf8(b"") == TranscodeResult(True, b"")


@pytest.mark.parametrize("cp", REPRESENTABLE)
def test_round_trip_representable_code_points(cp):
    utf8 = chr(cp).encode("utf-8")
    gsm = from_utf8(utf8)
    assert gsm.valid
    back = to_utf8(gsm.output)
    assert back == TranscodeResult(True, utf8)


def test_ascii_identity():
    text = b"Hello World! 0123456789 (a+b)*c=d, 'x'; \"y\" <z> 100% & more?"
    assert from_utf8(text) == TranscodeResult(True, text)
    assert to_utf8(text) == TranscodeResult(True, text)


def test_unmappable_code_point_is_still_valid():
    assert from_utf8("日".encode("utf-8")) == TranscodeResult(True, b"?")
    assert from_utf8("a\U0001F4A9b".encode("utf-8")) == TranscodeResult(True, b"a?b")


def test_escape_round_trip():
    gsm = from_utf8(b"{")
    assert gsm.output == b"\x1b\x28"
    assert to_utf8(gsm.output).output == b"{"


def test_mixed_text():
    text = "Price: 5€ [Ä] ~ΔΩ @home_"
    result = from_utf8(text.encode("utf-8"))
    assert result.valid
    assert result.output == (
        b"Price: 5\x1be \x1b<[\x1b> \x1b=\x10\x15 \x00home\x11"
    )
    assert to_utf8(result.output) == TranscodeResult(True, text.encode("utf-8"))


def test_truncated_multibyte_utf8():
    assert from_utf8(b"\xe2\x82") == TranscodeResult(False, b"")


def test_malformed_utf8_does_not_stop_processing():
    result = from_utf8(b"a\xffb\xc3(c")
    assert result == TranscodeResult(False, b"ab(c")


def test_dangling_escape():
    assert to_utf8(b"\x1b") == TranscodeResult(False, b"")
    assert to_utf8(b"ab\x1b") == TranscodeResult(False, b"ab")


def test_unknown_escape_substitutes_nbsp():
    assert to_utf8(b"\x1b\x00") == TranscodeResult(False, NBSP_UTF8)


def test_euro_sign():
    assert to_utf8(b"\x1b\x65") == TranscodeResult(True, b"\xe2\x82\xac")


def test_high_bytes_are_skipped():
    assert to_utf8(b"A\x80B\xff") == TranscodeResult(False, b"AB")


def test_nbsp_encodes_to_escape_byte():
    assert from_utf8(NBSP_UTF8) == TranscodeResult(True, b"\x1b")


def test_result_views():
    result = from_utf8(b"ok")
    valid, output = result
    assert (valid, output) == (True, b"ok")
    assert result.as_tuple() == ("valid", b"ok")
    assert from_utf8(b"\xff").as_tuple() == ("invalid", b"")


def test_accepts_bytes_like_input():
    assert from_utf8(bytearray(b"abc")).output == b"abc"
    assert to_utf8(memoryview(b"\x00")).output == b"@"


@pytest.mark.parametrize("bad", ["text", 42, None, [0x41]])
def test_rejects_non_bytes_input(bad):
    with pytest.raises(TypeError):
        from_utf8(bad)
    with pytest.raises(TypeError):
        to_utf8(bad)


def test_output_limit_raises_out_of_memory():
    transcoder = Transcoder(max_output_size=4)
    # Greek capitals need two UTF-8 bytes per GSM byte.
    with pytest.raises(GSMOutOfMemoryError):
        transcoder.to_utf8(b"\x10\x12\x13")
    assert transcoder.to_utf8(b"\x10\x12") == TranscodeResult(
        True, "ΔΦ".encode("utf-8")
    )


def test_output_limit_on_escape_expansion():
    transcoder = Transcoder(max_output_size=3)
    with pytest.raises(GSMOutOfMemoryError):
        transcoder.from_utf8(b"{}")


def test_out_of_memory_is_logged(caplog):
    transcoder = Transcoder(max_output_size=2)
    with caplog.at_level(logging.WARNING, logger="gsm0338_lib.transcoder"):
        with pytest.raises(GSMOutOfMemoryError):
            transcoder.to_utf8(b"\x1b\x65")
    assert "to_utf8 failed" in caplog.text


def test_malformed_units_are_logged_at_debug(caplog):
    logger = logging.getLogger("gsm0338.test")
    transcoder = Transcoder(logger=logger)
    with caplog.at_level(logging.DEBUG, logger="gsm0338.test"):
        transcoder.from_utf8(b"a\x80")
    assert "0x80 at offset 1" in caplog.text


def test_negative_limit_rejected():
    with pytest.raises(ValueError):
        Transcoder(max_output_size=-1)


def test_text_helpers():
    assert encode_text("{ok}") == TranscodeResult(True, b"\x1b(ok\x1b)")
    assert encode_text("\ud800").valid is True
    assert decode_text(b"\x1b\x65\x1b\x00") == (False, "\u20ac\u00a0")
    with pytest.raises(TypeError):
        encode_text(b"bytes")
