"""Minimal UTF-8 unit decoder and GSM-range encoder."""

from __future__ import annotations

from typing import Iterator, NamedTuple, Optional

from .tables import EURO

_EURO_UTF8 = b"\xe2\x82\xac"


class DecodedUnit(NamedTuple):
    """One UTF-8 unit; ``code_point`` is ``None`` when the unit is malformed."""

    code_point: Optional[int]
    length: int

    @property
    def well_formed(self) -> bool:
        return self.code_point is not None


_MALFORMED = DecodedUnit(None, 1)


def _is_continuation(byte: int) -> bool:
    return (byte & 0xC0) == 0x80


def decode_unit(data: bytes, pos: int) -> DecodedUnit:
    """Decode the UTF-8 unit starting at *pos*.

    Only lead/continuation bit patterns are checked. Overlong forms and
    surrogate code points are accepted. A malformed unit always consumes a
    single byte so decoding resumes at the next byte.
    """

    lead = data[pos]
    if 0x80 <= lead <= 0xC1 or lead >= 0xF5:
        return _MALFORMED
    if lead <= 0x7F:
        return DecodedUnit(lead, 1)
    if (lead & 0xE0) == 0xC0:
        length, code_point = 2, lead & 0x1F
    elif (lead & 0xF0) == 0xE0:
        length, code_point = 3, lead & 0x0F
    else:
        length, code_point = 4, lead & 0x07
    if pos + length > len(data):
        return _MALFORMED
    for byte in data[pos + 1 : pos + length]:
        if not _is_continuation(byte):
            return _MALFORMED
        code_point = (code_point << 6) | (byte & 0x3F)
    return DecodedUnit(code_point, length)


def iter_code_points(data: bytes) -> Iterator[DecodedUnit]:
    pos = 0
    while pos < len(data):
        unit = decode_unit(data, pos)
        yield unit
        pos += unit.length


def encode_code_point(code_point: int) -> bytes:
    """Encode a GSM-derived code point as UTF-8.

    The GSM alphabets never produce a code point above U+07FF apart from
    the euro sign, which is emitted as a fixed sequence.
    """

    if 0 <= code_point <= 0x7F:
        return bytes((code_point,))
    if code_point == EURO:
        return _EURO_UTF8
    if 0x80 <= code_point <= 0x7FF:
        return bytes((0xC0 | (code_point >> 6), 0x80 | (code_point & 0x3F)))
    raise ValueError(f"Code point U+{code_point:04X} is not produced by GSM 03.38")


__all__ = [
    "DecodedUnit",
    "decode_unit",
    "iter_code_points",
    "encode_code_point",
]
