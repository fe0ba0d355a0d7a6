"""Packing of GSM 03.38 units into 7-bit septets for SMS user data."""

from __future__ import annotations

from typing import Union

BytesLike = Union[bytes, bytearray, memoryview]


def septet_count(units: BytesLike) -> int:
    """Number of septets *units* occupy; escape pairs count twice."""

    return len(units)


def pack_septets(units: BytesLike) -> bytes:
    """Pack GSM units (each 0..127) least-significant-bit first."""

    out = bytearray()
    acc = 0
    nbits = 0
    for index, value in enumerate(bytes(units)):
        if value > 0x7F:
            raise ValueError(f"Value 0x{value:02X} at index {index} is not a septet")
        acc |= value << nbits
        nbits += 7
        while nbits >= 8:
            out.append(acc & 0xFF)
            acc >>= 8
            nbits -= 8
    if nbits:
        out.append(acc & 0xFF)
    return bytes(out)


def unpack_septets(data: BytesLike, count: int) -> bytes:
    """Extract *count* septets from LSB-first packed *data*."""

    if count < 0:
        raise ValueError("Septet count must be non-negative")
    raw = bytes(data)
    if (count * 7 + 7) // 8 > len(raw):
        raise ValueError(
            f"{len(raw)} octets cannot hold {count} septets"
        )
    out = bytearray()
    acc = 0
    nbits = 0
    octets = iter(raw)
    for _ in range(count):
        if nbits < 7:
            acc |= next(octets) << nbits
            nbits += 8
        out.append(acc & 0x7F)
        acc >>= 7
        nbits -= 7
    return bytes(out)


__all__ = ["septet_count", "pack_septets", "unpack_septets"]
