"""GSM 03.38 default alphabet and escape-extension tables."""

from __future__ import annotations

from typing import Dict, NamedTuple, Tuple

ESCAPE = 0x1B
FALLBACK_GSM = 0x3F  # '?'
NBSP = 0x00A0
EURO = 0x20AC


class ExtensionRow(NamedTuple):
    gsm_ext: int
    code_point: int


GSM_TO_CODE_POINT: Tuple[int, ...] = (
    0x0040, 0x00A3, 0x0024, 0x00A5, 0x00E8, 0x00E9, 0x00F9, 0x00EC,
    0x00F2, 0x00E7, 0x000A, 0x00D8, 0x00F8, 0x000D, 0x00C5, 0x00E5,
    0x0394, 0x005F, 0x03A6, 0x0393, 0x039B, 0x03A9, 0x03A0, 0x03A8,
    0x03A3, 0x0398, 0x039E, 0x00A0, 0x00C6, 0x00E6, 0x00DF, 0x00C9,
    0x0020, 0x0021, 0x0022, 0x0023, 0x00A4, 0x0025, 0x0026, 0x0027,
    0x0028, 0x0029, 0x002A, 0x002B, 0x002C, 0x002D, 0x002E, 0x002F,
    0x0030, 0x0031, 0x0032, 0x0033, 0x0034, 0x0035, 0x0036, 0x0037,
    0x0038, 0x0039, 0x003A, 0x003B, 0x003C, 0x003D, 0x003E, 0x003F,
    0x00A1, 0x0041, 0x0042, 0x0043, 0x0044, 0x0045, 0x0046, 0x0047,
    0x0048, 0x0049, 0x004A, 0x004B, 0x004C, 0x004D, 0x004E, 0x004F,
    0x0050, 0x0051, 0x0052, 0x0053, 0x0054, 0x0055, 0x0056, 0x0057,
    0x0058, 0x0059, 0x005A, 0x00C4, 0x00D6, 0x00D1, 0x00DC, 0x00A7,
    0x00BF, 0x0061, 0x0062, 0x0063, 0x0064, 0x0065, 0x0066, 0x0067,
    0x0068, 0x0069, 0x006A, 0x006B, 0x006C, 0x006D, 0x006E, 0x006F,
    0x0070, 0x0071, 0x0072, 0x0073, 0x0074, 0x0075, 0x0076, 0x0077,
    0x0078, 0x0079, 0x007A, 0x00E4, 0x00F6, 0x00F1, 0x00FC, 0x00E0,
)

EXTENSION_TABLE: Tuple[ExtensionRow, ...] = (
    ExtensionRow(0x0A, 0x000C),  # form feed
    ExtensionRow(0x14, 0x005E),  # ^
    ExtensionRow(0x28, 0x007B),  # {
    ExtensionRow(0x29, 0x007D),  # }
    ExtensionRow(0x2F, 0x005C),  # backslash
    ExtensionRow(0x3C, 0x005B),  # [
    ExtensionRow(0x3D, 0x007E),  # ~
    ExtensionRow(0x3E, 0x005D),  # ]
    ExtensionRow(0x40, 0x007C),  # |
    ExtensionRow(0x65, EURO),
)

# Code points that share their numeric value with their GSM byte.
IDENTITY_RANGES: Tuple[Tuple[int, int], ...] = (
    (0x20, 0x23),
    (0x25, 0x3F),
    (0x41, 0x5A),
    (0x61, 0x7A),
)


def _first_wins(pairs) -> Dict[int, int]:
    # setdefault keeps the earliest entry, matching a front-to-back scan.
    result: Dict[int, int] = {}
    for key, value in pairs:
        result.setdefault(key, value)
    return result


CODE_POINT_TO_GSM: Dict[int, int] = _first_wins(
    (cp, idx) for idx, cp in enumerate(GSM_TO_CODE_POINT)
)
CODE_POINT_TO_EXTENSION: Dict[int, int] = _first_wins(
    (row.code_point, row.gsm_ext) for row in EXTENSION_TABLE
)
EXTENSION_TO_CODE_POINT: Dict[int, int] = _first_wins(
    (row.gsm_ext, row.code_point) for row in EXTENSION_TABLE
)


def is_identity(code_point: int) -> bool:
    return any(low <= code_point <= high for low, high in IDENTITY_RANGES)


__all__ = [
    "ESCAPE",
    "FALLBACK_GSM",
    "NBSP",
    "EURO",
    "ExtensionRow",
    "GSM_TO_CODE_POINT",
    "EXTENSION_TABLE",
    "IDENTITY_RANGES",
    "CODE_POINT_TO_GSM",
    "CODE_POINT_TO_EXTENSION",
    "EXTENSION_TO_CODE_POINT",
    "is_identity",
]
