"""Transcoding between UTF-8 and the GSM 03.38 SMS alphabet."""

from __future__ import annotations

from .buffer import OutputBuffer
from .errors import GSMError, GSMOutOfMemoryError
from .mapping import GSMUnit, MappedUnit, code_point_to_gsm, gsm_to_code_point
from .septets import pack_septets, septet_count, unpack_septets
from .tables import EXTENSION_TABLE, GSM_TO_CODE_POINT, ExtensionRow
from .transcoder import (
    INVALID,
    VALID,
    TranscodeResult,
    Transcoder,
    decode_text,
    encode_text,
    from_utf8,
    to_utf8,
)
from .utf8 import DecodedUnit, decode_unit, encode_code_point, iter_code_points

__all__ = [
    "GSM_TO_CODE_POINT",
    "EXTENSION_TABLE",
    "ExtensionRow",
    "DecodedUnit",
    "decode_unit",
    "iter_code_points",
    "encode_code_point",
    "GSMUnit",
    "MappedUnit",
    "code_point_to_gsm",
    "gsm_to_code_point",
    "OutputBuffer",
    "GSMError",
    "GSMOutOfMemoryError",
    "TranscodeResult",
    "Transcoder",
    "VALID",
    "INVALID",
    "from_utf8",
    "to_utf8",
    "encode_text",
    "decode_text",
    "pack_septets",
    "unpack_septets",
    "septet_count",
]
