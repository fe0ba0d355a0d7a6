"""UTF-8 <-> GSM 03.38 transcoding drivers."""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterator, Optional, Tuple, Union

from .buffer import OutputBuffer
from .errors import GSMOutOfMemoryError
from .mapping import code_point_to_gsm, gsm_to_code_point
from .utf8 import decode_unit, encode_code_point

BytesInput = Union[bytes, bytearray, memoryview]

VALID = "valid"
INVALID = "invalid"


@dataclass(frozen=True)
class TranscodeResult:
    valid: bool
    output: bytes

    @property
    def status(self) -> str:
        return VALID if self.valid else INVALID

    def as_tuple(self) -> Tuple[str, bytes]:
        return self.status, self.output

    def __iter__(self) -> Iterator[Union[bool, bytes]]:
        yield self.valid
        yield self.output


def _coerce_input(data: BytesInput) -> bytes:
    if isinstance(data, bytes):
        return data
    if isinstance(data, (bytearray, memoryview)):
        return bytes(data)
    raise TypeError(
        f"Expected a bytes-like object, got {type(data).__name__}"
    )


class Transcoder:
    """Converts whole byte strings between UTF-8 and GSM 03.38.

    Malformed input never stops a call: the offending unit is skipped (or
    substituted) and the result is marked invalid. Only a failure to grow
    the output buffer aborts, raising :class:`GSMOutOfMemoryError`.
    """

    def __init__(
        self,
        *,
        max_output_size: Optional[int] = None,
        logger: logging.Logger | None = None,
    ) -> None:
        if max_output_size is not None and max_output_size < 0:
            raise ValueError("max_output_size must be non-negative")
        self._max_output_size = max_output_size
        self._logger = logger or logging.getLogger(__name__)

    @property
    def max_output_size(self) -> Optional[int]:
        return self._max_output_size

    def from_utf8(self, data: BytesInput) -> TranscodeResult:
        """Encode UTF-8 bytes as GSM 03.38, substituting ``?`` where needed."""

        raw = _coerce_input(data)
        if not raw:
            return TranscodeResult(True, b"")
        out = self._new_buffer(len(raw))
        valid = True
        pos = 0
        try:
            while pos < len(raw):
                unit = decode_unit(raw, pos)
                if unit.code_point is None:
                    self._logger.debug(
                        "Malformed UTF-8 byte 0x%02X at offset %d", raw[pos], pos
                    )
                    valid = False
                else:
                    out.append(code_point_to_gsm(unit.code_point).to_bytes())
                pos += unit.length
        except GSMOutOfMemoryError as exc:
            self._log_out_of_memory("from_utf8", exc)
            raise
        return TranscodeResult(valid, out.finish())

    def to_utf8(self, data: BytesInput) -> TranscodeResult:
        """Decode GSM 03.38 bytes (one unit per byte or escape pair) to UTF-8."""

        raw = _coerce_input(data)
        if not raw:
            return TranscodeResult(True, b"")
        out = self._new_buffer(len(raw))
        valid = True
        pos = 0
        try:
            while pos < len(raw):
                unit = gsm_to_code_point(raw, pos)
                if not unit.well_formed:
                    self._logger.debug(
                        "Malformed GSM 03.38 unit 0x%02X at offset %d", raw[pos], pos
                    )
                    valid = False
                if unit.code_point is not None:
                    out.append(encode_code_point(unit.code_point))
                pos += unit.length
        except GSMOutOfMemoryError as exc:
            self._log_out_of_memory("to_utf8", exc)
            raise
        return TranscodeResult(valid, out.finish())

    def encode_text(self, text: str) -> TranscodeResult:
        if not isinstance(text, str):
            raise TypeError(f"Expected str, got {type(text).__name__}")
        return self.from_utf8(text.encode("utf-8", "surrogatepass"))

    def decode_text(self, data: BytesInput) -> Tuple[bool, str]:
        result = self.to_utf8(data)
        return result.valid, result.output.decode("utf-8")

    def _new_buffer(self, size: int) -> OutputBuffer:
        try:
            return OutputBuffer(size, max_size=self._max_output_size)
        except GSMOutOfMemoryError as exc:
            self._log_out_of_memory("allocate", exc)
            raise

    def _log_out_of_memory(self, operation: str, exc: GSMOutOfMemoryError) -> None:
        self._logger.warning("%s failed: %s", operation, exc)


_default = Transcoder()


def from_utf8(data: BytesInput) -> TranscodeResult:
    return _default.from_utf8(data)


def to_utf8(data: BytesInput) -> TranscodeResult:
    return _default.to_utf8(data)


def encode_text(text: str) -> TranscodeResult:
    return _default.encode_text(text)


def decode_text(data: BytesInput) -> Tuple[bool, str]:
    return _default.decode_text(data)


__all__ = [
    "BytesInput",
    "TranscodeResult",
    "Transcoder",
    "VALID",
    "INVALID",
    "from_utf8",
    "to_utf8",
    "encode_text",
    "decode_text",
]
