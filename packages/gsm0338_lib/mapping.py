"""Per-unit mapping between Unicode code points and GSM 03.38 units."""

from __future__ import annotations

from typing import NamedTuple, Optional

from .tables import (
    CODE_POINT_TO_EXTENSION,
    CODE_POINT_TO_GSM,
    ESCAPE,
    EXTENSION_TO_CODE_POINT,
    FALLBACK_GSM,
    GSM_TO_CODE_POINT,
    NBSP,
    is_identity,
)


class GSMUnit(NamedTuple):
    value: int
    extended: bool = False
    mapped: bool = True

    @property
    def size(self) -> int:
        return 2 if self.extended else 1

    def to_bytes(self) -> bytes:
        if self.extended:
            return bytes((ESCAPE, self.value))
        return bytes((self.value,))


class MappedUnit(NamedTuple):
    code_point: Optional[int]
    length: int
    well_formed: bool


_UNMAPPABLE = GSMUnit(FALLBACK_GSM, extended=False, mapped=False)


def code_point_to_gsm(code_point: int) -> GSMUnit:
    """Return the GSM unit for *code_point*.

    Unrepresentable code points map to a basic ``?`` with ``mapped`` unset.
    That is a substitution, not a decoding error.
    """

    if is_identity(code_point):
        return GSMUnit(code_point)
    basic = CODE_POINT_TO_GSM.get(code_point)
    if basic is not None:
        return GSMUnit(basic)
    ext = CODE_POINT_TO_EXTENSION.get(code_point)
    if ext is not None:
        return GSMUnit(ext, extended=True)
    return _UNMAPPABLE


def gsm_to_code_point(data: bytes, pos: int) -> MappedUnit:
    """Decode the GSM unit at *pos*.

    An escape followed by a byte outside the extension table is malformed
    but still consumes both bytes and yields a no-break space.
    """

    value = data[pos]
    if value > 0x7F:
        return MappedUnit(None, 1, False)
    if value != ESCAPE:
        return MappedUnit(GSM_TO_CODE_POINT[value], 1, True)
    if pos + 1 >= len(data):
        return MappedUnit(None, 1, False)
    code_point = EXTENSION_TO_CODE_POINT.get(data[pos + 1])
    if code_point is None:
        return MappedUnit(NBSP, 2, False)
    return MappedUnit(code_point, 2, True)


__all__ = ["GSMUnit", "MappedUnit", "code_point_to_gsm", "gsm_to_code_point"]
