"""Growable output buffer with exact-size growth and a final trim."""

from __future__ import annotations

from typing import Optional

from .errors import GSMOutOfMemoryError


class OutputBuffer:
    """Byte buffer owned by a single transcoding call.

    The backing ``bytearray`` is pre-sized and only grown to the exact size
    needed by the next append. ``finish`` trims unused capacity and hands
    back immutable ``bytes``; after that, or after ``release``, the buffer
    is closed.
    """

    def __init__(self, capacity: int, *, max_size: Optional[int] = None) -> None:
        if capacity < 0:
            raise ValueError("Buffer capacity must be non-negative")
        self._max_size = max_size
        self._used = 0
        self._data: Optional[bytearray] = None
        self._data = self._allocate(capacity)

    @property
    def used(self) -> int:
        return self._used

    @property
    def capacity(self) -> int:
        return len(self._require_open())

    @property
    def closed(self) -> bool:
        return self._data is None

    def append(self, chunk: bytes) -> None:
        data = self._require_open()
        needed = self._used + len(chunk)
        if needed > len(data):
            self._grow(needed)
            data = self._require_open()
        data[self._used : needed] = chunk
        self._used = needed

    def finish(self) -> bytes:
        data = self._require_open()
        if self._used < len(data):
            del data[self._used :]
        self._data = None
        return bytes(data)

    def release(self) -> None:
        self._data = None
        self._used = 0

    def _allocate(self, size: int) -> bytearray:
        if self._max_size is not None and size > self._max_size:
            raise GSMOutOfMemoryError(size, self._max_size)
        try:
            return bytearray(size)
        except MemoryError as exc:
            raise GSMOutOfMemoryError(size) from exc

    def _grow(self, size: int) -> None:
        data = self._require_open()
        try:
            if self._max_size is not None and size > self._max_size:
                raise GSMOutOfMemoryError(size, self._max_size)
            try:
                data.extend(bytes(size - len(data)))
            except MemoryError as exc:
                raise GSMOutOfMemoryError(size) from exc
        except GSMOutOfMemoryError:
            self.release()
            raise

    def _require_open(self) -> bytearray:
        if self._data is None:
            raise ValueError("Output buffer is closed")
        return self._data


__all__ = ["OutputBuffer"]
