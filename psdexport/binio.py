"""Big-endian binary writing on top of a byte stream."""

from __future__ import annotations

import struct
from typing import BinaryIO


class BigEndianWriter:
    """Writes big-endian values to a binary stream and tracks the position."""

    def __init__(self, stream: BinaryIO) -> None:
        self._stream = stream
        try:
            self._position = stream.tell()
        except (AttributeError, OSError, ValueError):
            self._position = 0

    @property
    def position(self) -> int:
        """The current offset in the stream."""
        return self._position

    def write(self, data) -> None:
        """Write raw bytes."""
        view = memoryview(data).cast("B")
        self._stream.write(view)
        self._position += view.nbytes

    def _pack(self, fmt: str, value) -> None:
        try:
            packed = struct.pack(fmt, value)
        except struct.error as exc:
            raise ValueError(f"{value!r} does not fit format {fmt!r}") from exc
        self.write(packed)

    def write_u8(self, value: int) -> None:
        self._pack(">B", value)

    def write_u16(self, value: int) -> None:
        self._pack(">H", value)

    def write_i16(self, value: int) -> None:
        self._pack(">h", value)

    def write_u32(self, value: int) -> None:
        self._pack(">I", value)

    def write_i32(self, value: int) -> None:
        self._pack(">i", value)

    def write_f32(self, value: float) -> None:
        self._pack(">f", value)

    def pad_to_even(self, start: int) -> int:
        """Write a zero byte if an odd number of bytes was written since ``start``.

        Returns the number of padding bytes written.
        """
        if (self._position - start) & 1:
            self.write_u8(0)
            return 1
        return 0