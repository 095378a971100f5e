# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Positioned reader over an in-memory byte buffer.

All multi-byte reads take an explicit Endianness. The reader never
touches the file system: callers load the bytes first.
"""

from __future__ import annotations

import struct
from enum import Enum

from swatchcodec.errors import EndOfDataError, InvalidOffsetError, InvalidStringError


class Endianness(Enum):
    """Byte order for multi-byte values (values are struct prefixes)."""

    BIG = ">"
    LITTLE = "<"

    @property
    def utf16_codec(self) -> str:
        return "utf-16-be" if self is Endianness.BIG else "utf-16-le"


class Seek(Enum):
    """Origin for ByteReader.seek."""

    START = "start"
    CURRENT = "current"
    END = "end"


class ByteReader:
    """
    A read cursor over a fixed byte buffer.

    The cursor always satisfies 0 <= position <= len(data). Reads that
    would move past the end raise EndOfDataError and leave the cursor
    where it was.
    """

    __slots__ = ("_data", "_position")

    def __init__(self, data: bytes) -> None:
        self._data = bytes(data)
        self._position = 0

    def __len__(self) -> int:
        return len(self._data)

    @property
    def position(self) -> int:
        """Current cursor offset from the start of the buffer."""
        return self._position

    @property
    def remaining(self) -> int:
        """Number of unread bytes."""
        return len(self._data) - self._position

    @property
    def has_more_data(self) -> bool:
        return self._position < len(self._data)

    def rewind(self) -> None:
        """Move the cursor back to the start of the buffer."""
        self._position = 0

    def seek(self, offset: int, origin: Seek = Seek.CURRENT) -> int:
        """
        Reposition the cursor.

        Args:
            offset: Byte offset relative to origin. For Seek.END the offset
                counts back from the end of the buffer.
            origin: Where the offset is measured from.

        Returns:
            The new cursor position.

        Raises:
            InvalidOffsetError: If the new position is outside [0, length).
        """
        if origin is Seek.START:
            target = offset
        elif origin is Seek.END:
            target = len(self._data) - offset
        else:
            target = self._position + offset
        if not 0 <= target < len(self._data):
            raise InvalidOffsetError(
                f"Seek to {target} is outside the buffer (length {len(self._data)})"
            )
        self._position = target
        return target

    # -------------------------------------------------------------------------
    # Raw bytes
    # -------------------------------------------------------------------------

    def read_bytes(self, count: int) -> bytes:
        """Read the next `count` bytes and advance the cursor."""
        if count < 0:
            raise ValueError(f"Byte count must be >= 0, got {count}")
        if count > self.remaining:
            raise EndOfDataError(
                f"Needed {count} bytes at offset {self._position}, "
                f"only {self.remaining} remaining"
            )
        start = self._position
        self._position += count
        return self._data[start:self._position]

    def peek_bytes(self, count: int) -> bytes:
        """Return the next `count` bytes without moving the cursor."""
        if count > self.remaining:
            raise EndOfDataError(f"Cannot peek {count} bytes at offset {self._position}")
        return self._data[self._position:self._position + count]

    def _unpack(self, fmt: str, endianness: Endianness):
        size = struct.calcsize(fmt)
        return struct.unpack(endianness.value + fmt, self.read_bytes(size))[0]

    # -------------------------------------------------------------------------
    # Integers
    # -------------------------------------------------------------------------

    def read_uint8(self) -> int:
        return self.read_bytes(1)[0]

    def read_int8(self) -> int:
        return self._unpack("b", Endianness.BIG)

    def read_uint16(self, endianness: Endianness = Endianness.BIG) -> int:
        return self._unpack("H", endianness)

    def read_int16(self, endianness: Endianness = Endianness.BIG) -> int:
        return self._unpack("h", endianness)

    def read_uint32(self, endianness: Endianness = Endianness.BIG) -> int:
        return self._unpack("I", endianness)

    def read_int32(self, endianness: Endianness = Endianness.BIG) -> int:
        return self._unpack("i", endianness)

    def read_uint64(self, endianness: Endianness = Endianness.BIG) -> int:
        return self._unpack("Q", endianness)

    def read_int64(self, endianness: Endianness = Endianness.BIG) -> int:
        return self._unpack("q", endianness)

    # -------------------------------------------------------------------------
    # Floats (exact IEEE-754 bit transfer)
    # -------------------------------------------------------------------------

    def read_float32(self, endianness: Endianness = Endianness.BIG) -> float:
        return self._unpack("f", endianness)

    def read_float64(self, endianness: Endianness = Endianness.BIG) -> float:
        return self._unpack("d", endianness)

    # -------------------------------------------------------------------------
    # Strings
    # -------------------------------------------------------------------------

    def read_ascii(self, length: int) -> str:
        """Read `length` bytes as ASCII text."""
        raw = self.read_bytes(length)
        try:
            return raw.decode("ascii")
        except UnicodeDecodeError as exc:
            raise InvalidStringError(f"Non-ASCII bytes in string: {raw!r}") from exc

    def read_utf16(self, count: int, endianness: Endianness = Endianness.BIG) -> str:
        """Read `count` UTF-16 code units."""
        raw = self.read_bytes(count * 2)
        try:
            return raw.decode(endianness.utf16_codec)
        except UnicodeDecodeError as exc:
            raise InvalidStringError("Invalid UTF-16 string data") from exc

    def read_utf16_zero_terminated(self, endianness: Endianness = Endianness.BIG) -> str:
        """
        Read UTF-16 code units up to (and consuming) a 0x0000 terminator.

        Raises:
            EndOfDataError: If the buffer ends before a terminator is found.
        """
        start = self._position
        end = start
        while True:
            if end + 2 > len(self._data):
                raise EndOfDataError(
                    f"Unterminated UTF-16 string starting at offset {start}"
                )
            if self._data[end:end + 2] == b"\x00\x00":
                break
            end += 2
        units = (end - start) // 2
        text = self.read_utf16(units, endianness)
        self._position += 2
        return text

    def read_pascal_utf16(self, endianness: Endianness = Endianness.BIG) -> str:
        """Read a 2-byte code-unit count followed by that many UTF-16 units."""
        count = self.read_uint16(endianness)
        return self.read_utf16(count, endianness)
