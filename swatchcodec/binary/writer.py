# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Append-only byte buffer mirroring ByteReader's encodings."""

from __future__ import annotations

import struct

from swatchcodec.binary.reader import Endianness


class ByteWriter:
    """
    Growable output buffer.

    Every write_* method is the bit-exact inverse of the matching
    ByteReader.read_* method.
    """

    __slots__ = ("_buffer",)

    def __init__(self) -> None:
        self._buffer = bytearray()

    def __len__(self) -> int:
        return len(self._buffer)

    def data(self) -> bytes:
        """Return the bytes written so far."""
        return bytes(self._buffer)

    def write_bytes(self, data: bytes) -> None:
        self._buffer.extend(data)

    def _pack(self, fmt: str, value, endianness: Endianness) -> None:
        try:
            self._buffer.extend(struct.pack(endianness.value + fmt, value))
        except struct.error as exc:
            raise ValueError(f"Cannot encode {value!r} as '{fmt}': {exc}") from exc

    # -------------------------------------------------------------------------
    # Integers
    # -------------------------------------------------------------------------

    def write_uint8(self, value: int) -> None:
        self._pack("B", value, Endianness.BIG)

    def write_int8(self, value: int) -> None:
        self._pack("b", value, Endianness.BIG)

    def write_uint16(self, value: int, endianness: Endianness = Endianness.BIG) -> None:
        self._pack("H", value, endianness)

    def write_int16(self, value: int, endianness: Endianness = Endianness.BIG) -> None:
        self._pack("h", value, endianness)

    def write_uint32(self, value: int, endianness: Endianness = Endianness.BIG) -> None:
        self._pack("I", value, endianness)

    def write_int32(self, value: int, endianness: Endianness = Endianness.BIG) -> None:
        self._pack("i", value, endianness)

    def write_uint64(self, value: int, endianness: Endianness = Endianness.BIG) -> None:
        self._pack("Q", value, endianness)

    def write_int64(self, value: int, endianness: Endianness = Endianness.BIG) -> None:
        self._pack("q", value, endianness)

    # -------------------------------------------------------------------------
    # Floats
    # -------------------------------------------------------------------------

    def write_float32(self, value: float, endianness: Endianness = Endianness.BIG) -> None:
        self._pack("f", value, endianness)

    def write_float64(self, value: float, endianness: Endianness = Endianness.BIG) -> None:
        self._pack("d", value, endianness)

    # -------------------------------------------------------------------------
    # Strings
    # -------------------------------------------------------------------------

    def write_ascii(self, text: str) -> None:
        self._buffer.extend(text.encode("ascii"))

    def write_utf16(self, text: str, endianness: Endianness = Endianness.BIG) -> None:
        self._buffer.extend(text.encode(endianness.utf16_codec))

    def write_utf16_zero_terminated(self, text: str) -> None:
        """Write big-endian UTF-16 code units followed by a 0x0000 terminator."""
        self.write_utf16(text, Endianness.BIG)
        self._buffer.extend(b"\x00\x00")

    def write_pascal_utf16(self, text: str, endianness: Endianness = Endianness.BIG) -> None:
        """Write a 2-byte code-unit count, then the code units (no terminator)."""
        self.write_uint16(utf16_length(text), endianness)
        self.write_utf16(text, endianness)

    def pad_to_boundary(self, boundary: int, fill: int = 0) -> None:
        """Append `fill` bytes until the length is a multiple of `boundary`."""
        if boundary <= 0:
            raise ValueError(f"Boundary must be > 0, got {boundary}")
        remainder = len(self._buffer) % boundary
        if remainder:
            self._buffer.extend(bytes([fill]) * (boundary - remainder))


def utf16_length(text: str) -> int:
    """Number of UTF-16 code units needed for `text` (surrogate pairs count 2)."""
    return len(text.encode("utf-16-be")) // 2
