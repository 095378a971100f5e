# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Byte cursor primitives used by the binary coders.

ByteReader and ByteWriter work purely in memory with explicit byte
order; they are the only place struct packing happens.
"""

from swatchcodec.binary.reader import ByteReader, Endianness, Seek
from swatchcodec.binary.writer import ByteWriter, utf16_length

__all__ = [
    "ByteReader",
    "ByteWriter",
    "Endianness",
    "Seek",
    "utf16_length",
]
