# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Adobe Photoshop color swatch (.aco) coder.

An ACO file holds a version 1 section, usually followed by a version 2
section repeating the same colors with names:

    u16 version (1 or 2)  u16 count
    color*: u16 color space  u16 w0 w1 w2 w3
            [v2 only] u32 name length (units incl. terminator),
                      UTF-16BE units, 0x0000

Color spaces and their 16-bit encodings:
    0 RGB   w/65535
    1 HSB   w/65535 (hue, saturation, brightness)
    2 CMYK  (65535 - w)/65535  (0 means 100% ink)
    7 LAB   L = w0/100 (0..100), a and b = signed w/100
    8 Gray  w0/10000
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from swatchcodec.binary import ByteReader, ByteWriter, utf16_length
from swatchcodec.coders.base import PaletteCoder
from swatchcodec.colorspace.conversions import hsb_to_srgb
from swatchcodec.errors import InvalidStringError, InvalidVersionError, UnknownColorModelError
from swatchcodec.schema import Color, ColorSpace, Palette, PaletteFormat

logger = logging.getLogger(__name__)

ACO_RGB = 0
ACO_HSB = 1
ACO_CMYK = 2
ACO_LAB = 7
ACO_GRAY = 8

_SPACE_CODES = {
    ColorSpace.RGB: ACO_RGB,
    ColorSpace.CMYK: ACO_CMYK,
    ColorSpace.LAB: ACO_LAB,
    ColorSpace.GRAY: ACO_GRAY,
}


def _to_signed(word: int) -> int:
    return word - 0x10000 if word >= 0x8000 else word


def _word(value: float, scale: float) -> int:
    return int(min(65535, max(0, round(value * scale))))


def color_from_words(space_code: int, words: tuple[int, int, int, int], name: str = "") -> Color:
    """
    Build a Color from a Photoshop color record.

    Raises:
        UnknownColorModelError: For color spaces other than RGB/HSB/CMYK/LAB/Gray.
    """
    w0, w1, w2, w3 = words
    if space_code == ACO_RGB:
        return Color.rgb(w0 / 65535, w1 / 65535, w2 / 65535, name=name)
    if space_code == ACO_HSB:
        r, g, b = hsb_to_srgb(np.array([w0, w1, w2], dtype=np.float64) / 65535)
        return Color.rgb(float(r), float(g), float(b), name=name)
    if space_code == ACO_CMYK:
        return Color.cmyk(*((65535 - w) / 65535 for w in words), name=name)
    if space_code == ACO_LAB:
        return Color.lab(w0 / 100, _to_signed(w1) / 100, _to_signed(w2) / 100, name=name)
    if space_code == ACO_GRAY:
        return Color.gray(min(1.0, w0 / 10000), name=name)
    raise UnknownColorModelError(space_code)


def words_from_color(color: Color) -> tuple[int, tuple[int, int, int, int]]:
    """Inverse of color_from_words for the four storable spaces."""
    c = color.components
    space = color.color_space
    if space is ColorSpace.RGB:
        return ACO_RGB, (_word(c[0], 65535), _word(c[1], 65535), _word(c[2], 65535), 0)
    if space is ColorSpace.CMYK:
        return ACO_CMYK, tuple(65535 - _word(v, 65535) for v in c)
    if space is ColorSpace.LAB:
        L = int(min(10000, max(0, round(c[0] * 100))))
        a = int(min(12700, max(-12800, round(c[1] * 100)))) & 0xFFFF
        b = int(min(12700, max(-12800, round(c[2] * 100)))) & 0xFFFF
        return ACO_LAB, (L, a, b, 0)
    return ACO_GRAY, (_word(c[0], 10000), 0, 0, 0)


class ACOCoder(PaletteCoder):
    """
    Adobe Photoshop swatches.

    Lossy: groups are flattened into the global colors and alpha is not
    stored. Encoding writes both the v1 and the named v2 sections.
    """

    format = PaletteFormat.ACO
    file_extensions = ("aco",)

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Palette:
        log = self._logger(logger)
        reader = ByteReader(data)

        v1_colors = self._read_section(reader, 1, log)
        if not reader.has_more_data:
            log.debug("ACO: v1 only, %d colors", len(v1_colors))
            return Palette(colors=v1_colors, format=self.format)

        v2_colors = self._read_section(reader, 2, log)
        log.debug("ACO: v1 %d colors, v2 %d colors", len(v1_colors), len(v2_colors))
        return Palette(colors=v2_colors or v1_colors, format=self.format)

    def _read_section(self, reader: ByteReader, expected: int, log: logging.Logger) -> tuple[Color, ...]:
        version = reader.read_uint16()
        if version != expected:
            raise InvalidVersionError(f"Expected ACO section version {expected}, got {version}")
        count = reader.read_uint16()
        colors = []
        for _ in range(count):
            space_code = reader.read_uint16()
            words = (reader.read_uint16(), reader.read_uint16(),
                     reader.read_uint16(), reader.read_uint16())
            name = _read_name(reader) if version == 2 else ""
            if space_code == ACO_GRAY and words[0] > 10000:
                log.warning("ACO: gray value %d exceeds 10000, clamping", words[0])
            colors.append(color_from_words(space_code, words, name))
        return tuple(colors)

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        log = self._logger(logger)
        colors = palette.all_colors()
        if palette.groups:
            log.info("ACO: flattening %d groups into global colors", len(palette.groups))
        writer = ByteWriter()
        for version in (1, 2):
            writer.write_uint16(version)
            writer.write_uint16(len(colors))
            for color in colors:
                space_code, words = words_from_color(color)
                writer.write_uint16(space_code)
                for word in words:
                    writer.write_uint16(word)
                if version == 2:
                    writer.write_uint32(utf16_length(color.name) + 1)
                    writer.write_utf16_zero_terminated(color.name)
        return writer.data()


def _read_name(reader: ByteReader) -> str:
    """u32 unit count (including the terminator) then UTF-16BE units."""
    count = reader.read_uint32()
    if count == 0:
        return ""
    text = reader.read_utf16(count)
    if not text.endswith("\x00"):
        raise InvalidStringError(f"ACO name {text!r} is not zero-terminated")
    return text[:-1]
