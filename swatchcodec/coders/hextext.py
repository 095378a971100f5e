# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Plain hex-color text coders (one color per line).

    #ff0000cc Warning red
    00ff00    Green

RGBA files keep the alpha byte; RGB files ignore it, so alpha is always
1.0 after an RGB round trip.
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from swatchcodec.coders.base import PaletteCoder, decode_text
from swatchcodec.colorspace.hexcolor import format_hex, parse_hex
from swatchcodec.errors import InvalidFormatError, InvalidHexStringError
from swatchcodec.schema import Color, Palette, PaletteFormat

logger = logging.getLogger(__name__)

_LINE_RE = re.compile(r"^#?\s*([a-f0-9]{3,8})\s*(.*)\s*", re.IGNORECASE)


class _HexTextCoder(PaletteCoder):
    """Shared line grammar; subclasses choose alpha handling and line endings."""

    keeps_alpha: bool = True
    line_separator: str = "\n"

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Palette:
        log = self._logger(logger)
        colors = []
        for line in decode_text(data).splitlines():
            if not line.strip():
                continue
            match = _LINE_RE.match(line.strip())
            if match is None:
                raise InvalidHexStringError(line)
            digits, label = match.groups()
            try:
                r, g, b, a = parse_hex(digits)
            except ValueError as exc:
                raise InvalidHexStringError(line, str(exc)) from exc
            colors.append(Color.rgb(r, g, b, a if self.keeps_alpha else 1.0, name=label.strip()))

        if not colors:
            raise InvalidFormatError("No hex colors found")
        log.debug("%s: decoded %d colors", self.name, len(colors))
        return Palette(colors=tuple(colors), format=self.format)

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        lines = []
        for color in palette.all_colors():
            r, g, b, a = color.rgba(self.converter)
            text = format_hex(r, g, b, a if self.keeps_alpha else None)
            if color.name:
                text += f" {color.name}"
            lines.append(text)
        return self.line_separator.join(lines).encode("utf-8")


class RGBACoder(_HexTextCoder):
    """`#rrggbbaa name` lines joined with LF."""

    format = PaletteFormat.RGBA
    file_extensions = ("rgba", "txt")
    keeps_alpha = True
    line_separator = "\n"


class RGBCoder(_HexTextCoder):
    """`#rrggbb name` lines joined with CRLF; alpha is not stored."""

    format = PaletteFormat.RGB
    file_extensions = ("rgb", "txt")
    keeps_alpha = False
    line_separator = "\r\n"
