# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
PaintShop Pro (JASC) palette coder.

    JASC-PAL
    0100
    2
    255 0 0
    0 0 255
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from swatchcodec.coders.base import PaletteCoder, decode_text
from swatchcodec.errors import InvalidFormatError, InvalidHeaderError, InvalidVersionError
from swatchcodec.schema import Color, ColorSpace, Palette, PaletteFormat

logger = logging.getLogger(__name__)

HEADER = "JASC-PAL"
VERSION = "0100"

_COLOR_RE = re.compile(r"^\s*(\d+)\s+(\d+)\s+(\d+)\s*$")


class PaintShopProPaletteCoder(PaletteCoder):
    """
    JASC-PAL palettes.

    Lossy: names, groups and alpha are not stored.
    """

    format = PaletteFormat.PAINTSHOP_PRO
    file_extensions = ("psppalette", "pal")

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Palette:
        log = self._logger(logger)
        lines = [line for line in decode_text(data).splitlines() if line.strip()]
        if not lines or HEADER not in lines[0]:
            raise InvalidHeaderError(f"Missing '{HEADER}' header")
        if len(lines) < 3:
            raise InvalidFormatError("JASC palette is truncated")
        if lines[1].strip() != VERSION:
            raise InvalidVersionError(f"Unsupported JASC palette version {lines[1].strip()!r}")
        try:
            declared = int(lines[2])
        except ValueError as exc:
            raise InvalidFormatError(f"Invalid color count {lines[2]!r}") from exc

        colors = []
        for line in lines[3:]:
            match = _COLOR_RE.match(line)
            if match is None:
                log.debug("JASC: skipping line %r", line)
                continue
            r, g, b = (max(0.0, min(1.0, int(v) / 255.0)) for v in match.groups())
            colors.append(Color.rgb(r, g, b))

        if declared != len(colors):
            log.warning("JASC: header declares %d colors, found %d", declared, len(colors))
        return Palette(colors=tuple(colors), format=self.format)

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        colors = [c.converted(ColorSpace.RGB, self.converter) for c in palette.all_colors()]
        lines = [HEADER, VERSION, str(len(colors))]
        for color in colors:
            lines.append(" ".join(
                str(int(round(max(0.0, min(1.0, v)) * 255))) for v in color.components
            ))
        return "\n".join(lines).encode("utf-8")
