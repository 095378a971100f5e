# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
CorelDraw V3 text palette (.pal) coder.

One CMYK color per line, percentages after a quoted name:

    "Black"                           0   0   0   100
    "Red"                             0   100 100 0
"""

from __future__ import annotations

import logging
import math
import re
from typing import Optional

from swatchcodec.coders.base import PaletteCoder, decode_text
from swatchcodec.errors import InvalidFormatError
from swatchcodec.schema import Color, ColorSpace, Palette, PaletteFormat

logger = logging.getLogger(__name__)

_NUMBER = r"([0-9]*\.?[0-9]+)"
_LINE_RE = re.compile(
    r'"(.*)"[ \t]*' + r"[ \t]*".join([_NUMBER] * 4) + r"[ \t]*"
)


def _percent(value: float) -> int:
    """Round half away from zero, as a whole percentage."""
    scaled = value * 100.0
    return int(math.floor(scaled + 0.5)) if scaled >= 0 else -int(math.floor(-scaled + 0.5))


class CorelDrawV3PaletteCoder(PaletteCoder):
    """
    CorelDraw 3 palettes.

    Every color is stored as CMYK; groups flatten and alpha is dropped.
    """

    format = PaletteFormat.CORELDRAW_V3
    file_extensions = ("pal",)

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Palette:
        log = self._logger(logger)
        colors = []
        for line in decode_text(data).splitlines():
            match = _LINE_RE.match(line.strip(" \t"))
            if match is None:
                continue
            name, *values = match.groups()
            c, m, y, k = (min(1.0, float(v) / 100.0) for v in values)
            colors.append(Color.cmyk(c, m, y, k, name=name))

        if not colors:
            raise InvalidFormatError("No CorelDraw palette entries found")
        log.debug("CorelDraw: decoded %d colors", len(colors))
        return Palette(colors=tuple(colors), format=self.format)

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        lines = []
        for color in palette.all_colors():
            cmyk = color.converted(ColorSpace.CMYK, self.converter)
            values = "    ".join(str(_percent(v)) for v in cmyk.components)
            lines.append(f'"{color.name}"    {values}\r\n')
        return "".join(lines).encode("utf-8")
