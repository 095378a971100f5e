# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
GIMP palette (.gpl) coder.

    GIMP Palette
    Name: Sunset
    Columns: 4
    # comment
    255 128   0   Orange
"""

from __future__ import annotations

import logging
import re
from typing import Optional

from swatchcodec.coders.base import PaletteCoder, decode_text
from swatchcodec.errors import InvalidHeaderError
from swatchcodec.schema import Color, ColorSpace, Palette, PaletteFormat

logger = logging.getLogger(__name__)

HEADER = "GIMP Palette"

_NAME_RE = re.compile(r"^Name:\s*(.*)$")
_COLOR_RE = re.compile(r"^\s*(\d+)\s+(\d+)\s+(\d+)(.*)$")


def _channel(text: str) -> float:
    return max(0.0, min(1.0, int(text) / 255.0))


def _byte(value: float) -> int:
    return int(round(max(0.0, min(255.0, value * 255.0))))


class GIMPPaletteCoder(PaletteCoder):
    """
    GIMP palettes.

    Lossy: groups are flattened and alpha is dropped. Non-RGB colors are
    converted to RGB on encode.
    """

    format = PaletteFormat.GIMP
    file_extensions = ("gpl",)

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Palette:
        log = self._logger(logger)
        lines = decode_text(data).splitlines()
        if not lines or HEADER not in lines[0]:
            raise InvalidHeaderError(f"Missing '{HEADER}' header line")

        name = ""
        colors = []
        for line in lines[1:]:
            stripped = line.strip()
            if not stripped or stripped.startswith("#"):
                continue
            name_match = _NAME_RE.match(stripped)
            if name_match:
                name = name_match.group(1).strip()
                continue
            color_match = _COLOR_RE.match(line)
            if color_match:
                r, g, b, label = color_match.groups()
                colors.append(Color.rgb(_channel(r), _channel(g), _channel(b), name=label.strip()))
                continue
            log.debug("GPL: skipping line %r", line)

        return Palette(colors=tuple(colors), name=name, format=self.format)

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        lines = [HEADER]
        if palette.name:
            lines.append(f"Name: {palette.name}")
        colors = palette.all_colors()
        lines.append(f"#Colors: {len(colors)}")
        for color in colors:
            rgb = color.converted(ColorSpace.RGB, self.converter)
            fields = [str(_byte(v)) for v in rgb.components]
            if color.name:
                fields.append(color.name)
            lines.append("\t".join(fields))
        return ("\n".join(lines) + "\n").encode("utf-8")
