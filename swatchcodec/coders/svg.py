# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
SVG export for palettes and gradients.

Both coders are encode-only: an SVG swatch sheet does not carry enough
structure to rebuild a palette, so decode raises UnsupportedFormatError.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional
from xml.sax.saxutils import escape

from swatchcodec.coders.base import GradientsCoder, PaletteCoder, format_number
from swatchcodec.colorspace.hexcolor import format_hex
from swatchcodec.schema import Color, Gradients, GradientsFormat, Palette, PaletteFormat

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SvgExportConfig:
    """Layout for palette swatch sheets."""

    # Canvas width; rows wrap before a swatch would cross it
    max_export_width: float = 600.0

    # Swatch rectangle size
    swatch_width: float = 40.0
    swatch_height: float = 40.0

    # Margin around the swatches
    inset_top: float = 4.0
    inset_left: float = 4.0
    inset_bottom: float = 4.0
    inset_right: float = 4.0

    # Gap between neighbouring swatches
    spacing: float = 1.0

    def __post_init__(self) -> None:
        if self.swatch_width <= 0 or self.swatch_height <= 0:
            raise ValueError("Swatch size must be positive")
        if self.max_export_width < self.inset_left + self.swatch_width + self.inset_right:
            raise ValueError(
                f"max_export_width {self.max_export_width} cannot fit a single swatch"
            )


class SVGPaletteCoder(PaletteCoder):
    """Palette as a grid of swatch rectangles with group labels."""

    format = PaletteFormat.SVG
    file_extensions = ("svg",)

    def __init__(self, converter=None, config: Optional[SvgExportConfig] = None) -> None:
        super().__init__(converter)
        self.config = config or SvgExportConfig()

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        cfg = self.config
        x = cfg.inset_left
        y = cfg.inset_top
        body: list[str] = []

        def swatches(colors: tuple[Color, ...]) -> None:
            nonlocal x, y
            for color in colors:
                r, g, b, a = color.rgba(self.converter)
                body.append(
                    f'      <rect x="{format_number(x)}" y="{format_number(y)}" '
                    f'width="{format_number(cfg.swatch_width)}" '
                    f'height="{format_number(cfg.swatch_height)}" '
                    f'fill="{format_hex(r, g, b)}" fill-opacity="{format_number(a)}" />\n'
                )
                x += cfg.swatch_width + cfg.spacing
                if x + cfg.swatch_width + cfg.inset_right > cfg.max_export_width:
                    y += cfg.swatch_height + cfg.spacing
                    x = cfg.inset_left

        def end_row() -> None:
            nonlocal x, y
            # A partly filled row still occupies a full swatch height
            if x != cfg.inset_left:
                y += cfg.swatch_height + cfg.spacing
                x = cfg.inset_left

        swatches(palette.colors)
        end_row()
        for group in palette.groups:
            swatches(group.colors)
            end_row()
            if group.name:
                y += 8
                body.append(
                    f"      <text x='5' y='{format_number(y)}' font-size='8' "
                    f"alignment-baseline='middle'>{escape(group.name)}</text>\n\n"
                )
                y += 8

        height = y - cfg.spacing + cfg.inset_bottom
        header = (
            '<?xml version="1.0" encoding="utf-8"?>\n'
            '\t<svg xmlns="http://www.w3.org/2000/svg" '
            'xmlns:xlink="http://www.w3.org/1999/xlink" version="1.1" '
            f'viewBox="0 0 {format_number(cfg.max_export_width)} {format_number(height)}" '
            'xml:space="preserve">\n'
        )
        return (header + "".join(body) + "</svg>\n").encode("utf-8")


class SVGGradientsCoder(GradientsCoder):
    """Gradients as stacked horizontal bars with linearGradient fills."""

    format = GradientsFormat.SVG
    file_extensions = ("svg",)

    width = 400
    row_height = 50

    def encode(self, gradients: Gradients, *, logger: Optional[logging.Logger] = None) -> bytes:
        total_height = len(gradients.gradients) * self.row_height
        lines = [
            f'<svg width="{self.width}" height="{total_height}" '
            f'viewBox="0 0 {self.width} {total_height}" fill="none" '
            'xmlns="http://www.w3.org/2000/svg">'
        ]
        for index in range(len(gradients.gradients)):
            lines.append(
                f'   <rect width="{self.width}" height="{self.row_height}" x="0" '
                f'y="{index * self.row_height}" fill="url(#gradient-fill-{index})"/>'
            )
        lines.append("   <defs>")
        for index, gradient in enumerate(gradients.gradients):
            lines.append(
                f'      <linearGradient id="gradient-fill-{index}" x1="0" y1="0" '
                f'x2="{self.width}" y2="0" gradientUnits="userSpaceOnUse">'
            )
            prepared = gradient.merge_transparency_stops().normalized()
            for stop in prepared.stops:
                r, g, b, a = stop.color.rgba(self.converter)
                lines.append(
                    f'         <stop offset="{format_number(stop.position, 6)}" '
                    f'stop-color="{format_hex(r, g, b)}" stop-opacity="{format_number(a, 6)}" />'
                )
            lines.append("      </linearGradient>")
        lines.append("   </defs>")
        lines.append("</svg>")
        return ("\n".join(lines) + "\n").encode("utf-8")
