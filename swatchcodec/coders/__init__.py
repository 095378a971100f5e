# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Palette and gradient file-format coders.

Each coder turns bytes into a Palette/Gradients and back. Coders never
touch the filesystem; see swatchcodec.registry for extension lookup and
file helpers.
"""

from swatchcodec.coders.aco import ACOCoder
from swatchcodec.coders.ase import ASECoder
from swatchcodec.coders.base import GradientsCoder, PaletteCoder
from swatchcodec.coders.coreldraw import CorelDrawV3PaletteCoder
from swatchcodec.coders.ggr import GIMPGradientCoder
from swatchcodec.coders.gpl import GIMPPaletteCoder
from swatchcodec.coders.grd import GRDCoder, PaintShopProGradientCoder
from swatchcodec.coders.hextext import RGBACoder, RGBCoder
from swatchcodec.coders.jsonfmt import JSONGradientsCoder, JSONPaletteCoder
from swatchcodec.coders.paintshoppro import PaintShopProPaletteCoder
from swatchcodec.coders.svg import SVGGradientsCoder, SVGPaletteCoder, SvgExportConfig

__all__ = [
    # Base classes
    "PaletteCoder",
    "GradientsCoder",
    # Palette coders
    "ASECoder",
    "ACOCoder",
    "GIMPPaletteCoder",
    "RGBACoder",
    "RGBCoder",
    "JSONPaletteCoder",
    "PaintShopProPaletteCoder",
    "CorelDrawV3PaletteCoder",
    "SVGPaletteCoder",
    "SvgExportConfig",
    # Gradient coders
    "GRDCoder",
    "PaintShopProGradientCoder",
    "GIMPGradientCoder",
    "JSONGradientsCoder",
    "SVGGradientsCoder",
]
