# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Swatchcodec -- Color palette and gradient interchange codecs.

Reads and writes swatch files (Adobe ASE/ACO, GIMP, PaintShop Pro,
CorelDraw, hex text, JSON, SVG) and gradient files (Adobe GRD, GIMP
GGR, PaintShop Pro, JSON, SVG) through one immutable in-memory model.

Quick start::

    from swatchcodec import load_palette, save_palette

    palette = load_palette("brand.ase")
    palette.all_colors()[0].hex_rgb   # "#ff0000"
    save_palette(palette, "brand.gpl")

    from swatchcodec import load_gradients

    gradient = load_gradients("sunset.grd").gradients[0]
    gradient.sample(5)                # 5 evenly spaced colors
"""

from __future__ import annotations

import logging

__version__ = "1.0.0"

from swatchcodec.errors import CodecError
from swatchcodec.registry import (
    GRADIENT_CODERS,
    PALETTE_CODERS,
    decode_gradients,
    decode_palette,
    encode_gradients,
    encode_palette,
    gradients_coder,
    load_gradients,
    load_palette,
    palette_coder,
    save_gradients,
    save_palette,
)
from swatchcodec.schema import (
    Color,
    ColorSpace,
    ColorType,
    Gradient,
    Gradients,
    GradientsFormat,
    Group,
    Palette,
    PaletteFormat,
    Stop,
    TransparencyStop,
)

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Files
    "load_palette",
    "save_palette",
    "load_gradients",
    "save_gradients",
    # Bytes
    "decode_palette",
    "encode_palette",
    "decode_gradients",
    "encode_gradients",
    "palette_coder",
    "gradients_coder",
    "PALETTE_CODERS",
    "GRADIENT_CODERS",
    # Model
    "Color",
    "ColorSpace",
    "ColorType",
    "Group",
    "Palette",
    "Stop",
    "TransparencyStop",
    "Gradient",
    "Gradients",
    "PaletteFormat",
    "GradientsFormat",
    # Errors
    "CodecError",
    # Version
    "__version__",
]
