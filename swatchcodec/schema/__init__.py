# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
In-memory model shared by every coder.

All types in this module are immutable (frozen dataclasses).
Coders decode into these types and encode from them.
"""

from swatchcodec.schema.formats import GradientsFormat, PaletteFormat
from swatchcodec.schema.gradient import Gradient, Gradients, Stop, TransparencyStop
from swatchcodec.schema.palette import Color, ColorSpace, ColorType, Group, Palette

__all__ = [
    # Colors
    "Color",
    "ColorSpace",
    "ColorType",
    # Palettes
    "Group",
    "Palette",
    # Gradients
    "Stop",
    "TransparencyStop",
    "Gradient",
    "Gradients",
    # Format tags
    "PaletteFormat",
    "GradientsFormat",
]
