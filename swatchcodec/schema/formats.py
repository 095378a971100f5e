# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Format tags recorded on decoded palettes and gradient collections."""

from enum import Enum


class PaletteFormat(Enum):
    """Palette file formats known to the registry."""

    ASE = "ase"
    ACO = "aco"
    GIMP = "gpl"
    RGBA = "rgba"
    RGB = "rgb"
    JSON = "jsoncolorpalette"
    PAINTSHOP_PRO = "psppalette"
    CORELDRAW_V3 = "coreldraw3"
    SVG = "svg"


class GradientsFormat(Enum):
    """Gradient file formats known to the registry."""

    GRD = "grd"
    PAINTSHOP_PRO = "pspgradient"
    GGR = "ggr"
    JSON = "jsoncolorgradient"
    SVG = "svg"
