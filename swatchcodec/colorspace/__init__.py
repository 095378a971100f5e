# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Color-space conversion adapter.

The ColorSpaceConverter protocol is the only way coders change a color's
space. NumpyColorConverter is the default implementation.
"""

from swatchcodec.colorspace.conversions import (
    cmyk_to_srgb,
    gray_to_srgb,
    hsb_to_srgb,
    lab_to_srgb,
    linear_to_srgb,
    srgb_to_cmyk,
    srgb_to_gray,
    srgb_to_lab,
    srgb_to_linear,
)
from swatchcodec.colorspace.converter import (
    ColorSpaceConverter,
    NumpyColorConverter,
    default_converter,
)
from swatchcodec.colorspace.hexcolor import format_hex, parse_hex, to_byte

__all__ = [
    # Adapter
    "ColorSpaceConverter",
    "NumpyColorConverter",
    "default_converter",
    # Hex
    "parse_hex",
    "format_hex",
    "to_byte",
    # Array conversions
    "srgb_to_linear",
    "linear_to_srgb",
    "srgb_to_lab",
    "lab_to_srgb",
    "srgb_to_cmyk",
    "cmyk_to_srgb",
    "srgb_to_gray",
    "gray_to_srgb",
    "hsb_to_srgb",
]
