# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Color-space conversion boundary.

Coders never do colorimetry themselves. Wherever a format needs a color
in a particular space they call a ColorSpaceConverter, which callers may
replace (for example with an ICC-aware engine) by passing their own
implementation to the coder.
"""

from __future__ import annotations

from typing import Callable, Protocol, runtime_checkable

import numpy as np

from swatchcodec.colorspace.conversions import (
    cmyk_to_srgb,
    gray_to_srgb,
    lab_to_srgb,
    srgb_to_cmyk,
    srgb_to_gray,
    srgb_to_lab,
)
from swatchcodec.errors import UnsupportedColorConversionError
from swatchcodec.schema.palette import Color, ColorSpace


@runtime_checkable
class ColorSpaceConverter(Protocol):
    """Narrow interface to an external color engine."""

    def convert(self, color: Color, target: ColorSpace) -> Color:
        """Return `color` expressed in `target`, keeping name, alpha and type."""
        ...

    def to_display(self, color: Color) -> tuple[float, float, float, float]:
        """Return (r, g, b, a) sRGB floats for on-screen use."""
        ...


_TO_SRGB: dict[ColorSpace, Callable] = {
    ColorSpace.RGB: lambda c: np.asarray(c, dtype=np.float64),
    ColorSpace.CMYK: cmyk_to_srgb,
    ColorSpace.LAB: lab_to_srgb,
    ColorSpace.GRAY: gray_to_srgb,
}

_FROM_SRGB: dict[ColorSpace, Callable] = {
    ColorSpace.RGB: lambda c: np.asarray(c, dtype=np.float64),
    ColorSpace.CMYK: srgb_to_cmyk,
    ColorSpace.LAB: srgb_to_lab,
    ColorSpace.GRAY: srgb_to_gray,
}


class NumpyColorConverter:
    """
    Default converter built on the NumPy formulas in conversions.py.

    Every pair of spaces goes through sRGB. The converter is stateless, so a
    single instance is shared.
    """

    def convert(self, color: Color, target: ColorSpace) -> Color:
        if color.color_space is target:
            return color
        try:
            to_srgb = _TO_SRGB[color.color_space]
            from_srgb = _FROM_SRGB[target]
        except KeyError as exc:
            raise UnsupportedColorConversionError(
                f"Cannot convert {color.color_space.value} to {target.value}"
            ) from exc
        srgb = to_srgb(np.asarray(color.components, dtype=np.float64))
        components = from_srgb(srgb)
        return Color(
            color_space=target,
            components=tuple(float(v) for v in np.atleast_1d(components)),
            name=color.name,
            alpha=color.alpha,
            color_type=color.color_type,
        )

    def to_display(self, color: Color) -> tuple[float, float, float, float]:
        rgb = self.convert(color, ColorSpace.RGB).components
        r, g, b = (min(1.0, max(0.0, v)) for v in rgb)
        return r, g, b, color.alpha


_DEFAULT = NumpyColorConverter()


def default_converter() -> ColorSpaceConverter:
    """The process-wide default converter."""
    return _DEFAULT
