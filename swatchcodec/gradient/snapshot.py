# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Pre-processed gradient for repeated sampling."""

from __future__ import annotations

from typing import Iterable, Optional

from swatchcodec.colorspace.converter import ColorSpaceConverter
from swatchcodec.gradient.processing import (
    color_at_stops,
    merge_transparency_stops,
    normalized,
    sorted_gradient,
)
from swatchcodec.schema import Color, Gradient


class Snapshot:
    """
    A gradient normalized, sorted and merged once, then sampled many times.

    Gradients with a single stop are sampled as a flat color; normalizing
    needs at least two stops.
    """

    __slots__ = ("gradient", "_converter")

    def __init__(self, gradient: Gradient, converter: Optional[ColorSpaceConverter] = None) -> None:
        self._converter = converter
        if len(gradient.stops) < 2:
            self.gradient = gradient
        else:
            prepared = sorted_gradient(normalized(gradient))
            self.gradient = merge_transparency_stops(prepared, converter)

    @property
    def stops(self):
        return self.gradient.stops

    def color_at(self, t: float) -> Color:
        """Color at t in [0, 1]."""
        return color_at_stops(self.gradient.stops, t, self._converter)

    def colors_at(self, ts: Iterable[float]) -> tuple[Color, ...]:
        return tuple(self.color_at(t) for t in ts)

    def colors(self, count: int) -> tuple[Color, ...]:
        """
        `count` evenly spaced samples including the first and last stop.

        Raises:
            ValueError: If count < 1.
        """
        if count < 1:
            raise ValueError(f"Sample count must be >= 1, got {count}")
        if count == 1:
            return (self.color_at(0.0),)
        return self.colors_at(i / (count - 1) for i in range(count))
