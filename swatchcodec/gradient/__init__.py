# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Gradient post-processing.

Gradient exposes these as methods (sorted, normalized(), color_at(), ...);
the functions here accept an optional converter for callers that inject
their own color engine.
"""

from swatchcodec.gradient.processing import (
    color_at,
    color_at_stops,
    lerp_color,
    merge_identical_neighbouring_stops,
    merge_transparency_stops,
    normalized,
    sorted_gradient,
    with_transparency_map,
)
from swatchcodec.gradient.snapshot import Snapshot

__all__ = [
    "Snapshot",
    "sorted_gradient",
    "normalized",
    "merge_transparency_stops",
    "merge_identical_neighbouring_stops",
    "with_transparency_map",
    "color_at",
    "color_at_stops",
    "lerp_color",
]
