# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Gradient post-processing.

Derived views over a Gradient: sorting, normalization of positions to
[0, 1], folding the transparency track into color alpha, and sampling.
None of these mutate their input; each returns a new Gradient or Color.

This is applied AFTER decoding, BEFORE rendering or re-encoding into
formats that need sorted, normalized stops (GGR, GRD, SVG).
"""

from __future__ import annotations

import logging
from dataclasses import replace
from typing import Optional

import numpy as np

from swatchcodec.colorspace.converter import ColorSpaceConverter, default_converter
from swatchcodec.errors import CannotNormalizeError, InternalError, NotEnoughStopsError
from swatchcodec.schema import Color, ColorSpace, Gradient, Stop, TransparencyStop

logger = logging.getLogger(__name__)


# =============================================================================
# Sorting and normalization
# =============================================================================


def sorted_gradient(gradient: Gradient) -> Gradient:
    """
    Return the gradient with stops ascending by position.

    Python's sort is stable, so stops sharing a position keep their
    original relative order. Transparency stops are sorted the same way.
    """
    tstops = gradient.transparency_stops
    return replace(
        gradient,
        stops=tuple(sorted(gradient.stops, key=lambda s: s.position)),
        transparency_stops=(
            tuple(sorted(tstops, key=lambda t: t.position)) if tstops is not None else None
        ),
    )


def normalized(gradient: Gradient) -> Gradient:
    """
    Remap stop positions linearly so min → 0 and max → 1, sorted.

    Transparency stops go through the same transform (clamped to [0, 1]),
    so they stay aligned with the color stops they were authored against.
    A gradient that is already normalized comes back unchanged.

    Raises:
        NotEnoughStopsError: Fewer than two color stops.
        CannotNormalizeError: All color stops share one position.
    """
    if len(gradient.stops) < 2:
        raise NotEnoughStopsError(
            f"Normalizing needs at least 2 stops, got {len(gradient.stops)}"
        )
    positions = [s.position for s in gradient.stops]
    low, high = min(positions), max(positions)
    span = high - low
    if span == 0:
        raise CannotNormalizeError(f"All stops are at position {low}")

    def remap(position: float) -> float:
        if low == 0.0 and high == 1.0:
            return position
        return (position - low) / span

    stops = tuple(
        Stop(remap(s.position), s.color)
        for s in sorted(gradient.stops, key=lambda s: s.position)
    )
    tstops: Optional[tuple[TransparencyStop, ...]] = None
    if gradient.transparency_stops is not None:
        tstops = tuple(
            replace(t, position=min(1.0, max(0.0, remap(t.position))))
            for t in sorted(gradient.transparency_stops, key=lambda t: t.position)
        )
    return replace(gradient, stops=stops, transparency_stops=tstops)


# =============================================================================
# Transparency
# =============================================================================


def merge_transparency_stops(
    gradient: Gradient,
    converter: Optional[ColorSpaceConverter] = None,
) -> Gradient:
    """
    Fold the transparency track into the color stops.

    The result has a stop at every color-stop and transparency-stop
    position (sorted union, duplicates removed). RGB channels and opacity
    are each interpolated piecewise-linearly along their own track, and
    the opacity becomes the stop color's alpha. The returned gradient has
    no transparency track and its colors are RGB.

    A gradient without transparency stops is returned unchanged.
    """
    if gradient.transparency_stops is None:
        return gradient
    converter = converter or default_converter()

    colors = normalized(gradient)
    color_t = np.array([s.position for s in colors.stops], dtype=np.float64)
    rgb = np.array(
        [converter.to_display(s.color)[:3] for s in colors.stops], dtype=np.float64
    )

    tstops = list(colors.transparency_stops or ())
    if not tstops:
        # An empty track means fully opaque
        tstops = [TransparencyStop(0.0, 1.0), TransparencyStop(1.0, 1.0)]
    trans_t = np.array([t.position for t in tstops], dtype=np.float64)
    trans_v = np.array([t.value for t in tstops], dtype=np.float64)

    positions = np.unique(np.concatenate([color_t, trans_t]))
    channels = [np.interp(positions, color_t, rgb[:, i]) for i in range(3)]
    opacity = np.clip(np.interp(positions, trans_t, trans_v), 0.0, 1.0)

    stops = tuple(
        Stop(
            float(t),
            Color.rgb(float(r), float(g), float(b), float(a)),
        )
        for t, r, g, b, a in zip(positions, *channels, opacity)
    )
    logger.debug(
        "Merged %d color stops and %d transparency stops into %d stops",
        len(color_t), len(trans_t), len(stops),
    )
    return replace(gradient, stops=stops, transparency_stops=None)


def with_transparency_map(gradient: Gradient) -> Gradient:
    """
    Move color alpha onto an explicit transparency track.

    Formats such as GRD store opacity separately from color. When the
    gradient already has transparency stops it is returned unchanged;
    otherwise one transparency stop per color stop is derived from the
    color alpha, and the colors are made opaque.
    """
    if gradient.transparency_stops is not None:
        return gradient
    return replace(
        gradient,
        stops=tuple(Stop(s.position, s.color.with_alpha(1.0)) for s in gradient.stops),
        transparency_stops=gradient.transparency_map,
    )


def merge_identical_neighbouring_stops(gradient: Gradient) -> Gradient:
    """
    Collapse runs of consecutive stops with equal position and color.

    Segment-based formats (GGR) describe red→green→blue as two segments
    whose shared end/start points decode as duplicate stops.
    """
    if len(gradient.stops) < 2:
        return gradient
    merged = [gradient.stops[0]]
    for stop in gradient.stops[1:]:
        if stop != merged[-1]:
            merged.append(stop)
    return replace(gradient, stops=tuple(merged))


# =============================================================================
# Sampling
# =============================================================================


def lerp_color(
    c1: Color,
    c2: Color,
    t: float,
    converter: Optional[ColorSpaceConverter] = None,
) -> Color:
    """
    Linear blend of two colors, t in [0, 1].

    Same-space colors blend channel-wise in that space; otherwise both are
    converted to RGB first. Alpha is always blended.
    """
    alpha = c1.alpha + (c2.alpha - c1.alpha) * t
    if c1.color_space is c2.color_space:
        a = np.asarray(c1.components, dtype=np.float64)
        b = np.asarray(c2.components, dtype=np.float64)
        return Color(
            color_space=c1.color_space,
            components=tuple(float(v) for v in a + (b - a) * t),
            alpha=alpha,
        )
    converter = converter or default_converter()
    a = np.asarray(converter.to_display(c1)[:3], dtype=np.float64)
    b = np.asarray(converter.to_display(c2)[:3], dtype=np.float64)
    return Color(
        color_space=ColorSpace.RGB,
        components=tuple(float(v) for v in a + (b - a) * t),
        alpha=alpha,
    )


def color_at_stops(
    stops: tuple[Stop, ...],
    t: float,
    converter: Optional[ColorSpaceConverter] = None,
) -> Color:
    """
    Sample pre-sorted stops at t.

    Raises:
        ValueError: t is outside [0, 1].
        NotEnoughStopsError: There are no stops.
        InternalError: No stop pair brackets t.
    """
    if not 0.0 <= t <= 1.0:
        raise ValueError(f"t must be 0-1, got {t}")
    if not stops:
        raise NotEnoughStopsError("Cannot sample a gradient with no stops")
    if len(stops) == 1:
        return stops[0].color
    if t == 0.0:
        return stops[0].color
    if t == 1.0:
        return stops[-1].color

    for left, right in zip(stops, stops[1:]):
        if left.position <= t < right.position:
            local = (t - left.position) / (right.position - left.position)
            return lerp_color(left.color, right.color, local, converter)

    raise InternalError(
        f"No stop pair brackets t={t} (positions "
        f"{[s.position for s in stops]})"
    )


def color_at(
    gradient: Gradient,
    t: float,
    converter: Optional[ColorSpaceConverter] = None,
) -> Color:
    """
    Sample a gradient at t in [0, 1].

    The stops are sorted but positions are NOT renormalized: on a gradient
    whose stops span [0.2, 0.8], t = 0.1 has no bracketing pair and fails.
    A transparency track, when present, is merged first; the merged stops
    are mapped back onto the original position range, so the same t fails
    or succeeds with or without a track. Use Snapshot, or call
    normalized() first, to sample over the full range.
    """
    stops = sorted_gradient(gradient).stops
    if gradient.transparency_stops is not None and len(stops) >= 2:
        low, high = stops[0].position, stops[-1].position
        merged = merge_transparency_stops(gradient, converter).stops
        last = len(merged) - 1
        stops = tuple(
            Stop(
                low if i == 0 else high if i == last else low + s.position * (high - low),
                s.color,
            )
            for i, s in enumerate(merged)
        )
    return color_at_stops(stops, t, converter)
