# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
GIMP gradient (.ggr) coder.

    GIMP Gradient
    Name: Sunrise
    2
    0.00000 0.25000 0.50000 1 0 0 1 0 1 0 1 0 0
    0.50000 0.75000 1.00000 0 1 0 1 0 0 1 1 0 0

Each segment line is `left middle right r0 g0 b0 a0 r1 g1 b1 a1 blend
coloring`. Only RGB coloring (0) is supported; the blend function and
the segment midpoint are not modelled.
"""

from __future__ import annotations

import logging
from typing import Optional

from swatchcodec.coders.base import GradientsCoder, decode_text
from swatchcodec.errors import InvalidFormatError, InvalidHeaderError, NotEnoughStopsError
from swatchcodec.schema import Color, Gradient, Gradients, GradientsFormat, Stop

logger = logging.getLogger(__name__)

HEADER = "GIMP Gradient"
NAME_PREFIX = "Name: "
SEGMENT_FIELDS = 13


def _parse_segment(line: str) -> Optional[tuple[list[float], int]]:
    """Split a segment line into its 11 numbers and coloring mode, or None if malformed."""
    fields = line.split(" ")
    if len(fields) != SEGMENT_FIELDS:
        return None
    try:
        numbers = [float(f) for f in fields[:11]]
        int(fields[11])
        coloring = int(fields[12])
    except ValueError:
        return None
    return numbers, coloring


class GIMPGradientCoder(GradientsCoder):
    """Single-gradient GIMP files."""

    format = GradientsFormat.GGR
    file_extensions = ("ggr",)

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Gradients:
        log = self._logger(logger)
        lines = [line.rstrip("\r") for line in decode_text(data).split("\n")]
        lines = [line for line in lines if line]

        if not lines or lines[0] != HEADER:
            raise InvalidHeaderError(f"Missing '{HEADER}' header")
        if len(lines) < 2 or not lines[1].startswith(NAME_PREFIX):
            raise InvalidFormatError("Missing 'Name: ' line")
        name = lines[1][len(NAME_PREFIX):]

        try:
            count = int(lines[2]) if len(lines) > 2 else -1
        except ValueError:
            count = -1
        if count < 0 or len(lines) != count + 3:
            raise InvalidFormatError("Segment count does not match the number of segment lines")

        stops: list[Stop] = []
        for line in lines[3:]:
            segment = _parse_segment(line)
            if segment is None:
                log.debug("GGR: skipping malformed segment %r", line)
                continue
            (left, _mid, right, r0, g0, b0, a0, r1, g1, b1, a1), coloring = segment
            if coloring != 0:
                raise InvalidFormatError(f"Unsupported segment coloring {coloring}")
            channels = (r0, g0, b0, a0, r1, g1, b1, a1)
            if not all(0.0 <= c <= 1.0 for c in channels):
                raise InvalidFormatError(f"Segment color channel out of range [0, 1]: {line!r}")

            start = Stop(left, Color.rgb(r0, g0, b0, a0))
            # Adjacent segments share their end/start point
            if not stops or stops[-1] != start:
                stops.append(start)
            stops.append(Stop(right, Color.rgb(r1, g1, b1, a1)))

        log.debug("GGR: decoded %d stops from %d segments", len(stops), count)
        return Gradients(gradients=(Gradient(stops=tuple(stops), name=name),), format=self.format)

    def encode(self, gradients: Gradients, *, logger: Optional[logging.Logger] = None) -> bytes:
        log = self._logger(logger)
        if not gradients.gradients:
            raise NotEnoughStopsError("No gradients to export")
        if len(gradients.gradients) > 1:
            log.info("GGR: exporting the first of %d gradients", len(gradients.gradients))

        gradient = gradients.gradients[0].normalized().sorted
        segments = len(gradient.stops) - 1
        out = [HEADER, f"{NAME_PREFIX}{gradient.name or ''}", str(segments)]
        for left, right in zip(gradient.stops, gradient.stops[1:]):
            sp, ep = left.position, right.position
            numbers = [sp, (ep - sp) / 2.0 + sp, ep]
            numbers.extend(left.color.rgba(self.converter))
            numbers.extend(right.color.rgba(self.converter))
            out.append(" ".join(f"{v:0.5f}" for v in numbers) + " 0 0")
        return ("\n".join(out) + "\n").encode("utf-8")
