# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
JSON palette and gradient coders.

The documents mirror the model directly (see Palette.to_dict and
Gradients.to_dict); round trips are structural, not byte-exact.

Example palette::

    {
      "name": "Sunset",
      "colors": [
        {"name": "Red", "colorSpace": "RGB", "colorComponents": [1.0, 0.0, 0.0]}
      ],
      "groups": [
        {"name": "Ink", "colors": [
          {"colorSpace": "CMYK", "colorComponents": [0, 1, 1, 0], "colorType": "spot"}
        ]}
      ]
    }
"""

from __future__ import annotations

import json
import logging
from typing import Optional

from swatchcodec.coders.base import GradientsCoder, PaletteCoder, decode_text
from swatchcodec.errors import CodecError, InvalidFormatError
from swatchcodec.schema import Gradients, GradientsFormat, Palette, PaletteFormat

logger = logging.getLogger(__name__)


def _load(data: bytes) -> dict:
    try:
        document = json.loads(decode_text(data))
    except json.JSONDecodeError as exc:
        raise InvalidFormatError(f"Invalid JSON: {exc}") from exc
    if not isinstance(document, dict):
        raise InvalidFormatError("JSON document must be an object")
    return document


def _build(factory, document: dict):
    """Run a from_dict factory, mapping structural problems to InvalidFormatError."""
    try:
        return factory(document)
    except CodecError:
        raise
    except (KeyError, TypeError, ValueError) as exc:
        raise InvalidFormatError(f"Malformed document: {exc}") from exc


class JSONPaletteCoder(PaletteCoder):
    """Palettes as JSON documents."""

    format = PaletteFormat.JSON
    file_extensions = ("jsoncolorpalette",)

    def __init__(self, converter=None, indent: Optional[int] = 2) -> None:
        super().__init__(converter)
        self.indent = indent

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Palette:
        palette = _build(Palette.from_dict, _load(data))
        self._logger(logger).debug(
            "JSON: decoded palette with %d colors", len(palette.all_colors())
        )
        return Palette(palette.colors, palette.groups, palette.name, format=self.format)

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        return palette.to_json(indent=self.indent).encode("utf-8")


class JSONGradientsCoder(GradientsCoder):
    """Gradient collections as JSON documents."""

    format = GradientsFormat.JSON
    file_extensions = ("jsoncolorgradient",)

    def __init__(self, converter=None, indent: Optional[int] = 2) -> None:
        super().__init__(converter)
        self.indent = indent

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Gradients:
        gradients = _build(Gradients.from_dict, _load(data))
        self._logger(logger).debug("JSON: decoded %d gradients", len(gradients))
        return Gradients(gradients.gradients, gradients.name, format=self.format)

    def encode(self, gradients: Gradients, *, logger: Optional[logging.Logger] = None) -> bytes:
        return gradients.to_json(indent=self.indent).encode("utf-8")
