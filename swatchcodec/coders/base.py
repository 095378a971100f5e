# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Base types and utilities for coders."""

from __future__ import annotations

import codecs
import logging
from typing import ClassVar, Optional

from swatchcodec.colorspace.converter import ColorSpaceConverter, default_converter
from swatchcodec.errors import UnableToLoadFileError, UnsupportedFormatError
from swatchcodec.schema import Gradients, GradientsFormat, Palette, PaletteFormat


class _Coder:
    """Shared plumbing: extensions, converter injection and logger selection."""

    file_extensions: ClassVar[tuple[str, ...]] = ()

    def __init__(self, converter: Optional[ColorSpaceConverter] = None) -> None:
        self.converter = converter or default_converter()

    @property
    def name(self) -> str:
        return type(self).__name__.removesuffix("Coder")

    def handles_extension(self, extension: str) -> bool:
        return extension.lower().lstrip(".") in self.file_extensions

    def _logger(self, logger: Optional[logging.Logger]) -> logging.Logger:
        return logger if logger is not None else logging.getLogger(type(self).__module__)

    def __repr__(self) -> str:
        return f"{type(self).__name__}(extensions={list(self.file_extensions)})"


class PaletteCoder(_Coder):
    """A palette format: bytes ↔ Palette."""

    format: ClassVar[PaletteFormat]

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Palette:
        raise UnsupportedFormatError(f"{self.name} palettes cannot be decoded")

    def encode(self, palette: Palette, *, logger: Optional[logging.Logger] = None) -> bytes:
        raise UnsupportedFormatError(f"{self.name} palettes cannot be encoded")


class GradientsCoder(_Coder):
    """A gradient format: bytes ↔ Gradients."""

    format: ClassVar[GradientsFormat]

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Gradients:
        raise UnsupportedFormatError(f"{self.name} gradients cannot be decoded")

    def encode(self, gradients: Gradients, *, logger: Optional[logging.Logger] = None) -> bytes:
        raise UnsupportedFormatError(f"{self.name} gradients cannot be encoded")


# =============================================================================
# Text helpers
# =============================================================================


def decode_text(data: bytes) -> str:
    """
    Decode text-format palette bytes.

    Honors UTF-8 and UTF-16 byte order marks, then tries UTF-8 and
    Windows-1252 (common for older palette files).

    Raises:
        UnableToLoadFileError: If no encoding fits.
    """
    if data.startswith(codecs.BOM_UTF8):
        candidates = ("utf-8-sig",)
    elif data.startswith((codecs.BOM_UTF16_BE, codecs.BOM_UTF16_LE)):
        candidates = ("utf-16",)
    else:
        candidates = ("utf-8", "cp1252")
    for encoding in candidates:
        try:
            return data.decode(encoding)
        except UnicodeDecodeError:
            continue
    raise UnableToLoadFileError("Could not decode text using any supported encoding")


def format_number(value: float, max_decimals: int = 3) -> str:
    """Format with at most `max_decimals` decimals and no trailing zeros ("40", "0.733")."""
    text = f"{value:.{max_decimals}f}".rstrip("0").rstrip(".")
    return "0" if text in ("", "-0") else text
