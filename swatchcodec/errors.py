# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Error taxonomy for palette and gradient codecs.

Every failure raised by a coder, the byte cursor or the gradient
processing helpers derives from CodecError. CodecError is itself a
ValueError, so callers that only care about "bad input" can catch that.
"""

from __future__ import annotations

from typing import Optional


class CodecError(ValueError):
    """Base class for all swatchcodec errors."""


# =============================================================================
# Stream / Structure Errors
# =============================================================================


class UnableToLoadFileError(CodecError):
    """The file could not be read or its text could not be decoded."""


class InvalidHeaderError(CodecError):
    """The magic number or header line is missing or wrong."""


class InvalidVersionError(CodecError):
    """The file declares a version this coder does not understand."""


class InvalidFormatError(CodecError):
    """The data does not follow the format's grammar."""


class EndOfDataError(CodecError):
    """A read ran past the end of the buffer."""


class InvalidStringError(CodecError):
    """A string field could not be decoded or has an inconsistent length."""


class InvalidOffsetError(CodecError):
    """A seek would move the cursor outside the buffer."""


class UnknownBlockTypeError(CodecError):
    """A block carries a tag the format does not define."""

    def __init__(self, value: int) -> None:
        self.value = value
        super().__init__(f"Unknown block type 0x{value:04X}")


class GroupAlreadyOpenError(CodecError):
    """A group was started (or left open) while another group was open."""


class GroupNotOpenError(CodecError):
    """A group end was found with no group open."""


# =============================================================================
# Color Errors
# =============================================================================


class InvalidColorComponentCountError(CodecError):
    """The number of components does not match the color space."""


class UnknownColorModelError(CodecError):
    """A color model tag or code is not recognised."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown color model {value!r}")


class UnknownColorTypeError(CodecError):
    """A color type code is not recognised."""

    def __init__(self, value: object) -> None:
        self.value = value
        super().__init__(f"Unknown color type {value!r}")


class UnsupportedColorConversionError(CodecError):
    """The converter cannot map between the requested color spaces."""


class InvalidHexStringError(CodecError):
    """A line of hex-color text could not be parsed."""

    def __init__(self, line: str, message: Optional[str] = None) -> None:
        self.line = line
        super().__init__(message or f"Invalid hex color line: {line!r}")


# =============================================================================
# Format / Gradient Errors
# =============================================================================


class UnsupportedFormatError(CodecError):
    """No coder handles the format, or the coder cannot perform the operation."""


class NotEnoughStopsError(CodecError):
    """The gradient has too few stops for the operation."""


class CannotNormalizeError(CodecError):
    """All stop positions coincide, so no range exists to normalize over."""


class InternalError(CodecError):
    """An invariant that should be unreachable was violated."""


__all__ = [
    "CodecError",
    "UnableToLoadFileError",
    "InvalidHeaderError",
    "InvalidVersionError",
    "InvalidFormatError",
    "EndOfDataError",
    "InvalidStringError",
    "InvalidOffsetError",
    "UnknownBlockTypeError",
    "GroupAlreadyOpenError",
    "GroupNotOpenError",
    "InvalidColorComponentCountError",
    "UnknownColorModelError",
    "UnknownColorTypeError",
    "UnsupportedColorConversionError",
    "InvalidHexStringError",
    "UnsupportedFormatError",
    "NotEnoughStopsError",
    "CannotNormalizeError",
    "InternalError",
]
