# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Format lookup by file extension.

The coder set is closed: PALETTE_CODERS and GRADIENT_CODERS are fixed,
ordered tuples built at import and never modified afterwards. Several
formats share an extension (`pal`, `txt`, `svg`); lookups return them in
table order and decoding tries each in turn.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional, TypeVar, Union

from swatchcodec.coders import (
    ACOCoder,
    ASECoder,
    CorelDrawV3PaletteCoder,
    GIMPGradientCoder,
    GIMPPaletteCoder,
    GRDCoder,
    GradientsCoder,
    JSONGradientsCoder,
    JSONPaletteCoder,
    PaintShopProGradientCoder,
    PaintShopProPaletteCoder,
    PaletteCoder,
    RGBACoder,
    RGBCoder,
    SVGGradientsCoder,
    SVGPaletteCoder,
)
from swatchcodec.errors import CodecError, UnableToLoadFileError, UnsupportedFormatError
from swatchcodec.schema import Gradients, Palette

logger = logging.getLogger(__name__)

PathLike = Union[str, Path]
T = TypeVar("T")

PALETTE_CODERS: tuple[PaletteCoder, ...] = (
    ASECoder(),
    ACOCoder(),
    GIMPPaletteCoder(),
    RGBACoder(),
    RGBCoder(),
    JSONPaletteCoder(),
    PaintShopProPaletteCoder(),
    CorelDrawV3PaletteCoder(),
    SVGPaletteCoder(),
)

GRADIENT_CODERS: tuple[GradientsCoder, ...] = (
    GRDCoder(),
    PaintShopProGradientCoder(),
    GIMPGradientCoder(),
    JSONGradientsCoder(),
    SVGGradientsCoder(),
)


# =============================================================================
# Lookup
# =============================================================================


def palette_coders(extension: str) -> list[PaletteCoder]:
    """Every palette coder handling `extension`, in table order."""
    return [c for c in PALETTE_CODERS if c.handles_extension(extension)]


def gradients_coders(extension: str) -> list[GradientsCoder]:
    """Every gradient coder handling `extension`, in table order."""
    return [c for c in GRADIENT_CODERS if c.handles_extension(extension)]


def palette_coder(extension: str) -> Optional[PaletteCoder]:
    """First palette coder for `extension` (case-insensitive, leading dot allowed), or None."""
    matches = palette_coders(extension)
    return matches[0] if matches else None


def gradients_coder(extension: str) -> Optional[GradientsCoder]:
    """First gradient coder for `extension`, or None."""
    matches = gradients_coders(extension)
    return matches[0] if matches else None


def palette_extensions() -> list[str]:
    return sorted({ext for c in PALETTE_CODERS for ext in c.file_extensions})


def gradients_extensions() -> list[str]:
    return sorted({ext for c in GRADIENT_CODERS for ext in c.file_extensions})


# =============================================================================
# Decode / encode
# =============================================================================


def _first_success(
    kind: str,
    extension: str,
    coders: list,
    attempt: Callable[[object], T],
) -> T:
    """
    Run `attempt` against each candidate coder, returning the first result.

    Raises:
        UnsupportedFormatError: No coder handles the extension.
        CodecError: Every candidate failed; the first failure is re-raised.
    """
    if not coders:
        raise UnsupportedFormatError(f"No {kind} coder for extension {extension!r}")
    first_error: Optional[CodecError] = None
    for coder in coders:
        try:
            return attempt(coder)
        except CodecError as exc:
            logger.debug("%s failed for %r: %s", coder.name, extension, exc)
            if first_error is None:
                first_error = exc
    assert first_error is not None
    raise first_error


def decode_palette(
    extension: str,
    data: bytes,
    *,
    logger: Optional[logging.Logger] = None,
) -> Palette:
    """Decode palette bytes using the coders registered for `extension`."""
    return _first_success(
        "palette", extension, palette_coders(extension),
        lambda coder: coder.decode(data, logger=logger),
    )


def decode_gradients(
    extension: str,
    data: bytes,
    *,
    logger: Optional[logging.Logger] = None,
) -> Gradients:
    """Decode gradient bytes using the coders registered for `extension`."""
    return _first_success(
        "gradient", extension, gradients_coders(extension),
        lambda coder: coder.decode(data, logger=logger),
    )


def encode_palette(
    extension: str,
    palette: Palette,
    *,
    logger: Optional[logging.Logger] = None,
) -> bytes:
    """Encode with the first palette coder registered for `extension`."""
    coder = palette_coder(extension)
    if coder is None:
        raise UnsupportedFormatError(f"No palette coder for extension {extension!r}")
    return coder.encode(palette, logger=logger)


def encode_gradients(
    extension: str,
    gradients: Gradients,
    *,
    logger: Optional[logging.Logger] = None,
) -> bytes:
    """Encode with the first gradient coder registered for `extension`."""
    coder = gradients_coder(extension)
    if coder is None:
        raise UnsupportedFormatError(f"No gradient coder for extension {extension!r}")
    return coder.encode(gradients, logger=logger)


# =============================================================================
# File helpers
# =============================================================================


def _suffix(path: Path) -> str:
    if not path.suffix:
        raise UnsupportedFormatError(f"Cannot determine the format of {str(path)!r}: no extension")
    return path.suffix


def _read(path: Path) -> bytes:
    try:
        return path.read_bytes()
    except OSError as exc:
        raise UnableToLoadFileError(f"Cannot read {str(path)!r}: {exc}") from exc


def _write(path: Path, data: bytes) -> None:
    try:
        path.write_bytes(data)
    except OSError as exc:
        raise UnableToLoadFileError(f"Cannot write {str(path)!r}: {exc}") from exc


def load_palette(path: PathLike, *, logger: Optional[logging.Logger] = None) -> Palette:
    """Read and decode a palette file, choosing the coder by suffix."""
    path = Path(path)
    return decode_palette(_suffix(path), _read(path), logger=logger)


def load_gradients(path: PathLike, *, logger: Optional[logging.Logger] = None) -> Gradients:
    """Read and decode a gradient file, choosing the coder by suffix."""
    path = Path(path)
    return decode_gradients(_suffix(path), _read(path), logger=logger)


def save_palette(
    palette: Palette,
    path: PathLike,
    *,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Encode a palette and write it to `path`, choosing the coder by suffix."""
    path = Path(path)
    _write(path, encode_palette(_suffix(path), palette, logger=logger))


def save_gradients(
    gradients: Gradients,
    path: PathLike,
    *,
    logger: Optional[logging.Logger] = None,
) -> None:
    """Encode gradients and write them to `path`, choosing the coder by suffix."""
    path = Path(path)
    _write(path, encode_gradients(_suffix(path), gradients, logger=logger))
