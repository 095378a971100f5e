# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Hex color string parsing and formatting."""

from __future__ import annotations

import re
from typing import Optional

_HEX_DIGITS_RE = re.compile(r"^[0-9a-f]+$")


def parse_hex(text: str) -> tuple[float, float, float, float]:
    """
    Parse a hex color into (r, g, b, a) floats in [0, 1].

    Accepted forms (case-insensitive, optional '#' or '0x' prefix):
    - RGB       (12-bit, each digit doubled)
    - RGBA      (12-bit + alpha)
    - RRGGBB
    - RRGGBBAA

    Raises:
        ValueError: If the text is not one of the accepted forms.
    """
    hex_str = text.strip().lower()
    if hex_str.startswith("#"):
        hex_str = hex_str[1:]
    elif hex_str.startswith("0x"):
        hex_str = hex_str[2:]
    if not _HEX_DIGITS_RE.match(hex_str):
        raise ValueError(f"Not a hex color: {text!r}")

    if len(hex_str) in (3, 4):
        values = [int(ch, 16) * 17 for ch in hex_str]
    elif len(hex_str) in (6, 8):
        values = [int(hex_str[i:i + 2], 16) for i in range(0, len(hex_str), 2)]
    else:
        raise ValueError(f"Hex color must have 3, 4, 6 or 8 digits, got {text!r}")

    if len(values) == 3:
        values.append(255)
    r, g, b, a = (v / 255.0 for v in values)
    return r, g, b, a


def to_byte(value: float) -> int:
    """Map a [0, 1] float to 0..255, clamping and rounding."""
    return int(round(min(1.0, max(0.0, value)) * 255))


def format_hex(
    r: float,
    g: float,
    b: float,
    a: Optional[float] = None,
    hashmark: bool = True,
    uppercase: bool = False,
) -> str:
    """
    Format [0, 1] floats as "#rrggbb" (or "#rrggbbaa" when `a` is given).

    Args:
        r, g, b: Channel values
        a: Optional alpha; appended as a fourth byte when not None
        hashmark: Prefix with '#'
        uppercase: Use uppercase hex digits
    """
    channels = [r, g, b] if a is None else [r, g, b, a]
    digits = "".join(f"{to_byte(v):02x}" for v in channels)
    if uppercase:
        digits = digits.upper()
    return ("#" if hashmark else "") + digits
