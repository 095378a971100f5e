# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chains:
- sRGB → Linear RGB → XYZ (D65) → CIELAB
- sRGB ↔ CMYK (naive ink model, no ICC profile)
- sRGB ↔ Gray (Rec. 601 luma)
- HSB → sRGB

References:
- sRGB transfer curve: IEC 61966-2-1
- CIELAB: CIE 15:2004

All conversions are pure NumPy and operate on arrays of shape (..., N).
"""

from __future__ import annotations

import numpy as np
from numpy.typing import NDArray


# =============================================================================
# sRGB ↔ Linear RGB
# =============================================================================


def srgb_to_linear(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB values [0,1] to linear RGB.

    sRGB uses a piecewise gamma curve:
    - For values <= 0.04045: linear/12.92
    - For values > 0.04045: ((value + 0.055) / 1.055) ^ 2.4
    """
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.where(
        srgb <= 0.04045,
        srgb / 12.92,
        np.power((np.maximum(srgb, 0.0) + 0.055) / 1.055, 2.4)
    )


def linear_to_srgb(linear: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert linear RGB to sRGB values [0,1].

    Inverse of srgb_to_linear. Out-of-gamut results are clipped.
    """
    linear = np.asarray(linear, dtype=np.float64)
    # Clip negative values to avoid NaN in power function
    linear_safe = np.maximum(linear, 0.0)
    srgb = np.where(
        linear_safe <= 0.0031308,
        linear_safe * 12.92,
        1.055 * np.power(linear_safe, 1.0 / 2.4) - 0.055
    )
    return np.clip(srgb, 0.0, 1.0)


# =============================================================================
# Linear RGB ↔ XYZ ↔ LAB
# =============================================================================

# sRGB primaries, D65 white point
_RGB_TO_XYZ = np.array([
    [0.4124564, 0.3575761, 0.1804375],
    [0.2126729, 0.7151522, 0.0721750],
    [0.0193339, 0.1191920, 0.9503041],
], dtype=np.float64)

_XYZ_TO_RGB = np.linalg.inv(_RGB_TO_XYZ)

# D65 reference white
_WHITE_D65 = np.array([0.95047, 1.0, 1.08883], dtype=np.float64)

_EPSILON = 216.0 / 24389.0
_KAPPA = 24389.0 / 27.0


def srgb_to_lab(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CIELAB.

    Returns:
        Array of shape (..., 3) with L in [0, 100] and a, b unbounded
        (roughly -128..127 for sRGB colors)
    """
    linear = srgb_to_linear(srgb)
    xyz = np.einsum("ij,...j->...i", _RGB_TO_XYZ, linear)
    ratio = xyz / _WHITE_D65
    f = np.where(
        ratio > _EPSILON,
        np.cbrt(ratio),
        (_KAPPA * ratio + 16.0) / 116.0
    )
    L = 116.0 * f[..., 1] - 16.0
    a = 500.0 * (f[..., 0] - f[..., 1])
    b = 200.0 * (f[..., 1] - f[..., 2])
    return np.stack([L, a, b], axis=-1)


def lab_to_srgb(lab: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert CIELAB to sRGB [0,1].

    Inverse of srgb_to_lab; values outside the sRGB gamut are clipped.
    """
    lab = np.asarray(lab, dtype=np.float64)
    L, a, b = lab[..., 0], lab[..., 1], lab[..., 2]
    fy = (L + 16.0) / 116.0
    fx = fy + a / 500.0
    fz = fy - b / 200.0
    f = np.stack([fx, fy, fz], axis=-1)
    f3 = f ** 3
    ratio = np.where(f3 > _EPSILON, f3, (116.0 * f - 16.0) / _KAPPA)
    # Y uses the lightness directly below the linear threshold
    ratio[..., 1] = np.where(L > _KAPPA * _EPSILON, fy ** 3, L / _KAPPA)
    xyz = ratio * _WHITE_D65
    linear = np.einsum("ij,...j->...i", _XYZ_TO_RGB, xyz)
    return linear_to_srgb(linear)


# =============================================================================
# sRGB ↔ CMYK
# =============================================================================


def srgb_to_cmyk(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert sRGB [0,1] to CMYK [0,1] with the naive ink model.

    k = 1 - max(r, g, b); c = (1 - r - k) / (1 - k), likewise m and y.
    Pure black maps to (0, 0, 0, 1).
    """
    srgb = np.clip(np.asarray(srgb, dtype=np.float64), 0.0, 1.0)
    k = 1.0 - np.max(srgb, axis=-1)
    denom = 1.0 - k
    safe = np.where(denom == 0.0, 1.0, denom)
    cmy = np.where(
        (denom == 0.0)[..., None],
        0.0,
        (1.0 - srgb - k[..., None]) / safe[..., None]
    )
    return np.concatenate([cmy, k[..., None]], axis=-1)


def cmyk_to_srgb(cmyk: NDArray[np.float64]) -> NDArray[np.float64]:
    """Convert CMYK [0,1] to sRGB [0,1]: r = (1 - c)(1 - k), likewise g and b."""
    cmyk = np.clip(np.asarray(cmyk, dtype=np.float64), 0.0, 1.0)
    k = cmyk[..., 3:4]
    return (1.0 - cmyk[..., :3]) * (1.0 - k)


# =============================================================================
# sRGB ↔ Gray
# =============================================================================

_LUMA_WEIGHTS = np.array([0.299, 0.587, 0.114], dtype=np.float64)


def srgb_to_gray(srgb: NDArray[np.float64]) -> NDArray[np.float64]:
    """Rec. 601 luma of sRGB [0,1], shape (..., 1)."""
    srgb = np.asarray(srgb, dtype=np.float64)
    return np.asarray(np.clip(srgb @ _LUMA_WEIGHTS, 0.0, 1.0))[..., None]


def gray_to_srgb(gray: NDArray[np.float64]) -> NDArray[np.float64]:
    """Replicate a gray level into three sRGB channels."""
    gray = np.asarray(gray, dtype=np.float64)
    return np.repeat(gray[..., :1], 3, axis=-1)


# =============================================================================
# HSB → sRGB
# =============================================================================


def hsb_to_srgb(hsb: NDArray[np.float64]) -> NDArray[np.float64]:
    """
    Convert HSB (hue, saturation, brightness; all [0,1]) to sRGB [0,1].

    Hue 1.0 wraps to 0.0 (red).
    """
    hsb = np.asarray(hsb, dtype=np.float64)
    h = np.mod(hsb[..., 0], 1.0) * 6.0
    s = np.clip(hsb[..., 1], 0.0, 1.0)
    v = np.clip(hsb[..., 2], 0.0, 1.0)
    sector = np.floor(h).astype(int) % 6
    f = h - np.floor(h)
    p = v * (1.0 - s)
    q = v * (1.0 - s * f)
    t = v * (1.0 - s * (1.0 - f))
    choices = [
        np.stack([v, t, p], axis=-1),
        np.stack([q, v, p], axis=-1),
        np.stack([p, v, t], axis=-1),
        np.stack([p, q, v], axis=-1),
        np.stack([t, p, v], axis=-1),
        np.stack([v, p, q], axis=-1),
    ]
    return np.choose(sector[..., None], choices)
