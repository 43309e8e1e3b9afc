# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Color space conversions.

Conversion chain: packed ARGB ↔ linear RGB ↔ CIE XYZ ↔ CIE L*a*b*

Colors cross every public interface as packed 32-bit ARGB integers
(``0xAARRGGBB``). Linear RGB and XYZ components use a 0-100 scale, the
convention of the CAM16 model built on top of this module.

References:
- sRGB transfer function: IEC 61966-2-1
- CIE L*a*b*: CIE 15:2004, D65 white point

Scalar functions use ``math`` only. The ``*_array`` variants convert whole
pixel arrays with NumPy and agree with the scalar versions.
"""

from __future__ import annotations

import math
import re

import numpy as np
from numpy.typing import NDArray

from dynamictheme.utils.math_utils import clamp_int, matrix_multiply, round_half_up


# =============================================================================
# Constants
# =============================================================================

SRGB_TO_XYZ = (
    (0.41233895, 0.35762064, 0.18051042),
    (0.2126, 0.7152, 0.0722),
    (0.01932141, 0.11916382, 0.95034478),
)

XYZ_TO_SRGB = (
    (3.2413774792388685, -1.5376652402851851, -0.49885366846268053),
    (-0.9691452513005321, 1.8758853451067872, 0.04156585616912061),
    (0.05562093689691305, -0.20395524564742123, 1.0571799111220335),
)

WHITE_POINT_D65 = (95.047, 100.0, 108.883)

# CIE L* breakpoints
_LAB_E = 216.0 / 24389.0
_LAB_KAPPA = 24389.0 / 27.0

_HEX_RE = re.compile(r"^#?([0-9a-fA-F]{6}|[0-9a-fA-F]{8})$")


# =============================================================================
# Packed ARGB
# =============================================================================


def argb_from_rgb(red: int, green: int, blue: int) -> int:
    """Pack opaque 8-bit channels into an ARGB integer."""
    return (255 << 24) | ((red & 255) << 16) | ((green & 255) << 8) | (blue & 255)


def argb_from_linrgb(linrgb: list[float]) -> int:
    """Pack linear RGB components (0-100 scale) into an ARGB integer."""
    r = delinearized(linrgb[0])
    g = delinearized(linrgb[1])
    b = delinearized(linrgb[2])
    return argb_from_rgb(r, g, b)


def alpha_from_argb(argb: int) -> int:
    return (argb >> 24) & 255


def red_from_argb(argb: int) -> int:
    return (argb >> 16) & 255


def green_from_argb(argb: int) -> int:
    return (argb >> 8) & 255


def blue_from_argb(argb: int) -> int:
    return argb & 255


def is_opaque(argb: int) -> bool:
    return alpha_from_argb(argb) >= 255


# =============================================================================
# XYZ and L*a*b*
# =============================================================================


def argb_from_xyz(x: float, y: float, z: float) -> int:
    """Convert D65 XYZ (0-100 scale) to ARGB, clamping out-of-gamut values."""
    linear = matrix_multiply((x, y, z), XYZ_TO_SRGB)
    return argb_from_rgb(
        delinearized(linear[0]),
        delinearized(linear[1]),
        delinearized(linear[2]),
    )


def xyz_from_argb(argb: int) -> list[float]:
    """Convert ARGB to D65 XYZ on a 0-100 scale."""
    r = linearized(red_from_argb(argb))
    g = linearized(green_from_argb(argb))
    b = linearized(blue_from_argb(argb))
    return matrix_multiply((r, g, b), SRGB_TO_XYZ)


def argb_from_lab(l: float, a: float, b: float) -> int:
    wp = WHITE_POINT_D65
    fy = (l + 16.0) / 116.0
    fx = a / 500.0 + fy
    fz = fy - b / 200.0
    x = _lab_invf(fx) * wp[0]
    y = _lab_invf(fy) * wp[1]
    z = _lab_invf(fz) * wp[2]
    return argb_from_xyz(x, y, z)


def lab_from_argb(argb: int) -> list[float]:
    """
    Convert ARGB to CIE L*a*b*.

    Returns:
        [L*, a*, b*] with L* in [0, 100]
    """
    x, y, z = xyz_from_argb(argb)
    wp = WHITE_POINT_D65
    fx = _lab_f(x / wp[0])
    fy = _lab_f(y / wp[1])
    fz = _lab_f(z / wp[2])
    return [116.0 * fy - 16.0, 500.0 * (fx - fy), 200.0 * (fy - fz)]


def argb_from_lstar(lstar: float) -> int:
    """The gray with the given L*."""
    y = y_from_lstar(lstar)
    component = delinearized(y)
    return argb_from_rgb(component, component, component)


def lstar_from_argb(argb: int) -> float:
    y = xyz_from_argb(argb)[1]
    return 116.0 * _lab_f(y / 100.0) - 16.0


def y_from_lstar(lstar: float) -> float:
    """
    Convert L* to relative luminance Y (0-100).

    L* is the tone of HCT; Y drives contrast ratios.
    """
    return 100.0 * _lab_invf((lstar + 16.0) / 116.0)


def lstar_from_y(y: float) -> float:
    return _lab_f(y / 100.0) * 116.0 - 16.0


def white_point_d65() -> tuple[float, float, float]:
    return WHITE_POINT_D65


def _lab_f(t: float) -> float:
    if t > _LAB_E:
        return math.pow(t, 1.0 / 3.0)
    return (_LAB_KAPPA * t + 16.0) / 116.0


def _lab_invf(ft: float) -> float:
    ft3 = ft * ft * ft
    if ft3 > _LAB_E:
        return ft3
    return (116.0 * ft - 16.0) / _LAB_KAPPA


# =============================================================================
# sRGB transfer function
# =============================================================================


def linearized(rgb_component: int) -> float:
    """
    Convert an 8-bit sRGB channel to a linear component on a 0-100 scale.
    """
    normalized = rgb_component / 255.0
    if normalized <= 0.040449936:
        return normalized / 12.92 * 100.0
    return math.pow((normalized + 0.055) / 1.055, 2.4) * 100.0


def delinearized(rgb_component: float) -> int:
    """
    Convert a linear component (0-100 scale) to an 8-bit sRGB channel.

    Values outside the gamut are clamped to 0-255.
    """
    normalized = rgb_component / 100.0
    if normalized <= 0.0031308:
        delinearized_value = normalized * 12.92
    else:
        delinearized_value = 1.055 * math.pow(normalized, 1.0 / 2.4) - 0.055
    return clamp_int(0, 255, round_half_up(delinearized_value * 255.0))


# =============================================================================
# Hex strings
# =============================================================================


def hex_from_argb(argb: int) -> str:
    """Format as ``#RRGGBB`` (alpha dropped)."""
    return f"#{red_from_argb(argb):02X}{green_from_argb(argb):02X}{blue_from_argb(argb):02X}"


def argb_from_hex(hex_str: str) -> int:
    """
    Parse ``#RRGGBB`` or ``#AARRGGBB`` (leading ``#`` optional).

    Raises:
        ValueError: If the string is not 6 or 8 hex digits
    """
    m = _HEX_RE.match(hex_str.strip())
    if not m:
        raise ValueError(f"Invalid hex color: {hex_str!r}")
    digits = m.group(1)
    value = int(digits, 16)
    if len(digits) == 6:
        value |= 0xFF000000
    return value


# =============================================================================
# Vectorized (pixel arrays)
# =============================================================================

_SRGB_TO_XYZ_ARRAY = np.array(SRGB_TO_XYZ, dtype=np.float64)
_WHITE_POINT_ARRAY = np.array(WHITE_POINT_D65, dtype=np.float64)


def argb_array_from_rgb(rgb: NDArray[np.uint8]) -> NDArray[np.uint32]:
    """
    Pack an array of 8-bit RGB triples into opaque ARGB integers.

    Args:
        rgb: Array of shape (..., 3) with uint8 sRGB values

    Returns:
        Array of shape (...) with dtype uint32
    """
    rgb = np.asarray(rgb)
    if rgb.shape[-1] != 3:
        raise ValueError(f"Expected (..., 3) RGB array, got shape {rgb.shape}")
    rgb = rgb.astype(np.uint32)
    return (
        np.uint32(0xFF000000)
        | (rgb[..., 0] << np.uint32(16))
        | (rgb[..., 1] << np.uint32(8))
        | rgb[..., 2]
    )


def rgb_array_from_argb(argb: NDArray[np.integer]) -> NDArray[np.uint8]:
    """Unpack ARGB integers into an (..., 3) uint8 array."""
    argb = np.asarray(argb, dtype=np.uint32)
    return np.stack(
        [(argb >> 16) & 0xFF, (argb >> 8) & 0xFF, argb & 0xFF],
        axis=-1,
    ).astype(np.uint8)


def lab_from_argb_array(argb: NDArray[np.integer]) -> NDArray[np.float64]:
    """
    Convert an array of ARGB integers to CIE L*a*b*.

    Args:
        argb: Array of shape (N,) with packed ARGB values

    Returns:
        Array of shape (N, 3) with (L*, a*, b*) rows
    """
    normalized = rgb_array_from_argb(argb).astype(np.float64) / 255.0
    linear = np.where(
        normalized <= 0.040449936,
        normalized / 12.92,
        np.power((normalized + 0.055) / 1.055, 2.4),
    ) * 100.0

    xyz = np.einsum('...j,ij->...i', linear, _SRGB_TO_XYZ_ARRAY)
    t = xyz / _WHITE_POINT_ARRAY
    f = np.where(t > _LAB_E, np.cbrt(t), (_LAB_KAPPA * t + 16.0) / 116.0)

    lab = np.empty_like(f)
    lab[..., 0] = 116.0 * f[..., 1] - 16.0
    lab[..., 1] = 500.0 * (f[..., 0] - f[..., 1])
    lab[..., 2] = 200.0 * (f[..., 1] - f[..., 2])
    return lab
