# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
CAM16 viewing conditions.

The appearance of a color depends on the environment it is viewed in.
ViewingConditions precomputes every environment-dependent intermediate of
the CAM16 model so that color conversions only do per-color work.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import ClassVar, Optional, Sequence

from dynamictheme.utils.color_utils import WHITE_POINT_D65, y_from_lstar
from dynamictheme.utils.math_utils import lerp


@dataclass(frozen=True, slots=True)
class ViewingConditions:
    """
    Precomputed CAM16 environment.

    Attributes:
        n: Background luminance relative to the white point
        aw: Achromatic response of the white point
        nbb, ncb: Brightness and chromatic induction factors
        c: Exponential nonlinearity from the surround
        nc: Chromatic induction factor from the surround
        rgb_d: Per-channel degree of adaptation
        fl: Luminance-level adaptation factor
        fl_root: Fourth root of fl
        z: Base exponential nonlinearity
    """
    n: float
    aw: float
    nbb: float
    ncb: float
    c: float
    nc: float
    rgb_d: tuple[float, float, float]
    fl: float
    fl_root: float
    z: float

    DEFAULT: ClassVar["ViewingConditions"]

    @classmethod
    def make(
        cls,
        white_point: Optional[Sequence[float]] = None,
        adapting_luminance: float = -1.0,
        background_lstar: float = 50.0,
        surround: float = 2.0,
        discounting_illuminant: bool = False,
    ) -> "ViewingConditions":
        """
        Create viewing conditions from physical parameters.

        Args:
            white_point: XYZ of the white point (default D65)
            adapting_luminance: Luminance of the adapting field in lux;
                negative selects the standard value for a 200 lux room
                with a mid-gray background
            background_lstar: L* of the background (floored at 0.1)
            surround: 0 dark, 1 dim, 2 average
            discounting_illuminant: Whether the eye fully adapts to the
                illuminant
        """
        if white_point is None:
            white_point = WHITE_POINT_D65
        if adapting_luminance < 0.0:
            adapting_luminance = (200.0 / math.pi) * y_from_lstar(50.0) / 100.0

        background_lstar = max(0.1, background_lstar)

        xyz = white_point
        r_w = xyz[0] * 0.401288 + xyz[1] * 0.650173 + xyz[2] * -0.051461
        g_w = xyz[0] * -0.250268 + xyz[1] * 1.204414 + xyz[2] * 0.045854
        b_w = xyz[0] * -0.002079 + xyz[1] * 0.048952 + xyz[2] * 0.953127

        f = 0.8 + surround / 10.0
        if f >= 0.9:
            c = lerp(0.59, 0.69, (f - 0.9) * 10.0)
        else:
            c = lerp(0.525, 0.59, (f - 0.8) * 10.0)

        if discounting_illuminant:
            d = 1.0
        else:
            d = f * (1.0 - (1.0 / 3.6) * math.exp((-adapting_luminance - 42.0) / 92.0))
        d = min(max(d, 0.0), 1.0)

        nc = f
        rgb_d = (
            d * (100.0 / r_w) + 1.0 - d,
            d * (100.0 / g_w) + 1.0 - d,
            d * (100.0 / b_w) + 1.0 - d,
        )

        k = 1.0 / (5.0 * adapting_luminance + 1.0)
        k4 = k * k * k * k
        k4f = 1.0 - k4
        fl = k4 * adapting_luminance + 0.1 * k4f * k4f * math.pow(5.0 * adapting_luminance, 1.0 / 3.0)

        n = y_from_lstar(background_lstar) / white_point[1]
        z = 1.48 + math.sqrt(n)
        nbb = 0.725 / math.pow(n, 0.2)
        ncb = nbb

        rgb_a_factors = [
            math.pow(fl * rgb_d[0] * r_w / 100.0, 0.42),
            math.pow(fl * rgb_d[1] * g_w / 100.0, 0.42),
            math.pow(fl * rgb_d[2] * b_w / 100.0, 0.42),
        ]
        rgb_a = [400.0 * v / (v + 27.13) for v in rgb_a_factors]
        aw = (2.0 * rgb_a[0] + rgb_a[1] + 0.05 * rgb_a[2]) * nbb

        return cls(
            n=n,
            aw=aw,
            nbb=nbb,
            ncb=ncb,
            c=c,
            nc=nc,
            rgb_d=rgb_d,
            fl=fl,
            fl_root=math.pow(fl, 0.25),
            z=z,
        )

    @classmethod
    def default_with_background_lstar(cls, lstar: float) -> "ViewingConditions":
        """Standard conditions with a different background L*."""
        return cls.make(background_lstar=lstar)


ViewingConditions.DEFAULT = ViewingConditions.make()
