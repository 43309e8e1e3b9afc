# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Dynamic colors: scheme roles resolved under contrast constraints.

A DynamicColor describes one role (e.g. "on_primary") as rules rather
than a value: which palette it draws from, its preferred tone, the
background(s) it must stand out against, and how much contrast it needs
at each contrast level. Resolving it against a DynamicScheme yields a
concrete tone, then a color.

Tone resolution, in order of precedence:

1. Roles in a ToneDeltaPair are solved together so they keep their
   minimum tone distance and stay out of the 50-59 band.
2. Roles with a background keep their preferred tone if it meets the
   contrast target, otherwise take the nearest tone that does. At
   negative contrast levels the minimum satisfying tone is always used.
3. Roles with two backgrounds pick a tone that works against both.

Unreachable contrast targets fall back to tone 0 or 100; resolution never
fails.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Callable, Optional

from dynamictheme.contrast import contrast
from dynamictheme.dynamiccolor.contrast_curve import ContrastCurve
from dynamictheme.dynamiccolor.tone_delta_pair import ToneDeltaPair, TonePolarity
from dynamictheme.hct import Hct
from dynamictheme.palettes import TonalPalette
from dynamictheme.utils.math_utils import clamp_double, round_half_up

if TYPE_CHECKING:
    from dynamictheme.scheme.dynamic_scheme import DynamicScheme


SchemeFn = Callable[["DynamicScheme"], float]


@dataclass(frozen=True, eq=False)
class DynamicColor:
    """
    One scheme role.

    Attributes:
        name: Role name, snake_case (e.g. "on_primary_container")
        palette: Palette of the role in a given scheme
        tone: Preferred tone in a given scheme, before contrast adjustment
        is_background: Whether other roles are drawn on top of this one;
            background roles avoid the 50-59 tone band
        background: The role this one must contrast against
        second_background: An additional role to contrast against
        contrast_curve: Required contrast ratio by contrast level
        tone_delta_pair: Tone constraint shared with another role
    """
    name: str
    palette: Callable[["DynamicScheme"], TonalPalette]
    tone: SchemeFn
    is_background: bool = False
    background: Optional[Callable[["DynamicScheme"], "DynamicColor"]] = None
    second_background: Optional[Callable[["DynamicScheme"], "DynamicColor"]] = None
    contrast_curve: Optional[ContrastCurve] = None
    tone_delta_pair: Optional[Callable[["DynamicScheme"], ToneDeltaPair]] = None

    def __post_init__(self) -> None:
        if self.background is not None and self.contrast_curve is None:
            raise ValueError(f"Role {self.name!r} has a background but no contrast curve")

    @classmethod
    def from_palette(
        cls,
        name: str,
        palette: Callable[["DynamicScheme"], TonalPalette],
        tone: SchemeFn,
    ) -> "DynamicColor":
        """A role with no contrast requirements."""
        return cls(name=name, palette=palette, tone=tone)

    # -------------------------------------------------------------------------
    # Resolution
    # -------------------------------------------------------------------------

    def get_argb(self, scheme: "DynamicScheme") -> int:
        return self.get_hct(scheme).argb

    def get_hct(self, scheme: "DynamicScheme") -> Hct:
        return self.palette(scheme).get_hct(self.get_tone(scheme))

    def get_tone(self, scheme: "DynamicScheme") -> float:
        """Resolved tone of this role in ``scheme`` (memoized by the scheme)."""
        return scheme.get_tone(self)

    def resolve_tone(self, scheme: "DynamicScheme") -> float:
        """
        Compute the tone of this role in ``scheme``.

        Called by DynamicScheme.get_tone(); use that instead so results
        are shared between roles.
        """
        if self.tone_delta_pair is not None:
            return self._resolve_pair_tone(scheme)

        answer = self.tone(scheme)
        if self.background is None:
            return answer

        decreasing_contrast = scheme.contrast_level < 0
        bg_tone = self.background(scheme).get_tone(scheme)
        desired_ratio = self.contrast_curve.get(scheme.contrast_level)

        if contrast.ratio_of_tones(bg_tone, answer) < desired_ratio:
            answer = foreground_tone(bg_tone, desired_ratio)
        if decreasing_contrast:
            answer = foreground_tone(bg_tone, desired_ratio)

        if self.is_background and 50 <= answer < 60:
            if contrast.ratio_of_tones(49, bg_tone) >= desired_ratio:
                answer = 49
            else:
                answer = 60

        if self.second_background is None:
            return answer

        bg_tone_1 = bg_tone
        bg_tone_2 = self.second_background(scheme).get_tone(scheme)
        upper = max(bg_tone_1, bg_tone_2)
        lower = min(bg_tone_1, bg_tone_2)

        if (
            contrast.ratio_of_tones(upper, answer) >= desired_ratio
            and contrast.ratio_of_tones(lower, answer) >= desired_ratio
        ):
            return answer

        # Darkest light tone and lightest dark tone that satisfy both
        light_option = contrast.lighter(upper, desired_ratio)
        dark_option = contrast.darker(lower, desired_ratio)
        availables = [
            option for option in (light_option, dark_option)
            if option != contrast.UNREACHABLE
        ]

        if tone_prefers_light_foreground(bg_tone_1) or tone_prefers_light_foreground(bg_tone_2):
            return 100.0 if light_option == contrast.UNREACHABLE else light_option
        if len(availables) == 1:
            return availables[0]
        return 0.0 if dark_option == contrast.UNREACHABLE else dark_option

    def _resolve_pair_tone(self, scheme: "DynamicScheme") -> float:
        pair = self.tone_delta_pair(scheme)
        delta = pair.delta
        decreasing_contrast = scheme.contrast_level < 0
        bg_tone = self.background(scheme).get_tone(scheme)

        a_is_nearer = (
            pair.polarity is TonePolarity.NEARER
            or (pair.polarity is TonePolarity.LIGHTER and not scheme.is_dark)
            or (pair.polarity is TonePolarity.DARKER and scheme.is_dark)
        )
        nearer = pair.role_a if a_is_nearer else pair.role_b
        farther = pair.role_b if a_is_nearer else pair.role_a
        am_nearer = self.name == nearer.name
        expansion_dir = 1.0 if scheme.is_dark else -1.0

        # 1st round: each role solved to its own contrast target
        n_contrast = nearer.contrast_curve.get(scheme.contrast_level)
        f_contrast = farther.contrast_curve.get(scheme.contrast_level)

        n_initial_tone = nearer.tone(scheme)
        if contrast.ratio_of_tones(bg_tone, n_initial_tone) >= n_contrast:
            n_tone = n_initial_tone
        else:
            n_tone = foreground_tone(bg_tone, n_contrast)

        f_initial_tone = farther.tone(scheme)
        if contrast.ratio_of_tones(bg_tone, f_initial_tone) >= f_contrast:
            f_tone = f_initial_tone
        else:
            f_tone = foreground_tone(bg_tone, f_contrast)

        if decreasing_contrast:
            n_tone = foreground_tone(bg_tone, n_contrast)
            f_tone = foreground_tone(bg_tone, f_contrast)

        if (f_tone - n_tone) * expansion_dir < delta:
            # 2nd round: push farther away to honor delta
            f_tone = clamp_double(0.0, 100.0, n_tone + delta * expansion_dir)
            if (f_tone - n_tone) * expansion_dir < delta:
                # 3rd round: pull nearer back
                n_tone = clamp_double(0.0, 100.0, f_tone - delta * expansion_dir)

        # Keep out of the 50-59 band
        if 50 <= n_tone < 60:
            if expansion_dir > 0:
                n_tone = 60.0
                f_tone = max(f_tone, n_tone + delta * expansion_dir)
            else:
                n_tone = 49.0
                f_tone = min(f_tone, n_tone + delta * expansion_dir)
        elif 50 <= f_tone < 60:
            if pair.stay_together:
                if expansion_dir > 0:
                    n_tone = 60.0
                    f_tone = max(f_tone, n_tone + delta * expansion_dir)
                else:
                    n_tone = 49.0
                    f_tone = min(f_tone, n_tone + delta * expansion_dir)
            else:
                f_tone = 60.0 if expansion_dir > 0 else 49.0

        return n_tone if am_nearer else f_tone

    def __repr__(self) -> str:
        return f"DynamicColor({self.name!r})"


# =============================================================================
# Foreground helpers
# =============================================================================


def foreground_tone(bg_tone: float, ratio: float) -> float:
    """
    Tone with at least ``ratio`` contrast against ``bg_tone``.

    Prefers a lighter foreground on backgrounds below tone 60. When neither
    direction reaches the ratio, picks the one that gets closer.
    """
    lighter_tone = contrast.lighter_unsafe(bg_tone, ratio)
    darker_tone = contrast.darker_unsafe(bg_tone, ratio)
    lighter_ratio = contrast.ratio_of_tones(lighter_tone, bg_tone)
    darker_ratio = contrast.ratio_of_tones(darker_tone, bg_tone)

    if tone_prefers_light_foreground(bg_tone):
        # Both directions fail by about the same amount: stay light rather
        # than flipping to a dark foreground.
        negligible_difference = (
            abs(lighter_ratio - darker_ratio) < 0.1
            and lighter_ratio < ratio
            and darker_ratio < ratio
        )
        if lighter_ratio >= ratio or lighter_ratio >= darker_ratio or negligible_difference:
            return lighter_tone
        return darker_tone

    if darker_ratio >= ratio or darker_ratio >= lighter_ratio:
        return darker_tone
    return lighter_tone


def tone_prefers_light_foreground(tone: float) -> bool:
    """Tones below 60 look better with light text on them."""
    return round_half_up(tone) < 60
