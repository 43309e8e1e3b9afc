# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Color temperature: warm/cool relationships between colors.

Temperature follows Ou et al., "A study of colour emotion and colour
preference" (2004): warm colors sit near hue 50 in L*a*b* and get warmer
with chroma. Relative temperature rescales that onto [0, 1] across every
hue at the input's chroma and tone, which yields complements and evenly
spaced analogous colors.
"""

from __future__ import annotations

import math
from typing import Optional

from dynamictheme.hct import Hct
from dynamictheme.utils.color_utils import lab_from_argb
from dynamictheme.utils.math_utils import round_half_up, sanitize_degrees_double, sanitize_degrees_int


def raw_temperature(color: Hct) -> float:
    """
    Warmth of a color, roughly -0.5 (cold) to 1.5 (hot).

    Args:
        color: Any color
    """
    lab = lab_from_argb(color.argb)
    hue = sanitize_degrees_double(math.degrees(math.atan2(lab[2], lab[1])))
    chroma = math.hypot(lab[1], lab[2])
    return -0.5 + 0.02 * math.pow(chroma, 1.07) * math.cos(
        math.radians(sanitize_degrees_double(hue - 50.0))
    )


def is_between(angle: float, a: float, b: float) -> bool:
    """Whether ``angle`` lies on the arc from ``a`` clockwise to ``b``."""
    if a < b:
        return a <= angle <= b
    return a <= angle or angle <= b


class TemperatureCache:
    """
    Temperature analysis around one input color.

    Holds the 361 colors sharing the input's chroma and tone at every whole
    hue (0 and 360 both included) and their temperatures. Results are
    memoized per instance.
    """

    def __init__(self, input_hct: Hct) -> None:
        self.input = input_hct
        self.hcts_by_hue: list[Hct] = [
            Hct.from_hct(float(hue), input_hct.chroma, input_hct.tone)
            for hue in range(361)
        ]
        self._temps_by_argb: dict[int, float] = {}
        for hct in self.hcts_by_hue + [input_hct]:
            self._temps_by_argb[hct.argb] = raw_temperature(hct)

        self.hcts_by_temp: list[Hct] = sorted(
            self.hcts_by_hue + [input_hct], key=self._temperature
        )
        self._complement: Optional[Hct] = None
        self._analogous: dict[tuple[int, int], list[Hct]] = {}

    def _temperature(self, hct: Hct) -> float:
        temp = self._temps_by_argb.get(hct.argb)
        if temp is None:
            temp = raw_temperature(hct)
            self._temps_by_argb[hct.argb] = temp
        return temp

    @property
    def coldest(self) -> Hct:
        return self.hcts_by_temp[0]

    @property
    def warmest(self) -> Hct:
        return self.hcts_by_temp[-1]

    def get_relative_temperature(self, hct: Hct) -> float:
        """
        Temperature of ``hct`` relative to the coldest (0.0) and warmest
        (1.0) colors at the input's chroma and tone.

        Returns 0.5 when every hue has the same temperature.
        """
        coldest_temp = self._temperature(self.coldest)
        temp_range = self._temperature(self.warmest) - coldest_temp
        if temp_range == 0.0:
            return 0.5
        return (self._temperature(hct) - coldest_temp) / temp_range

    def get_complement(self) -> Hct:
        """
        The color at the input's chroma and tone with the opposite
        relative temperature, searched along the arc away from the input.
        """
        if self._complement is not None:
            return self._complement

        coldest_hue = self.coldest.hue
        coldest_temp = self._temperature(self.coldest)
        warmest_hue = self.warmest.hue
        warmest_temp = self._temperature(self.warmest)
        temp_range = warmest_temp - coldest_temp

        start_hue_is_coldest_to_warmest = is_between(self.input.hue, coldest_hue, warmest_hue)
        start_hue = warmest_hue if start_hue_is_coldest_to_warmest else coldest_hue
        end_hue = coldest_hue if start_hue_is_coldest_to_warmest else warmest_hue
        direction_of_rotation = 1.0
        smallest_error = 1000.0
        answer = self.hcts_by_hue[round_half_up(self.input.hue)]

        complement_relative_temp = 1.0 - self.get_relative_temperature(self.input)
        hue_addend = 0.0
        while hue_addend <= 360.0:
            hue = sanitize_degrees_double(start_hue + direction_of_rotation * hue_addend)
            hue_addend += 1.0
            if not is_between(hue, start_hue, end_hue):
                continue
            possible_answer = self.hcts_by_hue[round_half_up(hue)]
            if temp_range == 0.0:
                relative_temp = 0.5
            else:
                relative_temp = (self._temperature(possible_answer) - coldest_temp) / temp_range
            error = abs(complement_relative_temp - relative_temp)
            if error < smallest_error:
                smallest_error = error
                answer = possible_answer

        self._complement = answer
        return answer

    def get_analogous_colors(self, count: int = 5, divisions: int = 12) -> list[Hct]:
        """
        Colors evenly spaced in temperature around the input.

        The hue circle is cut into ``divisions`` arcs of equal temperature
        change; the input sits in the middle of the returned list.

        Args:
            count: Number of colors to return, input included
            divisions: Number of temperature steps around the circle

        Returns:
            ``count`` colors, cooler neighbours first
        """
        key = (count, divisions)
        cached = self._analogous.get(key)
        if cached is not None:
            return list(cached)

        start_hue = sanitize_degrees_int(round_half_up(self.input.hue))
        start_hct = self.hcts_by_hue[start_hue]
        last_temp = self.get_relative_temperature(start_hct)

        all_colors = [start_hct]

        absolute_total_temp_delta = 0.0
        for i in range(360):
            hue = sanitize_degrees_int(start_hue + i)
            temp = self.get_relative_temperature(self.hcts_by_hue[hue])
            absolute_total_temp_delta += abs(temp - last_temp)
            last_temp = temp

        hue_addend = 1
        temp_step = absolute_total_temp_delta / divisions
        total_temp_delta = 0.0
        last_temp = self.get_relative_temperature(start_hct)
        while len(all_colors) < divisions:
            hue = sanitize_degrees_int(start_hue + hue_addend)
            hct = self.hcts_by_hue[hue]
            temp = self.get_relative_temperature(hct)
            total_temp_delta += abs(temp - last_temp)

            desired_total_temp_delta_for_index = len(all_colors) * temp_step
            index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
            index_addend = 1
            # A large jump in temperature can satisfy several divisions.
            while index_satisfied and len(all_colors) < divisions:
                all_colors.append(hct)
                desired_total_temp_delta_for_index = (len(all_colors) + index_addend) * temp_step
                index_satisfied = total_temp_delta >= desired_total_temp_delta_for_index
                index_addend += 1

            last_temp = temp
            hue_addend += 1
            if hue_addend > 360:
                while len(all_colors) < divisions:
                    all_colors.append(hct)
                break

        answers = [self.input]
        ccw_count = math.floor((count - 1.0) / 2.0)
        for i in range(1, ccw_count + 1):
            answers.insert(0, all_colors[(-i) % len(all_colors)])
        cw_count = count - ccw_count - 1
        for i in range(1, cw_count + 1):
            answers.append(all_colors[i % len(all_colors)])

        self._analogous[key] = answers
        return list(answers)
