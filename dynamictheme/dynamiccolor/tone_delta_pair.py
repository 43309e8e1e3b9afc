# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Tone constraints between two roles.

Containers and their accents, or fixed and fixed-dim roles, are resolved
together so they keep a minimum tone distance from each other.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from dynamictheme.dynamiccolor.dynamic_color import DynamicColor


class TonePolarity(Enum):
    """Which role of a pair sits closer to the background."""
    DARKER = "darker"
    LIGHTER = "lighter"
    NEARER = "nearer"
    FARTHER = "farther"


@dataclass(frozen=True, slots=True)
class ToneDeltaPair:
    """
    Two roles kept at least ``delta`` tones apart.

    Attributes:
        role_a: First role
        role_b: Second role
        delta: Minimum tone difference
        polarity: NEARER means role_a is nearer the background; LIGHTER and
            DARKER mean role_a is lighter or darker than role_b
        stay_together: Whether both roles move when one lands in the
            50-59 tone band
    """
    role_a: "DynamicColor"
    role_b: "DynamicColor"
    delta: float
    polarity: TonePolarity
    stay_together: bool
