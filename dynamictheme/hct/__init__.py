# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Perceptual color spaces: CAM16 and HCT.
"""

from dynamictheme.hct.cam16 import Cam16
from dynamictheme.hct.hct import Hct
from dynamictheme.hct.viewing_conditions import ViewingConditions

__all__ = ["Cam16", "Hct", "ViewingConditions"]
