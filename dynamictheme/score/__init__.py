# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Source color ranking.
"""

from dynamictheme.score.score import GOOGLE_BLUE, score

__all__ = ["GOOGLE_BLUE", "score"]
