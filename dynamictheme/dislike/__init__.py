# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

from dynamictheme.dislike.dislike_analyzer import fix_if_disliked, is_disliked

__all__ = ["fix_if_disliked", "is_disliked"]
