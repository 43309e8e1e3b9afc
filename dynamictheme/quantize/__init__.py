# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Image quantization: reduce a pixel population to a bounded palette.

All quantizers are deterministic and ignore non-opaque pixels.
"""

from dynamictheme.quantize.celebi import quantize_celebi
from dynamictheme.quantize.quantizer_map import quantize_map
from dynamictheme.quantize.wsmeans import quantize_wsmeans
from dynamictheme.quantize.wu import QuantizerWu

__all__ = ["quantize_celebi", "quantize_map", "quantize_wsmeans", "QuantizerWu"]
