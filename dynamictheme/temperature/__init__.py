# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

from dynamictheme.temperature.temperature_cache import TemperatureCache, raw_temperature

__all__ = ["TemperatureCache", "raw_temperature"]
