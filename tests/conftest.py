# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""Shared fixtures."""

import pytest

from dynamictheme.dynamiccolor import Variant
from dynamictheme.scheme import DynamicScheme

BASELINE_PURPLE = 0xFF6750A4


@pytest.fixture(scope="session")
def light_scheme() -> DynamicScheme:
    """Tonal spot light scheme of the baseline purple, standard contrast."""
    return DynamicScheme.create(BASELINE_PURPLE, Variant.TONAL_SPOT, False, 0.0)


@pytest.fixture(scope="session")
def dark_scheme() -> DynamicScheme:
    """Tonal spot dark scheme of the baseline purple, standard contrast."""
    return DynamicScheme.create(BASELINE_PURPLE, Variant.TONAL_SPOT, True, 0.0)
