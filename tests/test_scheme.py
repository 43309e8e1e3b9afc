# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""Tests for dynamic schemes, variant rules and role resolution."""

import itertools

import pytest

from dynamictheme.config import ThemeDefaults
from dynamictheme.contrast import ratio_of_tones
from dynamictheme.dislike import is_disliked
from dynamictheme.dynamiccolor import ContrastLevel, Variant, material_dynamic_colors
from dynamictheme.hct import Hct
from dynamictheme.palettes import TonalPalette
from dynamictheme.scheme import VARIANT_RULES, DynamicScheme, build_palettes
from dynamictheme.scheme.rules import (
    ERROR_CHROMA,
    ERROR_HUE,
    AnalogousColor,
    ComplementColor,
    FixedChroma,
    ReducedChroma,
    RotatedHue,
    ScaledChroma,
    get_rotated_hue,
)
from dynamictheme.score import GOOGLE_BLUE
from dynamictheme.utils.color_utils import lstar_from_argb

SOURCES = (0xFF6750A4, 0xFF4285F4, 0xFFFF0000, 0xFF00AA00, 0xFF95884B, 0xFF808080)

# Roles drawn directly on another role at every contrast level
ON_ROLE_PAIRS = (
    ("primary", "on_primary"),
    ("secondary", "on_secondary"),
    ("tertiary", "on_tertiary"),
    ("error", "on_error"),
    ("surface", "on_surface"),
    ("background", "on_background"),
)

# Containers darken at raised contrast to stand out from the surface, so
# their text ratio can drop below the standard-contrast value
CONTAINER_PAIRS = (
    ("primary_container", "on_primary_container"),
    ("secondary_container", "on_secondary_container"),
    ("tertiary_container", "on_tertiary_container"),
    ("error_container", "on_error_container"),
)


def _ratio(scheme: DynamicScheme, a: str, b: str) -> float:
    return ratio_of_tones(lstar_from_argb(scheme[a]), lstar_from_argb(scheme[b]))


class TestPaletteRules:
    """Per-palette rules, each checked on its own."""

    def test_every_variant_has_rules(self):
        assert set(VARIANT_RULES) == set(Variant)

    def test_fixed_chroma(self):
        source = Hct.from_argb(0xFF6750A4)
        palette = FixedChroma(24.0, hue_offset=60.0).apply(source)
        assert palette.hue == pytest.approx((source.hue + 60.0) % 360.0)
        assert palette.chroma == 24.0

    def test_fixed_chroma_wraps_hue(self):
        source = Hct.from_argb(0xFFFF0000)
        palette = FixedChroma(48.0, hue_offset=-50.0).apply(source)
        assert 0.0 <= palette.hue < 360.0
        assert palette.hue == pytest.approx((source.hue - 50.0) % 360.0)

    def test_scaled_chroma(self):
        source = Hct.from_argb(0xFF6750A4)
        palette = ScaledChroma(scale=1.0 / 8.0, offset=4.0).apply(source)
        assert palette.hue == pytest.approx(source.hue)
        assert palette.chroma == pytest.approx(source.chroma / 8.0 + 4.0)

    def test_reduced_chroma(self):
        source = Hct.from_argb(0xFFFF0000)
        palette = ReducedChroma().apply(source)
        assert palette.chroma == pytest.approx(
            max(source.chroma - 32.0, source.chroma * 0.5)
        )

    def test_rotated_hue_band(self):
        # Hue 200 falls in the (191, 271) band of the expressive table
        source = Hct.from_hct(200.0, 40.0, 50.0)
        hues = (0.0, 21.0, 51.0, 121.0, 151.0, 191.0, 271.0, 321.0, 360.0)
        rotations = (45.0, 95.0, 45.0, 20.0, 45.0, 90.0, 45.0, 45.0, 45.0)
        expected = (source.hue + 90.0) % 360.0
        assert get_rotated_hue(source, hues, rotations) == pytest.approx(expected)
        palette = RotatedHue(hues, rotations, 24.0).apply(source)
        assert palette.hue == pytest.approx(expected)
        assert palette.chroma == 24.0

    def test_single_rotation(self):
        source = Hct.from_hct(350.0, 40.0, 50.0)
        assert get_rotated_hue(source, (0.0, 360.0), (20.0,)) == pytest.approx(
            (source.hue + 20.0) % 360.0
        )

    def test_complement_and_analogous_not_disliked(self):
        source = Hct.from_argb(0xFF2A5B3C)
        for rule in (ComplementColor(), AnalogousColor()):
            palette = rule.apply(source)
            assert isinstance(palette, TonalPalette)
            assert not is_disliked(palette.key_color)

    def test_monochrome_is_gray(self):
        palettes = build_palettes(Variant.MONOCHROME, Hct.from_argb(0xFFFF0000))
        assert all(p.chroma == 0.0 for p in palettes)

    def test_tonal_spot_rules(self):
        source = Hct.from_argb(0xFF6750A4)
        primary, secondary, tertiary, neutral, neutral_variant = build_palettes(
            Variant.TONAL_SPOT, source
        )
        assert (primary.chroma, secondary.chroma, tertiary.chroma) == (36.0, 16.0, 24.0)
        assert (neutral.chroma, neutral_variant.chroma) == (6.0, 8.0)
        assert primary.hue == pytest.approx(source.hue)

    def test_fidelity_keeps_source(self):
        source = Hct.from_argb(0xFF00AA00)
        primary = build_palettes(Variant.FIDELITY, source)[0]
        assert primary.hue == pytest.approx(source.hue)
        assert primary.chroma == pytest.approx(source.chroma)


class TestSchemeRoles:
    """Every role resolves for every combination of inputs."""

    @pytest.mark.parametrize(
        "variant,is_dark,contrast_level",
        list(itertools.product(Variant, (False, True), (-1.0, 0.0, 0.5, 1.0))),
    )
    def test_all_roles_resolve(self, variant, is_dark, contrast_level):
        scheme = DynamicScheme.create(0xFF6750A4, variant, is_dark, contrast_level)
        roles = scheme.scheme_roles()
        assert list(roles) == list(material_dynamic_colors.SCHEME_ROLE_NAMES)
        assert len(roles) == 35
        assert len(scheme.roles) == 35 + len(material_dynamic_colors.SUPPLEMENTARY_ROLES)
        for argb in scheme.roles.values():
            assert 0xFF000000 <= argb <= 0xFFFFFFFF

    def test_unknown_role_raises(self, light_scheme):
        with pytest.raises(KeyError):
            light_scheme["not_a_role"]

    def test_roles_read_only(self, light_scheme):
        with pytest.raises(TypeError):
            light_scheme.roles["primary"] = 0

    def test_lookup_by_color(self, light_scheme):
        primary = material_dynamic_colors.primary
        assert light_scheme.get_argb(primary) == light_scheme["primary"]
        assert light_scheme.get_hct(primary).argb == light_scheme["primary"]
        assert light_scheme.get_tone(primary) == pytest.approx(
            lstar_from_argb(light_scheme["primary"]), abs=0.5
        )

    def test_fixed_surfaces(self, light_scheme, dark_scheme):
        assert lstar_from_argb(light_scheme["surface"]) == pytest.approx(98.0, abs=0.5)
        assert lstar_from_argb(dark_scheme["surface"]) == pytest.approx(6.0, abs=0.5)

    def test_scrim_and_shadow_black(self, light_scheme):
        assert light_scheme["scrim"] == 0xFF000000
        assert light_scheme["shadow"] == 0xFF000000

    def test_error_palette(self, light_scheme):
        assert light_scheme.error_palette.hue == ERROR_HUE
        assert light_scheme.error_palette.chroma == ERROR_CHROMA
        assert Hct.from_argb(light_scheme["error"]).hue == pytest.approx(25.0, abs=3.0)


class TestSchemeValue:
    """Schemes are deterministic immutable values."""

    def test_deterministic(self):
        a = DynamicScheme.create(0xFF6750A4, Variant.VIBRANT, True, 0.5)
        b = DynamicScheme.create(0xFF6750A4, Variant.VIBRANT, True, 0.5)
        assert a == b
        assert hash(a) == hash(b)
        assert dict(a.roles) == dict(b.roles)

    def test_inputs_distinguish(self, light_scheme, dark_scheme):
        assert light_scheme != dark_scheme
        other = DynamicScheme.create(0xFF6750A4, Variant.NEUTRAL, False, 0.0)
        assert light_scheme != other

    def test_contrast_clamped(self):
        high = DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, 3.0)
        low = DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, -7.0)
        assert high.contrast_level == 1.0
        assert low.contrast_level == -1.0
        assert high == DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, 1.0)

    def test_named_contrast_level(self):
        named = DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, ContrastLevel.MEDIUM)
        assert named.contrast_level == 0.5
        assert named == DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, 0.5)

    def test_inputs_exposed(self, light_scheme):
        assert light_scheme.source_color_argb == 0xFF6750A4
        assert light_scheme.variant is Variant.TONAL_SPOT
        assert light_scheme.is_dark is False
        assert light_scheme.contrast_level == 0.0

    def test_explicit_palettes(self):
        source = Hct.from_argb(0xFF6750A4)
        palettes = build_palettes(Variant.TONAL_SPOT, source)
        scheme = DynamicScheme(source, Variant.TONAL_SPOT, False, 0.0, *palettes)
        assert scheme == DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, 0.0)

    def test_repr(self, light_scheme):
        assert "#6750A4" in repr(light_scheme).upper()


class TestEndToEnd:
    """Accessibility and design expectations across sources and variants."""

    def test_baseline_primary_tone(self, light_scheme):
        assert 30.0 <= lstar_from_argb(light_scheme["primary"]) <= 50.0

    @pytest.mark.parametrize(
        "source,variant,is_dark",
        list(itertools.product(SOURCES, Variant, (False, True))),
    )
    def test_on_primary_contrast(self, source, variant, is_dark):
        scheme = DynamicScheme.create(source, variant, is_dark, 0.0)
        assert _ratio(scheme, "primary", "on_primary") >= 3.0

    @pytest.mark.parametrize(
        "source,variant,is_dark",
        list(itertools.product(SOURCES[:3], Variant, (False, True))),
    )
    def test_contrast_never_decreases(self, source, variant, is_dark):
        schemes = [
            DynamicScheme.create(source, variant, is_dark, level)
            for level in (0.0, 0.5, 1.0)
        ]
        for role, on_role in ON_ROLE_PAIRS:
            ratios = [_ratio(scheme, role, on_role) for scheme in schemes]
            for lower, higher in zip(ratios, ratios[1:]):
                assert higher >= lower - 0.01, (role, on_role, ratios)

    def test_high_contrast_text(self):
        scheme = DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, 1.0)
        assert _ratio(scheme, "surface", "on_surface") >= 11.0


class TestReferenceColors:
    """Role colors pinned to the published Material color values."""

    @pytest.mark.parametrize(
        "role,expected",
        [
            ("primary", 0xFF555992),
            ("primary_container", 0xFFE0E0FF),
            ("on_primary_container", 0xFF11144B),
            ("surface", 0xFFFBF8FF),
            ("secondary", 0xFF5C5D72),
            ("tertiary", 0xFF78536B),
        ],
    )
    def test_tonal_spot_light(self, role, expected):
        scheme = DynamicScheme.create(0xFF0000FF, Variant.TONAL_SPOT, False, 0.0)
        assert scheme[role] == expected

    @pytest.mark.parametrize("role,expected", [("primary", 0xFFBEC2FF), ("surface", 0xFF131318)])
    def test_tonal_spot_dark(self, role, expected):
        scheme = DynamicScheme.create(0xFF0000FF, Variant.TONAL_SPOT, True, 0.0)
        assert scheme[role] == expected

    def test_baseline_primary(self, light_scheme):
        assert light_scheme["primary"] == 0xFF65558F

    def test_baseline_medium_contrast_container(self):
        scheme = DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, ContrastLevel.MEDIUM)
        assert scheme["primary_container"] == 0xFF7B6BA7
        assert scheme["on_primary_container"] == 0xFFFFFFFF

    def test_baseline_high_contrast_container_text(self):
        scheme = DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, ContrastLevel.HIGH)
        assert scheme["on_primary_container"] == 0xFFFFFFFF

    def test_vibrant_light(self):
        scheme = DynamicScheme.create(0xFF0000FF, Variant.VIBRANT, False, 0.0)
        assert scheme["primary"] == 0xFF343DFF
        assert scheme["on_primary_container"] == 0xFF00006E

    @pytest.mark.parametrize("variant", [Variant.FIDELITY, Variant.CONTENT])
    @pytest.mark.parametrize("source", [0xFF0000FF, 0xFF6750A4])
    @pytest.mark.parametrize("is_dark", [False, True])
    def test_source_variants_keep_source_in_container(self, variant, source, is_dark):
        scheme = DynamicScheme.create(source, variant, is_dark, 0.0)
        assert scheme["primary_container"] == source

    @pytest.mark.parametrize("level", [0.0, 0.5, 1.0])
    def test_monochrome_primary(self, level):
        light = DynamicScheme.create(0xFF0000FF, Variant.MONOCHROME, False, level)
        dark = DynamicScheme.create(0xFF0000FF, Variant.MONOCHROME, True, level)
        assert light["primary"] == 0xFF000000
        assert dark["primary"] == 0xFFFFFFFF


class TestContainerContrast:
    """Text on containers stays legible at every non-negative contrast level."""

    @pytest.mark.parametrize(
        "source,variant,is_dark",
        list(itertools.product(SOURCES, Variant, (False, True))),
    )
    def test_container_text_legible(self, source, variant, is_dark):
        for level in (0.0, 0.5, 1.0):
            scheme = DynamicScheme.create(source, variant, is_dark, level)
            for container, on_container in CONTAINER_PAIRS:
                # Within rounding of the 4.5:1 floor that white or black text reaches
                assert _ratio(scheme, container, on_container) >= 4.45, (
                    container, level,
                )

    def test_baseline_container_ratio_drops_at_medium(self, light_scheme):
        medium = DynamicScheme.create(0xFF6750A4, Variant.TONAL_SPOT, False, 0.5)
        standard = _ratio(light_scheme, "primary_container", "on_primary_container")
        raised = _ratio(medium, "primary_container", "on_primary_container")
        assert standard > 10.0
        assert 4.5 <= raised < standard


class TestVariant:
    """Variant helpers."""

    def test_label(self):
        assert Variant.TONAL_SPOT.label == "Tonal spot"
        assert Variant.MONOCHROME.label == "Monochrome"

    def test_keeps_source_color(self):
        assert {v for v in Variant if v.keeps_source_color} == {Variant.FIDELITY, Variant.CONTENT}

    def test_ordinal_roundtrip(self):
        for variant in Variant:
            assert Variant.from_ordinal(variant.value) is variant
        with pytest.raises(ValueError):
            Variant.from_ordinal(9)


class TestThemeDefaults:
    """Default schemes built at application start."""

    def test_build(self):
        light, dark = ThemeDefaults().build()
        assert light.source_color_argb == GOOGLE_BLUE
        assert not light.is_dark
        assert dark.is_dark
        assert light.variant is Variant.TONAL_SPOT

    def test_custom(self):
        light, _ = ThemeDefaults(source_argb=0xFF6750A4, variant=Variant.VIBRANT).build()
        assert light == DynamicScheme.create(0xFF6750A4, Variant.VIBRANT, False, 0.0)
