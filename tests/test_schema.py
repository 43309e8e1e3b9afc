# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""Tests for theme records, user preferences and swatches."""

import json
from datetime import datetime

import pytest

from dynamictheme.contrast import ratio_of_tones
from dynamictheme.dynamiccolor import ContrastLevel, Variant
from dynamictheme.runtime import ExportFormat, export_kotlin
from dynamictheme.schema import (
    CACHED_ROLES,
    INVALID_ID,
    NOT_SAVED_ID,
    Swatch,
    ThemeRecord,
    UserPreferences,
    swatches_from_colors,
)
from dynamictheme.scheme import DynamicScheme
from dynamictheme.score import GOOGLE_BLUE
from dynamictheme.utils.color_utils import lstar_from_argb

SOURCE = 0xFF6750A4
TIMESTAMP = datetime(2024, 5, 1, 12, 30, 0)


@pytest.fixture(scope="module")
def record():
    return ThemeRecord.from_source("Lavender", SOURCE, Variant.TONAL_SPOT, id=7, timestamp=TIMESTAMP)


class TestThemeRecord:
    """Creation, validation and scheme regeneration."""

    def test_from_source(self, record):
        assert record.id == 7
        assert record.name == "Lavender"
        assert record.source_argb == SOURCE
        assert record.variant is Variant.TONAL_SPOT
        assert record.timestamp == TIMESTAMP
        assert set(record.roles) == set(CACHED_ROLES)

    def test_cached_roles_from_light_scheme(self, record, light_scheme):
        for role in CACHED_ROLES:
            assert record.roles[role] == light_scheme[role]

    def test_default_id_and_timestamp(self):
        record = ThemeRecord.from_source("New", SOURCE, Variant.NEUTRAL)
        assert record.id == NOT_SAVED_ID
        assert isinstance(record.timestamp, datetime)

    def test_from_dark_scheme_caches_light_roles(self, record, dark_scheme):
        from_dark = ThemeRecord.from_scheme(dark_scheme, "Lavender", id=7, timestamp=TIMESTAMP)
        assert from_dark == record

    def test_from_high_contrast_scheme(self, record):
        scheme = DynamicScheme.create(SOURCE, Variant.TONAL_SPOT, False, 1.0)
        assert ThemeRecord.from_scheme(scheme, "Lavender", 7, TIMESTAMP).roles == record.roles

    def test_to_scheme(self, record, light_scheme, dark_scheme):
        assert record.to_scheme() == light_scheme
        assert record.to_scheme(is_dark=True) == dark_scheme
        assert record.to_scheme(contrast_level=ContrastLevel.HIGH).contrast_level == 1.0

    def test_frozen(self, record):
        with pytest.raises(AttributeError):
            record.name = "Other"

    def test_roles_read_only(self, record):
        with pytest.raises(TypeError):
            record.roles["primary"] = -5
        with pytest.raises(TypeError):
            record.roles["bogus"] = 1
        assert ThemeRecord.from_dict(record.to_dict()) == record

    def test_roles_copied_from_input(self, record):
        roles = dict(record.roles)
        copy = ThemeRecord(1, "x", SOURCE, Variant.TONAL_SPOT, roles)
        roles["primary"] = 0
        assert copy.roles["primary"] == record.roles["primary"]

    def test_hashable(self, record):
        same = ThemeRecord.from_dict(record.to_dict())
        assert hash(same) == hash(record)
        assert len({record, same}) == 1

    def test_missing_role_rejected(self, record):
        roles = dict(record.roles)
        del roles["on_error"]
        with pytest.raises(ValueError, match="on_error"):
            ThemeRecord(1, "x", SOURCE, Variant.TONAL_SPOT, roles)

    def test_extra_role_rejected(self, record):
        roles = dict(record.roles, outline=0xFF000000)
        with pytest.raises(ValueError, match="outline"):
            ThemeRecord(1, "x", SOURCE, Variant.TONAL_SPOT, roles)

    def test_out_of_range_color_rejected(self, record):
        with pytest.raises(ValueError):
            ThemeRecord(1, "x", 1 << 32, Variant.TONAL_SPOT, dict(record.roles))
        with pytest.raises(ValueError):
            ThemeRecord(1, "x", SOURCE, Variant.TONAL_SPOT, dict(record.roles, primary=-1))

    def test_bad_id_rejected(self, record):
        with pytest.raises(ValueError):
            ThemeRecord(-2, "x", SOURCE, Variant.TONAL_SPOT, dict(record.roles))


class TestThemeRecordSerialization:
    """Flat dictionary and JSON forms."""

    def test_to_dict(self, record):
        d = record.to_dict()
        assert d["id"] == 7
        assert d["source_argb"] == SOURCE
        assert d["variant"] == Variant.TONAL_SPOT.value
        assert d["primary_argb"] == record.roles["primary"]
        assert d["timestamp"] == "2024-05-01T12:30:00"
        assert all(isinstance(v, (int, str)) for v in d.values())

    def test_dict_roundtrip(self, record):
        assert ThemeRecord.from_dict(record.to_dict()) == record

    def test_json_roundtrip(self, record):
        text = record.to_json()
        assert json.loads(text)["name"] == "Lavender"
        assert ThemeRecord.from_json(text) == record

    def test_missing_field(self, record):
        d = record.to_dict()
        del d["surface_argb"]
        with pytest.raises(KeyError):
            ThemeRecord.from_dict(d)

    def test_unknown_variant(self, record):
        d = dict(record.to_dict(), variant=42)
        with pytest.raises(ValueError):
            ThemeRecord.from_dict(d)

    def test_export_kotlin(self, record):
        assert record.export() == export_kotlin(SOURCE, Variant.TONAL_SPOT)

    def test_export_json(self, record):
        data = json.loads(record.export(ExportFormat.JSON))
        assert data["source"] == "#6750A4"
        assert len(data["schemes"]) == 6


class TestUserPreferences:
    """The current theme choice."""

    def test_defaults(self):
        prefs = UserPreferences()
        assert prefs.id == INVALID_ID
        assert prefs.name == ""
        assert prefs.source_argb == GOOGLE_BLUE
        assert prefs.variant is Variant.TONAL_SPOT

    def test_roundtrip(self):
        prefs = UserPreferences(id=3, name="Ocean", source_argb=0xFF006A6A, variant=Variant.VIBRANT)
        assert UserPreferences.from_dict(prefs.to_dict()) == prefs

    def test_from_empty_dict(self):
        assert UserPreferences.from_dict({}) == UserPreferences()

    def test_to_scheme(self, dark_scheme):
        prefs = UserPreferences(source_argb=SOURCE)
        assert prefs.to_scheme(is_dark=True) == dark_scheme

    def test_validation(self):
        with pytest.raises(ValueError):
            UserPreferences(id=-5)
        with pytest.raises(ValueError):
            UserPreferences(source_argb=-1)


class TestSwatch:
    """Display swatches with legible text."""

    @pytest.mark.parametrize(
        "argb", [0xFF000000, 0xFFFFFFFF, 0xFF6750A4, 0xFFFFFF00, 0xFF777777, 0xFF00AA00]
    )
    def test_text_contrast(self, argb):
        swatch = Swatch.from_argb("First", argb)
        tone = lstar_from_argb(argb)
        assert ratio_of_tones(tone, lstar_from_argb(swatch.title_text_argb)) >= 3.0
        assert ratio_of_tones(tone, lstar_from_argb(swatch.body_text_argb)) >= 4.5

    def test_labels(self):
        colors = [0xFF000000 + i for i in range(8)]
        swatches = swatches_from_colors(colors)
        assert [s.label for s in swatches] == [
            "First",
            "Second",
            "Third",
            "Fourth",
            "Fifth",
            "Sixth",
            "Color 7",
            "Color 8",
        ]
        assert [s.argb for s in swatches] == colors

    def test_empty(self):
        assert swatches_from_colors([]) == []
