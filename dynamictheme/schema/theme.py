# Copyright (c) 2026 Dynamictheme
# SPDX-License-Identifier: MIT

"""
Theme records for persistence and display.

Records carry only what is needed to regenerate a scheme: the source
color and the variant. ThemeRecord additionally caches a few light-scheme
roles so a theme list can be previewed without building schemes. The cache
is never the source of truth; to_scheme() always regenerates.

All types are frozen dataclasses with flat to_dict / from_dict forms
(integers and strings only) for storage engines.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from datetime import datetime
from types import MappingProxyType
from typing import Mapping, Optional, Sequence, Union

from dynamictheme.dynamiccolor.contrast_level import ContrastLevel
from dynamictheme.dynamiccolor.variant import Variant
from dynamictheme.extract import get_contrast_color
from dynamictheme.runtime.serializers import ExportFormat, export_json, export_kotlin
from dynamictheme.scheme import DynamicScheme
from dynamictheme.score import GOOGLE_BLUE


# =============================================================================
# Constants
# =============================================================================

# Record ids: INVALID_ID marks "no record", NOT_SAVED_ID a record not yet stored
INVALID_ID = -1
NOT_SAVED_ID = 0

# Light-scheme roles cached on a ThemeRecord, in storage order
CACHED_ROLES = (
    "primary",
    "on_primary",
    "secondary",
    "on_secondary",
    "tertiary",
    "on_tertiary",
    "surface",
    "on_surface",
    "surface_variant",
    "on_surface_variant",
    "error",
    "on_error",
)

SWATCH_LABELS = ("First", "Second", "Third", "Fourth", "Fifth", "Sixth")


def _check_argb(name: str, value: int) -> None:
    if not 0 <= value <= 0xFFFFFFFF:
        raise ValueError(f"{name} must be a packed 32-bit ARGB value, got {value}")


def _check_id(value: int) -> None:
    if value < INVALID_ID:
        raise ValueError(f"id must be >= {INVALID_ID}, got {value}")


def _build_scheme(
    source_argb: int,
    variant: Variant,
    is_dark: bool,
    contrast_level: Union[float, ContrastLevel],
) -> DynamicScheme:
    return DynamicScheme.create(source_argb, variant, is_dark, contrast_level)


# =============================================================================
# Theme record
# =============================================================================


@dataclass(frozen=True, slots=True)
class ThemeRecord:
    """
    A named, persisted theme.

    Attributes:
        id: Storage id; NOT_SAVED_ID until stored
        name: Display name
        source_argb: Seed color the scheme is generated from
        variant: Scheme variant
        roles: Cached light-scheme colors, role name to packed ARGB, for
            exactly the roles in CACHED_ROLES. Stored as a read-only copy.
        timestamp: Time of the last update
    """
    id: int
    name: str
    source_argb: int
    variant: Variant
    roles: Mapping[str, int]
    timestamp: datetime = field(default_factory=datetime.now)

    def __post_init__(self) -> None:
        _check_id(self.id)
        _check_argb("source_argb", self.source_argb)
        if set(self.roles) != set(CACHED_ROLES):
            missing = sorted(set(CACHED_ROLES) - set(self.roles))
            extra = sorted(set(self.roles) - set(CACHED_ROLES))
            raise ValueError(f"Cached roles mismatch: missing {missing}, unexpected {extra}")
        for role, argb in self.roles.items():
            _check_argb(role, argb)
        object.__setattr__(self, "roles", MappingProxyType(dict(self.roles)))

    def __hash__(self) -> int:
        return hash((
            self.id,
            self.name,
            self.source_argb,
            self.variant,
            tuple(sorted(self.roles.items())),
            self.timestamp,
        ))

    @classmethod
    def from_source(
        cls,
        name: str,
        source_argb: int,
        variant: Variant,
        id: int = NOT_SAVED_ID,
        timestamp: Optional[datetime] = None,
    ) -> ThemeRecord:
        """Create a record, caching roles from the light scheme at normal contrast."""
        scheme = _build_scheme(source_argb, variant, False, ContrastLevel.NORMAL)
        return cls.from_scheme(scheme, name, id=id, timestamp=timestamp)

    @classmethod
    def from_scheme(
        cls,
        scheme: DynamicScheme,
        name: str,
        id: int = NOT_SAVED_ID,
        timestamp: Optional[datetime] = None,
    ) -> ThemeRecord:
        """
        Snapshot a scheme.

        The cached roles always come from the light scheme at normal
        contrast; a dark or contrast-adjusted ``scheme`` only contributes
        its source color and variant.
        """
        if scheme.is_dark or scheme.contrast_level != 0.0:
            scheme = _build_scheme(
                scheme.source_color_argb, scheme.variant, False, ContrastLevel.NORMAL
            )
        return cls(
            id=id,
            name=name,
            source_argb=scheme.source_color_argb,
            variant=scheme.variant,
            roles={role: scheme[role] for role in CACHED_ROLES},
            timestamp=timestamp if timestamp is not None else datetime.now(),
        )

    def to_scheme(
        self,
        is_dark: bool = False,
        contrast_level: Union[float, ContrastLevel] = ContrastLevel.NORMAL,
    ) -> DynamicScheme:
        """Regenerate the full scheme from the source color and variant."""
        return _build_scheme(self.source_argb, self.variant, is_dark, contrast_level)

    def to_dict(self) -> dict:
        """
        Serialize to a flat dictionary.

        Colors are integers, the variant its ordinal and the timestamp an
        ISO 8601 string.
        """
        d = {
            "id": self.id,
            "name": self.name,
            "source_argb": self.source_argb,
            "variant": self.variant.value,
        }
        for role in CACHED_ROLES:
            d[f"{role}_argb"] = self.roles[role]
        d["timestamp"] = self.timestamp.isoformat()
        return d

    @classmethod
    def from_dict(cls, data: dict) -> ThemeRecord:
        """
        Deserialize from dictionary.

        Raises:
            KeyError: If a field is missing
            ValueError: If a field is out of range
        """
        return cls(
            id=int(data["id"]),
            name=data["name"],
            source_argb=int(data["source_argb"]),
            variant=Variant.from_ordinal(int(data["variant"])),
            roles={role: int(data[f"{role}_argb"]) for role in CACHED_ROLES},
            timestamp=datetime.fromisoformat(data["timestamp"]),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)

    @classmethod
    def from_json(cls, json_str: str) -> ThemeRecord:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))

    def export(self, format: ExportFormat = ExportFormat.KOTLIN) -> str:
        """
        Export the theme's six schemes as Kotlin (default) or JSON tokens.

        Args:
            format: An ExportFormat
        """
        if format is ExportFormat.KOTLIN:
            return export_kotlin(self.source_argb, self.variant)
        return export_json(self.source_argb, self.variant, format=format)


# =============================================================================
# User preferences
# =============================================================================


@dataclass(frozen=True, slots=True)
class UserPreferences:
    """
    The user's current theme choice.

    Attributes:
        id: Id of the ThemeRecord being edited, INVALID_ID if none
        name: Theme name
        source_argb: Seed color (default Google Blue)
        variant: Scheme variant (default Tonal spot)
    """
    id: int = INVALID_ID
    name: str = ""
    source_argb: int = GOOGLE_BLUE
    variant: Variant = Variant.TONAL_SPOT

    def __post_init__(self) -> None:
        _check_id(self.id)
        _check_argb("source_argb", self.source_argb)

    def to_scheme(
        self,
        is_dark: bool = False,
        contrast_level: Union[float, ContrastLevel] = ContrastLevel.NORMAL,
    ) -> DynamicScheme:
        return _build_scheme(self.source_argb, self.variant, is_dark, contrast_level)

    def to_dict(self) -> dict:
        """Serialize to dictionary; the variant is stored as its ordinal."""
        return {
            "id": self.id,
            "name": self.name,
            "source_argb": self.source_argb,
            "variant": self.variant.value,
        }

    @classmethod
    def from_dict(cls, data: dict) -> UserPreferences:
        """Deserialize from dictionary; missing fields take their defaults."""
        return cls(
            id=int(data.get("id", INVALID_ID)),
            name=data.get("name", ""),
            source_argb=int(data.get("source_argb", GOOGLE_BLUE)),
            variant=Variant.from_ordinal(int(data.get("variant", Variant.TONAL_SPOT.value))),
        )


# =============================================================================
# Swatch
# =============================================================================


@dataclass(frozen=True, slots=True)
class Swatch:
    """
    A color with text colors that stay legible on it.

    Attributes:
        label: Display label
        argb: Swatch color
        title_text_argb: Text color for large text, >= 3.0:1 against argb
        body_text_argb: Text color for body text, >= 4.5:1 against argb
    """
    label: str
    argb: int
    title_text_argb: int
    body_text_argb: int

    def __post_init__(self) -> None:
        _check_argb("argb", self.argb)
        _check_argb("title_text_argb", self.title_text_argb)
        _check_argb("body_text_argb", self.body_text_argb)

    @classmethod
    def from_argb(cls, label: str, argb: int) -> Swatch:
        """
        Swatch with white or black text, whichever contrasts more.

        Either white or black reaches at least 4.5:1 on any opaque color,
        so the same text color serves both title and body.
        """
        text = get_contrast_color(argb)
        return cls(label=label, argb=argb, title_text_argb=text, body_text_argb=text)


def swatches_from_colors(colors: Sequence[int]) -> list[Swatch]:
    """
    Label extracted source colors by rank ("First", "Second", ...).

    Colors beyond the sixth are labelled "Color 7", "Color 8" and so on.
    """
    swatches = []
    for index, argb in enumerate(colors):
        label = SWATCH_LABELS[index] if index < len(SWATCH_LABELS) else f"Color {index + 1}"
        swatches.append(Swatch.from_argb(label, argb))
    return swatches
