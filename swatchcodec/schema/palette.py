# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Palette data model.

Design principles:
- Immutable: All types are frozen dataclasses
- Value semantics: Encoding never mutates a model; "changes" return copies
- Format-neutral: Coders map their wire formats onto these types

Color components are floats normalised per color space:
- RGB:  r, g, b in [0, 1]
- CMYK: c, m, y, k in [0, 1]
- LAB:  L in [0, 100], a and b roughly in [-128, 127]
- Gray: a single value in [0, 1]
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field, replace
from enum import Enum
from typing import TYPE_CHECKING, Iterable, Optional

from swatchcodec.errors import InvalidColorComponentCountError
from swatchcodec.schema.formats import PaletteFormat

if TYPE_CHECKING:
    from swatchcodec.colorspace.converter import ColorSpaceConverter


# =============================================================================
# Enumerations
# =============================================================================


class ColorSpace(Enum):
    """Channel model of a color."""

    RGB = "RGB"
    CMYK = "CMYK"
    LAB = "LAB"
    GRAY = "Gray"

    @property
    def component_count(self) -> int:
        """Number of components a color in this space carries."""
        return _COMPONENT_COUNTS[self]


_COMPONENT_COUNTS = {
    ColorSpace.RGB: 3,
    ColorSpace.CMYK: 4,
    ColorSpace.LAB: 3,
    ColorSpace.GRAY: 1,
}


class ColorType(Enum):
    """ASE color type tag, carried alongside the color space."""

    GLOBAL = "global"
    SPOT = "spot"
    NORMAL = "normal"


# =============================================================================
# Color
# =============================================================================


@dataclass(frozen=True, slots=True)
class Color:
    """
    A single named color.

    Attributes:
        color_space: Channel model for `components`
        components: Channel values, exactly `color_space.component_count` long
        name: Optional display name ("" when unnamed)
        alpha: Opacity in [0, 1]
        color_type: ASE global/spot/normal tag
    """
    color_space: ColorSpace
    components: tuple[float, ...]
    name: str = ""
    alpha: float = 1.0
    color_type: ColorType = ColorType.GLOBAL

    def __post_init__(self) -> None:
        """Validate the component arity and alpha range."""
        components = tuple(float(c) for c in self.components)
        object.__setattr__(self, "components", components)
        expected = self.color_space.component_count
        if len(components) != expected:
            raise InvalidColorComponentCountError(
                f"{self.color_space.value} requires {expected} components, "
                f"got {len(components)}"
            )
        if not 0.0 <= self.alpha <= 1.0:
            raise ValueError(f"Alpha must be 0-1, got {self.alpha}")
        object.__setattr__(self, "alpha", float(self.alpha))

    # -------------------------------------------------------------------------
    # Convenience constructors
    # -------------------------------------------------------------------------

    @classmethod
    def rgb(cls, r: float, g: float, b: float, a: float = 1.0, name: str = "",
            color_type: ColorType = ColorType.GLOBAL) -> Color:
        return cls(ColorSpace.RGB, (r, g, b), name=name, alpha=a, color_type=color_type)

    @classmethod
    def cmyk(cls, c: float, m: float, y: float, k: float, a: float = 1.0,
             name: str = "", color_type: ColorType = ColorType.GLOBAL) -> Color:
        return cls(ColorSpace.CMYK, (c, m, y, k), name=name, alpha=a, color_type=color_type)

    @classmethod
    def lab(cls, l: float, a: float, b: float, alpha: float = 1.0, name: str = "",
            color_type: ColorType = ColorType.GLOBAL) -> Color:
        return cls(ColorSpace.LAB, (l, a, b), name=name, alpha=alpha, color_type=color_type)

    @classmethod
    def gray(cls, white: float, a: float = 1.0, name: str = "",
             color_type: ColorType = ColorType.GLOBAL) -> Color:
        return cls(ColorSpace.GRAY, (white,), name=name, alpha=a, color_type=color_type)

    @classmethod
    def from_hex(cls, text: str, name: str = "") -> Color:
        """
        Build an RGB color from a hex string.

        Accepts 3, 4, 6 or 8 hex digits with an optional '#' or '0x' prefix.
        """
        from swatchcodec.colorspace.hexcolor import parse_hex
        r, g, b, a = parse_hex(text)
        return cls.rgb(r, g, b, a, name=name)

    # -------------------------------------------------------------------------
    # Derived values
    # -------------------------------------------------------------------------

    def converted(
        self,
        color_space: ColorSpace,
        converter: Optional[ColorSpaceConverter] = None,
    ) -> Color:
        """Return this color expressed in another color space."""
        if color_space is self.color_space:
            return self
        if converter is None:
            from swatchcodec.colorspace.converter import default_converter
            converter = default_converter()
        return converter.convert(self, color_space)

    def rgba(self, converter: Optional[ColorSpaceConverter] = None) -> tuple[float, float, float, float]:
        """sRGB components plus alpha, via the converter's display mapping."""
        if converter is None:
            from swatchcodec.colorspace.converter import default_converter
            converter = default_converter()
        return converter.to_display(self)

    @property
    def hex_rgb(self) -> str:
        """Hex string like "#ff8800" (alpha ignored)."""
        from swatchcodec.colorspace.hexcolor import format_hex
        r, g, b, _ = self.rgba()
        return format_hex(r, g, b)

    @property
    def hex_rgba(self) -> str:
        """Hex string like "#ff8800cc"."""
        from swatchcodec.colorspace.hexcolor import format_hex
        r, g, b, a = self.rgba()
        return format_hex(r, g, b, a)

    def with_alpha(self, alpha: float) -> Color:
        return replace(self, alpha=alpha)

    def named(self, name: str) -> Color:
        return replace(self, name=name)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary (defaults are omitted)."""
        d: dict = {}
        if self.name:
            d["name"] = self.name
        d["colorSpace"] = self.color_space.value
        d["colorComponents"] = list(self.components)
        if self.color_type is not ColorType.GLOBAL:
            d["colorType"] = self.color_type.value
        if self.alpha != 1.0:
            d["alpha"] = self.alpha
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Color:
        """Deserialize from dictionary."""
        return cls(
            color_space=ColorSpace(data["colorSpace"]),
            components=tuple(data["colorComponents"]),
            name=data.get("name", ""),
            alpha=data.get("alpha", 1.0),
            color_type=ColorType(data.get("colorType", ColorType.GLOBAL.value)),
        )


# =============================================================================
# Containers
# =============================================================================


@dataclass(frozen=True, slots=True)
class Group:
    """A named run of colors inside a palette."""
    colors: tuple[Color, ...] = ()
    name: str = ""

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"name": self.name, "colors": [c.to_dict() for c in self.colors]}

    @classmethod
    def from_dict(cls, data: dict) -> Group:
        """Deserialize from dictionary."""
        return cls(
            name=data.get("name", ""),
            colors=tuple(Color.from_dict(c) for c in data.get("colors", ())),
        )


@dataclass(frozen=True, slots=True)
class Palette:
    """
    Global colors plus named groups.

    Order is significant for both `colors` and `groups` (file order).
    The `format` tag records where a decoded palette came from and does
    not take part in equality.

    Attributes:
        colors: Global (ungrouped) colors
        groups: Named groups, each owning its colors
        name: Palette name ("" when unnamed)
        format: Originating file format, if decoded
    """
    colors: tuple[Color, ...] = ()
    groups: tuple[Group, ...] = ()
    name: str = ""
    format: Optional[PaletteFormat] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "colors", tuple(self.colors))
        object.__setattr__(self, "groups", tuple(self.groups))

    @classmethod
    def from_colors(cls, colors: Iterable[Color], name: str = "") -> Palette:
        """Build an ungrouped palette from a sequence of colors."""
        return cls(colors=tuple(colors), name=name)

    @property
    def is_empty(self) -> bool:
        return not self.colors and all(not g.colors for g in self.groups)

    def all_colors(self) -> tuple[Color, ...]:
        """Global colors followed by every group's colors, in order."""
        result = list(self.colors)
        for group in self.groups:
            result.extend(group.colors)
        return tuple(result)

    def color_named(self, name: str) -> Optional[Color]:
        """First color (global or grouped) with the given name."""
        for color in self.all_colors():
            if color.name == name:
                return color
        return None

    def converted(
        self,
        color_space: ColorSpace,
        converter: Optional[ColorSpaceConverter] = None,
    ) -> Palette:
        """Return a copy with every color converted to `color_space`."""
        def convert(colors: tuple[Color, ...]) -> tuple[Color, ...]:
            return tuple(c.converted(color_space, converter) for c in colors)

        return replace(
            self,
            colors=convert(self.colors),
            groups=tuple(replace(g, colors=convert(g.colors)) for g in self.groups),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary (empty fields are omitted)."""
        d: dict = {}
        if self.name:
            d["name"] = self.name
        if self.colors:
            d["colors"] = [c.to_dict() for c in self.colors]
        if self.groups:
            d["groups"] = [g.to_dict() for g in self.groups]
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Palette:
        """Deserialize from dictionary."""
        return cls(
            name=data.get("name", ""),
            colors=tuple(Color.from_dict(c) for c in data.get("colors", ())),
            groups=tuple(Group.from_dict(g) for g in data.get("groups", ())),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> Palette:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
