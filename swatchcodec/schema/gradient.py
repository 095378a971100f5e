# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Gradient data model.

A Gradient is an ordered set of color stops plus an optional, separate
track of transparency stops (the way Adobe GRD files store opacity).
Positions are not required to be sorted or to lie in [0, 1]; the
sorted and normalized forms are derived views computed on demand by
swatchcodec.gradient.
"""

from __future__ import annotations

import json
import uuid
from dataclasses import dataclass, field, replace
from typing import Iterable, Optional, Sequence

from swatchcodec.schema.formats import GradientsFormat
from swatchcodec.schema.palette import Color, Group, Palette


# =============================================================================
# Stops
# =============================================================================


@dataclass(frozen=True, slots=True)
class Stop:
    """A (position, color) control point."""
    position: float
    color: Color

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"position": self.position, "color": self.color.to_dict()}

    @classmethod
    def from_dict(cls, data: dict) -> Stop:
        """Deserialize from dictionary."""
        return cls(position=data["position"], color=Color.from_dict(data["color"]))


@dataclass(frozen=True, slots=True)
class TransparencyStop:
    """
    A point on the opacity track.

    Attributes:
        position: Location along the gradient
        value: Opacity (0.0 = transparent, 1.0 = opaque)
        midpoint: Where the blend to the next stop reaches halfway (0-1)
    """
    position: float
    value: float
    midpoint: float = 0.5

    def __post_init__(self) -> None:
        """Validate opacity range."""
        if not 0.0 <= self.value <= 1.0:
            raise ValueError(f"Transparency value must be 0-1, got {self.value}")

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        return {"position": self.position, "value": self.value, "midpoint": self.midpoint}

    @classmethod
    def from_dict(cls, data: dict) -> TransparencyStop:
        """Deserialize from dictionary."""
        return cls(
            position=data["position"],
            value=data["value"],
            midpoint=data.get("midpoint", 0.5),
        )


# =============================================================================
# Gradient
# =============================================================================


@dataclass(frozen=True, slots=True)
class Gradient:
    """
    A color gradient.

    The `id` is generated per instance for external lookup (for example a
    UI selection) and does not take part in equality.

    Attributes:
        stops: Color stops in file order
        transparency_stops: Optional separate opacity track
        name: Optional gradient name
        id: Unique identifier
    """
    stops: tuple[Stop, ...] = ()
    transparency_stops: Optional[tuple[TransparencyStop, ...]] = None
    name: Optional[str] = None
    id: uuid.UUID = field(default_factory=uuid.uuid4, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "stops", tuple(self.stops))
        if self.transparency_stops is not None:
            object.__setattr__(self, "transparency_stops", tuple(self.transparency_stops))

    @classmethod
    def from_colors(
        cls,
        colors: Sequence[Color],
        positions: Optional[Sequence[float]] = None,
        name: Optional[str] = None,
    ) -> Gradient:
        """
        Build a gradient from colors.

        Args:
            colors: Stop colors in order
            positions: Stop positions; evenly spaced over [0, 1] when omitted
            name: Optional gradient name
        """
        if positions is None:
            count = len(colors)
            positions = [i / (count - 1) for i in range(count)] if count > 1 else [0.0] * count
        if len(positions) != len(colors):
            raise ValueError(
                f"Got {len(colors)} colors but {len(positions)} positions"
            )
        return cls(
            stops=tuple(Stop(p, c) for p, c in zip(positions, colors)),
            name=name,
        )

    @property
    def colors(self) -> tuple[Color, ...]:
        """Stop colors in stop order."""
        return tuple(s.color for s in self.stops)

    @property
    def positions(self) -> tuple[float, ...]:
        return tuple(s.position for s in self.stops)

    @property
    def has_transparency(self) -> bool:
        """True if there are transparency stops and any of them is not fully opaque."""
        if not self.transparency_stops:
            return False
        return any(t.value != 1.0 for t in self.transparency_stops)

    @property
    def transparency_map(self) -> tuple[TransparencyStop, ...]:
        """Explicit transparency stops, or one per color stop taken from its alpha."""
        if self.transparency_stops is not None:
            return self.transparency_stops
        return tuple(TransparencyStop(s.position, s.color.alpha) for s in self.stops)

    # -------------------------------------------------------------------------
    # Derived views (implemented in swatchcodec.gradient)
    # -------------------------------------------------------------------------

    @property
    def sorted(self) -> Gradient:
        """Stops (and transparency stops) ascending by position, stable."""
        from swatchcodec.gradient.processing import sorted_gradient
        return sorted_gradient(self)

    def normalized(self) -> Gradient:
        """Stops remapped so the minimum position is 0 and the maximum is 1."""
        from swatchcodec.gradient.processing import normalized
        return normalized(self)

    def merge_transparency_stops(self) -> Gradient:
        """Fold the transparency track into the color stops' alpha."""
        from swatchcodec.gradient.processing import merge_transparency_stops
        return merge_transparency_stops(self)

    def merging_identical_neighbouring_stops(self) -> Gradient:
        """Collapse consecutive stops with equal position and color."""
        from swatchcodec.gradient.processing import merge_identical_neighbouring_stops
        return merge_identical_neighbouring_stops(self)

    def with_transparency_map(self) -> Gradient:
        """Copy whose opacity lives in `transparency_stops` and whose colors are opaque."""
        from swatchcodec.gradient.processing import with_transparency_map
        return with_transparency_map(self)

    def removing_transparency(self) -> Gradient:
        """Copy with opaque colors and no transparency track."""
        return replace(
            self,
            stops=tuple(Stop(s.position, s.color.with_alpha(1.0)) for s in self.stops),
            transparency_stops=None,
        )

    def color_at(self, t: float) -> Color:
        """Sample the gradient at t in [0, 1]."""
        from swatchcodec.gradient.processing import color_at
        return color_at(self, t)

    def colors_at(self, ts: Iterable[float]) -> tuple[Color, ...]:
        """Sample the gradient at several t values."""
        from swatchcodec.gradient.snapshot import Snapshot
        return Snapshot(self).colors_at(ts)

    def sample(self, count: int) -> tuple[Color, ...]:
        """`count` evenly spaced colors including both ends."""
        from swatchcodec.gradient.snapshot import Snapshot
        return Snapshot(self).colors(count)

    # -------------------------------------------------------------------------
    # Serialization
    # -------------------------------------------------------------------------

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d: dict = {}
        if self.name is not None:
            d["name"] = self.name
        d["stops"] = [s.to_dict() for s in self.stops]
        if self.transparency_stops is not None:
            d["transparencyStops"] = [t.to_dict() for t in self.transparency_stops]
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Gradient:
        """Deserialize from dictionary."""
        tstops = data.get("transparencyStops")
        return cls(
            name=data.get("name"),
            stops=tuple(Stop.from_dict(s) for s in data["stops"]),
            transparency_stops=(
                tuple(TransparencyStop.from_dict(t) for t in tstops)
                if tstops is not None else None
            ),
        )


# =============================================================================
# Gradients
# =============================================================================


@dataclass(frozen=True, slots=True)
class Gradients:
    """
    An ordered collection of gradients.

    Attributes:
        gradients: The gradients, in file order
        name: Optional collection name
        format: Originating file format, if decoded (not compared)
    """
    gradients: tuple[Gradient, ...] = ()
    name: Optional[str] = None
    format: Optional[GradientsFormat] = field(default=None, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "gradients", tuple(self.gradients))

    def __len__(self) -> int:
        return len(self.gradients)

    def __iter__(self):
        return iter(self.gradients)

    def find(self, gradient_id: uuid.UUID) -> Optional[Gradient]:
        """Gradient with the given id, or None."""
        for gradient in self.gradients:
            if gradient.id == gradient_id:
                return gradient
        return None

    def find_named(self, name: str) -> Optional[Gradient]:
        """First gradient with the given name, or None."""
        for gradient in self.gradients:
            if gradient.name == name:
                return gradient
        return None

    def palette(self) -> Palette:
        """A palette with one group per gradient holding its stop colors."""
        return Palette(
            name=self.name or "",
            groups=tuple(Group(colors=g.colors, name=g.name or "") for g in self.gradients),
        )

    def to_dict(self) -> dict:
        """Serialize to dictionary."""
        d: dict = {"gradients": [g.to_dict() for g in self.gradients]}
        if self.name is not None:
            d["name"] = self.name
        return d

    @classmethod
    def from_dict(cls, data: dict) -> Gradients:
        """Deserialize from dictionary."""
        return cls(
            gradients=tuple(Gradient.from_dict(g) for g in data.get("gradients", ())),
            name=data.get("name"),
        )

    def to_json(self, indent: Optional[int] = 2) -> str:
        """Serialize to JSON string."""
        return json.dumps(self.to_dict(), indent=indent, ensure_ascii=False)

    @classmethod
    def from_json(cls, json_str: str) -> Gradients:
        """Deserialize from JSON string."""
        return cls.from_dict(json.loads(json_str))
