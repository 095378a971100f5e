# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""
Adobe Photoshop gradient (.grd) coder.

Every file starts with "8BGR" and a big-endian u16 version.

Version 5 (Photoshop 6 and later) skips 22 bytes and then holds a
Photoshop action descriptor: a `GrdL` list of `Gradient` objects. Each
object is either a custom gradient (`CstS`: name, interpolation, color
stops, transparency stops) or a noise gradient (`ClNs`), which is read
and dropped.

Version 3 is a flat record list:

    u16 count
    per gradient:
        i8 name length, ASCII name
        i16 stop count
        stop*:  u32 location (0-4096), u32 midpoint (%), i16 model,
                4 x u16 channels, i16 type (0 user, 1 fg, 2 bg)
        i16 transparency count
        tstop*: u32 location, u32 midpoint, i16 opacity (0-255)
        6 bytes padding

Only version 3 is written. PaintShop Pro gradients (.pspgradient) use
the same layout.
"""

from __future__ import annotations

import logging
from typing import Optional

import numpy as np

from swatchcodec.binary import ByteReader, ByteWriter
from swatchcodec.coders.base import GradientsCoder
from swatchcodec.colorspace.conversions import hsb_to_srgb
from swatchcodec.errors import (
    InvalidFormatError,
    InvalidHeaderError,
    InvalidStringError,
    InvalidVersionError,
    UnknownColorModelError,
    UnsupportedFormatError,
)
from swatchcodec.schema import (
    Color,
    ColorSpace,
    Gradient,
    Gradients,
    GradientsFormat,
    Stop,
    TransparencyStop,
)

logger = logging.getLogger(__name__)

MAGIC = b"8BGR"

LOCATION_SCALE = 4096.0
V5_HEADER_PADDING = 22
V3_TRAILER = 6
V3_NAME_MAX = 127

# v3 color model codes
_V3_RGB = 0
_V3_HSB = 1
_V3_CMYK = 2
_V3_LAB = 7
_V3_GRAY = 8

_V3_MODEL_CODES = {
    ColorSpace.RGB: _V3_RGB,
    ColorSpace.CMYK: _V3_CMYK,
    ColorSpace.LAB: _V3_LAB,
    ColorSpace.GRAY: _V3_GRAY,
}

_STOP_TYPES = {"UsrS", "FrgC", "BckC"}


# =============================================================================
# Version 5 descriptor reading
# =============================================================================


class _DescriptorReader:
    """
    Typed reads over a Photoshop action descriptor.

    Each `expect`-style method checks the 4-char key or type tag and
    raises InvalidFormatError on a mismatch.
    """

    def __init__(self, reader: ByteReader) -> None:
        self.reader = reader

    def tag(self) -> str:
        return self.reader.read_ascii(4)

    def typename(self) -> str:
        """u32 length (0 means 4), then that many bytes."""
        length = self.reader.read_uint32() or 4
        raw = self.reader.read_bytes(length)
        try:
            return raw.decode("utf-8")
        except UnicodeDecodeError as exc:
            raise InvalidStringError(f"Invalid descriptor key {raw!r}") from exc

    def ucs2(self) -> str:
        """u32 code-unit count, then UTF-16BE text with an optional trailing NUL."""
        count = self.reader.read_uint32()
        return self.reader.read_utf16(count).removesuffix("\x00")

    def expect_key(self, key: str) -> None:
        found = self.typename()
        if found != key:
            raise InvalidFormatError(f"Expected descriptor key {key!r}, found {found!r}")

    def expect_tag(self, tag: str) -> None:
        found = self.tag()
        if found != tag:
            raise InvalidFormatError(f"Expected descriptor type {tag!r}, found {found!r}")

    def objc(self) -> tuple[str, str, int]:
        """Object header: (display name, class id, item count)."""
        self.expect_tag("Objc")
        name = self.ucs2()
        class_id = self.typename()
        return name, class_id, self.reader.read_int32()

    def list_length(self, key: str) -> int:
        self.expect_key(key)
        self.expect_tag("VlLs")
        return self.reader.read_int32()

    def double(self, key: str) -> float:
        self.expect_key(key)
        self.expect_tag("doub")
        return self.reader.read_float64()

    def long(self) -> int:
        self.expect_tag("long")
        return self.reader.read_uint32()

    def keyed_long(self, key: str) -> int:
        self.expect_key(key)
        return self.long()

    def unit_float(self, unit: str) -> float:
        self.expect_tag("UntF")
        self.expect_tag(unit)
        return self.reader.read_float64()

    def enum(self, key: str) -> tuple[str, str]:
        self.expect_key(key)
        self.expect_tag("enum")
        return self.typename(), self.typename()

    def boolean(self, key: str) -> bool:
        self.expect_key(key)
        self.expect_tag("bool")
        return self.reader.read_uint8() != 0

    def text(self, key: str) -> str:
        self.expect_key(key)
        self.expect_tag("TEXT")
        return self.ucs2()


def _read_v5_color(desc: _DescriptorReader) -> Color:
    """A `Clr ` object in one of the RGBC/HSBC/CMYC/Grsc/LbCl models."""
    desc.expect_key("Clr ")
    _, model, _ = desc.objc()
    if model == "RGBC":
        r = desc.double("Rd  ")
        g = desc.double("Grn ")
        b = desc.double("Bl  ")
        return Color.rgb(*(min(1.0, max(0.0, v / 255.0)) for v in (r, g, b)))
    if model == "HSBC":
        desc.expect_key("H   ")
        h = desc.unit_float("#Ang")
        s = desc.double("Strt")
        v = desc.double("Brgh")
        rgb = hsb_to_srgb(np.array([h / 360.0, s / 100.0, v / 100.0], dtype=np.float64))
        return Color.rgb(*(float(c) for c in np.clip(rgb, 0.0, 1.0)))
    if model == "CMYC":
        values = [desc.double(k) for k in ("Cyn ", "Mgnt", "Ylw ", "Blck")]
        return Color.cmyk(*(v / 100.0 for v in values))
    if model == "Grsc":
        return Color.gray(desc.double("Gry ") / 100.0)
    if model == "LbCl":
        return Color.lab(desc.double("Lmnc"), desc.double("A   "), desc.double("B   "))
    if model == "BkCl":
        raise UnsupportedFormatError("Book colors are not supported")
    raise UnknownColorModelError(model)


def _read_v5_color_stop(desc: _DescriptorReader) -> Stop:
    _, _, count = desc.objc()
    if count == 4:
        color = _read_v5_color(desc)
    elif count == 3:
        # Foreground/background stops carry no color of their own
        color = Color.rgb(0.0, 0.0, 0.0)
    else:
        raise InvalidFormatError(f"Unexpected color stop item count {count}")

    _, stop_type = desc.enum("Type")
    if stop_type not in _STOP_TYPES:
        raise InvalidFormatError(f"Unsupported color stop type {stop_type!r}")
    location = desc.keyed_long("Lctn")
    desc.keyed_long("Mdpn")
    return Stop(location / LOCATION_SCALE, color)


def _read_v5_transparency_stop(desc: _DescriptorReader) -> TransparencyStop:
    _, class_id, count = desc.objc()
    if class_id != "TrnS" or count != 3:
        raise InvalidFormatError(f"Expected a TrnS object with 3 items, found {class_id!r}/{count}")
    desc.expect_key("Opct")
    opacity = desc.unit_float("#Prc")
    location = desc.keyed_long("Lctn")
    midpoint = desc.keyed_long("Mdpn")
    return TransparencyStop(
        position=location / LOCATION_SCALE,
        value=min(1.0, max(0.0, opacity / 100.0)),
        midpoint=midpoint / 100.0,
    )


def _skip_v5_noise(desc: _DescriptorReader) -> None:
    desc.boolean("ShTr")
    desc.boolean("VctC")
    desc.enum("ClrS")
    desc.keyed_long("RndS")
    desc.keyed_long("Smth")
    for key in ("Mnm ", "Mxm "):
        for _ in range(desc.list_length(key)):
            desc.long()


def _read_v5_gradient(desc: _DescriptorReader, log: logging.Logger) -> Optional[Gradient]:
    """One `Gradient` object; None for noise gradients."""
    name, _, _ = desc.objc()
    if name != "Gradient":
        raise InvalidFormatError(f"Expected a Gradient object, found {name!r}")
    desc.expect_key("Grad")
    _, _, count = desc.objc()
    title = desc.text("Nm  ")
    _, form = desc.enum("GrdF")

    if form == "ClNs":
        if count != 9:
            raise InvalidFormatError(f"Noise gradient has {count} items, expected 9")
        _skip_v5_noise(desc)
        log.warning("GRD: skipping noise gradient %r", title)
        return None
    if form != "CstS":
        raise InvalidFormatError(f"Unsupported gradient form {form!r}")
    if count != 5:
        raise InvalidFormatError(f"Custom gradient has {count} items, expected 5")

    desc.double("Intr")
    stops = tuple(_read_v5_color_stop(desc) for _ in range(desc.list_length("Clrs")))
    tstops = tuple(_read_v5_transparency_stop(desc) for _ in range(desc.list_length("Trns")))
    return Gradient(stops=stops, transparency_stops=tstops or None, name=title)


def _read_v5(reader: ByteReader, log: logging.Logger) -> list[Gradient]:
    reader.read_bytes(V5_HEADER_PADDING)
    desc = _DescriptorReader(reader)
    gradients = []
    for _ in range(desc.list_length("GrdL")):
        gradient = _read_v5_gradient(desc, log)
        if gradient is not None:
            gradients.append(gradient)
    return gradients


# =============================================================================
# Version 3
# =============================================================================


def _v3_color(model: int, words: list[int]) -> Color:
    c0, c1, c2, c3 = (w / 65535.0 for w in words)
    if model == _V3_RGB:
        return Color.rgb(c0, c1, c2)
    if model == _V3_HSB:
        r, g, b = hsb_to_srgb(np.array([c0, c1, c2], dtype=np.float64))
        return Color.rgb(float(r), float(g), float(b))
    if model == _V3_CMYK:
        return Color.cmyk(c0, c1, c2, c3)
    if model == _V3_LAB:
        return Color.lab(c0 * 100.0, c1 * 255.0 - 128.0, c2 * 255.0 - 128.0)
    if model == _V3_GRAY:
        return Color.gray(c0)
    raise UnknownColorModelError(model)


def _v3_words(color: Color) -> list[int]:
    """Four u16 channel words for a color already in a v3-writable space."""
    if color.color_space is ColorSpace.LAB:
        l, a, b = color.components
        fractions = [l / 100.0, (a + 128.0) / 255.0, (b + 128.0) / 255.0]
    else:
        fractions = list(color.components)
    fractions += [0.0] * (4 - len(fractions))
    return [int(round(min(1.0, max(0.0, f)) * 65535)) for f in fractions]


def _read_v3(reader: ByteReader) -> list[Gradient]:
    gradients = []
    for _ in range(reader.read_uint16()):
        name_length = reader.read_int8()
        if name_length < 0:
            raise InvalidStringError(f"Negative gradient name length {name_length}")
        title = reader.read_ascii(name_length)

        stops = []
        for _ in range(reader.read_int16()):
            location = reader.read_uint32()
            reader.read_uint32()  # midpoint
            model = reader.read_int16()
            words = [reader.read_uint16() for _ in range(4)]
            stop_type = reader.read_int16()
            if stop_type not in (0, 1, 2):
                raise InvalidFormatError(f"Unsupported v3 color stop type {stop_type}")
            stops.append(Stop(location / LOCATION_SCALE, _v3_color(model, words)))

        tstops = []
        for _ in range(reader.read_int16()):
            location = reader.read_uint32()
            midpoint = reader.read_uint32()
            opacity = reader.read_int16()
            tstops.append(TransparencyStop(
                position=location / LOCATION_SCALE,
                value=min(1.0, max(0.0, opacity / 255.0)),
                midpoint=midpoint / 100.0,
            ))

        reader.read_bytes(V3_TRAILER)
        gradients.append(Gradient(stops=tuple(stops), transparency_stops=tuple(tstops) or None, name=title))
    return gradients


# =============================================================================
# Coders
# =============================================================================


class GRDCoder(GradientsCoder):
    """Photoshop gradients: decodes v3 and v5, encodes v3."""

    format = GradientsFormat.GRD
    file_extensions = ("grd",)

    def decode(self, data: bytes, *, logger: Optional[logging.Logger] = None) -> Gradients:
        log = self._logger(logger)
        reader = ByteReader(data)
        if len(data) < 4 or reader.read_bytes(4) != MAGIC:
            raise InvalidHeaderError("Missing 8BGR header")
        version = reader.read_uint16()
        if version == 5:
            gradients = _read_v5(reader, log)
        elif version == 3:
            gradients = _read_v3(reader)
        else:
            raise InvalidVersionError(f"Unsupported GRD version {version}")

        log.debug("%s: decoded %d gradients (version %d)", self.name, len(gradients), version)
        return Gradients(gradients=tuple(gradients), format=self.format)

    def encode(self, gradients: Gradients, *, logger: Optional[logging.Logger] = None) -> bytes:
        log = self._logger(logger)
        writer = ByteWriter()
        writer.write_bytes(MAGIC)
        writer.write_uint16(3)
        writer.write_uint16(len(gradients.gradients))

        for source in gradients.gradients:
            gradient = source.normalized().with_transparency_map()

            name = (gradient.name or "")[:V3_NAME_MAX].encode("ascii", errors="replace")
            writer.write_uint8(len(name))
            writer.write_bytes(name)

            writer.write_uint16(len(gradient.stops))
            for stop in gradient.stops:
                color = stop.color
                writer.write_uint32(int(round(stop.position * LOCATION_SCALE)))
                writer.write_uint32(50)
                writer.write_uint16(_V3_MODEL_CODES[color.color_space])
                for word in _v3_words(color):
                    writer.write_uint16(word)
                writer.write_uint16(0)

            tstops = gradient.transparency_stops or ()
            writer.write_uint16(len(tstops))
            for tstop in tstops:
                writer.write_uint32(int(round(tstop.position * LOCATION_SCALE)))
                writer.write_uint32(int(round(min(1.0, max(0.0, tstop.midpoint)) * 100)))
                writer.write_uint16(int(round(tstop.value * 255)))

            writer.write_bytes(bytes(V3_TRAILER))

        log.debug("%s: encoded %d gradients", self.name, len(gradients.gradients))
        return writer.data()


class PaintShopProGradientCoder(GRDCoder):
    """PaintShop Pro gradients; same wire format as GRD version 3."""

    format = GradientsFormat.PAINTSHOP_PRO
    file_extensions = ("pspgradient",)
