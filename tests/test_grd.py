# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Tests for the Photoshop gradient (.grd) and PaintShop Pro gradient coders."""

import logging

import pytest

from swatchcodec.binary import ByteWriter
from swatchcodec.coders.grd import GRDCoder, PaintShopProGradientCoder
from swatchcodec.errors import (
    EndOfDataError,
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


# =============================================================================
# Version 5 descriptor builders
# =============================================================================


class Descriptor:
    """Writes the subset of Photoshop descriptor items found in GRD files."""

    def __init__(self):
        self.w = ByteWriter()

    def key(self, name):
        # Four-character keys are written with a zero length
        if len(name) == 4:
            self.w.write_uint32(0)
        else:
            self.w.write_uint32(len(name))
        self.w.write_ascii(name)
        return self

    def ucs2(self, text):
        self.w.write_uint32(len(text) + 1)
        self.w.write_utf16_zero_terminated(text)
        return self

    def objc(self, name, class_id, count):
        self.w.write_ascii("Objc")
        self.ucs2(name)
        self.key(class_id)
        self.w.write_int32(count)
        return self

    def vlls(self, key, count):
        self.key(key)
        self.w.write_ascii("VlLs")
        self.w.write_int32(count)
        return self

    def doub(self, key, value):
        self.key(key)
        self.w.write_ascii("doub")
        self.w.write_float64(value)
        return self

    def long(self, value):
        self.w.write_ascii("long")
        self.w.write_uint32(value)
        return self

    def keyed_long(self, key, value):
        return self.key(key).long(value)

    def enum(self, key, type_id, value):
        self.key(key)
        self.w.write_ascii("enum")
        self.key(type_id)
        self.key(value)
        return self

    def untf(self, key, unit, value):
        self.key(key)
        self.w.write_ascii("UntF")
        self.w.write_ascii(unit)
        self.w.write_float64(value)
        return self

    def boolean(self, key, value):
        self.key(key)
        self.w.write_ascii("bool")
        self.w.write_uint8(1 if value else 0)
        return self

    def text(self, key, value):
        self.key(key)
        self.w.write_ascii("TEXT")
        return self.ucs2(value)

    def rgb_stop(self, r, g, b, location, stop_type="UsrS"):
        self.objc("", "Clrt", 4)
        self.key("Clr ").objc("", "RGBC", 3)
        self.doub("Rd  ", r).doub("Grn ", g).doub("Bl  ", b)
        self.enum("Type", "Clry", stop_type)
        self.keyed_long("Lctn", location).keyed_long("Mdpn", 50)
        return self

    def transparency_stop(self, percent, location, midpoint=50):
        self.objc("", "TrnS", 3)
        self.untf("Opct", "#Prc", percent)
        self.keyed_long("Lctn", location).keyed_long("Mdpn", midpoint)
        return self

    def custom_gradient_header(self, name):
        self.objc("Gradient", "Grdn", 1)
        self.key("Grad").objc("Gradient", "Grdn", 5)
        self.text("Nm  ", name)
        self.enum("GrdF", "GrdF", "CstS")
        self.doub("Intr", 4096.0)
        return self

    def noise_gradient(self, name):
        self.objc("Gradient", "Grdn", 1)
        self.key("Grad").objc("Gradient", "Grdn", 9)
        self.text("Nm  ", name)
        self.enum("GrdF", "GrdF", "ClNs")
        self.boolean("ShTr", False).boolean("VctC", False)
        self.enum("ClrS", "ClrS", "RGBC")
        self.keyed_long("RndS", 123).keyed_long("Smth", 2048)
        self.vlls("Mnm ", 4)
        for _ in range(4):
            self.long(0)
        self.vlls("Mxm ", 4)
        for _ in range(4):
            self.long(100)
        return self


def grd_v5(body: bytes, count: int) -> bytes:
    writer = ByteWriter()
    writer.write_bytes(b"8BGR")
    writer.write_uint16(5)
    writer.write_bytes(bytes(22))
    desc = Descriptor().vlls("GrdL", count)
    writer.write_bytes(desc.w.data())
    writer.write_bytes(body)
    return writer.data()


def red_to_blue(name="Red Blue"):
    d = Descriptor().custom_gradient_header(name)
    d.vlls("Clrs", 2)
    d.rgb_stop(255.0, 0.0, 0.0, 0)
    d.rgb_stop(0.0, 0.0, 255.0, 4096)
    d.vlls("Trns", 2)
    d.transparency_stop(100.0, 0)
    d.transparency_stop(25.0, 4096, midpoint=40)
    return d.w.data()


class TestDecodeV5:

    def test_custom_gradient(self):
        gradients = GRDCoder().decode(grd_v5(red_to_blue(), 1))
        assert gradients.format is GradientsFormat.GRD
        assert len(gradients) == 1
        g = gradients.gradients[0]
        assert g.name == "Red Blue"
        assert g.positions == (0.0, 1.0)
        assert g.stops[0].color.components == (1.0, 0.0, 0.0)
        assert g.stops[1].color.components == (0.0, 0.0, 1.0)
        assert [t.value for t in g.transparency_stops] == [1.0, 0.25]
        assert g.transparency_stops[1].midpoint == pytest.approx(0.4)

    def test_noise_gradient_skipped(self, caplog):
        body = Descriptor().noise_gradient("Noise").w.data() + red_to_blue("After")
        with caplog.at_level(logging.WARNING):
            gradients = GRDCoder().decode(grd_v5(body, 2))
        assert [g.name for g in gradients] == ["After"]
        assert "noise" in caplog.text

    def test_color_models(self):
        d = Descriptor().custom_gradient_header("Models")
        d.vlls("Clrs", 4)
        d.objc("", "Clrt", 4).key("Clr ").objc("", "HSBC", 3)
        d.untf("H   ", "#Ang", 120.0).doub("Strt", 100.0).doub("Brgh", 100.0)
        d.enum("Type", "Clry", "UsrS").keyed_long("Lctn", 0).keyed_long("Mdpn", 50)
        d.objc("", "Clrt", 4).key("Clr ").objc("", "CMYC", 4)
        d.doub("Cyn ", 100.0).doub("Mgnt", 0.0).doub("Ylw ", 0.0).doub("Blck", 50.0)
        d.enum("Type", "Clry", "UsrS").keyed_long("Lctn", 1024).keyed_long("Mdpn", 50)
        d.objc("", "Clrt", 4).key("Clr ").objc("", "Grsc", 1)
        d.doub("Gry ", 25.0)
        d.enum("Type", "Clry", "UsrS").keyed_long("Lctn", 2048).keyed_long("Mdpn", 50)
        d.objc("", "Clrt", 4).key("Clr ").objc("", "LbCl", 3)
        d.doub("Lmnc", 50.0).doub("A   ", 10.0).doub("B   ", -20.0)
        d.enum("Type", "Clry", "UsrS").keyed_long("Lctn", 4096).keyed_long("Mdpn", 50)
        d.vlls("Trns", 0)

        g = GRDCoder().decode(grd_v5(d.w.data(), 1)).gradients[0]
        hsb, cmyk, gray, lab = g.colors
        assert hsb.color_space is ColorSpace.RGB
        assert hsb.components == pytest.approx((0.0, 1.0, 0.0))
        assert cmyk.components == pytest.approx((1.0, 0.0, 0.0, 0.5))
        assert gray.components == pytest.approx((0.25,))
        assert lab.components == pytest.approx((50.0, 10.0, -20.0))
        assert g.positions == (0.0, 0.25, 0.5, 1.0)
        assert g.transparency_stops is None

    def test_foreground_stop_without_color(self):
        d = Descriptor().custom_gradient_header("Fg")
        d.vlls("Clrs", 2)
        d.objc("", "Clrt", 3)
        d.enum("Type", "Clry", "FrgC").keyed_long("Lctn", 0).keyed_long("Mdpn", 50)
        d.rgb_stop(255.0, 255.0, 255.0, 4096)
        d.vlls("Trns", 0)
        g = GRDCoder().decode(grd_v5(d.w.data(), 1)).gradients[0]
        assert g.colors[0].components == (0.0, 0.0, 0.0)

    def test_book_color_unsupported(self):
        d = Descriptor().custom_gradient_header("Book")
        d.vlls("Clrs", 1)
        d.objc("", "Clrt", 4).key("Clr ").objc("", "BkCl", 5)
        with pytest.raises(UnsupportedFormatError):
            GRDCoder().decode(grd_v5(d.w.data(), 1))

    def test_unknown_color_model(self):
        d = Descriptor().custom_gradient_header("Odd")
        d.vlls("Clrs", 1)
        d.objc("", "Clrt", 4).key("Clr ").objc("", "XYZC", 3)
        with pytest.raises(UnknownColorModelError):
            GRDCoder().decode(grd_v5(d.w.data(), 1))

    def test_unexpected_key(self):
        d = Descriptor().custom_gradient_header("Bad")
        d.vlls("Clrz", 0)
        with pytest.raises(InvalidFormatError, match="Clrs"):
            GRDCoder().decode(grd_v5(d.w.data(), 1))

    def test_truncated(self):
        data = grd_v5(red_to_blue(), 1)
        with pytest.raises(EndOfDataError):
            GRDCoder().decode(data[:-10])


# =============================================================================
# Version 3
# =============================================================================


class TestV3:

    def _gradients(self):
        return Gradients(gradients=(
            Gradient(
                stops=(Stop(0.0, Color.rgb(1.0, 0.0, 0.0)), Stop(0.5, Color.rgb(0.0, 1.0, 0.0)),
                       Stop(1.0, Color.rgb(0.0, 0.0, 1.0))),
                name="Primaries",
            ),
            Gradient(
                stops=(Stop(0.0, Color.cmyk(0.0, 1.0, 1.0, 0.0)), Stop(1.0, Color.gray(0.5))),
                transparency_stops=(TransparencyStop(0.0, 1.0), TransparencyStop(1.0, 0.0)),
                name="Ink",
            ),
        ))

    def test_header(self):
        data = GRDCoder().encode(Gradients())
        assert data == b"8BGR\x00\x03\x00\x00"

    def test_roundtrip(self):
        decoded = GRDCoder().decode(GRDCoder().encode(self._gradients()))
        assert [g.name for g in decoded] == ["Primaries", "Ink"]

        primaries, ink = decoded.gradients
        assert primaries.positions == (0.0, 0.5, 1.0)
        assert primaries.colors[1].components == pytest.approx((0.0, 1.0, 0.0))
        assert [t.value for t in primaries.transparency_stops] == [1.0, 1.0, 1.0]

        assert ink.colors[0].color_space is ColorSpace.CMYK
        assert ink.colors[1].color_space is ColorSpace.GRAY
        assert ink.colors[1].components == pytest.approx((0.5,), abs=1e-4)
        assert [t.value for t in ink.transparency_stops] == [1.0, 0.0]

    def test_alpha_becomes_transparency_map(self):
        gradients = Gradients(gradients=(Gradient(
            stops=(Stop(0.0, Color.rgb(1, 0, 0, a=0.5)), Stop(1.0, Color.rgb(0, 0, 1))),
        ),))
        g = GRDCoder().decode(GRDCoder().encode(gradients)).gradients[0]
        assert all(c.alpha == 1.0 for c in g.colors)
        assert g.transparency_stops[0].value == pytest.approx(0.5, abs=1 / 255)

    def test_positions_normalized(self):
        gradients = Gradients(gradients=(Gradient.from_colors(
            [Color.rgb(1, 0, 0), Color.rgb(0, 0, 1)], positions=[0.25, 0.75]),))
        g = GRDCoder().decode(GRDCoder().encode(gradients)).gradients[0]
        assert g.positions == (0.0, 1.0)

    def test_lab_roundtrip(self):
        gradients = Gradients(gradients=(Gradient.from_colors(
            [Color.lab(50.0, 20.0, -40.0), Color.lab(100.0, 0.0, 0.0)]),))
        g = GRDCoder().decode(GRDCoder().encode(gradients)).gradients[0]
        assert g.colors[0].color_space is ColorSpace.LAB
        assert g.colors[0].components == pytest.approx((50.0, 20.0, -40.0), abs=0.01)

    def test_non_ascii_name_replaced(self):
        gradients = Gradients(gradients=(Gradient.from_colors(
            [Color.rgb(1, 0, 0), Color.rgb(0, 0, 1)], name="Grün"),))
        g = GRDCoder().decode(GRDCoder().encode(gradients)).gradients[0]
        assert g.name == "Gr?n"

    def test_bad_stop_type(self):
        writer = ByteWriter()
        writer.write_bytes(b"8BGR")
        writer.write_uint16(3)
        writer.write_uint16(1)
        writer.write_int8(0)
        writer.write_int16(1)
        writer.write_uint32(0)
        writer.write_uint32(50)
        writer.write_int16(0)
        for _ in range(4):
            writer.write_uint16(0)
        writer.write_int16(7)
        with pytest.raises(InvalidFormatError):
            GRDCoder().decode(writer.data())

    def test_negative_name_length(self):
        writer = ByteWriter()
        writer.write_bytes(b"8BGR")
        writer.write_uint16(3)
        writer.write_uint16(1)
        writer.write_int8(-3)
        writer.write_bytes(b"abc")
        with pytest.raises(InvalidStringError, match="name length"):
            GRDCoder().decode(writer.data())

    def test_transparency_midpoint_roundtrip(self):
        gradients = Gradients(gradients=(Gradient(
            stops=(Stop(0.0, Color.rgb(1, 0, 0)), Stop(1.0, Color.rgb(0, 0, 1))),
            transparency_stops=(TransparencyStop(0.0, 1.0, midpoint=0.25),
                                TransparencyStop(1.0, 0.0, midpoint=0.8)),
        ),))
        g = GRDCoder().decode(GRDCoder().encode(gradients)).gradients[0]
        assert [t.midpoint for t in g.transparency_stops] == pytest.approx([0.25, 0.8])

    def test_encode_empty_gradient_fails(self):
        from swatchcodec.errors import NotEnoughStopsError

        with pytest.raises(NotEnoughStopsError):
            GRDCoder().encode(Gradients(gradients=(Gradient(),)))


class TestHeader:

    def test_bad_magic(self):
        with pytest.raises(InvalidHeaderError):
            GRDCoder().decode(b"8BPS\x00\x05")

    def test_short(self):
        with pytest.raises(InvalidHeaderError):
            GRDCoder().decode(b"8B")

    def test_unsupported_version(self):
        with pytest.raises(InvalidVersionError):
            GRDCoder().decode(b"8BGR\x00\x04")


class TestPaintShopProGradient:

    def test_same_wire_format(self):
        gradients = Gradients(gradients=(Gradient.from_colors(
            [Color.rgb(1, 0, 0), Color.rgb(0, 0, 1)], name="PSP"),))
        data = PaintShopProGradientCoder().encode(gradients)
        assert data == GRDCoder().encode(gradients)
        decoded = PaintShopProGradientCoder().decode(data)
        assert decoded.format is GradientsFormat.PAINTSHOP_PRO
        assert decoded.gradients[0].name == "PSP"
