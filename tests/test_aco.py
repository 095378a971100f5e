# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Tests for the Photoshop swatch (.aco) coder."""

import pytest

from swatchcodec.binary import ByteWriter, utf16_length
from swatchcodec.coders.aco import ACOCoder, color_from_words, words_from_color
from swatchcodec.errors import (
    EndOfDataError,
    InvalidStringError,
    InvalidVersionError,
    UnknownColorModelError,
)
from swatchcodec.schema import Color, ColorSpace, Group, Palette


def aco_section(version, records):
    """records: (space, (w0, w1, w2, w3), name)"""
    writer = ByteWriter()
    writer.write_uint16(version)
    writer.write_uint16(len(records))
    for space, words, name in records:
        writer.write_uint16(space)
        for word in words:
            writer.write_uint16(word)
        if version == 2:
            writer.write_uint32(utf16_length(name) + 1)
            writer.write_utf16_zero_terminated(name)
    return writer.data()


RED = (0, (65535, 0, 0, 0), "Red")
CYAN_INK = (2, (0, 65535, 65535, 65535), "Cyan")


class TestColorWords:

    def test_rgb(self):
        c = color_from_words(0, (65535, 0, 32768, 0))
        assert c.components == pytest.approx((1.0, 0.0, 32768 / 65535))

    def test_hsb(self):
        c = color_from_words(1, (0, 65535, 65535, 0))
        assert c.color_space is ColorSpace.RGB
        assert c.components == pytest.approx((1.0, 0.0, 0.0))

    def test_cmyk_inverted(self):
        c = color_from_words(2, (0, 65535, 65535, 65535))
        assert c.components == pytest.approx((1.0, 0.0, 0.0, 0.0))

    def test_lab_signed(self):
        c = color_from_words(7, (5000, 2500, (-2500) & 0xFFFF, 0))
        assert c.components == pytest.approx((50.0, 25.0, -25.0))

    def test_gray(self):
        assert color_from_words(8, (5000, 0, 0, 0)).components == (0.5,)
        assert color_from_words(8, (20000, 0, 0, 0)).components == (1.0,)

    def test_unknown_space(self):
        with pytest.raises(UnknownColorModelError) as info:
            color_from_words(3, (0, 0, 0, 0))
        assert info.value.value == 3

    @pytest.mark.parametrize("color", [
        Color.rgb(1.0, 0.0, 0.5),
        Color.cmyk(0.1, 0.2, 0.3, 0.4),
        Color.lab(50.0, -20.5, 30.25),
        Color.gray(0.42),
    ])
    def test_inverse(self, color):
        space, words = words_from_color(color)
        recovered = color_from_words(space, words)
        assert recovered.color_space is color.color_space
        assert recovered.components == pytest.approx(color.components, abs=1e-4)


class TestDecode:

    def test_v1_only(self):
        palette = ACOCoder().decode(aco_section(1, [RED, CYAN_INK]))
        assert [c.name for c in palette.colors] == ["", ""]
        assert palette.colors[1].color_space is ColorSpace.CMYK

    def test_v1_and_v2_prefers_names(self):
        data = aco_section(1, [RED, CYAN_INK]) + aco_section(2, [RED, CYAN_INK])
        palette = ACOCoder().decode(data)
        assert [c.name for c in palette.colors] == ["Red", "Cyan"]
        assert palette.colors[0].components == (1.0, 0.0, 0.0)

    def test_empty_v2_falls_back_to_v1(self):
        data = aco_section(1, [RED]) + aco_section(2, [])
        assert len(ACOCoder().decode(data).colors) == 1

    def test_wrong_first_version(self):
        with pytest.raises(InvalidVersionError):
            ACOCoder().decode(aco_section(2, [RED]))

    def test_wrong_second_version(self):
        with pytest.raises(InvalidVersionError):
            ACOCoder().decode(aco_section(1, [RED]) + aco_section(1, [RED]))

    def test_unterminated_name(self):
        writer = ByteWriter()
        writer.write_uint16(2)
        writer.write_uint16(1)
        writer.write_uint16(0)
        for _ in range(4):
            writer.write_uint16(0)
        writer.write_uint32(2)
        writer.write_utf16("ab")
        with pytest.raises(InvalidStringError):
            ACOCoder().decode(aco_section(1, [RED]) + writer.data())

    def test_truncated(self):
        with pytest.raises(EndOfDataError):
            ACOCoder().decode(aco_section(1, [RED])[:-2])


class TestEncode:

    def test_roundtrip(self):
        palette = Palette(colors=(
            Color.rgb(1.0, 0.0, 0.0, name="Red"),
            Color.cmyk(0.0, 1.0, 1.0, 0.0, name="Ink"),
            Color.gray(0.5, name="Mid"),
        ))
        decoded = ACOCoder().decode(ACOCoder().encode(palette))
        assert [c.name for c in decoded.colors] == ["Red", "Ink", "Mid"]
        for original, recovered in zip(palette.colors, decoded.colors):
            assert recovered.color_space is original.color_space
            assert recovered.components == pytest.approx(original.components, abs=1e-4)

    def test_groups_flattened(self):
        palette = Palette(
            colors=(Color.rgb(1, 0, 0, name="A"),),
            groups=(Group(colors=(Color.rgb(0, 1, 0, name="B"),), name="G"),),
        )
        decoded = ACOCoder().decode(ACOCoder().encode(palette))
        assert [c.name for c in decoded.colors] == ["A", "B"]
        assert decoded.groups == ()

    def test_writes_both_sections(self):
        data = ACOCoder().encode(Palette(colors=(Color.rgb(1, 0, 0),)))
        assert data[:4] == b"\x00\x01\x00\x01"
        assert data[14:18] == b"\x00\x02\x00\x01"
