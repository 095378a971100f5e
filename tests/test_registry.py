# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Tests for extension lookup, file helpers and the command line."""

import pytest

from swatchcodec import registry
from swatchcodec.__main__ import main
from swatchcodec.coders import (
    CorelDrawV3PaletteCoder,
    GRDCoder,
    PaintShopProPaletteCoder,
    RGBACoder,
    RGBCoder,
)
from swatchcodec.errors import InvalidHeaderError, UnableToLoadFileError, UnsupportedFormatError
from swatchcodec.schema import Color, Gradient, Gradients, Palette, PaletteFormat

JASC = b"JASC-PAL\r\n0100\r\n1\r\n255 0 0\r\n"
COREL = b'"Black"    0    0    0    100\r\n'


def two_colors():
    return Palette(colors=(Color.rgb(1, 0, 0, name="Red"), Color.rgb(0, 0, 1, name="Blue")))


class TestLookup:

    def test_case_and_dot_insensitive(self):
        assert isinstance(registry.palette_coder("ASE"), type(registry.palette_coder(".ase")))
        assert isinstance(registry.gradients_coder(".GRD"), GRDCoder)

    def test_shared_extension_in_table_order(self):
        coders = registry.palette_coders("pal")
        assert [type(c) for c in coders] == [PaintShopProPaletteCoder, CorelDrawV3PaletteCoder]
        assert [type(c) for c in registry.palette_coders("txt")] == [RGBACoder, RGBCoder]

    def test_unknown_extension(self):
        assert registry.palette_coder("xyz") is None
        assert registry.gradients_coders("ase") == []

    def test_extension_lists(self):
        palettes = registry.palette_extensions()
        assert palettes == sorted(palettes)
        assert {"ase", "aco", "gpl", "pal", "txt", "svg"} <= set(palettes)
        assert {"grd", "ggr", "pspgradient", "svg"} <= set(registry.gradients_extensions())


class TestDecodeEncode:

    def test_pal_tries_each_coder(self):
        assert registry.decode_palette("pal", JASC).format is PaletteFormat.PAINTSHOP_PRO
        corel = registry.decode_palette("pal", COREL)
        assert corel.format is PaletteFormat.CORELDRAW_V3
        assert corel.colors[0].name == "Black"

    def test_first_error_reraised(self):
        with pytest.raises(InvalidHeaderError):
            registry.decode_palette("pal", b"neither format\n")

    def test_unknown_extension(self):
        with pytest.raises(UnsupportedFormatError):
            registry.decode_palette("xyz", b"")
        with pytest.raises(UnsupportedFormatError):
            registry.encode_gradients("ase", Gradients())

    def test_encode_uses_first_coder(self):
        data = registry.encode_palette("txt", two_colors())
        assert data.decode("utf-8").splitlines()[0] == "#ff0000ff Red"


class TestFiles:

    def test_palette_roundtrip(self, tmp_path):
        path = tmp_path / "brand.ASE"
        registry.save_palette(two_colors(), path)
        loaded = registry.load_palette(str(path))
        assert [c.name for c in loaded.colors] == ["Red", "Blue"]

    def test_gradients_roundtrip(self, tmp_path):
        path = tmp_path / "fade.ggr"
        gradient = Gradient.from_colors([Color.rgb(1, 0, 0), Color.rgb(0, 0, 1)], name="Fade")
        registry.save_gradients(Gradients(gradients=(gradient,)), path)
        assert registry.load_gradients(path).gradients[0].name == "Fade"

    def test_missing_file(self, tmp_path):
        with pytest.raises(UnableToLoadFileError):
            registry.load_palette(tmp_path / "missing.gpl")

    def test_no_suffix(self, tmp_path):
        with pytest.raises(UnsupportedFormatError):
            registry.load_palette(tmp_path / "palette")


class TestCommandLine:

    def test_formats(self, capsys):
        assert main(["formats"]) == 0
        out = capsys.readouterr().out
        assert "Palettes:" in out and "grd" in out

    def test_info_palette(self, tmp_path, capsys):
        path = tmp_path / "colors.gpl"
        registry.save_palette(two_colors(), path)
        assert main(["info", str(path)]) == 0
        out = capsys.readouterr().out
        assert "#ff0000ff" in out
        assert "'Blue'" in out

    def test_convert_palette_to_gradient(self, tmp_path):
        source = tmp_path / "colors.aco"
        destination = tmp_path / "colors.ggr"
        registry.save_palette(two_colors(), source)
        assert main(["convert", str(source), str(destination)]) == 0
        gradient = registry.load_gradients(destination).gradients[0]
        assert gradient.positions == (0.0, 1.0)
        assert gradient.colors[1].components == (0.0, 0.0, 1.0)

    def test_convert_gradient_to_palette(self, tmp_path):
        source = tmp_path / "fade.grd"
        destination = tmp_path / "fade.gpl"
        gradient = Gradient.from_colors([Color.rgb(1, 0, 0), Color.rgb(0, 0, 1)], name="Fade")
        registry.save_gradients(Gradients(gradients=(gradient,)), source)
        assert main(["convert", str(source), str(destination)]) == 0
        assert len(registry.load_palette(destination).all_colors()) == 2

    def test_error_exit_code(self, tmp_path, capsys):
        assert main(["info", str(tmp_path / "missing.ase")]) == 1
        assert capsys.readouterr().err.startswith("error:")

    def test_malformed_gradient_exit_code(self, tmp_path, capsys):
        path = tmp_path / "bad.ggr"
        path.write_bytes(
            b"GIMP Gradient\nName: Bad\n1\n"
            b"0 0.5 1 1 0 0 1.5 0 0 1 1 0 0\n"
        )
        assert main(["info", str(path)]) == 1
        assert "out of range" in capsys.readouterr().err
