# Copyright (c) 2026 Swatchcodec
# SPDX-License-Identifier: MIT

"""Tests for gradient post-processing: sorting, normalization, merging and sampling."""

import pytest

from swatchcodec.errors import CannotNormalizeError, InternalError, NotEnoughStopsError
from swatchcodec.gradient import (
    Snapshot,
    color_at_stops,
    lerp_color,
    merge_transparency_stops,
    with_transparency_map,
)
from swatchcodec.schema import Color, ColorSpace, Gradient, Stop, TransparencyStop

RED = Color.rgb(1.0, 0.0, 0.0)
GREEN = Color.rgb(0.0, 1.0, 0.0)
BLUE = Color.rgb(0.0, 0.0, 1.0)


def _gradient(*pairs, transparency=None):
    return Gradient(stops=tuple(Stop(p, c) for p, c in pairs), transparency_stops=transparency)


class TestSorted:

    def test_ascending(self):
        g = _gradient((0.8, BLUE), (0.2, RED), (0.5, GREEN)).sorted
        assert g.positions == (0.2, 0.5, 0.8)
        assert g.colors == (RED, GREEN, BLUE)

    def test_stable_for_ties(self):
        g = _gradient((0.5, GREEN), (0.0, RED), (0.5, BLUE)).sorted
        assert g.colors == (RED, GREEN, BLUE)

    def test_sorts_transparency(self):
        g = _gradient((0.0, RED), (1.0, BLUE),
                      transparency=(TransparencyStop(1.0, 0.0), TransparencyStop(0.0, 1.0))).sorted
        assert [t.position for t in g.transparency_stops] == [0.0, 1.0]


class TestNormalized:

    def test_remaps_range(self):
        g = _gradient((0.2, RED), (0.8, BLUE)).normalized()
        assert g.positions == pytest.approx((0.0, 1.0))

    def test_interior_positions(self):
        g = _gradient((10.0, RED), (20.0, GREEN), (50.0, BLUE)).normalized()
        assert g.positions == pytest.approx((0.0, 0.25, 1.0))

    def test_sorts(self):
        g = _gradient((0.8, BLUE), (0.2, RED)).normalized()
        assert g.colors == (RED, BLUE)

    def test_idempotent(self):
        g = _gradient((0.3, RED), (0.4, GREEN), (0.9, BLUE)).normalized()
        assert g.normalized() == g

    def test_keeps_name(self):
        g = Gradient(stops=(Stop(1, RED), Stop(3, BLUE)), name="Warm").normalized()
        assert g.name == "Warm"

    def test_transparency_follows_color_transform(self):
        g = _gradient((0.2, RED), (0.8, BLUE),
                      transparency=(TransparencyStop(0.5, 0.5), TransparencyStop(0.9, 0.0)))
        stops = g.normalized().transparency_stops
        assert stops[0].position == pytest.approx(0.5)
        assert stops[1].position == 1.0

    def test_too_few_stops(self):
        with pytest.raises(NotEnoughStopsError):
            _gradient((0.5, RED)).normalized()

    def test_coincident_stops(self):
        with pytest.raises(CannotNormalizeError):
            _gradient((0.5, RED), (0.5, BLUE)).normalized()


class TestColorAt:

    def test_unnormalized_gradient_has_gap(self):
        g = _gradient((0.2, RED), (0.8, BLUE))
        with pytest.raises(InternalError):
            g.color_at(0.1)

    def test_gap_kept_with_transparency_track(self):
        track = (TransparencyStop(0.2, 1.0), TransparencyStop(0.8, 1.0))
        g = _gradient((0.2, RED), (0.8, BLUE), transparency=track)
        with pytest.raises(InternalError):
            g.color_at(0.1)

    def test_transparency_track_keeps_stop_range(self):
        plain = _gradient((0.2, RED), (0.8, BLUE))
        tracked = _gradient((0.2, RED), (0.8, BLUE),
                            transparency=(TransparencyStop(0.2, 1.0), TransparencyStop(0.8, 0.0)))
        sample = tracked.color_at(0.35)
        assert sample.components == pytest.approx(plain.color_at(0.35).components)
        assert sample.alpha == pytest.approx(0.75)

    def test_midpoint_after_normalization(self):
        g = _gradient((0.2, RED), (0.8, BLUE)).normalized()
        assert g.color_at(0.5).components == pytest.approx((0.5, 0.0, 0.5))

    def test_ends_are_exact(self):
        g = _gradient((0.0, RED), (0.5, GREEN), (1.0, BLUE))
        assert g.color_at(0.0) == RED
        assert g.color_at(1.0) == BLUE
        assert g.color_at(0.5) == GREEN

    def test_single_stop(self):
        assert _gradient((0.3, GREEN)).color_at(0.9) == GREEN

    def test_no_stops(self):
        with pytest.raises(NotEnoughStopsError):
            Gradient().color_at(0.5)

    @pytest.mark.parametrize("t", [-0.1, 1.1])
    def test_out_of_range(self, t):
        with pytest.raises(ValueError):
            _gradient((0.0, RED), (1.0, BLUE)).color_at(t)

    def test_alpha_interpolated(self):
        g = _gradient((0.0, RED.with_alpha(0.0)), (1.0, RED))
        assert g.color_at(0.25).alpha == pytest.approx(0.25)

    def test_with_transparency_track(self):
        g = _gradient((0.0, RED), (1.0, RED),
                      transparency=(TransparencyStop(0.0, 1.0), TransparencyStop(1.0, 0.0)))
        assert g.color_at(0.5).alpha == pytest.approx(0.5)

    def test_color_at_stops_direct(self):
        stops = (Stop(0.0, RED), Stop(1.0, BLUE))
        assert color_at_stops(stops, 0.25).components == pytest.approx((0.75, 0.0, 0.25))


class TestLerp:

    def test_same_space(self):
        c = lerp_color(Color.gray(0.0), Color.gray(1.0), 0.25)
        assert c.color_space is ColorSpace.GRAY
        assert c.components == pytest.approx((0.25,))

    def test_mixed_spaces_via_rgb(self):
        c = lerp_color(Color.cmyk(0, 1, 1, 0), Color.gray(1.0), 0.5)
        assert c.color_space is ColorSpace.RGB
        assert c.components == pytest.approx((1.0, 0.5, 0.5))


class TestTransparency:

    def test_merge_without_track_is_identity(self):
        g = _gradient((0.0, RED), (1.0, BLUE))
        assert merge_transparency_stops(g) is g

    def test_merge_union_of_positions(self):
        g = _gradient((0.0, RED), (1.0, BLUE),
                      transparency=(TransparencyStop(0.0, 1.0), TransparencyStop(0.5, 0.0),
                                    TransparencyStop(1.0, 1.0)))
        merged = g.merge_transparency_stops()
        assert merged.transparency_stops is None
        assert merged.positions == pytest.approx((0.0, 0.5, 1.0))
        assert [s.color.alpha for s in merged.stops] == pytest.approx([1.0, 0.0, 1.0])
        assert merged.stops[1].color.components == pytest.approx((0.5, 0.0, 0.5))

    def test_merge_empty_track_is_opaque(self):
        g = _gradient((0.0, RED.with_alpha(0.3)), (1.0, BLUE), transparency=())
        merged = g.merge_transparency_stops()
        assert all(s.color.alpha == 1.0 for s in merged.stops)

    def test_merge_converts_to_rgb(self):
        g = _gradient((0.0, Color.gray(0.0)), (1.0, Color.gray(1.0)),
                      transparency=(TransparencyStop(0.0, 1.0),))
        merged = g.merge_transparency_stops()
        assert all(s.color.color_space is ColorSpace.RGB for s in merged.stops)

    def test_with_transparency_map(self):
        g = _gradient((0.0, RED.with_alpha(0.5)), (1.0, BLUE))
        mapped = with_transparency_map(g)
        assert [t.value for t in mapped.transparency_stops] == [0.5, 1.0]
        assert all(s.color.alpha == 1.0 for s in mapped.stops)
        assert with_transparency_map(mapped) is mapped

    def test_merge_identical_neighbours(self):
        g = _gradient((0.0, RED), (0.5, GREEN), (0.5, GREEN), (1.0, BLUE), (0.5, GREEN))
        merged = g.merging_identical_neighbouring_stops()
        assert merged.positions == (0.0, 0.5, 1.0, 0.5)


class TestSnapshot:

    def test_samples_full_range(self):
        snapshot = Snapshot(_gradient((0.2, RED), (0.8, BLUE)))
        assert snapshot.color_at(0.0) == RED
        assert snapshot.color_at(1.0) == BLUE
        assert snapshot.stops[0].position == 0.0

    def test_colors_evenly_spaced(self):
        colors = Snapshot(_gradient((0.0, RED), (1.0, BLUE))).colors(3)
        assert [c.components for c in colors] == [
            pytest.approx((1.0, 0.0, 0.0)),
            pytest.approx((0.5, 0.0, 0.5)),
            pytest.approx((0.0, 0.0, 1.0)),
        ]

    def test_colors_count_one(self):
        assert Snapshot(_gradient((0.0, RED), (1.0, BLUE))).colors(1) == (RED,)

    def test_colors_invalid_count(self):
        with pytest.raises(ValueError):
            Snapshot(_gradient((0.0, RED), (1.0, BLUE))).colors(0)

    def test_single_stop(self):
        assert Snapshot(_gradient((0.4, GREEN))).colors(2) == (GREEN, GREEN)

    def test_gradient_sample_and_colors_at(self):
        g = _gradient((10.0, RED), (20.0, BLUE))
        assert len(g.sample(5)) == 5
        assert g.colors_at([0.0, 1.0]) == (RED, BLUE)
