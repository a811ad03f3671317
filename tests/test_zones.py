"""Tests for compass zone building and 0°/360° splitting."""

import random

import pytest

from sailgeom.core.zones import (
    CompassZoneBuilder,
    GradiatedZone,
    Zone,
    build_heading_zones,
    build_sailing_zones,
    zone_at,
    zone_style,
)


def assert_no_wraparound(zones):
    for zone in zones:
        assert 0.0 <= zone.start_angle < zone.end_angle <= 360.0, zone


# ---------------------------------------------------------------------------
# Primitive zones
# ---------------------------------------------------------------------------

class TestAddZone:
    def test_simple_zone(self):
        builder = CompassZoneBuilder()
        builder.add_zone(10, 50, 'x')
        assert builder.zones == [Zone(10.0, 50.0, 'x', 'wide')]

    def test_zone_crossing_north_is_split(self):
        builder = CompassZoneBuilder()
        builder.add_zone(350, 10, 'no-go')
        assert builder.zones == [
            Zone(350.0, 360.0, 'no-go', 'wide'),
            Zone(0.0, 10.0, 'no-go', 'wide'),
        ]

    def test_zone_ending_at_north_is_not_split(self):
        builder = CompassZoneBuilder()
        builder.add_zone(300, 360, 'x')
        assert builder.zones == [Zone(300.0, 360.0, 'x', 'wide')]

    def test_non_positive_span_skipped(self):
        builder = CompassZoneBuilder()
        builder.add_zone(40, 40, 'x', span=0)
        builder.add_zone(50, 40, 'x', span=-10)
        assert builder.count == 0

    def test_rounded_away_span_skipped(self):
        builder = CompassZoneBuilder()
        # 100 + 1e-15 rounds back to 100
        builder.add_zone(100, 100 + 1e-15, 'x', span=1e-15)
        assert builder.count == 0

    def test_rounded_near_full_span(self):
        builder = CompassZoneBuilder()
        builder.add_zone(100, 100, 'x', span=359.99)
        assert builder.zones == [Zone(0.0, 360.0, 'x', 'wide')]

    def test_full_span(self):
        builder = CompassZoneBuilder()
        builder.add_zone(10, 370, 'x', span=360)
        assert builder.zones == [Zone(0.0, 360.0, 'x', 'wide')]

    def test_non_finite_skipped(self):
        builder = CompassZoneBuilder()
        builder.add_zone(float('nan'), 10, 'x')
        builder.add_symmetrical(float('inf'), 5, 'x')
        assert builder.count == 0

    def test_symmetrical(self):
        builder = CompassZoneBuilder()
        builder.add_symmetrical(90, 5, 'optimal', 'narrow')
        assert builder.zones == [Zone(85.0, 95.0, 'optimal', 'narrow')]

    def test_gradiated(self):
        builder = CompassZoneBuilder()
        builder.add_gradiated_zones(0, [
            GradiatedZone(-60, -40, 'a'),
            GradiatedZone(40, 60, 'b', 'narrow'),
        ])
        assert builder.zones == [
            Zone(300.0, 320.0, 'a', 'wide'),
            Zone(40.0, 60.0, 'b', 'narrow'),
        ]

    def test_clear_and_zones_copy(self):
        builder = CompassZoneBuilder()
        builder.add_zone(10, 20, 'x')
        zones = builder.zones
        zones.clear()
        assert builder.count == 1
        builder.clear()
        assert builder.count == 0

    def test_zone_contains_half_open(self):
        zone = Zone(10.0, 20.0, 'x', 'wide')
        assert zone.contains(10)
        assert zone.contains(370)
        assert not zone.contains(20)
        assert not zone.contains(None)
        assert zone.span == 10.0


# ---------------------------------------------------------------------------
# Sailing zones
# ---------------------------------------------------------------------------

class TestSailingZones:
    def test_order_and_tags(self):
        zones = build_sailing_zones(180, 40, 3)
        assert [z.color_tag for z in zones] == [
            'port-close-hauled', 'port-close-reach', 'port-beam-reach', 'port-broad-reach',
            'starboard-close-hauled', 'starboard-close-reach', 'starboard-beam-reach',
            'starboard-broad-reach',
            'no-go',
            'port-optimal', 'port-acceptable-high', 'port-acceptable-low',
            'starboard-optimal', 'starboard-acceptable-low', 'starboard-acceptable-high',
        ]

    def test_band_positions(self):
        zones = {z.color_tag: z for z in build_sailing_zones(180, 40, 3)}
        assert (zones['port-close-hauled'].start_angle, zones['port-close-hauled'].end_angle) == (120, 140)
        assert (zones['port-broad-reach'].start_angle, zones['port-broad-reach'].end_angle) == (30, 70)
        assert (zones['starboard-close-hauled'].start_angle, zones['starboard-close-hauled'].end_angle) == (220, 240)
        assert (zones['no-go'].start_angle, zones['no-go'].end_angle) == (140, 220)
        assert (zones['starboard-optimal'].start_angle, zones['starboard-optimal'].end_angle) == (217, 223)
        assert (zones['port-acceptable-high'].start_angle, zones['port-acceptable-high'].end_angle) == (134, 137)
        assert (zones['port-acceptable-low'].start_angle, zones['port-acceptable-low'].end_angle) == (143, 146)

    def test_width_tags(self):
        zones = build_sailing_zones(180, 40, 3)
        assert all(z.width_tag == 'wide' for z in zones[:9])
        assert all(z.width_tag == 'narrow' for z in zones[9:])

    def test_mirror_symmetric_about_wind(self):
        wind = 180.0
        zones = build_sailing_zones(wind, 40, 3)
        bands = {
            (round(z.start_angle - wind, 9), round(z.end_angle - wind, 9), z.width_tag)
            for z in zones
        }
        mirrored = {(-end, -start, width) for start, end, width in bands}
        assert bands == mirrored

    def test_no_go_split_across_north(self):
        zones = build_sailing_zones(10, 40, 3)
        no_go = [z for z in zones if z.color_tag == 'no-go']
        assert no_go == [Zone(330.0, 360.0, 'no-go', 'wide'), Zone(0.0, 50.0, 'no-go', 'wide')]

    def test_wide_target_drops_close_hauled(self):
        zones = build_sailing_zones(180, 60, 0)
        tags = [z.color_tag for z in zones]
        assert 'port-close-hauled' not in tags
        assert 'starboard-close-hauled' not in tags
        assert not any('optimal' in tag or 'acceptable' in tag for tag in tags)
        assert len(zones) == 7

    def test_never_wraps_for_random_inputs(self):
        rng = random.Random(3)
        for _ in range(300):
            zones = build_sailing_zones(
                rng.uniform(-720, 720), rng.uniform(0, 90), rng.uniform(0, 10)
            )
            assert zones
            assert_no_wraparound(zones)

    def test_absent_wind_builds_nothing(self):
        assert build_sailing_zones(None, 40, 3) == []
        assert build_sailing_zones(float('nan'), 40, 3) == []

    def test_overlay_on_top(self):
        zones = build_sailing_zones(180, 40, 3)
        assert zone_at(zones, 140).color_tag == 'port-optimal'
        assert zone_at(zones, 100).color_tag == 'port-close-reach'
        assert zone_at(zones, 0) is None


# ---------------------------------------------------------------------------
# Heading zones
# ---------------------------------------------------------------------------

class TestHeadingZones:
    def test_heading_south(self):
        assert build_heading_zones(180) == [
            Zone(0.0, 180.0, 'port', 'wide'),
            Zone(180.0, 360.0, 'starboard', 'wide'),
        ]

    def test_heading_east_splits_port(self):
        assert build_heading_zones(90) == [
            Zone(270.0, 360.0, 'port', 'wide'),
            Zone(0.0, 90.0, 'port', 'wide'),
            Zone(90.0, 270.0, 'starboard', 'wide'),
        ]

    @pytest.mark.parametrize("heading", [0, 1, 45, 179.5, 359.9, -30, 725])
    def test_covers_full_circle(self, heading):
        zones = build_heading_zones(heading)
        assert_no_wraparound(zones)
        assert sum(z.span for z in zones) == pytest.approx(360.0)

    def test_absent_heading(self):
        assert build_heading_zones(None) == []


# ---------------------------------------------------------------------------
# Renderer hints
# ---------------------------------------------------------------------------

class TestZoneStyle:
    def test_point_of_sail_uses_side_colour(self):
        assert zone_style(Zone(0, 10, 'port-close-hauled', 'wide')) == ('red', 0.6)
        assert zone_style(Zone(0, 10, 'starboard-broad-reach', 'wide')) == ('green', 0.15)

    def test_overlays(self):
        assert zone_style(Zone(0, 10, 'port-optimal', 'narrow')) == ('green', 0.8)
        assert zone_style(Zone(0, 10, 'starboard-acceptable-low', 'narrow')) == ('yellow', 0.7)

    def test_no_go_and_heading(self):
        assert zone_style(Zone(0, 10, 'no-go', 'wide')) == ('white', 0.3)
        assert zone_style(Zone(0, 10, 'starboard', 'wide')) == ('green', 0.3)

    def test_every_sailing_zone_has_a_style(self):
        for zone in build_sailing_zones(0, 40, 3):
            assert zone_style(zone) is not None, zone

    def test_unknown_tag(self):
        assert zone_style(Zone(0, 10, 'custom', 'wide')) is None
        assert zone_style(Zone(0, 10, 'port-spinnaker', 'wide')) is None
