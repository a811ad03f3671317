"""
Compass Zone Builder
Builds ordered lists of angular zones for coloring a compass rim,
splitting any zone that crosses the 0°/360° boundary into two.

Zones are emitted in paint order: later zones are drawn on top.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from sailgeom.config import (
    POINT_OF_SAIL_BANDS,
    ZONE_COLORS,
    ZONE_NO_GO,
    ZONE_OPACITY,
    ZONE_PORT,
    ZONE_STARBOARD,
    ZONE_WIDTH_NARROW,
    ZONE_WIDTH_WIDE,
)
from sailgeom.core.angles import as_finite, normalize_angle

_logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Zone:
    """
    Half-open angular interval [start_angle, end_angle) on the compass rim.

    Always 0 <= start_angle < end_angle <= 360; wrapping intervals are
    split by the builder. Tags are semantic names, mapped to colors and
    ring widths by the renderer.
    """
    start_angle: float
    end_angle: float
    color_tag: str
    width_tag: str

    @property
    def span(self) -> float:
        return self.end_angle - self.start_angle

    def contains(self, angle) -> bool:
        angle = normalize_angle(angle)
        if angle is None:
            return False
        return self.start_angle <= angle < self.end_angle


@dataclass(frozen=True)
class GradiatedZone:
    """
    Zone definition relative to a center angle.

    Attributes:
        start_offset: Start offset from center in degrees (can be negative)
        end_offset: End offset from center, clockwise from start
        color_tag: Semantic color name
        width_tag: Ring width name
    """
    start_offset: float
    end_offset: float
    color_tag: str
    width_tag: str = ZONE_WIDTH_WIDE


class CompassZoneBuilder:
    """
    Accumulates zones with automatic 0°/360° wraparound handling.

    Example:
        builder = CompassZoneBuilder()
        builder.add_zone(350, 10, 'no-go')   # -> [350, 360) and [0, 10)
        zones = builder.zones
    """

    def __init__(self):
        self._zones: List[Zone] = []

    @property
    def zones(self) -> List[Zone]:
        """Copy of all zones built so far, in paint order."""
        return list(self._zones)

    @property
    def count(self) -> int:
        return len(self._zones)

    def clear(self):
        self._zones.clear()

    # ==================== Primitive Zones ====================

    def add_zone(self, start, end, color_tag, width_tag=ZONE_WIDTH_WIDE, span=None):
        """
        Add a zone from start clockwise to end.

        If the zone crosses 0° (e.g. 350° to 10°) it is split into
        [350, 360) and [0, 10).

        Args:
            start: Start angle in degrees (any real number)
            end: End angle in degrees (any real number)
            color_tag: Semantic color name
            width_tag: Ring width name
            span: Clockwise extent in degrees, when known from offsets.
                  A span <= 0 adds nothing; a span >= 360 adds the full circle.
                  If rounding makes start and end coincide, spans under 180
                  add nothing and larger spans add the full circle.
        """
        start_norm = normalize_angle(start)
        end_norm = normalize_angle(end)
        if start_norm is None or end_norm is None:
            return

        if span is None:
            span = end_norm - start_norm if start_norm < end_norm else 360.0 - start_norm + end_norm

        if span <= 0:
            _logger.debug("Skipping empty zone %s (%.1f-%.1f)", color_tag, start, end)
            return

        if start_norm == end_norm and span < 360.0:
            # Endpoints merged by rounding: a sliver or an almost-full circle
            if span < 180.0:
                _logger.debug("Skipping sliver zone %s at %.1f", color_tag, start_norm)
                return
            span = 360.0

        if span >= 360.0:
            self._zones.append(Zone(0.0, 360.0, color_tag, width_tag))
        elif start_norm < end_norm:
            # Normal range: doesn't cross 0°
            self._zones.append(Zone(start_norm, end_norm, color_tag, width_tag))
        else:
            # Crosses 0°: split into two ranges
            self._zones.append(Zone(start_norm, 360.0, color_tag, width_tag))
            if end_norm > 0.0:
                self._zones.append(Zone(0.0, end_norm, color_tag, width_tag))

    def add_symmetrical(self, center, half_width, color_tag, width_tag=ZONE_WIDTH_WIDE):
        """Add a zone extending half_width on each side of center."""
        center = as_finite(center, 'zone center')
        half_width = as_finite(half_width, 'zone half width')
        if center is None or half_width is None:
            return
        self.add_zone(center - half_width, center + half_width, color_tag, width_tag,
                      span=2 * half_width)

    def add_gradiated_zones(self, center, bands):
        """
        Add several zones defined as offsets from a center angle.

        Args:
            center: Reference angle in degrees
            bands: Iterable of GradiatedZone
        """
        center = as_finite(center, 'zone center')
        if center is None:
            return
        for band in bands:
            self.add_zone(
                center + band.start_offset,
                center + band.end_offset,
                band.color_tag,
                band.width_tag,
                span=band.end_offset - band.start_offset,
            )

    # ==================== Sailing Zones ====================

    def add_sailing_zones(self, wind_direction, target_angle, tolerance):
        """
        Add the standard sailing zone pattern around the wind direction.

        Paint order:
            1. Port point-of-sail bands (close-hauled .. broad reach)
            2. Starboard point-of-sail bands
            3. No-go zone (wind ± target)
            4. Port performance overlays (optimal, acceptable high/low)
            5. Starboard performance overlays

        Args:
            wind_direction: True or apparent wind direction in degrees
            target_angle: Target wind angle, e.g. 40°
            tolerance: Tolerance for the performance overlays, e.g. 3°
        """
        wind_direction = as_finite(wind_direction, 'wind direction')
        target = as_finite(target_angle, 'target angle')
        tolerance = as_finite(tolerance, 'tolerance')
        if wind_direction is None or target is None or tolerance is None:
            return

        # PORT / STARBOARD - points of sail, darker near close-hauled
        for side, sign in ((ZONE_PORT, -1.0), (ZONE_STARBOARD, 1.0)):
            self.add_gradiated_zones(wind_direction, _point_of_sail_bands(side, sign, target))

        # No-go zone (wind ± target)
        self.add_symmetrical(wind_direction, target, ZONE_NO_GO)

        # PERFORMANCE - narrow bands around the target on each side
        self.add_gradiated_zones(wind_direction, _performance_bands(ZONE_PORT, -1.0, target, tolerance))
        self.add_gradiated_zones(wind_direction, _performance_bands(ZONE_STARBOARD, 1.0, target, tolerance))

    def add_heading_zones(self, current_heading):
        """
        Add simple port/starboard halves split at the current heading.
        Used when no wind data is available.
        """
        heading = as_finite(current_heading, 'heading')
        if heading is None:
            return
        self.add_zone(heading - 180.0, heading, ZONE_PORT, ZONE_WIDTH_WIDE, span=180.0)
        self.add_zone(heading, heading + 180.0, ZONE_STARBOARD, ZONE_WIDTH_WIDE, span=180.0)


def _point_of_sail_bands(side, sign, target):
    """Four graduated bands on one side; offsets run clockwise."""
    bands = []
    for near, far, name in POINT_OF_SAIL_BANDS:
        near = target if near is None else near
        if sign < 0:
            # Port: from -far clockwise to -near
            bands.append(GradiatedZone(-far, -near, f'{side}-{name}'))
        else:
            bands.append(GradiatedZone(near, far, f'{side}-{name}'))
    return bands


def _performance_bands(side, sign, target, tolerance):
    """Optimal band at the target plus the two acceptable bands beside it."""
    center = sign * target
    optimal = GradiatedZone(center - tolerance, center + tolerance,
                            f'{side}-optimal', ZONE_WIDTH_NARROW)
    outer = GradiatedZone(center - 2 * tolerance, center - tolerance,
                          f'{side}-acceptable-{"high" if sign < 0 else "low"}', ZONE_WIDTH_NARROW)
    inner = GradiatedZone(center + tolerance, center + 2 * tolerance,
                          f'{side}-acceptable-{"low" if sign < 0 else "high"}', ZONE_WIDTH_NARROW)
    return [optimal, outer, inner]


def build_sailing_zones(wind_direction, target_angle, tolerance) -> List[Zone]:
    """Convenience: sailing zone list for a single frame."""
    builder = CompassZoneBuilder()
    builder.add_sailing_zones(wind_direction, target_angle, tolerance)
    return builder.zones


def build_heading_zones(current_heading) -> List[Zone]:
    """Convenience: heading zone list for a single frame."""
    builder = CompassZoneBuilder()
    builder.add_heading_zones(current_heading)
    return builder.zones


def zone_at(zones: List[Zone], angle) -> Optional[Zone]:
    """Topmost zone containing angle (last in paint order), or None."""
    for zone in reversed(zones):
        if zone.contains(angle):
            return zone
    return None


def zone_style(zone: Zone) -> Optional[Tuple[str, float]]:
    """
    Renderer hint for a zone: (base colour, opacity) looked up from its colour tag.

    Tags are either a bare kind ('no-go', 'port', 'starboard') or
    '<side>-<kind>' (e.g. 'port-close-hauled', 'starboard-acceptable-low').
    Point-of-sail bands take their side's colour; performance overlays take
    the overlay colour.

    Returns:
        (colour, opacity), or None for tags without a style
    """
    tag = zone.color_tag
    if tag == ZONE_NO_GO:
        return ZONE_COLORS[tag], ZONE_OPACITY[tag]

    side, _, kind = tag.partition('-')
    if side not in ZONE_COLORS:
        return None
    if not kind:
        # Heading half
        return ZONE_COLORS[side], ZONE_OPACITY['heading']

    kind = 'acceptable' if kind.startswith('acceptable') else kind
    if kind not in ZONE_OPACITY:
        return None
    return ZONE_COLORS.get(kind, ZONE_COLORS[side]), ZONE_OPACITY[kind]
