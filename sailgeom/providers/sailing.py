"""
Sailing Providers
Concrete zone, pointer and overlay providers for wind compasses and
autopilot displays.
"""

from typing import Any, Dict, List, Optional

from sailgeom.core.angles import normalize_angle
from sailgeom.core.laylines import calculate_laylines, navigation_course, solve_laylines
from sailgeom.core.performance import classify_performance, effective_target_angle
from sailgeom.core.vmg import calculate_vmg_to_wind, rate_vmg
from sailgeom.core.wind import wind_direction_from_angle
from sailgeom.core.wind_shift import WindShiftTracker
from sailgeom.core.zones import CompassZoneBuilder, Zone
from sailgeom.providers.base_provider import (
    CompassContext,
    OverlayProvider,
    PointerProvider,
    ZoneProvider,
)


def _target_for(context: CompassContext) -> Optional[float]:
    """Polar-based target when available, configured target otherwise."""
    return effective_target_angle(context.target_angle, context.polar, context.true_wind_speed)


class SailingZoneProvider(ZoneProvider):
    """
    Sailing zones around the wind, falling back to heading zones
    when there is no wind data.

    Config parameters:
        use_true_wind: Center zones on TWD instead of heading + AWA (default False)
    """

    def build_zones(self, context: CompassContext) -> List[Zone]:
        builder = CompassZoneBuilder()

        if self.config.get('use_true_wind', False):
            wind_direction = normalize_angle(context.true_wind_direction)
        else:
            wind_direction = wind_direction_from_angle(context.heading, context.apparent_wind_angle)

        target = _target_for(context)
        if wind_direction is not None and target is not None:
            builder.add_sailing_zones(wind_direction, target, context.tolerance)
        else:
            builder.add_heading_zones(context.heading)

        return builder.zones

    def get_name(self) -> str:
        return "SailingZones"


class HeadingZoneProvider(ZoneProvider):
    """Port/starboard halves around the heading (autopilot heading mode)."""

    def build_zones(self, context: CompassContext) -> List[Zone]:
        builder = CompassZoneBuilder()
        builder.add_heading_zones(context.heading)
        return builder.zones

    def get_name(self) -> str:
        return "HeadingZones"


class WindPointerProvider(PointerProvider):
    """
    Heading, wind and layline needles.
    """

    def build_pointers(self, context: CompassContext) -> Dict[str, float]:
        pointers = {
            'heading': normalize_angle(context.heading),
            'apparent_wind': wind_direction_from_angle(context.heading, context.apparent_wind_angle),
            'true_wind': normalize_angle(context.true_wind_direction),
            'waypoint': normalize_angle(context.waypoint_bearing),
        }

        laylines = calculate_laylines(context.true_wind_direction, _target_for(context))
        if laylines is not None:
            pointers['port_layline'] = laylines.port
            pointers['starboard_layline'] = laylines.starboard

        return {name: angle for name, angle in pointers.items() if angle is not None}

    def get_name(self) -> str:
        return "WindPointers"


class PerformanceOverlayProvider(OverlayProvider):
    """
    Numeric readouts: target performance, VMG, laylines and wind shift.

    Config parameters:
        tracker: WindShiftTracker to feed and read (one is created if absent)
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        super().__init__(config)
        tracker = self.config.get('tracker')
        self.tracker = tracker if tracker is not None else WindShiftTracker()

    def build_overlay(self, context: CompassContext) -> Dict[str, Any]:
        target = _target_for(context)

        performance = classify_performance(context.apparent_wind_angle, target, context.tolerance)
        vmg = calculate_vmg_to_wind(context.sog, context.cog, context.true_wind_direction)
        laylines = solve_laylines(
            context.true_wind_direction,
            target,
            context.waypoint_bearing,
            navigation_course(context.cog, context.heading),
        )

        # Feed the tracker before reading the shift
        if context.timestamp is not None:
            self.tracker.add_sample(context.true_wind_direction, context.timestamp)
        shift = self.tracker.shift(context.true_wind_direction)

        return {
            'target_angle': target,
            'status': performance.status if performance else None,
            'offset': performance.offset if performance else None,
            'vmg': vmg,
            'vmg_rating': rate_vmg(vmg, context.sog),
            'laylines': laylines,
            'wind_shift': shift,
            'shift_type': self.tracker.classify(shift, context.apparent_wind_angle),
        }

    def get_name(self) -> str:
        return "PerformanceOverlay"
