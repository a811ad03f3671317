"""
Velocity Made Good
VMG toward the wind source and toward an arbitrary bearing.
"""

import math
from enum import Enum

from sailgeom.config import VMG_POOR_RATIO
from sailgeom.core.angles import angle_difference, as_finite, normalize_angle


class VMGRating(Enum):
    """Coarse VMG quality for status coloring."""
    GOOD = 'good'
    POOR = 'poor'
    AWAY = 'away'  # Net progress away from the wind


def calculate_vmg_to_wind(sog, cog, twd):
    """
    Calculate VMG toward the wind.
    VMG = SOG × cos(angle between COG and true wind direction)

    Args:
        sog: Speed Over Ground in knots
        cog: Course Over Ground in degrees
        twd: True wind direction in degrees (FROM)

    Returns:
        VMG in knots (positive = toward the wind source, negative = running
        away from it), or None if any input is absent
    """
    sog = as_finite(sog, 'speed over ground')
    cog = normalize_angle(cog)
    twd = normalize_angle(twd)
    if sog is None or cog is None or twd is None:
        return None

    # Angle between COG and wind direction, folded to [0, 180]
    angle_to_wind = abs(cog - twd)
    angle_to_wind = min(angle_to_wind, 360.0 - angle_to_wind)

    return sog * math.cos(math.radians(angle_to_wind))


def calculate_vmg(sog, cog, target_bearing):
    """
    Calculate Velocity Made Good (VMG) toward a target bearing.
    VMG is the component of velocity in the direction of the target.

    Args:
        sog: Speed Over Ground in knots
        cog: Course Over Ground in degrees
        target_bearing: Target bearing in degrees

    Returns:
        VMG in knots (positive = making progress toward target),
        or None if any input is absent
    """
    sog = as_finite(sog, 'speed over ground')
    angle_diff = angle_difference(cog, target_bearing)
    if sog is None or angle_diff is None:
        return None

    return sog * math.cos(math.radians(angle_diff))


def rate_vmg(vmg, sog):
    """
    Rate VMG against boat speed.

    Returns:
        VMGRating.AWAY if negative, POOR if below VMG_POOR_RATIO × SOG,
        GOOD otherwise; None if VMG is absent
    """
    vmg = as_finite(vmg, 'vmg')
    if vmg is None:
        return None

    sog = as_finite(sog, 'speed over ground') or 0.0
    if vmg < 0:
        return VMGRating.AWAY
    if vmg < sog * VMG_POOR_RATIO:
        return VMGRating.POOR
    return VMGRating.GOOD
