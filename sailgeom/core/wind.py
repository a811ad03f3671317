"""
Wind and Heading Reference Conversions
Conversions between true/magnetic headings and between true, apparent
and bow-relative wind references.
"""

from enum import Enum

from sailgeom.core.angles import (
    angle_difference,
    as_finite,
    direction,
    magnitude,
    normalize_angle,
    vector_from_angle_magnitude,
)


class TackSide(Enum):
    """Which side the wind comes over. Derived from the sign of AWA."""
    PORT = 'port'
    STARBOARD = 'starboard'


def tack_side(wind_angle):
    """
    Determine tack from a bow-relative wind angle.

    Args:
        wind_angle: Apparent (or true) wind angle, degrees.
                    Negative = wind from port, positive = from starboard.

    Returns:
        TackSide, or None if the angle is absent. Zero counts as starboard.
    """
    wind_angle = as_finite(wind_angle, 'wind angle')
    if wind_angle is None:
        return None
    return TackSide.PORT if wind_angle < 0 else TackSide.STARBOARD


# ==================== Heading References ====================

def magnetic_to_true(bearing, variation):
    """
    Convert a magnetic bearing to true.

    Args:
        bearing: Magnetic bearing in degrees
        variation: Magnetic variation in degrees (east positive)

    Returns:
        True bearing in [0, 360), or None if either input is absent
    """
    if bearing is None or variation is None:
        return None
    return normalize_angle(bearing + variation)


def true_to_magnetic(bearing, variation):
    """Convert a true bearing to magnetic (variation east positive)."""
    if bearing is None or variation is None:
        return None
    return normalize_angle(bearing - variation)


# ==================== Wind References ====================

def wind_direction_from_angle(heading, wind_angle):
    """
    Absolute wind direction from heading and a bow-relative wind angle.

    Example: heading 90°, AWA -30° -> wind from 60°
    """
    if heading is None or wind_angle is None:
        return None
    return normalize_angle(heading + wind_angle)


def relative_angle(heading, wind_direction):
    """
    Bow-relative signed angle of an absolute direction.

    Returns:
        Angle in degrees, range (-180, 180]
        Positive = starboard side, negative = port side
    """
    return angle_difference(heading, wind_direction)


def calculate_apparent_wind(heading, boat_speed, wind_direction, wind_speed):
    """
    Calculate Apparent Wind (what the boat "feels") from true wind and boat motion.
    Apparent Wind = True Wind + induced headwind (FROM-vectors add)

    Args:
        heading: Boat heading in degrees
        boat_speed: Boat speed through water in knots
        wind_direction: True wind direction in degrees (FROM)
        wind_speed: True wind speed in knots

    Returns:
        (AWA, AWS) tuple, or None if any input is absent:
            AWA: Apparent Wind Angle in degrees (-180, 180]
            AWS: Apparent Wind Speed in knots
    """
    heading = normalize_angle(heading)
    wind_direction = normalize_angle(wind_direction)
    boat_speed = as_finite(boat_speed, 'boat speed')
    wind_speed = as_finite(wind_speed, 'wind speed')
    if None in (heading, wind_direction, boat_speed, wind_speed):
        return None

    # Boat velocity vector (direction of motion)
    boat_vx, boat_vy = vector_from_angle_magnitude(heading, boat_speed)

    # Wind velocity vector (direction wind is coming FROM)
    wind_vx, wind_vy = vector_from_angle_magnitude(wind_direction, wind_speed)

    # Boat motion induces a headwind FROM the heading
    apparent_vx = wind_vx + boat_vx
    apparent_vy = wind_vy + boat_vy

    aws = magnitude(apparent_vx, apparent_vy)
    if aws == 0.0:
        # Boat exactly matches the wind - no apparent wind, angle undefined
        return (0.0, 0.0)

    awa = angle_difference(heading, direction(apparent_vx, apparent_vy))
    return (awa, aws)


def calculate_true_wind(heading, boat_speed, apparent_angle, apparent_speed):
    """
    Recover True Wind from apparent wind and boat motion.
    True Wind = Apparent Wind - induced headwind (inverse of calculate_apparent_wind)

    Args:
        heading: Boat heading in degrees
        boat_speed: Boat speed through water in knots
        apparent_angle: AWA in degrees (negative = port)
        apparent_speed: AWS in knots

    Returns:
        (TWA, TWS, TWD) tuple, or None if any input is absent
    """
    heading = normalize_angle(heading)
    boat_speed = as_finite(boat_speed, 'boat speed')
    apparent_angle = as_finite(apparent_angle, 'apparent wind angle')
    apparent_speed = as_finite(apparent_speed, 'apparent wind speed')
    if None in (heading, boat_speed, apparent_angle, apparent_speed):
        return None

    apparent_direction = normalize_angle(heading + apparent_angle)
    apparent_vx, apparent_vy = vector_from_angle_magnitude(apparent_direction, apparent_speed)
    boat_vx, boat_vy = vector_from_angle_magnitude(heading, boat_speed)

    true_vx = apparent_vx - boat_vx
    true_vy = apparent_vy - boat_vy

    tws = magnitude(true_vx, true_vy)
    if tws == 0.0:
        return (0.0, 0.0, heading)

    twd = direction(true_vx, true_vy)
    twa = angle_difference(heading, twd)
    return (twa, tws, twd)
