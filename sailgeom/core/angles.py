"""
Angle Math
Pure functions for angle normalization, wraparound-safe interval tests,
circular averaging and vector helpers.
No state - all functions are side-effect free.

All angles are in degrees, 0=North, increasing clockwise.
Absent (None) or non-finite inputs yield None instead of raising.
"""

import logging
import math

import numpy as np
from scipy.stats import circmean

from sailgeom.config import COMPASS_POINTS

_logger = logging.getLogger(__name__)

# Labels already reported as non-finite (warn once per label)
_reported_labels = set()


# ==================== Input Guards ====================

def as_finite(value, label='value'):
    """
    Convert a telemetry value to float, treating NaN/Infinity as absent.

    Args:
        value: Number or None
        label: Name used in the one-time warning

    Returns:
        float, or None if value is None or not finite
    """
    if value is None:
        return None

    value = float(value)
    if math.isfinite(value):
        return value

    if label not in _reported_labels:
        _reported_labels.add(label)
        _logger.warning("Ignoring non-finite %s: %r", label, value)
    return None


# ==================== Normalization ====================

def normalize_angle(angle):
    """
    Normalize angle to [0, 360) range.

    Args:
        angle: Angle in degrees (any real number)

    Returns:
        Normalized angle in [0, 360), or None for absent/non-finite input
    """
    angle = as_finite(angle, 'angle')
    if angle is None:
        return None

    angle %= 360.0
    # Tiny negative inputs round up to exactly 360.0
    if angle >= 360.0:
        angle = 0.0
    return angle


def normalize_radians(radians):
    """Normalize angle to [0, 2π) range, or None for absent/non-finite input."""
    radians = as_finite(radians, 'radians')
    if radians is None:
        return None

    full_turn = 2 * math.pi
    radians %= full_turn
    if radians >= full_turn:
        radians = 0.0
    return radians


def reciprocal(bearing):
    """Bearing 180° opposite to the input (e.g. 45 -> 225)."""
    if bearing is None:
        return None
    return normalize_angle(bearing + 180.0)


# ==================== Differences and Intervals ====================

def angle_difference(angle1, angle2):
    """
    Calculate shortest signed rotation from angle1 to angle2.
    Handles wraparound (e.g., 350° to 10° is +20°, not +340°).

    Args:
        angle1: First angle in degrees
        angle2: Second angle in degrees

    Returns:
        Difference in degrees, range (-180, 180]
        Positive = clockwise from angle1 to angle2
        Negative = counterclockwise from angle1 to angle2
        Exactly opposite angles always give +180.
    """
    angle1 = normalize_angle(angle1)
    angle2 = normalize_angle(angle2)
    if angle1 is None or angle2 is None:
        return None

    diff = normalize_angle(angle2 - angle1)
    if diff > 180.0:
        diff -= 360.0
    return diff


def is_between(angle, start, end):
    """
    Check if angle lies in the clockwise interval from start to end.

    Both bounds are inclusive. If start > end (after normalization) the
    interval crosses 0°. start == end is the single-point interval.

    Args:
        angle: Angle to test in degrees
        start: Interval start in degrees
        end: Interval end in degrees

    Returns:
        True if angle is inside the interval, False otherwise
        (also False for absent/non-finite input)
    """
    angle = normalize_angle(angle)
    start = normalize_angle(start)
    end = normalize_angle(end)
    if angle is None or start is None or end is None:
        return False

    if start <= end:
        return start <= angle <= end
    return angle >= start or angle <= end


def is_in_sector(angle, center, half_width):
    """
    Check if angle is within center ± half_width.
    Correctly handles sectors that cross 0°/360°.
    """
    diff = angle_difference(center, angle)
    if diff is None or half_width is None:
        return False
    return abs(diff) <= half_width


# ==================== Averaging ====================

def circular_mean(angles):
    """
    Average a list of angles using vector arithmetic.

    Sums unit vectors (sin/cos) and recombines with atan2, so averaging
    [359°, 1°] gives 0° (not 180°). Non-finite samples are skipped.

    Args:
        angles: Iterable of angles in degrees

    Returns:
        Mean direction in [0, 360), or None if there are no usable samples
    """
    samples = [a for a in (as_finite(a, 'sample') for a in angles) if a is not None]
    if not samples:
        return None

    mean = circmean(np.asarray(samples, dtype=float), high=360.0, low=0.0)
    return normalize_angle(float(mean))


# ==================== Compass Helpers ====================

def to_compass_point(bearing):
    """
    16-point compass rose name for a bearing.

    Examples: 0 -> 'N', 45 -> 'NE', 337.5 -> 'NNW'
    """
    bearing = normalize_angle(bearing)
    if bearing is None:
        return None

    index = int((bearing + 11.25) // 22.5) % 16
    return COMPASS_POINTS[index]


def bearing_between(lat1, lon1, lat2, lon2):
    """
    Initial great-circle bearing from the first position to the second.

    Args:
        lat1, lon1: Own position in degrees
        lat2, lon2: Target position (e.g. the next waypoint) in degrees

    Returns:
        True bearing in [0, 360), or None if any coordinate is absent
    """
    coords = [as_finite(value, 'coordinate') for value in (lat1, lon1, lat2, lon2)]
    if None in coords:
        return None

    phi1, lam1, phi2, lam2 = (math.radians(value) for value in coords)
    delta = lam2 - lam1

    east = math.sin(delta) * math.cos(phi2)
    north = math.cos(phi1) * math.sin(phi2) - math.sin(phi1) * math.cos(phi2) * math.cos(delta)
    return direction(east, north)


# ==================== Vector Math ====================
# Vectors are (east, north) pairs; bearings are compass degrees.

def vector_from_angle_magnitude(bearing, length):
    """East/north components of a vector of the given length along a bearing."""
    theta = math.radians(bearing)
    return (length * math.sin(theta), length * math.cos(theta))


def magnitude(east, north):
    return math.hypot(east, north)


def direction(east, north):
    """Compass bearing of an (east, north) vector, in [0, 360)."""
    return normalize_angle(math.degrees(math.atan2(east, north)))
