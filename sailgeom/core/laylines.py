"""
Layline Calculation
Laylines at the target angle either side of the true wind, waypoint
reachability on each tack, and the turn needed onto each layline.
"""

from dataclasses import dataclass
from typing import Optional

from sailgeom.core.angles import angle_difference, as_finite, is_between, normalize_angle


@dataclass(frozen=True)
class Laylines:
    """Layline headings in degrees [0, 360)."""
    port: float
    starboard: float


@dataclass(frozen=True)
class LaylineSolution:
    """
    Everything a laylines readout needs for one frame.

    Attributes:
        laylines: Port and starboard layline headings
        can_fetch_port: Waypoint reachable on the port layline
        can_fetch_starboard: Waypoint reachable on the starboard layline
        port_tack_angle: Signed turn from course onto the port layline
        starboard_tack_angle: Signed turn from course onto the starboard layline
                              (tack angles are None without a course)
    """
    laylines: Laylines
    can_fetch_port: bool
    can_fetch_starboard: bool
    port_tack_angle: Optional[float]
    starboard_tack_angle: Optional[float]


def calculate_laylines(true_wind_direction, target_angle) -> Optional[Laylines]:
    """
    Calculate laylines: TWD ± target angle.

    Args:
        true_wind_direction: TWD in degrees (FROM)
        target_angle: Optimal upwind angle in degrees

    Returns:
        Laylines(port=TWD+target, starboard=TWD-target), or None if absent
    """
    twd = as_finite(true_wind_direction, 'true wind direction')
    target = as_finite(target_angle, 'target angle')
    if twd is None or target is None:
        return None

    return Laylines(
        port=normalize_angle(twd + target),
        starboard=normalize_angle(twd - target),
    )


def can_reach(waypoint_bearing, layline, wind_direction):
    """
    Check if the waypoint bearing falls inside the sailable arc bounded by
    a layline and the wind axis (bounds included).

    Port layline (clockwise of the wind): arc from the layline clockwise
    round to the wind. Starboard layline (counterclockwise of the wind):
    arc from the wind clockwise round to the layline. Either way the
    no-go half-cone on that side of the wind is excluded.

    Returns:
        True if the waypoint is reachable on that tack, False otherwise
        (also False for absent input)
    """
    side = angle_difference(wind_direction, layline)
    if side is None or as_finite(waypoint_bearing, 'waypoint bearing') is None:
        return False

    if side >= 0:
        return is_between(waypoint_bearing, layline, wind_direction)
    return is_between(waypoint_bearing, wind_direction, layline)


def tack_angle(navigation_course, layline):
    """
    Signed turn (degrees, (-180, 180]) from the current course onto a layline.
    Positive = turn to starboard. None if either input is absent.
    """
    return angle_difference(navigation_course, layline)


def navigation_course(cog=None, heading_true=None, heading_magnetic=None):
    """
    Course reference for layline maths: COG (actual track) preferred,
    then true heading, then magnetic heading.
    """
    for course in (cog, heading_true, heading_magnetic):
        course = normalize_angle(course)
        if course is not None:
            return course
    return None


def solve_laylines(true_wind_direction, target_angle, waypoint_bearing,
                   course=None) -> Optional[LaylineSolution]:
    """
    Bundle laylines, reachability and tack angles for a waypoint.

    Args:
        true_wind_direction: TWD in degrees
        target_angle: Optimal upwind angle in degrees
        waypoint_bearing: True bearing to the waypoint in degrees
        course: Current navigation course (see navigation_course)

    Returns:
        LaylineSolution, or None if wind or waypoint is absent
    """
    laylines = calculate_laylines(true_wind_direction, target_angle)
    if laylines is None or normalize_angle(waypoint_bearing) is None:
        return None

    return LaylineSolution(
        laylines=laylines,
        can_fetch_port=can_reach(waypoint_bearing, laylines.port, true_wind_direction),
        can_fetch_starboard=can_reach(waypoint_bearing, laylines.starboard, true_wind_direction),
        port_tack_angle=tack_angle(course, laylines.port),
        starboard_tack_angle=tack_angle(course, laylines.starboard),
    )
