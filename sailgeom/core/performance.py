"""
Performance Classification
Compares the current apparent wind angle against the target angle.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from sailgeom.core.angles import as_finite


class PerformanceStatus(Enum):
    """Where the current AWA sits relative to the target bands."""
    OPTIMAL = 'optimal'
    ACCEPTABLE_HIGH = 'acceptable-high'
    ACCEPTABLE_LOW = 'acceptable-low'
    POOR_HIGH = 'poor-high'
    POOR_LOW = 'poor-low'

    @property
    def label(self) -> str:
        """Short display text."""
        return _LABELS[self]


_LABELS = {
    PerformanceStatus.OPTIMAL: 'OPTIMAL',
    PerformanceStatus.ACCEPTABLE_HIGH: 'HIGH',
    PerformanceStatus.ACCEPTABLE_LOW: 'LOW',
    PerformanceStatus.POOR_HIGH: 'TOO HIGH',
    PerformanceStatus.POOR_LOW: 'TOO LOW',
}


@dataclass(frozen=True)
class PerformanceResult:
    """
    Attributes:
        status: Discrete performance band
        offset: |AWA| - target in degrees (positive = sailing wider than target)
    """
    status: PerformanceStatus
    offset: float


def classify_performance(apparent_wind_angle, target_angle, tolerance) -> Optional[PerformanceResult]:
    """
    Classify the current AWA against target ± tolerance.

    |offset| <= tolerance       -> OPTIMAL
    |offset| <= 2 * tolerance   -> ACCEPTABLE_HIGH / ACCEPTABLE_LOW
    otherwise                   -> POOR_HIGH / POOR_LOW
    Boundary values belong to the tighter band.

    Args:
        apparent_wind_angle: AWA in degrees (sign = tack, ignored here)
        target_angle: Target AWA in degrees
        tolerance: Tolerance in degrees

    Returns:
        PerformanceResult, or None if any input is absent
    """
    awa = as_finite(apparent_wind_angle, 'apparent wind angle')
    target = as_finite(target_angle, 'target angle')
    tolerance = as_finite(tolerance, 'tolerance')
    if awa is None or target is None or tolerance is None:
        return None

    offset = abs(awa) - target
    distance = abs(offset)
    high = offset > 0

    if distance <= tolerance:
        status = PerformanceStatus.OPTIMAL
    elif distance <= 2 * tolerance:
        status = PerformanceStatus.ACCEPTABLE_HIGH if high else PerformanceStatus.ACCEPTABLE_LOW
    else:
        status = PerformanceStatus.POOR_HIGH if high else PerformanceStatus.POOR_LOW

    return PerformanceResult(status, offset)


def effective_target_angle(target_angle, polar=None, wind_speed=None):
    """
    Target angle to steer to: from the polar when wind speed is known,
    otherwise the configured target.

    Args:
        target_angle: Configured target AWA in degrees
        polar: Optional PolarTable
        wind_speed: Optional true wind speed in knots
    """
    if polar is not None:
        polar_angle = polar.interpolate(wind_speed)
        if polar_angle is not None:
            return polar_angle
    return as_finite(target_angle, 'target angle')
