"""
sailgeom - Sailing Geometry Engine
Angle math, polar lookup, compass zones, performance, laylines, VMG and
wind shift tracking for marine instrument displays.
"""

from sailgeom.core.angles import angle_difference, circular_mean, is_between, normalize_angle
from sailgeom.core.laylines import Laylines, calculate_laylines, can_reach, tack_angle
from sailgeom.core.performance import PerformanceStatus, classify_performance
from sailgeom.core.polar import InvalidConfiguration, PolarTable
from sailgeom.core.vmg import calculate_vmg_to_wind
from sailgeom.core.wind import TackSide, tack_side
from sailgeom.core.wind_shift import ShiftType, WindShiftTracker
from sailgeom.core.zones import CompassZoneBuilder, Zone

__version__ = '0.1.0'

__all__ = [
    'CompassZoneBuilder',
    'InvalidConfiguration',
    'Laylines',
    'PerformanceStatus',
    'PolarTable',
    'ShiftType',
    'TackSide',
    'WindShiftTracker',
    'Zone',
    'angle_difference',
    'calculate_laylines',
    'calculate_vmg_to_wind',
    'can_reach',
    'circular_mean',
    'classify_performance',
    'is_between',
    'normalize_angle',
    'tack_angle',
    'tack_side',
]
