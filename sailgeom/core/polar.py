"""
Polar Table Loading and Interpolation
Maps true wind speed to the optimal upwind angle for the boat.
Uses piecewise-linear interpolation, clamped at both ends of the table.
"""

import json
import logging
import math

import numpy as np

from sailgeom.config import POLAR_MAX_ANGLE
from sailgeom.core.angles import as_finite

_logger = logging.getLogger(__name__)


class InvalidConfiguration(ValueError):
    """Raised when a polar table (or polar file) cannot be used."""


class PolarTable:
    """
    Wind speed -> optimal upwind angle lookup.

    Immutable once constructed. Values between entries are linearly
    interpolated; speeds outside the table are clamped to the first/last
    entry (no extrapolation).
    """

    def __init__(self, upwind_angles, name='Custom'):
        """
        Build polar table from speed/angle pairs.

        Args:
            upwind_angles: Mapping (or iterable of pairs) of
                           wind speed in knots (>= 0) -> angle in degrees (0-90)
            name: Display name for the table

        Raises:
            InvalidConfiguration: If the table is empty or holds bad values
        """
        pairs = upwind_angles.items() if hasattr(upwind_angles, 'items') else upwind_angles
        try:
            entries = sorted((float(speed), float(angle)) for speed, angle in pairs)
        except (TypeError, ValueError) as e:
            raise InvalidConfiguration(f"Polar table entries must be numeric pairs: {e}") from e

        if not entries:
            raise InvalidConfiguration("Polar table needs at least one entry")

        for speed, angle in entries:
            if not (math.isfinite(speed) and math.isfinite(angle)):
                raise InvalidConfiguration(f"Polar entry {speed} kts -> {angle}° is not finite")
            if speed < 0:
                raise InvalidConfiguration(f"Polar wind speed must be >= 0, got {speed}")
            if not 0.0 <= angle <= POLAR_MAX_ANGLE:
                raise InvalidConfiguration(
                    f"Polar angle must be within 0-{POLAR_MAX_ANGLE:.0f}°, got {angle} at {speed} kts"
                )

        speeds = [speed for speed, _ in entries]
        if len(set(speeds)) != len(speeds):
            raise InvalidConfiguration("Polar table has duplicate wind speeds")

        self.name = name
        self.wind_speeds = np.array(speeds, dtype=float)
        self.upwind_angles = np.array([angle for _, angle in entries], dtype=float)

        # Store bounds for clamping
        self.min_tws = float(self.wind_speeds[0])
        self.max_tws = float(self.wind_speeds[-1])

        # Callers read these arrays directly; keep them read-only
        self.wind_speeds.flags.writeable = False
        self.upwind_angles.flags.writeable = False

    @classmethod
    def from_file(cls, polar_file_path):
        """
        Load polar table from JSON file.

        Args:
            polar_file_path: Path to JSON file with polar data

        JSON Format:
            {
                "name": "...",
                "upwind_angles": {"0": 45, "5": 45, "8": 42, ...}  # knots -> degrees
            }

        Raises:
            InvalidConfiguration: If the file is missing, unreadable or malformed
        """
        try:
            with open(polar_file_path, 'r') as f:
                data = json.load(f)
        except (OSError, json.JSONDecodeError) as e:
            raise InvalidConfiguration(f"Could not read polar file {polar_file_path}: {e}") from e

        if not isinstance(data, dict) or 'upwind_angles' not in data:
            raise InvalidConfiguration(f"Polar file {polar_file_path} has no 'upwind_angles' table")

        angles = data['upwind_angles']
        if not isinstance(angles, (dict, list)):
            raise InvalidConfiguration("'upwind_angles' must be an object or a list of pairs")

        table = cls(angles, name=data.get('name', 'Unknown'))
        _logger.info(
            "Loaded polar table: %s (%d entries, %.0f-%.0f kts)",
            table.name, len(table), table.min_tws, table.max_tws,
        )
        return table

    def interpolate(self, wind_speed):
        """
        Get optimal upwind angle for the given true wind speed.

        Args:
            wind_speed: True Wind Speed in knots

        Returns:
            Optimal upwind angle in degrees, or None if wind speed is absent
        """
        wind_speed = as_finite(wind_speed, 'wind speed')
        if wind_speed is None:
            return None

        # np.interp clamps to the end values and is exact at table keys
        return float(np.interp(wind_speed, self.wind_speeds, self.upwind_angles))

    def __len__(self):
        return len(self.wind_speeds)

    def __repr__(self):
        return f"PolarTable(name='{self.name}', tws_range=[{self.min_tws}, {self.max_tws}] kts)"
