"""
Wind Shift Tracking
Rolling window of true wind direction samples with a circular-mean
baseline, used to call lifts and headers on the current tack.
"""

import logging
from collections import deque
from dataclasses import dataclass
from datetime import datetime, timedelta
from enum import Enum
from typing import Any, Optional, Tuple

from sailgeom.config import (
    UPWIND_AWA_LIMIT,
    WIND_SHIFT_MIN_SAMPLES,
    WIND_SHIFT_NOISE_FLOOR,
    WIND_SHIFT_WINDOW_SECONDS,
)
from sailgeom.core.angles import angle_difference, as_finite, circular_mean, normalize_angle

_logger = logging.getLogger(__name__)


class ShiftType(str, Enum):
    """Favorable (lift) or unfavorable (header) shift for the current tack."""
    LIFT = 'lift'
    HEADER = 'header'


@dataclass(frozen=True)
class WindSample:
    """Single true wind direction observation."""
    direction: float
    timestamp: Any  # datetime or seconds


def classify_shift(shift, apparent_wind_angle) -> Optional[ShiftType]:
    """
    Determine if a wind shift is a lift or a header.

    Port tack: clockwise shift (+) = lift, counterclockwise (-) = header
    Starboard tack: counterclockwise (-) = lift, clockwise (+) = header

    Args:
        shift: Signed shift from baseline in degrees
        apparent_wind_angle: AWA in degrees (negative = port tack)

    Returns:
        ShiftType, or None when the shift is below the noise floor, the
        boat is not sailing upwind, or an input is absent
    """
    shift = as_finite(shift, 'wind shift')
    awa = as_finite(apparent_wind_angle, 'apparent wind angle')
    if shift is None or awa is None:
        return None

    # Shift too small to matter
    if abs(shift) < WIND_SHIFT_NOISE_FLOOR:
        return None

    # Only meaningful when sailing upwind
    if abs(awa) > UPWIND_AWA_LIMIT:
        return None

    if awa < 0:
        return ShiftType.LIFT if shift > 0 else ShiftType.HEADER
    return ShiftType.LIFT if shift < 0 else ShiftType.HEADER


class WindShiftTracker:
    """
    Holds the last WIND_SHIFT_WINDOW_SECONDS of true wind direction.

    Unseeded until the window holds WIND_SHIFT_MIN_SAMPLES samples; from then
    on a baseline (circular mean) is recomputed on every sample. Samples are
    pruned by age on every append, so memory is bounded by the window length.

    Not thread-safe: feed a tracker from a single update loop.
    """

    def __init__(self, window_seconds=WIND_SHIFT_WINDOW_SECONDS,
                 min_samples=WIND_SHIFT_MIN_SAMPLES):
        """
        Args:
            window_seconds: Trailing window to keep samples for
            min_samples: Samples required before a baseline exists
        """
        self.window_seconds = float(window_seconds)
        self.min_samples = int(min_samples)
        self.samples: deque = deque()
        self.baseline: Optional[float] = None
        self._latest = None  # Newest timestamp seen

    @property
    def is_seeded(self) -> bool:
        return self.baseline is not None

    def add_sample(self, direction, timestamp) -> None:
        """
        Record a true wind direction observation.

        Args:
            direction: True wind direction in degrees
            timestamp: datetime, or monotonic seconds
        """
        direction = normalize_angle(direction)
        if direction is None or timestamp is None:
            return

        if self._latest is None or timestamp > self._latest:
            self._latest = timestamp

        cutoff = self._cutoff(self._latest)
        if timestamp < cutoff:
            _logger.debug("Dropping stale wind sample at %s", timestamp)
            return

        # Buffer stays in timestamp order; pruning only checks the left end
        index = len(self.samples)
        while index > 0 and self.samples[index - 1].timestamp > timestamp:
            index -= 1
        self.samples.insert(index, WindSample(direction, timestamp))

        # Remove old samples (oldest are on the left)
        while self.samples and self.samples[0].timestamp < cutoff:
            self.samples.popleft()

        if len(self.samples) >= self.min_samples:
            self.baseline = circular_mean(s.direction for s in self.samples)
        else:
            self.baseline = None

    def shift(self, current_direction) -> Optional[float]:
        """
        Signed shift from baseline to the current direction.

        Returns:
            Degrees in (-180, 180] (positive = clockwise / veer),
            or None if unseeded or direction is absent
        """
        if self.baseline is None:
            return None
        return angle_difference(self.baseline, current_direction)

    def classify(self, shift, apparent_wind_angle) -> Optional[ShiftType]:
        """Lift/header call for a shift on the current tack."""
        return classify_shift(shift, apparent_wind_angle)

    def direction_range(self) -> Optional[Tuple[float, float]]:
        """
        Extremes of the wind direction seen in the window.

        Returns:
            (most counterclockwise, most clockwise) directions in degrees
            relative to the baseline, or None if unseeded
        """
        if self.baseline is None:
            return None

        offsets = [angle_difference(self.baseline, s.direction) for s in self.samples]
        return (
            normalize_angle(self.baseline + min(offsets)),
            normalize_angle(self.baseline + max(offsets)),
        )

    def reset(self) -> None:
        """Clear all samples and the baseline."""
        self.samples.clear()
        self.baseline = None
        self._latest = None

    def __len__(self):
        return len(self.samples)

    def _cutoff(self, timestamp):
        if isinstance(timestamp, datetime):
            return timestamp - timedelta(seconds=self.window_seconds)
        return timestamp - self.window_seconds
