"""
Base Providers - Abstract Interfaces for Compass Renderers
Defines the contracts a compass widget calls each frame to get its zones,
pointers and overlay readouts. Providers only compute data; drawing is
up to the renderer.
"""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from sailgeom.config import DEFAULT_TARGET_AWA, DEFAULT_TARGET_TOLERANCE
from sailgeom.core.zones import Zone


@dataclass
class CompassContext:
    """
    Live telemetry for one frame. Any field may be None when the
    corresponding data is not available.

    Attributes:
        heading: Vessel heading in degrees (true or magnetic)
        apparent_wind_angle: AWA in degrees (negative = port)
        true_wind_direction: TWD in degrees (FROM)
        true_wind_speed: TWS in knots
        sog: Speed Over Ground in knots
        cog: Course Over Ground in degrees
        waypoint_bearing: True bearing to next waypoint in degrees
        target_angle: Configured target AWA in degrees
        tolerance: Target tolerance in degrees
        polar: Optional PolarTable for a wind-speed dependent target
        timestamp: Frame time (datetime or seconds) for wind shift tracking
    """
    heading: Optional[float] = None
    apparent_wind_angle: Optional[float] = None
    true_wind_direction: Optional[float] = None
    true_wind_speed: Optional[float] = None
    sog: Optional[float] = None
    cog: Optional[float] = None
    waypoint_bearing: Optional[float] = None
    target_angle: float = DEFAULT_TARGET_AWA
    tolerance: float = DEFAULT_TARGET_TOLERANCE
    polar: Any = None  # PolarTable
    timestamp: Any = None


class BaseProvider(ABC):
    """
    Common state for all providers.
    """

    def __init__(self, config: Optional[Dict[str, Any]] = None):
        """
        Initialize provider with configuration.

        Args:
            config: Provider-specific configuration dict
        """
        self.config = config if config is not None else {}

    def get_name(self) -> str:
        """
        Return human-readable provider name.

        Returns:
            Provider name string
        """
        return self.__class__.__name__


class ZoneProvider(BaseProvider):
    """Supplies the colored rim zones, in paint order."""

    @abstractmethod
    def build_zones(self, context: CompassContext) -> List[Zone]:
        """
        Compute zones for this frame.

        Args:
            context: CompassContext with live telemetry

        Returns:
            List of Zone, later entries painted on top
        """
        pass


class PointerProvider(BaseProvider):
    """Supplies named needle/marker angles."""

    @abstractmethod
    def build_pointers(self, context: CompassContext) -> Dict[str, float]:
        """
        Compute pointer angles for this frame.

        Returns:
            Dict of pointer name -> angle in degrees [0, 360).
            Pointers without data are left out.
        """
        pass


class OverlayProvider(BaseProvider):
    """Supplies the numeric/status readouts drawn over the compass."""

    @abstractmethod
    def build_overlay(self, context: CompassContext) -> Dict[str, Any]:
        """
        Compute overlay values for this frame.

        Returns:
            Dict of readout name -> value (None when not available)
        """
        pass
