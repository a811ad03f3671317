"""
sailgeom - Configuration
All constants and defaults for the sailing geometry engine.
"""

# ==================== Target AWA Defaults ====================
DEFAULT_TARGET_AWA = 40.0  # degrees - optimal close-hauled angle
DEFAULT_TARGET_TOLERANCE = 3.0  # degrees - acceptable deviation from target

# ==================== Default Polar ====================
# Wind speed (knots) -> optimal upwind angle (degrees)
# Typical 30-40ft cruiser/racer. Passed explicitly to PolarTable.
DEFAULT_UPWIND_ANGLES = {
    0.0: 45.0,   # No wind - wide angle
    5.0: 45.0,   # Light air - sail free for speed
    8.0: 42.0,   # Light-medium - tighten up
    12.0: 40.0,  # Medium - optimal pointing
    16.0: 38.0,  # Medium-heavy - can point higher
    20.0: 36.0,  # Heavy - flatten sails, point high
    25.0: 38.0,  # Very heavy - ease slightly for power
    30.0: 40.0,  # Storm - sail for control
}
POLAR_MAX_ANGLE = 90.0  # degrees - upwind angles above this are rejected

# ==================== Compass Zones ====================
# Point-of-sail bands as (near offset, far offset, name) from the wind.
# The close-hauled band starts at the target angle, so its near offset is None.
POINT_OF_SAIL_BANDS = [
    (None, 60.0, 'close-hauled'),
    (60.0, 90.0, 'close-reach'),
    (90.0, 110.0, 'beam-reach'),
    (110.0, 150.0, 'broad-reach'),
]

ZONE_WIDTH_WIDE = 'wide'  # Outer ring (points of sail, no-go, heading)
ZONE_WIDTH_NARROW = 'narrow'  # Inner ring (performance overlays)

ZONE_NO_GO = 'no-go'
ZONE_PORT = 'port'
ZONE_STARBOARD = 'starboard'

# Renderer hints: base colour and opacity for each zone kind
ZONE_COLORS = {
    'port': 'red',
    'starboard': 'green',
    'no-go': 'white',
    'optimal': 'green',
    'acceptable': 'yellow',
}
ZONE_OPACITY = {
    'close-hauled': 0.6,
    'close-reach': 0.4,
    'beam-reach': 0.25,
    'broad-reach': 0.15,
    'no-go': 0.3,
    'optimal': 0.8,
    'acceptable': 0.7,
    'heading': 0.3,
}

# ==================== Wind Shift Tracking ====================
WIND_SHIFT_WINDOW_SECONDS = 30.0  # Trailing window for baseline samples
WIND_SHIFT_MIN_SAMPLES = 5  # Samples needed before a baseline exists
WIND_SHIFT_NOISE_FLOOR = 3.0  # degrees - smaller shifts are ignored
UPWIND_AWA_LIMIT = 90.0  # degrees - lift/header only meaningful upwind

# ==================== VMG ====================
VMG_POOR_RATIO = 0.5  # VMG below this fraction of SOG is rated poor

# ==================== Compass Rose ====================
COMPASS_POINTS = [
    'N', 'NNE', 'NE', 'ENE',
    'E', 'ESE', 'SE', 'SSE',
    'S', 'SSW', 'SW', 'WSW',
    'W', 'WNW', 'NW', 'NNW',
]
