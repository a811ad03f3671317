"""
Core Geometry
Pure computation modules; only WindShiftTracker holds state.
"""
