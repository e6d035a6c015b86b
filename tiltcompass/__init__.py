"""Tilt-compensated compass heading from device orientation readings.

This package turns a device's raw orientation reading (W3C
DeviceOrientation alpha, beta, gamma in degrees) into a compass heading,
an elevation (pitch) and a roll (bank) angle, and rebuilds a rotation
matrix from those angles to check that nothing was lost on the way:
- utils: Angle helpers and 3-vector / 3x3 matrix primitives
- coords: Frames, reference vectors and rotation matrix construction
- heading: Angle extraction, display formatting and the full pipeline
"""

__version__ = "0.1.0"
