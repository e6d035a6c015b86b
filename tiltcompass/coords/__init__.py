"""Coordinate frames and rotation matrices for device orientation.

This module provides the frame definitions and rotation matrix builders
used by the compass pipeline:
- Device-frame reference vectors (north = out of the back, east = right edge)
- Rotation matrix from sensor Euler angles (W3C Z-X'-Y'' order)
- Rotation matrix rebuilt from extracted heading/elevation/roll

Reference: W3C DeviceOrientation Event Specification
"""

from tiltcompass.coords.frames import (
    DEVICE_EAST,
    DEVICE_NORTH,
    reference_vectors,
)
from tiltcompass.coords.rotations import (
    bank_from_roll,
    build_rotation_matrix,
    build_rotation_matrix_from_angles,
    elementary_rotation,
    round_trip_error,
)

__all__ = [
    # Frames
    "DEVICE_NORTH",
    "DEVICE_EAST",
    "reference_vectors",
    # Rotations
    "build_rotation_matrix",
    "build_rotation_matrix_from_angles",
    "elementary_rotation",
    "bank_from_roll",
    "round_trip_error",
]
