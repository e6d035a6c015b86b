"""
Angle conversion and wrapping utilities.

Everything outside this module speaks degrees, the unit the orientation
sensor reports in and the unit shown to the user. Trigonometry happens in
radians, so conversions are kept here in one place.

Critical for:
- Converting raw alpha/beta/gamma readings before building matrices
- Bringing atan2 output into the compass range [0, 360)
"""

from typing import Union

import numpy as np


def degrees_to_radians(degrees: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Convert degrees to radians."""
    return np.deg2rad(degrees)


def radians_to_degrees(radians: Union[float, np.ndarray]) -> Union[float, np.ndarray]:
    """Convert radians to degrees."""
    return np.rad2deg(radians)


def wrap_heading_360(heading_deg: float) -> float:
    """
    Shift an atan2 heading from (-180, 180] into the compass range [0, 360).

    Only a single +360 shift is applied, so the input is expected to come
    straight out of ``atan2``. Larger inputs are not folded back (this is not
    a modulo operation).

    Args:
        heading_deg: Heading in degrees as returned by ``atan2`` (converted).

    Returns:
        Heading in [0, 360). NaN is returned unchanged.

    Example:
        >>> wrap_heading_360(-90.0)
        270.0
        >>> wrap_heading_360(45.0)
        45.0
    """
    if heading_deg < 0.0:
        heading_deg += 360.0
    # -1e-15 + 360 rounds to exactly 360.0 in float64
    if heading_deg >= 360.0:
        heading_deg -= 360.0
    return heading_deg
