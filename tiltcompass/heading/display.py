"""
Display helpers for compass readings.

Turns extracted angles into what a user sees: a heading in the chosen
display range, a one-decimal degree string and an eight-point compass
label. Nothing here feeds back into the orientation math.
"""

import math
from typing import Optional

from tiltcompass.heading.types import OrientationReading


COMPASS_DIRECTIONS = ('N', 'NE', 'E', 'SE', 'S', 'SW', 'W', 'NW')

# Placeholder for a value that is missing or undefined
MISSING_VALUE = '--'

# Shown instead of a heading when the reading is in gimbal lock
INDETERMINATE_LABEL = 'tilt device'


def normalize_heading_range(heading_deg: float) -> float:
    """
    Map a compass heading from [0, 360) to (-180, 180].

    Subtracts 360 from headings above 180. This is a one-shot display
    transform, not a modulo wrap: the input must be a canonical [0, 360)
    heading and the output must not be passed through again.

    Args:
        heading_deg: Heading in degrees, [0, 360).

    Returns:
        Heading in degrees, (-180, 180]. NaN is returned unchanged.

    Example:
        >>> normalize_heading_range(270.0)
        -90.0
        >>> normalize_heading_range(180.0)
        180.0
    """
    if heading_deg > 180.0:
        return heading_deg - 360.0
    return heading_deg


def compass_direction(heading_deg: float) -> str:
    """
    Eight-point compass label for a heading.

    Computes round(heading / 45) mod 8 with halves rounded up, so each
    label covers the 45 degree sector centred on it (N is 337.5 to 22.5).
    Negative (normalized) headings map to the same labels as their
    [0, 360) counterparts.

    Args:
        heading_deg: Heading in degrees.

    Returns:
        One of 'N', 'NE', 'E', 'SE', 'S', 'SW', 'W', 'NW', or '--' for NaN or
        infinite input.

    Example:
        >>> compass_direction(90.0)
        'E'
        >>> compass_direction(359.9)
        'N'
    """
    if not math.isfinite(heading_deg):
        return MISSING_VALUE

    index = math.floor(heading_deg / 45.0 + 0.5) % 8
    return COMPASS_DIRECTIONS[index]


def format_angle(value: Optional[float], decimals: int = 1) -> str:
    """
    Format an angle with a fixed number of decimals and a degree sign.

    Example:
        >>> format_angle(123.456)
        '123.5°'
        >>> format_angle(None)
        '--'
    """
    if value is None or math.isnan(value):
        return MISSING_VALUE
    return f"{value:.{decimals}f}°"


def format_reading(reading: OrientationReading, decimals: int = 1) -> str:
    """
    One-line summary of a pipeline result.

    Degenerate readings show :data:`INDETERMINATE_LABEL` in place of the
    heading and direction.
    """
    sample = reading.sample
    raw = (
        f"alpha={format_angle(sample.alpha, decimals)} "
        f"beta={format_angle(sample.beta, decimals)} "
        f"gamma={format_angle(sample.gamma, decimals)}"
    )

    if reading.is_degenerate:
        heading = f"heading={INDETERMINATE_LABEL}"
    else:
        heading = (
            f"heading={format_angle(reading.display_heading, decimals)} "
            f"({reading.direction})"
        )

    return (
        f"{raw} | {heading} "
        f"elevation={format_angle(reading.angles.elevation, decimals)} "
        f"roll={format_angle(reading.angles.roll, decimals)}"
    )
