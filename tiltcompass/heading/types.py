"""
Data structures for compass heading extraction.

This module defines the value types passed between the stages of the
heading pipeline:
    - OrientationSample: one raw sensor reading (alpha, beta, gamma)
    - ExtractedAngles: heading / elevation / roll derived from a reading
    - OrientationConfig: explicit behavior switches for the pipeline
    - OrientationReading: everything the pipeline computed for one sample

All structures are frozen dataclasses. Each is created per reading and
discarded afterwards; nothing here is shared between calls.

Angle Convention:
    All angles are in degrees. Heading is clockwise from north in [0, 360),
    elevation is in [-90, 90], roll in [-180, 180].
"""

import math
from dataclasses import dataclass
from enum import Enum
from typing import Optional

import numpy as np


class HeadingMethod(Enum):
    """How the transformed north vector is obtained for the heading.

    Attributes:
        LINEAR_ALGEBRA: Build the full rotation matrix and multiply the
            north reference vector through it.
        WORKED_EXAMPLE: Closed-form horizontal components from the W3C
            worked example, without building the matrix.
    """

    LINEAR_ALGEBRA = "linear"
    WORKED_EXAMPLE = "worked"


@dataclass(frozen=True)
class OrientationSample:
    """
    One raw orientation reading from the device sensor.

    Any axis may be missing (``None``) when the sensor does not report it.
    The pipeline must only be given complete samples; check
    :attr:`is_complete` before computing.

    Attributes:
        alpha: Rotation about the Earth z-axis in degrees, nominally [0, 360).
        beta: Front-to-back tilt in degrees, nominally [-180, 180].
        gamma: Left-to-right tilt in degrees, nominally [-90, 90].

    Example:
        >>> sample = OrientationSample(alpha=30.0, beta=20.0, gamma=10.0)
        >>> sample.is_complete
        True
        >>> OrientationSample(alpha=None, beta=20.0, gamma=10.0).is_complete
        False
    """

    alpha: Optional[float]
    beta: Optional[float]
    gamma: Optional[float]

    @property
    def is_complete(self) -> bool:
        """True when all three axes carry a finite value."""
        return all(
            value is not None and math.isfinite(value)
            for value in (self.alpha, self.beta, self.gamma)
        )


@dataclass(frozen=True)
class ExtractedAngles:
    """
    Compass angles extracted from the transformed reference vectors.

    When the forward (north) vector points straight up or down, heading and
    roll are undefined and stored as NaN; elevation is still meaningful
    (±90°) in that case.

    Attributes:
        heading: Compass bearing in degrees, [0, 360), clockwise from north.
        elevation: Pitch of the forward axis above the horizon, [-90, 90].
        roll: Dip of the device's right edge below the horizon, [-180, 180].
    """

    heading: float
    elevation: float
    roll: float

    @property
    def is_degenerate(self) -> bool:
        """True when heading/roll could not be determined (gimbal lock)."""
        return math.isnan(self.heading) or math.isnan(self.roll)


@dataclass(frozen=True)
class OrientationConfig:
    """
    Behavior switches for the orientation pipeline.

    Replaces global toggles: every call receives the configuration it runs
    with, so results depend on arguments only.

    Attributes:
        normalize_heading: Show heading in (-180, 180] instead of [0, 360).
                           Default: True.
        method: How the heading's north vector is computed.
                Default: HeadingMethod.LINEAR_ALGEBRA.
        degenerate_tolerance: Horizontal radius of the north vector below
                              which heading and roll are reported as NaN.
                              Default: 1e-6.
        decimals: Number of decimal places in formatted output. Default: 1.

    Example:
        >>> config = OrientationConfig(normalize_heading=False)
        >>> config.method
        <HeadingMethod.LINEAR_ALGEBRA: 'linear'>
    """

    normalize_heading: bool = True
    method: HeadingMethod = HeadingMethod.LINEAR_ALGEBRA
    degenerate_tolerance: float = 1e-6
    decimals: int = 1

    def __post_init__(self) -> None:
        """Validate configuration values."""
        if not isinstance(self.method, HeadingMethod):
            raise ValueError(
                f"method must be a HeadingMethod, got {self.method!r}"
            )
        if not self.degenerate_tolerance >= 0.0:
            raise ValueError(
                f"degenerate_tolerance must be non-negative, got {self.degenerate_tolerance}"
            )
        if self.decimals < 0:
            raise ValueError(f"decimals must be non-negative, got {self.decimals}")


@dataclass(frozen=True, eq=False)
class OrientationReading:
    """
    Result of running one sample through the orientation pipeline.

    Attributes:
        sample: The raw reading the result was computed from.
        device_matrix: Rotation matrix built from the raw Euler angles (3, 3).
        north: Transformed north reference vector (3,).
        east: Transformed east reference vector (3,).
        angles: Extracted heading/elevation/roll.
        display_heading: Heading in the configured display range
                         (NaN when degenerate).
        direction: Eight-point compass label, or "--" when degenerate.
        reconstructed_matrix: Matrix rebuilt from ``angles`` (3, 3),
                              NaN-filled when degenerate.
        round_trip_error: Max absolute difference between the reference
                          vectors transformed by both matrices.
    """

    sample: OrientationSample
    device_matrix: np.ndarray
    north: np.ndarray
    east: np.ndarray
    angles: ExtractedAngles
    display_heading: float
    direction: str
    reconstructed_matrix: np.ndarray
    round_trip_error: float

    @property
    def is_degenerate(self) -> bool:
        """True when the reading is in gimbal lock."""
        return self.angles.is_degenerate
