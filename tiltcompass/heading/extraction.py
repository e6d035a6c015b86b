"""
Compass angle extraction from transformed reference vectors.

This module implements the heading, elevation and roll computations:
    - Reference vector transformation through the device rotation matrix
    - Heading: atan2(x, y) of the transformed north vector
    - Elevation: atan2(z, sqrt(x^2 + y^2)) of the transformed north vector
    - Roll: atan2(-z, sqrt(x^2 + y^2)) of the transformed east vector
    - Gimbal lock detection (north vector vertical)

Extraction only ever looks at the two transformed vectors, never at the
matrix entries directly.

Why the horizontal radius:
    Elevation and roll use sqrt(x^2 + y^2) as the adjacent side rather than a
    single horizontal component. A single axis would make the result change
    with the direction the device faces: (5, 0, 5), (0, 5, 5) and (3, 4, 5)
    all point 45 degrees above the horizon.

Frame Convention:
    Earth frame x=East, y=North, z=Up. Device north is (0, 0, -1), device
    east is (1, 0, 0) (see tiltcompass.coords.frames).

References:
    W3C DeviceOrientation Event Specification, worked example
"""

from typing import Tuple

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tiltcompass.coords.frames import reference_vectors
from tiltcompass.heading.types import ExtractedAngles
from tiltcompass.utils.angles import degrees_to_radians, radians_to_degrees, wrap_heading_360
from tiltcompass.utils.linalg import as_vector3, horizontal_radius, multiply_matrix_vector


# Horizontal radius below which the north vector counts as vertical
DEFAULT_DEGENERATE_TOLERANCE = 1e-6


def transform_reference_vectors(
    matrix: ArrayLike,
) -> Tuple[NDArray[np.float64], NDArray[np.float64]]:
    """
    Transform the device north and east reference vectors into the Earth frame.

    Args:
        matrix: Device rotation matrix (3, 3), v_earth = R @ v_device.

    Returns:
        Tuple (north, east) of transformed vectors, each shape (3,).

    Example:
        >>> north, east = transform_reference_vectors(np.eye(3))
        >>> north
        array([ 0.,  0., -1.])
    """
    north, east = reference_vectors()
    return multiply_matrix_vector(matrix, north), multiply_matrix_vector(matrix, east)


def heading_from_vector(vector: ArrayLike) -> float:
    """
    Compass heading of a vector's horizontal projection.

    Uses atan2(x, y) so that 0 is north (+y) and 90 is east (+x), then shifts
    negative results by 360. Only the x and y components are read.

    Args:
        vector: Transformed north vector (3,). The z component is ignored
                and may be NaN.

    Returns:
        Heading in degrees, [0, 360).

    Example:
        >>> heading_from_vector([-1.0, 0.0, 0.0])  # pointing west
        270.0
    """
    v = as_vector3(vector)
    heading = radians_to_degrees(np.arctan2(v[0], v[1]))
    return wrap_heading_360(float(heading))


def elevation_from_vector(vector: ArrayLike) -> float:
    """
    Angle of a vector above (+) or below (-) the horizontal plane.

    Args:
        vector: Transformed north vector (3,).

    Returns:
        Elevation in degrees, [-90, 90].

    Example:
        >>> round(elevation_from_vector([3.0, 4.0, 5.0]), 6)
        45.0
    """
    v = as_vector3(vector)
    return float(radians_to_degrees(np.arctan2(v[2], horizontal_radius(v))))


def roll_from_vector(vector: ArrayLike) -> float:
    """
    Dip of a vector below the horizontal plane.

    Same construction as :func:`elevation_from_vector` with the sign of z
    negated: when the right edge of the device drops, roll is positive.

    Args:
        vector: Transformed east vector (3,).

    Returns:
        Roll in degrees.
    """
    v = as_vector3(vector)
    return float(radians_to_degrees(np.arctan2(-v[2], horizontal_radius(v))))


def is_gimbal_locked(
    north: ArrayLike,
    tolerance: float = DEFAULT_DEGENERATE_TOLERANCE,
) -> bool:
    """True when the north vector is (numerically) vertical."""
    return horizontal_radius(north) < tolerance


def calculate_orientation_angles(
    north: ArrayLike,
    east: ArrayLike,
    tolerance: float = DEFAULT_DEGENERATE_TOLERANCE,
) -> ExtractedAngles:
    """
    Extract heading, elevation and roll from the transformed reference vectors.

    When the north vector's horizontal radius is below ``tolerance`` the
    device is looking straight up or down; heading (and with it the roll
    about the forward axis) has no meaning there and both are returned as
    NaN rather than an arbitrary angle. Elevation is still reported.

    Args:
        north: Transformed north vector (3,).
        east: Transformed east vector (3,).
        tolerance: Horizontal radius threshold for gimbal lock.

    Returns:
        ExtractedAngles with heading in [0, 360), elevation in [-90, 90] and
        roll in degrees. Heading and roll are NaN at gimbal lock.

    Raises:
        ValueError: If either vector does not have three components.

    Example:
        >>> angles = calculate_orientation_angles([0.0, 1.0, 0.0], [1.0, 0.0, 0.0])
        >>> (angles.heading, angles.elevation)
        (0.0, 0.0)
    """
    north = as_vector3(north)
    east = as_vector3(east)

    elevation = elevation_from_vector(north)

    if is_gimbal_locked(north, tolerance):
        return ExtractedAngles(heading=float('nan'), elevation=elevation, roll=float('nan'))

    return ExtractedAngles(
        heading=heading_from_vector(north),
        elevation=elevation,
        roll=roll_from_vector(east),
    )


def worked_example_north_vector(
    alpha_deg: float,
    beta_deg: float,
    gamma_deg: float,
) -> NDArray[np.float64]:
    """
    Horizontal components of the transformed north vector in closed form.

    Evaluates the x and y entries of -R[:, 2] directly from the Euler angles,
    as in the W3C worked example, without building the matrix. Gives the
    same heading as the matrix path.

    Args:
        alpha_deg: Sensor alpha in degrees.
        beta_deg: Sensor beta in degrees.
        gamma_deg: Sensor gamma in degrees.

    Returns:
        Vector [x, y, nan]; the vertical component is not computed.
    """
    alpha = degrees_to_radians(alpha_deg)
    beta = degrees_to_radians(beta_deg)
    gamma = degrees_to_radians(gamma_deg)

    cA = np.cos(alpha)
    sA = np.sin(alpha)
    sB = np.sin(beta)
    cG = np.cos(gamma)
    sG = np.sin(gamma)

    x = -cA * sG - sA * sB * cG
    y = -sA * sG + cA * sB * cG

    return np.array([x, y, np.nan], dtype=np.float64)
