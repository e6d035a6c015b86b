"""Rotation matrix construction for device orientation.

This module builds rotation matrices in the two directions the compass
pipeline needs:
- From raw sensor Euler angles (alpha, beta, gamma)
- From extracted compass angles (heading, elevation, roll), to verify that
  extraction preserved the orientation

Conventions:
- All angles are in degrees.
- Matrices map device-frame vectors to the Earth frame (x=East, y=North,
  z=Up): v_earth = R @ v_device.
- Sensor angles follow the W3C intrinsic Z-X'-Y'' order:
  R = Rz(alpha) @ Rx(beta) @ Ry(gamma)
- Elementary rotations are right-handed (positive angle is
  counter-clockwise when looking down the axis towards the origin).

Reference: W3C DeviceOrientation Event Specification, worked example
(https://www.w3.org/TR/orientation-event/#worked-example)
"""

from typing import Literal

import numpy as np
from numpy.typing import ArrayLike, NDArray

from tiltcompass.coords.frames import reference_vectors
from tiltcompass.utils.angles import degrees_to_radians, radians_to_degrees
from tiltcompass.utils.linalg import as_matrix3, multiply_matrices, multiply_matrix_vector


def build_rotation_matrix(
    alpha_deg: float,
    beta_deg: float,
    gamma_deg: float,
) -> NDArray[np.float64]:
    """Convert sensor Euler angles to a rotation matrix.

    Implements the closed form of R = Rz(alpha) @ Rx(beta) @ Ry(gamma) from
    the W3C worked example. Any real input is accepted; the result is always
    a proper rotation.

    Args:
        alpha_deg: Rotation about the Earth z-axis in degrees, nominally [0, 360).
        beta_deg: Rotation about the rotated x-axis in degrees, nominally [-180, 180].
        gamma_deg: Rotation about the twice-rotated y-axis in degrees,
            nominally [-90, 90].

    Returns:
        3x3 rotation matrix R such that v_earth = R @ v_device.

    Example:
        >>> R = build_rotation_matrix(0.0, 0.0, 0.0)
        >>> np.allclose(R, np.eye(3))
        True

    Reference:
        W3C DeviceOrientation, equation 13a
    """
    alpha = degrees_to_radians(alpha_deg)
    beta = degrees_to_radians(beta_deg)
    gamma = degrees_to_radians(gamma_deg)

    cA = np.cos(alpha)
    sA = np.sin(alpha)
    cB = np.cos(beta)
    sB = np.sin(beta)
    cG = np.cos(gamma)
    sG = np.sin(gamma)

    R = np.array(
        [
            [cA * cG - sA * sB * sG, -cB * sA, cG * sA * sB + cA * sG],
            [cG * sA + cA * sB * sG, cA * cB, sA * sG - cA * cG * sB],
            [-cB * sG, sB, cB * cG],
        ],
        dtype=np.float64,
    )

    return R


def elementary_rotation(axis: Literal['x', 'y', 'z'], angle_deg: float) -> NDArray[np.float64]:
    """Rotation about one principal axis.

    Args:
        axis: Principal axis, one of 'x', 'y', 'z'.
        angle_deg: Right-handed rotation angle in degrees.

    Returns:
        3x3 rotation matrix.

    Raises:
        ValueError: If axis is not 'x', 'y' or 'z'.

    Example:
        >>> Rz = elementary_rotation('z', 90.0)
        >>> np.round(Rz @ np.array([1.0, 0.0, 0.0]), 9)
        array([0., 1., 0.])
    """
    theta = degrees_to_radians(angle_deg)
    c = np.cos(theta)
    s = np.sin(theta)

    if axis == 'x':
        rows = [[1.0, 0.0, 0.0], [0.0, c, -s], [0.0, s, c]]
    elif axis == 'y':
        rows = [[c, 0.0, s], [0.0, 1.0, 0.0], [-s, 0.0, c]]
    elif axis == 'z':
        rows = [[c, -s, 0.0], [s, c, 0.0], [0.0, 0.0, 1.0]]
    else:
        raise ValueError(f"Unknown rotation axis {axis!r}, expected 'x', 'y' or 'z'")

    return np.array(rows, dtype=np.float64)


def bank_from_roll(elevation_deg: float, roll_deg: float) -> float:
    """Recover the rotation about the forward axis from the extracted roll.

    Extracted roll is the dip of the device's right edge below the horizon,
    which relates to the bank angle b about the forward axis by
    sin(roll) = sin(b) * cos(elevation). The solution with cos(b) >= 0 is
    returned, i.e. the right edge is assumed to point to the right of the
    heading.

    Args:
        elevation_deg: Extracted elevation in degrees.
        roll_deg: Extracted roll in degrees.

    Returns:
        Bank angle in degrees, in [-90, 90]. NaN if either input is NaN.
    """
    cos_elevation = np.cos(degrees_to_radians(elevation_deg))
    sin_roll = np.sin(degrees_to_radians(roll_deg))

    with np.errstate(divide='ignore', invalid='ignore'):
        sin_bank = np.float64(sin_roll) / np.float64(cos_elevation)

    # Clamp to avoid numerical issues with arcsin
    sin_bank = np.clip(sin_bank, -1.0, 1.0)
    return float(radians_to_degrees(np.arcsin(sin_bank)))


def build_rotation_matrix_from_angles(
    heading: float,
    elevation: float,
    roll: float,
) -> NDArray[np.float64]:
    """Rebuild a device rotation matrix from extracted compass angles.

    The matrix is composed from three elementary rotations:

    - R_roll = Rz(-bank): bank about the device's forward axis (device z,
      along which the north reference vector (0, 0, -1) lies), with bank
      recovered from roll by :func:`bank_from_roll`
    - R_elevation = Rx(90 + elevation): tips the forward axis from straight
      down (rest pose) up to the extracted elevation
    - R_heading = Rz(-heading): swings the forward axis clockwise from north

    R = R_heading @ R_elevation @ R_roll, so a device vector is rolled
    first, then elevated, then turned to its heading.

    Transforming the north and east reference vectors through R reproduces
    the vectors the angles were extracted from, provided the pose is not
    degenerate and the device's right edge points to the right of the
    heading (sin(beta) > 0 for sensor readings).

    Args:
        heading: Heading in degrees, clockwise from north.
        elevation: Elevation of the forward axis in degrees.
        roll: Dip of the right edge below the horizon in degrees.

    Returns:
        3x3 rotation matrix. All entries are NaN when any angle is NaN.

    Example:
        >>> R = build_rotation_matrix_from_angles(0.0, 0.0, 0.0)
        >>> np.allclose(R @ np.array([0.0, 0.0, -1.0]), [0.0, 1.0, 0.0])  # forward -> north
        True
    """
    if np.isnan(heading) or np.isnan(elevation) or np.isnan(roll):
        return np.full((3, 3), np.nan, dtype=np.float64)

    bank = bank_from_roll(elevation, roll)

    R_heading = elementary_rotation('z', -heading)
    R_elevation = elementary_rotation('x', 90.0 + elevation)
    R_roll = elementary_rotation('z', -bank)

    return multiply_matrices(multiply_matrices(R_heading, R_elevation), R_roll)


def round_trip_error(original: ArrayLike, reconstructed: ArrayLike) -> float:
    """Largest disagreement between two matrices on the reference vectors.

    Both matrices transform the device-frame north and east vectors; the
    result is the maximum absolute component difference over both.

    Args:
        original: Matrix built from the sensor reading.
        reconstructed: Matrix rebuilt from extracted angles.

    Returns:
        Maximum absolute difference. NaN if either matrix contains NaN.
    """
    R_original = as_matrix3(original)
    R_reconstructed = as_matrix3(reconstructed)

    errors = []
    for v in reference_vectors():
        diff = multiply_matrix_vector(R_original, v) - multiply_matrix_vector(R_reconstructed, v)
        errors.append(np.max(np.abs(diff)))

    return float(max(errors)) if not np.any(np.isnan(errors)) else float('nan')
