"""
End-to-end orientation pipeline.

Chains the stages for one sensor reading:

    sample -> build_rotation_matrix -> transform_reference_vectors
           -> calculate_orientation_angles -> normalize_heading_range (display)
                                           -> build_rotation_matrix_from_angles
                                              (verification)

Every call is independent; behavior is selected by the OrientationConfig
passed in, never by module state.
"""

import logging

import numpy as np

from tiltcompass.coords.rotations import (
    build_rotation_matrix,
    build_rotation_matrix_from_angles,
    round_trip_error,
)
from tiltcompass.heading.display import compass_direction, normalize_heading_range
from tiltcompass.heading.extraction import (
    DEFAULT_DEGENERATE_TOLERANCE,
    calculate_orientation_angles,
    heading_from_vector,
    is_gimbal_locked,
    transform_reference_vectors,
    worked_example_north_vector,
)
from tiltcompass.heading.types import (
    ExtractedAngles,
    HeadingMethod,
    OrientationConfig,
    OrientationReading,
    OrientationSample,
)


logger = logging.getLogger(__name__)


def compass_heading(
    alpha: float,
    beta: float,
    gamma: float,
    method: HeadingMethod = HeadingMethod.LINEAR_ALGEBRA,
    tolerance: float = DEFAULT_DEGENERATE_TOLERANCE,
) -> float:
    """
    Compass heading for one reading.

    Args:
        alpha: Sensor alpha in degrees.
        beta: Sensor beta in degrees.
        gamma: Sensor gamma in degrees.
        method: Matrix product or closed-form worked example.
        tolerance: Horizontal radius threshold for gimbal lock.

    Returns:
        Heading in degrees, [0, 360), or NaN when the device's forward
        axis is vertical.

    Example:
        >>> round(compass_heading(0.0, 90.0, 0.0), 6)  # upright, facing north
        0.0
    """
    if method is HeadingMethod.WORKED_EXAMPLE:
        north = worked_example_north_vector(alpha, beta, gamma)
    else:
        north, _ = transform_reference_vectors(build_rotation_matrix(alpha, beta, gamma))

    # z may be NaN on the worked-example path; only x and y are used
    north = np.array([north[0], north[1], 0.0])
    if is_gimbal_locked(north, tolerance):
        return float('nan')
    return heading_from_vector(north)


def compute_orientation(
    sample: OrientationSample,
    config: OrientationConfig = OrientationConfig(),
) -> OrientationReading:
    """
    Run one complete sample through every stage of the pipeline.

    Args:
        sample: Sensor reading with all three axes present.
        config: Behavior switches (display range, heading method, gimbal
                lock tolerance).

    Returns:
        OrientationReading with both matrices, the transformed reference
        vectors, extracted angles, display heading, compass label and the
        round-trip error of the reconstruction.

    Raises:
        ValueError: If the sample has a missing axis. Callers should check
                    ``sample.is_complete`` and skip such samples.

    Example:
        >>> reading = compute_orientation(OrientationSample(30.0, 20.0, 10.0))
        >>> reading.round_trip_error < 1e-3
        True
    """
    if not sample.is_complete:
        raise ValueError(
            f"Orientation sample has unavailable axes: {sample}. "
            "Check sample.is_complete before computing."
        )

    device_matrix = build_rotation_matrix(sample.alpha, sample.beta, sample.gamma)
    north, east = transform_reference_vectors(device_matrix)
    angles = calculate_orientation_angles(north, east, config.degenerate_tolerance)

    if config.method is HeadingMethod.WORKED_EXAMPLE and not angles.is_degenerate:
        angles = ExtractedAngles(
            heading=compass_heading(
                sample.alpha, sample.beta, sample.gamma,
                method=HeadingMethod.WORKED_EXAMPLE,
                tolerance=config.degenerate_tolerance,
            ),
            elevation=angles.elevation,
            roll=angles.roll,
        )

    if angles.is_degenerate:
        logger.debug(
            "Gimbal lock at alpha=%.3f beta=%.3f gamma=%.3f: heading undefined",
            sample.alpha, sample.beta, sample.gamma,
        )

    display_heading = angles.heading
    if config.normalize_heading:
        display_heading = normalize_heading_range(angles.heading)

    reconstructed = build_rotation_matrix_from_angles(
        angles.heading, angles.elevation, angles.roll
    )

    return OrientationReading(
        sample=sample,
        device_matrix=device_matrix,
        north=north,
        east=east,
        angles=angles,
        display_heading=display_heading,
        direction=compass_direction(angles.heading),
        reconstructed_matrix=reconstructed,
        round_trip_error=round_trip_error(device_matrix, reconstructed),
    )
