"""Example: Compass heading, elevation and roll from device orientation.

This example walks one sensor reading through every stage of the
pipeline:
1. Build the rotation matrix from alpha, beta, gamma
2. Transform the device north and east reference vectors
3. Extract heading, elevation and roll
4. Normalize the heading for display and label it
5. Rebuild the matrix from the extracted angles and compare

Reference: W3C DeviceOrientation Event Specification, worked example
"""

import numpy as np

from tiltcompass.coords import (
    build_rotation_matrix,
    build_rotation_matrix_from_angles,
    round_trip_error,
)
from tiltcompass.eval import compute_round_trip_stats, heading_difference
from tiltcompass.heading import (
    HeadingMethod,
    OrientationSample,
    calculate_orientation_angles,
    compass_direction,
    compass_heading,
    compute_orientation,
    format_angle,
    format_reading,
    normalize_heading_range,
    transform_reference_vectors,
)
from tiltcompass.utils import determinant, is_orthonormal


def main() -> None:
    """Run compass heading examples."""
    print("=" * 70)
    print("Compass Heading from Device Orientation")
    print("=" * 70)

    alpha, beta, gamma = 30.0, 20.0, 10.0

    # Example 1: Rotation matrix from sensor angles
    print("\n1. Rotation Matrix from Euler Angles")
    print("-" * 70)
    print(f"  alpha: {format_angle(alpha)}")
    print(f"  beta:  {format_angle(beta)}")
    print(f"  gamma: {format_angle(gamma)}")

    R = build_rotation_matrix(alpha, beta, gamma)
    print(f"\nRotation Matrix:\n{R}")
    print(f"  Determinant: {determinant(R):.6f} (should be 1.0)")
    print(f"  Orthonormal: {is_orthonormal(R)}")

    # Example 2: Reference vectors
    print("\n2. Transformed Reference Vectors")
    print("-" * 70)

    north, east = transform_reference_vectors(R)
    print(f"  North (0, 0, -1) -> {np.round(north, 4)}")
    print(f"  East  (1, 0, 0)  -> {np.round(east, 4)}")

    # Example 3: Angle extraction
    print("\n3. Extracted Angles")
    print("-" * 70)

    angles = calculate_orientation_angles(north, east)
    print(f"  Heading:   {format_angle(angles.heading)}")
    print(f"  Elevation: {format_angle(angles.elevation)}")
    print(f"  Roll:      {format_angle(angles.roll)}")

    # Example 4: Display
    print("\n4. Display Heading")
    print("-" * 70)

    print(f"  [0, 360):    {format_angle(angles.heading)}")
    print(f"  (-180, 180]: {format_angle(normalize_heading_range(angles.heading))}")
    print(f"  Direction:   {compass_direction(angles.heading)}")

    worked = compass_heading(alpha, beta, gamma, method=HeadingMethod.WORKED_EXAMPLE)
    print(f"  Worked-example heading: {format_angle(worked, 4)} "
          f"(difference {heading_difference(worked, angles.heading):.2e}°)")

    # Example 5: Reconstruction
    print("\n5. Round Trip Through Extracted Angles")
    print("-" * 70)

    R_rebuilt = build_rotation_matrix_from_angles(angles.heading, angles.elevation, angles.roll)
    print(f"Rebuilt Matrix:\n{R_rebuilt}")
    print(f"  Round-trip error: {round_trip_error(R, R_rebuilt):.2e} (should be < 1e-3)")

    # Example 6: A device held in several poses
    print("\n6. Several Poses")
    print("-" * 70)

    poses = [
        ("Upright, facing north", (0.0, 90.0, 0.0)),
        ("Upright, facing east", (270.0, 90.0, 0.0)),
        ("Tilted back, turned", (200.0, 45.0, -30.0)),
        ("Flat on the table", (0.0, 0.0, 0.0)),
    ]

    readings = []
    for name, (a, b, g) in poses:
        reading = compute_orientation(OrientationSample(a, b, g))
        readings.append(reading)
        print(f"\n{name}:")
        print(f"  {format_reading(reading)}")

    stats = compute_round_trip_stats(readings)
    print(f"\nRound trip over {stats['count']:.0f} poses "
          f"({stats['degenerate']:.0f} in gimbal lock): max error {stats['max']:.2e}")

    print("\n" + "=" * 70)
    print("Examples completed successfully!")
    print("=" * 70)


if __name__ == "__main__":
    main()
