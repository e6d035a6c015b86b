"""Unit tests for rotation matrix construction.

This module tests the rotation matrix built from sensor Euler angles and
the matrix rebuilt from extracted compass angles.

Test cases include:
- Identity for zero angles
- Orthonormality and determinant over many angle sets
- Agreement with scipy's intrinsic Z-X'-Y'' Euler rotation
- Elementary rotations about each axis
- Reconstruction round trips (angles -> matrix -> angles, sensor -> angles -> matrix)

Reference: W3C DeviceOrientation Event Specification, worked example
"""

import unittest

import numpy as np
from scipy.spatial.transform import Rotation

from tiltcompass.coords import (
    bank_from_roll,
    build_rotation_matrix,
    build_rotation_matrix_from_angles,
    elementary_rotation,
    reference_vectors,
    round_trip_error,
)
from tiltcompass.eval import heading_difference
from tiltcompass.heading import calculate_orientation_angles, transform_reference_vectors
from tiltcompass.utils import determinant, is_orthonormal


def random_sensor_angles(n: int, seed: int = 0) -> np.ndarray:
    """Random (alpha, beta, gamma) rows in the sensor's nominal ranges."""
    rng = np.random.default_rng(seed)
    return np.column_stack([
        rng.uniform(0.0, 360.0, n),
        rng.uniform(-180.0, 180.0, n),
        rng.uniform(-90.0, 90.0, n),
    ])


class TestFrames(unittest.TestCase):
    """Test cases for the device reference vectors."""

    def test_reference_vectors(self) -> None:
        north, east = reference_vectors()
        np.testing.assert_array_equal(north, [0.0, 0.0, -1.0])
        np.testing.assert_array_equal(east, [1.0, 0.0, 0.0])

    def test_reference_vectors_are_copies(self) -> None:
        north, _ = reference_vectors()
        north[2] = 5.0
        self.assertEqual(reference_vectors()[0][2], -1.0)


class TestBuildRotationMatrix(unittest.TestCase):
    """Test cases for sensor Euler angles to rotation matrix conversion."""

    def test_identity_rotation(self) -> None:
        """Test identity rotation (zero Euler angles)."""
        R = build_rotation_matrix(0.0, 0.0, 0.0)
        np.testing.assert_allclose(R, np.eye(3), atol=1e-9)

    def test_rotation_matrix_properties(self) -> None:
        """Test that rows are orthonormal with det(R) = 1 for many inputs."""
        for alpha, beta, gamma in random_sensor_angles(200):
            with self.subTest(alpha=alpha, beta=beta, gamma=gamma):
                R = build_rotation_matrix(alpha, beta, gamma)
                np.testing.assert_allclose(R @ R.T, np.eye(3), atol=1e-6)
                self.assertAlmostEqual(determinant(R), 1.0, delta=1e-6)
                self.assertTrue(is_orthonormal(R))

    def test_out_of_range_inputs(self) -> None:
        """Test that inputs outside the sensor ranges still give rotations."""
        for alpha, beta, gamma in [(720.5, -400.0, 135.0), (-1e4, 1e3, -270.0)]:
            with self.subTest(alpha=alpha, beta=beta, gamma=gamma):
                self.assertTrue(is_orthonormal(build_rotation_matrix(alpha, beta, gamma)))

    def test_matches_intrinsic_zxy(self) -> None:
        """Test against scipy's intrinsic Z-X'-Y'' composition."""
        for alpha, beta, gamma in random_sensor_angles(50, seed=1):
            with self.subTest(alpha=alpha, beta=beta, gamma=gamma):
                expected = Rotation.from_euler(
                    'ZXY', [alpha, beta, gamma], degrees=True
                ).as_matrix()
                np.testing.assert_allclose(
                    build_rotation_matrix(alpha, beta, gamma), expected, atol=1e-12
                )

    def test_alpha_only_is_z_rotation(self) -> None:
        """Test that alpha alone rotates about the Earth z-axis."""
        np.testing.assert_allclose(
            build_rotation_matrix(40.0, 0.0, 0.0), elementary_rotation('z', 40.0), atol=1e-12
        )

    def test_upright_device(self) -> None:
        """Test beta = 90°: the back of the device faces north."""
        R = build_rotation_matrix(0.0, 90.0, 0.0)
        north, _ = reference_vectors()
        np.testing.assert_allclose(R @ north, [0.0, 1.0, 0.0], atol=1e-12)


class TestElementaryRotation(unittest.TestCase):
    """Test cases for rotations about a single principal axis."""

    def test_90_degree_rotations(self) -> None:
        """Test each axis cycles the other two axes counter-clockwise."""
        cases = [
            ('x', [0.0, 1.0, 0.0], [0.0, 0.0, 1.0]),
            ('y', [0.0, 0.0, 1.0], [1.0, 0.0, 0.0]),
            ('z', [1.0, 0.0, 0.0], [0.0, 1.0, 0.0]),
        ]
        for axis, v, expected in cases:
            with self.subTest(axis=axis):
                R = elementary_rotation(axis, 90.0)
                np.testing.assert_allclose(R @ np.array(v), expected, atol=1e-12)

    def test_is_rotation(self) -> None:
        for axis in ('x', 'y', 'z'):
            with self.subTest(axis=axis):
                self.assertTrue(is_orthonormal(elementary_rotation(axis, 37.0)))

    def test_invalid_axis(self) -> None:
        with self.assertRaises(ValueError):
            elementary_rotation('w', 10.0)


class TestBankFromRoll(unittest.TestCase):
    """Test cases for recovering the bank angle from the east-vector dip."""

    def test_level_forward_axis(self) -> None:
        """Test that roll equals bank when elevation is zero."""
        self.assertAlmostEqual(bank_from_roll(0.0, 30.0), 30.0)
        self.assertAlmostEqual(bank_from_roll(0.0, -45.0), -45.0)

    def test_elevated_forward_axis(self) -> None:
        """Test sin(roll) = sin(bank) * cos(elevation)."""
        self.assertAlmostEqual(bank_from_roll(60.0, 30.0), 90.0)
        self.assertAlmostEqual(
            bank_from_roll(60.0, 10.0),
            np.rad2deg(np.arcsin(np.sin(np.deg2rad(10.0)) / 0.5)),
        )

    def test_clipped(self) -> None:
        """Test that inconsistent inputs clip instead of returning NaN."""
        self.assertAlmostEqual(bank_from_roll(60.0, 45.0), 90.0)

    def test_nan(self) -> None:
        self.assertTrue(np.isnan(bank_from_roll(float('nan'), 10.0)))


class TestBuildRotationMatrixFromAngles(unittest.TestCase):
    """Test cases for rebuilding a rotation from heading/elevation/roll."""

    def test_zero_angles(self) -> None:
        """Test the rest pose: upright, facing north, level."""
        R = build_rotation_matrix_from_angles(0.0, 0.0, 0.0)
        north, east = transform_reference_vectors(R)
        np.testing.assert_allclose(north, [0.0, 1.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(east, [1.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(R, build_rotation_matrix(0.0, 90.0, 0.0), atol=1e-12)

    def test_heading_east(self) -> None:
        """Test that heading 90 points the forward axis east."""
        R = build_rotation_matrix_from_angles(90.0, 0.0, 0.0)
        north, east = transform_reference_vectors(R)
        np.testing.assert_allclose(north, [1.0, 0.0, 0.0], atol=1e-12)
        np.testing.assert_allclose(east, [0.0, -1.0, 0.0], atol=1e-12)

    def test_elevation_up(self) -> None:
        """Test that positive elevation tips the forward axis up."""
        R = build_rotation_matrix_from_angles(0.0, 30.0, 0.0)
        north, _ = transform_reference_vectors(R)
        np.testing.assert_allclose(
            north, [0.0, np.cos(np.deg2rad(30.0)), np.sin(np.deg2rad(30.0))], atol=1e-12
        )

    def test_roll_drops_right_edge(self) -> None:
        """Test that positive roll lowers the right edge."""
        R = build_rotation_matrix_from_angles(0.0, 0.0, 20.0)
        _, east = transform_reference_vectors(R)
        self.assertAlmostEqual(east[2], -np.sin(np.deg2rad(20.0)))

    def test_always_orthonormal(self) -> None:
        rng = np.random.default_rng(7)
        for heading, elevation, roll in zip(
            rng.uniform(0, 360, 100), rng.uniform(-90, 90, 100), rng.uniform(-180, 180, 100)
        ):
            with self.subTest(heading=heading, elevation=elevation, roll=roll):
                self.assertTrue(
                    is_orthonormal(build_rotation_matrix_from_angles(heading, elevation, roll))
                )

    def test_nan_angles(self) -> None:
        """Test that undefined angles give a NaN matrix instead of raising."""
        R = build_rotation_matrix_from_angles(float('nan'), -90.0, float('nan'))
        self.assertEqual(R.shape, (3, 3))
        self.assertTrue(np.all(np.isnan(R)))

    def test_angles_round_trip(self) -> None:
        """Test angles -> matrix -> angles for consistent angle sets."""
        test_angles = [
            (10.0, 0.0, 0.0),
            (45.0, 30.0, 20.0),
            (300.0, -60.0, 10.0),
            (180.0, 75.0, -5.0),
            (95.0, -20.0, -50.0),
        ]
        for heading, elevation, roll in test_angles:
            with self.subTest(heading=heading, elevation=elevation, roll=roll):
                R = build_rotation_matrix_from_angles(heading, elevation, roll)
                angles = calculate_orientation_angles(*transform_reference_vectors(R))

                self.assertAlmostEqual(heading_difference(angles.heading, heading), 0.0, places=6)
                self.assertAlmostEqual(angles.elevation, elevation, places=6)
                self.assertAlmostEqual(angles.roll, roll, places=6)

    def test_sensor_round_trip(self) -> None:
        """Test sensor angles -> extracted angles -> matrix reproduces the vectors."""
        test_angles = [
            (30.0, 20.0, 10.0),
            (0.0, 90.0, 0.0),
            (200.0, 45.0, -30.0),
            (315.0, 120.0, 60.0),
            (90.0, 10.0, -80.0),
            (123.4, 150.0, 45.0),
        ]
        for alpha, beta, gamma in test_angles:
            with self.subTest(alpha=alpha, beta=beta, gamma=gamma):
                R = build_rotation_matrix(alpha, beta, gamma)
                north, east = transform_reference_vectors(R)
                angles = calculate_orientation_angles(north, east)

                R_rebuilt = build_rotation_matrix_from_angles(
                    angles.heading, angles.elevation, angles.roll
                )
                north_rebuilt, east_rebuilt = transform_reference_vectors(R_rebuilt)

                np.testing.assert_allclose(north_rebuilt, north, atol=1e-3)
                np.testing.assert_allclose(east_rebuilt, east, atol=1e-3)
                self.assertLess(round_trip_error(R, R_rebuilt), 1e-6)

    def test_sensor_round_trip_negative_beta(self) -> None:
        """Test sin(beta) < 0: north and angles survive, east is mirrored.

        The three extracted angles cannot tell which side of the device is
        up once it is tilted past vertical, so the rebuilt east vector lands
        on the other side of the forward axis with the same dip.
        """
        for alpha, beta, gamma in [(30.0, -20.0, 10.0), (200.0, -120.0, -40.0), (300.0, -60.0, 5.0)]:
            with self.subTest(alpha=alpha, beta=beta, gamma=gamma):
                R = build_rotation_matrix(alpha, beta, gamma)
                north, east = transform_reference_vectors(R)
                angles = calculate_orientation_angles(north, east)

                R_rebuilt = build_rotation_matrix_from_angles(
                    angles.heading, angles.elevation, angles.roll
                )
                north_rebuilt, east_rebuilt = transform_reference_vectors(R_rebuilt)
                rebuilt = calculate_orientation_angles(north_rebuilt, east_rebuilt)

                np.testing.assert_allclose(north_rebuilt, north, atol=1e-9)
                self.assertAlmostEqual(heading_difference(rebuilt.heading, angles.heading), 0.0, places=9)
                self.assertAlmostEqual(rebuilt.elevation, angles.elevation, places=9)
                self.assertAlmostEqual(rebuilt.roll, angles.roll, places=9)
                self.assertAlmostEqual(east_rebuilt[2], east[2], places=9)

                self.assertGreater(round_trip_error(R, R_rebuilt), 0.5)


class TestRoundTripError(unittest.TestCase):
    """Test cases for the reference-vector disagreement metric."""

    def test_identical_matrices(self) -> None:
        R = build_rotation_matrix(10.0, 20.0, 30.0)
        self.assertEqual(round_trip_error(R, R), 0.0)

    def test_opposite_heading(self) -> None:
        """Test that a 180° turn about z is detected."""
        R = elementary_rotation('z', 180.0)
        self.assertAlmostEqual(round_trip_error(np.eye(3), R), 2.0)

    def test_nan_matrix(self) -> None:
        self.assertTrue(np.isnan(round_trip_error(np.eye(3), np.full((3, 3), np.nan))))


if __name__ == "__main__":
    unittest.main()
