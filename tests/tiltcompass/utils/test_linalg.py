"""Unit tests for 3-vector / 3x3 matrix primitives and angle helpers.

Test cases include:
- Products agree with numpy's matmul
- Determinant and orthonormality checks on rotations and non-rotations
- Shape validation
- Compass-range wrapping of atan2 headings
"""

import math
import unittest

import numpy as np

from tiltcompass.utils import (
    as_matrix3,
    as_vector3,
    determinant,
    dot_product,
    horizontal_radius,
    is_orthonormal,
    multiply_matrices,
    multiply_matrix_vector,
    wrap_heading_360,
)


class TestProducts(unittest.TestCase):
    """Test cases for dot, matrix-vector and matrix-matrix products."""

    def setUp(self) -> None:
        rng = np.random.default_rng(42)
        self.A = rng.normal(size=(3, 3))
        self.B = rng.normal(size=(3, 3))
        self.v = rng.normal(size=3)

    def test_dot_product(self) -> None:
        """Test dot product of two known vectors."""
        self.assertAlmostEqual(dot_product([1.0, 2.0, 3.0], [4.0, -5.0, 6.0]), 12.0)

    def test_matrix_vector_matches_numpy(self) -> None:
        """Test that each row is dotted with the vector."""
        np.testing.assert_allclose(multiply_matrix_vector(self.A, self.v), self.A @ self.v, atol=1e-12)

    def test_matrix_matrix_matches_numpy(self) -> None:
        """Test matrix product against numpy."""
        np.testing.assert_allclose(multiply_matrices(self.A, self.B), self.A @ self.B, atol=1e-12)

    def test_matrix_product_order(self) -> None:
        """Test that A @ B and B @ A are not confused."""
        result = multiply_matrices(self.A, self.B)
        self.assertFalse(np.allclose(result, self.B @ self.A))

    def test_accepts_nested_lists(self) -> None:
        """Test that plain Python lists are accepted."""
        result = multiply_matrix_vector([[1, 0, 0], [0, 1, 0], [0, 0, 1]], [1, 2, 3])
        np.testing.assert_allclose(result, [1.0, 2.0, 3.0])
        self.assertEqual(result.dtype, np.float64)


class TestShapeValidation(unittest.TestCase):
    """Test that wrong shapes are rejected."""

    def test_invalid_vector_shape(self) -> None:
        with self.assertRaises(ValueError):
            as_vector3([1.0, 2.0])

    def test_invalid_matrix_shape(self) -> None:
        with self.assertRaises(ValueError):
            as_matrix3(np.eye(4))

    def test_matrix_vector_rejects_bad_vector(self) -> None:
        with self.assertRaises(ValueError):
            multiply_matrix_vector(np.eye(3), [1.0, 2.0, 3.0, 4.0])


class TestOrthonormality(unittest.TestCase):
    """Test cases for determinant and rotation checks."""

    def test_identity(self) -> None:
        self.assertTrue(is_orthonormal(np.eye(3)))
        self.assertAlmostEqual(determinant(np.eye(3)), 1.0)

    def test_determinant_matches_numpy(self) -> None:
        M = np.array([[2.0, 1.0, 0.5], [0.0, 3.0, -1.0], [4.0, 0.0, 1.0]])
        self.assertAlmostEqual(determinant(M), np.linalg.det(M), places=9)

    def test_determinant_of_rotations_and_singular(self) -> None:
        R = np.array([[0.0, -1.0, 0.0], [1.0, 0.0, 0.0], [0.0, 0.0, 1.0]])
        self.assertIsInstance(determinant(R), float)
        self.assertAlmostEqual(determinant(R), 1.0, places=12)
        self.assertAlmostEqual(determinant(np.ones((3, 3))), 0.0, places=12)

    def test_determinant_rejects_bad_shape(self) -> None:
        with self.assertRaises(ValueError):
            determinant(np.eye(2))

    def test_reflection_rejected(self) -> None:
        """Test that det = -1 is not a rotation."""
        self.assertFalse(is_orthonormal(np.diag([1.0, 1.0, -1.0])))

    def test_scaled_matrix_rejected(self) -> None:
        self.assertFalse(is_orthonormal(2.0 * np.eye(3)))

    def test_nan_matrix_rejected(self) -> None:
        self.assertFalse(is_orthonormal(np.full((3, 3), np.nan)))

    def test_tolerance(self) -> None:
        """Test that small perturbations pass within tolerance."""
        M = np.eye(3)
        M[0, 1] = 1e-8
        self.assertTrue(is_orthonormal(M, atol=1e-6))
        self.assertFalse(is_orthonormal(M, atol=1e-10))


class TestHorizontalRadius(unittest.TestCase):

    def test_ignores_vertical_component(self) -> None:
        self.assertAlmostEqual(horizontal_radius([3.0, 4.0, 100.0]), 5.0)

    def test_vertical_vector(self) -> None:
        self.assertEqual(horizontal_radius([0.0, 0.0, -1.0]), 0.0)


class TestWrapHeading(unittest.TestCase):
    """Test cases for shifting atan2 output into [0, 360)."""

    def test_negative_shifted(self) -> None:
        self.assertEqual(wrap_heading_360(-90.0), 270.0)

    def test_positive_unchanged(self) -> None:
        self.assertEqual(wrap_heading_360(45.0), 45.0)
        self.assertEqual(wrap_heading_360(180.0), 180.0)

    def test_zero(self) -> None:
        self.assertEqual(wrap_heading_360(0.0), 0.0)

    def test_tiny_negative_stays_below_360(self) -> None:
        """Test that -tiny + 360 rounding to 360 is folded to 0."""
        result = wrap_heading_360(-1e-20)
        self.assertGreaterEqual(result, 0.0)
        self.assertLess(result, 360.0)

    def test_nan_passes_through(self) -> None:
        self.assertTrue(math.isnan(wrap_heading_360(float('nan'))))


if __name__ == "__main__":
    unittest.main()
