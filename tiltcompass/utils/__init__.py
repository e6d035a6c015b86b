"""
Utility functions for orientation math.

This module provides the small numeric building blocks used across the
package: degree/radian conversion, compass-range wrapping and the
3-vector / 3x3 matrix products everything else is built on.
"""

from .angles import degrees_to_radians, radians_to_degrees, wrap_heading_360
from .linalg import (
    as_matrix3,
    as_vector3,
    determinant,
    dot_product,
    horizontal_radius,
    is_orthonormal,
    multiply_matrices,
    multiply_matrix_vector,
)

__all__ = [
    'degrees_to_radians',
    'radians_to_degrees',
    'wrap_heading_360',
    'as_matrix3',
    'as_vector3',
    'determinant',
    'dot_product',
    'horizontal_radius',
    'is_orthonormal',
    'multiply_matrices',
    'multiply_matrix_vector',
]
