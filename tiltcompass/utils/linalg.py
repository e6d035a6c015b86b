"""
3-vector and 3x3 matrix primitives.

Vectors are numpy arrays of shape (3,), matrices numpy arrays of shape
(3, 3), both float64 and row-major. The products are written out row by
row rather than delegated to ``@`` so that each output component is
visibly the dot product of one matrix row with the operand, which is the
form the orientation formulas are stated in.
"""

import numpy as np
from numpy.typing import ArrayLike, NDArray


# Default tolerance for orthonormality checks on rotation matrices
ORTHONORMAL_ATOL = 1e-6


def as_vector3(vector: ArrayLike) -> NDArray[np.float64]:
    """Coerce input to a float64 vector of shape (3,).

    Raises:
        ValueError: If the input does not have exactly three components.
    """
    v = np.asarray(vector, dtype=np.float64)
    if v.shape != (3,):
        raise ValueError(f"Expected 3-element vector, got shape {v.shape}")
    return v


def as_matrix3(matrix: ArrayLike) -> NDArray[np.float64]:
    """Coerce input to a float64 matrix of shape (3, 3).

    Raises:
        ValueError: If the input is not 3x3.
    """
    m = np.asarray(matrix, dtype=np.float64)
    if m.shape != (3, 3):
        raise ValueError(f"Expected 3x3 matrix, got shape {m.shape}")
    return m


def dot_product(v1: ArrayLike, v2: ArrayLike) -> float:
    """Sum of the component-wise products of two 3-vectors."""
    a = as_vector3(v1)
    b = as_vector3(v2)
    return float(a[0] * b[0] + a[1] * b[1] + a[2] * b[2])


def multiply_matrix_vector(matrix: ArrayLike, vector: ArrayLike) -> NDArray[np.float64]:
    """Compute ``matrix @ vector``.

    Each component of the result is the dot product of the corresponding
    matrix row with the vector.

    Args:
        matrix: 3x3 matrix.
        vector: 3-element vector.

    Returns:
        Transformed 3-element vector.

    Raises:
        ValueError: If the shapes are not (3, 3) and (3,).

    Example:
        >>> multiply_matrix_vector(np.eye(3), [1.0, 2.0, 3.0])
        array([1., 2., 3.])
    """
    m = as_matrix3(matrix)
    v = as_vector3(vector)
    return np.array(
        [dot_product(m[0], v), dot_product(m[1], v), dot_product(m[2], v)],
        dtype=np.float64,
    )


def multiply_matrices(a: ArrayLike, b: ArrayLike) -> NDArray[np.float64]:
    """Compute the matrix product ``a @ b`` of two 3x3 matrices.

    Entry (r, c) of the result is the dot product of row r of ``a`` with
    column c of ``b``.

    Raises:
        ValueError: If either operand is not 3x3.
    """
    ma = as_matrix3(a)
    mb = as_matrix3(b)

    result = np.zeros((3, 3), dtype=np.float64)
    for r in range(3):
        for c in range(3):
            result[r, c] = dot_product(ma[r], mb[:, c])

    return result


def determinant(matrix: ArrayLike) -> float:
    """Determinant of a 3x3 matrix."""
    return float(np.linalg.det(as_matrix3(matrix)))


def is_orthonormal(matrix: ArrayLike, atol: float = ORTHONORMAL_ATOL) -> bool:
    """Check that a 3x3 matrix is a proper rotation.

    Rows must be unit length and mutually orthogonal (R @ R^T = I) and the
    determinant must be +1, all within ``atol``. Reflections (det = -1) and
    matrices containing NaN are rejected.

    Args:
        matrix: 3x3 matrix to check.
        atol: Absolute tolerance for every comparison.

    Returns:
        True if the matrix is a rotation within tolerance.
    """
    m = as_matrix3(matrix)
    if not np.all(np.isfinite(m)):
        return False

    gram = multiply_matrices(m, m.T)
    if not np.allclose(gram, np.eye(3), rtol=0.0, atol=atol):
        return False

    return abs(determinant(m) - 1.0) <= atol


def horizontal_radius(vector: ArrayLike) -> float:
    """Length of the projection of a vector onto the horizontal (x, y) plane."""
    v = as_vector3(vector)
    return float(np.hypot(v[0], v[1]))
