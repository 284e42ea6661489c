"""Numeric primitives for Kalman filtering.

Every function returns a freshly allocated array and leaves its inputs
untouched, so callers may reuse intermediate results freely.
"""

from __future__ import annotations

import math
from typing import Any

import numpy as np

from .errors import DimensionMismatch, SingularMatrix

DEFAULT_SINGULAR_EPSILON = 1e-12


def as_matrix(value: Any, name: str = "matrix") -> np.ndarray:
    """Coerce an array-like into a 2-D float array."""
    try:
        matrix = np.array(value, dtype=float)
    except (TypeError, ValueError) as e:
        raise DimensionMismatch(f"{name} is not a rectangular numeric matrix") from e
    if matrix.ndim != 2:
        raise DimensionMismatch(
            f"{name} must be 2-D, got {matrix.ndim}-D with shape {matrix.shape}"
        )
    return matrix


def add(a: Any, b: Any) -> np.ndarray:
    """Return the element-wise sum of two matrices of identical shape."""
    left, right = _same_shape(a, b, "add")
    return left + right


def subtract(a: Any, b: Any) -> np.ndarray:
    """Return ``a - b`` for two matrices of identical shape."""
    left, right = _same_shape(a, b, "subtract")
    return left - right


def multiply(a: Any, b: Any) -> np.ndarray:
    """Return the matrix product ``a @ b``."""
    left = as_matrix(a, "a")
    right = as_matrix(b, "b")
    if left.shape[1] != right.shape[0]:
        raise DimensionMismatch(
            f"cannot multiply {left.shape} by {right.shape}: "
            f"{left.shape[1]} columns vs {right.shape[0]} rows"
        )
    return left @ right


def transpose(a: Any) -> np.ndarray:
    """Return a transposed copy of ``a``."""
    return as_matrix(a, "a").T.copy()


def identity(n: int) -> np.ndarray:
    """Return the ``n`` x ``n`` identity matrix."""
    if isinstance(n, bool) or not isinstance(n, (int, np.integer)) or n < 1:
        raise DimensionMismatch(f"identity size must be a positive integer, got {n!r}")
    return np.eye(int(n), dtype=float)


def invert(a: Any, *, epsilon: float = DEFAULT_SINGULAR_EPSILON) -> np.ndarray:
    """Invert a square matrix.

    The inverse is computed by LU decomposition with partial pivoting.

    ``epsilon`` bounds the absolute determinant, which scales with the n-th
    power of the entries: ``1e-5 * I`` of size 3 has determinant ``1e-15``
    and is rejected by default. Pass a smaller ``epsilon`` for matrices in
    small units.

    Args:
        a: Square matrix to invert.
        epsilon: Smallest determinant magnitude treated as invertible. Zero
            only rejects exactly singular matrices.

    Returns:
        A new array holding the inverse.

    Raises:
        DimensionMismatch: If ``a`` is not square.
        SingularMatrix: If ``a`` is singular or too ill-conditioned to invert
            without producing non-finite entries.
    """
    matrix = as_matrix(a, "a")
    rows, cols = matrix.shape
    if rows != cols:
        raise DimensionMismatch(f"cannot invert non-square matrix of shape {matrix.shape}")
    if not np.all(np.isfinite(matrix)):
        raise SingularMatrix("cannot invert a matrix with non-finite entries")

    # slogdet stays finite where det overflows
    sign, logdet = np.linalg.slogdet(matrix)
    if sign == 0 or (epsilon > 0 and logdet < math.log(epsilon)):
        raise SingularMatrix(
            f"matrix of shape {matrix.shape} is singular (log|det| = {logdet:.3g})"
        )

    try:
        inverse = np.linalg.inv(matrix)
    except np.linalg.LinAlgError as e:
        raise SingularMatrix(f"matrix of shape {matrix.shape} is singular") from e
    if not np.all(np.isfinite(inverse)):
        raise SingularMatrix(f"inverse of matrix of shape {matrix.shape} is not finite")
    return inverse


def _same_shape(a: Any, b: Any, operation: str) -> tuple[np.ndarray, np.ndarray]:
    left = as_matrix(a, "a")
    right = as_matrix(b, "b")
    if left.shape != right.shape:
        raise DimensionMismatch(f"cannot {operation} {left.shape} and {right.shape}")
    return left, right
