"""Tests for the matrix algebra primitives."""

import numpy as np
import pytest

from gazefilter import DimensionMismatch, SingularMatrix
from gazefilter.numeric import (
    add,
    as_matrix,
    identity,
    invert,
    multiply,
    subtract,
    transpose,
)


def test_add_and_subtract():
    """Element-wise arithmetic on equal shapes."""
    a = [[1.0, 2.0], [3.0, 4.0]]
    b = [[0.5, 0.5], [1.0, 1.0]]
    assert np.allclose(add(a, b), [[1.5, 2.5], [4.0, 5.0]])
    assert np.allclose(subtract(a, b), [[0.5, 1.5], [2.0, 3.0]])


def test_add_rejects_shape_mismatch():
    """add never broadcasts across shapes."""
    with pytest.raises(DimensionMismatch, match="cannot add"):
        add([[1.0, 2.0]], [[1.0], [2.0]])
    with pytest.raises(DimensionMismatch):
        add([[1.0, 2.0]], [[1.0]])


def test_subtract_rejects_shape_mismatch():
    """subtract requires identical shapes."""
    with pytest.raises(DimensionMismatch, match="cannot subtract"):
        subtract(np.zeros((2, 2)), np.zeros((2, 3)))


def test_multiply_shapes():
    """The product of a 2x3 and a 3x1 matrix is 2x1."""
    a = [[1.0, 2.0, 3.0], [4.0, 5.0, 6.0]]
    b = [[1.0], [0.0], [-1.0]]
    result = multiply(a, b)
    assert result.shape == (2, 1)
    assert np.allclose(result, [[-2.0], [-2.0]])


def test_multiply_rejects_inner_mismatch():
    """Inner dimensions must agree."""
    with pytest.raises(DimensionMismatch, match="cannot multiply"):
        multiply(np.ones((2, 3)), np.ones((2, 3)))


def test_transpose_copies():
    """transpose swaps dimensions and does not alias its input."""
    a = np.array([[1.0, 2.0, 3.0]])
    result = transpose(a)
    assert result.shape == (3, 1)
    result[0, 0] = 42.0
    assert a[0, 0] == 1.0


def test_operations_do_not_mutate_inputs():
    """Inputs are left as they were."""
    a = np.array([[2.0, 1.0], [1.0, 3.0]])
    snapshot = a.copy()
    add(a, a)
    subtract(a, a)
    multiply(a, a)
    invert(a)
    assert np.array_equal(a, snapshot)


def test_identity():
    """identity(n) is the n x n identity."""
    assert np.array_equal(identity(3), np.eye(3))


@pytest.mark.parametrize("n", [0, -1, 1.5, True])
def test_identity_rejects_bad_size(n):
    """identity needs a positive integer size."""
    with pytest.raises(DimensionMismatch):
        identity(n)


def test_invert():
    """invert returns the matrix inverse."""
    a = [[4.0, 7.0], [2.0, 6.0]]
    result = invert(a)
    assert np.allclose(multiply(a, result), np.eye(2))


def test_invert_needs_pivoting():
    """A zero leading entry is handled by row pivoting."""
    a = [[0.0, 1.0], [1.0, 0.0]]
    assert np.allclose(invert(a), a)


@pytest.mark.parametrize("n", [1, 2, 5])
def test_invert_zero_matrix_raises(n):
    """All-zero matrices are singular."""
    with pytest.raises(SingularMatrix):
        invert(np.zeros((n, n)))


def test_invert_rank_deficient_raises():
    """Linearly dependent rows are singular."""
    with pytest.raises(SingularMatrix):
        invert([[1.0, 2.0], [2.0, 4.0]])


def test_invert_epsilon_threshold():
    """Determinants below epsilon are treated as singular."""
    a = [[1e-4, 0.0], [0.0, 1e-4]]
    assert np.allclose(invert(a), [[1e4, 0.0], [0.0, 1e4]])
    with pytest.raises(SingularMatrix):
        invert(a, epsilon=1e-6)


def test_invert_rejects_non_finite():
    """NaN entries never produce a NaN inverse."""
    with pytest.raises(SingularMatrix):
        invert([[np.nan, 0.0], [0.0, 1.0]])


def test_invert_requires_square():
    """Non-square matrices cannot be inverted."""
    with pytest.raises(DimensionMismatch, match="non-square"):
        invert(np.ones((2, 3)))


def test_as_matrix_rejects_vectors():
    """Matrix operands must be 2-D."""
    with pytest.raises(DimensionMismatch, match="must be 2-D"):
        as_matrix([1.0, 2.0], "v")


def test_as_matrix_rejects_ragged_rows():
    """Ragged nested lists are not matrices."""
    with pytest.raises(DimensionMismatch):
        as_matrix([[1.0, 2.0], [3.0]])


def test_invert_large_well_conditioned_matrix():
    """A determinant too large for a float does not count as singular."""
    result = invert(np.eye(2) * 1e200)
    assert np.allclose(result, np.eye(2) * 1e-200, rtol=1e-12, atol=0.0)


def test_invert_small_scale_needs_smaller_epsilon():
    """The determinant threshold is absolute, so small units need a smaller epsilon."""
    a = np.eye(3) * 1e-5
    with pytest.raises(SingularMatrix):
        invert(a)
    assert np.allclose(invert(a, epsilon=1e-20), np.eye(3) * 1e5)


def test_invert_zero_epsilon_still_rejects_zero_matrix():
    """With epsilon=0 only exact singularity is rejected."""
    with pytest.raises(SingularMatrix):
        invert(np.zeros((2, 2)), epsilon=0.0)
