"""Main KalmanFilter class."""

from __future__ import annotations

import logging
from typing import Any

import numpy as np

from .errors import DimensionMismatch, InvalidMeasurement, SingularMatrix
from .numeric import (
    DEFAULT_SINGULAR_EPSILON,
    add,
    as_matrix,
    identity,
    invert,
    multiply,
    subtract,
    transpose,
)

_LOG: logging.Logger = logging.getLogger(__name__)


class KalmanFilter:
    """A discrete-time linear Kalman filter.

    The model matrices are copied and frozen on construction. The state and
    covariance are owned by the filter and only change through ``update``.

    Args:
        F: n x n state transition matrix.
        H: m x n observation matrix.
        Q: n x n process noise covariance.
        R: m x m measurement noise covariance.
        P_initial: n x n initial state covariance.
        X_initial: Initial state, as an n x 1 column or a flat n-vector.
        singular_epsilon: Smallest determinant magnitude of the innovation
            covariance accepted when computing the gain.
    """

    def __init__(
        self,
        F: Any,
        H: Any,
        Q: Any,
        R: Any,
        P_initial: Any,
        X_initial: Any,
        *,
        singular_epsilon: float = DEFAULT_SINGULAR_EPSILON,
    ) -> None:
        self._F = _frozen(as_matrix(F, "F"))
        self._H = _frozen(as_matrix(H, "H"))
        self._Q = _frozen(as_matrix(Q, "Q"))
        self._R = _frozen(as_matrix(R, "R"))
        self._singular_epsilon = singular_epsilon

        n = self._F.shape[0]
        m = self._H.shape[0]
        _check_shape(self._F, (n, n), "F")
        _check_shape(self._H, (m, n), "H")
        _check_shape(self._Q, (n, n), "Q")
        _check_shape(self._R, (m, m), "R")

        P = as_matrix(P_initial, "P_initial")
        _check_shape(P, (n, n), "P_initial")
        X = _as_column(X_initial, n, "X_initial")

        # Cached transposes and identity; the model matrices never change.
        self._F_T = transpose(self._F)
        self._H_T = transpose(self._H)
        self._I = identity(n)

        self._X = X
        self._P = P
        _LOG.debug("Created Kalman filter with %d state and %d measurement dims", n, m)

    @property
    def dim_state(self) -> int:
        """Return the state dimension n."""
        return self._F.shape[0]

    @property
    def dim_measurement(self) -> int:
        """Return the measurement dimension m."""
        return self._H.shape[0]

    @property
    def state(self) -> np.ndarray:
        """Return a copy of the n x 1 state estimate."""
        return self._X.copy()

    @property
    def covariance(self) -> np.ndarray:
        """Return a copy of the n x n state covariance."""
        return self._P.copy()

    @property
    def measurement_estimate(self) -> np.ndarray:
        """Return the current state mapped into measurement space."""
        return multiply(self._H, self._X).ravel()

    def update(self, z: Any) -> np.ndarray:
        """Fold in a measurement and return the filtered measurement.

        Args:
            z: Measurement as an m-vector or an m x 1 column.

        Returns:
            The filtered estimate ``H @ X`` as a flat m-vector.

        Raises:
            DimensionMismatch: If ``z`` does not have m entries.
            InvalidMeasurement: If ``z`` holds NaN or infinite entries.
            SingularMatrix: If the innovation covariance cannot be inverted.
                The state and covariance are left unchanged.
        """
        Z = _as_column(z, self.dim_measurement, "z")

        # prediction: X = F X, P = F P F' + Q
        X_p = multiply(self._F, self._X)
        P_p = add(multiply(multiply(self._F, self._P), self._F_T), self._Q)

        innovation = subtract(Z, multiply(self._H, X_p))
        S = add(multiply(multiply(self._H, P_p), self._H_T), self._R)

        try:
            S_inv = invert(S, epsilon=self._singular_epsilon)
        except SingularMatrix:
            _LOG.warning("Rejecting measurement, innovation covariance is singular")
            raise
        gain = multiply(P_p, multiply(self._H_T, S_inv))

        # correction: X = X_p + K y, P = (I - K H) P_p
        X = add(X_p, multiply(gain, innovation))
        P = multiply(subtract(self._I, multiply(gain, self._H)), P_p)

        self._X = X
        self._P = P
        return multiply(self._H, X).ravel()


def _frozen(matrix: np.ndarray) -> np.ndarray:
    matrix.setflags(write=False)
    return matrix


def _check_shape(matrix: np.ndarray, shape: tuple[int, int], name: str) -> None:
    if matrix.shape != shape:
        raise DimensionMismatch(f"{name} must have shape {shape}, got {matrix.shape}")


def _as_column(value: Any, size: int, name: str) -> np.ndarray:
    """Coerce a flat vector or a column into an owned size x 1 array."""
    try:
        vector = np.array(value, dtype=float)
    except (TypeError, ValueError) as e:
        raise DimensionMismatch(f"{name} is not a numeric vector") from e
    if vector.ndim == 1:
        vector = vector.reshape(-1, 1)
    if vector.shape != (size, 1):
        raise DimensionMismatch(f"{name} must have {size} entries, got shape {vector.shape}")
    if not np.all(np.isfinite(vector)):
        raise InvalidMeasurement(f"{name} must be finite, got {vector.ravel().tolist()}")
    return vector
