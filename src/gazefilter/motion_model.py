"""Constant-velocity motion model configuration."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence

import numpy as np

from .kalman_filter import KalmanFilter
from .units import parse_interval


@dataclass
class MotionModel:
    """Configuration for a constant-velocity filter over tracked coordinates.

    The state holds every position followed by every velocity, so a 2-D
    model tracks ``[x, y, vx, vy]`` and measures ``[x, y]``. The defaults
    suit smoothing on-screen gaze predictions in pixels.
    """

    dimensions: int = 2
    sample_interval: float | str = 1.0
    velocity_variance: float = 4.0
    measurement_variance: float = 47.0
    initial_variance: float = 1e-4
    initial_position: Sequence[float] | None = None

    def __post_init__(self) -> None:
        if isinstance(self.dimensions, bool) or not isinstance(self.dimensions, int):
            raise ValueError(f"dimensions must be an integer, got {self.dimensions!r}")
        if self.dimensions < 1:
            raise ValueError(f"dimensions must be positive, got {self.dimensions}")
        for name in ("velocity_variance", "measurement_variance", "initial_variance"):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")
        if self.initial_position is not None and len(self.initial_position) != self.dimensions:
            raise ValueError(
                f"initial_position must have {self.dimensions} entries, "
                f"got {len(self.initial_position)}"
            )

    @property
    def dt(self) -> float:
        """Return the sample interval in seconds."""
        return parse_interval(self.sample_interval)

    def transition_matrix(self) -> np.ndarray:
        """Build F, advancing each position by its velocity times dt."""
        d = self.dimensions
        transition = np.eye(2 * d, dtype=float)
        transition[:d, d:] = np.eye(d) * self.dt
        return transition

    def process_noise(self) -> np.ndarray:
        """Build Q from the discrete white-noise acceleration model."""
        dt = self.dt
        d = self.dimensions
        block = np.array(
            [
                [dt**4 / 4.0, dt**3 / 2.0],
                [dt**3 / 2.0, dt**2],
            ],
            dtype=float,
        )
        # Expand the per-axis 2x2 block onto the [positions, velocities] layout
        return np.kron(block, np.eye(d)) * self.velocity_variance

    def observation_matrix(self) -> np.ndarray:
        """Build H, which reads the positions out of the state."""
        d = self.dimensions
        return np.hstack([np.eye(d), np.zeros((d, d))])

    def measurement_noise(self) -> np.ndarray:
        """Build R as isotropic measurement noise."""
        return np.eye(self.dimensions, dtype=float) * self.measurement_variance

    def initial_state(self) -> np.ndarray:
        """Return the starting state column with zero velocity."""
        state = np.zeros((2 * self.dimensions, 1), dtype=float)
        if self.initial_position is not None:
            state[: self.dimensions, 0] = np.asarray(self.initial_position, dtype=float)
        return state

    def initial_covariance(self) -> np.ndarray:
        """Return the starting covariance."""
        return np.eye(2 * self.dimensions, dtype=float) * self.initial_variance

    def build(self) -> KalmanFilter:
        """Create a KalmanFilter configured by this model."""
        return KalmanFilter(
            F=self.transition_matrix(),
            H=self.observation_matrix(),
            Q=self.process_noise(),
            R=self.measurement_noise(),
            P_initial=self.initial_covariance(),
            X_initial=self.initial_state(),
        )
