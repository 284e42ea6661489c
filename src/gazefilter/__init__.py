"""Kalman smoothing and bounded sample history for gaze tracking."""

__version__ = "0.1.0"

from .data_window import DataWindow
from .diagnostics import DebugStats
from .errors import (
    DimensionMismatch,
    GazeFilterError,
    IndexOutOfRange,
    InvalidCapacity,
    InvalidMeasurement,
    SingularMatrix,
)
from .kalman_filter import KalmanFilter
from .motion_model import MotionModel
from .units import parse_interval

__all__ = [
    "DataWindow",
    "DebugStats",
    "DimensionMismatch",
    "GazeFilterError",
    "IndexOutOfRange",
    "InvalidCapacity",
    "InvalidMeasurement",
    "KalmanFilter",
    "MotionModel",
    "SingularMatrix",
    "parse_interval",
]
