"""Exceptions raised by gazefilter."""


class GazeFilterError(Exception):
    """Base class for gazefilter errors."""


class DimensionMismatch(GazeFilterError, ValueError):
    """Matrix operands have incompatible shapes."""


class SingularMatrix(GazeFilterError, ValueError):
    """A matrix could not be inverted."""


class InvalidCapacity(GazeFilterError, ValueError):
    """A data window was given a non-positive capacity."""


class IndexOutOfRange(GazeFilterError, IndexError):
    """A data window read fell outside the retained entries."""


class InvalidMeasurement(GazeFilterError, ValueError):
    """A state or measurement vector holds NaN or infinite entries."""
