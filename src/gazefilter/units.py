"""Sample interval parsing and conversion using Pint."""

from __future__ import annotations

import pint

ureg = pint.UnitRegistry()

# Sample counts are their own dimension so "sample" never converts to seconds
ureg.define("sample = [sample_count]")


def parse_interval(value: float | str) -> float:
    """Convert a sample interval to seconds.

    Args:
        value: Seconds as a number, or a duration string such as "33 ms"
            or "0.1 s".

    Returns:
        The interval in seconds.

    Raises:
        ValueError: If the string is not a valid duration or the interval is
            not positive.
    """
    if isinstance(value, str):
        try:
            quantity = ureg.Quantity(value.strip())
        except (pint.errors.PintError, SyntaxError) as e:
            raise ValueError(f"Invalid unit: {value}") from e

        if quantity.dimensionless:
            raise ValueError(f"Interval '{value}' is not a duration")
        try:
            seconds = float(quantity.to(ureg.second).magnitude)
        except pint.DimensionalityError as e:
            raise ValueError(f"Interval '{value}' is not a duration") from e
    else:
        seconds = float(value)

    if not seconds > 0:
        raise ValueError(f"Sample interval must be positive, got {value!r}")
    return seconds
