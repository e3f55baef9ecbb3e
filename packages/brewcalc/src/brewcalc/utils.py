"""
General brew calculator utilities.

The float helpers follow IEEE 754 semantics: division by zero and overflow
produce inf/nan instead of raising, so formula edge cases reach the caller
as special values.
"""

import math

from brewcalc.exceptions import ValidationError

DEFAULT_TOLERANCE = 1e-6


def ieee_divide(numerator: float, denominator: float) -> float:
    """Divide without raising ZeroDivisionError."""
    if denominator == 0:
        if numerator == 0 or math.isnan(numerator):
            return math.nan
        sign = math.copysign(1.0, numerator) * math.copysign(1.0, denominator)
        return math.copysign(math.inf, sign)
    return numerator / denominator


def ieee_exp(x: float) -> float:
    """Exponential that overflows to inf."""
    try:
        return math.exp(x)
    except OverflowError:
        return math.inf


def ieee_pow(base: float, exponent: float) -> float:
    """Power for a positive base that overflows to inf."""
    try:
        return math.pow(base, exponent)
    except OverflowError:
        return math.inf


def linear_interpolation(
    x_current: float,
    x_start: float,
    x_end: float,
    y_start: float,
    y_end: float,
) -> float:
    """
    Linear interpolation of a quantity.

    y(x) = y_start + k * x, where k = (y_end - y_start) / (x_end - x_start)

    Args:
        x_current: Position to evaluate, measured from x_start
        x_start: Start of the interval
        x_end: End of the interval
        y_start: Value at x_start
        y_end: Value at x_end

    Returns:
        Interpolated value

    Raises:
        ValidationError: If x_start is not strictly less than x_end
    """
    if not x_start < x_end:
        raise ValidationError(
            f"Expected x_start < x_end, got: {x_start} and {x_end}."
        )
    slope = (y_end - y_start) / (x_end - x_start)
    return y_start + slope * x_current


def almost_equal(a: float, b: float, tolerance: float | None = None) -> bool:
    """Check whether two floats differ by at most tolerance."""
    if tolerance is None:
        tolerance = DEFAULT_TOLERANCE
    return abs(a - b) <= tolerance
