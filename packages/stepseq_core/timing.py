"""
Timing arithmetic for the step scheduler.

Pure functions only: nothing here touches scheduler state.
"""

from __future__ import annotations

import math
from numbers import Real

from .constants.steps import MS_PER_MINUTE, STEPS_PER_WHOLE_NOTE
from .exceptions import InvalidArgument


def nearest_int_divisor(numerator: int, denominator: int) -> int:
    """
    Find the divisor of ``numerator`` closest to ``denominator``.

    Searches downward from ``denominator`` first, then upward only while the
    candidate is strictly closer than the best one found below. Ties are
    therefore won by the lower divisor.

    Args:
        numerator: Value to divide (e.g. 16 steps per whole note)
        denominator: Desired divisor, at least 1

    Returns:
        Closest value that divides ``numerator`` without remainder

    Raises:
        ValueError: If either argument is smaller than 1
    """
    if numerator < 1 or denominator < 1:
        raise ValueError(
            f"nearest_int_divisor needs positive integers, got {numerator}/{denominator}"
        )

    closest = 1
    for i in range(denominator, 0, -1):
        if numerator % i == 0:
            closest = i
            break

    i = denominator
    while i <= numerator and abs(denominator - i) < abs(denominator - closest):
        if numerator % i == 0:
            closest = i
            break
        i += 1

    return closest


def step_interval_ms(bpm: float, beat_length: int) -> float:
    """
    Calculate the duration of one step (16th note) in milliseconds.

    Args:
        bpm: Beats per minute
        beat_length: Note value of one beat (4 = quarter note, 8 = eighth...)

    Returns:
        Step interval in milliseconds
    """
    return (MS_PER_MINUTE / bpm) / (STEPS_PER_WHOLE_NOTE / beat_length)


def clamp(value: float, minimum: float, maximum: float) -> float:
    """Limit value to [minimum, maximum]"""
    return max(minimum, min(value, maximum))


def round_half_up(value: float) -> int:
    """Round to the nearest integer, .5 going towards positive infinity"""
    return math.floor(value + 0.5)


def validate_number(value: object, name: str, where: str) -> float:
    """
    Ensure value is a real number.

    Booleans and NaN are rejected even though Python treats them as numbers.

    Args:
        value: Value to check
        name: Argument name, used in the error message
        where: Calling operation, used in the error message

    Returns:
        The value, unchanged

    Raises:
        InvalidArgument: If value is not a usable number
    """
    if isinstance(value, bool) or not isinstance(value, Real):
        raise InvalidArgument(
            f"{where}: {name} should be a number, {type(value).__name__} given."
        )
    if isinstance(value, float) and math.isnan(value):
        raise InvalidArgument(f"{where}: {name} should be a number, NaN given.")
    return value
