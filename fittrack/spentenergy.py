"""Distance, speed and calorie calculations."""

from datetime import timedelta

M_IN_KM = 1000
MIN_IN_H = 60
STEP_LENGTH_COEFFICIENT = 0.45
WALKING_CALORIES_COEFFICIENT = 0.5

_HOUR = timedelta(hours=1)
_MINUTE = timedelta(minutes=1)


def _validate(steps: int, weight: float, height: float, duration: timedelta) -> None:
    if steps <= 0:
        raise ValueError("steps must be positive")
    if weight <= 0:
        raise ValueError("weight must be positive")
    if height <= 0:
        raise ValueError("height must be positive")
    if duration <= timedelta(0):
        raise ValueError("duration must be positive")


def _base_calories(steps: int, weight: float, height: float, duration: timedelta) -> float:
    speed = mean_speed(steps, height, duration)
    return (weight * speed * (duration / _MINUTE)) / MIN_IN_H


def walking_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Calories burnt walking; raises ValueError on non-positive input."""
    _validate(steps, weight, height, duration)
    return _base_calories(steps, weight, height, duration) * WALKING_CALORIES_COEFFICIENT


def running_spent_calories(
    steps: int, weight: float, height: float, duration: timedelta
) -> float:
    """Calories burnt running; raises ValueError on non-positive input."""
    _validate(steps, weight, height, duration)
    return _base_calories(steps, weight, height, duration)


def mean_speed(steps: int, height: float, duration: timedelta) -> float:
    """Mean speed in km/h, or 0 when the duration is not positive."""
    if duration <= timedelta(0):
        return 0.0
    return distance(steps, height) / (duration / _HOUR)


def distance(steps: int, height: float) -> float:
    """Distance in kilometres covered by the given number of steps."""
    step_length = height * STEP_LENGTH_COEFFICIENT
    return float(steps) * step_length / M_IN_KM