"""Daily step activity."""

from dataclasses import dataclass, field
from datetime import timedelta

from fittrack.durations import parse_duration, parse_steps
from fittrack.personaldata import Personal
from fittrack.spentenergy import distance, walking_spent_calories


def _parse_record(datastring: str, expected: int) -> tuple[int, list[str], timedelta]:
    """Split a record into positive steps, middle fields and positive duration."""
    parts = datastring.split(",")
    if len(parts) != expected:
        raise ValueError(f"invalid format: expected {expected} parts, got {len(parts)}")
    try:
        steps = parse_steps(parts[0])
    except ValueError as err:
        raise ValueError(f"invalid steps format: {err}") from err
    if steps <= 0:
        raise ValueError("steps must be positive")
    try:
        duration = parse_duration(parts[-1])
    except ValueError as err:
        raise ValueError(f"invalid duration format: {err}") from err
    if duration <= timedelta(0):
        raise ValueError("duration must be positive")
    return steps, parts[1:-1], duration


@dataclass
class DaySteps:
    """Steps walked during a day over a duration, for one person."""

    steps: int = 0
    duration: timedelta = timedelta(0)
    personal: Personal = field(default_factory=Personal)

    def print(self) -> None:
        self.personal.print()

    def parse(self, datastring: str) -> None:
        """Read ``"<steps>,<duration>"``; raises ValueError on bad input."""
        self.steps, _, self.duration = _parse_record(datastring, 2)

    def action_info(self) -> str:
        """Return the report of steps, distance and calories burnt."""
        p = self.personal
        try:
            calories = walking_spent_calories(self.steps, p.weight, p.height, self.duration)
        except ValueError as err:
            raise ValueError(f"error calculating calories: {err}") from err
        return (
            f"Количество шагов: {self.steps}.\n"
            f"Дистанция составила {distance(self.steps, p.height):.2f} км.\n"
            f"Вы сожгли {calories:.2f} ккал.\n"
        )