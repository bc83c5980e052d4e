"""Training sessions of a known kind."""

from dataclasses import dataclass, field
from datetime import timedelta

from fittrack.daysteps import _parse_record
from fittrack.personaldata import Personal
from fittrack.spentenergy import (
    distance,
    mean_speed,
    running_spent_calories,
    walking_spent_calories,
)

_CALCULATORS = {
    "Бег": ("running", running_spent_calories),
    "Ходьба": ("walking", walking_spent_calories),
}


@dataclass
class Training:
    """A training session: steps, kind of training and duration."""

    steps: int = 0
    training_type: str = ""
    duration: timedelta = timedelta(0)
    personal: Personal = field(default_factory=Personal)

    def print(self) -> None:
        self.personal.print()

    def parse(self, datastring: str) -> None:
        """Read ``"<steps>,<type>,<duration>"``; raises ValueError on bad input."""
        self.steps, (self.training_type,), self.duration = _parse_record(datastring, 3)

    def action_info(self) -> str:
        """Return the training report; raises ValueError for an unknown type."""
        p = self.personal
        if self.training_type not in _CALCULATORS:
            raise ValueError(f"неизвестный тип тренировки: {self.training_type}")
        kind, calculator = _CALCULATORS[self.training_type]
        try:
            calories = calculator(self.steps, p.weight, p.height, self.duration)
        except ValueError as err:
            raise ValueError(f"error calculating {kind} calories: {err}") from err
        return (
            f"Тип тренировки: {self.training_type}\n"
            f"Длительность: {self.duration / timedelta(hours=1):.2f} ч.\n"
            f"Дистанция: {distance(self.steps, p.height):.2f} км.\n"
            f"Скорость: {mean_speed(self.steps, p.height, self.duration):.2f} км/ч\n"
            f"Сожгли калорий: {calories:.2f}\n"
        )