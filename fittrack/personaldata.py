"""Personal data of the person whose activity is tracked."""

import sys
from dataclasses import dataclass


@dataclass
class Personal:
    """Name, weight in kilograms and height in metres."""

    name: str = ""
    weight: float = 0.0
    height: float = 0.0

    def print(self) -> None:
        """Write the personal data block to standard output."""
        sys.stdout.write(
            f"Имя: {self.name}\nВес: {self.weight:.2f} кг.\nРост: {self.height:.2f} м.\n\n"
        )